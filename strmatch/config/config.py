import os
import sys
import configparser
from typing import Any, List, Optional
import logging
from logging.handlers import RotatingFileHandler

from strmatch.search.registry import available_algorithms

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "strmatch.conf")


class ConfigError(Exception):
    """Base exception for configuration-related errors."""
    pass


class ConfigValidationError(ConfigError):
    """Raised when configuration validation fails."""
    pass


class ConfigFileError(ConfigError):
    """Raised when there are issues with the configuration file."""
    pass


class Config:
    """Manages benchmark configuration and logging setup.

    Reads settings from an INI file, validates them, and initializes a logger
    with both console and file handlers (if specified).

    Attributes:
        algorithms (List[str]): Algorithms to run, in registry order.
        pattern (str): Pattern text to search for.
        encoding (str): Encoding used to turn ``pattern`` into bytes.
        sample_file (str): File whose bytes form the search text.
        repeat (int): How many times the sample is replicated into the text.
        runs (int): Timed runs per algorithm.
        output_dir (str): Directory for benchmark results.
        log_level (str): Logging level (e.g., "INFO", "DEBUG").
        log_file (Optional[str]): Path to log file (if specified).
        logger (Optional[logging.Logger]): Configured logger instance.
    """

    VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
    LOGGER_NAME = "StringMatch"

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE) -> None:
        """Initializes the configuration from a file.

        Args:
            config_file: Path to the configuration INI file.

        Raises:
            ConfigFileError: If the config file does not exist or cannot be read.
            ConfigValidationError: If required settings are missing or invalid.
        """
        self.config_file = config_file
        self.config = configparser.ConfigParser()
        self.logger: Optional[logging.Logger] = None

        try:
            self._load_config_file()
            self._parse_configuration()
            self._validate_config()
            self._initiate_logger()
        except ConfigError:
            raise
        except Exception as e:
            raise ConfigError(f"Unexpected error during configuration initialization: {e}") from e

    def _load_config_file(self) -> None:
        """Loads and parses the configuration file.

        Raises:
            ConfigFileError: If file doesn't exist, can't be read, or has parsing errors.
        """
        if not os.path.exists(self.config_file):
            raise ConfigFileError(f"Configuration file '{self.config_file}' not found")

        if not os.access(self.config_file, os.R_OK):
            raise ConfigFileError(f"Configuration file '{self.config_file}' is not readable")

        try:
            self.config.read(self.config_file, encoding="utf-8")
        except configparser.Error as e:
            raise ConfigFileError(f"Failed to parse configuration file '{self.config_file}': {e}") from e

        required_sections = ['SEARCH', 'BENCHMARK', 'LOGGING']
        missing_sections = [section for section in required_sections if section not in self.config]
        if missing_sections:
            raise ConfigFileError(f"Missing required sections in config file: {missing_sections}")

    def _get_raw(self, section: str, key: str) -> str:
        if section not in self.config or key not in self.config[section]:
            raise ConfigValidationError(f"Required configuration '{section}.{key}' not found")

        value = self.config[section].get(key)
        if not value or not value.strip():
            raise ConfigValidationError(f"Required configuration '{section}.{key}' is empty")
        return value

    def _get_required_int(self, section: str, key: str) -> int:
        """Retrieves a required integer value from config.

        Raises:
            ConfigValidationError: If value is missing or cannot be converted to int.
        """
        value = self._get_raw(section, key)
        try:
            return self.config[section].getint(key)
        except ValueError as e:
            raise ConfigValidationError(f"Invalid integer value for '{section}.{key}': '{value}'") from e

    def _get_required_str(self, section: str, key: str) -> str:
        """Retrieves a required string value from config.

        Raises:
            ConfigValidationError: If value is missing or empty.
        """
        return self._get_raw(section, key).strip()

    def _get_optional_str(self, section: str, key: str) -> Optional[str]:
        """Retrieves an optional string value from config, None if absent or empty."""
        if section not in self.config or key not in self.config[section]:
            return None

        value = self.config[section].get(key)
        if not value or not value.strip():
            return None

        return value.strip()

    def _parse_algorithms(self, value: str) -> List[str]:
        names = [name.strip().lower() for name in value.split(",") if name.strip()]
        if names == ["all"]:
            return available_algorithms()
        return names

    def _parse_configuration(self) -> None:
        """Parses all configuration values with strict validation."""
        # Search configuration
        self.algorithms = self._parse_algorithms(self._get_required_str("SEARCH", "ALGORITHMS"))
        self.pattern = self._get_required_str("SEARCH", "PATTERN")
        self.encoding = self._get_optional_str("SEARCH", "ENCODING") or "utf-8"

        # Benchmark configuration
        self.sample_file = self._get_required_str("BENCHMARK", "SAMPLE_FILE")
        if not os.path.isabs(self.sample_file):
            # relative sample paths are resolved against the config file location
            self.sample_file = os.path.join(os.path.dirname(os.path.abspath(self.config_file)), self.sample_file)
        self.repeat = self._get_required_int("BENCHMARK", "REPEAT")
        self.runs = self._get_required_int("BENCHMARK", "RUNS")
        self.output_dir = self._get_optional_str("BENCHMARK", "OUTPUT_DIR") or "benchmark_results"

        # Logging configuration
        self.log_level = self._get_required_str("LOGGING", "LEVEL")
        self.log_file = self._get_optional_str("LOGGING", "FILE")

    def _create_log_file(self, log_path: str) -> None:
        """Creates a log file and its directory structure if needed.

        Raises:
            ConfigError: If log file or directory cannot be created.
        """
        try:
            directory = os.path.dirname(log_path)
            if directory:
                if not os.path.exists(directory):
                    os.makedirs(directory, mode=0o755)
                elif not os.access(directory, os.W_OK):
                    raise ConfigError(f"Log directory '{directory}' is not writable")

            if os.path.exists(log_path) and not os.access(log_path, os.W_OK):
                raise ConfigError(f"Log file '{log_path}' is not writable")
        except OSError as e:
            raise ConfigError(f"Failed to create log file or directory for '{log_path}': {e}") from e

    def _validate_config(self) -> None:
        """Validates all configuration settings strictly.

        Raises:
            ConfigValidationError: If any settings are invalid.
        """
        if not self.algorithms:
            raise ConfigValidationError("At least one search algorithm must be configured")
        valid_algorithms = set(available_algorithms())
        unknown = [name for name in self.algorithms if name not in valid_algorithms]
        if unknown:
            raise ConfigValidationError(
                f"Invalid search algorithm(s) {unknown}. "
                f"Valid options: {', '.join(sorted(valid_algorithms))}, or 'all'"
            )

        try:
            self.pattern_bytes = self.pattern.encode(self.encoding)
        except LookupError as e:
            raise ConfigValidationError(f"Unknown pattern encoding '{self.encoding}'") from e
        except UnicodeEncodeError as e:
            raise ConfigValidationError(
                f"Pattern cannot be encoded with '{self.encoding}': {e}"
            ) from e

        if not os.path.exists(self.sample_file):
            raise ConfigValidationError(f"Sample file does not exist: '{self.sample_file}'")
        if not os.path.isfile(self.sample_file):
            raise ConfigValidationError(f"Sample path is not a file: '{self.sample_file}'")
        if not os.access(self.sample_file, os.R_OK):
            raise ConfigValidationError(f"Sample file is not readable: '{self.sample_file}'")

        if self.repeat < 1:
            raise ConfigValidationError(f"Repeat must be at least 1, got: {self.repeat}")
        if self.runs < 1:
            raise ConfigValidationError(f"Runs must be at least 1, got: {self.runs}")

        if self.log_level.upper() not in self.VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level '{self.log_level}'. "
                f"Valid options: {', '.join(sorted(self.VALID_LOG_LEVELS))}"
            )

        if self.log_file:
            log_dir = os.path.dirname(self.log_file)
            if log_dir and not os.path.exists(log_dir):
                parent_dir = os.path.dirname(log_dir)
                if parent_dir and not os.path.exists(parent_dir):
                    raise ConfigValidationError(f"Log file parent directory does not exist: '{parent_dir}'")

    def _initiate_logger(self) -> None:
        """Initializes the logger with console and file handlers.

        Sets up:
            - Logging format.
            - Console handler (stderr).
            - File handler (if `log_file` is specified).
            - Log rotation (10MB per file, max 3 backups).

        Raises:
            ConfigError: If logger setup fails.
        """
        self.logger = setup_logger(self.log_level, self.log_file, self._create_log_file)

    def get(self, section: str, key: str) -> Any:
        """Retrieves a raw value from the configuration.

        Raises:
            ConfigError: If section doesn't exist.
        """
        if section not in self.config:
            raise ConfigError(f"Configuration section '{section}' not found")
        return self.config[section].get(key)

    def __str__(self) -> str:
        """Returns a string representation of key settings."""
        return (
            f"Config(algorithms={self.algorithms}, pattern={self.pattern!r}, "
            f"sample_file='{self.sample_file}', repeat={self.repeat}, "
            f"runs={self.runs}, output_dir='{self.output_dir}')"
        )


def setup_logger(level: str = "INFO", log_file: Optional[str] = None,
                 prepare_file=None) -> logging.Logger:
    """Configures the ``StringMatch`` logger hierarchy.

    Args:
        level: Logging level name.
        log_file: Optional path of a rotating log file.
        prepare_file: Optional callable run on ``log_file`` before it is opened.

    Raises:
        ConfigError: If the level is unknown or a handler cannot be created.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    formatter = logging.Formatter(log_format)

    try:
        log_level = getattr(logging, level.upper())
    except AttributeError:
        raise ConfigError(f"Invalid log level: {level}")

    logger = logging.getLogger(Config.LOGGER_NAME)
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplicates
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    try:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        logger.addHandler(console_handler)
    except Exception as e:
        raise ConfigError(f"Failed to initialize console logging: {e}") from e

    if log_file:
        try:
            if prepare_file is not None:
                prepare_file(log_file)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(log_level)
            logger.addHandler(file_handler)
        except Exception as e:
            raise ConfigError(f"Failed to initialize file logging for '{log_file}': {e}") from e

    return logger
