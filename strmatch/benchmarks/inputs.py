"""Benchmark inputs: load a sample file and replicate it into a larger text."""

from strmatch.search.text import BytesLike, TextView

READ_BUFFER_SIZE = 8 * 1024 * 1024  # 8MB buffer


def load_text(file_path: str) -> TextView:
    """
    Read a whole file into memory and wrap it in a TextView.

    Args:
        file_path (str): Path of the sample file.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read.
    """
    try:
        with open(file_path, 'rb', buffering=READ_BUFFER_SIZE) as file:
            data = file.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {file_path}")
    except OSError as e:
        raise RuntimeError(f"Error reading file: {e}") from e
    return TextView(data)


def duplicate_content(data: BytesLike, times: int) -> bytes:
    """Return ``data`` repeated ``times`` times back to back."""
    if times < 1:
        raise ValueError(f"times must be at least 1, got: {times}")
    if isinstance(data, TextView):
        data = data.data
    return bytes(data) * times
