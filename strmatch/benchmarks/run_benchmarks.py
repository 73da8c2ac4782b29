import os
import sys
import argparse
from typing import List, Optional

from strmatch.benchmarks.benchmark import Benchmark
from strmatch.benchmarks.inputs import duplicate_content, load_text
from strmatch.config.config import DEFAULT_CONFIG_FILE, Config, ConfigError
from strmatch.search.base import StringMatchError
from strmatch.search.pattern import Pattern
from strmatch.search.registry import available_algorithms
from strmatch.search.text import TextView


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run substring search algorithm benchmarks")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE,
                        help="INI configuration file (default: bundled strmatch.conf)")
    parser.add_argument("--sample", help="Sample file to search (overrides BENCHMARK.SAMPLE_FILE)")
    parser.add_argument("--pattern", help="Pattern to search for (overrides SEARCH.PATTERN)")
    parser.add_argument("--algorithms", nargs="+", choices=available_algorithms(),
                        help="Algorithms to run (overrides SEARCH.ALGORITHMS)")
    parser.add_argument("--repeat", type=int, help="Replicate the sample this many times")
    parser.add_argument("--runs", type=int, help="Timed runs per algorithm")
    parser.add_argument("--output-dir", help="Directory for benchmark results")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logger = config.logger
    sample_file = args.sample or config.sample_file
    pattern_text = args.pattern if args.pattern is not None else config.pattern
    algorithms = args.algorithms or config.algorithms
    repeat = args.repeat if args.repeat is not None else config.repeat
    runs = args.runs if args.runs is not None else config.runs
    output_dir = args.output_dir or config.output_dir

    try:
        pattern = Pattern(pattern_text, encoding=config.encoding)
        sample = load_text(sample_file)
        text = TextView(duplicate_content(sample, repeat)) if repeat != 1 else sample
        if runs < 1:
            raise ValueError(f"Runs must be at least 1, got: {runs}")
    except (StringMatchError, FileNotFoundError, RuntimeError, ValueError) as e:
        logger.error("Cannot prepare benchmark: %s", e)
        return 1

    logger.info("Sample file size: %d", sample.length)
    logger.info("Sample test size: %d", text.length)
    logger.info("Algorithms: %s", ", ".join(algorithms))

    benchmark = Benchmark(output_dir, algorithms)
    try:
        df = benchmark.run_benchmark(pattern, text, runs=runs)
    except StringMatchError as e:
        logger.error("Benchmark aborted: %s", e)
        return 1
    benchmark.generate_report(pattern, text.length)

    for row in df.itertuples(index=False):
        logger.info("%-10s matches=%d time=%.6fs throughput=%.2fMB/s",
                    row.algorithm, row.matches, row.avg_time_s, row.throughput_mb_s)
    logger.info("Benchmark results saved to %s", os.path.abspath(output_dir))

    return 0 if bool(df["agrees"].all()) else 3


if __name__ == "__main__":
    sys.exit(main())
