import os
import time
import logging
import platform
from typing import Dict, List, Optional, Sequence

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import psutil

from strmatch.search.pattern import Pattern
from strmatch.search.registry import REFERENCE_ALGORITHM, available_algorithms
from strmatch.search.session import ScanSession
from strmatch.search.text import TextView

logger = logging.getLogger("StringMatch.benchmark")


class Benchmark:
    """
    Times every algorithm over the same pattern and text and cross-checks them.

    Each algorithm enumerates all occurrences ``runs`` times through a fresh
    ``ScanSession``. The match indices of the first run are compared against the
    reference algorithm; any disagreement is logged and flagged in the results.

    Args:
        output_dir (str): Directory that receives the CSV, plot and text report.
        algorithms (Sequence[str], optional): Algorithm names. Defaults to all.
    """

    def __init__(self, output_dir: str = "benchmark_results",
                 algorithms: Optional[Sequence[str]] = None):
        self.output_dir = output_dir
        self.algorithms = list(algorithms) if algorithms else available_algorithms()
        self.results: List[Dict] = []
        os.makedirs(output_dir, exist_ok=True)

    def _enumerate(self, pattern: Pattern, text: TextView, algorithm: str):
        session = ScanSession(pattern, text, algorithm)
        start_time = time.perf_counter()
        matches = list(session)
        elapsed = time.perf_counter() - start_time
        return matches, elapsed, session.get_stats()

    def run_benchmark(self, pattern: Pattern, text: TextView, runs: int = 1) -> pd.DataFrame:
        """
        Run every configured algorithm and collect one row per algorithm.

        Returns:
            pd.DataFrame: Columns ``algorithm``, ``matches``, ``comparisons``,
            ``avg_time_s``, ``throughput_mb_s`` and ``agrees``.
        """
        self.results.clear()
        reference, _, _ = self._enumerate(pattern, text, REFERENCE_ALGORITHM)
        logger.info("Reference (%s) found %d matches in %d bytes",
                    REFERENCE_ALGORITHM, len(reference), text.length)

        for step, algorithm in enumerate(self.algorithms, start=1):
            logger.info("Running benchmark: %d/%d - Algorithm: %s",
                        step, len(self.algorithms), algorithm)
            total_time = 0.0
            matches: List[int] = []
            stats: Dict = {}
            for run in range(runs):
                found, elapsed, run_stats = self._enumerate(pattern, text, algorithm)
                total_time += elapsed
                if run == 0:
                    matches, stats = found, run_stats

            agrees = matches == reference
            if not agrees:
                logger.error("Algorithm %s disagrees with %s: %d vs %d matches",
                             algorithm, REFERENCE_ALGORITHM, len(matches), len(reference))

            avg_time = total_time / runs
            self.results.append({
                "algorithm": algorithm,
                "matches": len(matches),
                "comparisons": stats.get("comparisons", 0),
                "avg_time_s": avg_time,
                "throughput_mb_s": (text.length / (1024 * 1024)) / avg_time if avg_time > 0 else 0.0,
                "agrees": agrees,
            })

        logger.info("Benchmark completed.")
        return pd.DataFrame(self.results)

    def plot_throughput(self, df: pd.DataFrame, filename: str) -> None:
        plt.figure(figsize=(12, 6))
        plt.bar(df["algorithm"], df["throughput_mb_s"])
        plt.xlabel("Algorithm")
        plt.ylabel("Throughput (MB/s)")
        plt.tight_layout()
        plt.savefig(filename)
        plt.close()

    def host_info(self) -> Dict[str, str]:
        mem = psutil.virtual_memory()
        return {
            "os": f"{platform.system()} {platform.release()}",
            "python": platform.python_version(),
            "cpu": f"{psutil.cpu_count(logical=True)} cores",
            "memory": f"{mem.total // (1024 ** 3)}GB total, {mem.available // (1024 ** 3)}GB available",
        }

    def generate_report(self, pattern: Optional[Pattern] = None, text_length: Optional[int] = None) -> pd.DataFrame:
        """Write ``benchmark_results.csv``, ``throughput.png`` and ``benchmark_report.txt``."""
        df = pd.DataFrame(self.results)
        if df.empty:
            raise ValueError("No benchmark results to report, run the benchmark first")

        df.to_csv(os.path.join(self.output_dir, "benchmark_results.csv"), index=False)
        self.plot_throughput(df, os.path.join(self.output_dir, "throughput.png"))

        with open(os.path.join(self.output_dir, "benchmark_report.txt"), 'w', encoding="utf-8") as f:
            f.write("Benchmark Summary\n")
            f.write("==================\n\n")
            for key, value in self.host_info().items():
                f.write(f"{key:<10}{value}\n")
            if pattern is not None:
                f.write(f"{'pattern':<10}{pattern.data!r} ({pattern.length} bytes)\n")
            if text_length is not None:
                f.write(f"{'text':<10}{text_length} bytes\n")
            f.write("\n")
            f.write(f"{'Algorithm':<12}{'Matches':<10}{'Comparisons':<15}{'Avg Time (s)':<15}{'MB/s':<12}{'Agrees':<8}\n")
            f.write("=" * 72 + "\n")
            for row in df.itertuples(index=False):
                f.write(
                    f"{row.algorithm:<12}{row.matches:<10}{row.comparisons:<15}"
                    f"{row.avg_time_s:<15.6f}{row.throughput_mb_s:<12.2f}{str(row.agrees):<8}\n"
                )
        return df
