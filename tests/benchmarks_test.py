import os

import pandas as pd
import pytest

from strmatch.benchmarks.benchmark import Benchmark
from strmatch.benchmarks.inputs import duplicate_content, load_text
from strmatch.benchmarks.run_benchmarks import main
from strmatch.search.pattern import Pattern
from strmatch.search.registry import available_algorithms
from strmatch.search.text import TextView


def test_load_text(sample_file, sample_text):
    text = load_text(sample_file)
    assert isinstance(text, TextView)
    assert text.length == len(sample_text)
    assert text.tobytes() == sample_text


def test_load_text_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="File not found"):
        load_text(str(tmp_path / "missing.bin"))


def test_load_text_directory(tmp_path):
    with pytest.raises((RuntimeError, FileNotFoundError)):
        load_text(str(tmp_path))


def test_duplicate_content():
    assert duplicate_content(b"ab", 3) == b"ababab"
    assert duplicate_content(TextView(b"xy"), 2) == b"xyxy"
    with pytest.raises(ValueError):
        duplicate_content(b"ab", 0)


def test_run_benchmark_cross_validates(tmp_path, sample_text):
    benchmark = Benchmark(str(tmp_path / "results"))
    text = TextView(duplicate_content(sample_text, 5))
    df = benchmark.run_benchmark(Pattern(b"he was a good man"), text, runs=2)

    assert isinstance(df, pd.DataFrame)
    assert list(df["algorithm"]) == available_algorithms()
    assert (df["matches"] == 10).all()
    assert df["agrees"].all()
    assert (df["avg_time_s"] >= 0).all()


def test_benchmark_flags_disagreement(tmp_path, monkeypatch):
    benchmark = Benchmark(str(tmp_path), ["naive", "kmp"])
    real_enumerate = benchmark._enumerate

    def broken_enumerate(pattern, text, algorithm):
        matches, elapsed, stats = real_enumerate(pattern, text, algorithm)
        if algorithm == "kmp":
            matches = matches[:-1]
        return matches, elapsed, stats

    monkeypatch.setattr(benchmark, "_enumerate", broken_enumerate)
    df = benchmark.run_benchmark(Pattern(b"aa"), TextView(b"aaaa"))
    assert df.set_index("algorithm")["agrees"].to_dict() == {"naive": True, "kmp": False}


def test_generate_report(tmp_path, sample_text):
    output_dir = str(tmp_path / "results")
    benchmark = Benchmark(output_dir, ["naive", "bmh"])
    pattern = Pattern(b"abra")
    benchmark.run_benchmark(pattern, TextView(sample_text))
    benchmark.generate_report(pattern, len(sample_text))

    for name in ("benchmark_results.csv", "throughput.png", "benchmark_report.txt"):
        assert os.path.exists(os.path.join(output_dir, name))

    df = pd.read_csv(os.path.join(output_dir, "benchmark_results.csv"))
    assert list(df["algorithm"]) == ["naive", "bmh"]
    with open(os.path.join(output_dir, "benchmark_report.txt"), encoding="utf-8") as f:
        report = f.read()
    assert "Benchmark Summary" in report
    assert "b'abra'" in report


def test_generate_report_without_results(tmp_path):
    with pytest.raises(ValueError):
        Benchmark(str(tmp_path)).generate_report()


def test_cli_main(tmp_path, sample_file):
    output_dir = tmp_path / "out"
    code = main([
        "--sample", sample_file,
        "--pattern", "abra",
        "--algorithms", "naive", "kmp", "raita",
        "--repeat", "3",
        "--runs", "1",
        "--output-dir", str(output_dir),
    ])
    assert code == 0
    df = pd.read_csv(output_dir / "benchmark_results.csv")
    assert list(df["algorithm"]) == ["naive", "kmp", "raita"]
    assert (df["matches"] == 12).all()


def test_cli_missing_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.conf")]) == 2


def test_cli_pattern_longer_than_text(tmp_path):
    sample = tmp_path / "tiny.txt"
    sample.write_bytes(b"ab")
    code = main([
        "--sample", str(sample),
        "--pattern", "abc",
        "--repeat", "1",
        "--output-dir", str(tmp_path / "out"),
    ])
    assert code == 1


def test_cli_bad_sample(tmp_path):
    code = main(["--sample", str(tmp_path / "missing.txt"), "--output-dir", str(tmp_path / "out")])
    assert code == 1
