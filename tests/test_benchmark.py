"""Integration tests for the benchmark harness."""

import io
import json

import pytest

from fibbench.benchmark import benchmark_and_report, run_benchmarks, time_call
from fibbench.config import Config
from fibbench.fibonacci import fib_iterative
from fibbench.variants import NAIVE_MAX_SIZE, UnknownVariantError


def _quick(**kwargs) -> Config:
    """A config cheap enough to run in tests."""
    kwargs.setdefault("repeat", 2)
    kwargs.setdefault("number", 3)
    return Config(**kwargs)


class TestTimeCall:
    """Tests for timing a single variant at one size."""

    def test_returns_result_and_stats(self) -> None:
        result, best, mean, stdev = time_call(fib_iterative, 20, number=5, repeat=3)
        assert result == 6765
        assert 0 < best <= mean
        assert stdev >= 0

    def test_single_repeat_has_zero_stdev(self) -> None:
        _, _, _, stdev = time_call(fib_iterative, 5, number=2, repeat=1)
        assert stdev == 0.0


class TestRunBenchmarks:
    """Tests for timing variants across sizes."""

    def test_every_variant_and_size(self) -> None:
        config = _quick(sizes=(1, 10), variants=("iterative", "matrix-log"))
        timings = run_benchmarks(config)
        assert [(t.variant, t.n) for t in timings] == [
            ("iterative", 1),
            ("iterative", 10),
            ("matrix-log", 1),
            ("matrix-log", 10),
        ]
        assert all(t.result == fib_iterative(t.n) for t in timings)
        assert all(t.number == 3 and t.repeat == 2 for t in timings)

    def test_naive_capped(self) -> None:
        config = _quick(sizes=(5, NAIVE_MAX_SIZE + 1), variants=("recursive",))
        timings = run_benchmarks(config)
        assert [t.n for t in timings] == [5]

    def test_sizes_sorted_and_deduplicated(self) -> None:
        config = _quick(sizes=(30, 3, 30), variants=("tail-recursive",))
        assert [t.n for t in run_benchmarks(config)] == [3, 30]

    def test_all_variants_by_default(self) -> None:
        timings = run_benchmarks(_quick(sizes=(12,)))
        assert {t.variant for t in timings} == {
            "recursive",
            "recursive-cache",
            "tail-recursive",
            "iterative",
            "matrix",
            "matrix-log",
        }
        assert {t.result for t in timings} == {144}

    def test_unknown_variant(self) -> None:
        with pytest.raises(UnknownVariantError):
            run_benchmarks(_quick(sizes=(1,), variants=("nope",)))

    def test_no_sizes(self) -> None:
        assert run_benchmarks(_quick(sizes=())) == []


class TestBenchmarkAndReport:
    """Tests for running benchmarks and writing the report."""

    def test_human_output(self) -> None:
        out = io.StringIO()
        timings = benchmark_and_report(
            _quick(sizes=(4, 8), variants=("iterative", "matrix-log")), out=out
        )
        output = out.getvalue()
        assert len(timings) == 4
        assert "Benchmarked 2 variant(s)" in output
        assert "matrix-log" in output

    def test_json_output(self) -> None:
        out = io.StringIO()
        benchmark_and_report(
            _quick(sizes=(100,), variants=("matrix",), output_format="json"), out=out
        )
        data = json.loads(out.getvalue())
        assert data["total"] == 1
        assert data["timings"][0]["variant"] == "matrix"
        assert data["timings"][0]["result"] == fib_iterative(100)

    def test_empty_run(self) -> None:
        out = io.StringIO()
        assert benchmark_and_report(_quick(sizes=()), out=out) == []
        assert "No benchmarks run" in out.getvalue()
