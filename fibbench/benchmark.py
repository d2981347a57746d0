"""Benchmark harness: times each selected variant across the configured sizes."""

from __future__ import annotations

import logging
import statistics
import sys
import time
import timeit
from typing import TextIO

from fibbench.config import Config
from fibbench.fibonacci import MAX_INT64_INDEX
from fibbench.reporter import Timing, format_human, format_json
from fibbench.types import FibFunc
from fibbench.variants import select_variants

logger = logging.getLogger(__name__)


def time_call(
    func: FibFunc,
    n: int,
    *,
    number: int,
    repeat: int,
) -> tuple[int, float, float, float]:
    """Time ``func(n)`` and return (result, best, mean, stdev) per call.

    Args:
        func: The variant to time.
        n: Input size.
        number: Calls per timing sample.
        repeat: Number of samples.
    """
    result = func(n)
    timer = timeit.Timer(lambda: func(n), timer=time.perf_counter)
    per_call = [total / number for total in timer.repeat(repeat=repeat, number=number)]
    spread = statistics.stdev(per_call) if len(per_call) > 1 else 0.0
    return result, min(per_call), statistics.mean(per_call), spread


def run_benchmarks(config: Config) -> list[Timing]:
    """Time every selected variant at every configured size.

    Sizes beyond a variant's ``max_size`` are skipped for that variant.

    Returns:
        Timings ordered by variant (registry order) then size.
    """
    variants = select_variants(config.variants)
    sizes = sorted(set(config.sizes))
    logger.info(
        "benchmarking %s at sizes %s",
        ", ".join(v.name for v in variants),
        sizes,
    )
    if sizes and sizes[-1] > MAX_INT64_INDEX:
        logger.debug(
            "sizes above %d exceed the 64-bit range; timings include big-int arithmetic",
            MAX_INT64_INDEX,
        )

    timings: list[Timing] = []
    for variant in variants:
        for n in sizes:
            if not variant.accepts(n):
                logger.debug("skipping %s at n=%d (cap %s)", variant.name, n, variant.max_size)
                continue
            result, best, mean, stdev = time_call(
                variant.func, n, number=config.number, repeat=config.repeat
            )
            logger.debug("%s n=%d best=%.3es", variant.name, n, best)
            timings.append(
                Timing(
                    variant=variant.name,
                    n=n,
                    result=result,
                    best=best,
                    mean=mean,
                    stdev=stdev,
                    number=config.number,
                    repeat=config.repeat,
                )
            )
    return timings


def benchmark_and_report(
    config: Config,
    out: TextIO = sys.stdout,
) -> list[Timing]:
    """Run the benchmarks and write formatted output.

    Args:
        config: Runtime configuration.
        out: Output stream for the report.

    Returns:
        The timings (also written to out).
    """
    timings = run_benchmarks(config)

    if config.output_format == "json":
        format_json(timings, out)
    else:
        format_human(timings, out)

    return timings
