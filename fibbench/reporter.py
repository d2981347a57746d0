"""Output formatting for benchmark results."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from typing import TextIO

from fibbench.types import frozen_slots

logger = logging.getLogger(__name__)

# Pair whose crossover point the human report calls out.
_CROSSOVER_PAIR = ("iterative", "matrix-log")


@frozen_slots
class Timing:
    """Per-call cost of one variant at one input size, in seconds."""

    variant: str
    n: int
    result: int
    best: float
    mean: float
    stdev: float
    number: int
    repeat: int


def _group_by_variant(timings: list[Timing]) -> dict[str, list[Timing]]:
    """Bucket timings by variant, preserving first-seen variant order."""
    by_variant: dict[str, list[Timing]] = defaultdict(list)
    for t in timings:
        by_variant[t.variant].append(t)
    return by_variant


def crossover(timings: list[Timing], slower: str, faster: str) -> int | None:
    """Return the smallest size at which *faster* beats *slower* on best time.

    Only sizes measured for both variants are compared.  Returns None if
    *faster* never wins.
    """
    by_variant = _group_by_variant(timings)
    a = {t.n: t.best for t in by_variant.get(slower, [])}
    b = {t.n: t.best for t in by_variant.get(faster, [])}
    for n in sorted(a.keys() & b.keys()):
        if b[n] < a[n]:
            return n
    return None


def _ns(seconds: float) -> str:
    return f"{seconds * 1e9:,.1f}"


def format_human(timings: list[Timing], out: TextIO) -> None:
    """Write a human-readable table per variant."""
    if not timings:
        out.write("No benchmarks run.\n")
        return

    by_variant = _group_by_variant(timings)
    out.write(f"Benchmarked {len(by_variant)} variant(s):\n\n")
    for name, rows in by_variant.items():
        out.write(f"  {name}\n")
        out.write(f"    {'n':>6}  {'best ns/op':>14}  {'mean ns/op':>14}  {'stdev':>12}\n")
        for t in rows:
            out.write(
                f"    {t.n:>6}  {_ns(t.best):>14}  {_ns(t.mean):>14}  {_ns(t.stdev):>12}\n"
            )
        out.write("\n")

    slower, faster = _CROSSOVER_PAIR
    if slower in by_variant and faster in by_variant:
        point = crossover(timings, slower, faster)
        if point is None:
            out.write(f"  {faster} never beat {slower} in this run.\n")
        else:
            logger.info("%s overtakes %s at n=%d", faster, slower, point)
            out.write(f"  {faster} overtakes {slower} at n={point}.\n")


def format_json(timings: list[Timing], out: TextIO) -> None:
    """Write JSON-formatted benchmark results."""
    data = {
        "timings": [
            {
                "variant": t.variant,
                "n": t.n,
                "result": t.result,
                "best": t.best,
                "mean": t.mean,
                "stdev": t.stdev,
                "number": t.number,
                "repeat": t.repeat,
            }
            for t in timings
        ],
        "total": len(timings),
    }
    json.dump(data, out, indent=2)
    out.write("\n")
