"""Registry of Fibonacci variants available to the harness and the CLI."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fibbench.fibonacci import (
    fib_iterative,
    fib_power_matrix,
    fib_power_matrix_log,
    fib_recursive,
    fib_recursive_cache,
    fib_tail_recursive,
)
from fibbench.types import FibFunc, frozen_slots

logger = logging.getLogger(__name__)

# Past this size the exponential variant takes seconds per call.
NAIVE_MAX_SIZE = 32


@frozen_slots
class Variant:
    """A named Fibonacci implementation plus its benchmark limits."""

    name: str
    func: FibFunc
    complexity: str
    max_size: int | None = None  # None means no cap

    def accepts(self, n: int) -> bool:
        """Return True if the harness should run this variant at size *n*."""
        return self.max_size is None or n <= self.max_size


class UnknownVariantError(LookupError):
    """Raised when a variant name is not in the registry."""


VARIANTS: dict[str, Variant] = {
    v.name: v
    for v in (
        Variant("recursive", fib_recursive, "O(2^n)", max_size=NAIVE_MAX_SIZE),
        Variant("recursive-cache", fib_recursive_cache, "O(n)"),
        Variant("tail-recursive", fib_tail_recursive, "O(n)"),
        Variant("iterative", fib_iterative, "O(n)"),
        Variant("matrix", fib_power_matrix, "O(n)"),
        Variant("matrix-log", fib_power_matrix_log, "O(log n)"),
    )
}

REFERENCE_VARIANT = "iterative"


def get_variant(name: str) -> Variant:
    """Look up a variant by name."""
    try:
        return VARIANTS[name]
    except KeyError:
        known = ", ".join(VARIANTS)
        raise UnknownVariantError(
            f"unknown variant '{name}' (expected one of: {known})"
        ) from None


def select_variants(names: Iterable[str] = ()) -> list[Variant]:
    """Return the named variants in registry order, or all of them if none given."""
    wanted = set(names)
    if not wanted:
        return list(VARIANTS.values())
    for name in wanted:
        get_variant(name)
    return [v for v in VARIANTS.values() if v.name in wanted]


def verify_variants(
    limit: int,
    variants: Iterable[Variant] | None = None,
) -> dict[str, list[int]]:
    """Cross-check variants against the iterative reference for ``0..limit``.

    Each variant is only checked up to its own ``max_size``.

    Returns:
        Mapping of variant name to the indices where it disagreed.  Empty
        when every variant agrees.
    """
    reference = get_variant(REFERENCE_VARIANT).func
    expected = [reference(n) for n in range(limit + 1)]
    if variants is None:
        variants = VARIANTS.values()

    mismatches: dict[str, list[int]] = {}
    for variant in variants:
        upper = limit if variant.max_size is None else min(limit, variant.max_size)
        logger.debug("verifying %s for 0..%d", variant.name, upper)
        bad = [n for n in range(upper + 1) if variant.func(n) != expected[n]]
        if bad:
            logger.warning("%s disagrees at %d index(es)", variant.name, len(bad))
            mismatches[variant.name] = bad
    return mismatches
