"""Tests for the variant registry."""

import pytest

from fibbench.fibonacci import fib_iterative, fib_recursive
from fibbench.variants import (
    NAIVE_MAX_SIZE,
    VARIANTS,
    UnknownVariantError,
    Variant,
    get_variant,
    select_variants,
    verify_variants,
)


class TestRegistry:
    """Tests for the name to variant mapping."""

    def test_six_variants_in_order(self) -> None:
        assert list(VARIANTS) == [
            "recursive",
            "recursive-cache",
            "tail-recursive",
            "iterative",
            "matrix",
            "matrix-log",
        ]

    def test_only_naive_is_capped(self) -> None:
        capped = {v.name: v.max_size for v in VARIANTS.values() if v.max_size is not None}
        assert capped == {"recursive": NAIVE_MAX_SIZE}

    def test_accepts(self) -> None:
        naive = get_variant("recursive")
        assert naive.accepts(NAIVE_MAX_SIZE)
        assert not naive.accepts(NAIVE_MAX_SIZE + 1)
        assert get_variant("matrix-log").accepts(10**6)

    def test_get_variant(self) -> None:
        assert get_variant("recursive").func is fib_recursive

    def test_unknown_variant(self) -> None:
        with pytest.raises(UnknownVariantError, match="unknown variant 'bogus'"):
            get_variant("bogus")


class TestSelectVariants:
    """Tests for choosing variants by name."""

    def test_empty_selects_all(self) -> None:
        assert select_variants() == list(VARIANTS.values())

    def test_registry_order_kept(self) -> None:
        names = [v.name for v in select_variants(["matrix-log", "iterative"])]
        assert names == ["iterative", "matrix-log"]

    def test_duplicates_collapse(self) -> None:
        assert len(select_variants(["matrix", "matrix"])) == 1

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownVariantError):
            select_variants(["iterative", "nope"])


class TestVerifyVariants:
    """Tests for cross-checking variants against the reference."""

    def test_all_agree(self) -> None:
        assert verify_variants(24) == {}

    def test_zero_limit(self) -> None:
        assert verify_variants(0) == {}

    def test_reports_mismatches(self) -> None:
        def off_by_one(n: int) -> int:
            return fib_iterative(n) + (1 if n == 7 else 0)

        broken = Variant("broken", off_by_one, "O(n)")
        assert verify_variants(10, [broken]) == {"broken": [7]}

    def test_respects_cap(self) -> None:
        calls: list[int] = []

        def spy(n: int) -> int:
            calls.append(n)
            return fib_iterative(n)

        capped = Variant("capped", spy, "O(n)", max_size=5)
        assert verify_variants(50, [capped]) == {}
        assert max(calls) == 5
