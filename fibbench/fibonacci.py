"""Six interchangeable ways to compute the nth Fibonacci number.

Every function maps ``n >= 0`` to F(n) with F(0) = 0 and F(1) = 1.  They
differ only in running time and memory use:

========================  ============  ===========
function                  time          extra space
========================  ============  ===========
``fib_recursive``         O(2^n)        O(n) stack
``fib_recursive_cache``   O(n)          O(n)
``fib_tail_recursive``    O(n)          O(1)
``fib_iterative``         O(n)          O(1)
``fib_power_matrix``      O(n)          O(1)
``fib_power_matrix_log``  O(log n)      O(log n) stack
========================  ============  ===========

All of them reject negative or non-integer input with
:class:`InvalidIndexError`.
"""

from __future__ import annotations

from fibbench import matrix

# Largest index whose value fits a signed 64-bit integer.
MAX_INT64_INDEX = 92


class InvalidIndexError(ValueError):
    """Raised when a Fibonacci index is negative or not an integer."""


def check_index(n: object) -> int:
    """Return *n* unchanged if it is a valid Fibonacci index."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidIndexError(
            f"Fibonacci index must be an integer, got {type(n).__name__}"
        )
    if n < 0:
        raise InvalidIndexError(f"Fibonacci index must be non-negative, got {n}")
    return n


def fib_recursive(n: int) -> int:
    """Plain two-branch recursion with no caching.

    Exponential in *n*; impractical much past n = 35.
    """
    check_index(n)
    return _fib_recursive(n)


def _fib_recursive(n: int) -> int:
    if n < 2:
        return n
    return _fib_recursive(n - 1) + _fib_recursive(n - 2)


def fib_recursive_cache(n: int) -> int:
    """Fill a per-call cache from the base cases up, then read slot *n*."""
    check_index(n)
    cache = [0] * max(n + 1, 2)
    _fill_cache(n, cache)
    return cache[n]


def _fill_cache(n: int, cache: list[int]) -> None:
    """Write cache[0..n] in the order the unwinding recursion would."""
    cache[0] = 0
    cache[1] = 1
    for k in range(2, n + 1):
        cache[k] = cache[k - 1] + cache[k - 2]


def fib_tail_recursive(n: int) -> int:
    """Carry the pair (F(i), F(i+1)) forward *n* times."""
    check_index(n)
    return _fib_tail(n, 0, 1)


def _fib_tail(n: int, first: int, second: int) -> int:
    # No tail-call elimination in CPython; each tail call becomes one pass.
    while n != 0:
        n, first, second = n - 1, second, first + second
    return first


def fib_iterative(n: int) -> int:
    """Two-variable update loop; the fastest variant for small *n*."""
    check_index(n)
    if n == 0:
        return 0
    first = 0
    second = 1
    for _ in range(n - 1):
        temp = second
        second = first + second
        first = temp
    return second


def fib_power_matrix(n: int) -> int:
    """Top-left cell of ``[[1, 1], [1, 0]] ** (n - 1)``, multiplied out linearly."""
    check_index(n)
    if n == 0:
        return 0
    f = matrix.Matrix2.fibonacci_base()
    matrix.power_linear(f, n - 1)
    return f.a


def fib_power_matrix_log(n: int) -> int:
    """Top-left cell of ``[[1, 1], [1, 0]] ** (n - 1)`` by repeated squaring."""
    check_index(n)
    if n == 0:
        return 0
    f = matrix.Matrix2.fibonacci_base()
    matrix.power_log(f, n - 1)
    return f.a
