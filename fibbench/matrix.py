"""2x2 integer matrix helpers for the matrix-power Fibonacci variants.

Raising ``[[1, 1], [1, 0]]`` to the kth power gives ``[[F(k+1), F(k)],
[F(k), F(k-1)]]``.  Both power routines work in place on a caller-owned
matrix, multiplying by a fresh base matrix where needed.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Matrix2:
    """A mutable 2x2 integer matrix ``[[a, b], [c, d]]``."""

    a: int
    b: int
    c: int
    d: int

    @classmethod
    def fibonacci_base(cls) -> Matrix2:
        """Return a new ``[[1, 1], [1, 0]]`` matrix."""
        return cls(1, 1, 1, 0)


def multiply(f: Matrix2, m: Matrix2) -> None:
    """Overwrite *f* with the product ``f @ m``.

    All four cells are computed before any write, so ``multiply(f, f)``
    squares *f* correctly.
    """
    a = f.a * m.a + f.b * m.c
    b = f.a * m.b + f.b * m.d
    c = f.c * m.a + f.d * m.c
    d = f.c * m.b + f.d * m.d
    f.a, f.b, f.c, f.d = a, b, c, d


def power_linear(f: Matrix2, exponent: int) -> None:
    """Raise a base matrix *f* to *exponent* by repeated multiplication.

    *f* must hold the Fibonacci base matrix on entry.  Exponents 0 and 1
    leave it unchanged.
    """
    m = Matrix2.fibonacci_base()
    for _ in range(2, exponent + 1):
        multiply(f, m)


def power_log(f: Matrix2, exponent: int) -> None:
    """Raise a base matrix *f* to *exponent* by recursive halving.

    Performs one squaring per halving step plus one extra multiplication
    for each odd exponent met on the way down, so an exponent of ``2**k``
    costs exactly ``k`` multiplications.
    """
    if exponent < 2:
        return
    power_log(f, exponent // 2)
    multiply(f, f)
    if exponent % 2 == 1:
        multiply(f, Matrix2.fibonacci_base())
