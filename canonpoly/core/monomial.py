"""Monomial exponent tuples and their total order.

A monomial is a tuple of non-negative integers, one exponent per variable:

  Exponent = Tuple[int, ...]

Example (2 variables x0, x1):
  x0^2 * x1  →  (2, 1)
  1          →  (0, 0)

Monomials are ordered by total degree first, then element-wise in index
order (the smaller exponent at the first differing index sorts first).  This
is exactly the ordering of the Python key ``(sum(m), m)``, which is what the
canonicalizer sorts by.
"""

from __future__ import annotations

import enum
from numbers import Integral
from typing import Any, Sequence, Tuple

from .errors import ArityMismatchError, ExponentError, IndexOutOfRangeError

# Exponent tuple: element i is the degree of variable x_i in the monomial.
Exponent = Tuple[int, ...]


class Ordering(enum.IntEnum):
    """Result of comparing two monomials."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def total_degree(mono: Exponent) -> int:
    """Return the sum of the exponents."""
    return sum(mono)


def monomial_key(mono: Exponent) -> Tuple[int, Exponent]:
    """Sort key realising the graded order: total degree, then element-wise."""
    return (sum(mono), mono)


def check_monomial(mono: Sequence[int], arity: int) -> Exponent:
    """Validate a raw exponent sequence and return it as a tuple of ints.

    Raises:
        ArityMismatchError: if the length differs from ``arity``.
        ExponentError:      if an exponent is negative or not an integer.
    """
    mono = tuple(mono)
    if len(mono) != arity:
        raise ArityMismatchError(
            f"Monomial {mono} has {len(mono)} exponents, expected arity {arity}"
        )
    for exp in mono:
        # bool is an Integral but never a meaningful exponent
        if not isinstance(exp, Integral) or isinstance(exp, bool):
            raise ExponentError(f"Exponent {exp!r} in monomial {mono} is not an integer")
        if exp < 0:
            raise ExponentError(f"Exponent {exp} in monomial {mono} is negative")
    return tuple(int(exp) for exp in mono)


def compare(a: Exponent, b: Exponent) -> Ordering:
    """Compare two monomials of the same arity under the graded order."""
    if len(a) != len(b):
        raise ArityMismatchError(
            f"Cannot compare monomials of arity {len(a)} and {len(b)}"
        )
    key_a = monomial_key(a)
    key_b = monomial_key(b)
    if key_a < key_b:
        return Ordering.LESS
    if key_a > key_b:
        return Ordering.GREATER
    return Ordering.EQUAL


def mul_monomials(a: Exponent, b: Exponent) -> Exponent:
    """Multiply two monomials by adding their exponents component-wise."""
    if len(a) != len(b):
        raise ArityMismatchError(
            f"Cannot multiply monomials of arity {len(a)} and {len(b)}"
        )
    return tuple(x + y for x, y in zip(a, b))


def lower_exponent(mono: Exponent, idx: int) -> Exponent:
    """Return ``mono`` with the exponent of variable ``idx`` decremented by one."""
    if idx < 0 or idx >= len(mono):
        raise IndexOutOfRangeError(f"Invalid variable index {idx} for arity={len(mono)}")
    if mono[idx] == 0:
        raise ExponentError(f"Exponent of x{idx} in {mono} is already zero")
    return mono[:idx] + (mono[idx] - 1,) + mono[idx + 1:]


def raise_power(base: Any, exponent: int) -> Any:
    """Raise ``base`` to a non-negative integer power by repeated squaring.

    ``raise_power(x, 0)`` is 1 for every base (including 0) and
    ``raise_power(x, 1)`` is ``x`` itself.  Larger powers are split into
    ``exponent // 2`` and the remainder, so only O(log exponent)
    multiplications are performed and only ``*`` is required of the base.
    """
    if exponent < 0:
        raise ExponentError(f"Cannot raise to negative power {exponent}")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = raise_power(base, exponent // 2)
    squared = half * half
    if exponent % 2:
        return squared * base
    return squared


def monomial_value(mono: Exponent, values: Sequence[Any]) -> Any:
    """Evaluate the monomial at ``values`` (one value per variable).

    Variables with exponent zero are skipped; the all-zero monomial
    evaluates to 1.
    """
    result = None
    for exp, value in zip(mono, values):
        if exp == 0:
            continue
        factor = raise_power(value, exp)
        result = factor if result is None else result * factor
    return 1 if result is None else result
