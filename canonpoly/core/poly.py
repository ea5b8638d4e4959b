"""Canonical sparse multivariate polynomials.

A polynomial is stored as two parallel sequences: the distinct monomial
exponent tuples in ascending graded order, and one coefficient per monomial.

  x0^2 * x1 + 3  (2 variables)  →  monomials ((0, 0), (2, 1)), coeffs [3, 1]

Coefficients may be of any numeric type supporting ``+`` and ``*`` (int,
float, complex, Fraction, Decimal, numpy scalars or arrays, SymPy numbers).
The library never converts them: the common type of a result is whatever the
operands' own ``+`` and ``*`` produce.

Every result is built through ``canonicalize`` and is treated as an immutable
value afterwards.  The two exceptions are ``add_in_place`` (``p += q``) and
``scale_in_place`` (``p *= c``), which only rewrite coefficients and leave
the monomial sequence untouched.

Coefficients that sum to zero are kept, so the zero polynomial built from
``x0 - x0`` still has one term.  ``make_zero`` returns the empty polynomial.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Integral, Number
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import sympy

from .canonical import Term, canonicalize
from .errors import (
    ArityMismatchError,
    ExponentError,
    IndexOutOfRangeError,
    LengthMismatchError,
    PolynomialError,
    SchemaMismatchError,
)
from .monomial import (
    Exponent,
    check_monomial,
    lower_exponent,
    monomial_value,
    mul_monomials,
    raise_power,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolyStats:
    """Summary statistics of a polynomial, used for analysis and logging."""

    deg_total: int                # Total degree (max sum of exponents across all monomials)
    deg_per_var: Tuple[int, ...]  # Max degree of each variable
    num_terms: int                # Number of stored monomials (zero coefficients included)
    coeff_l1: Any                 # L1 norm of coefficients (sum of |coeff|)


class Polynomial:
    """Polynomial in canonical form over a fixed number of variables.

    Build one from raw (monomial, coefficient) pairs in any order; duplicate
    monomials are merged by summing their coefficients:

        p = Polynomial([((1, 0), 2), ((0, 0), 3), ((1, 0), 4)])
        p.monomials  # ((0, 0), (1, 0))
        p.coeffs     # (3, 6)

    Attributes:
        arity:     number of variables.
        monomials: distinct exponent tuples, strictly increasing.
        coeffs:    coefficients matching ``monomials`` position by position.
    """

    __slots__ = ("_arity", "_monomials", "_coeffs")

    # Make numpy defer to __rmul__ / __radd__ instead of iterating over terms.
    __array_ufunc__ = None

    # In-place operators make a Polynomial mutable; use canonical_key() for hashing.
    __hash__ = None

    def __init__(self, terms: Iterable[Term], arity: Optional[int] = None):
        terms = list(terms)
        for term in terms:
            if len(term) != 2:
                raise LengthMismatchError(
                    f"Term {term!r} must be a (monomial, coefficient) pair"
                )
        arity = _resolve_arity(terms, arity)
        validated = [(check_monomial(mono, arity), coeff) for mono, coeff in terms]
        monomials, coeffs = canonicalize(validated)
        self._arity = arity
        self._monomials = monomials
        self._coeffs = coeffs

    @classmethod
    def _from_canonical(
        cls, monomials: Tuple[Exponent, ...], coeffs: List[Any], arity: int
    ) -> "Polynomial":
        """Wrap already-canonical storage without re-sorting."""
        poly = cls.__new__(cls)
        poly._arity = arity
        poly._monomials = monomials
        poly._coeffs = coeffs
        return poly

    @classmethod
    def _from_raw(cls, terms: Iterable[Term], arity: int) -> "Polynomial":
        """Canonicalize terms produced internally (already validated)."""
        monomials, coeffs = canonicalize(terms)
        return cls._from_canonical(monomials, coeffs, arity)

    # ---- Accessors ----

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def monomials(self) -> Tuple[Exponent, ...]:
        return self._monomials

    @property
    def coeffs(self) -> Tuple[Any, ...]:
        return tuple(self._coeffs)

    @property
    def schema(self) -> Tuple[Exponent, ...]:
        """The ordered monomial sequence, independent of coefficient values."""
        return self._monomials

    @property
    def num_terms(self) -> int:
        return len(self._monomials)

    @property
    def degree(self) -> int:
        """Total degree; the last monomial has the highest one. 0 when empty."""
        if not self._monomials:
            return 0
        return sum(self._monomials[-1])

    def terms(self) -> List[Term]:
        return list(zip(self._monomials, self._coeffs))

    def coeff(self, mono: Sequence[int]) -> Any:
        """Coefficient of ``mono``, or 0 if the monomial is not stored."""
        mono = check_monomial(mono, self._arity)
        for stored, coeff in zip(self._monomials, self._coeffs):
            if stored == mono:
                return coeff
        return 0

    def canonical_key(self) -> Tuple:
        """Hashable key: arity plus the canonical term sequence."""
        return (self._arity, tuple(zip(self._monomials, self._coeffs)))

    def is_zero(self) -> bool:
        return all(not np.any(c) if isinstance(c, np.ndarray) else c == 0 for c in self._coeffs)

    def copy(self) -> "Polynomial":
        """Return a copy whose coefficients can be updated independently."""
        return Polynomial._from_canonical(self._monomials, list(self._coeffs), self._arity)

    def __len__(self) -> int:
        return len(self._monomials)

    def __iter__(self) -> Iterator[Term]:
        return iter(zip(self._monomials, self._coeffs))

    # ---- Arithmetic ----

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return add(self, other)

    def __iadd__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        add_in_place(self, other)
        return self

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return sub(self, other)

    def __neg__(self):
        return negate(self)

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return multiply(self, other)
        if not _is_scalar(other):
            return NotImplemented
        return scale(self, other)

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return scale(self, other)

    def __imul__(self, other):
        if isinstance(other, Polynomial):
            # The product has a new schema; fall back to __mul__ and rebind.
            return NotImplemented
        if not _is_scalar(other):
            return NotImplemented
        scale_in_place(self, other)
        return self

    def __pow__(self, exponent):
        return power(self, exponent)

    def __call__(self, *values):
        return evaluate(self, values)

    # ---- Comparison / display ----

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return (
            self._arity == other._arity
            and self._monomials == other._monomials
            and len(self._coeffs) == len(other._coeffs)
            and all(_coeff_equal(a, b) for a, b in zip(self._coeffs, other._coeffs))
        )

    def __repr__(self):
        if not self._monomials:
            return "Polynomial(0)"
        terms = []
        for mono, c in zip(self._monomials, self._coeffs):
            parts = [f"x{i}^{e}" if e > 1 else f"x{i}" for i, e in enumerate(mono) if e > 0]
            monomial = "*".join(parts)
            terms.append(f"{c}*{monomial}" if parts else str(c))
        return f"Polynomial({' + '.join(terms)})"


def _is_scalar(value: Any) -> bool:
    """Coefficient-like operands accepted by the scalar operators."""
    return isinstance(value, (Number, np.ndarray, np.generic, sympy.Basic))


def _coeff_equal(a: Any, b: Any) -> bool:
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return bool(np.array_equal(a, b))
    return bool(a == b)


def _resolve_arity(terms: Sequence[Term], arity: Optional[int]) -> int:
    if arity is None:
        if not terms:
            raise PolynomialError("arity must be given for an empty term list")
        return len(tuple(terms[0][0]))
    if not isinstance(arity, Integral) or isinstance(arity, bool) or arity < 0:
        raise PolynomialError(f"Invalid arity {arity!r}")
    return int(arity)


def _check_same_arity(p: Polynomial, q: Polynomial, op: str) -> None:
    if p.arity != q.arity:
        raise ArityMismatchError(
            f"Cannot {op} polynomials of arity {p.arity} and {q.arity}"
        )


# ---- Constructors ----

def construct(terms: Iterable[Term], arity: Optional[int] = None) -> Polynomial:
    """Build a canonical polynomial from (monomial, coefficient) pairs."""
    return Polynomial(terms, arity)


def make_poly(
    monomials: Sequence[Sequence[int]],
    coeffs: Sequence[Any],
    arity: Optional[int] = None,
) -> Polynomial:
    """Build a canonical polynomial from parallel monomial and coefficient lists.

    Raises:
        LengthMismatchError: if the two sequences differ in length.
    """
    monomials = list(monomials)
    coeffs = list(coeffs)
    if len(monomials) != len(coeffs):
        raise LengthMismatchError(
            f"Got {len(coeffs)} coefficients for {len(monomials)} monomials"
        )
    return Polynomial(zip(monomials, coeffs), arity)


def make_zero(arity: int) -> Polynomial:
    """Return the zero polynomial (no terms)."""
    return Polynomial([], arity)


def make_const(arity: int, value: Any) -> Polynomial:
    """Return the constant polynomial ``value`` (a degree-0 term in arity variables)."""
    return Polynomial([((0,) * arity, value)], arity)


def make_var(arity: int, idx: int) -> Polynomial:
    """Return the polynomial representing the single variable x_idx."""
    if idx < 0 or idx >= arity:
        raise IndexOutOfRangeError(f"Invalid variable index {idx} for arity={arity}")
    exp = [0] * arity
    exp[idx] = 1
    return Polynomial([(tuple(exp), 1)], arity)


# ---- Arithmetic ----

def add(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return the polynomial p + q."""
    _check_same_arity(p, q, "add")
    return Polynomial._from_raw(p.terms() + q.terms(), p.arity)


def sub(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return the polynomial p - q."""
    _check_same_arity(p, q, "subtract")
    negated = [(mono, -c) for mono, c in q]
    return Polynomial._from_raw(p.terms() + negated, p.arity)


def negate(p: Polynomial) -> Polynomial:
    """Return -p.  The monomials are unchanged, so no re-sorting is needed."""
    return Polynomial._from_canonical(p.monomials, [-c for c in p._coeffs], p.arity)


def add_in_place(p: Polynomial, q: Polynomial) -> None:
    """Add q's coefficients into p, position by position.

    Only legal when both polynomials carry the identical monomial sequence,
    so the result is already canonical.  p is left unchanged on error.

    Raises:
        ArityMismatchError:  if the arities differ.
        SchemaMismatchError: if the monomial sequences differ.
    """
    _check_same_arity(p, q, "add")
    if p.monomials != q.monomials:
        raise SchemaMismatchError(
            f"In-place addition needs identical monomials, got {len(p)} and {len(q)} terms "
            f"with different schemas"
        )
    coeffs = p._coeffs
    other = list(q._coeffs)  # p += p must read the old values
    for i, c in enumerate(other):
        coeffs[i] = coeffs[i] + c


def scale(p: Polynomial, scalar: Any) -> Polynomial:
    """Return p with every coefficient multiplied by ``scalar``."""
    return Polynomial._from_canonical(p.monomials, [c * scalar for c in p._coeffs], p.arity)


def scale_in_place(p: Polynomial, scalar: Any) -> None:
    """Multiply every coefficient of p by ``scalar``, in place."""
    coeffs = p._coeffs
    for i, c in enumerate(coeffs):
        coeffs[i] = c * scalar


def multiply(p: Polynomial, q: Polynomial) -> Polynomial:
    """Return p * q by distributing every term of p over every term of q."""
    _check_same_arity(p, q, "multiply")
    logger.debug("multiplying %d x %d terms", len(p), len(q))
    products = [
        (mul_monomials(mono_p, mono_q), c_p * c_q)
        for mono_p, c_p in p
        for mono_q, c_q in q
    ]
    return Polynomial._from_raw(products, p.arity)


def power(p: Polynomial, exponent: int) -> Polynomial:
    """Return p ** exponent for a non-negative integer exponent.

    Uses repeated squaring over ``multiply``.  ``p ** 0`` is the constant
    polynomial 1, even when p is empty.
    """
    if not isinstance(exponent, Integral) or isinstance(exponent, bool):
        raise ExponentError(f"Polynomial power must be an integer, got {exponent!r}")
    if exponent < 0:
        raise ExponentError(f"Polynomial power must be non-negative, got {exponent}")
    if exponent == 0:
        return make_const(p.arity, 1)
    if exponent == 1:
        return p.copy()
    return raise_power(p, int(exponent))


def evaluate(p: Polynomial, values: Sequence[Any]) -> Any:
    """Evaluate p at a point, one value per variable (in order x0, x1, ...).

    Terms are summed in canonical (ascending) order, which fixes the
    floating-point summation order.  Values may be numpy arrays, in which
    case every point is evaluated at once.  The empty polynomial evaluates
    to 0.
    """
    values = tuple(values)
    if len(values) != p.arity:
        raise ArityMismatchError(
            f"Got {len(values)} values for a polynomial of arity {p.arity}"
        )
    total = None
    for mono, coeff in p:
        term = coeff * monomial_value(mono, values) if any(mono) else coeff
        total = term if total is None else total + term
    return 0 if total is None else total


def partial(p: Polynomial, idx: int) -> Polynomial:
    """Return the partial derivative of p with respect to x_idx.

    Terms constant in x_idx vanish.  Lowering one exponent can make two
    monomials coincide, so the result goes back through canonicalization.
    """
    if not isinstance(idx, Integral) or isinstance(idx, bool) or not 0 <= idx < p.arity:
        raise IndexOutOfRangeError(f"Invalid variable index {idx!r} for arity={p.arity}")
    derived = [
        (lower_exponent(mono, idx), coeff * mono[idx])
        for mono, coeff in p
        if mono[idx] > 0
    ]
    return Polynomial._from_raw(derived, p.arity)


def gradient(p: Polynomial) -> Tuple[Polynomial, ...]:
    """Return all first-order partial derivatives, in variable order."""
    return tuple(partial(p, i) for i in range(p.arity))


def equal(p: Polynomial, q: Polynomial) -> bool:
    """Return True iff p and q have the same arity and canonical terms."""
    return p == q


def stats(p: Polynomial) -> PolyStats:
    """Compute summary statistics for a polynomial."""
    deg_per_var = [0] * p.arity
    deg_total = 0
    coeff_l1 = 0
    for mono, coeff in p:
        coeff_l1 = coeff_l1 + abs(coeff)
        deg_total = max(deg_total, sum(mono))
        for i, exp in enumerate(mono):
            if exp > deg_per_var[i]:
                deg_per_var[i] = exp
    return PolyStats(
        deg_total=deg_total,
        deg_per_var=tuple(deg_per_var),
        num_terms=len(p),
        coeff_l1=coeff_l1,
    )
