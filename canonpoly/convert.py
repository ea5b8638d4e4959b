"""Conversion utilities between SymPy expressions and Polynomial objects.

Useful for display, debugging and for building test inputs from readable
expressions.  SymPy numbers are also accepted as coefficients and scalars.
"""

from fractions import Fraction
from typing import Any, List, Optional

import sympy
from sympy import Expr, Poly, Symbol, expand, symbols as sympy_symbols

from .core.errors import ArityMismatchError
from .core.poly import Polynomial, make_zero


def create_variables(n: int) -> List[Symbol]:
    """Create n SymPy symbols: x0, x1, ..., x_{n-1}."""
    if n == 0:
        return []
    return list(sympy_symbols(f"x0:{n}"))


def _from_sympy_number(coeff: Any) -> Any:
    """Map SymPy numbers back to plain Python numbers where exact."""
    if coeff.is_Integer:
        return int(coeff)
    if coeff.is_Rational:
        return Fraction(int(coeff.p), int(coeff.q))
    if coeff.is_Float:
        return float(coeff)
    return coeff


def to_sympy(poly: Polynomial, syms: Optional[List[Symbol]] = None) -> Expr:
    """Convert a Polynomial to a SymPy expression.

    Zero coefficients disappear in the expression, since SymPy simplifies
    them away.
    """
    if syms is None:
        syms = create_variables(poly.arity)
    if len(syms) != poly.arity:
        raise ArityMismatchError(
            f"Got {len(syms)} symbols for a polynomial of arity {poly.arity}"
        )
    terms = []
    for mono, c in poly:
        term = sympy.sympify(c)
        for sym, power in zip(syms, mono):
            if power > 0:
                term *= sym ** power
        terms.append(term)

    if not terms:
        return sympy.Integer(0)
    return sympy.Add(*terms)


def from_sympy(expr: Expr, syms: List[Symbol]) -> Polynomial:
    """Convert a SymPy expression in ``syms`` to a canonical Polynomial."""
    expr = expand(sympy.sympify(expr))
    n_vars = len(syms)
    if expr == 0:
        return make_zero(n_vars)
    if not syms:
        return Polynomial([((), _from_sympy_number(expr))], 0)
    poly = Poly(expr, *syms)
    terms = [(monom, _from_sympy_number(coeff)) for monom, coeff in poly.terms()]
    return Polynomial(terms, n_vars)
