"""Sort-and-merge canonicalization of raw term lists.

Every operator that produces a fresh list of (monomial, coefficient) terms
passes it through ``canonicalize`` before wrapping it in a Polynomial:

  1. stable-sort the terms by the graded monomial order, O(N log N);
  2. scan once, summing the coefficients of adjacent equal monomials.

Zero sums are kept.  A Polynomial's monomial sequence is its schema, and
pruning would make the schema depend on coefficient values.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Sequence, Tuple

from .monomial import Exponent, monomial_key

logger = logging.getLogger(__name__)

Term = Tuple[Exponent, Any]


def canonicalize(terms: Iterable[Term]) -> Tuple[Tuple[Exponent, ...], List[Any]]:
    """Merge raw terms into strictly increasing, duplicate-free form.

    The terms must already be validated (same arity, integer exponents).

    Returns:
        (monomials, coeffs): a tuple of distinct monomials in ascending order
        and the list of matching coefficients, each the sum of all input
        coefficients that shared that monomial, in input order.
    """
    ordered = sorted(terms, key=lambda term: monomial_key(term[0]))
    monomials: List[Exponent] = []
    coeffs: List[Any] = []
    for mono, coeff in ordered:
        if monomials and monomials[-1] == mono:
            # a + b rather than +=, so mutable coefficients (numpy arrays) are not touched
            coeffs[-1] = coeffs[-1] + coeff
        else:
            monomials.append(mono)
            coeffs.append(coeff)
    logger.debug("canonicalized %d terms into %d", len(ordered), len(monomials))
    return tuple(monomials), coeffs


def is_canonical(monomials: Sequence[Exponent]) -> bool:
    """Return True iff the monomials are strictly increasing in graded order."""
    keys = [monomial_key(mono) for mono in monomials]
    return all(a < b for a, b in zip(keys, keys[1:]))
