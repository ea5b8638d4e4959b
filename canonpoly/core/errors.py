"""Exception hierarchy for polynomial construction and arithmetic.

Every error derives from PolynomialError, which is itself a ValueError, so
callers that already guard polynomial code with ``except ValueError`` keep
working.  All of these are raised by precondition checks before any
arithmetic is performed.
"""


class PolynomialError(ValueError):
    """Base class for invalid polynomial inputs or operand combinations."""


class LengthMismatchError(PolynomialError):
    """Coefficient count differs from monomial count at construction."""


class ArityMismatchError(PolynomialError):
    """Operands, monomials or value sequences disagree on the number of variables."""


class SchemaMismatchError(PolynomialError):
    """In-place addition between polynomials with different monomial sequences.

    In-place addition only updates coefficients, so both operands must carry
    the identical, identically ordered list of monomials.
    """


class IndexOutOfRangeError(PolynomialError, IndexError):
    """Variable index outside [0, arity)."""


class ExponentError(PolynomialError):
    """Exponent that is negative or not an integer."""
