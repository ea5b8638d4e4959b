from .errors import (
    PolynomialError, LengthMismatchError, ArityMismatchError, SchemaMismatchError,
    IndexOutOfRangeError, ExponentError,
)
from .monomial import Exponent, Ordering, compare, monomial_key, total_degree, raise_power
from .canonical import canonicalize, is_canonical
from .poly import (
    Polynomial, PolyStats, construct, make_poly, make_zero, make_const, make_var,
    add, sub, negate, add_in_place, scale, scale_in_place, multiply, power,
    evaluate, partial, gradient, equal, stats,
)
from .fingerprints import (
    sample_eval_points, eval_poly_points, eval_distance, probably_equal, false_positive_bound,
)
