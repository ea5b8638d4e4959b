"""Polynomial fingerprinting via Schwartz-Zippel evaluation.

Two polynomials are identical iff they agree on a sufficiently large random
sample of evaluation points (Schwartz-Zippel lemma).  A fixed set of m
random integer points serves as a fast identity check that never expands or
canonicalizes the difference of the two polynomials.

  sample_eval_points  : sample m random (n_vars,)-points from a Config
  eval_poly_points    : evaluate a polynomial at all m points at once
  eval_distance       : L1 distance between two evaluation vectors
  probably_equal      : identity test built on the three above

Points are stored with dtype=object so evaluation runs on Python ints and
stays exact for integer and Fraction coefficients.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from ..config import Config
from .errors import ArityMismatchError
from .poly import Polynomial, evaluate


def sample_eval_points(n_vars: int, config: Config) -> np.ndarray:
    """Sample m random integer evaluation points.

    Returns:
        Array of shape (config.m, n_vars) with Python-int entries in
        [config.eval_low, config.eval_high].
    """
    rng = np.random.default_rng(config.seed)
    points = rng.integers(config.eval_low, config.eval_high + 1, size=(config.m, n_vars))
    return points.astype(object)


def eval_poly_points(poly: Polynomial, points: np.ndarray) -> np.ndarray:
    """Evaluate a polynomial at each row of ``points``.

    The polynomial is evaluated once with one numpy column per variable, so
    the term loop runs a single time for all points.
    """
    points = np.asarray(points, dtype=object)
    if points.ndim != 2 or points.shape[1] != poly.arity:
        raise ArityMismatchError(
            f"Points of shape {points.shape} do not match arity {poly.arity}"
        )
    values = evaluate(poly, [points[:, i] for i in range(poly.arity)])
    # Constant polynomials evaluate to a scalar; spread it over every point.
    return np.full(points.shape[0], values, dtype=object) if np.ndim(values) == 0 else values


def eval_distance(a: Sequence[Any], b: Sequence[Any]) -> Any:
    """Compute L1 distance between two evaluation vectors (sum of |a_i - b_i|).

    A distance of 0 means the two polynomials agree at all sampled points.
    """
    if len(a) != len(b):
        raise ValueError("Evaluation vectors must be same length")
    total = 0
    for x, y in zip(a, b):
        total += abs(x - y)
    return total


def probably_equal(p: Polynomial, q: Polynomial, config: Config = Config()) -> bool:
    """Return True if p and q agree at all m sampled points."""
    if p.arity != q.arity:
        raise ArityMismatchError(
            f"Cannot compare polynomials of arity {p.arity} and {q.arity}"
        )
    points = sample_eval_points(p.arity, config)
    return eval_distance(eval_poly_points(p, points), eval_poly_points(q, points)) == 0


def false_positive_bound(degree: int, config: Config = Config()) -> float:
    """Upper bound on the chance that two distinct polynomials of total degree
    at most ``degree`` agree on every sampled point.

    Each independent point collides with probability at most
    degree / n_values (Schwartz-Zippel), so m points give that ratio to the
    power m.
    """
    per_point = min(1.0, degree / config.n_values)
    return per_point ** config.m
