"""Tests for Schwartz-Zippel fingerprinting."""

from fractions import Fraction

import numpy as np
import pytest

from canonpoly.config import Config
from canonpoly.core.errors import ArityMismatchError
from canonpoly.core.fingerprints import (
    eval_distance, eval_poly_points, false_positive_bound, probably_equal, sample_eval_points,
)
from canonpoly.core.poly import make_const, make_poly, make_var, make_zero


class TestSampling:
    def setup_method(self):
        self.config = Config(m=8, eval_low=-2, eval_high=2, seed=7)

    def test_shape_and_range(self):
        points = sample_eval_points(3, self.config)
        assert points.shape == (8, 3)
        assert all(-2 <= v <= 2 for v in points.flat)
        assert all(isinstance(v, int) for v in points.flat)

    def test_deterministic(self):
        a = sample_eval_points(2, self.config)
        b = sample_eval_points(2, self.config)
        np.testing.assert_array_equal(a, b)


class TestEvalPoints:
    def setup_method(self):
        self.config = Config(m=6, seed=3)
        self.points = sample_eval_points(2, self.config)

    def test_matches_pointwise_evaluation(self):
        p = make_poly([(2, 1), (0, 3), (1, 0), (0, 0)], [3, -1, Fraction(1, 2), 4])
        values = eval_poly_points(p, self.points)
        assert len(values) == 6
        for v, point in zip(values, self.points):
            assert v == p(*point)

    def test_constant_broadcast(self):
        values = eval_poly_points(make_const(2, 5), self.points)
        assert list(values) == [5] * 6
        assert list(eval_poly_points(make_zero(2), self.points)) == [0] * 6

    def test_arity_mismatch(self):
        with pytest.raises(ArityMismatchError):
            eval_poly_points(make_var(3, 0), self.points)


class TestIdentity:
    def setup_method(self):
        self.x0 = make_var(2, 0)
        self.x1 = make_var(2, 1)

    def test_equal_polynomials(self):
        lhs = (self.x0 + self.x1) ** 2
        rhs = self.x0 * self.x0 + 2 * (self.x0 * self.x1) + self.x1 * self.x1
        assert probably_equal(lhs, rhs)

    def test_different_polynomials(self):
        assert not probably_equal(self.x0, self.x1)

    def test_arity_mismatch(self):
        with pytest.raises(ArityMismatchError):
            probably_equal(self.x0, make_var(3, 0))

    def test_eval_distance(self):
        assert eval_distance([1, 2, 3], [1, 0, 4]) == 3
        with pytest.raises(ValueError):
            eval_distance([1, 2], [1])

    def test_false_positive_bound(self):
        config = Config(m=4, eval_low=-3, eval_high=3)
        assert false_positive_bound(2, config) == pytest.approx((2 / 7) ** 4)
        assert false_positive_bound(100, config) == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
