"""Tests for polynomial evaluation."""

from fractions import Fraction

import numpy as np
import pytest

from canonpoly.core.errors import ArityMismatchError
from canonpoly.core.poly import add, evaluate, make_const, make_poly, make_zero


class TestEvaluation:
    def setup_method(self):
        powers = [(3, 0), (0, 3), (2, 1), (1, 2), (2, 0), (0, 2), (1, 1), (1, 0), (0, 1), (0, 0)]
        coeffs = [2, 1, -3, 4, 0, 5, 1, 1, 2, 1]
        self.poly = make_poly(powers, coeffs)

    def test_integer_points(self):
        assert self.poly(1, 2) == 48
        assert self.poly(2, 2) == 63

    def test_mixed_types(self):
        result = self.poly(4.0, 2)
        assert result == 141
        assert isinstance(result, float)

    def test_functional_form(self):
        assert evaluate(self.poly, (1, 2)) == 48
        assert evaluate(self.poly, [2, 2]) == 63

    def test_fraction_point(self):
        p = make_poly([(2,), (0,)], [4, 1])
        assert p(Fraction(1, 2)) == 2

    def test_zero_base_with_zero_exponent(self):
        p = make_poly([(0, 1)], [5])
        assert p(0, 3) == 15

    def test_linearity(self):
        q = make_poly([(1, 1), (0, 0), (3, 0)], [7, -2, Fraction(1, 3)])
        for x in [(1, 2), (-1, 3), (Fraction(1, 2), 0)]:
            assert evaluate(add(self.poly, q), x) == evaluate(self.poly, x) + evaluate(q, x)

    def test_vectorised(self):
        xs = np.array([1, 2])
        ys = np.array([2, 2])
        np.testing.assert_array_equal(self.poly(xs, ys), [48, 63])

    def test_constant_and_empty(self):
        assert make_const(2, 7)(3, 4) == 7
        assert make_zero(2)(3, 4) == 0

    def test_summation_order_is_ascending(self):
        # 1e16 + 1.0 rounds back to 1e16, so ascending order gives exactly 0.0
        p = make_poly([(2,), (0,), (1,)], [-1e16, 1e16, 1.0])
        assert p(1.0) == 0.0

    def test_arity_mismatch(self):
        with pytest.raises(ArityMismatchError):
            self.poly(1, 2, 3)
        with pytest.raises(ArityMismatchError):
            evaluate(self.poly, [1])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
