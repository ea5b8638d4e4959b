"""Tests for partial derivatives."""

from fractions import Fraction

import pytest

from canonpoly.core.canonical import is_canonical
from canonpoly.core.errors import IndexOutOfRangeError
from canonpoly.core.poly import gradient, make_poly, make_var, partial


class TestPartials:
    def test_single_variable(self):
        poly = make_poly([(0,), (1,), (2,), (3,)], [1.0, 2.0, 3.0, 4.0])
        d = partial(poly, 0)
        assert d.monomials == ((0,), (1,), (2,))
        assert d.coeffs == (2.0, 6.0, 12.0)

    def test_two_variables(self):
        powers = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 2)]
        poly = make_poly(powers, [1, 2, 1, 2, 1, 2, 1])

        d0 = partial(poly, 0)
        assert d0.monomials == ((0, 0), (0, 1), (0, 2), (1, 2))
        assert d0.coeffs == (2, 1, 2, 2)

        d1 = partial(poly, 1)
        assert d1.monomials == ((0, 0), (0, 1), (1, 0), (1, 1), (2, 1))
        assert d1.coeffs == (2, 2, 1, 4, 2)

    def test_pure_power(self):
        poly = make_poly([(1, 5, 2)], [Fraction(3, 2)])
        d = partial(poly, 1)
        assert d.terms() == [((1, 4, 2), Fraction(15, 2))]

    def test_constant_term_vanishes(self):
        poly = make_poly([(0, 3), (2, 0)], [4, 1])
        d = partial(poly, 0)
        assert d.terms() == [((1, 0), 2)]
        assert len(partial(make_poly([(0, 3)], [4]), 0)) == 0

    def test_result_is_canonical(self):
        poly = make_poly([(3, 0), (1, 1), (2, 1), (0, 4), (1, 3)], [1, 1, 1, 1, 1])
        for k in range(2):
            assert is_canonical(partial(poly, k).monomials)

    def test_operand_unchanged(self):
        poly = make_poly([(2,)], [3])
        partial(poly, 0)
        assert poly.terms() == [((2,), 3)]

    def test_gradient(self):
        poly = make_var(2, 0) * make_var(2, 1)
        g = gradient(poly)
        assert len(g) == 2
        assert g[0] == make_var(2, 1)
        assert g[1] == make_var(2, 0)

    def test_index_out_of_range(self):
        poly = make_var(2, 0)
        with pytest.raises(IndexOutOfRangeError):
            partial(poly, 2)
        with pytest.raises(IndexOutOfRangeError):
            partial(poly, -1)
        with pytest.raises(IndexError):
            partial(poly, 5)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
