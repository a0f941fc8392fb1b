#!/usr/bin/env python3
r"""@package symseries.test_visitor

Expression tree composition test suite.
"""

import unittest
import sys

import sympy as sp

from testutils import SeriesTestCase
from .common import UnsupportedOperation
from .polynomial import Polynomial
from . import ring
from .visitor import SeriesVisitor, compose_series


a, x, y = sp.symbols('a x y')
R = sp.Rational


def expand(expr, prec):
    return compose_series(ring.var('x'), 'x', prec, expr)


class TestSeriesVisitor(SeriesTestCase):
    """Test the SeriesVisitor class."""
    def test_sin(self):
        self.assertEqual(expand(sp.sin(x), 5).as_dict(), {1: 1, 3: R(-1, 6)})

    def test_constants(self):
        self.assertEqual(expand(a + 1, 3), Polynomial('x', {0: a + 1}))
        self.assertTrue(expand(sp.S.Zero, 3).is_zero())
        self.assertTrue(expand(5, 0).is_zero())
        self.assertTrue(expand(x, 1).is_zero())

    def test_polynomial_input(self):
        p = expand(3*x**4 + a*x - 2, 4)
        self.assertEqual(p, Polynomial('x', {0: -2, 1: a}))

    def test_product_with_pole(self):
        p = expand(sp.sin(x)/x, 5)
        self.assertEqual(p.as_dict(), {0: 1, 2: R(-1, 6), 4: R(1, 120)})
        p = expand(sp.exp(x)/x**2, 2)
        self.assertEqual(p.as_dict(), {-2: 1, -1: 1, 0: R(1, 2), 1: R(1, 6)})

    def test_inverse(self):
        p = expand(1/sp.sin(x), 4)
        self.assertEqual(p.as_dict(), {-1: 1, 1: R(1, 6), 3: R(7, 360)})
        self.assertEqual(expand(x**-10, 3).as_dict(), {-10: 1})
        self.assertEqual(expand(1/(1 - x)**2, 4).as_dict(), {0: 1, 1: 2, 2: 3, 3: 4})

    def test_inverse_lookahead(self):
        p = expand(1/(x**10 + x**11), 3)
        self.assertEqual(p.ldegree, -10)
        self.assertEqual(p.degree, 2)
        self.assertEqual(p.coeff(-9), -1)
        self.assertEqual(p.coeff(2), 1)

    def test_inverse_of_zero(self):
        with self.assertRaises(ZeroDivisionError):
            expand(1/(sp.sin(x)**2 + sp.cos(x)**2 - 1), 3)

    def test_laurent_power(self):
        p = expand((1/x + 1)**2, 1)
        self.assertEqual(p.as_dict(), {-2: 1, -1: 2, 0: 1})
        p = expand((1/x + 1)**-2, 4)
        self.assertEqual(p.as_dict(), {2: 1, 3: -2})

    def test_rational_powers(self):
        p = expand(sp.sqrt(1 + x), 4)
        self.assertEqual(p.as_dict(), {0: 1, 1: R(1, 2), 2: R(-1, 8), 3: R(1, 16)})
        p = expand(sp.sqrt(x**2 + x**3), 4)
        self.assertEqual(p.as_dict(), {1: 1, 2: R(1, 2), 3: R(-1, 8)})
        p = expand((1 + x)**a, 3)
        self.assertPolyEqual(p, {0: 1, 1: a, 2: a*(a-1)/2})

    def test_variable_exponent(self):
        p = expand((1 + x)**x, 4)
        expected = sp.series((1 + x)**x, x, 0, 4).removeO()
        self.assertExprEqual(p.as_expr(), expected)
        p = expand(2**x, 3)
        self.assertPolyEqual(p, {0: 1, 1: sp.log(2), 2: sp.log(2)**2/2})

    def test_functions(self):
        for f in (sp.exp, sp.cos, sp.tan, sp.atan, sp.asin, sp.sinh, sp.tanh):
            expr = f(2*x + x**2)
            expected = sp.series(expr, x, 0, 5).removeO()
            self.assertExprEqual(expand(expr, 5).as_expr(), expected, msg=str(expr))

    def test_nested(self):
        expr = sp.exp(sp.sin(x)) * sp.log(1 + x) / (1 - x)
        expected = sp.series(expr, x, 0, 6).removeO()
        self.assertExprEqual(expand(expr, 6).as_expr(), expected)

    def test_symbolic_coefficients(self):
        p = expand(sp.sin(a + x), 3)
        self.assertPolyEqual(p, {0: sp.sin(a), 1: sp.cos(a), 2: -sp.sin(a)/2})

    def test_derivative(self):
        p = expand(sp.Derivative(sp.sin(x), x), 4)
        self.assertEqual(p.as_dict(), {0: 1, 2: R(-1, 2)})
        p = expand(sp.Derivative(sp.exp(x), (x, 2)), 3)
        self.assertEqual(p.as_dict(), {0: 1, 1: 1, 2: R(1, 2)})
        with self.assertRaises(UnsupportedOperation):
            expand(sp.Derivative(sp.sin(x*y), y), 4)

    def test_integral(self):
        p = expand(sp.Integral(sp.cos(x), x), 4)
        self.assertEqual(p.as_dict(), {1: 1, 3: R(-1, 6)})
        with self.assertRaises(UnsupportedOperation):
            expand(sp.Integral(1/x, x), 4)
        with self.assertRaises(UnsupportedOperation):
            expand(sp.Integral(sp.cos(x*y), (y, 0, 1)), 4)

    def test_unsupported(self):
        with self.assertRaises(UnsupportedOperation):
            expand(sp.gamma(x), 4)
        with self.assertRaises(UnsupportedOperation):
            expand(sp.log(x), 4)
        with self.assertRaises(UnsupportedOperation):
            expand(sp.sqrt(x), 4)

    def test_cache(self):
        visitor = SeriesVisitor(ring.var('x'), 4)
        visitor.series(sp.sin(x) + sp.sin(x)**2)
        self.assertIn((sp.sin(x), 4), visitor._cache)

    def test_logging(self):
        with self.assertLogs('symseries.visitor', level='DEBUG') as cm:
            expand(sp.sin(x)/x, 3)
        self.assertTrue(any("raising precision" in line for line in cm.output))

    def test_seed_variable(self):
        with self.assertRaises(ValueError):
            compose_series(ring.var('x'), 'y', 3, x)
        p = compose_series(ring.var('y'), y, 3, sp.exp(y))
        self.assertEqual(p.var, y)


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
