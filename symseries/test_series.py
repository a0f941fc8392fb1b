#!/usr/bin/env python3
r"""@package symseries.test_series

UnivariateSeries test suite.
"""

import unittest
import sys
import os.path as op
import pickle
import tempfile

import sympy as sp

from testutils import SeriesTestCase, slowtest
from .common import UnsupportedOperation
from .polynomial import Polynomial
from .series import UnivariateSeries, series, DEFAULT_PRECISION


a, x = sp.symbols('a x')
R = sp.Rational


class TestSeriesValues(SeriesTestCase):
    """Test coefficient access of the UnivariateSeries class."""
    def test_coefficients(self):
        s = series(sp.sin(x), x, 5)
        self.assertEqual(s.get_coeff(1), 1)
        self.assertEqual(s.get_coeff(3), R(-1, 6))
        for n in (-5, 0, 2, 4, 100):
            self.assertEqual(s.get_coeff(n), 0)
        self.assertEqual(s.get_degree(), 3)
        self.assertEqual(s.get_ldegree(), 1)
        self.assertEqual(s.prec, 5)
        self.assertEqual(s.var, x)

    def test_as_dict(self):
        s = series(sp.sin(x), x, 5)
        self.assertEqual(s.as_dict(), {0: 0, 1: 1, 2: 0, 3: R(-1, 6)})
        s = series(sp.exp(x), x, 3)
        self.assertEqual(s.as_dict(), {0: 1, 1: 1, 2: R(1, 2)})
        s = series(1/x + 1, x, 3)
        self.assertEqual(s.as_dict(), {-1: 1, 0: 1})
        self.assertEqual(series(0, x, 3).as_dict(), {0: 0})
        self.assertEqual(series(x**3, x, 2).as_dict(), {0: 0})

    def test_zero_series(self):
        s = series(x**3, 'x', 2)
        self.assertTrue(s.poly.is_zero())
        self.assertEqual(s.get_degree(), 0)
        self.assertEqual(s.as_basic(), 0)

    def test_default_precision(self):
        s = series(sp.exp(x), x)
        self.assertEqual(DEFAULT_PRECISION, 6)
        self.assertEqual(s.prec, 6)
        self.assertEqual(s.get_degree(), 5)

    def test_invalid_precision(self):
        with self.assertRaises(ValueError):
            series(sp.sin(x), x, -1)
        with self.assertRaises(ValueError):
            series(sp.sin(x), x, 2.5)
        with self.assertRaises(ValueError):
            UnivariateSeries(Polynomial('x', {5: 1}), x, 5)
        with self.assertRaises(ValueError):
            UnivariateSeries(Polynomial('y', {0: 1}), x, 5)
        with self.assertRaises(TypeError):
            series(sp.sin(x), 1, 3)

    def test_unsupported(self):
        with self.assertRaises(UnsupportedOperation):
            series(sp.log(x), x, 3)
        with self.assertRaises(NotImplementedError):
            series(sp.sqrt(x), x, 3)

    def test_expression_with_order(self):
        s = series(sp.sin(x), x, 5)
        self.assertEqual(s.as_basic(), x - x**3/6)
        self.assertEqual(s.as_expr_with_order(), sp.sin(x).series(x, 0, 5))

    def test_repr(self):
        s = series(sp.sin(x), x, 5)
        self.assertEqual(repr(s), "<UnivariateSeries(x - x**3/6 + O(x**5))>")


class TestSeriesComparison(SeriesTestCase):
    """Test equality, hashing and ordering of series."""
    def test_round_trip(self):
        exprs = [
            sp.sin(x), sp.exp(x)*sp.cos(x), 1/sp.sin(x), sp.sin(a + x),
            sp.sqrt(1 + x), (1 + x)**a,
        ]
        for expr in exprs:
            for prec in (1, 3, 5):
                s = series(expr, x, prec)
                self.assertEqual(series(s.as_basic(), x, prec), s, msg=str(expr))

    def test_equality(self):
        s1 = series(sp.sin(x)**2 + sp.cos(x)**2, x, 6)
        s2 = series(1, x, 6)
        self.assertEqual(s1, s2)
        self.assertEqual(hash(s1), hash(s2))
        self.assertNotEqual(s1, series(1, x, 5))
        self.assertNotEqual(series(sp.exp(x), x, 4), series(sp.exp(x), x, 3))
        self.assertFalse(s1 == 1)

    def test_variable_distinguishes_constants(self):
        y = sp.Symbol('y')
        for c in (1, 0, a):
            s1 = series(c, x, 3)
            s2 = series(c, y, 3)
            self.assertNotEqual(s1, s2)
            self.assertEqual(s1.compare(s2), -s2.compare(s1))
            self.assertEqual(len(set([s1, s2])), 2)
        self.assertEqual(series(1, y, 3), series(1, 'y', 3))
        self.assertEqual(hash(series(1, y, 3)), hash(series(1, 'y', 3)))
        self.assertEqual(len(set([series(0, y, 3), series(y**5, y, 3)])), 1)

    def test_hash(self):
        s = series(sp.exp(x), x, 4)
        self.assertEqual(hash(s), hash(s.poly) + 3 * 84728863)
        self.assertEqual(len(set([s, series(sp.exp(x), x, 4)])), 1)

    def test_compare(self):
        s1 = series(sp.sin(x), x, 5)
        s2 = series(sp.cos(x), x, 5)
        self.assertNotEqual(s1.compare(s2), 0)
        self.assertEqual(s1.compare(s2), -s2.compare(s1))
        self.assertEqual(s1.compare(s1), 0)
        self.assertEqual(series(x, x, 3).compare(series(x, x, 5)), -1)
        self.assertEqual(series(x, x, 5).compare(series(x, x, 3)), 1)
        with self.assertRaises(TypeError):
            s1.compare(x)

    def test_sorting(self):
        s3 = series(x, x, 3)
        s5 = series(x, x, 5)
        self.assertEqual(sorted([s5, s3]), [s3, s5])
        self.assertTrue(s3 < s5)
        self.assertTrue(s5 >= s3)


class TestSeriesStorage(SeriesTestCase):
    """Test pickling and storing series on disk."""
    def test_pickle(self):
        s = series(sp.exp(a*x), x, 4)
        t = pickle.loads(pickle.dumps(s))
        self.assertEqual(s, t)
        self.assertEqual(hash(s), hash(t))

    def test_save_load(self):
        s = series(sp.sin(a + x), x, 4)
        with tempfile.TemporaryDirectory() as tmpdir:
            fname = op.join(tmpdir, "data", "sin")
            s.save(fname, verbose=False)
            self.assertTrue(op.isfile(fname + ".npy"))
            t = UnivariateSeries.load(fname + ".npy")
            self.assertEqual(s, t)
            self.assertEqual(t.prec, 4)
            with self.assertRaises(RuntimeError):
                s.save(fname + ".npy", verbose=False)
            series(x, x, 2).save(fname, overwrite=True, verbose=False)
            self.assertEqual(UnivariateSeries.load(fname + ".npy"), series(x, x, 2))


class TestLongerSeries(SeriesTestCase):
    """Test series of higher precision."""
    @slowtest
    def test_high_precision(self):
        s = series(sp.tan(x), x, 20)
        expected = sp.series(sp.tan(x), x, 0, 20).removeO()
        self.assertExprEqual(s.as_basic(), expected)


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
