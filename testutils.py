r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides a custom subclass of `unittest.TestCase`, namely
SeriesTestCase, which obeys the global configuration settings in
TestSettings and adds assertions for polynomials and symbolic expressions.
The settings can be configured by the script invoking the test run.

This module also introduces a new decorator slowtest, which, when applied,
leads to the test being skipped on normal runs. The script starting the test
must set `TestSettings.skipslow` to `False` for the slow tests to be run.
"""

import sys
import functools
import unittest
import time

import sympy as sp


__all__ = [
    "SeriesTestCase",
    "TestSettings",
    "slowtest",
]


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


def _count(result, attr):
    r"""Number of entries in a result list (results may not provide it)."""
    return len(getattr(result, attr, ()))


class SeriesTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests.

    By deriving from this class, you:
        * Get timed individual tests (needs `verbosity=2`) if
          TestSettings.timing is true.
        * Get assertPolyEqual() and assertExprEqual() for comparing
          polynomials and SymPy expressions.
    """
    def run(self, result=None):
        self.__result = result
        self.__prevErrors = 0
        self.__prevFailures = 0
        self.__prevSkipped = 0
        if result is not None:
            self.__prevErrors = _count(result, "errors")
            self.__prevFailures = _count(result, "failures")
            self.__prevSkipped = _count(result, "skipped")
        return unittest.TestCase.run(self, result)

    def __lastTestOK(self):
        r"""Return whether the previous test result was success."""
        if self.__result is None:
            return True
        result = self.__result
        if _count(result, "errors") > self.__prevErrors or _count(result, "failures") > self.__prevFailures:
            return False
        return _count(result, "skipped") == self.__prevSkipped

    def __shouldPrintTiming(self):
        r"""Return whether timing information should be printed."""
        if not TestSettings.timing or not self.__lastTestOK():
            return False
        if self.__result is None:
            return True
        return not getattr(self.__result, 'dots', True) and getattr(self.__result, 'showAll', False)

    def setUp(self):
        self.startTime = time.time()
        self.addCleanup(self.__printTiming)

    def __printTiming(self):
        if self.__shouldPrintTiming():
            duration = time.time() - self.startTime
            print("(%.4f seconds) ... " % (duration), file=sys.stderr, end='')

    def assertPolyEqual(self, poly, terms, var=None):
        r"""Assert that a polynomial has exactly the given terms.

        The coefficients are compared after simplifying their difference, so
        symbolically equal but structurally different coefficients pass.
        """
        if var is not None:
            self.assertEqual(poly.var, sp.Symbol(var) if isinstance(var, str) else var)
        terms = dict((n, sp.sympify(c)) for n, c in terms.items() if c != 0)
        self.assertEqual(sorted(poly.exponents()), sorted(terms),
                         "Exponents differ: %r != %r" % (poly, terms))
        for n, c in terms.items():
            self.assertExprEqual(poly.coeff(n), c, "Coefficient of x**%d" % n)

    def assertExprEqual(self, a, b, msg=None):
        r"""Assert that two SymPy expressions are mathematically equal."""
        diff = sp.simplify(sp.sympify(a) - sp.sympify(b))
        if diff != 0:
            standardMsg = "%s != %s (difference: %s)" % (a, b, diff)
            raise self.failureException(self._formatMessage(msg, standardMsg))

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i in range(len(a)):
            if a[i] == b[i]:
                continue
            if delta is not None:
                if abs(a[i]-b[i]) > delta:
                    fails.append(i)
            else:
                if round(abs(a[i]-b[i]), places) != 0:
                    fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)


class TestSettings(object):
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
