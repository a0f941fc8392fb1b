r"""@package symseries.evaluators

Numeric evaluation of truncated series.

A series with symbolic coefficients cannot be evaluated directly. Instead, you
create an *evaluator*, which is a snapshot of the series with all coefficients
converted to numbers. It can then be called to evaluate the polynomial part
at a point, and its diff() method evaluates derivatives.

Evaluators either use fast floating point operations (via NumPy, so arrays of
points can be evaluated at once) or `mpmath` arbitrary precision operations.

@b Examples

```
    >>> s = series(sympy.exp(x), x, 10)
    >>> f = s.evaluator()
    >>> f(0.1)
    1.1051709180...
    >>> f.diff(0.1, 2)
    1.1051709...
```
"""

from mpmath import mp
import numpy as np
import sympy as sp

from . import ring


__all__ = [
    "SeriesEvaluator",
]


class SeriesEvaluator(object):
    r"""Callable evaluating a series and its derivatives at given points.

    The derivatives are computed symbolically from the series (with
    ring.diff()) and their coefficients are converted once per derivative
    order. The converted coefficient lists are cached.
    """

    def __init__(self, series, use_mp=False, dps=None, subs=None):
        r"""Create an evaluator for a series.

        Args:
            series: The series.UnivariateSeries to evaluate.
            use_mp: Whether to use `mpmath` computations. Default is `False`.
            dps:    Number of decimal places to use when `use_mp==True`.
                    Default is to use the global setting at the time of
                    evaluation.
            subs:   Optional `dict` mapping symbols to values used to replace
                    any free symbols (other than the variable) in the
                    coefficients. Remaining free symbols raise a
                    `ValueError`.
        """
        ## Boolean indicating if computation should use `mpmath`.
        self.use_mp = use_mp
        ## Decimal places for `mpmath` computations.
        self.dps = dps
        ## Precision of the series; the error is of order `x**prec`.
        self.prec = series.prec
        self._poly = series.poly
        self._subs = dict(subs) if subs else dict()
        self._funcs = []

    def __call__(self, x):
        r"""Evaluate the polynomial part of the series at `x`."""
        return self.diff(x, 0)

    def diff(self, x, n=1):
        r"""Evaluate the n'th derivative at `x`."""
        return self._get_func(n)(x)

    def function(self, n=0):
        r"""Return a callable for the n'th derivative."""
        fn = self._get_func(n)
        return lambda x: fn(x) # pylint: disable=unnecessary-lambda

    def _get_func(self, n):
        r"""Cached creation of the function for the n'th derivative."""
        for i in range(len(self._funcs), n+1):
            if i == 0:
                poly = self._poly
            else:
                poly = ring.diff(self._funcs[i-1].poly, self._poly.var)
            self._funcs.append(self._create_function(poly))
        return self._funcs[n]

    def _create_function(self, poly):
        terms = [(k, self._convert(c)) for k, c in poly.items()]
        if self.use_mp:
            f = _MpPolynomialFunction(terms, self.dps)
        else:
            f = _FpPolynomialFunction(terms)
        f.poly = poly
        return f

    def _convert(self, c):
        r"""Convert a coefficient to a float/complex or `mpmath` number."""
        if self._subs:
            c = c.subs(self._subs)
        if c.free_symbols:
            raise ValueError("Cannot evaluate coefficient %s numerically "
                             "(free symbols: %s)."
                             % (c, ", ".join(map(str, c.free_symbols))))
        if self.use_mp:
            dps = (self.dps or mp.dps) + 5
            re, im = c.evalf(dps).as_real_imag()
            with mp.workdps(dps):
                if im == 0:
                    return mp.mpf(str(sp.Float(re, dps)))
                return mp.mpc(str(sp.Float(re, dps)), str(sp.Float(im, dps)))
        c = complex(c)
        return c.real if c.imag == 0 else c


class _FpPolynomialFunction(object):
    r"""Floating point evaluation of ``sum(c * x**k)`` via NumPy."""
    def __init__(self, terms):
        self._terms = terms
        self.poly = None

    def __call__(self, x):
        scalar = np.isscalar(x)
        x = np.asarray(x)
        if not np.issubdtype(x.dtype, np.inexact):
            x = x.astype(float)
        result = np.zeros_like(x, dtype=np.result_type(x, *[c for _, c in self._terms]))
        for k, c in self._terms:
            result = result + c * x**k
        return result.item() if scalar else result


class _MpPolynomialFunction(object):
    r"""Arbitrary precision evaluation using `mpmath`."""
    def __init__(self, terms, dps):
        self._terms = terms
        self._dps = dps
        self.poly = None

    def __call__(self, x):
        with mp.workdps(self._dps or mp.dps):
            x = mp.mpmathify(x)
            return mp.fsum(c * x**k for k, c in self._terms)
