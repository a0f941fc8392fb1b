r"""@package symseries.series

Truncated univariate series with symbolic coefficients.

A UnivariateSeries stores the Polynomial of an expression's expansion around
the origin together with the precision up to which it is valid and the
expansion variable. Series objects are created via UnivariateSeries.series()
(or the module function series()) and are not modified afterwards.

@b Examples

```
    >>> import sympy as sp
    >>> x = sp.Symbol('x')
    >>> s = series(sp.sin(x), x, 5)
    >>> s
    <UnivariateSeries(x - x**3/6 + O(x**5))>
    >>> s.get_coeff(3)
    -1/6
    >>> s.as_dict()
    {0: 0, 1: 1, 2: 0, 3: -1/6}
```
"""

import functools
import os
import os.path as op

import numpy as np
import sympy as sp

from . import ring
from .common import as_symbol, is_integer
from .evaluators import SeriesEvaluator
from .visitor import compose_series


__all__ = [
    "UnivariateSeries",
    "series",
    "DEFAULT_PRECISION",
]


## Precision used by series() if none is given.
DEFAULT_PRECISION = 6


@functools.total_ordering
class UnivariateSeries(object):
    r"""Truncated power (or Laurent) series in one variable.

    The series represents an expression modulo terms of order `x**prec`.
    """

    def __init__(self, poly, var, prec):
        r"""Wrap an already computed polynomial.

        Use series() to expand an expression instead of calling this
        directly.

        Args:
            poly:   The Polynomial, which must be valid at `prec`.
            var:    Name or `sympy.Symbol` of the expansion variable.
            prec:   Non-negative integer precision.
        """
        var = as_symbol(var)
        if poly.var != var:
            raise ValueError("Polynomial is not in the variable %s." % var)
        if not is_integer(prec) or prec < 0:
            raise ValueError("Precision must be a non-negative integer.")
        if not poly.is_zero() and poly.degree >= prec:
            raise ValueError("Polynomial has terms beyond the precision.")
        self._poly = poly
        self._var = var
        self._prec = int(prec)

    @classmethod
    def series(cls, expr, x, prec, **kw):
        r"""Expand an expression around the origin.

        Args:
            expr:   SymPy expression (or anything `sympy.sympify` accepts).
            x:      Name or `sympy.Symbol` of the expansion variable.
            prec:   The result contains all terms of order `< prec`.

        Further keyword arguments are passed to the visitor.SeriesVisitor.

        Raises:
            common.UnsupportedOperation: if the expression has no truncated
                Laurent series of the supported kind, e.g. for
                \f$ \log(x) \f$ or \f$ \sqrt{x} \f$.
        """
        x = as_symbol(x)
        if not is_integer(prec) or prec < 0:
            raise ValueError("Precision must be a non-negative integer.")
        poly = compose_series(ring.var(x), x, prec, expr, **kw)
        return cls(poly, x, prec)

    @property
    def poly(self):
        r"""The Polynomial of this series."""
        return self._poly

    @property
    def var(self):
        r"""The expansion variable as `sympy.Symbol`."""
        return self._var

    @property
    def prec(self):
        r"""Precision, i.e. the order of the first unknown term."""
        return self._prec

    def get_degree(self):
        r"""Highest exponent of the series (`0` for the zero series)."""
        return self._poly.degree

    def get_ldegree(self):
        r"""Lowest exponent of a non-zero series."""
        return self._poly.ldegree

    def get_coeff(self, deg):
        r"""Coefficient of `x**deg` or zero if there is no such term."""
        return self._poly.coeff(deg)

    def as_basic(self):
        r"""Expression of the polynomial part (without order term)."""
        return self._poly.as_expr()

    def as_expr_with_order(self):
        r"""Expression including the order term `O(x**prec)`."""
        return self.as_basic() + sp.Order(self._var**self._prec, self._var)

    def as_dict(self):
        r"""Return all coefficients up to the degree as a `dict`.

        The keys start at `0` (or the lowest degree if the series has terms
        of negative degree) and run up to get_degree(). Degrees without a term
        are mapped to zero.
        """
        if self._poly.is_zero():
            return {0: sp.S.Zero}
        start = min(0, self._poly.ldegree)
        return dict((n, self.get_coeff(n))
                    for n in range(start, self.get_degree() + 1))

    def compare(self, other):
        r"""Compare to another series, returning `-1`, `0` or `1`.

        The canonical SymPy ordering of the expressions returned by
        as_basic() is used, with ties broken by the variable and then the
        precision. Constant series in different variables are therefore
        not equal.
        """
        if not isinstance(other, UnivariateSeries):
            raise TypeError("Cannot compare series with %r." % (other,))
        result = self.as_basic().compare(other.as_basic())
        if result == 0:
            result = self._var.compare(other._var)
        if result == 0:
            result = (self._prec > other._prec) - (self._prec < other._prec)
        return result

    def __eq__(self, other):
        if not isinstance(other, UnivariateSeries):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, UnivariateSeries):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash(self._poly) + self.get_degree() * 84728863

    def evaluator(self, use_mp=False, dps=None, subs=None):
        r"""Create a numeric evaluator for the polynomial part.

        See evaluators.SeriesEvaluator for the meaning of the arguments.
        """
        return SeriesEvaluator(self, use_mp=use_mp, dps=dps, subs=subs)

    def save(self, filename, overwrite=False, verbose=True):
        r"""Save the series to disk.

        Args:
            filename: The file name to store the data in. An extension
                ``'.npy'`` will be added if not already there.
            overwrite: Whether to overwrite an existing file with the same
                name. If `False` (default) and such a file exists, a
                `RuntimeError` is raised.
            verbose: Whether to print when the file was written. Default is
                `True`.
        """
        filename = op.expanduser(filename)
        if not filename.endswith('.npy'):
            filename += '.npy'
        dirname = op.dirname(filename)
        if dirname:
            os.makedirs(op.normpath(dirname), exist_ok=True)
        if op.exists(filename) and not overwrite:
            raise RuntimeError("File already exists.")
        data = np.empty(1, dtype=object)
        data[0] = self
        np.save(filename, data, allow_pickle=True)
        if verbose:
            print("series saved to: %s" % filename)

    @classmethod
    def load(cls, filename):
        r"""Load a series stored with save()."""
        result = np.load(op.expanduser(filename), allow_pickle=True)
        obj = result[0]
        if not isinstance(obj, cls):
            raise TypeError("File does not contain a %s." % cls.__name__)
        return obj

    def __repr__(self):
        return "<%s(%s)>" % (type(self).__name__, self.as_expr_with_order())


def series(expr, x, prec=DEFAULT_PRECISION, **kw):
    r"""Expand `expr` around `x=0` up to (excluding) order `prec`.

    Convenience for UnivariateSeries.series().
    """
    return UnivariateSeries.series(expr, x, prec, **kw)
