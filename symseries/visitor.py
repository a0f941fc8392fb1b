r"""@package symseries.visitor

Composition of truncated series along a SymPy expression tree.

The SeriesVisitor walks an expression bottom-up. Sub-expressions not
containing the expansion variable become constant series, the variable itself
becomes the seed polynomial `x`, and every other node combines the series of
its arguments using the ring and functions modules.

Care is taken to compute sub-series at a high enough precision when
factors have poles at the origin. For example, in \f$ \sin(x)/x \f$ the
series of \f$ \sin(x) \f$ is needed one order higher than the requested
precision.

@b Examples

```
    >>> x = sympy.Symbol('x')
    >>> compose_series(ring.var('x'), 'x', 5, sympy.sin(x))
    <Polynomial(x; {1: 1, 3: -1/6})>
```
"""

import logging

import sympy as sp

from . import ring
from .common import UnsupportedOperation, as_symbol
from .functions import FUNCTION_SERIES, series_invert, series_rpow
from .polynomial import Polynomial


__all__ = [
    "SeriesVisitor",
    "compose_series",
]


logger = logging.getLogger(__name__)

_FUNCTION_CLASSES = dict((getattr(sp, name), name) for name in FUNCTION_SERIES)


class SeriesVisitor(object):
    r"""Compute the truncated series of expressions in one variable.

    Results of sub-expressions are cached per precision, so common
    sub-expressions are expanded only once per visitor.
    """

    def __init__(self, var_poly, prec, lookahead=32):
        r"""Create a visitor for a given seed polynomial and precision.

        Args:
            var_poly:   Polynomial representing the variable, as returned by
                        ring.var().
            prec:       Precision of the series computed by series().
            lookahead:  How many orders to look beyond the precision when
                        the lowest order term of a series needs to be
                        known, e.g. to invert `x**10` at precision 3. A series
                        vanishing up to that order is treated as zero.
                        Default is `32`.
        """
        ## Seed polynomial `x`.
        self.var_poly = var_poly
        ## The variable as `sympy.Symbol`.
        self.x = var_poly.var
        ## Requested precision.
        self.prec = prec
        ## Orders to look ahead for the lowest order term.
        self.lookahead = lookahead
        self._cache = dict()

    def series(self, expr):
        r"""Return the Polynomial of `expr` valid at the visitor's precision."""
        return self.visit(sp.sympify(expr), self.prec)

    def visit(self, expr, prec):
        r"""Return the series of `expr` valid at precision `prec`."""
        key = (expr, prec)
        try:
            return self._cache[key]
        except KeyError:
            pass
        logger.debug("expanding %s node at precision %d",
                     type(expr).__name__, prec)
        result = ring.truncate(self._visit(expr, prec), prec)
        self._cache[key] = result
        return result

    def _visit(self, expr, prec):
        x = self.x
        if expr == x:
            return self.var_poly
        if not expr.has(x):
            return Polynomial.constant(x, ring.convert(expr))
        if expr.is_Add:
            return self._visit_add(expr, prec)
        if expr.is_Mul:
            return self._visit_mul(expr, prec)
        if expr.is_Pow:
            return self._visit_pow(expr, prec)
        if isinstance(expr, sp.Derivative):
            return self._visit_derivative(expr, prec)
        if isinstance(expr, sp.Integral):
            return self._visit_integral(expr, prec)
        name = _FUNCTION_CLASSES.get(expr.func)
        if name is not None:
            s = self.visit(expr.args[0], prec)
            return FUNCTION_SERIES[name](s, prec)
        raise UnsupportedOperation(
            "Series of %s expressions not implemented." % type(expr).__name__
        )

    def _visit_add(self, expr, prec):
        x = self.x
        const, terms = expr.as_independent(x, as_Add=True)
        result = Polynomial.constant(x, const)
        for term in sp.Add.make_args(terms):
            result = ring.add(result, self.visit(term, prec))
        return result

    def _visit_mul(self, expr, prec):
        x = self.x
        const, factors = expr.as_independent(x, as_Add=False)
        factors = sp.Mul.make_args(factors)
        work = prec
        while True:
            series = [self.visit(f, work) for f in factors]
            poles = -sum(min(0, s.ldegree) for s in series if not s.is_zero())
            if prec + poles <= work:
                break
            logger.debug("raising precision of %d factors from %d to %d",
                         len(factors), work, prec + poles)
            work = prec + poles
        result = Polynomial.one(x)
        for s in series:
            result = ring.mul(result, s, work)
        return ring.scale(ring.truncate(result, prec), const)

    def _leading(self, expr, prec):
        r"""Series of `expr`, looking ahead if it vanishes at `prec`."""
        s = self.visit(expr, prec)
        work = max(prec, 1)
        while s.is_zero() and work < prec + self.lookahead:
            work = min(2 * work, prec + self.lookahead)
            s = self.visit(expr, work)
        return s

    def _visit_pow(self, expr, prec):
        base, e = expr.args
        if e.has(self.x):
            return self.visit(sp.exp(e * sp.log(base)), prec)
        if e.is_Integer:
            n = int(e)
            if n >= 0:
                return self._integer_power(base, n, prec)
            return self._inverse_power(base, -n, prec)
        return self._scalar_power(base, e, prec)

    def _integer_power(self, base, n, prec):
        s = self.visit(base, prec)
        if not s.is_zero() and s.ldegree < 0:
            work = prec - (n - 1) * s.ldegree
            s = self.visit(base, work)
            return ring.pow(s, n, work)
        return ring.pow(s, n, prec)

    def _inverse_power(self, base, n, prec):
        s = self._leading(base, prec)
        if s.is_zero():
            raise ZeroDivisionError("Series of %s vanishes." % (base,))
        m = s.ldegree
        if m < 0:
            return ring.pow(series_invert(s, prec), n, prec)
        s = self.visit(base, prec + (n + 1) * m)
        return series_invert(ring.pow(s, n, prec + 2 * n * m), prec)

    def _scalar_power(self, base, a, prec):
        s = self._leading(base, prec)
        if s.is_zero():
            return series_rpow(s, a, prec)
        m = s.ldegree
        lead = a * m
        if lead.is_integer:
            work = prec + m - int(lead)
            if work > prec:
                s = self.visit(base, work)
        return series_rpow(s, a, prec)

    def _visit_derivative(self, expr, prec):
        n = 0
        for v, count in expr.variable_count:
            if v != self.x:
                raise UnsupportedOperation(
                    "Derivative w.r.t. %s in a series in %s." % (v, self.x)
                )
            n += count
        s = self.visit(expr.expr, prec + n)
        for _ in range(n):
            s = ring.diff(s, self.var_poly)
        return s

    def _visit_integral(self, expr, prec):
        if expr.limits != ((self.x,),):
            raise UnsupportedOperation("Only indefinite integrals w.r.t. "
                                       "the series variable are supported.")
        s = self.visit(expr.function, prec - 1)
        return ring.integrate(s, self.var_poly)


def compose_series(seed, name, prec, expr, **kw):
    r"""Compute the Polynomial of `expr` in the variable `name`.

    Args:
        seed:   Polynomial representing the variable (see ring.var()).
        name:   Name or `sympy.Symbol` of the variable, which must be the
                variable of `seed`.
        prec:   Precision of the result.
        expr:   SymPy expression (or anything `sympy.sympify` accepts).

    Further keyword arguments are passed to SeriesVisitor.
    """
    if as_symbol(name) != seed.var:
        raise ValueError("Seed polynomial is not in the variable %s." % name)
    return SeriesVisitor(seed, prec, **kw).series(expr)
