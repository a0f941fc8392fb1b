r"""@package symseries.polynomial

Sparse univariate polynomials with symbolic coefficients.

A Polynomial maps integer exponents to SymPy coefficients. Exponents may be
negative, so Laurent polynomials (as they appear e.g. when inverting a series
without constant term) are representable as well.

Polynomial objects are immutable. All operations of the ring module return
new objects and never modify their arguments.

Zero coefficients are removed when a polynomial is created. The stored
coefficients are therefore all structurally non-zero and `degree` is the
highest exponent carrying a non-zero coefficient. Note that this is a
*structural* test: a coefficient like `sin(a)**2 + cos(a)**2 - 1` is kept,
since SymPy does not simplify it to zero automatically.

@b Examples

```
    >>> p = Polynomial('x', {0: 1, 2: 3})
    >>> p.degree
    2
    >>> p.as_expr()
    3*x**2 + 1
```
"""

import sympy as sp

from .common import as_symbol, is_integer


__all__ = [
    "Polynomial",
]


class Polynomial(object):
    r"""Immutable sparse mapping from exponents to symbolic coefficients.

    The terms are kept sorted by increasing exponent, which is what the
    truncated multiplication in ring.mul() relies on.
    """

    __slots__ = ("_var", "_terms", "_hash")

    def __init__(self, var, terms=None):
        r"""Create a polynomial in the variable `var`.

        Args:
            var:    Name of the variable or a `sympy.Symbol`.
            terms:  Mapping or iterable of ``(exponent, coefficient)`` pairs.
                    Exponents must be integers. Coefficients are converted
                    using `sympy.sympify`. Pairs with a zero coefficient are
                    dropped. If an exponent occurs more than once in an
                    iterable, the coefficients are summed up.
        """
        self._var = as_symbol(var)
        if terms is None:
            terms = ()
        elif hasattr(terms, 'items'):
            terms = terms.items()
        collected = dict()
        for n, c in terms:
            if not is_integer(n):
                raise TypeError("Exponents must be integers, got %r." % (n,))
            n = int(n)
            c = sp.sympify(c)
            if n in collected:
                c = collected[n] + c
            collected[n] = c
        self._terms = dict(
            (n, collected[n]) for n in sorted(collected) if collected[n] != 0
        )
        self._hash = None

    @classmethod
    def zero(cls, var):
        r"""The zero polynomial, i.e. one without any terms."""
        return cls(var)

    @classmethod
    def one(cls, var):
        r"""The multiplicative identity."""
        return cls(var, {0: 1})

    @classmethod
    def constant(cls, var, c):
        r"""A polynomial consisting of just the constant term `c`."""
        return cls(var, {0: c})

    @property
    def var(self):
        r"""The variable as `sympy.Symbol`."""
        return self._var

    @property
    def degree(self):
        r"""Highest exponent present (`0` for the zero polynomial)."""
        if not self._terms:
            return 0
        return next(reversed(self._terms))

    @property
    def ldegree(self):
        r"""Lowest exponent present.

        The zero polynomial has no lowest order term. Callers must check
        is_zero() first, otherwise a `ValueError` is raised.
        """
        if not self._terms:
            raise ValueError("The zero polynomial has no lowest degree.")
        return next(iter(self._terms))

    def is_zero(self):
        r"""Return whether this polynomial has no terms."""
        return not self._terms

    def items(self):
        r"""Iterate over ``(exponent, coefficient)`` pairs in increasing order."""
        return self._terms.items()

    def exponents(self):
        r"""Return a list of all exponents in increasing order."""
        return list(self._terms)

    def coeff(self, n):
        r"""Coefficient of `x**n` or zero if there is no such term."""
        return self._terms.get(n, sp.S.Zero)

    def as_expr(self):
        r"""Convert to a SymPy expression ``sum(c * x**n)``."""
        x = self._var
        return sp.Add(*[c * x**n for n, c in self._terms.items()])

    def as_dict(self):
        r"""Return a (sorted) copy of the exponent to coefficient mapping."""
        return dict(self._terms)

    def __getitem__(self, n):
        return self._terms[n]

    def __contains__(self, n):
        return n in self._terms

    def __iter__(self):
        return iter(self._terms)

    def __len__(self):
        return len(self._terms)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._var == other._var and self._terms == other._terms

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        if self._hash is None:
            self._hash = hash((self._var, tuple(self._terms.items())))
        return self._hash

    def __getstate__(self):
        return (self._var, self._terms)

    def __setstate__(self, state):
        self._var, self._terms = state
        self._hash = None

    def __repr__(self):
        terms = ", ".join("%d: %s" % (n, c) for n, c in self._terms.items())
        return "<Polynomial(%s; {%s})>" % (self._var, terms)
