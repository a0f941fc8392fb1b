r"""@package symseries.ring

Truncated arithmetic on Polynomial objects.

All functions in this module are pure: they take Polynomial objects (and
possibly a precision) and return new Polynomial objects. A polynomial is
*valid at precision* `prec` if it contains no term with exponent `>= prec`.
Every operation taking a `prec` argument returns a polynomial valid at that
precision.

Coefficients are SymPy expressions. The ring only relies on them supporting
`+`, `-`, `*`, `/`, `**` and structural comparison to zero, so any
sympifiable value can be used.

Besides the polynomial operations, this module provides *scalar* evaluators
of the elementary functions (sin(), cos(), ..., log()). They evaluate a
function at a single coefficient and are used by the functions module to
obtain the constant term of the series of e.g. \f$ \sin(c_0 + h(x)) \f$.

@b Examples

```
    >>> a = Polynomial('x', {0: 1, 1: 1})
    >>> mul(a, a, 2)
    <Polynomial(x; {0: 1, 1: 2})>
    >>> pow(a, 3, 2)
    <Polynomial(x; {0: 1, 1: 3})>
```
"""

import sympy as sp

from .common import UnsupportedOperation, UndefinedValue, InvariantViolation
from .common import as_symbol, is_integer
from .polynomial import Polynomial


__all__ = [
    "var",
    "convert",
    "ldegree",
    "truncate",
    "add",
    "sub",
    "neg",
    "scale",
    "shift",
    "mul",
    "pow",
    "diff",
    "integrate",
    "find_cf",
    "root",
    "subs",
    "FUNCTIONS",
]

# pylint: disable=redefined-builtin


def var(name):
    r"""Polynomial `x` (i.e. the term `1*x**1`) in the variable `name`."""
    return Polynomial(name, {1: 1})


def convert(value):
    r"""Lift a scalar (number, string or SymPy expression) to a coefficient."""
    return sp.sympify(value)


def ldegree(p):
    r"""Exponent of the lowest order term of a non-zero polynomial."""
    return p.ldegree


def truncate(p, prec):
    r"""Drop all terms with exponent `>= prec`."""
    if p.is_zero() or p.degree < prec:
        return p
    return Polynomial(p.var, [(n, c) for n, c in p.items() if n < prec])


def _check_compatible(a, b):
    if a.var != b.var:
        raise InvariantViolation(
            "Polynomials in different variables: %s and %s" % (a.var, b.var)
        )


def add(a, b):
    r"""Sum of two polynomials."""
    _check_compatible(a, b)
    return Polynomial(a.var, list(a.items()) + list(b.items()))


def neg(a):
    r"""Negate all coefficients."""
    return Polynomial(a.var, [(n, -c) for n, c in a.items()])


def sub(a, b):
    r"""Difference `a - b` of two polynomials."""
    return add(a, neg(b))


def scale(a, c):
    r"""Multiply every coefficient by the scalar `c`."""
    c = convert(c)
    if c == 1:
        return a
    return Polynomial(a.var, [(n, c * cn) for n, cn in a.items()])


def shift(a, k):
    r"""Multiply by `x**k`, i.e. add `k` to every exponent."""
    if k == 0:
        return a
    return Polynomial(a.var, [(n + k, c) for n, c in a.items()])


def mul(a, b, prec):
    r"""Truncated product of two polynomials.

    Only pairs of terms with combined exponent `< prec` contribute. Since the
    terms are stored in increasing order, the inner loop can stop at the
    first pair reaching `prec`.
    """
    _check_compatible(a, b)
    result = dict()
    b_items = list(b.items())
    for i, ci in a.items():
        for j, cj in b_items:
            n = i + j
            if n >= prec:
                break
            if n in result:
                result[n] = result[n] + ci * cj
            else:
                result[n] = ci * cj
    return Polynomial(a.var, result)


def pow(base, n, prec):
    r"""Raise a polynomial to a non-negative integer power, truncating at `prec`.

    Binary exponentiation is used and every intermediate product is
    truncated, so the cost stays bounded by the precision.

    Raises:
        UnsupportedOperation: for negative `n`.
        UndefinedValue: for `0**0`.
    """
    if not is_integer(n):
        raise TypeError("Exponent must be an integer, got %r." % (n,))
    if n < 0:
        raise UnsupportedOperation("Negative powers of a polynomial.")
    if n == 0:
        if base.is_zero():
            raise UndefinedValue("0**0 is undefined.")
        return Polynomial.one(base.var)
    x = base
    y = Polynomial.one(base.var)
    while n > 1:
        if n % 2 == 0:
            x = mul(x, x, prec)
            n //= 2
        else:
            y = mul(x, y, prec)
            x = mul(x, x, prec)
            n = (n - 1) // 2
    return mul(x, y, prec)


def _variable_of(v):
    if isinstance(v, Polynomial):
        if v != var(v.var):
            raise InvariantViolation("Not a variable: %r" % (v,))
        return v.var
    return as_symbol(v)


def diff(p, v):
    r"""Derivative of `p` w.r.t. its variable.

    `v` is the variable, given either as the polynomial returned by var(), as
    `sympy.Symbol` or by name. It must be the variable of `p`.
    """
    if _variable_of(v) != p.var:
        raise InvariantViolation(
            "Cannot differentiate a polynomial in %s w.r.t. %s"
            % (p.var, _variable_of(v))
        )
    return Polynomial(p.var, [(n - 1, n * c) for n, c in p.items() if n != 0])


def integrate(p, v):
    r"""Antiderivative of `p` w.r.t. its variable (with zero constant term).

    Raises:
        UnsupportedOperation: if `p` has an `x**-1` term, the antiderivative
            of which is a logarithm.
    """
    if _variable_of(v) != p.var:
        raise InvariantViolation(
            "Cannot integrate a polynomial in %s w.r.t. %s"
            % (p.var, _variable_of(v))
        )
    if -1 in p:
        raise UnsupportedOperation("Integration of a 1/x term.")
    return Polynomial(p.var, [(n + 1, c / (n + 1)) for n, c in p.items()])


def find_cf(p, deg):
    r"""Coefficient at exponent `deg`, which must be present in `p`.

    Use Polynomial.coeff() for a lookup returning zero for absent terms.
    """
    return p[deg]


def root(c, n):
    r"""The `n`'th root `c**(1/n)` of a scalar coefficient."""
    return convert(c) ** sp.Rational(1, n)


def subs(p, v, r, prec):
    r"""Substitute the series `r` for the variable of `p`.

    This is not supported and always raises UnsupportedOperation.
    """
    # pylint: disable=unused-argument
    raise UnsupportedOperation("Substitution into a series.")


def sin(c):
    return sp.sin(c)

def cos(c):
    return sp.cos(c)

def tan(c):
    return sp.tan(c)

def asin(c):
    return sp.asin(c)

def acos(c):
    return sp.acos(c)

def atan(c):
    return sp.atan(c)

def sinh(c):
    return sp.sinh(c)

def cosh(c):
    return sp.cosh(c)

def tanh(c):
    return sp.tanh(c)

def asinh(c):
    return sp.asinh(c)

def atanh(c):
    return sp.atanh(c)

def exp(c):
    return sp.exp(c)

def log(c):
    return sp.log(c)


## Scalar evaluators by name.
FUNCTIONS = dict(
    sin=sin, cos=cos, tan=tan,
    asin=asin, acos=acos, atan=atan,
    sinh=sinh, cosh=cosh, tanh=tanh,
    asinh=asinh, atanh=atanh,
    exp=exp, log=log,
)
