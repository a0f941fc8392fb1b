r"""@package symseries.functions

Truncated series of elementary functions applied to a series.

Given the series `s` of some expression \f$ g(x) \f$, the functions here
compute the series of e.g. \f$ \exp(g(x)) \f$ or \f$ g(x)^{1/3} \f$ up to a
given precision. The constant term of the result is obtained by applying the
scalar evaluators of the ring module to the constant term \f$ c_0 \f$ of
`s`. The remaining terms follow either from a coefficient recurrence (obtained
by differentiating the defining relation, e.g. \f$ E' = g' E \f$ for
\f$ E = \exp(g) \f$) or directly from the ring operations, e.g.
\f[
    \arctan(g) = \arctan(c_0) + \int \frac{g'}{1+g^2}\,dx.
\f]

All functions take the series `s` and the precision `prec` at which the
result is requested. The argument `s` needs to be valid at least at `prec`
(more if it has a pole or a zero at the origin, see series_invert() and
series_rpow()). With the exception of these two, the argument must not have
terms of negative degree, since the result would have an essential
singularity.
"""

import sympy as sp

from . import ring
from .common import UnsupportedOperation
from .polynomial import Polynomial


__all__ = [
    "series_invert",
    "series_rpow",
    "series_nthroot",
    "series_exp",
    "series_log",
    "series_sin",
    "series_cos",
    "series_tan",
    "series_sinh",
    "series_cosh",
    "series_tanh",
    "series_atan",
    "series_asin",
    "series_acos",
    "series_asinh",
    "series_atanh",
    "FUNCTION_SERIES",
]


## Scalar evaluators used for the constant terms, looked up by name.
_SCALAR = ring.FUNCTIONS


def _coeff_list(s, num):
    r"""Dense list of the first `num` coefficients (degrees `0, ..., num-1`)."""
    return [s.coeff(n) for n in range(num)]


def _from_list(var, coeffs, offset=0):
    return Polynomial(var, [(n + offset, c) for n, c in enumerate(coeffs)])


def _split_constant(s, name):
    r"""Return the constant term and the rest of a series without poles."""
    if not s.is_zero() and s.ldegree < 0:
        raise UnsupportedOperation(
            "%s of a series with a pole at the origin." % name
        )
    c0 = s.coeff(0)
    return c0, ring.sub(s, Polynomial.constant(s.var, c0))


def series_invert(s, prec):
    r"""Series of `1/s` valid at precision `prec`.

    If the lowest order term of `s` is \f$ c_m x^m \f$, it is factored out
    and the result is a Laurent series starting at \f$ x^{-m} \f$. For this
    to be correct up to `prec`, `s` must be valid at `prec + 2*m`.

    Raises:
        ZeroDivisionError: if `s` is the zero series.
    """
    if s.is_zero():
        raise ZeroDivisionError("Inversion of the zero series.")
    m = s.ldegree
    t = ring.shift(s, -m)
    num = prec + m
    if num <= 0:
        return Polynomial.zero(s.var)
    t = _coeff_list(t, num)
    inv_t0 = 1 / t[0]
    b = [inv_t0]
    for n in range(1, num):
        acc = sp.Add(*[t[k] * b[n-k] for k in range(1, n+1)])
        b.append(-inv_t0 * acc)
    return ring.truncate(_from_list(s.var, b, offset=-m), prec)


def _power_exponent(a):
    a = ring.convert(a)
    if a.is_Rational:
        return a.p, a.q
    return None, None


def _leading_power(t0, a):
    r"""Compute `t0**a` using ring.root() for rational exponents."""
    p, q = _power_exponent(a)
    if p is None:
        return t0 ** a
    if q == 1:
        return t0 ** p
    return ring.root(t0, q) ** p


def series_rpow(s, a, prec):
    r"""Series of \f$ s^a \f$ for a scalar (possibly symbolic) exponent `a`.

    For \f$ s = c_m x^m (1 + \ldots) \f$ with \f$ m \neq 0 \f$, the result
    starts at \f$ x^{am} \f$, which requires \f$ am \f$ to be an integer.
    The remaining factor \f$ t = s/x^m \f$ has a non-zero constant term and
    its power is computed via the recurrence
    \f[
        f_n = \frac{1}{n t_0} \sum_{k=1}^n \big((a+1)k - n\big) t_k f_{n-k}.
    \f]
    The argument needs to be valid at `prec + m - a*m`.
    """
    a = ring.convert(a)
    if s.is_zero():
        if a.is_positive:
            return s
        raise UnsupportedOperation("Power %s of the zero series." % a)
    m = s.ldegree
    lead = a * m
    if not lead.is_integer:
        raise UnsupportedOperation(
            "Power %s of a series starting at x**%d is not a power series."
            % (a, m)
        )
    lead = int(lead)
    num = prec - lead
    if num <= 0:
        return Polynomial.zero(s.var)
    t = _coeff_list(ring.shift(s, -m), num)
    t0 = t[0]
    f = [_leading_power(t0, a)]
    for n in range(1, num):
        acc = sp.Add(*[((a + 1) * k - n) * t[k] * f[n-k]
                       for k in range(1, n+1)])
        f.append(acc / (n * t0))
    return ring.truncate(_from_list(s.var, f, offset=lead), prec)


def series_nthroot(s, n, prec):
    r"""Series of the `n`'th root of `s`."""
    return series_rpow(s, sp.Rational(1, n), prec)


def series_exp(s, prec):
    r"""Series of \f$ \exp(s) \f$.

    With \f$ s = c_0 + h \f$, we have \f$ E = e^{c_0} \exp(h) \f$ and
    \f$ n E_n = \sum_{k=1}^n k h_k E_{n-k} \f$.
    """
    c0, h = _split_constant(s, "exp")
    if prec <= 0:
        return Polynomial.zero(s.var)
    h = _coeff_list(h, prec)
    e = [_SCALAR['exp'](c0)]
    for n in range(1, prec):
        acc = sp.Add(*[k * h[k] * e[n-k] for k in range(1, n+1)])
        e.append(acc / n)
    return _from_list(s.var, e)


def _antiderivative(s, c0, func, factor, prec):
    r"""Return `func(c0) + integrate(diff(s) * factor)` valid at `prec`.

    This is used for the functions whose derivative is algebraic in the
    argument, e.g. \f$ \frac{d}{dx}\log(s) = s'/s \f$. The `factor` needs to
    be valid at `prec-1`.
    """
    x = ring.var(s.var)
    ds = ring.diff(s, x)
    integral = ring.integrate(ring.mul(ds, factor, prec - 1), x)
    return ring.truncate(
        ring.add(Polynomial.constant(s.var, func(c0)), integral), prec
    )


def _one_plus_square(s, sign, prec, name):
    r"""Series of \f$ 1 \pm s^2 \f$, which must not vanish at the origin."""
    q = ring.add(Polynomial.one(s.var),
                 ring.scale(ring.pow(s, 2, prec), sign))
    if q.coeff(0) == 0:
        raise UnsupportedOperation(
            "%s at a branch point (constant term %s)." % (name, s.coeff(0))
        )
    return q


def series_log(s, prec):
    r"""Series of \f$ \log(s) = \log(c_0) + \int s'/s\,dx \f$.

    Raises:
        UnsupportedOperation: if `s` has no constant term.
    """
    c0, _ = _split_constant(s, "log")
    if c0 == 0:
        raise UnsupportedOperation("log of a series without constant term.")
    if prec <= 0:
        return Polynomial.zero(s.var)
    return _antiderivative(s, c0, _SCALAR['log'], series_invert(s, prec - 1), prec)


def _trig_pair(h, prec, sign):
    r"""Series of \f$ \sin(h), \cos(h) \f$ (or sinh/cosh for `sign=1`).

    The argument `h` must not have a constant term. The recurrences follow
    from \f$ S' = h' C \f$ and \f$ C' = \pm h' S \f$.
    """
    x = h.var
    if prec <= 0:
        return Polynomial.zero(x), Polynomial.zero(x)
    h = _coeff_list(h, prec)
    S = [sp.S.Zero]
    C = [sp.S.One]
    for n in range(1, prec):
        S.append(sp.Add(*[k * h[k] * C[n-k] for k in range(1, n+1)]) / n)
        C.append(sign * sp.Add(*[k * h[k] * S[n-k] for k in range(1, n+1)]) / n)
    return _from_list(x, S), _from_list(x, C)


def _combine(S, C, a, b):
    r"""Return `a*C + b*S`."""
    return ring.add(ring.scale(C, a), ring.scale(S, b))


def series_sin(s, prec):
    r"""Series of \f$ \sin(c_0+h) = \sin(c_0)\cos(h) + \cos(c_0)\sin(h) \f$."""
    c0, h = _split_constant(s, "sin")
    S, C = _trig_pair(h, prec, -1)
    return _combine(S, C, _SCALAR['sin'](c0), _SCALAR['cos'](c0))


def series_cos(s, prec):
    r"""Series of \f$ \cos(c_0+h) = \cos(c_0)\cos(h) - \sin(c_0)\sin(h) \f$."""
    c0, h = _split_constant(s, "cos")
    S, C = _trig_pair(h, prec, -1)
    return _combine(S, C, _SCALAR['cos'](c0), -_SCALAR['sin'](c0))


def series_tan(s, prec):
    r"""Series of \f$ \tan(s) = \sin(s)/\cos(s) \f$."""
    cos = series_cos(s, prec)
    if cos.coeff(0) == 0:
        raise UnsupportedOperation("tan at a pole (constant term %s)." % s.coeff(0))
    return ring.mul(series_sin(s, prec), series_invert(cos, prec), prec)


def series_sinh(s, prec):
    r"""Series of \f$ \sinh(s) \f$, analogous to series_sin()."""
    c0, h = _split_constant(s, "sinh")
    S, C = _trig_pair(h, prec, 1)
    return _combine(S, C, _SCALAR['sinh'](c0), _SCALAR['cosh'](c0))


def series_cosh(s, prec):
    r"""Series of \f$ \cosh(s) \f$, analogous to series_cos()."""
    c0, h = _split_constant(s, "cosh")
    S, C = _trig_pair(h, prec, 1)
    return _combine(S, C, _SCALAR['cosh'](c0), _SCALAR['sinh'](c0))


def series_tanh(s, prec):
    r"""Series of \f$ \tanh(s) = \sinh(s)/\cosh(s) \f$."""
    cosh = series_cosh(s, prec)
    if cosh.coeff(0) == 0:
        raise UnsupportedOperation("tanh at a pole (constant term %s)." % s.coeff(0))
    return ring.mul(series_sinh(s, prec), series_invert(cosh, prec), prec)


def series_atan(s, prec):
    r"""Series of \f$ \arctan(s) = \arctan(c_0) + \int s'/(1+s^2)\,dx \f$."""
    c0, _ = _split_constant(s, "atan")
    if prec <= 0:
        return Polynomial.zero(s.var)
    q = _one_plus_square(s, 1, prec - 1, "atan")
    return _antiderivative(s, c0, _SCALAR['atan'], series_invert(q, prec - 1), prec)


def series_atanh(s, prec):
    r"""Series of \f$ \operatorname{artanh}(s) = \operatorname{artanh}(c_0) + \int s'/(1-s^2)\,dx \f$."""
    c0, _ = _split_constant(s, "atanh")
    if prec <= 0:
        return Polynomial.zero(s.var)
    q = _one_plus_square(s, -1, prec - 1, "atanh")
    return _antiderivative(s, c0, _SCALAR['atanh'], series_invert(q, prec - 1), prec)


def series_asin(s, prec):
    r"""Series of \f$ \arcsin(s) = \arcsin(c_0) + \int s'/\sqrt{1-s^2}\,dx \f$."""
    c0, _ = _split_constant(s, "asin")
    if prec <= 0:
        return Polynomial.zero(s.var)
    q = _one_plus_square(s, -1, prec - 1, "asin")
    factor = series_rpow(q, sp.Rational(-1, 2), prec - 1)
    return _antiderivative(s, c0, _SCALAR['asin'], factor, prec)


def series_acos(s, prec):
    r"""Series of \f$ \arccos(s) = \arccos(c_0) - \int s'/\sqrt{1-s^2}\,dx \f$."""
    c0, _ = _split_constant(s, "acos")
    if prec <= 0:
        return Polynomial.zero(s.var)
    q = _one_plus_square(s, -1, prec - 1, "acos")
    factor = ring.neg(series_rpow(q, sp.Rational(-1, 2), prec - 1))
    return _antiderivative(s, c0, _SCALAR['acos'], factor, prec)


def series_asinh(s, prec):
    r"""Series of \f$ \operatorname{arsinh}(s) = \operatorname{arsinh}(c_0) + \int s'/\sqrt{1+s^2}\,dx \f$."""
    c0, _ = _split_constant(s, "asinh")
    if prec <= 0:
        return Polynomial.zero(s.var)
    q = _one_plus_square(s, 1, prec - 1, "asinh")
    factor = series_rpow(q, sp.Rational(-1, 2), prec - 1)
    return _antiderivative(s, c0, _SCALAR['asinh'], factor, prec)


## Series of elementary functions by the name of their scalar evaluator.
FUNCTION_SERIES = dict(
    sin=series_sin, cos=series_cos, tan=series_tan,
    asin=series_asin, acos=series_acos, atan=series_atan,
    sinh=series_sinh, cosh=series_cosh, tanh=series_tanh,
    asinh=series_asinh, atanh=series_atanh,
    exp=series_exp, log=series_log,
)
