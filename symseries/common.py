r"""@package symseries.common

Exceptions and small helpers used by multiple modules in symseries.
"""

import numbers

import sympy as sp


__all__ = [
    "SeriesError",
    "UnsupportedOperation",
    "UndefinedValue",
    "InvariantViolation",
    "as_symbol",
    "is_integer",
]


class SeriesError(Exception):
    r"""Base exception for errors raised by the series engine."""
    pass

class UnsupportedOperation(SeriesError, NotImplementedError):
    r"""Raised when a result is not representable as a truncated series.

    Examples are negative exponents passed to ring.pow(), integrating a
    `1/x` term or substituting one series into another.
    """
    pass

class UndefinedValue(SeriesError, ArithmeticError):
    r"""Raised for mathematically undefined results such as `0**0`."""
    pass

class InvariantViolation(SeriesError, TypeError):
    r"""Raised when an operation is given a polynomial it cannot act on."""
    pass


def as_symbol(x):
    r"""Return a `sympy.Symbol` for a variable given as name or symbol."""
    if isinstance(x, sp.Symbol):
        return x
    if isinstance(x, str):
        return sp.Symbol(x)
    raise TypeError("Expected a variable name or Symbol, got %r." % (x,))


def is_integer(n):
    r"""Check whether `n` is an integer usable as an exponent.

    Booleans are rejected even though they are integral in Python.
    """
    return isinstance(n, numbers.Integral) and not isinstance(n, bool)
