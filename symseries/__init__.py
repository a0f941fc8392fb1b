r"""@package symseries

Truncated power series with symbolic coefficients.

The idea is to represent the expansion of a SymPy expression around the
origin, in one variable, as a sparse polynomial whose coefficients are
themselves SymPy expressions. The expansion is valid modulo terms of degree
greater than or equal to a chosen *precision*.

The package is organized in layers:
    * polynomial: the immutable sparse Polynomial type
    * ring: truncated arithmetic (multiplication, powers, differentiation,
      integration) and scalar evaluators of elementary functions
    * functions: series of elementary functions of a series (exp, log, sin,
      atan, roots, ...) built on top of the ring
    * visitor: composition of these operations along an expression tree
    * series: the UnivariateSeries value type and the series() entry point
    * evaluators: numeric (floating point or `mpmath`) evaluation

@b Examples

```
    >>> import sympy as sp
    >>> from symseries import series
    >>> x = sp.Symbol('x')
    >>> series(sp.sin(x), x, 5)
    <UnivariateSeries(x - x**3/6 + O(x**5))>
```
"""

from .common import SeriesError, UnsupportedOperation, UndefinedValue
from .common import InvariantViolation
from .polynomial import Polynomial
from .series import UnivariateSeries, series, DEFAULT_PRECISION
