"""univariate polynomials over a generic numeric domain\n
>>> p = Polynomial.fromCoefficients([1, 1, -2])
>>> str(p)
'x^2 + x - 2'
>>> (quotient, remainder) = p / Polynomial.fromString("x - 1", domain=int)
"""

from .polynomial import Polynomial, DivisionResult, DEFAULT_VARIABLE_NAME
from .parsing import (
    parsePolynomial, PolynomialParseError, registerLiteralParser,
    getLiteralParser, DEFAULT_DOMAIN,
)
from .formats import (
    formatPolynomial, formatCoefficient, PolynomialFormat,
    DEFAULT_FORMAT, MULTIPLICATION_MARKERS,
)
from .protocols import (
    SupportsMathRing, SupportsMathField, SupportsLiteralParse,
)
