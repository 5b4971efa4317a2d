"""text rendering of the polynomials\n
the coefficients are formatted by `formatCoefficient`, a single-dispatch
function: each numeric domain registers its own rule (sign, elision of 1,
brackets and multiplication marker), other domains can be added with
`@formatCoefficient.register(MyType)`"""

from decimal import Decimal
from fractions import Fraction
from functools import singledispatch

import numpy

from .__typing import (
    Literal, Any, TypeAlias, Mapping, Iterator, Protocol, assertLiteral,
)
from .protocols import SupportsDunderLT, SupportsStr

PolynomialFormat: TypeAlias = Literal["standard", "latex", "concise"]
"""standard: x^2, latex: x^{2}, concise: x2"""

DEFAULT_FORMAT: PolynomialFormat = "standard"

MULTIPLICATION_MARKERS: "Mapping[PolynomialFormat, str]" = {
    "standard": "*", "latex": "\\cdot ", "concise": "*",
}
"""inserted between a coefficient that needs it (fraction, complex, ...) and the variable"""


class _SupportsTerms(Protocol):
    @property
    def variableName(self)->str: ...
    def isZero(self)->bool: ...
    def iterTerms(self, descending:bool=False)->"Iterator[tuple[int, Any]]": ...



def formatPolynomial(poly:"_SupportsTerms", format:"PolynomialFormat"=DEFAULT_FORMAT)->str:
    """return the text of `poly` in the given `format`\n
    the monomials are written from the highest power to the lowest"""
    assertLiteral(PolynomialFormat, format)
    if poly.isZero():
        return "0"
    parts:"list[str]" = []
    isLeadingTerm:bool = True
    for (power, coef) in poly.iterTerms(descending=True):
        parts.append(formatCoefficient(coef, isLeadingTerm, (power == 0), format))
        parts.append(formatVariablePower(poly.variableName, power, format))
        isLeadingTerm = False
    return "".join(parts)

def formatVariablePower(variableName:str, power:int, format:"PolynomialFormat")->str:
    if power == 0:
        return ""
    if power == 1:
        return variableName
    if format == "latex":
        return f"{variableName}^{{{power}}}"
    if format == "concise":
        return f"{variableName}{power}"
    return f"{variableName}^{power}"


def _signPrefix(isNegative:bool, isLeadingTerm:bool)->str:
    """the text written before the (absolute) coefficient"""
    if isLeadingTerm:
        return ("- " if isNegative else "")
    return (" - " if isNegative else " + ")

def _numberText(value:"SupportsStr")->str:
    """the text of a real number, without the useless '.0' of the floats"""
    text:str = str(value)
    if text.endswith(".0"):
        return text[: -2]
    return text


@singledispatch
def formatCoefficient(coef:Any, isLeadingTerm:bool, isConstantTerm:bool, format:"PolynomialFormat")->str:
    """fallback for unknown domains: no sign handling, the coef is
    written as is (`str(coef)`) followed by the multiplication marker"""
    text:str = _signPrefix(False, isLeadingTerm)
    if (coef == 1) and (not isConstantTerm):
        return text
    text += str(coef)
    if not isConstantTerm:
        text += MULTIPLICATION_MARKERS[format]
    return text

def _formatSigned(coef:"SupportsDunderLT", isLeadingTerm:bool, isConstantTerm:bool, format:"PolynomialFormat")->str:
    isNegative:bool = (coef < 0)
    text:str = _signPrefix(isNegative, isLeadingTerm)
    absCoef = abs(coef) # type: ignore[arg-type]
    if (absCoef == 1) and (not isConstantTerm):
        return text # => the 1 is implicit
    return text + _numberText(absCoef)

def _formatUnsigned(coef:"SupportsStr", isLeadingTerm:bool, isConstantTerm:bool, format:"PolynomialFormat")->str:
    text:str = _signPrefix(False, isLeadingTerm)
    if (coef == 1) and (not isConstantTerm):
        return text
    return text + _numberText(coef)

# the int is arbitrary-precision => also the big integers
for _signedType in (int, float, Decimal, numpy.signedinteger, numpy.floating):
    formatCoefficient.register(_signedType, _formatSigned)
formatCoefficient.register(numpy.unsignedinteger, _formatUnsigned)


@formatCoefficient.register(Fraction)
def _formatFraction(coef:Fraction, isLeadingTerm:bool, isConstantTerm:bool, format:"PolynomialFormat")->str:
    if coef.denominator == 1:
        return _formatSigned(coef.numerator, isLeadingTerm, isConstantTerm, format)
    text:str = _signPrefix((coef < 0), isLeadingTerm)
    (numerator, denominator) = (abs(coef.numerator), coef.denominator)
    if format == "latex":
        text += f"\\frac{{{numerator}}}{{{denominator}}}"
    else: text += f"{numerator}/{denominator}"
    if not isConstantTerm:
        text += MULTIPLICATION_MARKERS[format]
    return text


def _formatComplex(coef:"complex|numpy.complexfloating", isLeadingTerm:bool, isConstantTerm:bool, format:"PolynomialFormat")->str:
    (real, imag) = (float(coef.real), float(coef.imag))
    if imag == 0:
        # => bare real
        return _formatSigned(real, isLeadingTerm, isConstantTerm, format)
    if real == 0:
        # => bare imaginary: (-)bi
        text:str = _signPrefix((imag < 0), isLeadingTerm)
        text += f"{_numberText(abs(imag))}i"
    else:
        imagSign:str = ("-" if imag < 0 else "+")
        text = _signPrefix(False, isLeadingTerm)
        text += f"({_numberText(real)}{imagSign}{_numberText(abs(imag))}i)"
    if not isConstantTerm:
        text += MULTIPLICATION_MARKERS[format]
    return text

formatCoefficient.register(complex, _formatComplex)
formatCoefficient.register(numpy.complexfloating, _formatComplex)
