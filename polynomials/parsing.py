"""parsing of a polynomial from its text, ex: "-3x^2 + 4x - 5", "2x5-x4+4x2-3",
"- 2 * x^2 -3*x + 5", "(1+2i)*x^2 - 3/4*x"\n
each term is: <sign> <coefficient>? [*] <variable>? (^? <power>)?
 - the sign of the first term is optional
 - a missing coefficient means 1 (of the domain)
 - a term without the variable nor power is the constant term, a variable without power means power 1
 - a power without the variable applies to the variable: "2^3" and "2 3" are 2x^3
 - the coefficient is a numeric literal or a bracketed literal, given to
   the literal parser of the domain (float, int, Fraction, complex, Decimal, ...)
 - the terms of the same power are summed\n
the matched terms must rebuild the whole text (spaces ignored), otherwise the text is rejected"""

import logging
import re

from .__typing import Any, Iterable, cast
from .protocols import SupportsLiteralParse, _T_MathRing
from .polynomial import Polynomial, DEFAULT_VARIABLE_NAME

_logger = logging.getLogger(__name__)

DEFAULT_DOMAIN: "SupportsLiteralParse[Any]" = float

RESERVED_VARIABLE_NAMES: "frozenset[str]" = frozenset("eEij")
"""letters that are part of the coefficients literals (exponent, imaginary unit)"""

_TERM_PATTERN = re.compile(r"""
    (?P<sign>[+-])\s*
    (?P<coefficient>
        \([^()]*\)
        |\d+(?:\.\d*)?(?:[eE][+-]?\d+)?(?:/\d+)?[ij]?
    )?\s*
    \*?\s*
    (?P<variable>[^\W\d_])?
    (?:\^?(?P<power>\d+))?
""", re.VERBOSE)
_WHITESPACES_PATTERN = re.compile(r"\s+")


class PolynomialParseError(ValueError):
    """the text of a polynomial is malformed\n
    `text`: the whole text given to the parser\n
    `substring`: the part of the text that caused the error"""
    def __init__(self, message:str, text:str, substring:"str|None"=None)->None:
        super().__init__(message)
        self.text:str = text
        self.substring:"str|None" = substring


def _parseComplex(literal:str)->complex:
    """complex literal with `i` or `j` as the imaginary unit"""
    return complex(literal.replace("i", "j"))

_literalParsers:"dict[Any, SupportsLiteralParse[Any]]" = {
    complex: _parseComplex,
}
"""domain -> parser of its literals, the domains not registered are their own parser (float("2.5"))"""

def registerLiteralParser(domain:Any, parser:"SupportsLiteralParse[_T_MathRing]")->None:
    """use `parser` to read the coefficients literals when parsing with `domain`"""
    _literalParsers[domain] = parser

def getLiteralParser(domain:"SupportsLiteralParse[_T_MathRing]")->"SupportsLiteralParse[_T_MathRing]":
    return _literalParsers.get(domain, domain)


def _removeWhitespaces(text:str)->str:
    return _WHITESPACES_PATTERN.sub("", text)

def _parseError(message:str, text:str, substring:"str|None"=None)->PolynomialParseError:
    _logger.debug("failed to parse the polynomial %r: %s", text, message)
    return PolynomialParseError(message, text, substring)

def _checkBrackets(text:str)->None:
    openedAt:"list[int]" = []
    for (index, char) in enumerate(text):
        if char == "(":
            openedAt.append(index)
        elif char == ")":
            if len(openedAt) == 0:
                raise _parseError(f"unbalanced bracket ')' at index {index}", text, text[: index+1])
            openedAt.pop()
    if len(openedAt) != 0:
        index = openedAt[0]
        raise _parseError(f"unclosed bracket '(' at index {index}", text, text[index: ])

def _firstUnmatched(normalized:str, matches:"Iterable[re.Match[str]]")->str:
    """return the first part of `normalized` that isn't covered by the `matches`"""
    lastEnd:int = 0
    for match in matches:
        gap:str = normalized[lastEnd: match.start()]
        if gap.strip() != "":
            return gap.strip()
        lastEnd = match.end()
    return normalized[lastEnd: ].strip()

def _parseCoefficient(
        literal:str, parser:"SupportsLiteralParse[_T_MathRing]", text:str)->"_T_MathRing":
    if literal.startswith("("):
        # => bracketed literal
        literal = literal[1: -1]
    literal = _removeWhitespaces(literal)
    try: return parser(literal)
    except (ValueError, ArithmeticError, TypeError) as error:
        raise _parseError(f"invalid coefficient literal: {repr(literal)} ({error})", text, literal) from error


def parsePolynomial(
        text:str, domain:"SupportsLiteralParse[_T_MathRing]|None"=None,
        variableName:str=DEFAULT_VARIABLE_NAME)->"Polynomial[_T_MathRing]":
    """return the polynomial described by `text`, its coefficients are read
    with the literal parser of `domain` (default: float)\n
    raise a PolynomialParseError when the text is malformed (no partial result)"""
    if variableName in RESERVED_VARIABLE_NAMES:
        raise ValueError(f"the variable name {repr(variableName)} can't be parsed, it is part of the numbers literals")
    if domain is None:
        domain = cast("SupportsLiteralParse[_T_MathRing]", DEFAULT_DOMAIN)
    parser:"SupportsLiteralParse[_T_MathRing]" = getLiteralParser(domain)
    poly: "Polynomial[_T_MathRing]" = Polynomial(variableName=variableName)

    stripped:str = text.strip()
    if len(stripped) == 0:
        return poly # => null polynomial
    _checkBrackets(stripped)
    # the first term must have a sign like the others
    normalized:str = (stripped if stripped[0] in "+-" else f"+ {stripped}")

    matches:"list[re.Match[str]]" = []
    for match in _TERM_PATTERN.finditer(normalized):
        matches.append(match)
        term:str = match.group(0).strip()
        literal:"str|None" = match.group("coefficient")
        variable:"str|None" = match.group("variable")
        if (literal is None) and (variable is None):
            raise _parseError(f"the term {repr(term)} has no coefficient and no variable", text, term)
        if (variable is not None) and (variable != variableName):
            raise _parseError(
                f"invalid variable {repr(variable)} in the term {repr(term)}, "
                f"only {repr(variableName)} is allowed", text, term)

        coef:"_T_MathRing" = (parser("1") if literal is None
                              else _parseCoefficient(literal, parser, text))
        if match.group("sign") == "-":
            coef = -coef
        power:int
        if match.group("power") is not None:
            power = int(match.group("power"))
        elif variable is None:
            power = 0
        else: power = 1
        poly.addCoefficient(power, coef)

    # every char (spaces apart) must belong to a term
    capturedTerms:str = "".join(match.group(0) for match in matches)
    if _removeWhitespaces(capturedTerms) != _removeWhitespaces(normalized):
        unmatched:str = _firstUnmatched(normalized, matches)
        raise _parseError(f"invalid polynomial format near: {repr(unmatched)}", text, unmatched)
    return poly
