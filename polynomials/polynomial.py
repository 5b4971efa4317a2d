import logging
import operator

from .__typing import (
    Iterable, Iterator, Generic, NamedTuple, Mapping, Any,
    overload, cast, TYPE_CHECKING, assertIsinstance,
)
from .protocols import _T_MathRing
from .formats import formatPolynomial, PolynomialFormat, DEFAULT_FORMAT

if TYPE_CHECKING:
    from .protocols import SupportsLiteralParse

_logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_NAME: str = "x"



class DivisionResult(NamedTuple):
    """the result of the euclidean division of two polynomials:\n
    numerator == quotient * denominator + remainder\n
    with remainder null or deg(remainder) < deg(denominator)"""
    quotient: "Polynomial[Any]"
    remainder: "Polynomial[Any]"


class Polynomial(Generic[_T_MathRing]):
    """a polynomial of one variable, with its coefficients in any numeric domain
    (int, float, Fraction, complex, Decimal, numpy scalars, ...)\n
    the monomials are stored sparsely: {power: coef}, a null coef is never stored"""
    __slots__ = ("__coeffs", "__varName")

    def __init__(self,
            monomials:"Mapping[int, _T_MathRing]|None"=None, *,
            variableName:str=DEFAULT_VARIABLE_NAME)->None:
        """create a poly from the coeffs of its monomials: {power: coef}\n
        if you don't give monomials, create a null polynomial"""
        self.__varName:str = Polynomial.__checkVariableName(variableName)
        self.__coeffs:"dict[int, _T_MathRing]" = {}
        """power -> coef (never holds a null coef)"""
        if monomials is not None:
            for (power, coef) in monomials.items():
                self.setCoefficient(power, coef)

    @classmethod
    def zero(cls, variableName:str=DEFAULT_VARIABLE_NAME)->"Polynomial[_T_MathRing]":
        """the null polynomial"""
        return cls(variableName=variableName)

    @classmethod
    def fromCoefficients(cls,
            coeffs:"Iterable[_T_MathRing]", *,
            variableName:str=DEFAULT_VARIABLE_NAME)->"Polynomial[_T_MathRing]":
        """create a poly with the coeffs given from the highest power to the power 0:\n
        [a[n], ..., a[1], a[0]] -> a[n]*x^n + ... + a[1]*x + a[0]\n
        (leading null coeffs are allowed, they are dropped)"""
        coeffsList:"list[_T_MathRing]" = list(coeffs)
        poly: "Polynomial[_T_MathRing]" = cls(variableName=variableName)
        for (power, coef) in zip(range(len(coeffsList)-1, -1, -1), coeffsList):
            poly.setCoefficient(power, coef)
        return poly

    @classmethod
    def fromString(cls,
            text:str, domain:"SupportsLiteralParse[_T_MathRing]|None"=None, *,
            variableName:str=DEFAULT_VARIABLE_NAME)->"Polynomial[_T_MathRing]":
        """create a poly from its text (ex: "2x^2 + 3x - 1"), see `parsing.parsePolynomial`"""
        from .parsing import parsePolynomial
        return parsePolynomial(text, domain=domain, variableName=variableName)

    @staticmethod
    def __checkVariableName(variableName:str)->str:
        assertIsinstance(str, variableName)
        if (len(variableName) != 1) or (not variableName.isalpha()):
            raise ValueError(f"the variable name must be a single letter, got: {repr(variableName)}")
        return variableName

    @staticmethod
    def __checkPower(power:int)->int:
        power = operator.index(power) # => TypeError for non integers
        if power < 0:
            raise ValueError(f"the power of a monomial can't be negative, got: {power}")
        return power

    def __zeroLike(self)->"_T_MathRing":
        """the 0 of the domain of the coeffs (int 0 for the null polynomial)"""
        for coef in self.__coeffs.values():
            return coef - coef
        return cast("_T_MathRing", 0)

    def __oneLike(self)->"_T_MathRing":
        """the 1 of the domain of the coeffs (int 1 for the null polynomial)"""
        for coef in self.__coeffs.values():
            return coef ** 0
        return cast("_T_MathRing", 1)


    ### coefficients

    def setCoefficient(self, power:int, coef:"_T_MathRing")->None:
        """set the coef of the monomial of degree `power` (a null `coef` removes the monomial)"""
        power = Polynomial.__checkPower(power)
        if coef == 0:
            self.__coeffs.pop(power, None)
        else: self.__coeffs[power] = coef

    def getCoefficient(self, power:int)->"_T_MathRing":
        """return the coef of the monomial of degree `power` (the 0 of the domain when there is none)"""
        coef:"_T_MathRing|None" = self.__coeffs.get(power, None)
        if coef is None:
            return self.__zeroLike()
        return coef

    def addCoefficient(self, power:int, value:"_T_MathRing")->None:
        self.setCoefficient(power, self.getCoefficient(power) + value)

    def subCoefficient(self, power:int, value:"_T_MathRing")->None:
        self.setCoefficient(power, self.getCoefficient(power) - value)

    def mulCoefficient(self, power:int, value:"_T_MathRing")->None:
        self.setCoefficient(power, self.getCoefficient(power) * value)

    def divCoefficient(self, power:int, value:"_T_MathRing")->None:
        """the division by zero is left to the domain (ZeroDivisionError for the builtins)"""
        self.setCoefficient(power, self.getCoefficient(power) / value) # type: ignore[operator]

    def getCoefficients(self)->"list[_T_MathRing]":
        """return the dense coeffs, from the leading monomial down to the power 0
        (the null coeffs in between are inserted), [] for the null polynomial"""
        result:"list[_T_MathRing]" = []
        zero:"_T_MathRing" = self.__zeroLike()
        lastPower:"int|None" = None
        for (power, coef) in self.iterTerms(descending=True):
            if lastPower is not None:
                # add the skipped null coeffs
                result.extend([zero] * (lastPower - power - 1))
            result.append(coef)
            lastPower = power
        if lastPower is not None:
            # the trailing null coeffs (down to the power 0)
            result.extend([zero] * lastPower)
        return result

    def getMonomials(self)->"dict[int, _T_MathRing]":
        """safe function, don't allow to edit the polynomial (return a copy sorted by power)"""
        return dict(self.iterTerms())

    def iterTerms(self, descending:bool=False)->"Iterator[tuple[int, _T_MathRing]]":
        """iterate the (power, coef) of the monomials, sorted by power"""
        for power in sorted(self.__coeffs.keys(), reverse=descending):
            yield (power, self.__coeffs[power])

    def isZero(self)->bool:
        return len(self.__coeffs) == 0

    def __bool__(self)->bool:
        return not self.isZero()

    @property
    def degree(self)->"int|None":
        """the degree of the polynomial (-> None for the null poly)"""
        return max(self.__coeffs.keys(), default=None)

    @property
    def nbTerms(self)->int:
        """the number of (non null) monomials"""
        return len(self.__coeffs)

    @property
    def variableName(self)->str:
        return self.__varName

    def leadingTerm(self)->"tuple[int, _T_MathRing]":
        """return the (power, coef) of the monomial with the highest power"""
        degree:"int|None" = self.degree
        if degree is None:
            raise ValueError("the null polynomial has no leading term")
        return (degree, self.__coeffs[degree])

    @property
    def leadingCoefficient(self)->"_T_MathRing":
        return self.leadingTerm()[1]

    def clear(self)->None:
        self.__coeffs.clear()

    def copy(self)->"Polynomial[_T_MathRing]":
        new: "Polynomial[_T_MathRing]" = Polynomial(variableName=self.__varName)
        new.__coeffs = self.__coeffs.copy()
        return new


    ### calculus

    def evaluate(self, x:Any)->Any:
        """evaluate the polynomial at `x` with the Horner's method\n
        only the stored monomials are visited: the accumulator is multiplied
        by x^gap between two consecutive powers\n
        `x` can also be a numpy array (evaluated element wise)"""
        result:"Any|None" = None
        lastPower:"int|None" = None
        for (power, coef) in self.iterTerms(descending=True):
            if lastPower is None:
                result = coef
            else: result = result * (x ** (lastPower - power)) + coef
            lastPower = power
        if (result is None) or (lastPower is None):
            # => null poly
            return x * 0
        if lastPower != 0:
            # => no constant term, finish the last factorisation
            result = result * (x ** lastPower)
        return result

    def __call__(self, x:Any)->Any:
        return self.evaluate(x)

    def derivative(self)->"Polynomial[_T_MathRing]":
        result: "Polynomial[_T_MathRing]" = Polynomial(variableName=self.__varName)
        for (power, coef) in self.__coeffs.items():
            if power == 0:
                continue # => the derivative of the constant term is 0
            result.setCoefficient(power - 1, coef * power)
        return result


    ### comparison and text

    def __eq__(self, other:object)->bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return (self.__varName == other.__varName) and (self.__coeffs == other.__coeffs)

    def __repr__(self)->str:
        monomialsText = ", ".join(f"{power}: {repr(coef)}" for (power, coef) in self.iterTerms())
        return f"{self.__class__.__name__}({{{monomialsText}}}, variableName={repr(self.__varName)})"

    def __str__(self)->str:
        return formatPolynomial(self, DEFAULT_FORMAT)

    def formatWith(self, format:"PolynomialFormat")->str:
        """return the polynomial as a str in the given format: "standard", "latex" or "concise" """
        return formatPolynomial(self, format)


    ### internal arithmetic (in place primitives)

    def __checkSameVariable(self, other:"Polynomial[_T_MathRing]", opName:str)->None:
        if self.__varName != other.__varName:
            raise ValueError(
                f"can't {opName} two Polynomial with different variable name: "
                f"{repr(self.__varName)} != {repr(other.__varName)}")

    @classmethod
    def __internalAdd(cls,
            target:"Polynomial[_T_MathRing]", other:"Polynomial[_T_MathRing]",
            additionalPower:int=0)->"Polynomial[_T_MathRing]":
        """perform `target` += `other` * X^`additionalPower`, returns `target`"""
        # list(...) => `other` can be `target`
        for (power, coef) in list(other.__coeffs.items()):
            target.addCoefficient(power + additionalPower, coef)
        return target

    @classmethod
    def __internalSub(cls,
            target:"Polynomial[_T_MathRing]", other:"Polynomial[_T_MathRing]",
            additionalPower:int=0)->"Polynomial[_T_MathRing]":
        """perform `target` -= `other` * X^`additionalPower`, returns `target`"""
        for (power, coef) in list(other.__coeffs.items()):
            target.subCoefficient(power + additionalPower, coef)
        return target

    @classmethod
    def __internalMul(cls,
            poly1:"Polynomial[_T_MathRing]", poly2:"Polynomial[_T_MathRing]")->"Polynomial[_T_MathRing]":
        """return a new poly: `poly1` * `poly2` (naive convolution, O(n*m))"""
        result: "Polynomial[_T_MathRing]" = Polynomial(variableName=poly1.__varName)
        for (power1, coef1) in poly1.__coeffs.items():
            for (power2, coef2) in poly2.__coeffs.items():
                result.addCoefficient(power1 + power2, coef1 * coef2)
        return result

    @classmethod
    def __internalMulScalar(cls,
            target:"Polynomial[_T_MathRing]", scalar:"_T_MathRing")->"Polynomial[_T_MathRing]":
        """perform `target` *= `scalar`, returns `target`"""
        if scalar == 0:
            # => don't leave null coeffs in the poly
            target.clear()
            return target
        for (power, coef) in list(target.__coeffs.items()):
            target.setCoefficient(power, coef * scalar)
        return target

    @classmethod
    def __internalDivScalar(cls,
            target:"Polynomial[_T_MathRing]", scalar:"_T_MathRing")->"Polynomial[_T_MathRing]":
        """perform `target` /= `scalar`, returns `target`"""
        if scalar == 0:
            raise ZeroDivisionError("Cannot divide by zero.")
        for (power, coef) in list(target.__coeffs.items()):
            target.setCoefficient(power, coef / scalar) # type: ignore[operator]
        return target

    @classmethod
    def __internalDivide(cls,
            remainder:"Polynomial[_T_MathRing]", denominator:"Polynomial[_T_MathRing]")->"Polynomial[_T_MathRing]":
        """polynomial long division, `remainder` holds the numerator and
        becomes the remainder of the division, returns the quotient\n
        nothing is modified when `denominator` is the null polynomial"""
        if denominator.isZero():
            raise ZeroDivisionError("Cannot divide by the zero polynomial.")
        if denominator is remainder:
            denominator = denominator.copy()
        (denominatorDegree, denominatorCoef) = denominator.leadingTerm()
        numeratorDegree:"int|None" = remainder.degree
        quotient: "Polynomial[_T_MathRing]" = Polynomial(variableName=remainder.__varName)
        nbSteps:int = 0
        while (not remainder.isZero()) and (cast(int, remainder.degree) >= denominatorDegree):
            (remainderDegree, remainderCoef) = remainder.leadingTerm()
            term: "Polynomial[_T_MathRing]" = Polynomial(variableName=remainder.__varName)
            term.setCoefficient(
                remainderDegree - denominatorDegree,
                remainderCoef / denominatorCoef) # type: ignore[operator]
            Polynomial.__internalAdd(quotient, term)
            Polynomial.__internalSub(remainder, Polynomial.__internalMul(term, denominator))
            # the leading monomial is cancelled by construction,
            # inexact domains (float) could leave a residue at this power
            remainder.__coeffs.pop(remainderDegree, None)
            nbSteps += 1
        _logger.debug(
            "divided a polynomial of degree %s by one of degree %d in %d steps",
            numeratorDegree, denominatorDegree, nbSteps)
        return quotient


    ### operators

    def __pos__(self)->"Polynomial[_T_MathRing]":
        return self.copy()

    def __neg__(self)->"Polynomial[_T_MathRing]":
        return Polynomial.__internalMulScalar(self.copy(), -self.__oneLike())

    def __add__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"Polynomial[_T_MathRing]":
        if isinstance(other, Polynomial):
            self.__checkSameVariable(other, "add")
            return Polynomial.__internalAdd(self.copy(), other)
        # => scalar, only the constant term changes
        result: "Polynomial[_T_MathRing]" = self.copy()
        result.addCoefficient(0, other)
        return result

    def __radd__(self, other:"_T_MathRing")->"Polynomial[_T_MathRing]":
        return self.__add__(other)

    def __iadd__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"Polynomial[_T_MathRing]":
        if isinstance(other, Polynomial):
            self.__checkSameVariable(other, "add")
            return Polynomial.__internalAdd(self, other)
        self.addCoefficient(0, other)
        return self

    def __sub__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"Polynomial[_T_MathRing]":
        if isinstance(other, Polynomial):
            self.__checkSameVariable(other, "subtract")
            return Polynomial.__internalSub(self.copy(), other)
        result: "Polynomial[_T_MathRing]" = self.copy()
        result.subCoefficient(0, other)
        return result

    def __rsub__(self, other:"_T_MathRing")->"Polynomial[_T_MathRing]":
        # other - self
        result: "Polynomial[_T_MathRing]" = -self
        result.addCoefficient(0, other)
        return result

    def __isub__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"Polynomial[_T_MathRing]":
        if isinstance(other, Polynomial):
            self.__checkSameVariable(other, "subtract")
            return Polynomial.__internalSub(self, other)
        self.subCoefficient(0, other)
        return self

    def __mul__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"Polynomial[_T_MathRing]":
        if isinstance(other, Polynomial):
            self.__checkSameVariable(other, "multiply")
            return Polynomial.__internalMul(self, other)
        return Polynomial.__internalMulScalar(self.copy(), other)

    def __rmul__(self, other:"_T_MathRing")->"Polynomial[_T_MathRing]":
        return Polynomial.__internalMulScalar(self.copy(), other)

    def __imul__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"Polynomial[_T_MathRing]":
        if isinstance(other, Polynomial):
            self.__checkSameVariable(other, "multiply")
            self.__coeffs = Polynomial.__internalMul(self, other).__coeffs
            return self
        return Polynomial.__internalMulScalar(self, other)

    def __pow__(self, power:int)->"Polynomial[_T_MathRing]":
        """fast exponentiation (square and multiply), `power` >= 0"""
        power = operator.index(power)
        if power < 0:
            raise ValueError(f"can't raise a Polynomial to a negative power: {power}")
        result: "Polynomial[_T_MathRing]" = Polynomial(
            {0: self.__oneLike()}, variableName=self.__varName)
        # consider power[i] = (power >> i) % 2
        polyPow2i: "Polynomial[_T_MathRing]" = self
        while power != 0:
            if (power % 2) == 1:
                result = Polynomial.__internalMul(result, polyPow2i)
            power = power >> 1
            if power != 0:
                polyPow2i = Polynomial.__internalMul(polyPow2i, polyPow2i)
        return result

    @overload
    def __truediv__(self, other:"Polynomial[_T_MathRing]")->"DivisionResult": ...
    @overload
    def __truediv__(self, other:"_T_MathRing")->"Polynomial[_T_MathRing]": ...
    def __truediv__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"DivisionResult|Polynomial[_T_MathRing]":
        """by a Polynomial: the euclidean division -> (quotient, remainder)\n
        by a scalar: divide each coef\n
        the coeffs are divided with `/`: int coeffs become floats (and lose the
        precision of the big integers), use Fraction coeffs for an exact division"""
        if isinstance(other, Polynomial):
            return self.__divmod__(other)
        return Polynomial.__internalDivScalar(self.copy(), other)

    def __itruediv__(self, other:"Polynomial[_T_MathRing]|_T_MathRing")->"Polynomial[_T_MathRing]":
        """by a Polynomial: self becomes the quotient"""
        if isinstance(other, Polynomial):
            self.__checkSameVariable(other, "divide")
            quotient: "Polynomial[_T_MathRing]" = Polynomial.__internalDivide(self, other)
            self.__coeffs = quotient.__coeffs
            return self
        return Polynomial.__internalDivScalar(self, other)

    def __divmod__(self, other:"Polynomial[_T_MathRing]")->"DivisionResult":
        if not isinstance(other, Polynomial):
            return NotImplemented
        self.__checkSameVariable(other, "divide")
        remainder: "Polynomial[_T_MathRing]" = self.copy()
        quotient: "Polynomial[_T_MathRing]" = Polynomial.__internalDivide(remainder, other)
        return DivisionResult(quotient, remainder)

    def __floordiv__(self, other:"Polynomial[_T_MathRing]")->"Polynomial[_T_MathRing]":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.__divmod__(other).quotient

    def __mod__(self, other:"Polynomial[_T_MathRing]")->"Polynomial[_T_MathRing]":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.__divmod__(other).remainder

    def __imod__(self, other:"Polynomial[_T_MathRing]")->"Polynomial[_T_MathRing]":
        """self becomes the remainder"""
        if not isinstance(other, Polynomial):
            return NotImplemented
        self.__checkSameVariable(other, "divide")
        Polynomial.__internalDivide(self, other)
        return self
