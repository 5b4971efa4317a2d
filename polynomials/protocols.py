from .__typing import (
    Protocol, TypeVar, Any, Literal, runtime_checkable,
)

## generic type vars
_T = TypeVar("_T")
_T_co = TypeVar("_T_co", covariant=True)


# comparison protocols

class SupportsDunderLT(Protocol):
    def __lt__(self, __other:Any)->bool: ...


### support of mathematical operations
# the numeric domain of a polynomial's coefficients only needs to interact
# with the literals 0 and 1 (`coef == 0`, `coef * 0`, ...)

class SupportsMathAdd(Protocol):
    def __add__(self:"_T_MathAdd", other:"_T_MathAdd|Literal[0]")->"_T_MathAdd": ...
    def __sub__(self:"_T_MathAdd", other:"_T_MathAdd|Literal[0]")->"_T_MathAdd": ...
    def __neg__(self:"_T_MathAdd")->"_T_MathAdd": ...

class SupportsMathMul(Protocol):
    def __mul__(self:"_T_MathMul", other:"_T_MathMul|int")->"_T_MathMul": ...
    def __pow__(self:"_T_MathMul", other:"int")->"_T_MathMul": ...

class SupportsMathDiv(Protocol):
    def __truediv__(self:"_T_MathDiv", other:"_T_MathDiv|Literal[1]")->"_T_MathDiv": ...

class SupportsMathRing(SupportsMathAdd, SupportsMathMul, Protocol):
    """+, -, *, ** and the comparison to the literal 0"""
    def __eq__(self, other:object)->bool: ...

class SupportsMathField(SupportsMathRing, SupportsMathDiv, Protocol):
    """a ring that also supports the division (needed by the euclidean division)"""
    ...

_T_MathAdd = TypeVar("_T_MathAdd", bound=SupportsMathAdd)
_T_MathMul = TypeVar("_T_MathMul", bound=SupportsMathMul)
_T_MathDiv = TypeVar("_T_MathDiv", bound=SupportsMathDiv)
_T_MathRing = TypeVar("_T_MathRing", bound=SupportsMathRing)
_T_MathField = TypeVar("_T_MathField", bound=SupportsMathField)


### optional capabilities of a numeric domain (independent of the arithmetic)

@runtime_checkable
class SupportsLiteralParse(Protocol[_T_co]):
    """(runtime checkable) anything that builds a coefficient from its text literal"""
    def __call__(self, __literal:str)->_T_co: ...

@runtime_checkable
class SupportsStr(Protocol):
    """(runtime checkable)"""
    def __str__(self)->str: ...
