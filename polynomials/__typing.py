import sys

from typing import (
    Iterable, Any, Sequence, Iterator,
    Generic, TypeVar, NamedTuple, Union,
    overload, Callable, Mapping, cast,
    TYPE_CHECKING, Dict, Tuple, ClassVar,
)
from typing import _GenericAlias # type: ignore

if sys.version_info < (3, 12):
    from typing_extensions import (
        Literal, Self, TypeAlias, Protocol,
        runtime_checkable, get_args, )
else: from typing import (
        Literal, Self, TypeAlias, Protocol,
        runtime_checkable, get_args, )


_T = TypeVar("_T")


def assertIsinstance(type_:"type[_T]|tuple[type[_T], ...]", value:Any)->"_T":
    """assert that the type of value match the given type_\n
    also support `typing.Union`\n
    isn't suppressed with -OO"""
    if isinstance(type_, _GenericAlias) and getattr(type_, "__origin__") is Union:
        # => type_ is an Union
        type_ = cast("tuple[type[_T], ...]", getattr(type_, "__args__"))
        if None in type_:
            type_ = cast("tuple[type[_T], ...]", tuple(type(None) if t is None else t for t in type_))
    if not isinstance(value, type_):
        raise TypeError(f"the type of value: {type(value)} isn't an instance of type_={type_}")
    return value

def assertLiteral(literal:"Any", value:"str")->"str":
    """assert that `value` is one of the strings of the `Literal` type `literal`\n
    isn't suppressed with -OO"""
    allowed: "tuple[str, ...]" = get_args(literal)
    if value not in allowed:
        raise ValueError(f"the value: {repr(value)} isn't one of {allowed}")
    return value
