"""Type descriptors — immutable values naming a type or type-like predicate."""

from __future__ import annotations

from dataclasses import dataclass
import math
import re
import types
from typing import Any, Callable, ClassVar


# ============================================================
# KINDS AND TAGS
# ============================================================

KIND_NULL: str = "null"
KIND_NAN: str = "nan"
KIND_ANY: str = "any"
KIND_BUILTIN: str = "builtin"
KIND_SINGLETON: str = "singleton"
KIND_SPECIALIZED: str = "specialized"
KIND_INTERFACE: str = "interface"
KIND_USER: str = "user"

TAG_NUMBER: str = "Number"
TAG_STRING: str = "String"
TAG_BOOLEAN: str = "Boolean"
TAG_ARRAY: str = "Array"
TAG_FUNCTION: str = "Function"
TAG_REGEXP: str = "RegExp"
TAG_OBJECT: str = "Object"


class _Missing:
    """The "no value" sentinel; satisfies NULL alongside None."""

    _instance: ClassVar[_Missing | None] = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# ============================================================
# DESCRIPTORS
# ============================================================


class Descriptor:
    """Base type for every descriptor variant."""

    kind: str

    def display(self) -> str:
        raise NotImplementedError

    def check(self, value: Any) -> bool:
        from .check import check

        return check(value, self)

    def __repr__(self) -> str:
        return f"<{self.display()}>"


@dataclass(frozen=True, repr=False)
class Primitive(Descriptor):
    """Null, NaN and Any: descriptors with no payload."""

    kind: str

    def display(self) -> str:
        return _PRIMITIVE_NAMES[self.kind]


_PRIMITIVE_NAMES: dict[str, str] = {
    KIND_NULL: "Null",
    KIND_NAN: "NaN",
    KIND_ANY: "Any",
}


@dataclass(frozen=True, repr=False)
class BuiltinClass(Descriptor):
    kind: ClassVar[str] = KIND_BUILTIN
    tag: str

    def display(self) -> str:
        return self.tag


@dataclass(frozen=True, eq=False, repr=False)
class Singleton(Descriptor):
    """Matches one value: by identity, or by equality for immutable scalars."""

    kind: ClassVar[str] = KIND_SINGLETON
    value: Any

    def display(self) -> str:
        return repr(self.value)


@dataclass(frozen=True, eq=False, repr=False)
class Specialized(Descriptor):
    """A base descriptor refined by a pure predicate."""

    kind: ClassVar[str] = KIND_SPECIALIZED
    base: Descriptor
    predicate: Callable[[Any], bool]
    name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", descriptor_of(self.base))

    def display(self) -> str:
        if self.name is not None:
            return self.name
        pred_name = getattr(self.predicate, "__name__", "predicate")
        return f"{self.base.display()}[{pred_name}]"


@dataclass(frozen=True, repr=False)
class UserType(Descriptor):
    """A user-defined class, matched nominally through the value's real type."""

    kind: ClassVar[str] = KIND_USER
    cls: type

    def display(self) -> str:
        return self.cls.__qualname__


# Shared instances
NULL: Descriptor = Primitive(KIND_NULL)
NAN: Descriptor = Primitive(KIND_NAN)
ANY: Descriptor = Primitive(KIND_ANY)
NUMBER: Descriptor = BuiltinClass(TAG_NUMBER)
STRING: Descriptor = BuiltinClass(TAG_STRING)
BOOLEAN: Descriptor = BuiltinClass(TAG_BOOLEAN)
ARRAY: Descriptor = BuiltinClass(TAG_ARRAY)
FUNCTION: Descriptor = BuiltinClass(TAG_FUNCTION)
REGEXP: Descriptor = BuiltinClass(TAG_REGEXP)
OBJECT: Descriptor = BuiltinClass(TAG_OBJECT)

BUILTIN_TAGS: tuple[str, ...] = (
    TAG_NUMBER,
    TAG_STRING,
    TAG_BOOLEAN,
    TAG_ARRAY,
    TAG_FUNCTION,
    TAG_REGEXP,
    TAG_OBJECT,
)


# ============================================================
# COERCION
# ============================================================

# Python classes standing for each builtin tag when used as a descriptor.
_CLASS_DESCRIPTORS: dict[type, Descriptor] = {
    int: NUMBER,
    float: NUMBER,
    str: STRING,
    bool: BOOLEAN,
    list: ARRAY,
    re.Pattern: REGEXP,
    types.FunctionType: FUNCTION,
    types.BuiltinFunctionType: FUNCTION,
    types.MethodType: FUNCTION,
    object: OBJECT,
    type(None): NULL,
}


def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def descriptor_of(x: Any) -> Descriptor:
    """Coerce a descriptor-like value into a Descriptor."""
    if isinstance(x, Descriptor):
        return x
    if x is None or x is MISSING:
        return NULL
    if is_nan(x):
        return NAN
    if isinstance(x, type):
        builtin = _CLASS_DESCRIPTORS.get(x)
        if builtin is not None:
            return builtin
        return UserType(x)
    return Singleton(x)


def descriptors_of(xs: Any) -> tuple[Descriptor, ...]:
    return tuple(descriptor_of(x) for x in xs)


def array_of(element: Any) -> Specialized:
    """Lists whose every element satisfies `element`."""
    from .check import check

    elem = descriptor_of(element)

    def every_element(value: list) -> bool:
        for item in value:
            if not check(item, elem):
                return False
        return True

    return Specialized(ARRAY, every_element, name=f"ArrayOf({elem.display()})")


class _SelfMarker:
    """Placeholder for an Interface inside its own op declarations."""

    def __repr__(self) -> str:
        return "SELF"


SELF: Any = _SelfMarker()
