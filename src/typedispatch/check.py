"""Runtime checks — does a value satisfy a descriptor?"""

from __future__ import annotations

import re
from typing import Any

from .descriptors import (
    KIND_ANY,
    KIND_BUILTIN,
    KIND_INTERFACE,
    KIND_NAN,
    KIND_NULL,
    KIND_SINGLETON,
    KIND_SPECIALIZED,
    KIND_USER,
    MISSING,
    NAN,
    NULL,
    OBJECT,
    TAG_ARRAY,
    TAG_BOOLEAN,
    TAG_FUNCTION,
    TAG_NUMBER,
    TAG_OBJECT,
    TAG_REGEXP,
    TAG_STRING,
    BuiltinClass,
    Descriptor,
    UserType,
    descriptor_of,
    is_nan,
)


# ============================================================
# BUILTIN TAGS
# ============================================================

# Genuine classes for each tag. Looked up along type(value).__mro__, so a
# subclass of a genuine class carries its tag and bool wins over int.
_TAG_BY_CLASS: dict[type, str] = {
    bool: TAG_BOOLEAN,
    int: TAG_NUMBER,
    float: TAG_NUMBER,
    str: TAG_STRING,
    list: TAG_ARRAY,
    re.Pattern: TAG_REGEXP,
}

# Singleton descriptors over these types match equal values, not just the same object.
_SCALAR_TYPES: tuple[type, ...] = (int, float, complex, str, bytes)


def is_absent(value: Any) -> bool:
    return value is None or value is MISSING


def builtin_tag(value: Any) -> str | None:
    """The builtin tag carried by the value's real class, or None.

    Reads `type(value)` rather than `isinstance`, which trusts an overridable
    `__class__` attribute.
    """
    if is_absent(value):
        return None
    for cls in type(value).__mro__:
        tag = _TAG_BY_CLASS.get(cls)
        if tag is not None:
            return tag
    if callable(value) and not issubclass(type(value), type):
        return TAG_FUNCTION
    return None


def _same_value(value: Any, expected: Any) -> bool:
    if value is expected:
        return True
    t = type(expected)
    if type(value) is not t or t not in _SCALAR_TYPES:
        return False
    return bool(value == expected)


# ============================================================
# CHECK
# ============================================================


def check(value: Any, descriptor: Any) -> bool:
    """Does `value` satisfy `descriptor`? Never raises; a predicate that raises is a non-match."""
    d = descriptor_of(descriptor)
    kind = d.kind
    if kind == KIND_ANY:
        return True
    if kind == KIND_NULL:
        return is_absent(value)
    if kind == KIND_NAN:
        return is_nan(value)
    if kind == KIND_BUILTIN:
        if d.tag == TAG_OBJECT:
            return not is_absent(value)
        return builtin_tag(value) == d.tag
    if kind == KIND_SINGLETON:
        return _same_value(value, d.value)
    if kind == KIND_SPECIALIZED:
        if not check(value, d.base):
            return False
        try:
            return d.predicate(value) is True
        except Exception:
            return False
    if kind == KIND_USER:
        return issubclass(type(value), d.cls)
    if kind == KIND_INTERFACE:
        return d.is_satisfied_by(value)
    return False


# ============================================================
# CONCRETE TYPES
# ============================================================


def concrete_keys(value: Any) -> tuple[Descriptor, ...]:
    """Descriptors naming the value's concrete type, most specific first."""
    if is_absent(value):
        return (NULL,)
    keys: list[Descriptor] = []
    if is_nan(value):
        keys.append(NAN)
    tag = builtin_tag(value)
    if tag is not None:
        keys.append(BuiltinClass(tag))
    for cls in type(value).__mro__:
        d = descriptor_of(cls)
        if isinstance(d, UserType):
            keys.append(d)
    keys.append(OBJECT)
    return tuple(keys)


def concrete_type(value: Any) -> Descriptor:
    return concrete_keys(value)[0]
