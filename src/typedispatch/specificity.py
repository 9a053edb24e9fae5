"""Specificity — the partial order used to rank descriptors that match the same value."""

from __future__ import annotations

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
    NUMBER,
    OBJECT,
    TAG_OBJECT,
    Descriptor,
    descriptor_of,
)


def _is_unit(d: Descriptor) -> bool:
    return d.kind == KIND_SINGLETON or d.kind == KIND_NULL


def generalizations(d: Descriptor) -> tuple[Descriptor, ...]:
    """The descriptors `d` is immediately more specific than.

    Chains always end at OBJECT, which has no generalizations.
    """
    kind = d.kind
    if kind == KIND_NAN:
        return (NUMBER,)
    if kind == KIND_SPECIALIZED:
        return (d.base,)
    if kind == KIND_BUILTIN:
        if d.tag == TAG_OBJECT:
            return ()
        return (OBJECT,)
    if kind == KIND_INTERFACE:
        return (OBJECT,)
    if kind == KIND_USER:
        out: list[Descriptor] = []
        for base in d.cls.__bases__:
            g = descriptor_of(base)
            if g not in out:
                out.append(g)
        if OBJECT not in out:
            out.append(OBJECT)
        return tuple(out)
    return ()


def more_specific_than(a: Any, b: Any) -> bool:
    """Is `a` strictly more specific than `b`? False when incomparable."""
    a = descriptor_of(a)
    b = descriptor_of(b)
    if a == b:
        return False
    # singletons and Null sit below every structural descriptor
    if _is_unit(a):
        return not _is_unit(b)
    if _is_unit(b):
        return False
    if b.kind == KIND_ANY:
        return True
    if a.kind == KIND_ANY:
        return False
    # a registered implementor ranks below its interface; OBJECT never does
    if b.kind == KIND_INTERFACE and a != OBJECT and b.is_implemented_by(a):
        return True
    for g in generalizations(a):
        if g == b or more_specific_than(g, b):
            return True
    return False
