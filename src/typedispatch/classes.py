"""Class builder — fields, constructor, methods and interfaces in one declaration.

    Dude = define_class(
        "Dude",
        fields={"name": (STRING, "Guy"), "age": (NUMBER, 0)},
        init=([STRING, NUMBER, NULL], initialize),
        methods={"speak": ([STRING], speak)},
    )

Each field gets `get_<field>()` and a contract-checked `set_<field>(value)`
that returns the new value. Contracts use the compact list form and exclude
the receiver. Inheritance is plain subclassing through `extends=`.
"""

from __future__ import annotations

import copy
import functools
import sys
from typing import Any, Callable, Iterable, Mapping

from .descriptors import MISSING, Descriptor, descriptor_of
from .interface import Interface
from .signature import Signature

Entry = Callable[..., Any] | tuple[Any, Callable[..., Any]]


def _split(entry: Entry) -> tuple[Signature | None, Callable[..., Any]]:
    if isinstance(entry, tuple):
        contract, fn = entry
        return Signature.coerce(contract), fn
    return None, entry


def _checked(where: str, contract: Signature | None, fn: Callable[..., Any]) -> Callable[..., Any]:
    """Method checking its arguments (receiver excluded) and result against `contract`."""
    if contract is None:
        return fn

    @functools.wraps(fn)
    def method(self: Any, *args: Any) -> Any:
        contract.check_args(args, where)
        return contract.check_return(fn(self, *args), where)

    method.contract = contract  # type: ignore[attr-defined]
    return method


def _accessors(cls_name: str, field: str, descriptor: Descriptor) -> dict[str, Callable[..., Any]]:
    def getter(self: Any) -> Any:
        return getattr(self, field)

    def setter(self: Any, value: Any) -> Any:
        setattr(self, field, value)
        return value

    getter.__name__ = "get_" + field
    setter.__name__ = "set_" + field
    contract = Signature((descriptor,), descriptor)
    return {
        getter.__name__: getter,
        setter.__name__: _checked(f"{cls_name}.{setter.__name__}", contract, setter),
    }


def _forward(op: str) -> Callable[..., Any]:
    """Interface op calling the receiver's own method, so subclass overrides win."""

    def call(receiver: Any, *args: Any) -> Any:
        return getattr(receiver, op)(*args)

    call.__name__ = op
    return call


def define_class(
    name: str,
    *,
    fields: Mapping[str, Any] | None = None,
    init: Entry | None = None,
    methods: Mapping[str, Entry] | None = None,
    implements: Iterable[Interface] = (),
    extends: type | None = None,
) -> type:
    own_fields: dict[str, tuple[Descriptor, Any]] = {}
    for field, spec in (fields or {}).items():
        if isinstance(spec, tuple):
            descriptor, default = spec
        else:
            descriptor, default = spec, MISSING
        own_fields[field] = (descriptor_of(descriptor), default)
    all_fields = dict(getattr(extends, "_fields", {}))
    all_fields.update(own_fields)

    init_contract: Signature | None = None
    init_fn: Callable[..., Any] | None = None
    if init is not None:
        init_contract, init_fn = _split(init)
    elif extends is None:
        init_contract, init_fn = Signature(()), lambda self: None

    def __init__(self: Any, *args: Any) -> None:
        if init_fn is None:
            super(cls, self).__init__(*args)
            for field, (_, default) in own_fields.items():
                if not hasattr(self, field):
                    setattr(self, field, copy.copy(default))
            return
        if init_contract is not None:
            init_contract.check_args(args, name)
        for field, (_, default) in all_fields.items():
            setattr(self, field, copy.copy(default))
        result = init_fn(self, *args)
        if init_contract is not None:
            init_contract.check_return(result, name)

    namespace: dict[str, Any] = {
        "__init__": __init__,
        "__module__": sys._getframe(1).f_globals.get("__name__", "__main__"),
        "_fields": all_fields,
    }
    for field, (descriptor, _) in own_fields.items():
        namespace.update(_accessors(name, field, descriptor))
    for method_name, entry in (methods or {}).items():
        contract, fn = _split(entry)
        namespace[method_name] = _checked(f"{name}.{method_name}", contract, fn)

    bases = (extends,) if extends is not None else ()
    cls = type(name, bases, namespace)

    for iface in implements:
        missing = [op for op in iface.ops if not callable(getattr(cls, op, None))]
        if missing:
            raise ValueError(f"{name} does not define {', '.join(missing)} required by {iface.name}")
        iface.implement(cls, {op: _forward(op) for op in iface.ops})
    return cls
