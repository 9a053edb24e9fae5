"""Proxies — wrappers enforcing Signatures on selected members of a base value."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .signature import Signature, WrappedFunction


class ProxyType:
    """Member contracts built once and applied to any number of base values."""

    def __init__(self, members: Mapping[str, Signature | Sequence[Any]]):
        self.members: dict[str, Signature] = {
            name: Signature.coerce(contract) for name, contract in members.items()
        }

    def __call__(self, base: Any) -> Proxy:
        return Proxy(base, self)

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}{sig.display()}" for name, sig in self.members.items())
        return f"<ProxyType {inner}>"


def _lookup(base: Any, name: str) -> Any:
    """Read `name` from the base: by key for mappings, by attribute otherwise."""
    if isinstance(base, Mapping):
        try:
            return base[name]
        except KeyError:
            raise AttributeError(f"{type(base).__name__} base has no member '{name}'") from None
    return getattr(base, name)


class Proxy:
    """Exposes contract-checked methods of `base` and forwards its plain data.

    A mapping base is read by key, anything else by attribute. Callable
    members of the base that are not listed are unreachable. The proxy
    itself is read-only.
    """

    __slots__ = ("_base", "_members")

    def __init__(self, base: Any, proxy_type: ProxyType):
        members: dict[str, WrappedFunction] = {}
        for name, contract in proxy_type.members.items():
            # bound method, so the base keeps its own receiver
            members[name] = contract.wrap(_lookup(base, name))
        object.__setattr__(self, "_base", base)
        object.__setattr__(self, "_members", members)

    def __getattr__(self, name: str) -> Any:
        members = object.__getattribute__(self, "_members")
        if name in members:
            return members[name]
        value = _lookup(object.__getattribute__(self, "_base"), name)
        if callable(value):
            raise AttributeError(f"'{name}' is not exposed by this proxy")
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"cannot set '{name}' through a proxy")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"cannot delete '{name}' through a proxy")

    def __dir__(self) -> list[str]:
        return sorted(object.__getattribute__(self, "_members"))

    def __repr__(self) -> str:
        return f"<Proxy of {object.__getattribute__(self, '_base')!r}>"


def proxy(base: Any, exposed: Mapping[str, Signature | Sequence[Any]]) -> Proxy:
    """Wrap `base`, checking calls to each member named in `exposed`."""
    return ProxyType(exposed)(base)
