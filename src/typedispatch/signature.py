"""Signatures — per-position argument contracts with an optional return contract."""

from __future__ import annotations

from dataclasses import dataclass
import functools
import types
from typing import Any, Callable, Sequence

from .check import check
from .descriptors import Descriptor, descriptor_of, descriptors_of
from .errors import ArgumentTypeViolation, ArityMismatch, ReturnTypeViolation


@dataclass(frozen=True)
class Signature:
    """Argument descriptors plus an optional return descriptor.

    `returns=None` declares no return contract; pass NULL to require a None result.
    """

    params: tuple[Descriptor, ...]
    returns: Descriptor | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", descriptors_of(self.params))
        if self.returns is not None:
            object.__setattr__(self, "returns", descriptor_of(self.returns))

    @classmethod
    def from_list(cls, types: Sequence[Any]) -> Signature:
        """Compact form: every element but the last is a parameter, the last is the return."""
        if len(types) == 0:
            return cls(())
        return cls(tuple(types[:-1]), descriptor_of(types[-1]))

    @classmethod
    def coerce(cls, contract: Signature | Sequence[Any]) -> Signature:
        if isinstance(contract, Signature):
            return contract
        return cls.from_list(contract)

    @property
    def arity(self) -> int:
        return len(self.params)

    def display(self) -> str:
        inner = ", ".join(p.display() for p in self.params)
        if self.returns is None:
            return f"({inner})"
        return f"({inner}) -> {self.returns.display()}"

    def check_args(self, args: Sequence[Any], where: str = "") -> None:
        """Raise on the first arity or argument violation."""
        if len(args) != len(self.params):
            raise ArityMismatch(len(self.params), len(args), where)
        for i, (arg, expected) in enumerate(zip(args, self.params)):
            if not check(arg, expected):
                raise ArgumentTypeViolation(i, expected, arg, where)

    def check_return(self, result: Any, where: str = "") -> Any:
        if self.returns is not None and not check(result, self.returns):
            raise ReturnTypeViolation(self.returns, result, where)
        return result

    def wrap(self, fn: Callable[..., Any]) -> WrappedFunction:
        return WrappedFunction(fn, self)


class WrappedFunction:
    """A callable whose calls are checked against `contract`."""

    def __init__(self, fn: Callable[..., Any], contract: Signature):
        functools.update_wrapper(self, fn)
        self.__wrapped__ = fn
        self.contract = contract
        self._where = getattr(fn, "__qualname__", None) or repr(fn)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if kwargs:
            raise ArityMismatch(self.contract.arity, len(args) + len(kwargs), self._where)
        self.contract.check_args(args, self._where)
        result = self.__wrapped__(*args)
        return self.contract.check_return(result, self._where)

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        # bind like a plain function when stored on a class
        if obj is None:
            return self
        return types.MethodType(self, obj)

    def __repr__(self) -> str:
        return f"<WrappedFunction {self._where} {self.contract.display()}>"
