"""Interfaces — named capability sets satisfied only through explicit registration."""

from __future__ import annotations

import logging
from types import SimpleNamespace
from typing import Any, Callable, Mapping, Sequence

from .check import concrete_keys
from .descriptors import KIND_INTERFACE, SELF, Descriptor, descriptor_of
from .generic import GenericFunction
from .signature import Signature

logger = logging.getLogger(__name__)


class Interface(Descriptor):
    """A set of required ops, each declared in compact list form.

    The receiver comes first in every op; `SELF` stands for the interface
    itself, which does not exist yet while its ops are being written:

        Seq = Interface("Seq", {"first": [SELF, ANY], "nth": [SELF, NUMBER, ANY]})

    `generics.<op>` dispatches an op on the receiver's concrete type.
    """

    kind = KIND_INTERFACE

    def __init__(self, name: str, ops: Mapping[str, Signature | Sequence[Any]]):
        self.name = name
        self.ops: dict[str, Signature] = {}
        for op, contract in ops.items():
            if not isinstance(contract, Signature):
                contract = Signature.from_list([self if t is SELF else t for t in contract])
            if contract.arity == 0:
                raise ValueError(f"{name}.{op} must take the receiver as its first argument")
            self.ops[op] = contract
        self._tables: dict[Descriptor, dict[str, Callable[..., Any]]] = {}
        self.generics = SimpleNamespace(
            **{op: GenericFunction(f"{name}.{op}") for op in self.ops}
        )

    def display(self) -> str:
        return self.name

    def implement(self, concrete: Any, table: Mapping[str, Callable[..., Any]]) -> None:
        """Register `table` as the implementation of this interface for `concrete`."""
        key = descriptor_of(concrete)
        unknown = sorted(op for op in table if op not in self.ops)
        if unknown:
            raise ValueError(f"{self.name} declares no op(s) {', '.join(unknown)}")
        if key in self._tables:
            raise ValueError(f"{self.name} is already implemented for {key.display()}")
        self._tables[key] = dict(table)
        for op, fn in table.items():
            contract = self.ops[op]
            # dispatch on the concrete type in the receiver position
            concrete_contract = Signature((key,) + contract.params[1:], contract.returns)
            getattr(self.generics, op).define_method(
                concrete_contract.params, concrete_contract.wrap(fn)
            )
        missing = [op for op in self.ops if op not in table]
        if missing:
            logger.debug("%s: partial implementation for %s lacks %s", self.name, key.display(), missing)
        else:
            logger.debug("%s: implemented for %s", self.name, key.display())

    def implementation_for(self, value: Any) -> dict[str, Callable[..., Any]] | None:
        """The method table registered for the value's concrete type, if any."""
        for key in concrete_keys(value):
            table = self._tables.get(key)
            if table is not None:
                return table
        return None

    def _complete(self, table: Mapping[str, Any] | None) -> bool:
        if table is None:
            return False
        for op in self.ops:
            if op not in table:
                return False
        return True

    def is_satisfied_by(self, value: Any) -> bool:
        return self._complete(self.implementation_for(value))

    def is_implemented_by(self, descriptor: Any) -> bool:
        """Is there a complete registration keyed on exactly this descriptor?"""
        return self._complete(self._tables.get(descriptor_of(descriptor)))
