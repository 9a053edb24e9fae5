"""Generic functions — multimethods dispatched on the runtime types of all positional arguments.

Resolution:
  1. keep the methods whose arity matches and whose every descriptor checks
     against the corresponding argument;
  2. drop every method dominated by another one (no position less specific,
     at least one position strictly more specific), until stable;
  3. a single survivor runs; several incomparable survivors are a tie, broken
     by registration order unless the generic is strict.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable, Sequence

from .check import check, concrete_type
from .descriptors import Descriptor, descriptors_of
from .errors import AmbiguousDispatch, NoApplicableMethod
from .specificity import more_specific_than

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Method:
    types: tuple[Descriptor, ...]
    implementation: Callable[..., Any]
    index: int

    @property
    def arity(self) -> int:
        return len(self.types)

    def applies_to(self, args: Sequence[Any]) -> bool:
        if len(args) != len(self.types):
            return False
        for arg, expected in zip(args, self.types):
            if not check(arg, expected):
                return False
        return True

    def display(self) -> str:
        return "(" + ", ".join(t.display() for t in self.types) + ")"


def dominates(a: Method, b: Method) -> bool:
    """Is `a` at least as specific as `b` everywhere and strictly more somewhere?"""
    strictly = False
    for da, db in zip(a.types, b.types):
        if more_specific_than(db, da):
            return False
        if more_specific_than(da, db):
            strictly = True
    return strictly


def most_specific(candidates: list[Method]) -> list[Method]:
    """Remove dominated methods until none is dominated. Keeps registration order."""
    survivors = candidates
    while True:
        remaining: list[Method] = []
        for m in survivors:
            beaten = False
            for other in survivors:
                if other is not m and dominates(other, m):
                    beaten = True
                    break
            if not beaten:
                remaining.append(m)
        # a dominance cycle leaves nothing standing; keep the last stable set
        if len(remaining) == 0 or len(remaining) == len(survivors):
            return remaining or survivors
        survivors = remaining


class GenericFunction:
    """A callable choosing its implementation from the types of all its arguments.

    Methods accumulate through `define_method`/`define_methods` and are read
    through a snapshot at each call, so implementations may call the generic
    recursively.
    """

    def __init__(self, name: str | None = None, *, strict: bool = False):
        self.__name__ = name if name is not None else "generic"
        self.strict = strict
        self._methods: tuple[Method, ...] = ()

    @property
    def methods(self) -> tuple[Method, ...]:
        return self._methods

    def define_method(self, types: Sequence[Any], implementation: Callable[..., Any]) -> Callable[..., Any]:
        method = Method(descriptors_of(types), implementation, len(self._methods))
        self._methods = self._methods + (method,)
        logger.debug("%s: defined method %s", self.__name__, method.display())
        return implementation

    def define_methods(self, *pairs: Any) -> None:
        """Register `types1, impl1, types2, impl2, ...` in order."""
        if len(pairs) % 2 != 0:
            raise ValueError("define_methods expects alternating types and implementations")
        i = 0
        while i < len(pairs):
            self.define_method(pairs[i], pairs[i + 1])
            i += 2

    def method(self, *types: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator form of `define_method`."""

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            return self.define_method(types, fn)

        return decorator

    def applicable_methods(self, *args: Any) -> list[Method]:
        return [m for m in self._methods if m.applies_to(args)]

    def resolve(self, *args: Any) -> Method:
        return self._resolve(self._methods, args)

    def _resolve(self, methods: tuple[Method, ...], args: tuple[Any, ...]) -> Method:
        candidates = [m for m in methods if m.applies_to(args)]
        if len(candidates) == 0:
            raise NoApplicableMethod(self.__name__, tuple(concrete_type(a) for a in args))
        if len(candidates) == 1:
            return candidates[0]
        survivors = most_specific(candidates)
        if len(survivors) == 1:
            return survivors[0]
        if self.strict:
            raise AmbiguousDispatch(self.__name__, tuple(survivors))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s: %d methods tie, using the earliest %s",
                self.__name__,
                len(survivors),
                survivors[0].display(),
            )
        return survivors[0]

    def __call__(self, *args: Any) -> Any:
        method = self._resolve(self._methods, args)
        return method.implementation(*args)

    def __repr__(self) -> str:
        return f"<GenericFunction {self.__name__} with {len(self._methods)} method(s)>"
