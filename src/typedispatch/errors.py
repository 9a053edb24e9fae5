"""Contract and dispatch errors.

Every error carries a `kind` discriminant so callers can branch on the failure
without parsing messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .descriptors import Descriptor
    from .generic import Method


class DispatchError(TypeError):
    """Base error for contract checking and dispatch."""

    kind: str = "dispatch"

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg


class ArityMismatch(DispatchError):
    kind = "arity"

    def __init__(self, expected: int, actual: int, where: str = ""):
        prefix = where + ": " if where else ""
        super().__init__(f"{prefix}expected {expected} argument(s), got {actual}")
        self.expected = expected
        self.actual = actual


class ArgumentTypeViolation(DispatchError):
    kind = "argument"

    def __init__(self, position: int, expected: Descriptor, value: Any, where: str = ""):
        prefix = where + ": " if where else ""
        super().__init__(
            f"{prefix}argument {position} expected {expected.display()}, got {value!r}"
        )
        self.position = position
        self.expected = expected
        self.value = value


class ReturnTypeViolation(DispatchError):
    kind = "return"

    def __init__(self, expected: Descriptor, value: Any, where: str = ""):
        prefix = where + ": " if where else ""
        super().__init__(f"{prefix}return value expected {expected.display()}, got {value!r}")
        self.expected = expected
        self.value = value


class NoApplicableMethod(DispatchError):
    kind = "no-method"

    def __init__(self, name: str, arg_types: tuple[Descriptor, ...]):
        shown = ", ".join(t.display() for t in arg_types)
        super().__init__(f"no method of {name} applicable to ({shown})")
        self.name = name
        self.arg_types = arg_types


class AmbiguousDispatch(DispatchError):
    kind = "ambiguous"

    def __init__(self, name: str, candidates: tuple[Method, ...]):
        shown = "; ".join(m.display() for m in candidates)
        super().__init__(f"ambiguous call to {name}: {shown}")
        self.name = name
        self.candidates = candidates
