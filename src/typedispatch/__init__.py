"""typedispatch — runtime type descriptors, contracts and multiple dispatch."""

from __future__ import annotations

from .check import builtin_tag, check, concrete_keys, concrete_type
from .classes import define_class
from .descriptors import (
    ANY,
    ARRAY,
    BOOLEAN,
    FUNCTION,
    MISSING,
    NAN,
    NULL,
    NUMBER,
    OBJECT,
    REGEXP,
    SELF,
    STRING,
    BuiltinClass,
    Descriptor,
    Singleton,
    Specialized,
    UserType,
    array_of,
    descriptor_of,
)
from .errors import (
    AmbiguousDispatch,
    ArgumentTypeViolation,
    ArityMismatch,
    DispatchError,
    NoApplicableMethod,
    ReturnTypeViolation,
)
from .generic import GenericFunction, Method
from .interface import Interface
from .proxy import Proxy, ProxyType, proxy
from .signature import Signature, WrappedFunction
from .specificity import more_specific_than

__version__ = "0.1.0"

__all__ = [
    "ANY",
    "ARRAY",
    "BOOLEAN",
    "FUNCTION",
    "MISSING",
    "NAN",
    "NULL",
    "NUMBER",
    "OBJECT",
    "REGEXP",
    "SELF",
    "STRING",
    "AmbiguousDispatch",
    "ArgumentTypeViolation",
    "ArityMismatch",
    "BuiltinClass",
    "Descriptor",
    "DispatchError",
    "GenericFunction",
    "Interface",
    "Method",
    "NoApplicableMethod",
    "Proxy",
    "ProxyType",
    "ReturnTypeViolation",
    "Signature",
    "Singleton",
    "Specialized",
    "UserType",
    "WrappedFunction",
    "array_of",
    "builtin_tag",
    "check",
    "concrete_keys",
    "concrete_type",
    "define_class",
    "descriptor_of",
    "more_specific_than",
    "proxy",
]
