"""Tests for check(value, descriptor)."""

import math
import re
import types

import pytest

from typedispatch import (
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
    STRING,
    Singleton,
    Specialized,
    UserType,
    builtin_tag,
    check,
    concrete_keys,
    concrete_type,
)


def _impersonate(cls: type) -> object:
    """An object that claims `cls` through __class__ without being built by it."""

    class Impersonator:
        @property
        def __class__(self):
            return cls

    return Impersonator()


def _is_integer(n) -> bool:
    return isinstance(n, int) or n.is_integer()


# ============================================================
# Null
# ============================================================


def test_absence_values_are_null():
    assert check(None, NULL)
    assert check(MISSING, NULL)
    assert check(None, None)


@pytest.mark.parametrize("value", [{}, 0, "", [], False, 0.0])
def test_empty_values_are_not_null(value):
    assert not check(value, NULL)


# ============================================================
# NaN
# ============================================================


def test_nan():
    assert check(math.nan, NAN)
    assert check(float("inf") - float("inf"), NAN)
    assert check(math.nan, math.nan)
    assert not check(10, NAN)
    assert not check(10.0, NAN)
    assert not check("nan", NAN)


def test_nan_is_a_number_and_an_object():
    assert check(math.nan, NUMBER)
    assert check(math.nan, OBJECT)


# ============================================================
# Builtin classes
# ============================================================


@pytest.mark.parametrize(
    "value,descriptor",
    [
        ("testing", STRING),
        (10, NUMBER),
        (1.5, NUMBER),
        (True, BOOLEAN),
        ([], ARRAY),
        ([1, 2], ARRAY),
        (re.compile("poo"), REGEXP),
        (len, FUNCTION),
        (lambda: 0, FUNCTION),
        (check, FUNCTION),
    ],
)
def test_builtin_match(value, descriptor):
    assert check(value, descriptor)


@pytest.mark.parametrize(
    "value,descriptor",
    [
        (10, STRING),
        ("10", NUMBER),
        (10, BOOLEAN),
        (True, NUMBER),
        (10, ARRAY),
        ((1, 2), ARRAY),
        ("poo", REGEXP),
        (re.compile("test"), FUNCTION),
        (int, FUNCTION),
        (None, STRING),
    ],
)
def test_builtin_mismatch(value, descriptor):
    assert not check(value, descriptor)


def test_subclass_of_genuine_class_keeps_its_tag():
    class Name(str):
        pass

    class Count(int):
        pass

    assert check(Name("cats"), STRING)
    assert check(Count(7), NUMBER)
    assert not check(Count(7), BOOLEAN)


@pytest.mark.parametrize(
    "cls,descriptor",
    [
        (int, NUMBER),
        (float, NUMBER),
        (str, STRING),
        (bool, BOOLEAN),
        (list, ARRAY),
        (re.Pattern, REGEXP),
        (types.FunctionType, FUNCTION),
    ],
)
def test_impersonators_pass_isinstance_but_fail_check(cls, descriptor):
    fake = _impersonate(cls)
    assert isinstance(fake, cls)
    assert not check(fake, descriptor)


def test_builtin_tag():
    assert builtin_tag(True) == "Boolean"
    assert builtin_tag(3) == "Number"
    assert builtin_tag("x") == "String"
    assert builtin_tag(print) == "Function"
    assert builtin_tag(object()) is None
    assert builtin_tag(None) is None


# ============================================================
# Object and Any
# ============================================================


@pytest.mark.parametrize("value", [{}, object(), "", 1, math.nan, lambda: None, [], False])
def test_everything_present_is_object(value):
    assert check(value, OBJECT)
    assert check(value, object)


def test_absence_values_are_not_object():
    assert not check(None, OBJECT)
    assert not check(MISSING, OBJECT)


@pytest.mark.parametrize("value", [None, MISSING, 0, "x", math.nan, object()])
def test_any_matches_everything(value):
    assert check(value, ANY)


# ============================================================
# Singletons
# ============================================================


def test_singleton_scalars_match_by_value():
    assert check(5, Singleton(5))
    assert check(5, 5)
    assert check("on", "on")
    assert check(10**20, Singleton(10**20))
    assert not check(1.0, Singleton(1))
    assert not check(True, Singleton(1))
    assert not check(6, Singleton(5))


def test_singleton_objects_match_by_identity():
    sentinel = object()
    items = [1]
    assert check(sentinel, Singleton(sentinel))
    assert not check(object(), Singleton(sentinel))
    assert check(items, Singleton(items))
    assert not check([1], Singleton(items))


def test_singleton_none_is_distinct_from_null():
    assert check(None, Singleton(None))
    assert not check(MISSING, Singleton(None))


# ============================================================
# Specialized
# ============================================================


def test_specialized_checks_base_then_predicate():
    seen = []

    def is_integer(n):
        seen.append(n)
        return _is_integer(n)

    integer = Specialized(NUMBER, is_integer)
    assert check(3, integer)
    assert check(3.0, integer)
    assert not check(3.5, integer)
    assert not check("3", integer)
    assert "3" not in seen


def test_specialized_predicate_must_return_true():
    nonempty = Specialized(STRING, len)
    assert not check("abc", nonempty)
    assert check("abc", Specialized(STRING, lambda s: len(s) > 0))


def test_raising_predicate_is_a_non_match():
    whole = Specialized(NUMBER, lambda n: int(n) == n)
    assert check(4.0, whole)
    assert not check(math.inf, whole)
    assert not check(math.nan, whole)


def test_specialized_over_specialized():
    integer = Specialized(NUMBER, _is_integer)
    small = Specialized(integer, lambda n: n < 10)
    assert check(3, small)
    assert not check(30, small)
    assert not check(3.5, small)


# ============================================================
# User types
# ============================================================


class Animal:
    pass


class Dog(Animal):
    pass


def test_user_types_are_nominal():
    assert check(Dog(), Animal)
    assert check(Dog(), UserType(Dog))
    assert not check(Animal(), Dog)
    assert not check(None, Animal)


def test_check_is_deterministic():
    values = [None, 0, 1.5, math.nan, "s", [], Dog()]
    descriptors = [NULL, NAN, NUMBER, STRING, ARRAY, OBJECT, ANY, Animal]
    for v in values:
        for d in descriptors:
            assert check(v, d) == check(v, d)


# ============================================================
# Concrete types
# ============================================================


def test_concrete_keys():
    assert concrete_keys(None) == (NULL,)
    assert concrete_keys(3) == (NUMBER, OBJECT)
    assert concrete_keys(math.nan) == (NAN, NUMBER, OBJECT)
    assert concrete_keys(Dog()) == (UserType(Dog), UserType(Animal), OBJECT)
    assert concrete_keys(object()) == (OBJECT,)


def test_concrete_type():
    assert concrete_type("x") == STRING
    assert concrete_type(Dog()) == UserType(Dog)
