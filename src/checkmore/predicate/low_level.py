"""
Low level predicates.

Every predicate here is a plain function of one or two values returning a bool.
An "array" is a list or tuple, an "object" is a Mapping and a "number" is a
finite real that is not a bool.
"""

from __future__ import annotations

import math
import re
from collections.abc import Collection, Mapping
from datetime import date
from numbers import Real
from typing import Any

from checkmore.predicate.predicate import curry2
from checkmore.types import UNDEFINED, NamedPredicate

ARRAY_TYPES = (list, tuple)


def fn(x: object) -> bool:
    return callable(x)


def string(x: object) -> bool:
    return isinstance(x, str)


def unempty_string(x: object) -> bool:
    return string(x) and bool(x)


def upper_case(x: object) -> bool:
    """
    Checks if given string is already in upper case.
    """
    return string(x) and x.upper() == x


def lower_case(x: object) -> bool:
    """
    Checks if given string is already in lower case.
    """
    return string(x) and x.lower() == x


def is_array(x: object) -> bool:
    return isinstance(x, ARRAY_TYPES)


def object_(x: object) -> bool:
    return isinstance(x, Mapping)


def empty_object(x: object) -> bool:
    return object_(x) and len(x) == 0


def nulled(x: object) -> bool:
    return x is None


def number(x: object) -> bool:
    """
    Checks if given value is a finite real number. Booleans are not numbers.
    """
    return isinstance(x, Real) and not isinstance(x, bool) and math.isfinite(x)


def int_number(x: object) -> bool:
    return number(x) and x % 1 == 0


def float_number(x: object) -> bool:
    return number(x) and x % 1 != 0


def positive_number(x: object) -> bool:
    return number(x) and x > 0


def negative_number(x: object) -> bool:
    return number(x) and x < 0


def is_date(x: object) -> bool:
    return isinstance(x, date)


def valid_date(x: object) -> bool:
    """
    Checks if argument is a valid date instance.

    Python dates can not be constructed in an invalid state, so this is the same as ``date``.
    """
    return is_date(x)


def regexp(x: object) -> bool:
    return isinstance(x, re.Pattern)


def error(x: object) -> bool:
    return isinstance(x, BaseException)


def instance(x: object, type_: type | tuple[type, ...]) -> bool:
    return isinstance(x, type_)


def has_length(x: Any, k: Any) -> bool:  # noqa: ANN401
    """
    Checks if given array or string has length ``k``. Arguments are swapped when ``x`` is the number.
    """
    if number(x) and not number(k):
        return has_length(k, x)
    return (is_array(x) or string(x)) and len(x) == k


def defined(value: object) -> bool:
    """
    Checks if argument is defined or not.
    """
    return value is not UNDEFINED


def primitive(value: object) -> bool:
    """
    Returns true if the argument is a primitive value.
    """
    return isinstance(value, (bool, int, float, complex, str, bytes))


def zero(x: object) -> bool:
    """
    Returns true if the value is a number 0.
    """
    return number(x) and x == 0


def same(a: object, b: object) -> bool:
    """
    Identity comparison.
    """
    return a is b


def bit(value: object) -> bool:
    """
    Checks if given value is 0 or 1.
    """
    return number(value) and value in (0, 1)


def bool_(value: object) -> bool:
    """
    Checks if given value is True or False.
    """
    return isinstance(value, bool)


def has(o: Any, prop: Any) -> bool:  # noqa: ANN401
    """
    Checks if given object has a property. Mappings are checked for the key, other objects for the attribute.
    Only None and UNDEFINED have no properties at all, empty containers still have their attributes.
    """
    if o is None or o is UNDEFINED or not unempty_string(prop):
        return False
    if object_(o):
        return prop in o
    return getattr(o, prop, UNDEFINED) is not UNDEFINED


def empty_string(a: object) -> bool:
    return string(a) and not a


def empty(a: object) -> bool:
    """
    Returns true if given value is [], {} or ''.
    """
    if isinstance(a, Collection):
        return len(a) == 0
    return False


def unempty(a: object) -> bool:
    """
    Returns true if given value has a non-zero length. Values without a length count as unempty.
    """
    if isinstance(a, Collection):
        return len(a) > 0
    return True


def equal(a: object, b: object) -> bool:
    """
    Shallow equality. Booleans only equal booleans, so ``equal(True, 1)`` is False.
    """
    if bool_(a) is not bool_(b):
        return False
    return a == b


LOW_LEVEL_PREDICATES: tuple[NamedPredicate, ...] = (
    NamedPredicate("bit", bit),
    NamedPredicate("bool", bool_),
    NamedPredicate("date", is_date),
    NamedPredicate("defined", defined),
    NamedPredicate("empty", empty),
    NamedPredicate("empty_object", empty_object),
    NamedPredicate("empty_string", empty_string),
    NamedPredicate("equal", curry2(equal)),
    NamedPredicate("error", error),
    NamedPredicate("float_number", float_number),
    NamedPredicate("fn", fn),
    NamedPredicate("has", has),
    NamedPredicate("instance", instance),
    NamedPredicate("int_number", int_number),
    NamedPredicate("array", is_array),
    NamedPredicate("is_array", is_array),
    NamedPredicate("length", curry2(has_length)),
    NamedPredicate("negative", negative_number),
    NamedPredicate("negative_number", negative_number),
    NamedPredicate("nulled", nulled),
    NamedPredicate("number", number),
    NamedPredicate("object", object_),
    NamedPredicate("positive", positive_number),
    NamedPredicate("positive_number", positive_number),
    NamedPredicate("primitive", primitive),
    NamedPredicate("regexp", regexp),
    NamedPredicate("same", same),
    NamedPredicate("string", string),
    NamedPredicate("unempty", unempty),
    NamedPredicate("unempty_string", unempty_string),
    NamedPredicate("upper_case", upper_case),
    NamedPredicate("lower_case", lower_case),
    NamedPredicate("valid_date", valid_date),
    NamedPredicate("zero", zero),
)
