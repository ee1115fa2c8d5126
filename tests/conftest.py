"""
Shared fixtures for checkmore tests.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

import pytest
from polyfactory.factories.pydantic_factory import ModelFactory

from checkmore import Check, CheckSettings, create_check
from checkmore.predicate.low_level import number, string

# ============================================================================
# Context Types
# ============================================================================


@dataclass
class User:
    """Dataclass with attributes for ``has``."""

    age: int
    active: bool
    name: str = "Anonymous"


SHARED = object()


def _boom() -> None:
    msg = "boom"
    raise ValueError(msg)


# ============================================================================
# Sample arguments, one list of argument tuples per default predicate.
# The first argument is never None or UNDEFINED.
# ============================================================================

PREDICATE_ARGS: dict[str, list[tuple[Any, ...]]] = {
    "bit": [(0,), (1,), (2,), ("1",), (True,)],
    "bool": [(True,), (False,), (0,)],
    "date": [(date(2024, 1, 1),), (datetime(2024, 1, 1, 12),), ("2024-01-01",)],
    "defined": [(0,), ("",), (False,)],
    "empty": [("",), ([],), ({},), ("a",), ([0],), (0,)],
    "empty_object": [({},), ({"a": 1},), ([],)],
    "empty_string": [("",), ("a",), ([],)],
    "equal": [(1, 1), (1, 2), ("a", "a")],
    "error": [(ValueError("x"),), ("x",), (ValueError,)],
    "float_number": [(1.5,), (2,), (2.0,), (math.nan,)],
    "fn": [(len,), (lambda: 1,), (1,)],
    "has": [({"a": 1}, "a"), ({"a": 1}, "b"), (User(age=1, active=True), "age"), ({"a": 1}, "")],
    "instance": [(1, int), ("a", int), (User(age=1, active=True), User)],
    "int_number": [(2,), (2.0,), (2.5,), (True,)],
    "array": [([],), ((),), ("a",), ({},)],
    "is_array": [([1],), ("a",)],
    "length": [([1, 2], 2), ("ab", 3), (2, "ab"), ({"a": 1}, 1)],
    "negative": [(-1,), (1,), (0,)],
    "negative_number": [(-0.5,), ("-1",)],
    "nulled": [(0,), ("",)],
    "number": [(1,), (1.5,), (math.inf,), (math.nan,), (True,), ("1",)],
    "object": [({},), ({"a": 1},), ([],), ("a",)],
    "positive": [(1,), (0,), (-1,)],
    "positive_number": [(0.1,), ("1",)],
    "primitive": [(1,), ("a",), (True,), ([],), ({},)],
    "regexp": [(re.compile("a"),), ("a",)],
    "same": [(SHARED, SHARED), ([], [])],
    "string": [("a",), ("",), (1,)],
    "unempty": [("a",), ([],), ({"a": 1},), (5,)],
    "unempty_string": [("a",), ("",), (1,)],
    "upper_case": [("AB",), ("Ab",), (1,)],
    "lower_case": [("ab",), ("aB",), (1,)],
    "valid_date": [(date(2024, 1, 1),), ("2024-01-01",)],
    "zero": [(0,), (0.0,), (False,), (1,)],
    "unempty_array": [([1],), ([],), ("a",)],
    "array_of_strings": [(["a", "b"],), (["a", "B"], True), (["a", 1],), ("ab",)],
    "array_of_arrays_of_strings": [([["a"], ["b"]],), ([["a"], [1]],), ([["A"]], True), (["a"],)],
    "all": [({"a": 1, "b": "x"}, {"a": number, "b": string}), ({"a": "y"}, {"a": number})],
    "every": [([True, 1],), ([True, 0],), ({"a": True},), ([],)],
    "raises": [(_boom,), (lambda: 1,), (_boom, lambda e: isinstance(e, KeyError))],
}


def predicate_cases() -> list[tuple[str, tuple[Any, ...]]]:
    return [(name, args) for name, cases in PREDICATE_ARGS.items() for args in cases]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def check() -> Check:
    """Provides a freshly built namespace with the default predicates."""
    return create_check()


@pytest.fixture
def adult_user() -> User:
    return User(age=25, active=True, name="Alice")


class CheckSettingsFactory(ModelFactory[CheckSettings]):
    """Random registrar settings."""

    __model__ = CheckSettings

    verify_message = "{name} did not pass"
