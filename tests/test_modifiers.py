"""
Properties of the derived maybe, not and verify variants, checked for every default predicate.
"""

from __future__ import annotations

import pytest

from checkmore import UNDEFINED, VerificationFailedError
from checkmore.predicate import DEFAULT_PREDICATES, curry2, maybe_modifier, not_modifier, verify_modifier

from .conftest import PREDICATE_ARGS, predicate_cases

CASES = predicate_cases()
CASE_IDS = [f"{name}-{i}" for i, (name, _) in enumerate(CASES)]


def test_every_default_predicate_has_cases():
    assert set(PREDICATE_ARGS) == {p.name for p in DEFAULT_PREDICATES}


class TestMaybe:
    @pytest.mark.parametrize("name", [p.name for p in DEFAULT_PREDICATES])
    @pytest.mark.parametrize("missing", [None, UNDEFINED], ids=["None", "UNDEFINED"])
    def test_missing_value_passes(self, check, name, missing):
        assert check.maybe[name](missing) is True

    @pytest.mark.parametrize(("name", "args"), CASES, ids=CASE_IDS)
    def test_defined_value_propagates(self, check, name, args):
        assert check.maybe[name](*args) == check[name](*args)

    def test_no_arguments_passes(self):
        assert maybe_modifier(bool)() is True


class TestNot:
    @pytest.mark.parametrize(("name", "args"), CASES, ids=CASE_IDS)
    def test_negates(self, check, name, args):
        assert check.not_[name](*args) is (not check[name](*args))


class TestVerify:
    @pytest.mark.parametrize(("name", "args"), CASES, ids=CASE_IDS)
    def test_raises_only_on_failure(self, check, name, args):
        passed = check[name](*args)
        verify = check.verify[name]

        if name == "all":
            # verify.all takes the message as its third positional argument.
            args = (*args, "batch failed")

        if passed:
            assert verify(*args) is None
        else:
            with pytest.raises(VerificationFailedError):
                verify(*args)

    def test_message(self):
        verify = verify_modifier("answer", lambda x: x == 42)

        with pytest.raises(VerificationFailedError) as exc_info:
            verify(1, message="not the answer")

        assert exc_info.value.message == "not the answer"
        assert str(exc_info.value) == "not the answer"

    def test_default_message(self):
        verify = verify_modifier("answer", lambda x: x == 42, default_message="{name}?")

        with pytest.raises(VerificationFailedError, match=r"^answer\?$"):
            verify(1)

    def test_is_assertion_error(self):
        with pytest.raises(AssertionError):
            verify_modifier("answer", lambda x: x == 42)(1)


def test_double_negation():
    assert not_modifier(not_modifier(bool))(1) is True


class TestCurry2:
    def test_full_call(self):
        assert curry2(lambda a, b: a == b)(1, 1)

    def test_partial_call(self):
        equal_one = curry2(lambda a, b: a == b)(1)

        assert equal_one(1)
        assert not equal_one(2)

    def test_curried_length(self, check):
        has_three = check.length(3)

        assert has_three("abc")
        assert has_three([1, 2, 3])
        assert not has_three("ab")
