"""
Predicates composed of the low level ones, and batch verification.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from checkmore.predicate.errs import ArgumentTypeError, VerificationFailedError
from checkmore.predicate.low_level import bool_, is_array, lower_case, object_, string
from checkmore.predicate.predicate import ensure_callable, ensure_unempty_string
from checkmore.types import UNDEFINED, NamedPredicate


def unempty_array(a: object) -> bool:
    """
    Returns true if the argument is an array with at least one value.
    """
    return is_array(a) and len(a) > 0


def array_of_strings(a: object, check_lower_case: bool = False) -> bool:  # noqa: FBT001, FBT002
    """
    Returns true if given array only has strings.

    Args:
        a: Array to check.
        check_lower_case: Also check that all strings are lower case.
    """
    valid = is_array(a) and all(string(item) for item in a)
    if valid and bool_(check_lower_case) and check_lower_case:
        return all(lower_case(item) for item in a)
    return valid


def array_of_arrays_of_strings(a: object, check_lower_case: bool = False) -> bool:  # noqa: FBT001, FBT002
    """
    Returns true if given argument is an array of arrays of strings.
    """
    return is_array(a) and all(array_of_strings(item, check_lower_case) for item in a)


def raises(fn: Callable[[], Any], error_validator: Any = None) -> bool:  # noqa: ANN401
    """
    Checks if given function raises an error.

    Args:
        fn: Called without arguments.
        error_validator: Optional callable receiving the raised exception. A non-callable validator never passes.

    Raises:
        ArgumentTypeError: If ``fn`` is not callable.
    """
    ensure_callable(fn, "expected function that raises")
    try:
        fn()
    except Exception as err:  # noqa: BLE001
        if error_validator is None:
            return True
        if callable(error_validator):
            return bool(error_validator(err))
        return False
    return False


def map_(obj: Mapping[str, Any], predicates: Mapping[str, Callable[[Any], Any]]) -> dict[str, bool]:
    """
    Apply every predicate to the property of the same name. Missing properties are checked as UNDEFINED.
    """
    return {prop: bool(check(obj.get(prop, UNDEFINED))) for prop, check in predicates.items()}


def every(results: Mapping[str, Any] | Iterable[Any]) -> bool:
    """
    Returns true if every result is truthy. For a mapping, its values are checked.
    """
    values = results.values() if isinstance(results, Mapping) else results
    return all(values)


def _ensure_batch_args(obj: object, predicates: object) -> None:
    if not object_(obj):
        raise ArgumentTypeError("missing object to check", obj)
    if not object_(predicates):
        raise ArgumentTypeError("missing predicates object", predicates)
    for prop, check in predicates.items():
        ensure_callable(check, f"not a predicate function for {prop}")


def all_(obj: Mapping[str, Any], predicates: Mapping[str, Callable[[Any], Any]]) -> bool:
    """
    Checks if object passes all rules in predicates.

    Properties of ``obj`` without a predicate are ignored.

    Args:
        obj: Object to check.
        predicates: Rules to check, one per property.

    Raises:
        ArgumentTypeError: If either argument is not a mapping or a rule is not callable.

    Examples:
        >>> from checkmore.predicate.low_level import number, string
        >>> all_({"a": 1, "b": "x"}, {"a": number, "b": string})
        True
        >>> all_({"a": "y", "b": "x"}, {"a": number, "b": string})
        False

    """
    _ensure_batch_args(obj, predicates)
    return every(map_(obj, predicates))


def verify_all(obj: Mapping[str, Any], predicates: Mapping[str, Callable[[Any], Any]], message: str) -> None:
    """
    Same as [checkmore.predicate.composite.all_][], but raises when the object does not pass.

    Raises:
        ArgumentTypeError: If ``message`` is empty, or the arguments are rejected by ``all_``.
        VerificationFailedError: If any property fails its predicate. Carries ``message``.
    """
    ensure_unempty_string(message, "missing error string")
    if not all_(obj, predicates):
        raise VerificationFailedError(message)


def verify_array_of_strings(
    a: object,
    check_lower_case: bool = False,  # noqa: FBT001, FBT002
    *,
    message: str | None = None,
) -> None:
    """
    Raises:
        VerificationFailedError: Naming the first position that is not a (lower case) string.
    """
    prefix = f"{message}\n" if message else ""
    if not is_array(a):
        raise VerificationFailedError(f"{prefix}expected an array, got {a!r}")
    for k, item in enumerate(a):
        if not string(item):
            raise VerificationFailedError(f"{prefix}expected string at position {k} got {item!r}")
        if check_lower_case is True and not lower_case(item):
            raise VerificationFailedError(f"{prefix}expected lower case string at position {k} got {item!r}")


def verify_array_of_arrays_of_strings(
    a: object,
    check_lower_case: bool = False,  # noqa: FBT001, FBT002
    *,
    message: str | None = None,
) -> None:
    """
    Raises:
        VerificationFailedError: Naming the first position that is not an array of strings.
    """
    prefix = f"{message}\n" if message else ""
    if not is_array(a):
        raise VerificationFailedError(f"{prefix}expected a top level array, got {a!r}")
    for k, item in enumerate(a):
        verify_array_of_strings(
            item,
            check_lower_case,
            message=f"{prefix}expected an array of strings at position {k} got {item!r}",
        )


COMPOSITE_PREDICATES: tuple[NamedPredicate, ...] = (
    NamedPredicate("unempty_array", unempty_array),
    NamedPredicate("array_of_strings", array_of_strings),
    NamedPredicate("array_of_arrays_of_strings", array_of_arrays_of_strings),
    NamedPredicate("all", all_),
    NamedPredicate("every", every),
    NamedPredicate("raises", raises),
)

VERIFIERS: tuple[NamedPredicate, ...] = (
    NamedPredicate("all", verify_all),
    NamedPredicate("array_of_strings", verify_array_of_strings),
    NamedPredicate("array_of_arrays_of_strings", verify_array_of_arrays_of_strings),
)
