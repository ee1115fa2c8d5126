from .composite import (
    COMPOSITE_PREDICATES,
    VERIFIERS,
    all_,
    array_of_arrays_of_strings,
    array_of_strings,
    every,
    map_,
    raises,
    unempty_array,
    verify_all,
    verify_array_of_arrays_of_strings,
    verify_array_of_strings,
)
from .errs import ArgumentTypeError, PredicateError, VerificationFailedError
from .low_level import LOW_LEVEL_PREDICATES
from .predicate import curry2, maybe_modifier, not_modifier, verify_modifier

DEFAULT_PREDICATES = LOW_LEVEL_PREDICATES + COMPOSITE_PREDICATES

__all__ = [
    "COMPOSITE_PREDICATES",
    "DEFAULT_PREDICATES",
    "LOW_LEVEL_PREDICATES",
    "VERIFIERS",
    "ArgumentTypeError",
    "PredicateError",
    "VerificationFailedError",
    "all_",
    "array_of_arrays_of_strings",
    "array_of_strings",
    "curry2",
    "every",
    "map_",
    "maybe_modifier",
    "not_modifier",
    "raises",
    "unempty_array",
    "verify_all",
    "verify_array_of_arrays_of_strings",
    "verify_array_of_strings",
    "verify_modifier",
]
