from .predicate import ArgumentTypeError, VerificationFailedError
from .register import Check, CheckSettings, NamedFunctionRequiredError, PredicateRegistry, check, create_check
from .types import UNDEFINED, NamedPredicate

__all__ = [
    "UNDEFINED",
    "ArgumentTypeError",
    "Check",
    "CheckSettings",
    "NamedFunctionRequiredError",
    "NamedPredicate",
    "PredicateRegistry",
    "VerificationFailedError",
    "check",
    "create_check",
]
