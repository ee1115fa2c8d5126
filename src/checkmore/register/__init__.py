from .errs import NamedFunctionRequiredError, RegisterError
from .registry import Check, PredicateRegistry, check, create_check
from .settings import CheckSettings

__all__ = [
    "Check",
    "CheckSettings",
    "NamedFunctionRequiredError",
    "PredicateRegistry",
    "RegisterError",
    "check",
    "create_check",
]
