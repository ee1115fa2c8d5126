from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, NamedTuple, Protocol


class _Undefined:
    """
    Marker for "no value at all", as opposed to an explicit ``None``.
    """

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

PredicateFn = Callable[..., bool]


class Verifier(Protocol):
    """
    A callable that raises instead of returning False.
    """

    def __call__(self, *args: Any, message: str | None = None) -> None:  # noqa: ANN401
        """
        Check the arguments and raise when they do not pass.

        Args:
            *args: Arguments passed to the underlying predicate.
            message: Message of the raised error.

        Raises:
            VerificationFailedError: If the check failed.
        """

        ...


class NamedPredicate(NamedTuple):
    """
    A predicate function together with the name it is registered under.

    Examples:
        >>> bit = NamedPredicate("bit", lambda v: v in (0, 1))
        >>> bit.name
        'bit'
        >>> bit.fn(1)
        True

    """

    name: str
    fn: Callable[..., Any]
