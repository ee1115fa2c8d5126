from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial, wraps
from typing import Any

from checkmore.predicate.errs import ArgumentTypeError, VerificationFailedError
from checkmore.types import UNDEFINED, PredicateFn, Verifier

logger = logging.getLogger(__name__)

DEFAULT_VERIFY_MESSAGE = "{name} check failed"


def maybe_modifier(fn: PredicateFn) -> PredicateFn:
    """
    Derive a predicate that passes when its first argument is None or UNDEFINED,
    and otherwise returns what ``fn`` returns.
    """

    @wraps(fn)
    def maybe(*args: Any, **kwargs: Any) -> bool:  # noqa: ANN401
        if not args or args[0] is None or args[0] is UNDEFINED:
            return True
        return fn(*args, **kwargs)

    return maybe


def not_modifier(fn: PredicateFn) -> PredicateFn:
    """
    Derive a predicate returning the negation of ``fn``.
    """

    @wraps(fn)
    def negated(*args: Any, **kwargs: Any) -> bool:  # noqa: ANN401
        return not fn(*args, **kwargs)

    return negated


def verify_modifier(name: str, fn: PredicateFn, *, default_message: str = DEFAULT_VERIFY_MESSAGE) -> Verifier:
    """
    Derive a verifier that raises when ``fn`` returns a falsy value.

    Args:
        name: Name the predicate is registered under. Substituted into ``default_message``.
        fn: Predicate to wrap.
        default_message: Message template used when the caller passes no message.

    Returns:
        A callable taking the predicate arguments and a keyword-only ``message``.
    """
    fallback = default_message.format(name=name)

    @wraps(fn)
    def verify(*args: Any, message: str | None = None) -> None:  # noqa: ANN401
        if not fn(*args):
            logger.debug("verify.%s failed for %r", name, args)
            raise VerificationFailedError(message or fallback)

    return verify


def curry2(fn: Callable[[Any, Any], bool]) -> Callable[..., Any]:
    """
    Allow a two-argument predicate to be called with only its first argument,
    returning a predicate waiting for the second one.

    Examples:
        >>> eq = curry2(lambda a, b: a == b)
        >>> eq(1, 1)
        True
        >>> eq(1)(2)
        False

    """

    @wraps(fn)
    def curried(a: Any, b: Any = UNDEFINED) -> Any:  # noqa: ANN401
        if b is UNDEFINED:
            return partial(fn, a)
        return fn(a, b)

    return curried


def ensure_callable(value: object, message: str) -> None:
    """
    Raises:
        ArgumentTypeError: If ``value`` is not callable.
    """
    if not callable(value):
        raise ArgumentTypeError(message, value)


def ensure_unempty_string(value: object, message: str) -> None:
    """
    Raises:
        ArgumentTypeError: If ``value`` is not a non-empty string.
    """
    if not isinstance(value, str) or not value:
        raise ArgumentTypeError(message, value)
