from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from threading import RLock
from typing import Any

from caseconverter import snakecase

from checkmore.predicate import DEFAULT_PREDICATES, VERIFIERS
from checkmore.predicate.errs import ArgumentTypeError
from checkmore.predicate.predicate import maybe_modifier, not_modifier, verify_modifier
from checkmore.register.errs import NamedFunctionRequiredError
from checkmore.register.settings import CheckSettings
from checkmore.types import NamedPredicate

logger = logging.getLogger(__name__)


class PredicateRegistry(Mapping[str, Callable[..., Any]]):
    """
    An ordered, append-only mapping of snake_case names to functions. The first registration of a name wins.

    Lookups accept camelCase aliases of the registered snake_case names, and attribute access.

    Examples:
        >>> reg = PredicateRegistry("example")
        >>> reg.add("lower_case", str.islower)
        True
        >>> reg.add("lower_case", str.isupper)
        False
        >>> reg.lowerCase("abc")
        True

    """

    def __init__(self, name: str):
        self.name = name
        self.__predicates: dict[str, Callable[..., Any]] = {}
        self.__lock = RLock()

    def __getitem__(self, key: str) -> Callable[..., Any]:
        try:
            return self.__predicates[key]
        except KeyError:
            if not isinstance(key, str):
                raise
            alias = snakecase(key)
            if alias == key or alias not in self.__predicates:
                raise
            return self.__predicates[alias]

    def __iter__(self) -> Iterator[str]:
        return iter(self.__predicates)

    def __len__(self) -> int:
        return len(self.__predicates)

    def __getattr__(self, item: str) -> Callable[..., Any]:
        if item.startswith("_"):
            raise AttributeError(item)
        try:
            return self[item]
        except KeyError:
            msg = f"{self.name!r} has no predicate {item!r}"
            raise AttributeError(msg) from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {len(self)} predicates)"

    def add(self, name: str, fn: Callable[..., Any]) -> bool:
        """
        Add ``fn`` under the snake_case form of ``name`` unless that name is already taken.

        Returns:
            Whether ``fn`` was added.
        """
        name = snakecase(name)
        with self.__lock:
            if name in self.__predicates:
                logger.debug("%s.%s already registered, keeping the existing entry", self.name, name)
                return False
            self.__predicates[name] = fn
            return True


class Check(PredicateRegistry):
    """
    Validation namespace. Holds the base predicates and the ``maybe``, ``not_`` and ``verify`` regions.

    Examples:
        ```python
        from checkmore import NamedPredicate, create_check

        check = create_check()
        assert check.unempty_string("foo")
        assert check.maybe.unempty_string(None)
        assert check.not_.unempty_string("")
        check.verify.all({"foo": "bar"}, {"foo": check.string}, "wrong object")

        host = Check()
        host.register_predicate(NamedPredicate("string", lambda v: isinstance(v, (str, bytes))))
        create_check(host=host)
        assert host.string(b"raw")
        ```

    """

    def __init__(self, name: str = "check", *, settings: CheckSettings | None = None):
        super().__init__(name)
        self.settings = settings or CheckSettings()
        self.maybe = PredicateRegistry("maybe")
        self.not_ = PredicateRegistry("not")
        self.verify = PredicateRegistry("verify")

    def register_predicate(self, predicate: NamedPredicate) -> bool:
        """
        Add the predicate to the base region if its name is not taken.

        Raises:
            ArgumentTypeError: If the function is not callable.
            NamedFunctionRequiredError: If the name is empty.
        """
        name, fn = _ensure_named(predicate)
        return self.add(name, fn)

    def register_maybe(self, predicate: NamedPredicate) -> bool:
        """
        Add a variant passing on None or UNDEFINED first argument to the ``maybe`` region.
        """
        name, fn = _ensure_named(predicate)
        if name in self.maybe:
            return False
        return self.maybe.add(name, maybe_modifier(fn))

    def register_not(self, predicate: NamedPredicate) -> bool:
        """
        Add a negated variant to the ``not_`` region.
        """
        name, fn = _ensure_named(predicate)
        if name in self.not_:
            return False
        return self.not_.add(name, not_modifier(fn))

    def register_verify(self, predicate: NamedPredicate) -> bool:
        """
        Add a variant raising [checkmore.predicate.errs.VerificationFailedError][] to the ``verify`` region.
        """
        name, fn = _ensure_named(predicate)
        if name in self.verify:
            return False
        return self.verify.add(name, verify_modifier(name, fn, default_message=self.settings.verify_message))

    def register_verifier(self, verifier: NamedPredicate) -> bool:
        """
        Add an explicit verifier to the ``verify`` region as is.
        """
        name, fn = _ensure_named(verifier)
        return self.verify.add(name, fn)

    def register_all(self, predicates: Iterable[NamedPredicate], verifiers: Iterable[NamedPredicate] = ()) -> None:
        """
        Register the predicates and their variants, in the order base, maybe, not, verify.

        All entries are validated first, so an invalid one aborts the pass before anything is registered.

        Raises:
            ArgumentTypeError: If a function is not callable.
            NamedFunctionRequiredError: If a name is empty.
        """
        predicates = [NamedPredicate(*_ensure_named(p)) for p in predicates]
        verifiers = [NamedPredicate(*_ensure_named(v)) for v in verifiers]

        for p in predicates:
            self.register_predicate(p)
        if self.settings.maybe:
            for p in predicates:
                self.register_maybe(p)
        if self.settings.negate:
            for p in predicates:
                self.register_not(p)
        if self.settings.verify:
            for v in verifiers:
                self.register_verifier(v)
            for p in predicates:
                self.register_verify(p)


def _ensure_named(predicate: NamedPredicate | tuple[str, Callable[..., Any]]) -> tuple[str, Callable[..., Any]]:
    try:
        name, fn = predicate
    except (TypeError, ValueError):
        msg = "expected a (name, predicate function) pair"
        raise ArgumentTypeError(msg, predicate) from None

    if not callable(fn):
        msg = "expected predicate function"
        raise ArgumentTypeError(msg, fn)
    if not isinstance(name, str) or not name:
        raise NamedFunctionRequiredError(fn)
    return name, fn


def create_check(
    predicates: Iterable[NamedPredicate] = DEFAULT_PREDICATES,
    *,
    verifiers: Iterable[NamedPredicate] = VERIFIERS,
    host: Check | None = None,
    settings: CheckSettings | None = None,
) -> Check:
    """
    Build a validation namespace holding ``predicates`` and their derived variants.

    Args:
        predicates: Predicates to register.
        verifiers: Explicit verifiers, registered ahead of the derived verify variants.
        host: Namespace to extend. Its existing entries are kept.
        settings: Settings of the new namespace. Not allowed together with ``host``.

    Returns:
        ``host`` if given, otherwise a new [checkmore.register.registry.Check][].

    Raises:
        ArgumentTypeError: If both ``host`` and ``settings`` are given.
    """
    if host is not None and settings is not None:
        msg = "settings can not be applied to an existing host, configure the host instead"
        raise ArgumentTypeError(msg, settings)
    namespace = host if host is not None else Check(settings=settings)
    namespace.register_all(predicates, verifiers)
    logger.debug(
        "%s built: %d predicates, %d maybe, %d not, %d verify",
        namespace.name,
        len(namespace),
        len(namespace.maybe),
        len(namespace.not_),
        len(namespace.verify),
    )
    return namespace


check = create_check()
