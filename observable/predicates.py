"""Lazily evaluated assertions that report failures to a test handle."""

from __future__ import annotations

import functools
import threading
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Protocol, Tuple, Union


class TB(Protocol):
    """The part of a test handle that assertions report to."""

    def helper(self) -> None: ...

    def error(self, *args: Any) -> None: ...


@dataclass(frozen=True)
class Predicate:
    """A lazily evaluated condition paired with a failure description."""

    condition: Callable[[], bool]
    describe: Callable[[], str]

    def ok(self) -> bool:
        """Evaluate the condition."""
        return bool(self.condition())

    def message(self) -> str:
        """Return the text explaining why the predicate failed."""
        return self.describe()


Assertion = Union[bool, Callable[[], bool], Predicate]


def _evaluate(assertion: Assertion) -> Tuple[bool, Callable[[], str]]:
    if isinstance(assertion, Predicate):
        return assertion.ok(), assertion.message
    if isinstance(assertion, bool):
        return assertion, str
    if callable(assertion):
        return bool(assertion()), str
    raise TypeError(
        f"assertion must be a bool, a callable or a Predicate, not {type(assertion).__name__}"
    )


def _observe(tb: TB, ok: bool, message: Callable[[], str]) -> bool:
    tb.helper()
    if ok:
        return True
    tb.error(message())
    return False


def assert_that(tb: TB, assertion: Assertion) -> bool:
    """Evaluate the assertion and report an error on ``tb`` when it is false."""
    ok, message = _evaluate(assertion)
    return _observe(tb, ok, message)


def assert_thatf(tb: TB, assertion: Assertion, format: str, *args: Any) -> bool:
    """Like :func:`assert_that`, but with a %-style failure message."""
    ok, _ = _evaluate(assertion)
    return _observe(tb, ok, lambda: format % args if args else format)


def _negated(predicate: Predicate) -> Predicate:
    return Predicate(
        lambda: not predicate.ok(),
        lambda: "not: " + predicate.message(),
    )


def negate(x: Any) -> Any:
    """Return the logical negation of a bool, Predicate or callable.

    A callable is wrapped so that its result, a bool or a Predicate, is
    negated; any other result raises TypeError when the wrapper is called.
    """
    if isinstance(x, Predicate):
        return _negated(x)
    if isinstance(x, bool):
        return not x
    if callable(x):

        @functools.wraps(x)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = x(*args, **kwargs)
            if isinstance(result, Predicate):
                return _negated(result)
            if isinstance(result, bool):
                return not result
            raise TypeError(
                f"cannot negate a callable returning {type(result).__name__}"
            )

        return wrapper
    raise TypeError(f"cannot negate a value of type {type(x).__name__}")


def is_nil(value: Any) -> Predicate:
    """Succeed when ``value`` is None."""
    return Predicate(
        lambda: value is None,
        lambda: f"expected {value!r} to be None",
    )


def _chain(err: BaseException | None) -> Iterator[BaseException]:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        if err.__cause__ is not None:
            err = err.__cause__
        elif err.__suppress_context__:
            err = None
        else:
            err = err.__context__


def _matches(err: BaseException | None, target: Any) -> bool:
    if err is None or target is None:
        return err is target
    for link in _chain(err):
        if isinstance(target, type):
            if isinstance(link, target):
                return True
        elif link is target or link == target:
            return True
    return False


def _error_of(func: Callable[[], Any]) -> BaseException | None:
    try:
        result = func()
    except Exception as exc:
        return exc
    return result if isinstance(result, BaseException) else None


def error_is(err: BaseException | None, target: Any) -> Predicate:
    """Succeed when ``err`` or an exception in its cause chain matches ``target``.

    ``target`` may be an exception instance or an exception class.
    """
    return Predicate(
        lambda: _matches(err, target),
        lambda: f"expected error {err} to match {target}",
    )


def errors(func: Callable[[], Any]) -> Predicate:
    """Succeed when ``func`` raises an exception or returns one."""
    return Predicate(
        lambda: _error_of(func) is not None,
        lambda: "expected function to return or raise an error",
    )


def errors_with(func: Callable[[], Any], target: Any) -> Predicate:
    """Succeed when the error raised or returned by ``func`` matches ``target``."""
    return Predicate(
        lambda: _matches(_error_of(func), target),
        lambda: f"expected returned error to match {target}",
    )


def raises(func: Callable[[], Any]) -> Predicate:
    """Succeed when ``func`` raises an exception."""

    def raised() -> bool:
        try:
            func()
        except Exception:
            return True
        return False

    return Predicate(raised, lambda: "expected function to raise")


def zero(value: Any) -> Predicate:
    """Succeed when ``value`` equals the default value of its type."""

    def is_zero() -> bool:
        try:
            default = type(value)()
        except TypeError:
            return False
        return value == default

    return Predicate(is_zero, lambda: f"expected zero value, got {value}")


def equal(got: Any, want: Any) -> Predicate:
    """Succeed when ``got == want``."""
    return Predicate(
        lambda: got == want,
        lambda: f"expected {want}, got {got}",
    )


def returns(func: Callable[[], Any], want: Any) -> Predicate:
    """Succeed when ``func()`` equals ``want``; ``func`` is called at most once."""
    lock = threading.Lock()
    cache: list[Any] = []

    def got() -> Any:
        with lock:
            if not cache:
                cache.append(func())
        return cache[0]

    return Predicate(
        lambda: got() == want,
        lambda: f"expected {want}, got {got()}",
    )