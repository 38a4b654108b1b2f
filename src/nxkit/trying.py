"""
Exception-recovery chains.

A `Try` records the outcome of a computation that either produced a value or
raised. Unlike `Option` there is no plain "absent" state: every failure
carries the exception that caused it.

Recovery is typed and predicate-gated:

- `catch` / `catch_when` turn a matching failure into a success. Anything
  else, including a failure of a different kind, passes through untouched.
- `abort` / `abort_when` are the opposite: a matching failure escalates to
  `AbortError`, which is not an `Exception` and therefore cannot be captured
  by any later `attempt` or `Try.map` boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, NoReturn, cast

from returns.result import Failure, Result, Success

from ._internal.capture import capture, describe
from .errors import AbortError, NoValueError
from .option import Option, absent, present

logger = logging.getLogger(__name__)

type ErrorKind[E: BaseException] = type[E] | tuple[type[E], ...]


@dataclass(frozen=True, slots=True, repr=False)
class Try[T]:
    """The outcome of a captured computation: a value or an exception."""

    payload: Any = None
    fault: Exception | None = None

    def __post_init__(self) -> None:
        if self.fault is not None and self.payload is not None:
            raise ValueError("a failed Try cannot carry a value")

    @classmethod
    def success(cls, value: T) -> Try[T]:
        return cls(payload=value)

    @classmethod
    def failure(cls, error: Exception) -> Try[Any]:
        if error is None:
            raise ValueError("a failed Try requires an error")
        return cls(fault=error)

    def is_success(self) -> bool:
        return self.fault is None

    def is_failure(self) -> bool:
        return self.fault is not None

    @property
    def value(self) -> T:
        """The produced value; raises `NoValueError` chained to the failure."""
        if self.fault is not None:
            raise NoValueError(f"Unhandled exception: '{self.fault}'") from self.fault
        return self.payload

    @property
    def error(self) -> Exception:
        """The captured exception; raises `NoValueError` on a success."""
        if self.fault is None:
            raise NoValueError(f"This is Success<{type(self.payload).__name__}>.")
        return self.fault

    # --- Transformation ---

    def map[U](self, func: Callable[[T], U]) -> Try[U]:
        """Apply `func` to a success inside a capture boundary."""
        if self.fault is not None:
            return cast("Try[U]", self)
        return from_result(capture(func, self.payload))

    def bind[U](self, func: Callable[[T], Try[U]]) -> Try[U]:
        """Chain a computation returning a `Try`; exceptions it raises are captured."""
        if self.fault is not None:
            return cast("Try[U]", self)
        return from_result(capture(func, self.payload)).flatten()

    def flatten[U](self: Try[Try[U]]) -> Try[U]:
        if self.fault is not None:
            return cast("Try[U]", self)
        return self.payload

    # --- Recovery ---

    def catch[E: Exception](self, kind: ErrorKind[E], recover: Callable[[E], T]) -> Try[T]:
        """Recover from a failure whose error is an instance of `kind`.

        `recover` runs outside any capture boundary; an exception it raises
        propagates to the caller.
        """
        if self.fault is not None and isinstance(self.fault, kind):
            return Try.success(recover(cast(E, self.fault)))
        return self

    def catch_when[E: Exception](
        self,
        kind: ErrorKind[E],
        predicate: Callable[[E], bool],
        recover: Callable[[E], T],
    ) -> Try[T]:
        """Recover only when the error matches `kind` and satisfies `predicate`.

        A matching kind with a false predicate keeps the original failure.
        """
        if self.fault is not None and isinstance(self.fault, kind):
            error = cast(E, self.fault)
            if predicate(error):
                return Try.success(recover(error))
        return self

    def handle[E: Exception](self, kind: ErrorKind[E], action: Callable[[E], Any]) -> Try[None]:
        """Run `action` on a matching failure and discard the value.

        Successes and handled failures become `Try[None]` successes; other
        failures keep their error.
        """
        if self.fault is None:
            return Try.success(None)
        if isinstance(self.fault, kind):
            action(cast(E, self.fault))
            return Try.success(None)
        return cast("Try[None]", self)

    def abort[E: Exception](self, kind: ErrorKind[E], on_match: Callable[[E], Any]) -> Try[T]:
        """Escalate a matching failure to `AbortError` after running `on_match`.

        The escalation happens even when `on_match` raises; its exception is
        kept as the `__context__` of the `AbortError`.
        """
        if self.fault is not None and isinstance(self.fault, kind):
            self._escalate(on_match)
        return self

    def abort_when[E: Exception](
        self,
        kind: ErrorKind[E],
        predicate: Callable[[E], bool],
        on_match: Callable[[E], Any],
    ) -> Try[T]:
        """Like `abort`, but only when `predicate` holds for the error."""
        if self.fault is not None and isinstance(self.fault, kind):
            error = cast(E, self.fault)
            if predicate(error):
                self._escalate(on_match)
        return self

    def _escalate(self, on_match: Callable[[Any], Any]) -> NoReturn:
        error = cast(Exception, self.fault)
        logger.warning("aborting chain on %s: %s", type(error).__name__, error)
        try:
            on_match(error)
        except Exception as callback_error:
            logger.warning("abort callback %s raised %r", describe(on_match), callback_error)
            raise AbortError(error) from error
        raise AbortError(error) from error

    def catch_all(self, handler: Callable[[Exception], T]) -> T:
        """Resolve to a plain value, converting any failure with `handler`."""
        if self.fault is not None:
            return handler(self.fault)
        return self.payload

    # --- Extraction ---

    def evaluate(self) -> T:
        return self.value

    def may(self, action: Callable[[T], Any]) -> None:
        if self.fault is None:
            action(self.payload)

    def to_option(self) -> Option[T]:
        """Present for a success; a failure is discarded and becomes Absent."""
        return present(self.payload) if self.fault is None else absent()

    def __repr__(self) -> str:
        if self.fault is not None:
            return f"Failure({self.fault!r})"
        return f"Success({self.payload!r})"


def attempt[T](func: Callable[..., T], *args: Any, **kwargs: Any) -> Try[T]:
    """Call `func(*args, **kwargs)` and record its value or exception."""
    return from_result(capture(func, *args, **kwargs))


def map2[A, B, R](first: Try[A], second: Try[B], func: Callable[[A, B], R]) -> Try[R]:
    """Combine two successes with `func` inside a capture boundary.

    The first failure, in argument order, propagates unchanged.
    """
    if first.fault is not None:
        return cast("Try[R]", first)
    if second.fault is not None:
        return cast("Try[R]", second)
    return from_result(capture(func, first.payload, second.payload))


def from_result[T](result: Result[T, Exception]) -> Try[T]:
    """Convert a `returns` Result into a `Try`."""
    match result:
        case Success(value):
            return Try.success(value)
        case Failure(error):
            return Try.failure(error)
    raise TypeError(f"unexpected result container: {result!r}")


__all__ = ["ErrorKind", "Try", "attempt", "from_result", "map2"]
