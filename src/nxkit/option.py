"""
A tri-state optional value: Present, Absent or Faulted.

`Option` is a closed tagged variant. A Present option carries a value, an
Absent option carries nothing, and a Faulted option carries the exception that
prevented a value from being produced. Absence is not an error: building an
option from `None` always yields Absent, never Faulted.

Combinators come in two flavours:

- `map`, `bind` and `map2` never catch. An exception raised by the callback
  is a defect in the caller and surfaces immediately.
- `try_map` and `try_map2` run the callback inside a capture boundary and
  record a raised exception as a Faulted option.

Absent and Faulted are absorbing for every combinator, and both count as
"no value" for equality: ``absent() == faulted(err)`` is True. Error identity
is not part of equality; use `match_ex` or `error` to tell the two apart.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, cast

from returns.result import Failure, Result, Success

from ._internal.capture import capture, describe
from .errors import MissingValueError, NoValueError

if TYPE_CHECKING:
    from .either import Either
    from .trying import Try


class Tag(Enum):
    """The three states of an `Option`."""

    PRESENT = "present"
    ABSENT = "absent"
    FAULTED = "faulted"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Option[T]:
    """An immutable Present/Absent/Faulted value.

    Build instances with `present`, `absent`, `faulted` or `from_nullable`
    rather than calling the constructor directly.
    """

    __match_args__ = ("tag", "payload")

    tag: Tag
    payload: Any = None
    fault: Exception | None = None

    def __post_init__(self) -> None:
        if self.tag is Tag.FAULTED and self.fault is None:
            raise ValueError("a faulted option requires an error")
        if self.tag is not Tag.FAULTED and self.fault is not None:
            raise ValueError(f"a {self.tag.value} option cannot carry an error")
        if self.tag is Tag.ABSENT and self.payload is not None:
            raise ValueError("an absent option cannot carry a value")

    # --- Inspection ---

    def is_present(self) -> bool:
        return self.tag is Tag.PRESENT

    def is_absent(self) -> bool:
        return self.tag is Tag.ABSENT

    def is_faulted(self) -> bool:
        return self.tag is Tag.FAULTED

    def has_value(self) -> bool:
        return self.tag is Tag.PRESENT

    def __bool__(self) -> bool:
        return self.has_value()

    @property
    def value(self) -> T:
        """The contained value; raises `NoValueError` when there is none."""
        return self.force_unwrap()

    @property
    def error(self) -> Exception | None:
        """The captured error of a Faulted option, otherwise None."""
        return self.fault

    # --- Combinators ---

    def map[U](self, func: Callable[[T], U]) -> Option[U]:
        """Apply `func` to a present value. Exceptions from `func` propagate."""
        if self.tag is Tag.PRESENT:
            return present(func(self.payload))
        return cast("Option[U]", self)

    def try_map[U](self, func: Callable[[T], U]) -> Option[U]:
        """Apply `func` inside a capture boundary.

        A raised exception becomes Faulted. An Absent receiver is promoted to
        a Faulted `MissingValueError`, since absence now blocks a computation.
        The payload type of an Absent is not known at runtime, so the message
        names the blocked callable instead: "missing value for <qualname>".
        An already Faulted receiver keeps its original error.
        """
        match self.tag:
            case Tag.PRESENT:
                return from_result(capture(func, self.payload))
            case Tag.ABSENT:
                return faulted(MissingValueError(f"missing value for {describe(func)}"))
            case _:
                return cast("Option[U]", self)

    def bind[U](self, func: Callable[[T], Option[U]]) -> Option[U]:
        """Chain a computation that itself returns an `Option`."""
        if self.tag is Tag.PRESENT:
            return func(self.payload)
        return cast("Option[U]", self)

    def flatten[U](self: Option[Option[U]]) -> Option[U]:
        return self.bind(lambda inner: inner)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep a present value only if it satisfies `predicate`."""
        if self.tag is Tag.PRESENT and not predicate(self.payload):
            return absent()
        return self

    def filter_out(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Drop a present value if it satisfies `predicate`."""
        if self.tag is Tag.PRESENT and predicate(self.payload):
            return absent()
        return self

    def check(self, predicate: Callable[[T], bool]) -> bool:
        return self.tag is Tag.PRESENT and predicate(self.payload)

    def may(self, action: Callable[[T], Any]) -> None:
        """Run `action` for its side effect if a value is present."""
        if self.tag is Tag.PRESENT:
            action(self.payload)

    # --- Extraction ---

    def default(self, fallback: T) -> T:
        return self.payload if self.tag is Tag.PRESENT else fallback

    def default_lazy(self, supplier: Callable[[], T]) -> T:
        return self.payload if self.tag is Tag.PRESENT else supplier()

    def map_default[U](self, func: Callable[[T], U], fallback: U) -> U:
        return func(self.payload) if self.tag is Tag.PRESENT else fallback

    def match[R](self, on_present: Callable[[T], R], on_absent: Callable[[], R]) -> R:
        """Two-way dispatch. Faulted options take the `on_absent` branch."""
        if self.tag is Tag.PRESENT:
            return on_present(self.payload)
        return on_absent()

    def match_ex[R](
        self,
        on_present: Callable[[T], R],
        on_fault: Callable[[Exception], R],
        on_absent: Callable[[], R],
    ) -> R:
        """Three-way dispatch; exactly one branch runs."""
        match self.tag:
            case Tag.PRESENT:
                return on_present(self.payload)
            case Tag.FAULTED:
                return on_fault(cast(Exception, self.fault))
            case _:
                return on_absent()

    def force_unwrap(self, if_absent: Callable[[], Any] | None = None) -> T:
        """Return the value or raise `NoValueError`.

        `if_absent` runs before raising. For a Faulted option the captured
        error is chained as the cause and named in the message.
        """
        if self.tag is Tag.PRESENT:
            return self.payload
        if if_absent is not None:
            if_absent()
        if self.fault is not None:
            raise NoValueError(f"This is Faulted: {self.fault!r}") from self.fault
        raise NoValueError("This is Absent.")

    # --- Combination ---

    def or_else(self, other: Option[T]) -> Option[T]:
        """This option if it holds a value, otherwise `other`."""
        return self if self.tag is Tag.PRESENT else other

    def and_[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """Pair two present values; absent if either side has no value."""
        if self.tag is Tag.PRESENT and other.tag is Tag.PRESENT:
            return present((self.payload, other.payload))
        return absent()

    def __or__(self, other: Option[T]) -> Option[T]:
        return self.or_else(other)

    def __and__[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        return self.and_(other)

    def or_either[U](self, other: Option[U]) -> Option[Either[T, U]]:
        """Left from this option, else Right from `other`, else absent."""
        from .either import inl, inr

        if self.tag is Tag.PRESENT:
            return present(inl(self.payload))
        if other.tag is Tag.PRESENT:
            return present(inr(other.payload))
        return absent()

    def inl_or_default[U](self, fallback: U) -> Either[T, U]:
        from .either import inl, inr

        return inl(self.payload) if self.tag is Tag.PRESENT else inr(fallback)

    def inr_or_default[U](self, fallback: U) -> Either[U, T]:
        from .either import inl, inr

        return inr(self.payload) if self.tag is Tag.PRESENT else inl(fallback)

    def to_try(self) -> Try[T]:
        """Convert to a `Try`; absence becomes a `MissingValueError` failure."""
        from .trying import Try

        match self.tag:
            case Tag.PRESENT:
                return Try.success(self.payload)
            case Tag.FAULTED:
                return Try.failure(cast(Exception, self.fault))
            case _:
                return Try.failure(MissingValueError("value is absent"))

    # --- Dunder protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self.tag is Tag.PRESENT and other.tag is Tag.PRESENT:
            return bool(self.payload == other.payload)
        return self.has_value() == other.has_value()

    def __hash__(self) -> int:
        if self.tag is Tag.PRESENT:
            return hash((Tag.PRESENT, self.payload))
        return hash(Tag.ABSENT)

    def __repr__(self) -> str:
        match self.tag:
            case Tag.PRESENT:
                return f"Present({self.payload!r})"
            case Tag.FAULTED:
                return f"Faulted({self.fault!r})"
            case _:
                return "Absent"


_ABSENT: Option[Any] = Option(Tag.ABSENT)


def present[T](value: T) -> Option[T]:
    """A Present option holding `value`, even when `value` is None."""
    return Option(Tag.PRESENT, value)


def absent() -> Option[Any]:
    return _ABSENT


def faulted(error: Exception) -> Option[Any]:
    """A Faulted option carrying `error`."""
    return Option(Tag.FAULTED, fault=error)


def from_nullable[T](value: T | None) -> Option[T]:
    """Present for any non-None value, Absent for None."""
    return _ABSENT if value is None else present(value)


def _ladder[A, B, R](
    first: Option[A], second: Option[B], combine: Callable[[A, B], Option[R]]
) -> Option[R]:
    if first.tag is Tag.PRESENT:
        if second.tag is Tag.PRESENT:
            return combine(first.payload, second.payload)
        if second.tag is Tag.FAULTED:
            return cast("Option[R]", second)
        return faulted(MissingValueError("second value is absent"))
    if first.tag is Tag.FAULTED:
        return cast("Option[R]", first)
    return faulted(MissingValueError("first value is absent"))


def map2[A, B, R](first: Option[A], second: Option[B], func: Callable[[A, B], R]) -> Option[R]:
    """Combine two present values with `func`. Exceptions from `func` propagate.

    When either side has no value the first one missing decides the result:
    its error propagates if it is Faulted, otherwise a `MissingValueError`
    fault names which side was absent.
    """
    return _ladder(first, second, lambda a, b: present(func(a, b)))


def try_map2[A, B, R](first: Option[A], second: Option[B], func: Callable[[A, B], R]) -> Option[R]:
    """Like `map2`, but an exception raised by `func` becomes Faulted."""
    return _ladder(first, second, lambda a, b: from_result(capture(func, a, b)))


def from_result[T](result: Result[T, Exception]) -> Option[T]:
    """Convert a `returns` Result: Success is Present, Failure is Faulted."""
    match result:
        case Success(value):
            return present(value)
        case Failure(error):
            return faulted(error)
    raise TypeError(f"unexpected result container: {result!r}")


__all__ = [
    "Option",
    "Tag",
    "absent",
    "faulted",
    "from_nullable",
    "from_result",
    "map2",
    "present",
    "try_map2",
]
