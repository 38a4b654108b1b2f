"""
A two-branch tagged union.

An `Either` holds exactly one payload, tagged Left or Right. Build values
with `inl` and `inr`; both return the concrete union directly, with the other
branch left to the caller's annotation.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

from .errors import WrongBranchError
from .option import Option, absent, present


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True, repr=False)
class Either[L, R]:
    """An immutable Left-or-Right value."""

    __match_args__ = ("side", "payload")

    side: Side
    payload: Any

    def is_left(self) -> bool:
        return self.side is Side.LEFT

    def is_right(self) -> bool:
        return self.side is Side.RIGHT

    @property
    def left(self) -> L:
        """The Left payload; raises `WrongBranchError` on a Right value."""
        if self.side is Side.LEFT:
            return self.payload
        raise WrongBranchError("Right", self.payload)

    @property
    def right(self) -> R:
        """The Right payload; raises `WrongBranchError` on a Left value."""
        if self.side is Side.RIGHT:
            return self.payload
        raise WrongBranchError("Left", self.payload)

    def match[V](self, on_left: Callable[[L], V], on_right: Callable[[R], V]) -> V:
        if self.side is Side.LEFT:
            return on_left(self.payload)
        return on_right(self.payload)

    def match_left(self, func: Callable[[L], R]) -> R:
        """Collapse to the Right type, converting a Left payload with `func`."""
        return func(self.payload) if self.side is Side.LEFT else self.payload

    def match_right(self, func: Callable[[R], L]) -> L:
        """Collapse to the Left type, converting a Right payload with `func`."""
        return func(self.payload) if self.side is Side.RIGHT else self.payload

    def bimap[L2, R2](
        self, left_func: Callable[[L], L2], right_func: Callable[[R], R2]
    ) -> Either[L2, R2]:
        if self.side is Side.LEFT:
            return inl(left_func(self.payload))
        return inr(right_func(self.payload))

    def map_left[L2](self, func: Callable[[L], L2]) -> Either[L2, R]:
        if self.side is Side.LEFT:
            return inl(func(self.payload))
        return cast("Either[L2, R]", self)

    def map_right[R2](self, func: Callable[[R], R2]) -> Either[L, R2]:
        if self.side is Side.RIGHT:
            return inr(func(self.payload))
        return cast("Either[L, R2]", self)

    def swap(self) -> Either[R, L]:
        side = Side.RIGHT if self.side is Side.LEFT else Side.LEFT
        return Either(side, self.payload)

    def may(
        self,
        on_left: Callable[[L], Any] | None = None,
        on_right: Callable[[R], Any] | None = None,
    ) -> None:
        """Run whichever side effect matches the populated branch, if given."""
        if on_left is not None and self.side is Side.LEFT:
            on_left(self.payload)
        if on_right is not None and self.side is Side.RIGHT:
            on_right(self.payload)

    def left_or_default(self, fallback: L) -> L:
        return self.payload if self.side is Side.LEFT else fallback

    def right_or_default(self, fallback: R) -> R:
        return self.payload if self.side is Side.RIGHT else fallback

    def left_or_none(self) -> Option[L]:
        return present(self.payload) if self.side is Side.LEFT else absent()

    def right_or_none(self) -> Option[R]:
        return present(self.payload) if self.side is Side.RIGHT else absent()

    def __repr__(self) -> str:
        name = "Left" if self.side is Side.LEFT else "Right"
        return f"{name}({self.payload!r})"


def inl[L](value: L) -> Either[L, Any]:
    """A Left-tagged union holding `value`."""
    return Either(Side.LEFT, value)


def inr[R](value: R) -> Either[Any, R]:
    """A Right-tagged union holding `value`."""
    return Either(Side.RIGHT, value)


def lefts[L, R](items: Iterable[Either[L, R]]) -> list[L]:
    return [item.payload for item in items if item.side is Side.LEFT]


def rights[L, R](items: Iterable[Either[L, R]]) -> list[R]:
    return [item.payload for item in items if item.side is Side.RIGHT]


def partition[L, R](items: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """Split unions into their Left payloads and Right payloads, keeping order."""
    left_values: list[L] = []
    right_values: list[R] = []
    for item in items:
        if item.side is Side.LEFT:
            left_values.append(item.payload)
        else:
            right_values.append(item.payload)
    return left_values, right_values


def merge[T](value: Either[T, T]) -> T:
    """Return the payload of a union whose branches share a type."""
    return value.payload


__all__ = [
    "Either",
    "Side",
    "inl",
    "inr",
    "lefts",
    "merge",
    "partition",
    "rights",
]
