"""
Sequence combinators that return `Option`s or enforce paired shapes.

Paired operations (`map2`, `iter2`, `fold_left2`, `fold_right2`) require both
inputs to have the same length and raise `ShapeError` otherwise. A shape
mismatch is a programming error; nothing in nxkit catches it.
"""

import operator
from collections.abc import Callable, Iterable, Iterator, Sequence
from itertools import islice
from typing import Any

from .errors import ShapeError
from .option import Option, absent, present

type Comparer[T] = Callable[[T, T], bool]

_MISSING = object()


def _pairs[A, B](first: Iterable[A], second: Iterable[B]) -> Iterator[tuple[A, B]]:
    left, right = iter(first), iter(second)
    consumed = 0
    while True:
        a = next(left, _MISSING)
        b = next(right, _MISSING)
        if a is _MISSING and b is _MISSING:
            return
        if a is _MISSING or b is _MISSING:
            side = "first" if a is _MISSING else "second"
            raise ShapeError(
                f"sequence lengths do not match: {side} sequence ended after {consumed} items"
            )
        consumed += 1
        yield a, b  # type: ignore[misc]


def map2[A, B, R](
    first: Iterable[A], second: Iterable[B], func: Callable[[A, B], R]
) -> Iterator[R]:
    """Lazily apply `func` pairwise. The mismatch surfaces when the shorter side ends."""
    for a, b in _pairs(first, second):
        yield func(a, b)


def iter2[A, B](first: Iterable[A], second: Iterable[B], action: Callable[[A, B], Any]) -> None:
    for a, b in _pairs(first, second):
        action(a, b)


def fold_left2[A, B, S](
    first: Iterable[A], second: Iterable[B], func: Callable[[S, A, B], S], initial: S
) -> S:
    state = initial
    for a, b in _pairs(first, second):
        state = func(state, a, b)
    return state


def fold_right2[A, B, S](
    first: Sequence[A], second: Sequence[B], func: Callable[[S, A, B], S], initial: S
) -> S:
    """Fold both sequences from their last elements towards their first."""
    if len(first) != len(second):
        raise ShapeError(f"sequence lengths do not match: {len(first)} != {len(second)}")
    return fold_left2(reversed(first), reversed(second), func, initial)


def choose[T, U](items: Iterable[T], func: Callable[[T], Option[U]]) -> list[U]:
    """Apply `func` and keep only the values of present results."""
    return [chosen.payload for chosen in map(func, items) if chosen.has_value()]


def find[T](items: Iterable[T], predicate: Callable[[T], bool]) -> Option[T]:
    for item in items:
        if predicate(item):
            return present(item)
    return absent()


def find_some[T](options: Iterable[Option[T]]) -> Option[T]:
    """The first option that holds a value, or absent."""
    for option in options:
        if option.has_value():
            return option
    return absent()


def head[T](items: Iterable[T]) -> Option[T]:
    for item in items:
        return present(item)
    return absent()


def last[T](items: Iterable[T]) -> Option[T]:
    if isinstance(items, Sequence):
        return present(items[-1]) if items else absent()
    found: Option[T] = absent()
    for item in items:
        found = present(item)
    return found


def nth[T](items: Iterable[T], index: int) -> Option[T]:
    """The item at `index`, or absent when out of range. Negative indexes are absent."""
    if index < 0:
        return absent()
    if isinstance(items, Sequence):
        return present(items[index]) if index < len(items) else absent()
    return head(islice(items, index, None))


def index_of[T](items: Iterable[T], target: T, comparer: Comparer[T] = operator.eq) -> int:
    """Position of the first item equal to `target` under `comparer`, or -1."""
    for position, item in enumerate(items):
        if comparer(item, target):
            return position
    return -1


def partition[T](items: Iterable[T], predicate: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    matching: list[T] = []
    rest: list[T] = []
    for item in items:
        (matching if predicate(item) else rest).append(item)
    return matching, rest


def unfold[S, T](seed: S, step: Callable[[S], Option[tuple[T, S]]]) -> Iterator[T]:
    """Generate values from `seed` until `step` returns no value."""
    state = seed
    while (produced := step(state)).has_value():
        value, state = produced.payload
        yield value


def lookup[K, V](pairs: Iterable[tuple[K, V]], key: K) -> Option[V]:
    """The value of the first pair whose key equals `key`."""
    for candidate, value in pairs:
        if candidate == key:
            return present(value)
    return absent()


__all__ = [
    "Comparer",
    "choose",
    "find",
    "find_some",
    "fold_left2",
    "fold_right2",
    "head",
    "index_of",
    "iter2",
    "last",
    "lookup",
    "map2",
    "nth",
    "partition",
    "unfold",
]
