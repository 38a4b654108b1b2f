from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class DiffState(str, Enum):
    """How an item moved between the before and after sequences."""

    ADDED = "added"
    REMOVED = "removed"
    NO_CHANGE = "no_change"


@dataclass(frozen=True, slots=True)
class DiffItem[T]:
    item: T
    state: DiffState

    @classmethod
    def added(cls, item: T) -> "DiffItem[T]":
        return cls(item, DiffState.ADDED)

    @classmethod
    def removed(cls, item: T) -> "DiffItem[T]":
        return cls(item, DiffState.REMOVED)

    @classmethod
    def no_change(cls, item: T) -> "DiffItem[T]":
        return cls(item, DiffState.NO_CHANGE)


@dataclass(frozen=True, slots=True)
class Diff[T]:
    """A materialized alignment of two sequences.

    `items` is computed once by `nxkit.diff.diff`; every other view is a
    filter over it.
    """

    items: tuple[DiffItem[T], ...]

    def __iter__(self) -> Iterator[DiffItem[T]]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _with_state(self, *states: DiffState) -> tuple[DiffItem[T], ...]:
        return tuple(entry for entry in self.items if entry.state in states)

    @property
    def added_items(self) -> tuple[DiffItem[T], ...]:
        return self._with_state(DiffState.ADDED)

    @property
    def removed_items(self) -> tuple[DiffItem[T], ...]:
        return self._with_state(DiffState.REMOVED)

    @property
    def no_change_items(self) -> tuple[DiffItem[T], ...]:
        return self._with_state(DiffState.NO_CHANGE)

    @property
    def before(self) -> tuple[T, ...]:
        """The before sequence, rebuilt from removed and unchanged items."""
        kept = self._with_state(DiffState.REMOVED, DiffState.NO_CHANGE)
        return tuple(entry.item for entry in kept)

    @property
    def after(self) -> tuple[T, ...]:
        """The after sequence, rebuilt from added and unchanged items."""
        kept = self._with_state(DiffState.ADDED, DiffState.NO_CHANGE)
        return tuple(entry.item for entry in kept)

    @property
    def has_changes(self) -> bool:
        return any(entry.state is not DiffState.NO_CHANGE for entry in self.items)

    def counts(self) -> dict[DiffState, int]:
        """Number of items per state; every state is present, possibly with 0."""
        tally = Counter(entry.state for entry in self.items)
        return {state: tally[state] for state in DiffState}


__all__ = ["Diff", "DiffItem", "DiffState"]
