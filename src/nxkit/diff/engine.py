"""
Greedy anchor-synchronized sequence diff.

The engine is a single forward pass, not a longest-common-subsequence search:

1. Anchors are the items of `after` that have an equal item anywhere in
   `before`, kept in `after` order.
2. With no anchors the result is a full replace: every `before` item removed,
   then every `after` item added.
3. Otherwise each anchor in turn pulls `before` forward to the next equal
   item (emitting what it skips as removed), pulls `after` forward to the
   anchor (emitting what it skips as added), and emits the anchor unchanged.
4. Whatever is left of `before` is removed and whatever is left of `after`
   is added.

When `before` has no equal item left for an anchor, that anchor is skipped
and its `after` item is later emitted as added. With duplicated items the
alignment is therefore valid but not necessarily minimal.

Both inputs are snapshotted into tuples first, so one-shot iterators and
generators are only consumed once.
"""

import logging
import operator
from collections.abc import Callable, Iterable, Sequence

from .models import Diff, DiffItem

logger = logging.getLogger(__name__)

type Comparer[T] = Callable[[T, T], bool]


def find_anchors[T](before: Sequence[T], after: Sequence[T], comparer: Comparer[T]) -> list[int]:
    """Indexes into `after` of items that have an equal item in `before`."""
    return [
        index
        for index, candidate in enumerate(after)
        if any(comparer(existing, candidate) for existing in before)
    ]


def _seek[T](items: Sequence[T], start: int, target: T, comparer: Comparer[T]) -> int | None:
    for index in range(start, len(items)):
        if comparer(items[index], target):
            return index
    return None


def diff[T](
    before: Iterable[T], after: Iterable[T], comparer: Comparer[T] = operator.eq
) -> Diff[T]:
    """Align `before` with `after` and tag every item added, removed or unchanged.

    `comparer(x, y)` decides equality, with `x` from `before` and `y` from
    `after`. Unchanged entries carry the `after` item.
    """
    old, new = tuple(before), tuple(after)
    anchors = find_anchors(old, new, comparer)
    items: list[DiffItem[T]] = []

    if not anchors:
        items.extend(DiffItem.removed(item) for item in old)
        items.extend(DiffItem.added(item) for item in new)
        return _finish(items, anchors=0)

    old_pos = new_pos = 0
    used = 0
    for anchor in anchors:
        target = new[anchor]
        match_at = _seek(old, old_pos, target, comparer)
        if match_at is None:
            continue
        items.extend(DiffItem.removed(item) for item in old[old_pos:match_at])
        items.extend(DiffItem.added(item) for item in new[new_pos:anchor])
        items.append(DiffItem.no_change(target))
        old_pos, new_pos = match_at + 1, anchor + 1
        used += 1

    items.extend(DiffItem.removed(item) for item in old[old_pos:])
    items.extend(DiffItem.added(item) for item in new[new_pos:])
    return _finish(items, anchors=used)


def _finish[T](items: list[DiffItem[T]], anchors: int) -> Diff[T]:
    result = Diff(tuple(items))
    if logger.isEnabledFor(logging.DEBUG):
        counts = result.counts()
        logger.debug(
            "diff computed: %d items, %d anchors used, counts=%s",
            len(result),
            anchors,
            {state.value: count for state, count in counts.items()},
        )
    return result


__all__ = ["Comparer", "diff", "find_anchors"]
