"""
Text and rich renderings of a `Diff`.
"""

from collections.abc import Iterator

from rich.text import Text

from .. import config
from .models import Diff, DiffItem, DiffState

_MARKERS = {
    DiffState.ADDED: config.ADDED_MARKER,
    DiffState.REMOVED: config.REMOVED_MARKER,
    DiffState.NO_CHANGE: config.UNCHANGED_MARKER,
}

_STYLES = {
    DiffState.ADDED: config.ADDED_STYLE,
    DiffState.REMOVED: config.REMOVED_STYLE,
    DiffState.NO_CHANGE: config.UNCHANGED_STYLE,
}

type Segment[T] = DiffItem[T] | int


def segments[T](
    diff: Diff[T], context: int | None = None, changes_only: bool = False
) -> Iterator[Segment[T]]:
    """Yield the entries to display, with hidden unchanged runs as their length.

    `context=None` shows everything. Otherwise only unchanged entries within
    `context` positions of a change are kept. `changes_only` drops unchanged
    entries without reporting gaps.
    """
    if changes_only:
        yield from (entry for entry in diff if entry.state is not DiffState.NO_CHANGE)
        return
    if context is None:
        yield from diff
        return

    total = len(diff)
    keep: set[int] = set()
    for index, entry in enumerate(diff):
        if entry.state is not DiffState.NO_CHANGE:
            keep.update(range(max(0, index - context), min(total, index + context + 1)))

    skipped = 0
    for index, entry in enumerate(diff):
        if index in keep:
            if skipped:
                yield skipped
                skipped = 0
            yield entry
        else:
            skipped += 1
    if skipped:
        yield skipped


def render_lines[T](
    diff: Diff[T], context: int | None = None, changes_only: bool = False
) -> list[str]:
    lines = []
    for segment in segments(diff, context, changes_only):
        if isinstance(segment, int):
            lines.append(config.ELLIPSIS_MARKER.format(count=segment))
        else:
            lines.append(f"{_MARKERS[segment.state]}{segment.item}")
    return lines


def render_rich[T](diff: Diff[T], context: int | None = None, changes_only: bool = False) -> Text:
    """Render the diff as a styled `rich.text.Text`, one entry per line."""
    text = Text()
    for segment in segments(diff, context, changes_only):
        if isinstance(segment, int):
            text.append(config.ELLIPSIS_MARKER.format(count=segment), style=config.ELLIPSIS_STYLE)
        else:
            text.append(f"{_MARKERS[segment.state]}{segment.item}", style=_STYLES[segment.state])
        text.append("\n")
    return text


def render_stat[T](diff: Diff[T]) -> str:
    counts = diff.counts()
    return (
        f"{counts[DiffState.ADDED]} added, "
        f"{counts[DiffState.REMOVED]} removed, "
        f"{counts[DiffState.NO_CHANGE]} unchanged"
    )


__all__ = ["render_lines", "render_rich", "render_stat", "segments"]
