import logging

import pytest

from nxkit.diff import DiffItem, DiffState, diff, find_anchors, normalizing_comparer


def _states(result) -> list[tuple[object, DiffState]]:
    return [(entry.item, entry.state) for entry in result]


def test_identical_sequences_are_all_unchanged() -> None:
    seq = [1, 2, 3, 2]
    result = diff(seq, seq)
    assert all(entry.state is DiffState.NO_CHANGE for entry in result)
    assert result.before == tuple(seq)
    assert result.after == tuple(seq)
    assert not result.has_changes


def test_diff_against_empty_after_removes_everything() -> None:
    result = diff([3, 1, 2], [])
    assert _states(result) == [
        (3, DiffState.REMOVED),
        (1, DiffState.REMOVED),
        (2, DiffState.REMOVED),
    ]


def test_diff_from_empty_before_adds_everything() -> None:
    result = diff([], ["a", "b"])
    assert _states(result) == [("a", DiffState.ADDED), ("b", DiffState.ADDED)]


def test_overlapping_sequences() -> None:
    result = diff([1, 2, 3], [2, 3, 4])
    assert list(result) == [
        DiffItem.removed(1),
        DiffItem.no_change(2),
        DiffItem.no_change(3),
        DiffItem.added(4),
    ]


def test_disjoint_sequences_are_a_full_replace() -> None:
    result = diff([1, 2], [3, 4])
    assert _states(result) == [
        (1, DiffState.REMOVED),
        (2, DiffState.REMOVED),
        (3, DiffState.ADDED),
        (4, DiffState.ADDED),
    ]


def test_removed_precede_added_before_each_anchor() -> None:
    result = diff(["a", "x", "c"], ["a", "y", "c"])
    assert _states(result) == [
        ("a", DiffState.NO_CHANGE),
        ("x", DiffState.REMOVED),
        ("y", DiffState.ADDED),
        ("c", DiffState.NO_CHANGE),
    ]


def test_before_and_after_views_rebuild_inputs() -> None:
    before = ["a", "b", "c", "d", "b"]
    after = ["b", "x", "d", "a", "b"]
    result = diff(before, after)
    assert result.before == tuple(before)
    assert result.after == tuple(after)


def test_reordered_items_align_greedily() -> None:
    result = diff([1, 2], [2, 1])
    assert _states(result) == [
        (1, DiffState.REMOVED),
        (2, DiffState.NO_CHANGE),
        (1, DiffState.ADDED),
    ]


def test_duplicate_anchor_without_partner_is_added() -> None:
    result = diff([1], [1, 1])
    assert _states(result) == [(1, DiffState.NO_CHANGE), (1, DiffState.ADDED)]


def test_views_filter_by_state() -> None:
    result = diff([1, 2, 3], [2, 3, 4])
    assert result.added_items == (DiffItem.added(4),)
    assert result.removed_items == (DiffItem.removed(1),)
    assert [entry.item for entry in result.no_change_items] == [2, 3]
    assert result.counts() == {
        DiffState.ADDED: 1,
        DiffState.REMOVED: 1,
        DiffState.NO_CHANGE: 2,
    }
    assert len(result) == 4


def test_generators_are_snapshotted() -> None:
    before = (n for n in [1, 2, 3])
    after = (n for n in [2, 3, 4])
    result = diff(before, after)
    assert result.before == (1, 2, 3)
    assert result.after == (2, 3, 4)


def test_custom_comparer_and_unchanged_carries_after_item() -> None:
    result = diff(["Hello", "World"], ["hello", "there"], normalizing_comparer(ignore_case=True))
    assert _states(result) == [
        ("hello", DiffState.NO_CHANGE),
        ("World", DiffState.REMOVED),
        ("there", DiffState.ADDED),
    ]


def test_find_anchors_keeps_after_order() -> None:
    assert find_anchors([3, 1, 2], [2, 9, 1, 3, 1], lambda a, b: a == b) == [0, 2, 3, 4]


def test_normalizing_comparer_whitespace() -> None:
    compare = normalizing_comparer(ignore_whitespace=True)
    assert compare("a  b\t", " a b")
    assert not compare("ab", "a b")


def test_diff_logs_summary(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="nxkit.diff.engine"):
        diff([1], [2])
    assert "diff computed" in caplog.text
