import pytest

from nxkit.either import Either, Side, inl, inr, lefts, merge, partition, rights
from nxkit.errors import NoValueError, WrongBranchError


def test_inl_holds_left_only() -> None:
    value: Either[int, str] = inl(3)
    assert value.is_left()
    assert not value.is_right()
    assert value.left == 3

    with pytest.raises(WrongBranchError, match="Left<int>") as info:
        _ = value.right
    assert info.value.populated == "Left"
    assert isinstance(info.value, NoValueError)


def test_inr_holds_right_only() -> None:
    value: Either[int, str] = inr("r")
    assert value.right == "r"
    with pytest.raises(WrongBranchError, match="Right<str>"):
        _ = value.left


def test_match_evaluates_exactly_one_branch() -> None:
    calls: list[str] = []

    def on_left(x: int) -> str:
        calls.append("left")
        return f"L{x}"

    def on_right(y: str) -> str:
        calls.append("right")
        return f"R{y}"

    assert inl(1).match(on_left, on_right) == "L1"
    assert inr("a").match(on_left, on_right) == "Ra"
    assert calls == ["left", "right"]


def test_bimap_and_single_sided_maps() -> None:
    assert inl(2).bimap(lambda x: x * 10, str.upper) == inl(20)
    assert inr("a").bimap(lambda x: x * 10, str.upper) == inr("A")
    assert inl(2).map_right(str.upper) == inl(2)
    assert inr("a").map_left(lambda x: x * 10) == inr("a")
    assert inl(2).map_left(str) == inl("2")


def test_swap_exchanges_tag_and_payload() -> None:
    swapped = inl(1).swap()
    assert swapped.is_right()
    assert swapped.right == 1
    assert inr("x").swap() == inl("x")
    assert inl(1).swap().swap() == inl(1)


def test_defaults_and_option_projections() -> None:
    assert inl(1).left_or_default(0) == 1
    assert inr("x").left_or_default(0) == 0
    assert inr("x").right_or_default("d") == "x"
    assert inl(1).right_or_default("d") == "d"

    assert inl(1).left_or_none().value == 1
    assert inl(1).right_or_none().is_absent()
    assert inr("x").right_or_none().value == "x"


def test_collapse_helpers() -> None:
    assert inl(3).match_left(str) == "3"
    assert inr("s").match_left(str) == "s"
    assert inr("4").match_right(int) == 4
    assert merge(inl(5)) == 5
    assert merge(inr(6)) == 6


def test_may_runs_matching_side_effect() -> None:
    seen: list[object] = []
    inl(1).may(on_left=seen.append, on_right=seen.append)
    inr("r").may(on_left=seen.append)
    assert seen == [1]


def test_sequence_helpers_keep_order() -> None:
    items = [inl(1), inr("a"), inl(2), inr("b")]
    assert lefts(items) == [1, 2]
    assert rights(items) == ["a", "b"]
    assert partition(items) == ([1, 2], ["a", "b"])


def test_repr_and_pattern_matching() -> None:
    assert repr(inl(1)) == "Left(1)"
    assert repr(inr("x")) == "Right('x')"
    match inr(5):
        case Either(Side.RIGHT, payload):
            assert payload == 5
        case _:
            pytest.fail("expected a right value")
