import pytest

from nxkit.errors import MissingValueError, NoValueError
from nxkit.option import Option, Tag, absent, faulted, from_nullable, present


def _boom(_: object) -> int:
    raise ZeroDivisionError("boom")


def test_from_nullable_present_for_values_and_absent_for_none() -> None:
    for value in (0, "", [], False, "x"):
        opt = from_nullable(value)
        assert opt.is_present()
        assert opt.force_unwrap() == value

    none = from_nullable(None)
    assert none.is_absent()
    assert not none.is_faulted()


def test_present_none_is_an_explicit_present() -> None:
    opt = present(None)
    assert opt.is_present()
    assert opt.value is None


def test_constructor_enforces_tag_payload_invariant() -> None:
    with pytest.raises(ValueError):
        Option(Tag.FAULTED)
    with pytest.raises(ValueError):
        Option(Tag.PRESENT, 1, ValueError("x"))
    with pytest.raises(ValueError):
        Option(Tag.ABSENT, 1)


def test_map_identity_law_for_every_tag() -> None:
    err = KeyError("k")
    for opt in (present(3), absent(), faulted(err)):
        assert opt.map(lambda x: x) == opt
    assert faulted(err).map(lambda x: x).error is err


def test_map_does_not_catch() -> None:
    with pytest.raises(ZeroDivisionError):
        present(1).map(_boom)


def test_try_map_captures_the_raised_error() -> None:
    result = present(1).try_map(_boom)
    assert result.is_faulted()
    assert isinstance(result.error, ZeroDivisionError)
    assert str(result.error) == "boom"


def test_try_map_on_absent_synthesizes_missing_value_fault() -> None:
    result = absent().try_map(lambda x: x + 1)
    assert result.is_faulted()
    assert isinstance(result.error, MissingValueError)


def test_try_map_on_absent_names_the_blocked_callable() -> None:
    def half(x: int) -> int:
        return x // 2

    result = absent().try_map(half)
    message = str(result.error)
    assert message.startswith("missing value for ")
    assert message.endswith("<locals>.half")


def test_try_map_on_faulted_keeps_original_error() -> None:
    err = RuntimeError("first")
    result = faulted(err).try_map(lambda x: x + 1)
    assert result.error is err


def test_bind_left_identity_and_associativity() -> None:
    def half(x: int) -> Option[int]:
        return present(x // 2) if x % 2 == 0 else absent()

    def inc(x: int) -> Option[int]:
        return present(x + 1)

    for v in (4, 5, 10):
        assert present(v).bind(half) == half(v)
        assert present(v).bind(half).bind(inc) == present(v).bind(lambda x: half(x).bind(inc))


def test_bind_does_not_invoke_continuation_without_value() -> None:
    calls = []
    err = ValueError("nope")
    absent().bind(lambda x: calls.append(x) or present(x))
    result = faulted(err).bind(lambda x: calls.append(x) or present(x))
    assert calls == []
    assert result.error is err


def test_filter_and_filter_out() -> None:
    assert present(4).filter(lambda x: x > 3) == present(4)
    assert present(2).filter(lambda x: x > 3).is_absent()
    assert present(4).filter_out(lambda x: x > 3).is_absent()
    assert present(2).filter_out(lambda x: x > 3) == present(2)

    err = ValueError("kept")
    assert faulted(err).filter(lambda x: True).error is err
    assert absent().filter_out(lambda x: True).is_absent()


def test_default_and_default_lazy() -> None:
    assert present(1).default(9) == 1
    assert absent().default(9) == 9
    assert faulted(ValueError()).default(9) == 9

    calls = []

    def supplier() -> int:
        calls.append(1)
        return 7

    assert present(1).default_lazy(supplier) == 1
    assert calls == []
    assert absent().default_lazy(supplier) == 7
    assert calls == [1]


def test_match_runs_exactly_one_branch() -> None:
    seen: list[str] = []

    def on_present(x: int) -> str:
        seen.append("present")
        return f"p{x}"

    def on_absent() -> str:
        seen.append("absent")
        return "a"

    assert present(1).match(on_present, on_absent) == "p1"
    assert absent().match(on_present, on_absent) == "a"
    assert faulted(ValueError()).match(on_present, on_absent) == "a"
    assert seen == ["present", "absent", "absent"]


def test_match_ex_dispatches_on_three_tags() -> None:
    err = OSError("disk")

    def dispatch(opt: Option[int]) -> str:
        return opt.match_ex(
            lambda x: f"value {x}",
            lambda e: f"fault {e}",
            lambda: "nothing",
        )

    assert dispatch(present(2)) == "value 2"
    assert dispatch(faulted(err)) == "fault disk"
    assert dispatch(absent()) == "nothing"


def test_force_unwrap_failures() -> None:
    with pytest.raises(NoValueError, match="Absent"):
        absent().force_unwrap()

    err = KeyError("missing-key")
    with pytest.raises(NoValueError, match="missing-key") as info:
        faulted(err).force_unwrap()
    assert info.value.__cause__ is err

    hook: list[bool] = []
    with pytest.raises(NoValueError):
        absent().force_unwrap(lambda: hook.append(True))
    assert hook == [True]


def test_absent_equals_faulted_but_not_present() -> None:
    assert absent() == faulted(ValueError("x"))
    assert faulted(ValueError("a")) == faulted(TypeError("b"))
    assert absent() != present(None)
    assert present(1) == present(1)
    assert present(1) != present(2)
    assert hash(absent()) == hash(faulted(ValueError()))


def test_or_and_combinators() -> None:
    assert (absent() | present(2)) == present(2)
    assert (present(1) | present(2)) == present(1)
    assert (present(1) & present("a")) == present((1, "a"))
    assert (present(1) & absent()).is_absent()


def test_supplementary_helpers() -> None:
    seen: list[int] = []
    present(5).may(seen.append)
    absent().may(seen.append)
    assert seen == [5]

    assert present(5).check(lambda x: x > 1)
    assert not absent().check(lambda x: True)
    assert present(2).map_default(str, "none") == "2"
    assert absent().map_default(str, "none") == "none"
    assert present(present(3)).flatten() == present(3)
    assert bool(present(0)) is True
    assert bool(absent()) is False


def test_projection_into_either() -> None:
    left = present(1).or_either(present("x"))
    assert left.value.is_left()
    right = absent().or_either(present("x"))
    assert right.value.right == "x"
    assert absent().or_either(absent()).is_absent()

    assert present(1).inl_or_default("d").left == 1
    assert absent().inl_or_default("d").right == "d"
    assert present(1).inr_or_default("d").right == 1


def test_to_try() -> None:
    assert present(1).to_try().value == 1
    err = ValueError("x")
    assert faulted(err).to_try().error is err
    assert isinstance(absent().to_try().error, MissingValueError)


def test_repr() -> None:
    assert repr(present(1)) == "Present(1)"
    assert repr(absent()) == "Absent"
    assert repr(faulted(ValueError("x"))) == "Faulted(ValueError('x'))"


def test_structural_pattern_matching() -> None:
    match present(3):
        case Option(Tag.PRESENT, value):
            assert value == 3
        case _:
            pytest.fail("expected a present option")
