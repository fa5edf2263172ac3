from __future__ import annotations

import dataclasses

import pytest

from perhaps import NOTHING, Just, Maybe, Nothing, Ordering
from samples import INTS, CallCounter, half, inc


def test_predicates_are_exclusive() -> None:
    for value in INTS:
        assert value.is_present() != value.is_absent()
    assert Just(1).is_present()
    assert Nothing().is_absent()


def test_just_none_is_present() -> None:
    """Just(None) is a real value, not absence."""
    assert Just(None).is_present()
    assert Just(None) != Nothing()


def test_resolve() -> None:
    assert Just(3).resolve("none", str) == "3"
    assert Nothing().resolve("none", str) == "none"


def test_resolve_does_not_call_transform_on_nothing() -> None:
    transform = CallCounter(result="called")
    assert Nothing().resolve("default", transform) == "default"
    assert transform.count == 0


def test_resolve_lazy_only_builds_default_when_absent() -> None:
    default = CallCounter(result=0)
    assert Just(2).resolve_lazy(default, inc) == 3
    assert default.count == 0
    assert Nothing().resolve_lazy(default, inc) == 0
    assert default.count == 1


def test_unwrap_or() -> None:
    assert Just(5).unwrap_or(0) == 5
    assert Nothing().unwrap_or(0) == 0


def test_unwrap_or_else() -> None:
    default = CallCounter(result=7)
    assert Just(5).unwrap_or_else(default) == 5
    assert default.count == 0
    assert Nothing().unwrap_or_else(default) == 7


def test_optional_conversions() -> None:
    assert Maybe.from_optional(None) == Nothing()
    assert Maybe.from_optional(0) == Just(0)
    assert Just("x").to_optional() == "x"
    assert Nothing().to_optional() is None


def test_map() -> None:
    assert Just(1).map(inc) == Just(2)
    assert Nothing().map(inc) == Nothing()


def test_map_does_not_call_function_on_nothing() -> None:
    func = CallCounter()
    Nothing().map(func)
    assert func.count == 0


def test_replace() -> None:
    assert Just(1).replace("x") == Just("x")
    assert Nothing().replace("x") == Nothing()


def test_apply_requires_both_sides() -> None:
    assert Nothing().apply(Just(1)) == Nothing()
    assert Just(inc).apply(Nothing()) == Nothing()
    assert Just(inc).apply(Just(1)) == Just(2)


def test_apply_does_not_call_function_when_value_absent() -> None:
    func = CallCounter(result=1)
    assert Just(func).apply(Nothing()) == Nothing()
    assert func.count == 0


def test_pure_and_empty() -> None:
    assert Maybe.pure(3) == Just(3)
    assert Maybe.empty() == Nothing()
    assert Maybe.empty() is NOTHING


def test_or_else() -> None:
    assert Nothing().or_else(Just(5)) == Just(5)
    assert Just(3).or_else(Just(5)) == Just(3)
    assert Nothing().or_else(Nothing()) == Nothing()


def test_or_operator() -> None:
    assert (Nothing() | Just(2) | Just(3)) == Just(2)
    assert (Just(1) | Nothing()) == Just(1)


def test_or_operator_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        Just(1) | 2  # noqa: B018


def test_or_else_lazy() -> None:
    fallback = CallCounter(result=Just(9))
    assert Just(1).or_else_lazy(fallback) == Just(1)
    assert fallback.count == 0
    assert Nothing().or_else_lazy(fallback) == Just(9)
    assert fallback.count == 1


def test_bind() -> None:
    assert Just(3).bind(lambda x: Just(x + 1)) == Just(4)
    assert Just(3).bind(half) == Nothing()
    assert Just(4).bind(half) == Just(2)


def test_bind_short_circuits_on_nothing() -> None:
    func = CallCounter(result=Just(1))
    assert Nothing().bind(func) == Nothing()
    assert func.count == 0


def test_nothing_annihilates_chain() -> None:
    steps = CallCounter(result=Just(1))
    result = Just(3).bind(half).bind(steps).bind(steps)
    assert result == Nothing()
    assert steps.count == 0


def test_filter() -> None:
    assert Just(4).filter(lambda x: x > 2) == Just(4)
    assert Just(1).filter(lambda x: x > 2) == Nothing()
    assert Nothing().filter(lambda x: True) == Nothing()


def test_extend_passes_wrapper() -> None:
    seen = CallCounter(result="seen")
    assert Just(1).extend(seen) == Just("seen")
    assert seen.calls == [(Just(1),)]


def test_extend_on_nothing() -> None:
    func = CallCounter()
    assert Nothing().extend(func) == Nothing()
    assert func.count == 0


def test_duplicate() -> None:
    assert Just(1).duplicate() == Just(Just(1))
    assert Nothing().duplicate() == Nothing()


def test_append() -> None:
    assert Nothing().append(Just("a")) == Just("a")
    assert Just("a").append(Nothing()) == Just("a")
    assert Just("a").append(Just("b")) == Just("ab")
    assert Nothing().append(Nothing()) == Nothing()


def test_add_operator() -> None:
    assert Just([1]) + Just([2]) + Nothing() == Just([1, 2])


def test_append_without_inner_add_raises_type_error() -> None:
    with pytest.raises(TypeError):
        Just(object()) + Just(object())


def test_equality() -> None:
    assert Nothing() == Nothing()
    assert Just(1) == Just(1)
    assert Just(1) != Just(2)
    assert Just(1) != Nothing()
    assert Nothing() != Just(1)
    assert Just(1) != 1


def test_hash_consistent_with_equality() -> None:
    assert hash(Just(1)) == hash(Just(1))
    assert hash(Nothing()) == hash(NOTHING)
    assert {Just(1), Just(1), Nothing(), Nothing()} == {Just(1), Nothing()}


def test_nothing_sorts_first() -> None:
    for value in (Just(-100), Just(0), Just(""), Just(None)):
        assert Nothing() < value
        assert value > Nothing()
        assert Nothing().compare(value) is Ordering.LT


def test_compare_inner_values() -> None:
    assert Just(2).compare(Just(5)) is Ordering.LT
    assert Just(5).compare(Just(2)) is Ordering.GT
    assert Just(5).compare(Just(5)) is Ordering.EQ
    assert Nothing().compare(Nothing()) is Ordering.EQ


def test_sorting() -> None:
    values = [Just(3), Nothing(), Just(1), Just(2), Nothing()]
    assert sorted(values) == [Nothing(), Nothing(), Just(1), Just(2), Just(3)]
    assert max(values) == Just(3)
    assert min(values) == Nothing()


def test_ordering_operators_reject_other_types() -> None:
    with pytest.raises(TypeError):
        Just(1) < 2  # noqa: B015


def test_iteration() -> None:
    assert list(Just(1)) == [1]
    assert list(Nothing()) == []
    assert [x for m in [Just(1), Nothing(), Just(3)] for x in m] == [1, 3]


def test_pattern_matching() -> None:
    def describe(value: Maybe[int]) -> str:
        match value:
            case Just(x):
                return f"got {x}"
            case Nothing():
                return "nothing"
        return "unreachable"

    assert describe(Just(1)) == "got 1"
    assert describe(Nothing()) == "nothing"


def test_immutability() -> None:
    value = Just(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.value = 2  # type: ignore[misc]


def test_operations_do_not_mutate_operands() -> None:
    inner = [1]
    value = Just(inner)
    value.map(lambda xs: xs + [2])
    value.append(Just([3]))
    assert value == Just([1])
    assert inner == [1]


def test_base_is_not_instantiable() -> None:
    """Only Just and Nothing exist; there is no third state."""
    with pytest.raises(TypeError):
        Maybe()  # type: ignore[abstract]


def test_every_value_is_one_of_two_variants() -> None:
    for value in INTS:
        assert isinstance(value, (Just, Nothing))
        assert isinstance(value, Just) == value.is_present()
