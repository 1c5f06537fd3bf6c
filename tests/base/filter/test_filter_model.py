# tests/base/filter/test_filter_model.py

import dataclasses

import pytest

from filter_translator.base.filter import (
    BetweenFilterCondition,
    Filter,
    FilterCondition,
    Operator,
    Present,
)


def test_equals_wraps_value():
    condition = FilterCondition.equals("format", "pdf")
    assert condition.value == Present("pdf")
    assert not condition.is_presence


def test_exists_has_no_value():
    condition = FilterCondition.exists("checksum")
    assert condition.value is None
    assert condition.is_presence


def test_null_equality_is_distinct_from_presence():
    null_check = FilterCondition.equals("checksum", None)
    assert not null_check.is_presence
    assert null_check != FilterCondition.exists("checksum")


def test_present_compares_by_value():
    assert Present(0) == Present(0)
    assert Present(0) != Present(None)


def test_filter_normalises_conditions_to_tuple():
    conditions = [FilterCondition.equals("a", 1), FilterCondition.exists("b")]
    flt = Filter(conditions)
    conditions.append(FilterCondition.exists("c"))
    assert isinstance(flt.conditions, tuple)
    assert len(flt) == 2


def test_filter_is_immutable():
    flt = Filter.of(FilterCondition.equals("a", 1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        flt.conditions = ()
    with pytest.raises(dataclasses.FrozenInstanceError):
        flt.conditions[0].field = "b"


def test_with_condition_returns_new_filter():
    base = Filter.of(FilterCondition.equals("a", 1))
    extended = base.with_condition(FilterCondition.exists("b"))
    assert len(base) == 1
    assert [c.field for c in extended] == ["a", "b"]


def test_extend_keeps_order():
    flt = Filter().extend(
        [
            BetweenFilterCondition("size", Operator.GT, 1, Operator.LT, 2),
            FilterCondition.equals("fmt", "pdf"),
        ]
    )
    assert [c.field for c in flt] == ["size", "fmt"]


def test_between_fields():
    condition = BetweenFilterCondition("size", Operator.GTE, 10, Operator.LTE, 20)
    assert (condition.low_operator, condition.low_value) == (Operator.GTE, 10)
    assert (condition.high_operator, condition.high_value) == (Operator.LTE, 20)
