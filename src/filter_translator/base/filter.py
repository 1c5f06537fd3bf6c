# src/filter_translator/base/filter.py
"""
Filter model consumed by the translator.

A Filter is an ordered, immutable sequence of conditions. Two condition
variants exist: FilterCondition (equality, or presence when no value is
given) and BetweenFilterCondition (a range with independent low/high bounds).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional, Tuple, Union


class Operator(Enum):
    """Bound operators usable in a BetweenFilterCondition."""

    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


@dataclass(frozen=True)
class Present:
    """Marks a supplied condition value. ``Present(None)`` means "equals null"."""

    value: Any


@dataclass(frozen=True)
class FilterCondition:
    """
    Equality or presence test on a single field.

    ``value`` holds a :class:`Present` for an equality test. When it is None
    the condition only requires the field to be set.
    """

    field: str
    value: Optional[Present] = None

    @classmethod
    def equals(cls, field: str, value: Any) -> "FilterCondition":
        return cls(field, Present(value))

    @classmethod
    def exists(cls, field: str) -> "FilterCondition":
        return cls(field, None)

    @property
    def is_presence(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class BetweenFilterCondition:
    """Range test on a single field, e.g. ``10 <= size < 100``."""

    field: str
    low_operator: Operator
    low_value: Any
    high_operator: Operator
    high_value: Any


Condition = Union[FilterCondition, BetweenFilterCondition]


@dataclass(frozen=True)
class Filter:
    """An ordered collection of conditions describing which records to select."""

    conditions: Tuple[Condition, ...] = ()

    def __post_init__(self):
        if not isinstance(self.conditions, tuple):
            object.__setattr__(self, "conditions", tuple(self.conditions))

    @classmethod
    def of(cls, *conditions: Condition) -> "Filter":
        return cls(conditions)

    def with_condition(self, condition: Condition) -> "Filter":
        """Returns a new Filter with ``condition`` appended."""
        return Filter(self.conditions + (condition,))

    def extend(self, conditions: Iterable[Condition]) -> "Filter":
        return Filter(self.conditions + tuple(conditions))

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self) -> Iterator[Condition]:
        return iter(self.conditions)
