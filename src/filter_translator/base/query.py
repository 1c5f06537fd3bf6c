# src/filter_translator/base/query.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Literal, Tuple


# --- Query Operator Enum ---
class QueryOperator(Enum):
    """Enumeration of comparison operators used in FieldOp leaves."""

    EQ = "="
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


# --- Structured Query Expression Classes ---
@dataclass(frozen=True)
class QueryExpression:
    """Base class for store-agnostic query expressions."""

    pass


@dataclass(frozen=True)
class MatchAll(QueryExpression):
    """The empty expression; selects every record."""

    def __repr__(self) -> str:
        return "MatchAll()"


MATCH_ALL = MatchAll()


@dataclass(frozen=True)
class FieldOp(QueryExpression):
    """Represents a single comparison (storage path <operator> value)."""

    path: str
    operator: QueryOperator
    value: Any


@dataclass(frozen=True)
class FieldExists(QueryExpression):
    """Requires the storage path to be set on the record."""

    path: str


@dataclass(frozen=True, init=False)
class QueryLogical(QueryExpression):
    """Represents a logical combination of expressions, kept in input order."""

    operator: ClassVar[Literal["and", "or"]]
    conditions: Tuple[QueryExpression, ...] = field(default=())

    def __init__(self, *conditions: QueryExpression):
        for condition in conditions:
            if not isinstance(condition, QueryExpression):
                raise TypeError(
                    f"{type(self).__name__} accepts QueryExpression children, "
                    f"got {type(condition).__name__}"
                )
        object.__setattr__(self, "conditions", tuple(conditions))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self.conditions)})"

    def __len__(self) -> int:
        return len(self.conditions)


@dataclass(frozen=True, init=False, repr=False)
class And(QueryLogical):
    operator: ClassVar[Literal["and", "or"]] = "and"


@dataclass(frozen=True, init=False, repr=False)
class Or(QueryLogical):
    operator: ClassVar[Literal["and", "or"]] = "or"
