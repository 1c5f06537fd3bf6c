# tests/conftest.py
import logging
from typing import Any, Callable, List, Optional, Type

import pytest

from filter_translator.base.filter import (
    BetweenFilterCondition,
    Filter,
    FilterCondition,
    Operator,
)
from filter_translator.base.paths import FieldPathMapper
from filter_translator.base.query import QueryExpression, QueryLogical
from filter_translator.base.translator import QueryTranslator
from filter_translator.mongodb.encoder import MongoQueryEncoder
from filter_translator.mongodb.serializer import MongoFilterSerializer

logging.getLogger("filter_translator").setLevel(logging.DEBUG)


# --- Fixtures ---
@pytest.fixture
def mapper() -> FieldPathMapper:
    return FieldPathMapper()


@pytest.fixture
def translator() -> QueryTranslator:
    return QueryTranslator()


@pytest.fixture
def encoder() -> MongoQueryEncoder:
    return MongoQueryEncoder()


@pytest.fixture
def serializer() -> MongoFilterSerializer:
    return MongoFilterSerializer()


@pytest.fixture
def size_range() -> BetweenFilterCondition:
    return BetweenFilterCondition("size", Operator.GTE, 10, Operator.LT, 100)


@pytest.fixture
def mixed_filter(size_range: BetweenFilterCondition) -> Filter:
    """Conditions on three fields, interleaved, with a repeated format."""
    return Filter.of(
        FilterCondition.equals("format", "pdf"),
        size_range,
        FilterCondition.equals("format", "doc"),
        FilterCondition.exists("checksum"),
    )


# --- Helper Functions ---
def _find_expressions(
    expression: Optional[QueryExpression], node_type: Type[QueryExpression], **attrs: Any
) -> List[QueryExpression]:
    found: List[QueryExpression] = []
    if expression is None:
        return found
    if isinstance(expression, node_type) and all(
        getattr(expression, name, None) == value for name, value in attrs.items()
    ):
        found.append(expression)
    if isinstance(expression, QueryLogical):
        for condition in expression.conditions:
            found.extend(_find_expressions(condition, node_type, **attrs))
    return found


@pytest.fixture
def find_expressions() -> Callable[..., List[QueryExpression]]:
    """Collects every node of a type (and matching attributes) in a tree."""
    return _find_expressions
