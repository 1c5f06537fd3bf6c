# src/filter_translator/__init__.py

"""
Filter Translator Library Initialization.

Translates structure-agnostic filters (ordered field/operator/value
conditions) into query expression trees, and renders those trees as MongoDB
filter documents.

It initializes a logger with a NullHandler and makes the filter model, the
query expression nodes, the translator, and the MongoDB encoder available at
the top level.
"""

import logging

# --------------------------------------------------------------------------
# Logging Setup
# --------------------------------------------------------------------------
# Library logs are discarded unless the consuming application configures
# logging for "filter_translator".
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
logger.propagate = False

# --------------------------------------------------------------------------
# Filter Model Exports
# --------------------------------------------------------------------------
from .base.filter import (
    BetweenFilterCondition,
    Condition,
    Filter,
    FilterCondition,
    Operator,
    Present,
)

# --------------------------------------------------------------------------
# Query Expression Exports
# --------------------------------------------------------------------------
from .base.query import (
    MATCH_ALL,
    And,
    FieldExists,
    FieldOp,
    MatchAll,
    Or,
    QueryExpression,
    QueryLogical,
    QueryOperator,
)

# --------------------------------------------------------------------------
# Translation Exports
# --------------------------------------------------------------------------
from .base.config import TranslatorSettings
from .base.exceptions import (
    InternalConsistencyError,
    InvalidOperatorError,
    TranslationError,
)
from .base.paths import FieldPathMapper
from .base.translator import QueryTranslator

# --------------------------------------------------------------------------
# MongoDB Exports
# --------------------------------------------------------------------------
from .mongodb.encoder import MongoQueryEncoder
from .mongodb.serializer import MongoFilterSerializer

__all__ = [
    # Filter model
    "Filter",
    "FilterCondition",
    "BetweenFilterCondition",
    "Condition",
    "Operator",
    "Present",
    # Expressions
    "QueryExpression",
    "QueryLogical",
    "QueryOperator",
    "MatchAll",
    "MATCH_ALL",
    "And",
    "Or",
    "FieldOp",
    "FieldExists",
    # Translation
    "QueryTranslator",
    "FieldPathMapper",
    "TranslatorSettings",
    # Exceptions
    "TranslationError",
    "InvalidOperatorError",
    "InternalConsistencyError",
    # MongoDB
    "MongoQueryEncoder",
    "MongoFilterSerializer",
    # Logging
    "logger",
]

__version__ = "0.1.0"
