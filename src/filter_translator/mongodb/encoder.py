# src/filter_translator/mongodb/encoder.py
import logging
from typing import Any, Dict, Iterable

from bson import ObjectId

from filter_translator.base.exceptions import InvalidOperatorError
from filter_translator.base.query import (
    And,
    FieldExists,
    FieldOp,
    MatchAll,
    Or,
    QueryExpression,
    QueryLogical,
    QueryOperator,
)
from filter_translator.base.utils import prepare_for_storage


class MongoQueryEncoder:
    """
    Renders a :class:`QueryExpression` as a MongoDB filter document.

    Logical nodes are encoded one to one (``$and`` / ``$or`` lists keep every
    child, even single ones) so the document mirrors the expression tree.
    """

    _MONGO_OP_MAP = {
        QueryOperator.GT: "$gt",
        QueryOperator.GTE: "$gte",
        QueryOperator.LT: "$lt",
        QueryOperator.LTE: "$lte",
    }

    def __init__(
        self,
        coerce_object_ids: bool = False,
        object_id_fields: Iterable[str] = ("_id",),
    ):
        """
        Args:
            coerce_object_ids: Convert valid 24-character hex strings compared
                against ``object_id_fields`` into ``bson.ObjectId`` values.
            object_id_fields: Storage paths holding ObjectIds.
        """
        self._coerce_object_ids = coerce_object_ids
        self._object_id_fields = frozenset(object_id_fields)
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def encode(self, expression: QueryExpression) -> Dict[str, Any]:
        self._logger.debug(f"Encoding expression: {expression!r}")
        if isinstance(expression, MatchAll):
            return {}
        if isinstance(expression, QueryLogical):
            return self._encode_logical(expression)
        if isinstance(expression, FieldOp):
            return self._encode_field_op(expression)
        if isinstance(expression, FieldExists):
            return {expression.path: {"$exists": True}}
        raise TypeError(f"Unknown QueryExpression type: {type(expression)}")

    def _encode_logical(self, expression: QueryLogical) -> Dict[str, Any]:
        if isinstance(expression, And):
            mongo_logic_op = "$and"
        elif isinstance(expression, Or):
            mongo_logic_op = "$or"
        else:
            raise TypeError(f"Unknown logical expression type: {type(expression)}")
        return {mongo_logic_op: [self.encode(c) for c in expression.conditions]}

    def _encode_field_op(self, expression: FieldOp) -> Dict[str, Any]:
        path = expression.path
        value = self._prepare_value(path, expression.value)
        if expression.operator == QueryOperator.EQ:
            # A dict with "$" keys would be read as an operator expression.
            if isinstance(value, dict) and any(
                isinstance(k, str) and k.startswith("$") for k in value
            ):
                return {path: {"$eq": value}}
            return {path: value}
        mongo_op = self._MONGO_OP_MAP.get(expression.operator)
        if mongo_op is None:
            self._logger.error(
                f"Encountered unhandled QueryOperator during MongoDB encoding: "
                f"{expression.operator!r}"
            )
            raise InvalidOperatorError(expression.operator, path)
        return {path: {mongo_op: value}}

    def _prepare_value(self, path: str, value: Any) -> Any:
        if (
            self._coerce_object_ids
            and path in self._object_id_fields
            and isinstance(value, str)
            and ObjectId.is_valid(value)
        ):
            return ObjectId(value)
        return prepare_for_storage(value)
