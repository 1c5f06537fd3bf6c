# src/filter_translator/base/translator.py
import logging
from typing import Dict, List, Optional, Sequence

from .config import TranslatorSettings
from .exceptions import InternalConsistencyError, InvalidOperatorError
from .filter import (
    BetweenFilterCondition,
    Condition,
    Filter,
    FilterCondition,
    Operator,
    Present,
)
from .paths import FieldPathMapper
from .query import (
    MATCH_ALL,
    And,
    FieldExists,
    FieldOp,
    Or,
    QueryExpression,
    QueryOperator,
)

# --- Setup Logging ---
log = logging.getLogger(__name__)


class QueryTranslator:
    """
    Translates a :class:`Filter` into a store-agnostic :class:`QueryExpression`.

    Conditions on the same field are combined with OR, distinct fields with
    AND. Fields keep the order in which they first appear in the filter, so
    translating the same filter always yields the same tree. The translator
    keeps no state between calls and may be shared freely.
    """

    _BOUND_OPERATOR_MAP = {
        Operator.GT: QueryOperator.GT,
        Operator.GTE: QueryOperator.GTE,
        Operator.LT: QueryOperator.LT,
        Operator.LTE: QueryOperator.LTE,
    }

    def __init__(
        self,
        path_mapper: Optional[FieldPathMapper] = None,
        settings: Optional[TranslatorSettings] = None,
    ):
        if path_mapper is not None and settings is not None:
            raise ValueError("Pass either path_mapper or settings, not both.")
        if path_mapper is None:
            path_mapper = (settings or TranslatorSettings()).build_path_mapper()
        self._path_mapper = path_mapper
        log.info(f"QueryTranslator initialized with {path_mapper!r}")

    @property
    def path_mapper(self) -> FieldPathMapper:
        return self._path_mapper

    def translate(self, filter: Optional[Filter]) -> QueryExpression:
        """Translates ``filter``; an absent or empty filter matches everything."""
        if filter is None:
            log.debug("No filter given, translating to MatchAll.")
            return MATCH_ALL

        groups = self._group_by_field(filter.conditions)
        per_field = [
            self._translate_group(field, conditions)
            for field, conditions in groups.items()
        ]
        if not per_field:
            log.debug("Filter has no conditions, translating to MatchAll.")
            return MATCH_ALL

        expression = And(*per_field)
        log.debug(f"Translated filter with {len(filter)} condition(s) to {expression!r}")
        return expression

    def map_field(self, field: str, presence: bool = False) -> str:
        return self._path_mapper.map(field, presence=presence)

    @staticmethod
    def _group_by_field(
        conditions: Sequence[Condition],
    ) -> Dict[str, List[Condition]]:
        # dict keeps first-seen insertion order
        groups: Dict[str, List[Condition]] = {}
        for condition in conditions:
            groups.setdefault(condition.field, []).append(condition)
        return groups

    def _translate_group(
        self, field: str, conditions: List[Condition]
    ) -> QueryExpression:
        translated = [self._translate_condition(c) for c in conditions]
        if not translated:
            log.error(f"Field group '{field}' produced no expression.")
            raise InternalConsistencyError(
                f"Field group '{field}' produced no query expression."
            )
        if len(translated) == 1:
            return translated[0]
        log.debug(f"Combining {len(translated)} conditions on '{field}' with OR")
        return Or(*translated)

    def _translate_condition(self, condition: Condition) -> QueryExpression:
        if isinstance(condition, BetweenFilterCondition):
            return self._translate_between(condition)
        elif isinstance(condition, FilterCondition):
            if condition.is_presence:
                path = self._path_mapper.map(condition.field, presence=True)
                log.debug(f"Presence check on '{condition.field}' -> {path}")
                return FieldExists(path)
            if not isinstance(condition.value, Present):
                raise TypeError(
                    f"FilterCondition value for '{condition.field}' must be Present or None, "
                    f"got {type(condition.value).__name__}"
                )
            path = self._path_mapper.map(condition.field)
            log.debug(f"Equality on '{condition.field}' -> {path}")
            return FieldOp(path, QueryOperator.EQ, condition.value.value)
        else:
            log.error(f"Unsupported condition type: {type(condition)}")
            raise TypeError(
                f"Unsupported filter condition type: {type(condition).__name__}"
            )

    def _translate_between(self, condition: BetweenFilterCondition) -> QueryExpression:
        low = self._bound_operator(condition.low_operator, condition.field)
        high = self._bound_operator(condition.high_operator, condition.field)
        path = self._path_mapper.map(condition.field)
        log.debug(
            f"Range on '{condition.field}' -> {path} "
            f"{low.value} {condition.low_value!r}, {high.value} {condition.high_value!r}"
        )
        return And(
            FieldOp(path, low, condition.low_value),
            FieldOp(path, high, condition.high_value),
        )

    def _bound_operator(self, operator: Operator, field: str) -> QueryOperator:
        try:
            return self._BOUND_OPERATOR_MAP[operator]
        except (KeyError, TypeError):
            log.error(f"Invalid bound operator {operator!r} on field '{field}'")
            raise InvalidOperatorError(operator, field) from None
