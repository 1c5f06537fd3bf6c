from typing import Any, Optional


class TranslationError(Exception):
    """Base exception for failures while translating a filter into a query."""

    def __init__(self, message: str = "The filter could not be translated."):
        super().__init__(message)


class InvalidOperatorError(TranslationError):
    """Exception raised when a range bound carries an operator that has no query equivalent."""

    def __init__(self, operator: Any, field: Optional[str] = None):
        self.operator = operator
        self.field = field
        location = f" on field '{field}'" if field is not None else ""
        super().__init__(
            f"Unsupported bound operator {operator!r}{location}; "
            "expected one of GT, GTE, LT, LTE."
        )


class InternalConsistencyError(TranslationError):
    """Exception raised when a field group produces no query expression."""

    def __init__(self, message: str = "A field group produced no query expression."):
        super().__init__(message)
