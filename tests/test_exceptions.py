# tests/test_exceptions.py

import pytest

from filter_translator import (
    InternalConsistencyError,
    InvalidOperatorError,
    TranslationError,
)


@pytest.mark.parametrize(
    "exc_type", [InvalidOperatorError, InternalConsistencyError]
)
def test_translation_errors_share_base(exc_type):
    assert issubclass(exc_type, TranslationError)


def test_default_messages():
    assert str(TranslationError()) == "The filter could not be translated."
    assert str(InternalConsistencyError()) == "A field group produced no query expression."


def test_invalid_operator_message():
    error = InvalidOperatorError("ne", "size")
    assert error.operator == "ne" and error.field == "size"
    assert str(error) == (
        "Unsupported bound operator 'ne' on field 'size'; expected one of GT, GTE, LT, LTE."
    )
    assert "on field" not in str(InvalidOperatorError("ne"))
