"""Tests for qlparse error types."""

import pytest

from qlparse.errors import QlError, ParseError
from qlparse.parser import parse_query


def test_parse_error_is_ql_error():
    assert issubclass(ParseError, QlError)


def test_message_attribute():
    err = ParseError("Unexpected token")
    assert err.message == "Unexpected token"
    assert str(err) == "Unexpected token"


def test_grammar_failure_raises_parse_error():
    with pytest.raises(QlError) as exc_info:
        parse_query("{,}")
    assert isinstance(exc_info.value, ParseError)
    assert exc_info.value.message == "Unexpected token, expected: field"


def test_tokenizer_failure_raises_parse_error():
    with pytest.raises(ParseError):
        parse_query("{ a ")
