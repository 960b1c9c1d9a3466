import pytest

from n8lang.errors import ASTNodeError, LexicalAnalysisError, ParserError
from n8lang.token import Token, TokenType


def _token():
    return Token("x", "main.n8", 2, 5, TokenType.IDENTIFIER)


def test_lexical_error_carries_message():
    error = LexicalAnalysisError("Expecting decimal digits. (line 1, column 3)")
    assert str(error) == "Expecting decimal digits. (line 1, column 3)"


def test_parser_error_keeps_address_and_message():
    token = _token()
    error = ParserError(token, "Encountered end-of-file.")
    assert error.address is token
    assert error.message == "Encountered end-of-file."
    assert str(error) == "Encountered end-of-file."


def test_parser_error_without_address():
    error = ParserError(None, "oops")
    assert error.address is None
    assert str(error) == "oops"


def test_ast_node_error_keeps_address_and_message():
    token = _token()
    with pytest.raises(ASTNodeError) as info:
        raise ASTNodeError(token, "Cannot call non-function")
    assert info.value.address == token
    assert str(info.value) == "Cannot call non-function"