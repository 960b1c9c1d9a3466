import pytest

from n8lang.errors import LexicalAnalysisError
from n8lang.token import KEYWORDS, TokenType
from n8lang.tokenizer import Tokenizer, is_valid_identifier, tokenize


def _pairs(tokens):
    return [(token.type, token.image) for token in tokens]


def test_empty_source_gives_no_tokens():
    assert tokenize("") == []


def test_keywords_identifiers_operators_and_digits():
    tokens = tokenize("val x = 1")
    assert _pairs(tokens) == [
        (TokenType.KEYWORD, "val"),
        (TokenType.IDENTIFIER, "x"),
        (TokenType.OPERATOR, "="),
        (TokenType.DIGIT, "1"),
    ]


def test_every_keyword_is_recognised():
    words = sorted(KEYWORDS)
    tokens = tokenize(" ".join(words))
    assert [token.image for token in tokens] == words
    assert all(token.type is TokenType.KEYWORD for token in tokens)


def test_longest_operator_match():
    tokens = tokenize("a<=b<<c!=d::e!:f&&g||h>=i>>j==k")
    operators = [t.image for t in tokens if t.type is TokenType.OPERATOR]
    assert operators == ["<=", "<<", "!=", "::", "!:", "&&", "||", ">=", ">>", "=="]


def test_operator_extension_stops_at_unknown_combination():
    assert [t.image for t in tokenize("===")] == ["==", "="]
    assert [t.image for t in tokenize("!!")] == ["!", "!"]


def test_tilde_is_a_single_operator():
    assert _pairs(tokenize("~x")) == [
        (TokenType.OPERATOR, "~"),
        (TokenType.IDENTIFIER, "x"),
    ]


def test_at_sign_is_part_of_identifier():
    assert _pairs(tokenize("x@y")) == [(TokenType.IDENTIFIER, "x@y")]


def test_string_escape_sequences_are_replaced():
    tokens = tokenize('"a\\tb\\nc"')
    assert _pairs(tokens) == [(TokenType.STRING, "a\tb\nc")]


def test_unknown_escape_keeps_backslash():
    tokens = tokenize('"a\\qb"')
    assert tokens[0].image == "a\\qb"


def test_regex_literal():
    tokens = tokenize("`[a-z]+\\d`")
    assert _pairs(tokens) == [(TokenType.REGEX, "[a-z]+\\d")]


def test_number_literals_keep_their_text():
    source = "0b101 0t12 0c17 0xFF 3.14 1e+5 2.5e-3 0.5 0"
    tokens = tokenize(source)
    assert [t.image for t in tokens] == source.split()
    assert all(t.type is TokenType.DIGIT for t in tokens)


def test_radix_stops_at_invalid_digit():
    tokens = tokenize("0b102")
    assert [t.image for t in tokens] == ["0b10", "2"]


def test_comments_are_skipped_and_lines_counted():
    source = "alpha\nbeta # note\n\ngamma"
    tokens = tokenize(source)
    assert [t.image for t in tokens] == ["alpha", "beta", "gamma"]
    for token in tokens:
        before = source[: source.index(token.image)]
        assert token.line == before.count("\n") + 1
        assert token.column == 1


def test_columns_point_at_token_start():
    source = 'val total = count + "text"'
    for token in tokenize(source):
        needle = f'"{token.image}"' if token.type is TokenType.STRING else token.image
        assert token.column == source.index(needle) + 1


def test_tokens_carry_file_name():
    tokens = tokenize("a b", "main.n8")
    assert {t.file_name for t in tokens} == {"main.n8"}


@pytest.mark.parametrize(
    "source, message",
    [
        ('"ab\ncd"', "Found new line inside string literal"),
        ("`ab\ncd`", "Found new line inside regular expression literal"),
        ("1.x", "Expecting decimal digits"),
        ("1.", "Expecting decimal digits"),
        ("0.5e", "Expecting 'e' followed by decimal digits"),
        ("7e5", "Expecting 'e' followed by decimal digits"),
        ("3e+", "Expecting 'e' followed by decimal digits"),
        ('"abc\\', "Expecting escape character, encountered end-of-file"),
    ],
)
def test_lexical_errors(source, message):
    with pytest.raises(LexicalAnalysisError, match=message):
        tokenize(source)


def test_unterminated_string_raises():
    with pytest.raises(LexicalAnalysisError):
        tokenize('"abc')


def test_scan_fills_tokens_attribute():
    tokenizer = Tokenizer("if (a) b", "f.n8")
    result = tokenizer.scan()
    assert result == tokenizer.tokens
    assert [t.image for t in result] == ["if", "(", "a", ")", "b"]


def test_load_file(tmp_path):
    path = tmp_path / "prog.n8"
    path.write_text("render! x", encoding="utf-8")
    tokenizer = Tokenizer.load_file(str(path))
    tokens = tokenizer.scan()
    assert [t.image for t in tokens] == ["render", "!", "x"]
    assert tokens[0].file_name == str(path)


def test_load_missing_file(tmp_path):
    missing = str(tmp_path / "absent.n8")
    with pytest.raises(FileNotFoundError, match="File not found"):
        Tokenizer.load_file(missing)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo", True),
        ("foo_bar2", True),
        ("1abc", False),
        ("a-b", False),
        ("a b", False),
        ("while", False),
    ],
)
def test_is_valid_identifier(text, expected):
    assert is_valid_identifier(text) is expected