"""Lexical analysis: turning N8 source text into a list of tokens."""

from __future__ import annotations

from typing import Callable, List

from n8lang.errors import LexicalAnalysisError
from n8lang.escapes import replace_escape_sequences
from n8lang.token import OPERATORS, Token, TokenType, is_keyword

_WHITESPACE = frozenset(" \t\r\n\f")
_OPERATOR_CHARS = frozenset("!~`#%^&*()-=+[]{}|\":;<,>.?/\\")
_OPERATOR_SET = frozenset(OPERATORS)
_RADIX_DIGITS = {
    "b": frozenset("01"),
    "t": frozenset("012"),
    "c": frozenset("01234567"),
    "x": frozenset("0123456789abcdefABCDEF"),
}
_NUL = "\0"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alphabet(ch: str) -> bool:
    return ch not in _WHITESPACE and not _is_digit(ch) and ch not in _OPERATOR_CHARS


def is_valid_identifier(text: str) -> bool:
    """Return True if the text could be used as a variable name."""
    if text and _is_digit(text[0]):
        return False
    if any(ch in _OPERATOR_CHARS or ch in _WHITESPACE for ch in text):
        return False
    return not is_keyword(text)


class Tokenizer:
    """Scanner that splits one source text into tokens."""

    def __init__(self, source: str, file_name: str) -> None:
        self.source = source
        self.file_name = file_name
        self.tokens: List[Token] = []
        self._index = 0
        self._line = 1
        self._column = 0

    @classmethod
    def load_file(cls, file_path: str) -> "Tokenizer":
        """Create a tokenizer over the contents of a file."""
        try:
            with open(file_path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"File not found: {file_path}") from exc
        return cls(content, file_path)

    def scan(self) -> List[Token]:
        """Scan the whole source and return the tokens found."""
        while not self._at_end():
            ch = self._next()
            self._column += 1

            if ch in _WHITESPACE:
                if ch == "\n":
                    self._line += 1
                    self._column = 0
            elif ch in _OPERATOR_CHARS:
                if ch == "#":
                    self._skip_comment()
                elif ch == '"':
                    self._scan_quoted('"', TokenType.STRING, "string literal", True)
                elif ch == "`":
                    self._scan_quoted(
                        "`", TokenType.REGEX, "regular expression literal", False
                    )
                else:
                    self._scan_operator(ch)
            elif _is_digit(ch):
                self._scan_number(ch)
            else:
                self._scan_word(ch)

        return self.tokens

    def _at_end(self) -> bool:
        return self._index >= len(self.source)

    def _peek(self) -> str:
        if self._at_end():
            return _NUL
        return self.source[self._index]

    def _next(self) -> str:
        ch = self._peek()
        self._index += 1
        return ch

    def _location(self) -> str:
        return f"(line {self._line}, column {self._column})"

    def _emit(self, image: str, column: int, token_type: TokenType) -> None:
        self.tokens.append(
            Token(image, self.file_name, self._line, column, token_type)
        )

    def _take_while(self, accept: Callable[[str], bool]) -> str:
        taken = []
        while not self._at_end() and accept(self._peek()):
            taken.append(self._next())
            self._column += 1
        return "".join(taken)

    def _skip_comment(self) -> None:
        while not self._at_end() and self._peek() != "\n":
            self._index += 1
            self._column += 1
        self._column = 0

    def _scan_quoted(
        self,
        quote: str,
        token_type: TokenType,
        description: str,
        counts_plain: bool,
    ) -> None:
        start_column = self._column
        parts = []

        while not self._at_end() and self._peek() != quote:
            ch = self._next()
            if counts_plain:
                self._column += 1

            if ch == "\n":
                raise LexicalAnalysisError(
                    f"Found new line inside {description}. {self._location()}"
                )
            if ch == "\\":
                parts.append(ch)
                self._column += 1
                if self._at_end():
                    raise LexicalAnalysisError(
                        "Expecting escape character, encountered end-of-file. "
                        + self._location()
                    )
                parts.append(self._next())
                self._column += 1
            else:
                parts.append(ch)

        if self._at_end():
            raise LexicalAnalysisError(
                f"Unterminated {description}. {self._location()}"
            )

        self._index += 1
        self._column += 1
        self._emit(replace_escape_sequences("".join(parts)), start_column, token_type)

    def _scan_operator(self, first: str) -> None:
        start_column = self._column
        op = first
        while not self._at_end() and op + self._peek() in _OPERATOR_SET:
            op += self._next()
            self._column += 1
        self._emit(op, start_column, TokenType.OPERATOR)

    def _scan_number(self, first: str) -> None:
        start_column = self._column
        digit = first

        if first == "0":
            radix = self._next()
            self._column += 1
            accepted = _RADIX_DIGITS.get(radix)

            if accepted is not None:
                digit += radix + self._take_while(accepted.__contains__)
            else:
                self._index -= 1
                self._column -= 1
                digit += self._scan_decimal_tail(counts_sign=False)
        else:
            digit += self._scan_decimal_tail(counts_sign=True)

        self._emit(digit, start_column, TokenType.DIGIT)

    def _scan_decimal_tail(self, counts_sign: bool) -> str:
        text = self._take_while(_is_digit)

        if not self._at_end() and self._peek() == ".":
            text += self._next()
            self._column += 1

            if self._at_end() or not _is_digit(self._peek()):
                raise LexicalAnalysisError(
                    f"Expecting decimal digits. {self._location()}"
                )
            text += self._take_while(_is_digit)

        if not self._at_end() and self._peek() == "e":
            text += self._next()
            self._column += 1

            sign = self._next()
            if counts_sign:
                self._column += 1

            if self._at_end() or sign not in ("+", "-"):
                raise LexicalAnalysisError(
                    "Expecting 'e' followed by decimal digits. " + self._location()
                )
            text += sign + self._take_while(_is_digit)

        return text

    def _scan_word(self, first: str) -> None:
        start_column = self._column
        word = first + self._take_while(lambda ch: _is_digit(ch) or _is_alphabet(ch))
        token_type = TokenType.KEYWORD if is_keyword(word) else TokenType.IDENTIFIER
        self._emit(word, start_column, token_type)


def tokenize(source: str, file_name: str = "<input>") -> List[Token]:
    """Scan source text and return its tokens."""
    return Tokenizer(source, file_name).scan()