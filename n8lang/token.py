"""Tokens, token kinds and the fixed operator and keyword sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Kinds of token, in the order used when sorting tokens."""

    DIGIT = 0
    STRING = 1
    REGEX = 2
    KEYWORD = 3
    IDENTIFIER = 4
    OPERATOR = 5

    def __str__(self) -> str:
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    TokenType.DIGIT: "digit",
    TokenType.STRING: "string",
    TokenType.REGEX: "regular expression",
    TokenType.KEYWORD: "keyword",
    TokenType.IDENTIFIER: "identifier",
    TokenType.OPERATOR: "operator",
}

OPERATORS = (
    "+", "-", "*", "/", "\\", "!", "!=",
    "&", "&&", "|", "||", "^", "%",
    "(", ")", "[", "]", "{", "}",
    "=", "==", ":", ";", "'", "\"",
    "<", "<<", "<=", ">", ">>", ">=",
    ",", ".", "?", "::", "!:",
)

KEYWORDS = frozenset({
    "break", "catch", "continue", "delete",
    "else", "false", "func", "halt", "handle",
    "if", "lock", "loop", "maybe", "nil",
    "parallel", "random", "render", "ret",
    "size", "test", "then", "throw", "true",
    "type", "unless", "use", "val", "wait",
    "when", "while", "with",
})


def is_keyword(image: str) -> bool:
    """Return True if the text is a reserved word."""
    return image in KEYWORDS


def is_operator(image: str) -> bool:
    """Return True if the text is one of the recognised operators."""
    return image in OPERATORS


@dataclass
class Token:
    """A lexical token with its position in a source file."""

    image: str
    file_name: str
    line: int
    column: int
    type: TokenType

    def append_to_image(self, text: str) -> None:
        """Extend the token text, as done for dotted names."""
        self.image += text

    def sort_key(self) -> tuple:
        """Order by kind first, then by text."""
        return (self.type.value, self.image)

    def render(self) -> str:
        """Describe the token and its location for diagnostics."""
        return (
            f"\u001b[1;32m{self.image}\u001b[0m [line {self.line}, "
            f"column {self.column}] (\u001b[4;97m{self.file_name}\u001b[0m)"
        )

    def __str__(self) -> str:
        return self.render()