"""Exceptions raised while scanning, parsing and evaluating N8 code."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from n8lang.token import Token


class LexicalAnalysisError(Exception):
    """Raised when source text cannot be split into tokens."""


class ParserError(Exception):
    """Raised when a token stream does not form a valid program."""

    def __init__(self, address: Optional["Token"], message: str) -> None:
        super().__init__(message)
        self.address = address
        self.message = message


class ASTNodeError(Exception):
    """Raised when a syntax tree node fails during evaluation."""

    def __init__(self, address: Optional["Token"], message: str) -> None:
        super().__init__(message)
        self.address = address
        self.message = message