"""Tokenizer, parser, syntax tree and support utilities for the N8 language."""

__version__ = "1.0.0"

__all__ = [
    "arguments",
    "convert",
    "errors",
    "escapes",
    "nodes",
    "parser",
    "randomutil",
    "semver",
    "token",
    "tokenizer",
    "vectormath",
]