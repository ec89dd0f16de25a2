"""
syntaxlens Lexer Package

A fast, approximate single-pass scanner that splits source text into
classified tokens for syntax coloring.

Key Features:
- One generic scanner driven by per-language data (LanguageDefinition)
- Lossless: token lexemes concatenate back to the exact input
- Never fails on malformed source (unterminated strings/comments, stray characters)
- Lazy token iteration, thread-safe scanner instances
"""

from .tokens import Token, TokenType, join_lexemes, with_offsets
from .definition import LanguageDefinition
from .scanner import Scanner, get_scanner, tokenize_string, tokenize_file
from .errors import InvalidConfiguration, UnknownLanguageError, Diagnostic

__all__ = [
    "Scanner",
    "Token",
    "TokenType",
    "LanguageDefinition",
    "InvalidConfiguration",
    "UnknownLanguageError",
    "Diagnostic",
    "get_scanner",
    "tokenize_string",
    "tokenize_file",
    "join_lexemes",
    "with_offsets",
]
