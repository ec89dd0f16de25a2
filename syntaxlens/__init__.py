"""
syntaxlens

A lossless, never-failing source scanner that classifies text into tokens
for syntax coloring.

Architecture:
    syntaxlens/
    ├── lexer/           # Tokens, language definitions, the generic Scanner
    ├── languages/       # Built-in definitions (C#, C, Java, JavaScript) and registry
    └── cli.py           # Token dump command line tool

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Scanner, Token, TokenType, LanguageDefinition, InvalidConfiguration,
    UnknownLanguageError, get_scanner, tokenize_string, tokenize_file,
    join_lexemes, with_offsets
)
from .languages import LanguageRegistry

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "LanguageDefinition",
    "LanguageRegistry",

    # Errors
    "InvalidConfiguration",
    "UnknownLanguageError",

    # Convenience
    "get_scanner",
    "tokenize_string",
    "tokenize_file",
    "join_lexemes",
    "with_offsets",

    # Version info
    "__version__",
    "__license__",
]
