"""
Token definitions for the syntaxlens scanner.

A token is a classified slice of source text. The classification is
deliberately coarse: it is meant for coloring, not parsing, so every
language shares the same closed set of token types:
- Text (whitespace runs and unrecognized characters)
- Comments and preprocessor/directive lines
- Literals (strings, character literals, numbers)
- Words (identifiers, keywords, built-in types)
- Operators and punctuation
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types produced by the scanner.

    The set is closed and shared by every language definition.
    """

    TEXT = auto()                   # whitespace, unknown characters
    COMMENT = auto()                # // line, /* block */
    STRING = auto()                 # "text", 'c'
    PREPROCESSOR = auto()           # #region, #include <stdio.h>
    NUMBER = auto()                 # 42, 3.14f, 0x1F
    IDENTIFIER = auto()             # counter, _name, @class
    KEYWORD = auto()                # if, class, return
    TYPE = auto()                   # int, string, bool
    OPERATOR = auto()               # +, ==, ??=, =>
    PUNCTUATION = auto()            # { } ( ) [ ] ; , .


@dataclass(frozen=True)
class Token:
    """
    A classified slice of source text.

    The lexeme is the exact source text the token covers, delimiters and
    escape sequences included. Tokens carry no position: offsets are
    recovered by concatenation (see with_offsets).
    """
    kind: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"{self.kind.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.lexeme!r})"

    @property
    def is_trivia(self) -> bool:
        """Check if this token carries no code (whitespace or a comment)."""
        if self.kind == TokenType.COMMENT:
            return True
        return self.kind == TokenType.TEXT and self.lexeme.isspace()

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.kind in {TokenType.STRING, TokenType.NUMBER}

    @property
    def is_word(self) -> bool:
        """Check if this token is identifier-shaped."""
        return self.kind in {TokenType.IDENTIFIER, TokenType.KEYWORD, TokenType.TYPE}


def join_lexemes(tokens: Iterable[Token]) -> str:
    """Rebuild the source text a token sequence was scanned from."""
    return "".join(token.lexeme for token in tokens)


def with_offsets(tokens: Iterable[Token]) -> Iterator[Tuple[int, Token]]:
    """
    Pair each token with the offset of its first character.

    Offsets count code points from the start of the scanned text.
    """
    offset = 0
    for token in tokens:
        yield offset, token
        offset += len(token.lexeme)
