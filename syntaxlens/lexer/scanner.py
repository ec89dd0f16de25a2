"""
syntaxlens Scanner - turns source text into classified tokens for coloring

A single left-to-right pass with one cursor. At every position the
construct recognizers are tried in a fixed order (whitespace, comments,
strings, directives, numbers, words, operators, punctuation) and the
first one that matches emits exactly one token. Nothing here ever raises
once scanning has started: unterminated comments and strings run to the
end of the input, and a character nobody recognizes becomes a one
character TEXT token. A highlighter must keep going on half-typed code.

The scan is approximate on purpose. Numbers and operators are maximal
runs of an allowed character class, so `1.2.3` is one NUMBER and `<<=>`
is one OPERATOR.
"""

import logging
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .tokens import Token, TokenType
from .definition import LanguageDefinition
from .errors import create_missing_definition_error, create_invalid_source_error

if TYPE_CHECKING:
    from ..languages.registry import LanguageRegistry

logger = logging.getLogger(__name__)


class Scanner:
    """
    Generic scanner parametrized by a LanguageDefinition.

    Holds no per-scan state, so one instance can serve any number of
    threads scanning independent inputs.
    """

    def __init__(self, definition: LanguageDefinition):
        """
        Initialize the scanner with a language definition.

        Args:
            definition: Keyword/type vocabularies and character classes

        Raises:
            InvalidConfiguration: If definition is missing or of the wrong type
        """
        if not isinstance(definition, LanguageDefinition):
            raise create_missing_definition_error(definition)
        self.definition = definition
        logger.debug("scanner ready for %s", definition.name)

    def __repr__(self) -> str:
        return f"Scanner({self.definition.name!r})"

    def scan(self, source: str) -> Iterator[Token]:
        """
        Lazily scan source text into tokens.

        The source is validated immediately; iteration itself never fails.

        Args:
            source: Full text of one file or snippet

        Returns:
            Iterator over tokens whose lexemes concatenate back to source

        Raises:
            InvalidConfiguration: If source is None or not a str
        """
        if not isinstance(source, str):
            raise create_invalid_source_error(source)
        return self._iter_tokens(source)

    def tokenize(self, source: str) -> List[Token]:
        """Scan source text eagerly. See scan()."""
        return list(self.scan(source))

    def _iter_tokens(self, source: str) -> Iterator[Token]:
        pos = 0
        length = len(source)
        while pos < length:
            kind, end = self._next_token(source, pos)
            yield Token(kind, source[pos:end])
            pos = end

    def _next_token(self, source: str, pos: int) -> Tuple[TokenType, int]:
        """Recognize the construct starting at pos; return its type and end offset."""
        definition = self.definition
        ch = source[pos]
        nxt = source[pos + 1] if pos + 1 < len(source) else ""

        if ch.isspace():
            return TokenType.TEXT, self._scan_whitespace(source, pos)

        if ch == "/" and nxt == "/":
            return TokenType.COMMENT, self._scan_to_line_end(source, pos)

        if ch == "/" and nxt == "*":
            return TokenType.COMMENT, self._scan_block_comment(source, pos)

        if ch == '"' or ch == "'":
            return TokenType.STRING, self._scan_quoted(source, pos, ch)

        if ch == definition.directive_marker:
            return TokenType.PREPROCESSOR, self._scan_to_line_end(source, pos)

        if ch.isdecimal():
            return TokenType.NUMBER, self._scan_number(source, pos)

        if self._is_word_start(ch):
            return self._scan_word(source, pos)

        if ch in definition.operator_start:
            return TokenType.OPERATOR, self._scan_operator(source, pos)

        if ch in definition.punctuation:
            return TokenType.PUNCTUATION, pos + 1

        # Unknown character - pass it through as text
        return TokenType.TEXT, pos + 1

    def _scan_whitespace(self, source: str, pos: int) -> int:
        end = pos + 1
        while end < len(source) and source[end].isspace():
            end += 1
        return end

    def _scan_to_line_end(self, source: str, pos: int) -> int:
        """Run up to, not past, the next newline."""
        end = source.find("\n", pos)
        return len(source) if end == -1 else end

    def _scan_block_comment(self, source: str, pos: int) -> int:
        # Search starts after "/*" so "/*/" does not close itself
        close = source.find("*/", pos + 2)
        if close == -1:
            return len(source)
        return close + 2

    def _scan_quoted(self, source: str, pos: int, quote: str) -> int:
        """
        Scan a string or char literal delimited by quote.

        A backslash and the character after it are skipped as one unit,
        so an escaped quote never closes the literal. Without a closing
        quote the literal runs to the end of the input.
        """
        end = pos + 1
        length = len(source)
        while end < length:
            ch = source[end]
            if ch == "\\" and end + 1 < length:
                end += 2
                continue
            end += 1
            if ch == quote:
                break
        return end

    def _scan_number(self, source: str, pos: int) -> int:
        number_chars = self.definition.number_chars
        end = pos + 1
        while end < len(source) and (source[end].isdecimal() or source[end] in number_chars):
            end += 1
        return end

    def _is_word_start(self, ch: str) -> bool:
        return (ch.isalpha() or ch == "_" or
                ch in self.definition.extra_identifier_chars or
                ch == self.definition.verbatim_prefix)

    def _is_word_part(self, ch: str) -> bool:
        return (ch.isalpha() or ch.isdecimal() or ch == "_" or
                ch in self.definition.extra_identifier_chars)

    def _scan_word(self, source: str, pos: int) -> Tuple[TokenType, int]:
        """Scan an identifier, keyword or type name, with an optional verbatim prefix."""
        prefix = self.definition.verbatim_prefix
        start = pos
        if source[pos] == prefix:
            start += 1
        end = start
        while end < len(source) and self._is_word_part(source[end]):
            end += 1

        # The prefix stays in the lexeme but not in the classified word
        return self.definition.classify_word(source[start:end]), end

    def _scan_operator(self, source: str, pos: int) -> int:
        operator_part = self.definition.operator_part
        end = pos + 1
        while end < len(source) and source[end] in operator_part:
            end += 1
        return end


def get_scanner(language_id: str, registry: Optional["LanguageRegistry"] = None) -> Scanner:
    """
    Build a scanner for a registered language.

    Args:
        language_id: Language name or alias, case-insensitive
        registry: Registry to look in (defaults to the built-in languages)

    Raises:
        UnknownLanguageError: If no language matches language_id
    """
    if registry is None:
        from ..languages.registry import LanguageRegistry
        registry = LanguageRegistry.default()
    return Scanner(registry.get(language_id))


def tokenize_string(source: str, language_id: str) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        language_id: Language name or alias

    Returns:
        List of tokens

    Raises:
        InvalidConfiguration: If the language is unknown or source is not text
    """
    return get_scanner(language_id).tokenize(source)


def tokenize_file(filepath: str, language_id: Optional[str] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file (read as UTF-8)
        language_id: Language name or alias; guessed from the extension if omitted

    Returns:
        List of tokens

    Raises:
        InvalidConfiguration: If the language is unknown or cannot be guessed
        OSError: If the file cannot be read
    """
    from ..languages.registry import LanguageRegistry
    registry = LanguageRegistry.default()

    if language_id is None:
        definition = registry.for_filename(filepath)
    else:
        definition = registry.get(language_id)

    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return Scanner(definition).tokenize(source)
