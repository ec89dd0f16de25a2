"""
Language definitions: the data a Scanner is parametrized with.

One generic scanning loop serves every language; what differs between
C#, C, Java and friends is captured here as plain data: the keyword and
built-in type vocabularies, the operator and punctuation character
classes, the characters allowed inside numbers, and the optional
directive marker / verbatim prefix.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

from .tokens import TokenType
from .errors import (
    create_invalid_character_class_error, create_invalid_collection_error,
    create_invalid_marker_error, create_invalid_name_error, create_invalid_vocabulary_error
)


# Fields holding sets of single characters
CHARACTER_CLASS_FIELDS = (
    "operator_start",
    "operator_part",
    "punctuation",
    "number_chars",
    "extra_identifier_chars",
)

# Fields holding case-sensitive word vocabularies
VOCABULARY_FIELDS = ("keywords", "builtin_types")


@dataclass(frozen=True)
class LanguageDefinition:
    """
    Immutable scanning policy for one language.

    Any iterable is accepted for the set-valued fields; they are
    normalized to frozensets on construction so the definition can be
    shared freely between threads.
    """
    name: str
    aliases: Tuple[str, ...] = ()
    keywords: FrozenSet[str] = field(default_factory=frozenset)
    builtin_types: FrozenSet[str] = field(default_factory=frozenset)
    operator_start: FrozenSet[str] = field(default_factory=frozenset)
    operator_part: FrozenSet[str] = field(default_factory=frozenset)
    punctuation: FrozenSet[str] = field(default_factory=frozenset)
    number_chars: FrozenSet[str] = field(default_factory=frozenset)
    directive_marker: Optional[str] = None
    verbatim_prefix: Optional[str] = None
    extra_identifier_chars: FrozenSet[str] = field(default_factory=frozenset)
    file_extensions: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name or self.name != self.name.strip().lower():
            raise create_invalid_name_error(self.name)

        aliases = self._as_tuple("aliases")
        for alias in aliases:
            if not isinstance(alias, str) or not alias or alias != alias.strip().lower():
                raise create_invalid_name_error(alias)
        object.__setattr__(self, "aliases", aliases)

        for field_name in VOCABULARY_FIELDS:
            words = frozenset(self._as_tuple(field_name))
            for word in words:
                if not isinstance(word, str) or not word:
                    raise create_invalid_vocabulary_error(self.name, field_name, word)
            object.__setattr__(self, field_name, words)

        for field_name in CHARACTER_CLASS_FIELDS:
            # A string here is a set of characters: "+-" means {"+", "-"}
            chars = frozenset(self._as_tuple(field_name, split_strings=True))
            for ch in chars:
                if not isinstance(ch, str) or len(ch) != 1:
                    raise create_invalid_character_class_error(self.name, field_name, ch)
            object.__setattr__(self, field_name, chars)

        self._check_marker("directive_marker", self.directive_marker)
        self._check_marker("verbatim_prefix", self.verbatim_prefix)
        if self.directive_marker is not None and self.directive_marker == self.verbatim_prefix:
            raise create_invalid_marker_error(
                self.name, "verbatim_prefix", self.verbatim_prefix,
                "The verbatim prefix must differ from the directive marker."
            )

        extensions = []
        for ext in self._as_tuple("file_extensions"):
            if not isinstance(ext, str) or not ext.strip("."):
                raise create_invalid_vocabulary_error(self.name, "file_extensions", ext)
            ext = ext.lower()
            extensions.append(ext if ext.startswith(".") else "." + ext)
        object.__setattr__(self, "file_extensions", tuple(extensions))

    def _as_tuple(self, field_name: str, split_strings: bool = False) -> tuple:
        """Read a collection field as a tuple, rejecting None and scalars."""
        value = getattr(self, field_name)
        if isinstance(value, str):
            # Outside character classes a bare string is a single element
            return tuple(value) if split_strings else (value,)
        if value is None:
            raise create_invalid_collection_error(self.name, field_name, value)
        try:
            return tuple(value)
        except TypeError:
            raise create_invalid_collection_error(self.name, field_name, value) from None

    def _check_marker(self, field_name: str, marker: Optional[str]):
        if marker is None:
            return
        if not isinstance(marker, str) or len(marker) != 1:
            raise create_invalid_marker_error(
                self.name, field_name, marker, "Markers are a single character or None."
            )
        if marker.isspace() or marker.isalnum() or marker == "_":
            raise create_invalid_marker_error(
                self.name, field_name, marker,
                "A marker cannot be whitespace, a letter, a digit or an underscore."
            )

    @property
    def identifiers(self) -> Tuple[str, ...]:
        """The name followed by every alias."""
        return (self.name,) + self.aliases

    def matches(self, language_id: Optional[str]) -> bool:
        """
        Check whether a requested language id selects this definition.

        Comparison is case-insensitive against the name and aliases.
        Empty or whitespace-only ids never match.
        """
        if not isinstance(language_id, str) or not language_id.strip():
            return False
        normalized = language_id.lower()
        return normalized == self.name or normalized in self.aliases

    def classify_word(self, word: str) -> TokenType:
        """
        Classify an identifier-shaped word (verbatim prefix already stripped).

        Built-in types win over keywords; anything else is an identifier.
        """
        if word in self.builtin_types:
            return TokenType.TYPE
        if word in self.keywords:
            return TokenType.KEYWORD
        return TokenType.IDENTIFIER
