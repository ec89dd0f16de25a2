"""
Error handling for syntaxlens.

The scanner itself never fails: malformed source degrades into best-effort
tokens. The only errors live at the boundary, when a caller hands over a
missing or malformed language definition, a source that is not text, or a
language id nobody registered. All of them are InvalidConfiguration.
"""

from typing import Optional, List, Iterable
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Structured description of a configuration problem."""
    message: str
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result

    @property
    def category(self) -> Optional[str]:
        """Short description of the error code, from ERROR_CODES."""
        return ERROR_CODES.get(self.code)


class InvalidConfiguration(Exception):
    """
    Raised before scanning begins when the scanner cannot be set up.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnknownLanguageError(InvalidConfiguration, LookupError):
    """No registered language definition matches the requested id."""

    def __init__(
        self,
        language_id: str,
        suggestions: Optional[List[str]] = None,
        message: Optional[str] = None
    ):
        help_text = None
        if suggestions:
            help_text = f"Did you mean: {', '.join(suggestions)}?"
        super().__init__(
            message or f"Unknown language: {language_id!r}",
            code="H006",
            help_text=help_text,
            suggestions=suggestions,
        )
        self.language_id = language_id


class ErrorRecovery:
    """Helpers for turning a bad request into a useful suggestion."""

    @staticmethod
    def suggest_language_names(invalid_id: str, candidates: Iterable[str]) -> List[str]:
        """Suggest registered names/aliases close to an unknown language id."""
        wanted = invalid_id.strip().lower()
        suggestions = []
        for candidate in candidates:
            distance = ErrorRecovery._edit_distance(wanted, candidate)
            if distance <= 2:  # Allow up to 2 character differences
                suggestions.append(candidate)

        return sorted(suggestions, key=lambda c: (ErrorRecovery._edit_distance(wanted, c), c))[:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


# Error codes for categorization
ERROR_CODES = {
    "H001": "Missing language definition",
    "H002": "Source is not text",
    "H003": "Invalid character class or vocabulary",
    "H004": "Invalid marker",
    "H005": "Duplicate language registration",
    "H006": "Unknown language",
    "H007": "Invalid language name",
}


def create_missing_definition_error(received: object) -> InvalidConfiguration:
    """Create an error for a scanner built without a usable definition."""
    if received is None:
        message = "No language definition supplied"
    else:
        message = f"Expected a LanguageDefinition, got {type(received).__name__}"
    return InvalidConfiguration(
        message,
        code="H001",
        help_text="Look the definition up with LanguageRegistry.get() or build a LanguageDefinition.",
    )


def create_invalid_source_error(received: object) -> InvalidConfiguration:
    """Create an error for a source buffer that is absent or not a str."""
    if received is None:
        message = "No source text supplied"
    else:
        message = f"Source must be str, got {type(received).__name__}"
    return InvalidConfiguration(
        message,
        code="H002",
        help_text="Decode bytes before scanning, e.g. data.decode('utf-8').",
    )


def create_invalid_character_class_error(language: str, field_name: str, member: object) -> InvalidConfiguration:
    """Create an error for a character class holding something other than single characters."""
    return InvalidConfiguration(
        f"{language}: {field_name} must contain single characters, got {member!r}",
        code="H003",
        help_text="Character classes are sets of one-character strings, e.g. set('+-*/').",
    )


def create_invalid_marker_error(language: str, field_name: str, marker: object, reason: str) -> InvalidConfiguration:
    """Create an error for a malformed directive marker or verbatim prefix."""
    return InvalidConfiguration(
        f"{language}: invalid {field_name} {marker!r}",
        code="H004",
        help_text=reason,
    )


def create_duplicate_language_error(key: str, owner: str) -> InvalidConfiguration:
    """Create an error for a name or alias that is already taken."""
    return InvalidConfiguration(
        f"Language id {key!r} is already registered by {owner!r}",
        code="H005",
        help_text="Pass replace=True to override the existing definition.",
    )


def create_invalid_name_error(name: object) -> InvalidConfiguration:
    """Create an error for an empty or non-text language name."""
    return InvalidConfiguration(
        f"Invalid language name: {name!r}",
        code="H007",
        help_text="Language names are non-empty, lower-case strings without surrounding whitespace.",
    )


def create_invalid_vocabulary_error(language: str, field_name: str, word: object) -> InvalidConfiguration:
    """Create an error for a keyword/type vocabulary holding a non-word."""
    return InvalidConfiguration(
        f"{language}: {field_name} must contain non-empty strings, got {word!r}",
        code="H003",
        help_text="Vocabularies are sets of words, e.g. {'class', 'struct'}.",
    )


def create_invalid_collection_error(language: str, field_name: str, value: object) -> InvalidConfiguration:
    """Create an error for a set-valued field given None or a non-iterable."""
    return InvalidConfiguration(
        f"{language}: {field_name} must be an iterable of strings, got {value!r}",
        code="H003",
        help_text="Pass an empty collection, e.g. (), to leave the field unset.",
    )


def create_unguessable_language_error(filepath: str) -> UnknownLanguageError:
    """Create an error for a file whose extension maps to no language."""
    error = UnknownLanguageError(
        filepath,
        message=f"Cannot guess the language of {filepath!r} from its extension",
    )
    error.diagnostic.help_text = "Name the language explicitly (e.g. --language csharp)."
    return error
