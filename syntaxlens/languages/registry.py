"""
Language registry: selects a LanguageDefinition by name, alias or file name.

The registry is plain glue around the definitions; all scanning behaviour
lives in the definitions themselves and the generic Scanner.
"""

import logging
import os
import threading
from typing import Dict, Iterator, List, Optional

from ..lexer.definition import LanguageDefinition
from ..lexer.errors import (
    ErrorRecovery, UnknownLanguageError, create_duplicate_language_error,
    create_missing_definition_error, create_unguessable_language_error
)
from .c import C
from .csharp import CSHARP
from .java import JAVA
from .javascript import JAVASCRIPT

logger = logging.getLogger(__name__)

BUILTIN_LANGUAGES = (CSHARP, C, JAVA, JAVASCRIPT)


class LanguageRegistry:
    """
    Thread-safe collection of language definitions.

    Lookups go through LanguageDefinition.matches, so ids are compared
    case-insensitively against each definition's name and aliases.
    """

    _default: Optional['LanguageRegistry'] = None
    _default_lock = threading.Lock()

    def __init__(self):
        self._definitions: Dict[str, LanguageDefinition] = {}
        self._lock = threading.RLock()

    @classmethod
    def with_builtins(cls) -> 'LanguageRegistry':
        """Create a fresh registry holding every built-in language."""
        registry = cls()
        for definition in BUILTIN_LANGUAGES:
            registry.register(definition)
        return registry

    @classmethod
    def default(cls) -> 'LanguageRegistry':
        """Get the process-wide registry, populated with the built-ins on first use"""
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls.with_builtins()
        return cls._default

    def register(self, definition: LanguageDefinition, replace: bool = False) -> None:
        """
        Add a language definition.

        Args:
            definition: The definition to add
            replace: Allow replacing an existing definition with the same name

        Raises:
            InvalidConfiguration: If definition is not a LanguageDefinition, or
                one of its ids is already taken (by another language, or by the
                same name without replace=True)
        """
        if not isinstance(definition, LanguageDefinition):
            raise create_missing_definition_error(definition)

        with self._lock:
            for key in definition.identifiers:
                owner = self._owner_of(key)
                if owner is None:
                    continue
                if owner.name != definition.name or not replace:
                    raise create_duplicate_language_error(key, owner.name)

            if definition.name in self._definitions:
                logger.warning("replacing language definition %r", definition.name)
            self._definitions[definition.name] = definition

        logger.debug("registered language %r (aliases: %s)",
                     definition.name, ", ".join(definition.aliases) or "-")

    def unregister(self, language_id: str) -> LanguageDefinition:
        """Remove and return the definition selected by language_id."""
        with self._lock:
            definition = self.get(language_id)
            del self._definitions[definition.name]
        logger.debug("unregistered language %r", definition.name)
        return definition

    def find(self, language_id: Optional[str]) -> Optional[LanguageDefinition]:
        """Return the definition matching language_id, or None."""
        with self._lock:
            for definition in self._definitions.values():
                if definition.matches(language_id):
                    return definition
        return None

    def get(self, language_id: Optional[str]) -> LanguageDefinition:
        """
        Return the definition matching language_id.

        Raises:
            UnknownLanguageError: If nothing matches (with close-name suggestions)
        """
        definition = self.find(language_id)
        if definition is not None:
            return definition

        suggestions: List[str] = []
        if isinstance(language_id, str) and language_id.strip():
            suggestions = ErrorRecovery.suggest_language_names(language_id, self.identifiers())
        raise UnknownLanguageError(language_id, suggestions=suggestions or None)

    def for_filename(self, filepath: str) -> LanguageDefinition:
        """
        Guess the language of a file from its extension (case-insensitive).

        Raises:
            UnknownLanguageError: If no registered language claims the extension
        """
        extension = os.path.splitext(filepath)[1].lower()
        if extension:
            with self._lock:
                for definition in self._definitions.values():
                    if extension in definition.file_extensions:
                        return definition
        raise create_unguessable_language_error(filepath)

    def names(self) -> List[str]:
        """Registered language names, in registration order."""
        with self._lock:
            return list(self._definitions)

    def identifiers(self) -> List[str]:
        """Every registered name and alias."""
        with self._lock:
            return [key for definition in self._definitions.values() for key in definition.identifiers]

    def _owner_of(self, key: str) -> Optional[LanguageDefinition]:
        for definition in self._definitions.values():
            if key in definition.identifiers:
                return definition
        return None

    def __contains__(self, language_id: object) -> bool:
        return isinstance(language_id, str) and self.find(language_id) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)

    def __iter__(self) -> Iterator[LanguageDefinition]:
        with self._lock:
            return iter(list(self._definitions.values()))
