"""
syntaxlens Languages Package

Built-in language definitions and the registry that selects one by name,
alias or file extension.
"""

from .registry import LanguageRegistry, BUILTIN_LANGUAGES
from .csharp import CSHARP
from .c import C
from .java import JAVA
from .javascript import JAVASCRIPT

__all__ = [
    "LanguageRegistry",
    "BUILTIN_LANGUAGES",
    "CSHARP",
    "C",
    "JAVA",
    "JAVASCRIPT",
]
