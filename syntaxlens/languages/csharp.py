"""
C# language definition.

Covers plain and contextual keywords. `var` and `dynamic` are listed as
keywords rather than types, and `@` marks verbatim identifiers such as
`@class`, which are classified by the word after the marker.
"""

from ..lexer.definition import LanguageDefinition


KEYWORDS = {
    # Declarations and modifiers
    "abstract", "class", "const", "delegate", "enum", "event", "explicit",
    "extern", "implicit", "interface", "internal", "namespace", "operator",
    "override", "partial", "private", "protected", "public", "readonly",
    "record", "sealed", "static", "struct", "unsafe", "virtual", "volatile",
    "required", "scoped", "file",

    # Control flow
    "break", "case", "catch", "continue", "default", "do", "else",
    "finally", "for", "foreach", "goto", "if", "in", "return", "switch",
    "throw", "try", "when", "while", "yield",

    # Expressions
    "as", "base", "checked", "false", "field", "fixed", "is", "lock",
    "nameof", "new", "null", "out", "params", "ref", "sizeof",
    "stackalloc", "this", "true", "typeof", "unchecked", "using", "with",

    # Async
    "async", "await",

    # Contextual (accessors, queries)
    "get", "set", "init", "add", "remove", "value", "global",

    # Inferred typing
    "var", "dynamic",
}

BUILTIN_TYPES = {
    "bool", "byte", "sbyte", "char", "decimal", "double", "float",
    "int", "uint", "long", "ulong", "short", "ushort", "nint", "nuint",
    "object", "string", "void",
}

CSHARP = LanguageDefinition(
    name="csharp",
    aliases=("cs", "c#", "dotnet"),
    keywords=KEYWORDS,
    builtin_types=BUILTIN_TYPES,
    operator_start=set("+-*/%=!<>&|^~?:"),
    operator_part=set("+-=&|<>?"),
    punctuation=set("{}()[];,."),
    # suffixes f/d/m/l/u, hex marker x
    number_chars=set(".fdmluLUxX"),
    directive_marker="#",
    verbatim_prefix="@",
    file_extensions=(".cs", ".csx"),
)
