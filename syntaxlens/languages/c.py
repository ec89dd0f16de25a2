"""C language definition (C99/C11, preprocessor lines as directives)."""

from ..lexer.definition import LanguageDefinition


KEYWORDS = {
    "auto", "break", "case", "const", "continue", "default", "do", "else",
    "enum", "extern", "for", "goto", "if", "inline", "register", "restrict",
    "return", "sizeof", "static", "struct", "switch", "typedef", "union",
    "volatile", "while",
    "_Alignas", "_Alignof", "_Atomic", "_Generic", "_Noreturn",
    "_Static_assert", "_Thread_local",
    "NULL", "true", "false",
}

BUILTIN_TYPES = {
    "char", "short", "int", "long", "float", "double", "void", "signed",
    "unsigned", "_Bool", "_Complex", "bool", "size_t", "ssize_t",
    "ptrdiff_t", "int8_t", "int16_t", "int32_t", "int64_t", "uint8_t",
    "uint16_t", "uint32_t", "uint64_t", "intptr_t", "uintptr_t",
}

C = LanguageDefinition(
    name="c",
    aliases=("h", "c99", "c11"),
    keywords=KEYWORDS,
    builtin_types=BUILTIN_TYPES,
    operator_start=set("+-*/%=!<>&|^~?:"),
    operator_part=set("+-=&|<>"),
    punctuation=set("{}()[];,."),
    # hex digits, exponent, suffixes
    number_chars=set(".xXuUlLfFeEabcdABCD"),
    directive_marker="#",
    file_extensions=(".c", ".h"),
)
