"""Java language definition."""

from ..lexer.definition import LanguageDefinition


KEYWORDS = {
    "abstract", "assert", "break", "case", "catch", "class", "const",
    "continue", "default", "do", "else", "enum", "extends", "final",
    "finally", "for", "goto", "if", "implements", "import", "instanceof",
    "interface", "native", "new", "package", "private", "protected",
    "public", "return", "static", "strictfp", "super", "switch",
    "synchronized", "this", "throw", "throws", "transient", "try",
    "volatile", "while",
    # contextual
    "var", "record", "sealed", "permits", "yield",
    "true", "false", "null",
}

BUILTIN_TYPES = {
    "boolean", "byte", "char", "short", "int", "long", "float", "double",
    "void", "String", "Object",
}

JAVA = LanguageDefinition(
    name="java",
    aliases=("jav",),
    keywords=KEYWORDS,
    builtin_types=BUILTIN_TYPES,
    operator_start=set("+-*/%=!<>&|^~?:"),
    operator_part=set("+-=&|<>:"),
    punctuation=set("{}()[];,.@"),
    number_chars=set(".xXlLfFdDeEbB_abcdefABCDEF"),
    extra_identifier_chars={"$"},
    file_extensions=(".java",),
)
