"""
JavaScript language definition.

JavaScript has no built-in type names in the C sense, so the type set is
empty. Template literals are not recognized as strings: backticks fall
through to TEXT and their contents are scanned as code.
"""

from ..lexer.definition import LanguageDefinition


KEYWORDS = {
    "async", "await", "break", "case", "catch", "class", "const",
    "continue", "debugger", "default", "delete", "do", "else", "export",
    "extends", "finally", "for", "from", "function", "get", "if", "import",
    "in", "instanceof", "let", "new", "of", "return", "set", "static",
    "super", "switch", "this", "throw", "try", "typeof", "var", "void",
    "while", "with", "yield",
    "true", "false", "null", "undefined", "NaN", "Infinity",
}

JAVASCRIPT = LanguageDefinition(
    name="javascript",
    aliases=("js", "node", "ecmascript"),
    keywords=KEYWORDS,
    operator_start=set("+-*/%=!<>&|^~?:"),
    operator_part=set("+-*=&|<>?"),
    punctuation=set("{}()[];,."),
    number_chars=set(".xXoObBeEn_abcdefABCDEF"),
    extra_identifier_chars={"$"},
    file_extensions=(".js", ".mjs", ".cjs"),
)
