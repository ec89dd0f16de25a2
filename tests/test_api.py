"""
Tests for the token helpers and the convenience entry points.
"""

import unittest
import tempfile
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import syntaxlens
from syntaxlens import (
    Token, TokenType, LanguageRegistry, LanguageDefinition, UnknownLanguageError,
    InvalidConfiguration, get_scanner, tokenize_string, tokenize_file, join_lexemes, with_offsets
)
from syntaxlens.languages import CSHARP, JAVA


class TestToken(unittest.TestCase):
    """Token value semantics."""

    def test_token_is_immutable(self):
        token = Token(TokenType.KEYWORD, "class")
        with self.assertRaises(AttributeError):
            token.lexeme = "struct"

    def test_token_equality(self):
        self.assertEqual(Token(TokenType.NUMBER, "1"), Token(TokenType.NUMBER, "1"))
        self.assertNotEqual(Token(TokenType.NUMBER, "1"), Token(TokenType.TEXT, "1"))

    def test_str_and_repr(self):
        token = Token(TokenType.STRING, '"hi"')
        self.assertEqual(str(token), "STRING('\"hi\"')")
        self.assertEqual(repr(token), "Token(STRING, '\"hi\"')")

    def test_predicates(self):
        self.assertTrue(Token(TokenType.TEXT, " \n").is_trivia)
        self.assertTrue(Token(TokenType.COMMENT, "// x").is_trivia)
        self.assertFalse(Token(TokenType.TEXT, "$").is_trivia)
        self.assertTrue(Token(TokenType.NUMBER, "1").is_literal)
        self.assertTrue(Token(TokenType.STRING, "'a'").is_literal)
        self.assertFalse(Token(TokenType.KEYWORD, "if").is_literal)
        self.assertTrue(Token(TokenType.TYPE, "int").is_word)
        self.assertFalse(Token(TokenType.OPERATOR, "+").is_word)

    def test_with_offsets(self):
        tokens = tokenize_string("int x;", "cs")
        self.assertEqual([(offset, t.lexeme) for offset, t in with_offsets(tokens)], [
            (0, "int"),
            (3, " "),
            (4, "x"),
            (5, ";"),
        ])

    def test_join_lexemes_empty(self):
        self.assertEqual(join_lexemes([]), "")


class TestConvenience(unittest.TestCase):
    """get_scanner / tokenize_string / tokenize_file."""

    def test_version(self):
        self.assertEqual(syntaxlens.__version__, "0.1.0")

    def test_get_scanner(self):
        self.assertIs(get_scanner("CS").definition, CSHARP)
        self.assertEqual(repr(get_scanner("java")), "Scanner('java')")

    def test_get_scanner_with_registry(self):
        registry = LanguageRegistry()
        registry.register(LanguageDefinition(name="mini", keywords={"let"}))
        scanner = get_scanner("mini", registry=registry)
        self.assertEqual(scanner.tokenize("let")[0].kind, TokenType.KEYWORD)
        with self.assertRaises(UnknownLanguageError):
            get_scanner("csharp", registry=registry)

    def test_tokenize_string(self):
        tokens = tokenize_string("return 0;", "csharp")
        self.assertEqual([t.kind for t in tokens], [
            TokenType.KEYWORD, TokenType.TEXT, TokenType.NUMBER, TokenType.PUNCTUATION,
        ])

    def test_tokenize_string_unknown_language(self):
        with self.assertRaises(InvalidConfiguration):
            tokenize_string("x", "cobol")

    def test_tokenize_file_guesses_language(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "Main.java")
            with open(path, "w", encoding="utf-8") as f:
                f.write("final int n = 1;\n")
            tokens = tokenize_file(path)
        self.assertEqual(tokens[0], Token(TokenType.KEYWORD, "final"))
        self.assertEqual(join_lexemes(tokens), "final int n = 1;\n")

    def test_tokenize_file_explicit_language(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "snippet.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("#pragma once")
            tokens = tokenize_file(path, "c")
        self.assertEqual(tokens, [Token(TokenType.PREPROCESSOR, "#pragma once")])

    def test_tokenize_file_unknown_extension(self):
        with self.assertRaises(UnknownLanguageError):
            tokenize_file("notes.unknownext")

    def test_tokenize_file_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                tokenize_file(os.path.join(tmp, "missing.cs"))

    def test_default_registry_builtins(self):
        self.assertIs(LanguageRegistry.default().get("jav"), JAVA)


if __name__ == '__main__':
    unittest.main()
