"""
Test suite for the opasm token vocabulary, diagnostics and configuration.
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from opasm.config import LexerConfig
from opasm.lexer.errors import (
    Diagnostic, LexerError, ERROR_CODES, create_invalid_character_error,
    create_unterminated_identifier_error, create_source_error
)
from opasm.lexer.tokens import Atom, AtomKind, Token, TokenType, SourceLocation, OPCODES
from opasm.parser.ast_nodes import Include, Instruction, Label, Statement


LOCATION = SourceLocation("prog.asm", 3, 7, 42)


class TestTokens(unittest.TestCase):
    """Test cases for Atom, Token and SourceLocation."""

    def test_atom_constructors(self):
        self.assertEqual(AtomKind.INT, Atom.integer(5).kind)
        self.assertEqual(AtomKind.STR, Atom.string("hi").kind)
        self.assertEqual(AtomKind.NAME, Atom.name("main").kind)
        self.assertEqual("main", Atom.name("main").value)

    def test_atom_repr(self):
        self.assertEqual("Name('main')", repr(Atom.name("main")))
        self.assertEqual("Int(5)", repr(Atom.integer(5)))

    def test_equality_ignores_location(self):
        self.assertEqual(Token.keyword("jump"), Token.keyword("jump", LOCATION))
        self.assertEqual(hash(Token.keyword("jump")), hash(Token.keyword("jump", LOCATION)))
        self.assertNotEqual(Token.keyword("jump"), Token.atom(Atom.name("jump")))

    def test_token_kinds(self):
        self.assertEqual(TokenType.PATH, Token.path("lib/io.asm").type)
        punc = Token.punctuation(ord(","))
        self.assertEqual(TokenType.PUNCTUATION, punc.type)
        self.assertEqual(",", punc.lexeme)
        self.assertEqual(ord(","), punc.value)

    def test_predicates(self):
        name = Token.atom(Atom.name("x"))
        number = Token.atom(Atom.integer(1))
        self.assertTrue(name.is_atom and name.is_name)
        self.assertTrue(number.is_atom)
        self.assertFalse(number.is_name)
        self.assertTrue(Token.keyword("end").is_keyword)
        self.assertFalse(name.is_keyword)

    def test_str(self):
        self.assertEqual("Keyword('jump')", str(Token.keyword("jump")))
        self.assertEqual("Atom(Name('main'))", str(Token.atom(Atom.name("main"))))

    def test_tokens_are_immutable(self):
        token = Token.keyword("put")
        with self.assertRaises(AttributeError):
            token.lexeme = "add"

    def test_source_location_str(self):
        self.assertEqual("prog.asm:3:7", str(LOCATION))

    def test_opcodes(self):
        self.assertEqual(31, len(OPCODES))
        self.assertIn("outl", OPCODES)
        self.assertNotIn("include", OPCODES)
        self.assertIsInstance(OPCODES, frozenset)


class TestErrors(unittest.TestCase):
    """Test cases for diagnostics and LexerError."""

    def test_diagnostic_str(self):
        diagnostic = Diagnostic("bad thing", LOCATION, "error", code="L001", help_text="fix it")
        self.assertEqual(
            "ERROR[L001]: bad thing\n  --> prog.asm:3:7\n  help: fix it\n",
            str(diagnostic)
        )

    def test_invalid_character_error(self):
        error = create_invalid_character_error(ord("$"), LOCATION)
        self.assertEqual("L001", error.code)
        self.assertEqual(LOCATION, error.location)
        self.assertIn("'$'", str(error))

    def test_unprintable_byte(self):
        error = create_invalid_character_error(0x07, LOCATION)
        self.assertIn("0x07", str(error))

    def test_unterminated_identifier_error(self):
        error = create_unterminated_identifier_error(ord("-"), LOCATION)
        self.assertEqual("L005", error.code)
        self.assertIn(error.code, ERROR_CODES)

    def test_source_error_keeps_cause(self):
        cause = OSError("gone")
        error = create_source_error(cause, LOCATION)
        self.assertIs(cause, error.cause)
        self.assertEqual("L011", error.code)
        self.assertIsInstance(error, LexerError)


class TestConfig(unittest.TestCase):

    def test_defaults(self):
        config = LexerConfig()
        self.assertEqual("<input>", config.filename)
        self.assertEqual(8192, config.chunk_size)

    def test_rejects_non_positive_chunk_size(self):
        with self.assertRaises(ValueError):
            LexerConfig(chunk_size=0)


class TestStatements(unittest.TestCase):
    """Test cases for the statement nodes the parser builds."""

    def test_nodes(self):
        statements = [
            Include("lib/io.asm"),
            Label("loop"),
            Instruction("add", [Atom.name("x"), Atom.integer(1)]),
        ]
        self.assertTrue(all(isinstance(s, Statement) for s in statements))
        self.assertEqual((Atom.name("x"), Atom.integer(1)), statements[2].operands)
        self.assertEqual((), Instruction("end").operands)


if __name__ == '__main__':
    unittest.main()
