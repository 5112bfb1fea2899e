"""
opasm Parser Package

Statement-level vocabulary consumed downstream of the tokenizer. Only the
node definitions live here; building them from tokens is the parser's job.
"""

from .ast_nodes import AST, Statement, Include, Label, Instruction

__all__ = [
    "AST",
    "Statement",
    "Include",
    "Label",
    "Instruction",
]
