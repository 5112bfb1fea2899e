"""
Statement node definitions for opasm programs.

The statement parser builds these from the token stream: include
directives, labels, and instructions with their operand lists.
"""

from abc import ABC
from dataclasses import dataclass
from typing import List, Tuple

from ..lexer.tokens import Atom


class Statement(ABC):
    """Base class for all statement nodes."""


@dataclass(frozen=True)
class Include(Statement):
    """``include <path>``"""
    path: str


@dataclass(frozen=True)
class Label(Statement):
    """A named jump target."""
    name: str


@dataclass(frozen=True)
class Instruction(Statement):
    """An opcode followed by its operand list."""
    opcode: str
    operands: Tuple[Atom, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "operands", tuple(self.operands))


AST = List[Statement]
