"""Statement tree for KSM.

The parser produces a tree of the dataclasses below and the interpreter walks
it. Every program, and every ``{ ... }`` body, is a :class:`Block`.

``If`` and ``Otherwise`` are unrelated nodes: an ``Otherwise`` holds no
reference to any ``If`` before it.

Each node can render the literal text of its statement (``literal``). That
text is only shown to the user; nothing parses it again.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ksmlang.lexer import Token


@dataclass
class Block:
    """Ordered sequence of statements."""
    statements: list[Statement] = field(default_factory=list)
    line: int = 1


@dataclass(frozen=True)
class VarDecl:
    """``declare <name> = <value>``"""
    name: str
    value: Token
    line: int = 1

    @property
    def literal(self) -> str:
        return f"{self.name} = {self.value.text}"


@dataclass(frozen=True)
class Print:
    """``displayln(<value>)``"""
    value: Token
    line: int = 1

    @property
    def literal(self) -> str:
        return f"print {self.value.text}"


@dataclass(frozen=True)
class Condition:
    """Three-token comparison: left operand, operator, right operand."""
    left: Token
    operator: Token
    right: Token

    @property
    def literal(self) -> str:
        return f"{self.left.text} {self.operator.text} {self.right.text}"


@dataclass(frozen=True)
class If:
    """``if case <condition> { ... }``"""
    condition: Condition
    body: Block
    line: int = 1

    @property
    def literal(self) -> str:
        return f"if {self.condition.literal}"


@dataclass(frozen=True)
class Otherwise:
    """``otherwise { ... }``"""
    body: Block
    line: int = 1

    @property
    def literal(self) -> str:
        return "otherwise"


Statement = Union[VarDecl, Print, If, Otherwise, Block]


def dump(node, indent: int = 0) -> str:
    """
    Render a statement tree as indented text, one node per line.

    Parameters:
        node: The node to render.
        indent (int): Current nesting depth.

    Returns:
        str: The rendered tree.
    """
    pad = "  " * indent
    if isinstance(node, Block):
        lines = [f"{pad}Block"]
        lines.extend(dump(stmt, indent + 1) for stmt in node.statements)
        return "\n".join(lines)
    if isinstance(node, (If, Otherwise)):
        return f"{pad}{type(node).__name__}: {node.literal}\n{dump(node.body, indent + 1)}"
    return f"{pad}{type(node).__name__}: {node.literal}"
