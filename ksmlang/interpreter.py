"""Interpreter.

This is a tree-walk interpreter for the statement trees produced by the parser.

1. Execution Model
Statements are executed via `execute()`, depth first and left to right. Each
executed statement writes one line of output, in program order:

    Variable Declaration: <name> = <value>
    Print Statement: <value>
    If Statement (True): <condition>   /   If Statement (False): <condition>
    Otherwise Statement

2. Environment
The interpreter owns a single flat dictionary `vars` mapping names to text.
Only declarations write to it (last write wins); there are no scopes. The
dictionary lives as long as the interpreter, so it survives errors on
earlier lines.

3. Expressions and Conditions
An expression is a single token's text. If the text names a declared
variable the stored value is used, otherwise the text stands for itself.
Conditions compare integers only: anything that is not an integer on either
side, and any operator other than `>`, `<` or `==`, makes the condition false.

4. Control Flow
`otherwise` blocks always run. They are not an `else` for the preceding
`if case`.

5. Error Handling
A malformed declaration raises `MalformedStatementException`, which aborts the
rest of the tree.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Optional, TextIO

from ksmlang.exceptions import MalformedStatementException
from ksmlang.nodes import Block, Condition, If, Otherwise, Print, VarDecl
from ksmlang.operations import Op

# Base-10 integers with an optional sign, limited to 64 bits.
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1

# Unicode White_Space characters. Narrower than str.isspace(), which also
# counts the \x1c-\x1f separators.
TRIM_CHARS = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def parse_int(text: str) -> Optional[int]:
    """
    Parse text as a signed 64-bit base-10 integer.

    Returns:
        int | None: The value, or None when the text is not such an integer.
    """
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


class Interpreter:
    """Tree-walk interpreter for KSM."""

    def __init__(self, file: str = "<stdin>", stream: Optional[TextIO] = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): Name of the script, used in error messages.
            stream (TextIO | None): Where output lines go. Defaults to stdout.
        """
        self.vars: dict[str, str] = {}
        self.file = file
        self.stream = stream

    def emit(self, message: str) -> None:
        """
        Write one line of output.
        """
        print(message, file=self.stream)

    def evaluate_expression(self, text: str) -> str:
        """
        Resolve an operand: the stored value for a declared name, otherwise
        the text itself.
        """
        if text in self.vars:
            return self.vars[text]
        return text

    def evaluate_condition(self, condition: Condition) -> bool:
        """
        Evaluate a comparison.

        False on any non-numeric or malformed operand, and for any operator
        other than `>`, `<` and `==`. Never raises.
        """
        # Operands containing spaces do not form a three-part condition.
        if " " in condition.left.text or " " in condition.right.text:
            return False

        op = Op.from_symbol(condition.operator.text)
        left = parse_int(self.evaluate_expression(condition.left.text))
        right = parse_int(self.evaluate_expression(condition.right.text))
        if op is None or left is None or right is None:
            return False
        return op.apply(left, right)

    def execute(self, node) -> None:
        """
        Execute a statement or a block of statements.

        Parameters:
            node: A statement node, a Block, or None (no-op).

        Raises:
            MalformedStatementException: For a declaration without a name.
        """
        if node is None:
            return

        match node:
            case Block():
                for stmt in node.statements:
                    self.execute(stmt)

            case VarDecl():
                name = node.name.strip(TRIM_CHARS)
                if not name:
                    raise MalformedStatementException(node.literal, node.line, self.file)
                value = node.value.text.strip(TRIM_CHARS)
                self.vars[name] = value
                self.emit(f"Variable Declaration: {name} = {value}")

            case Print():
                self.emit(f"Print Statement: {self.evaluate_expression(node.value.text)}")

            case If():
                condition = node.condition.literal
                if self.evaluate_condition(node.condition):
                    self.emit(f"If Statement (True): {condition}")
                    self.execute(node.body)
                else:
                    self.emit(f"If Statement (False): {condition}")

            case Otherwise():
                self.emit("Otherwise Statement")
                self.execute(node.body)

            case _:
                raise TypeError(
                    f"Unknown statement type: {type(node).__name__} "
                    f"in {self.file}"
                )
