"""Comparison operators understood by ``if case`` conditions.

The parser keeps the operator token as written; the interpreter maps its text
onto :class:`Op` when the condition is evaluated. Operator text that has no
member here (``=``, ``(`` and friends) makes the condition false.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import operator
from enum import Enum
from typing import Callable, Optional


class Op(str, Enum):
    """
    Enumeration of supported comparison operators.
    """

    GT = ">"
    LT = "<"
    EQ = "=="

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Op"]:
        """
        Look up an operator by its source text.

        Returns:
            Op | None: The matching operator, or None when unsupported.
        """
        for op in cls:
            if op.value == symbol:
                return op
        return None

    def apply(self, left: int, right: int) -> bool:
        """
        Compare two integers with this operator.
        """
        return _COMPARATORS[self](left, right)

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


_COMPARATORS: dict[Op, Callable[[int, int], bool]] = {
    Op.GT: operator.gt,
    Op.LT: operator.lt,
    Op.EQ: operator.eq,
}


__all__ = ["Op"]
