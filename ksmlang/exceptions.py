"""Errors.

Parse failures use the builtin ``SyntaxError``. Everything raised while a
statement tree is being executed derives from ``RuntimeError``.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class MalformedStatementException(RuntimeError):
    """
    Error for statements the interpreter cannot execute.
    """
    def __init__(self, statement, line=None, file=None):
        self.statement = statement
        self.line = line
        message = f"invalid variable declaration: {statement}"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)
