"""Lexer for KSM.

The lexer walks the source one character at a time and hands out a single
:class:`Token` per call to :meth:`Lexer.next_token`. No token list is built up
front; the parser pulls tokens as it needs them.

Tokens cover keywords (``declare``, ``displayln``, ``if``, ``case``,
``otherwise``), identifiers, integer literals, double-quoted strings and the
operator/delimiter characters ``= == > < ( ) { }``. Anything else becomes a
single-character ``ERROR`` token and is left for the parser to reject. A NUL
character is treated as the end of input.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class TokenKind(str, Enum):
    """
    Enumeration of token kinds produced by the lexer.
    """

    KEYWORD = "KEYWORD"
    OPERATOR = "OPERATOR"
    IDENT = "IDENT"
    NUMBER = "NUMBER"
    STRING = "STRING"
    EOF = "EOF"
    ERROR = "ERROR"

    def __str__(self) -> str:
        return self.value


KEYWORDS = frozenset({"declare", "displayln", "if", "case", "otherwise"})

SINGLE_CHAR_OPERATORS = frozenset("><(){}")

WHITESPACE = frozenset(" \t\r\n")

# Marks the end of input in place of a real character.
EOF_CHAR = ""

NUL_CHAR = "\0"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a kind, its text and the source position
    of its first character.
    """
    kind: TokenKind
    text: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, line={self.line}, column={self.column})"


def is_letter(ch: str) -> bool:
    """ASCII letter or underscore."""
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def is_digit(ch: str) -> bool:
    """ASCII decimal digit."""
    return "0" <= ch <= "9"


class Lexer:
    """
    Single-pass, pull-based tokenizer over one piece of source text.

    A lexer cannot be rewound. Build a new one for every line of input.
    """

    def __init__(self, code: str):
        """
        Initialize the lexer and load the first character.

        Parameters:
            code (str): The source text to tokenize.
        """
        # A NUL character ends the input like the real end does.
        self.code = code.split(NUL_CHAR, 1)[0]
        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self) -> None:
        """
        Advance the cursor by one character.
        """
        if self.read_position >= len(self.code):
            self.ch = EOF_CHAR
        else:
            self.ch = self.code[self.read_position]
        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self) -> str:
        """
        Return the character after the current one without consuming it.
        """
        if self.read_position >= len(self.code):
            return EOF_CHAR
        return self.code[self.read_position]

    def skip_whitespace(self) -> None:
        """
        Skip blanks, keeping the line and column counters up to date.
        """
        while self.ch in WHITESPACE:
            if self.ch == "\n":
                self.line += 1
                self.column = 0
            self.read_char()

    def next_token(self) -> Token:
        """
        Produce the next token from the input.

        Returns:
            Token: The next token. Once the input is exhausted every call
            returns an ``EOF`` token.
        """
        self.skip_whitespace()

        line, column = self.line, self.column
        ch = self.ch

        if ch == "=":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(TokenKind.OPERATOR, "==", line, column)
            else:
                tok = Token(TokenKind.OPERATOR, "=", line, column)
        elif ch in SINGLE_CHAR_OPERATORS:
            tok = Token(TokenKind.OPERATOR, ch, line, column)
        elif ch == '"':
            tok = Token(TokenKind.STRING, self.read_string(), line, column)
        elif ch == EOF_CHAR:
            tok = Token(TokenKind.EOF, "", line, column)
        elif is_letter(ch):
            # Identifiers and numbers stop on the first character past the
            # lexeme, so there is nothing left to consume.
            text = self.read_identifier()
            kind = TokenKind.KEYWORD if text in KEYWORDS else TokenKind.IDENT
            return Token(kind, text, line, column)
        elif is_digit(ch):
            return Token(TokenKind.NUMBER, self.read_number(), line, column)
        else:
            tok = Token(TokenKind.ERROR, ch, line, column)

        self.read_char()
        return tok

    def read_identifier(self) -> str:
        """
        Consume a run of letters, digits and underscores.
        """
        start = self.position
        while is_letter(self.ch) or is_digit(self.ch):
            self.read_char()
        return self.code[start:self.position]

    def read_number(self) -> str:
        """
        Consume a run of decimal digits.
        """
        start = self.position
        while is_digit(self.ch):
            self.read_char()
        return self.code[start:self.position]

    def read_string(self) -> str:
        """
        Consume a string body up to the closing quote or the end of input.

        The cursor is left on the closing quote (or at the end of input);
        the caller consumes it.
        """
        start = self.position + 1
        while True:
            self.read_char()
            if self.ch == '"' or self.ch == EOF_CHAR:
                break
        return self.code[start:self.position]

    def __iter__(self) -> Iterator[Token]:
        """
        Yield tokens up to and including the first ``EOF`` token.
        """
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.EOF:
                return


def tokenize(code: str) -> Lexer:
    """
    Create a lexer over a single line of source code.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        Lexer: A fresh lexer positioned on the first character.
    """
    return Lexer(code)
