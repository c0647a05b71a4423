"""
Main parser entry point for KSM.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. It holds exactly one lookahead token pulled from the
lexer; the statement routines live in `ksmlang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from ksmlang.lexer import Lexer, Token, TokenKind
from ksmlang.nodes import Block

from . import statements as _stmt


class Parser:
    """KSM parser."""

    def __init__(self, lexer: Lexer, file: str = "<stdin>"):
        """
        Initialize the parser and load the first token.

        Parameters:
            lexer (Lexer): The token source.
            file (str): The name of the script, used in error messages.
        """
        self.lexer = lexer
        self.source_file = file
        self.current: Token = self.lexer.next_token()

    def advance(self) -> None:
        """
        Move the lookahead to the next token.
        """
        self.current = self.lexer.next_token()

    def describe(self, tok: Token) -> str:
        """
        Describe a token for error messages.
        """
        return (
            f"value '{tok.text}' of type {tok.kind} "
            f"on line {tok.line}, column {tok.column} in {self.source_file}"
        )

    def eat(self, text: str) -> Token:
        """
        Consume the current token if its text matches.

        Parameters:
            text (str): The expected literal text.

        Returns:
            Token: The consumed token.

        Raises:
            SyntaxError: If the token text does not match.
        """
        tok = self.current
        if tok.text != text:
            raise SyntaxError(f"Expected '{text}', but got {self.describe(tok)}")
        self.advance()
        return tok

    def eat_kind(self, *kinds: TokenKind) -> Token:
        """
        Consume the current token if it is one of the given kinds.

        Parameters:
            kinds (TokenKind): The accepted token kinds.

        Returns:
            Token: The consumed token.

        Raises:
            SyntaxError: If the token kind is not accepted.
        """
        tok = self.current
        if tok.kind not in kinds:
            expected = " or ".join(str(kind) for kind in kinds)
            raise SyntaxError(f"Expected token of type {expected}, but got {self.describe(tok)}")
        self.advance()
        return tok


    # Statement wrappers
    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> Block:
        """
        Parse a brace-delimited block of statements.
        """
        return _stmt.parse_block(self)

    def parse_var_decl(self):
        """
        Parse a 'declare' statement.
        """
        return _stmt.parse_var_decl(self)

    def parse_print(self):
        """
        Parse a 'displayln' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self):
        """
        Parse an 'if case' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_condition(self):
        """
        Parse the three-token comparison of an 'if case' statement.
        """
        return _stmt.parse_condition(self)

    def parse_otherwise(self):
        """
        Parse an 'otherwise' statement.
        """
        return _stmt.parse_otherwise(self)


    def parse(self) -> Block:
        """
        Parse the full input into the root block.

        Raises:
            SyntaxError: On the first token that does not fit the grammar, or
                when blocks are nested deeper than the parser can recurse.
        """
        root = Block(line=self.current.line)
        while self.current.kind != TokenKind.EOF:
            try:
                root.statements.append(self.statement())
            except SyntaxError as e:
                raise SyntaxError(f"error parsing statement: {e}") from e
            except RecursionError as e:
                raise SyntaxError(
                    f"error parsing statement: statement nesting too deep "
                    f"on line {self.current.line} in {self.source_file}"
                ) from e
        return root
