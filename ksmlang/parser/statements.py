"""Statement parsing utilities for KSM.

These functions operate on a `ksmlang.parser.parser.Parser` instance and
handle the statement forms of the language: declarations, output,
``if case`` conditionals, ``otherwise`` blocks and brace-delimited blocks.

Structural tokens (``=``, ``(``, ``)``, ``{``, ``}``, ``case``) are matched by
their text only. Token kinds are checked for the declared name, the single
value token of ``declare``/``displayln`` and the condition operator.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from ksmlang.lexer import TokenKind
from ksmlang.nodes import Block, Condition, If, Otherwise, Print, VarDecl

if TYPE_CHECKING:
    from ksmlang.parser import Parser


VALUE_KINDS = (TokenKind.NUMBER, TokenKind.IDENT, TokenKind.STRING)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Syntax:
        <declare> | <displayln> | <if> | <otherwise>

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok = parser.current
    if tok.kind != TokenKind.KEYWORD:
        raise SyntaxError(f"Unexpected token: {parser.describe(tok)}")
    if tok.text == "declare":
        return parser.parse_var_decl()
    elif tok.text == "displayln":
        return parser.parse_print()
    elif tok.text == "if":
        return parser.parse_if()
    elif tok.text == "otherwise":
        return parser.parse_otherwise()
    raise SyntaxError(f"Unexpected keyword: {parser.describe(tok)}")


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    The body ends at the first token whose text is ``}`` or at the end of
    input, whichever comes first; the closing brace is then required.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        Block: The parsed block.
    """
    tok = parser.eat("{")
    block = Block(line=tok.line)
    while parser.current.kind != TokenKind.EOF and parser.current.text != "}":
        block.statements.append(parser.statement())
    parser.eat("}")
    return block


def parse_var_decl(parser: 'Parser') -> VarDecl:
    """
    Parse a variable declaration.

    Syntax:
        declare <identifier> = <number | identifier | string>

    Args:
        parser: The parser instance.

    Returns:
        VarDecl: The declaration node.
    """
    tok = parser.eat("declare")
    name_tok = parser.eat_kind(TokenKind.IDENT)
    parser.eat("=")
    value_tok = parser.eat_kind(*VALUE_KINDS)
    return VarDecl(name_tok.text, value_tok, tok.line)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a 'displayln' statement.

    Syntax:
        displayln ( <identifier | number | string> )

    Args:
        parser: The parser instance.

    Returns:
        Print: The output node.
    """
    tok = parser.eat("displayln")
    parser.eat("(")
    value_tok = parser.eat_kind(*VALUE_KINDS)
    parser.eat(")")
    return Print(value_tok, tok.line)


def parse_condition(parser: 'Parser') -> Condition:
    """
    Parse a comparison. The operands may be any single token.

    Syntax:
        <token> <operator> <token>

    Args:
        parser: The parser instance.

    Returns:
        Condition: The condition node.
    """
    left = parser.current
    parser.advance()
    operator = parser.eat_kind(TokenKind.OPERATOR)
    right = parser.current
    parser.advance()
    return Condition(left, operator, right)


def parse_if(parser: 'Parser') -> If:
    """
    Parse an 'if case' statement.

    Syntax:
        if case <condition> { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        If: The conditional node.
    """
    tok = parser.eat("if")
    parser.eat("case")
    condition = parser.parse_condition()
    body = parser.block()
    return If(condition, body, tok.line)


def parse_otherwise(parser: 'Parser') -> Otherwise:
    """
    Parse an 'otherwise' statement. It is not attached to any preceding
    'if case'.

    Syntax:
        otherwise { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        Otherwise: The block node.
    """
    tok = parser.eat("otherwise")
    body = parser.block()
    return Otherwise(body, tok.line)
