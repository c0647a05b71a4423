"""
Tests for condition evaluation in KSM
"""
import pytest

from ksmlang.interpreter import Interpreter, parse_int
from ksmlang.lexer import Token, TokenKind
from ksmlang.nodes import Condition
from ksmlang.operations import Op


def make_condition(left: str, op: str, right: str, kind=TokenKind.IDENT) -> Condition:
    return Condition(
        Token(kind, left, 1, 1),
        Token(TokenKind.OPERATOR, op, 1, 3),
        Token(kind, right, 1, 5),
    )


@pytest.mark.parametrize('left, op, right, expected', [
    ('5', '>', '3', True),
    ('3', '>', '5', False),
    ('3', '<', '5', True),
    ('5', '<', '5', False),
    ('5', '==', '5', True),
    ('5', '==', '6', False),
    ('007', '==', '7', True),
    ('-2', '<', '1', True),
    ('+4', '==', '4', True),
    ('5', '=', '5', False),
    ('5', '(', '5', False),
])
def test_integer_comparisons(left, op, right, expected):
    interpreter = Interpreter('<test>')
    assert interpreter.evaluate_condition(make_condition(left, op, right)) is expected


def test_operands_resolve_through_variables():
    interpreter = Interpreter('<test>')
    interpreter.vars.update({'x': '5', 'y': '5'})
    assert interpreter.evaluate_condition(make_condition('x', '==', 'y'))
    assert interpreter.evaluate_condition(make_condition('x', '>', '4'))


def test_undeclared_non_numeric_operands_are_false():
    interpreter = Interpreter('<test>')
    assert not interpreter.evaluate_condition(make_condition('a', '==', 'b'))
    assert not interpreter.evaluate_condition(make_condition('a', '==', 'a'))


def test_equal_strings_never_compare_equal():
    interpreter = Interpreter('<test>')
    interpreter.vars.update({'s': 'abc', 't': 'abc'})
    assert not interpreter.evaluate_condition(make_condition('s', '==', 't'))


def test_operand_with_space_is_malformed():
    interpreter = Interpreter('<test>')
    interpreter.vars['n'] = '1'
    cond = make_condition('1 ', '==', 'n', kind=TokenKind.STRING)
    assert not interpreter.evaluate_condition(cond)


def test_empty_operand_is_false():
    interpreter = Interpreter('<test>')
    assert not interpreter.evaluate_condition(make_condition('', '==', '', kind=TokenKind.STRING))


@pytest.mark.parametrize('text, expected', [
    ('0', 0),
    ('42', 42),
    ('-17', -17),
    ('+3', 3),
    ('9223372036854775807', 2 ** 63 - 1),
    ('-9223372036854775808', -(2 ** 63)),
    ('9223372036854775808', None),
    ('', None),
    ('1_000', None),
    (' 1', None),
    ('1.5', None),
    ('١٢', None),
    ('abc', None),
])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_op_lookup():
    assert Op.from_symbol('>') is Op.GT
    assert Op.from_symbol('==') is Op.EQ
    assert Op.from_symbol('=') is None
    assert Op.LT.apply(1, 2)
    assert not Op.GT.apply(1, 2)
