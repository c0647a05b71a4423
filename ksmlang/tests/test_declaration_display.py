"""
Tests for declarations and displayln output in KSM
"""
import io

import pytest

from ksmlang.exceptions import MalformedStatementException
from ksmlang.interpreter import Interpreter
from ksmlang.lexer import Token, TokenKind
from ksmlang.nodes import Block, VarDecl
from ksmlang.tests.utils import parse_source, run_source


def test_declare_then_display(capsys):
    interpreter = run_source('declare x = 5', 'displayln(x)')
    assert interpreter.vars == {'x': '5'}
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['Variable Declaration: x = 5', 'Print Statement: 5']


def test_string_value_is_trimmed(capsys):
    interpreter = run_source('declare greeting = "  hello  "', 'displayln(greeting)')
    assert interpreter.vars['greeting'] == 'hello'
    assert capsys.readouterr().out.splitlines()[-1] == 'Print Statement: hello'


def test_value_containing_equals_sign(capsys):
    interpreter = run_source('declare eq = "a = b"', 'displayln(eq)')
    assert interpreter.vars['eq'] == 'a = b'
    assert capsys.readouterr().out.splitlines()[-1] == 'Print Statement: a = b'


def test_last_write_wins(capsys):
    interpreter = run_source('declare x = 1 declare x = 2', 'displayln(x)')
    assert interpreter.vars == {'x': '2'}
    assert capsys.readouterr().out.splitlines()[-1] == 'Print Statement: 2'


def test_identifier_value_is_stored_as_text(capsys):
    interpreter = run_source('declare a = 1 declare b = a', 'displayln(b)')
    assert interpreter.vars['b'] == 'a'
    assert capsys.readouterr().out.splitlines()[-1] == 'Print Statement: a'


def test_undeclared_name_displays_itself(capsys):
    run_source('displayln(nobody)', 'displayln(42)', 'displayln("some text")')
    assert capsys.readouterr().out.strip().splitlines() == [
        'Print Statement: nobody',
        'Print Statement: 42',
        'Print Statement: some text',
    ]


def test_string_argument_resolves_like_a_name(capsys):
    run_source('declare x = 7', 'displayln("x")')
    assert capsys.readouterr().out.splitlines()[-1] == 'Print Statement: 7'


def test_output_stream():
    out = io.StringIO()
    interpreter = Interpreter('<test>', stream=out)
    interpreter.execute(parse_source('declare x = 3 displayln(x)'))
    assert out.getvalue() == 'Variable Declaration: x = 3\nPrint Statement: 3\n'


def test_stores_are_isolated():
    first = run_source('declare x = 1')
    second = run_source('declare y = 2')
    assert first.vars == {'x': '1'}
    assert second.vars == {'y': '2'}


def test_none_and_empty_block_are_noops(capsys):
    interpreter = Interpreter('<test>')
    interpreter.execute(None)
    interpreter.execute(Block())
    assert interpreter.vars == {}
    assert capsys.readouterr().out == ''


def test_malformed_declaration_raises_and_keeps_earlier_writes(capsys):
    value = Token(TokenKind.NUMBER, '1', 1, 1)
    ast = Block([VarDecl('a', value), VarDecl('  ', value), VarDecl('b', value)])
    interpreter = Interpreter('<test>')
    with pytest.raises(MalformedStatementException) as exc:
        interpreter.execute(ast)
    assert isinstance(exc.value, RuntimeError)
    assert 'invalid variable declaration' in str(exc.value)
    assert interpreter.vars == {'a': '1'}
    assert capsys.readouterr().out.strip().splitlines() == ['Variable Declaration: a = 1']


def test_unknown_node_type():
    with pytest.raises(TypeError):
        Interpreter('<test>').execute(Block(['not a statement']))


def test_separator_control_characters_are_kept(capsys):
    interpreter = run_source('declare x = "\x1f5"', 'if case x > 1 { displayln(x) }')
    assert interpreter.vars['x'] == '\x1f5'
    assert capsys.readouterr().out.splitlines()[-1] == 'If Statement (False): x > 1'


def test_unicode_white_space_is_trimmed():
    interpreter = run_source('declare x = "　\t7\xa0"')
    assert interpreter.vars['x'] == '7'
