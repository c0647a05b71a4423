"""
Utility functions shared across KSM Language tests.
"""
from ksmlang.lexer import tokenize
from ksmlang.parser import Parser
from ksmlang.interpreter import Interpreter


def lex(source: str):
    """
    Tokenize source code and return every token up to and including EOF.
    """
    return list(tokenize(source))


def parse_source(source: str):
    """
    Parse source code and return the root block.
    """
    parser = Parser(tokenize(source), "<test>")
    return parser.parse()


def run_source(*lines: str) -> Interpreter:
    """
    Run each line through a fresh lexer and parser against one interpreter,
    the way the REPL does, and return the interpreter.
    """
    interpreter = Interpreter("<test>")
    for line in lines:
        interpreter.execute(parse_source(line))
    return interpreter
