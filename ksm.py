"""
KSM Language Interpreter

This is the main entry point for the KSM language interpreter.

Workflow:
1. A line of source is read from the REPL prompt or from a script file.
2. The Lexer is created over that single line and hands out tokens on demand.
3. The Parser processes tokens into a statement tree following the grammar.
4. The Interpreter walks the tree, printing output and updating variables.

Every line gets a fresh lexer and parser; the interpreter, and with it the
variable store, is shared across lines.


File: ksm.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import os
import sys

from ksmlang.lexer import tokenize
from ksmlang.nodes import dump
from ksmlang.parser import Parser
from ksmlang.interpreter import Interpreter


def print_usage():
    """
    Print usage.
    """
    print()
    print("KSM Language Interpreter")
    print()
    print("Usage:")
    print("    ksm <script.ksm>")
    print()
    print("Arguments:")
    print("    <script.ksm>")
    print("        Path to a KSM source file to execute. Each line of the file is")
    print("        parsed and run on its own, exactly as if typed at the prompt.")
    print()
    print("Example:")
    print("    ksm hello.ksm")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    KSMDEBUG")
    print("        When set, print the tokens and statement tree of every line.")


def debug_print_tokens_ast(line: str, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(list(tokenize(line)))
    print("\nAST:\n")
    print(dump(ast))
    print(" ")


def run_line(interpreter: Interpreter, line: str, file: str = "<stdin>") -> bool:
    """
    Tokenize, parse and execute one line of source.

    Errors are reported on stdout and do not propagate; variables declared
    before the error are kept.

    Returns:
        bool: True if the line ran without error.
    """
    parser = Parser(tokenize(line), file)
    try:
        ast = parser.parse()
    except SyntaxError as e:
        print(f"Parsing error: {e}")
        return False

    if os.environ.get('KSMDEBUG'):
        debug_print_tokens_ast(line, ast)

    try:
        interpreter.execute(ast)
    except RuntimeError as e:
        print(f"Interpretation error: {e}")
        return False
    return True


def run_script(script_name: str) -> bool:
    """
    Run a KSM script line by line.

    Returns:
        bool: True if every line ran without error.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        lines = f.read().splitlines()

    interpreter = Interpreter(script_name)
    ok = True
    for line in lines:
        if not line.strip():
            continue
        ok = run_line(interpreter, line, script_name) and ok
    return ok


def run_repl():
    """
    Run the interactive REPL
    """
    print("Welcome to the KSM REPL!")
    print("Type 'exit' to quit.")
    interpreter = Interpreter("<stdin>")
    while True:
        try:
            line = input(">> ")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
        if line.strip() in {"exit", "quit"}:
            break
        run_line(interpreter, line)


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return 0 if run_script(args[0]) else 1
    print_usage()
    return 1


def cli() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
