"""
Amoud Language Interpreter

This is the main entry point for the Amoud language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, evaluating expressions and executing statements.
5. The final variable environment, or the first error, is printed.

Set the AMOUDDEBUG environment variable to print the tokens and AST of a
script before it is evaluated.


File: amoud.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import os
import sys

from termcolor import colored

from amoudlang.exceptions import UnexpectedEOFError
from amoudlang.lexer import tokenize
from amoudlang.parser import Parser
from amoudlang.interpreter import Interpreter, format_value

EXIT_WORDS = {"exit", "quit", "خروج"}


def print_usage():
    """
    Print usage.
    """
    print()
    print("Amoud Language Interpreter")
    print()
    print("Usage:")
    print("    amoud <script.عمود>")
    print()
    print("Arguments:")
    print("    <script.عمود>")
    print("        Path to a UTF-8 encoded Amoud source file to execute.")
    print()
    print("Example:")
    print("    amoud تجربة.عمود")
    print()
    print("Or run with no arguments to enter interactive mode (REPL). In the REPL an")
    print("`لو` statement collects the following lines until an empty line is entered.")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def print_error(e: Exception):
    """
    Print an error as '<type>: <message>'.
    """
    print(f"{colored(type(e).__name__, 'red', attrs=['bold'])}: {e}")


def print_environment(interpreter: Interpreter):
    """
    Print the variables bound by a successful run.
    """
    print("Interpretation successful.")
    print("Variables:")
    for name, value in interpreter.vars.items():
        print(f"    {name} = {format_value(value)}")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print ("\nTokens:\n")
    print(tokens)
    print ("\nAST:\n")
    print(ast)
    print (" ")


def parse_program(source: str, file: str) -> list[tuple]:
    """
    Tokenize and parse source code into a list of statements.

    Raises:
        SyntaxError: If the source is malformed.
        UnexpectedEOFError: If the source ends in the middle of a statement.
    """
    tokens = tokenize(source)
    parser = Parser(tokens, file)
    ast = parser.parse()

    if os.environ.get('AMOUDDEBUG'):
        debug_print_tokens_ast(tokens, ast)

    return ast


def run_source(source: str, file: str, interpreter: Interpreter | None = None) -> Interpreter:
    """
    Run source code through the lexer, parser and interpreter.

    Parameters:
        source (str): The source code.
        file (str): The script name used in error messages.
        interpreter (Interpreter): An interpreter to reuse, so the environment
            carries over. A fresh one is created when omitted.

    Returns:
        Interpreter: The interpreter holding the final environment.
    """
    if interpreter is None:
        interpreter = Interpreter(file)

    interpreter.execute(parse_program(source, file))
    return interpreter


def run_script(script_name: str) -> int:
    """
    Run an Amoud script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
        interpreter = run_source(code, script_name)
    except Exception as e:  # pylint: disable=broad-exception-caught
        print_error(e)
        return 1

    print_environment(interpreter)
    return 0


def run_repl():
    """
    Run the interactive REPL

    An `لو` statement has no terminator and takes every statement after it, so
    the REPL keeps collecting lines after one until an empty line is entered.
    """
    print("Amoud Language Interpreter - REPL")
    print("Type `exit` or `خروج` to leave. End an `لو` statement with an empty line.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if line.strip() in EXIT_WORDS:
                break
            buffer.append(line)
            source = "\n".join(buffer)
            try:
                ast = parse_program(source, "<stdin>")
            except UnexpectedEOFError:
                continue
            except SyntaxError as e:
                print_error(e)
                buffer.clear()
                continue
            if line.strip() and ast and ast[-1][0] == 'if':
                continue
            buffer.clear()
            try:
                interpreter.execute(ast)
            except Exception as e:  # pylint: disable=broad-exception-caught
                print_error(e)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
