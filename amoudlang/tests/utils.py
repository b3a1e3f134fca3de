"""
Utility functions shared across Amoud Language tests.
"""
from pathlib import Path
import sys

from amoudlang.lexer import tokenize
from amoudlang.parser import Parser
from amoudlang.interpreter import Interpreter

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def token_types(source: str) -> list[str]:
    """
    Tokenize source code and return the token types without the EOF sentinel.
    """
    return [tok.type for tok in tokenize(source)[:-1]]


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    parser = Parser(tokenize(source), "<test>")
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(parse_source(source))
    return interpreter


def run_file(path: Path) -> Interpreter:
    """
    Run a file and return the interpreter instance after execution.
    """
    code = path.read_text(encoding="utf-8")
    interpreter = Interpreter(str(path))
    parser = Parser(tokenize(code), str(path))
    interpreter.execute(parser.parse())
    return interpreter
