"""
Utility functions shared across oko language tests.
"""
from okolang.interpreter import Interpreter
from okolang.lexer import tokenize
from okolang.parser import Parser
from okolang.scope import Scope


def parse_source(source: str):
    """
    Parse source code and return the program's statement sequence.
    """
    return Parser(tokenize(source), "<test>").parse()


def run_source(source: str) -> Scope:
    """
    Run source code with a fresh scope and return that scope.
    """
    return Interpreter("<test>").execute(parse_source(source))


def printed(capsys) -> list[str]:
    """
    Return the values written by io::println, without the output prefix.
    """
    lines = capsys.readouterr().out.splitlines()
    return [line.removeprefix("dbg out: ") for line in lines]
