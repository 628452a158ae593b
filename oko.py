"""
oko Language Interpreter

This is the main entry point for the oko language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into a syntax tree following the language grammar.
4. The Interpreter walks the tree against a fresh scope, evaluating expressions
   and executing statements.

Any lexical, parse or runtime error terminates the run: the diagnostic is
written to standard error and the exit status is 1.

Environment:
    OKODEBUG             Enable debug logging and dump the tokens and syntax tree.
    OKO_RECURSION_LIMIT  Host recursion limit bounding oko call depth (default 10000).
"""
import logging
import os
import sys

from okolang.exceptions import OkoException
from okolang.interpreter import Interpreter
from okolang.lexer import tokenize
from okolang.logging_config import setup_logging
from okolang.parser import Parser

logger = logging.getLogger("okolang.cli")

DEFAULT_RECURSION_LIMIT = 10000

LICENSE = """oko-lang
Copyright: © 2025 Chris Rowles. All rights reserved.
Released under the MIT License."""


def print_usage(file=None):
    """
    Print usage.
    """
    out = file or sys.stdout
    print(file=out)
    print("oko Language Interpreter", file=out)
    print(file=out)
    print("Usage:", file=out)
    print("    oko <script.oko>", file=out)
    print(file=out)
    print("Arguments:", file=out)
    print("    <script.oko>", file=out)
    print("        Path to an oko language source file to execute.", file=out)
    print("    license", file=out)
    print("        Print the license notice and exit.", file=out)
    print(file=out)
    print("Options:", file=out)
    print("    -h, --help", file=out)
    print("        Show this help message and exit.", file=out)


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and syntax tree
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def recursion_limit() -> int:
    """
    Read the configured recursion limit from the environment.
    """
    raw = os.environ.get("OKO_RECURSION_LIMIT", "")
    try:
        return max(int(raw), 100) if raw else DEFAULT_RECURSION_LIMIT
    except ValueError:
        logger.warning("Ignoring non-integer OKO_RECURSION_LIMIT %r", raw)
        return DEFAULT_RECURSION_LIMIT


def run_script(script_name: str) -> int:
    """
    Run an oko script and return the process exit status.
    """
    if not script_name.endswith(".oko"):
        logger.warning("%s does not have the .oko extension", script_name)

    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: cannot read '{script_name}': {e.strerror}", file=sys.stderr)
        return 1

    debug = bool(os.environ.get("OKODEBUG"))
    previous_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(recursion_limit())
    try:
        tokens = tokenize(code)
        ast = Parser(tokens, script_name).parse()

        if debug:
            debug_print_tokens_ast(tokens, ast)

        Interpreter(script_name).execute(ast)
    except OkoException as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    finally:
        sys.setrecursionlimit(previous_limit)
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument equal to ``license``: print the license notice and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage to stderr and return a non-zero exit code.
    """
    if os.environ.get("OKODEBUG"):
        setup_logging(logging.DEBUG)

    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and args[0] == 'license':
        print(LICENSE)
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print("Error: expected exactly one script path", file=sys.stderr)
    print_usage(sys.stderr)
    return 1


def run():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
