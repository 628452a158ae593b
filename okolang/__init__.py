"""oko language front end and evaluator.

Source text flows through three stages:

    tokenize (okolang.lexer) -> Parser (okolang.parser) -> Interpreter (okolang.interpreter)

:func:`run_source` runs all three against a fresh scope.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"

from okolang.interpreter import Interpreter, run_source

__all__ = ["Interpreter", "run_source", "__version__"]
