"""Errors.

All three pipeline stages report failures through this hierarchy. None of
them is recoverable from inside the language: the command-line driver
catches :class:`OkoException` once and terminates with a diagnostic.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class OkoException(Exception):
    """
    Base class for every fatal oko diagnostic.
    """
    def __init__(self, message, line=None, file=None):
        self.message = message
        self.line = line
        self.file = file
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.message
        if self.line is not None:
            message += f" on line {self.line}"
        if self.file is not None:
            message += f" in {self.file}"
        return message

    def locate(self, line, file=None):
        """
        Attach a source location unless one is already recorded.
        """
        if self.line is None:
            self.line = line
            if self.file is None:
                self.file = file
            self.args = (self._format(),)
        return self


class LexException(OkoException):
    """
    Error for source text that cannot be tokenized.
    """


class ParseException(OkoException):
    """
    Error for token sequences that do not follow the grammar.
    """


class EvalException(OkoException):
    """
    Error raised while evaluating the syntax tree.
    """


class UndefinedVariableException(EvalException):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, file)


class RedefinitionException(EvalException):
    """
    Error for `:=` on a name already bound in the current scope.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Variable '{varname}' is already defined in scope", line, file)


class UndefinedFunctionException(EvalException):
    """
    Error for calls to functions that were never declared.
    """
    def __init__(self, name, line=None, file=None):
        self.name = name
        super().__init__(f"Function '{name}' is not declared in scope", line, file)


class UnknownOpException(EvalException):
    """
    Error for operators applied to unsupported operand types.
    """
    def __init__(self, op, detail, line=None, file=None):
        self.op = op
        super().__init__(f"Unable to perform {detail} ('{op}')", line, file)


class NotImplementedModuleException(EvalException):
    """
    Error for module members with no intrinsic behind them.
    """
    def __init__(self, module, member, line=None, file=None):
        self.module = module
        self.member = member
        super().__init__(f"Module member '{module}::{member}' is not implemented", line, file)


class RenderException(EvalException):
    """
    Error for attempts to render the internal invalid marker.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Cannot render invalid object", line, file)


class StackOverflowException(EvalException):
    """
    Error for recursion deeper than the host allows.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Maximum call stack size exceeded", line, file)
