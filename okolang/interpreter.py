"""
Interpreter.

This is a tree-walk interpreter for evaluating the syntax tree produced by the
parser. It supports arithmetic, variables, function definitions and calls,
conditionals, loops, arrays and the `io::println` intrinsic.

1. Execution Model
Every node is evaluated by `Interpreter.evaluate(node, scope)`, a single
`match` over the node classes, producing a value. Statements that only have
side effects produce the INVALID marker.

2. Scope
A `Scope` holds variables, functions and the return signal of one frame.
Function calls and each `for` iteration evaluate in a copy of the current
scope, so they can read everything the caller can but their bindings are
discarded afterwards. `while` bodies run in the enclosing scope itself.

3. Return
`return` stores its value in the frame and raises the frame's return flag;
statement sequences stop at the first statement after which the flag is set.

4. Error Handling
Runtime errors, such as undefined variables, redefinitions or operators
applied to unsupported types, are raised as typed exceptions carrying the
line number and file. None of them can be caught from inside the language.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import logging

from okolang import builtins
from okolang.exceptions import (
    EvalException,
    NotImplementedModuleException,
    RedefinitionException,
    StackOverflowException,
    UndefinedFunctionException,
    UndefinedVariableException,
)
from okolang.lexer import tokenize
from okolang.nodes import (
    ASSIGN,
    DEFINE,
    ArrayLiteral,
    BinaryExpr,
    ExpressionStatement,
    FloatLiteral,
    For,
    FunctionCall,
    FunctionDeclare,
    If,
    Import,
    IntLiteral,
    ModuleAccess,
    Node,
    Return,
    StatementSequence,
    StringLiteral,
    UnaryExpr,
    VariableAssign,
    VariableRef,
    While,
)
from okolang.operations import apply_binary_op, apply_unary_op
from okolang.parser import Parser
from okolang.scope import FunctionRecord, Scope
from okolang.values import INVALID, truthy, type_name, wrap_i64

logger = logging.getLogger("okolang.interpreter")


class Interpreter:
    """
    Tree-walk interpreter for oko.
    """
    def __init__(self, file: str = "<stdin>"):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in diagnostics.
        """
        self.file = file

    def _fail(self, exc_type, *args, line=None):
        return exc_type(*args, line=line, file=self.file)

    def evaluate(self, node: Node, scope: Scope):
        """
        Evaluate `node` against `scope` and return the resulting value.

        Parameters:
            node (Node): Any syntax tree node.
            scope (Scope): The frame to read and mutate.

        Returns:
            The computed value, or INVALID for side-effect-only nodes.

        Raises:
            EvalException: For every runtime or type error.
        """
        match node:
            case StatementSequence(nodes=nodes):
                for child in nodes:
                    self.evaluate(child, scope)
                    if scope.return_flag:
                        break
                return INVALID

            case Import():
                return INVALID

            case VariableAssign(name=name, op=op, expr=expr):
                self._assign(node, name, op, expr, scope)
                return INVALID

            case BinaryExpr(op=op, left=left, right=right):
                lhs = self.evaluate(left, scope)
                rhs = self.evaluate(right, scope)
                try:
                    return apply_binary_op(lhs, rhs, op)
                except EvalException as exc:
                    raise exc.locate(node.line, self.file) from None

            case UnaryExpr(op=op, operand=operand):
                value = self.evaluate(operand, scope)
                try:
                    return apply_unary_op(value, op)
                except EvalException as exc:
                    raise exc.locate(node.line, self.file) from None

            case IntLiteral(value=value):
                return wrap_i64(value)

            case FloatLiteral(value=value):
                return value

            case StringLiteral(value=value):
                return value

            case VariableRef(name=name):
                if name not in scope.vars:
                    raise self._fail(UndefinedVariableException, name, line=node.line)
                return scope.vars[name]

            case FunctionCall():
                return self._call(node, scope)

            case ModuleAccess(module_name=module_name, call=call):
                intrinsic = builtins.lookup(module_name, call.name)
                if intrinsic is None:
                    raise self._fail(
                        NotImplementedModuleException, module_name, call.name, line=node.line
                    )
                args = [self.evaluate(arg, scope) for arg in call.args]
                try:
                    return intrinsic(args)
                except EvalException as exc:
                    raise exc.locate(node.line, self.file) from None

            case ArrayLiteral(elements=elements):
                return tuple(self.evaluate(elem, scope) for elem in elements)

            case Return(expr=expr):
                if expr is not None:
                    scope.return_value = self.evaluate(expr, scope)
                scope.return_flag = True
                return INVALID

            case FunctionDeclare(name=name, params=params, body=body):
                scope.funs[name] = FunctionRecord(params, body)
                return INVALID

            case ExpressionStatement(expr=expr):
                self.evaluate(expr, scope)
                return INVALID

            case If(condition=condition, then_block=then_block, else_node=else_node):
                if truthy(self.evaluate(condition, scope)):
                    return self.evaluate(then_block, scope)
                if else_node is not None:
                    return self.evaluate(else_node, scope)
                return INVALID

            case While(condition=condition, body=body):
                iterations = 0
                while not scope.return_flag and truthy(self.evaluate(condition, scope)):
                    self.evaluate(body, scope)
                    iterations += 1
                logger.debug("while on line %d ran %d iterations", node.line, iterations)
                return INVALID

            case For(element_name=element_name, array_expr=array_expr, body=body):
                array = self.evaluate(array_expr, scope)
                if not isinstance(array, tuple):
                    raise self._fail(
                        EvalException,
                        f"Unable to iterate non-array type {type_name(array)}",
                        line=node.line,
                    )
                for elem in array:
                    inner = scope.copy()
                    inner.vars[element_name] = elem
                    self.evaluate(body, inner)
                return INVALID

        raise self._fail(EvalException, f"Invalid syntax tree node {node!r}", line=node.line)

    def _assign(self, node: VariableAssign, name: str, op: str, expr: Node, scope: Scope):
        """
        Apply `:=`, `=` or a compound assignment to `name` in `scope`.
        """
        if op == DEFINE:
            if name in scope.vars:
                raise self._fail(RedefinitionException, name, line=node.line)
            scope.vars[name] = self.evaluate(expr, scope)
        elif op == ASSIGN:
            if name not in scope.vars:
                raise self._fail(UndefinedVariableException, name, line=node.line)
            scope.vars[name] = self.evaluate(expr, scope)
        else:
            value = self.evaluate(expr, scope)
            if name not in scope.vars:
                raise self._fail(UndefinedVariableException, name, line=node.line)
            try:
                scope.vars[name] = apply_binary_op(scope.vars[name], value, op.rstrip("="))
            except EvalException as exc:
                raise exc.locate(node.line, self.file) from None

    def _call(self, node: FunctionCall, scope: Scope):
        """
        Call a user-defined function in a copy of the caller's scope.
        """
        args = [self.evaluate(arg, scope) for arg in node.args]

        record = scope.funs.get(node.name)
        if record is None:
            raise self._fail(UndefinedFunctionException, node.name, line=node.line)

        inner = scope.copy()
        inner.return_value = INVALID
        inner.return_flag = False
        inner.vars.update(zip(record.params, args))

        logger.debug("call %s(%d args) on line %d", node.name, len(args), node.line)
        self.evaluate(record.body, inner)
        return inner.return_value

    def execute(self, program: StatementSequence, scope: Scope | None = None) -> Scope:
        """
        Evaluate a whole program and return the scope it ran in.

        A fresh empty scope is used unless one is given. The program's own
        result is discarded.

        Raises:
            OkoException: For any runtime error.
        """
        scope = scope if scope is not None else Scope()
        try:
            self.evaluate(program, scope)
        except RecursionError:
            raise self._fail(StackOverflowException) from None
        return scope


def run_source(code: str, file: str = "<stdin>") -> Scope:
    """
    Run oko source text through the full pipeline with a fresh scope.

    Returns:
        Scope: the top-level scope after evaluation.

    Raises:
        OkoException: For lexical, parse and runtime errors alike.
    """
    tokens = tokenize(code)
    program = Parser(tokens, file).parse()
    return Interpreter(file).execute(program)

