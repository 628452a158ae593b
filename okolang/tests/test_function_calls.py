"""
Tests for function declaration, calls and return in the oko language.
"""
import pytest

from okolang.exceptions import (
    StackOverflowException,
    UndefinedFunctionException,
    UndefinedVariableException,
)
from okolang.interpreter import Interpreter
from okolang.tests.utils import parse_source, printed, run_source
from okolang.values import INVALID


def test_recursive_fibonacci(capsys):
    """
    Test a recursive function with conditional returns.
    """
    source = (
        "fun fib(n) {\n"
        "    if (n < 2) {\n"
        "        return n;\n"
        "    }\n"
        "    return fib(n - 1) + fib(n - 2);\n"
        "}\n"
        "io::println(fib(10));\n"
    )
    run_source(source)
    assert printed(capsys) == ["55"]


def test_arguments_bind_in_order():
    source = (
        "fun sub(a, b) {\n"
        "    return a - b;\n"
        "}\n"
        "x := sub(10, 3);\n"
    )
    assert run_source(source).vars["x"] == 7


def test_extra_arguments_are_ignored():
    source = (
        "fun one(a) {\n"
        "    return a;\n"
        "}\n"
        "x := one(1, 2, 3);\n"
    )
    assert run_source(source).vars["x"] == 1


def test_missing_arguments_are_unbound():
    """
    Test that parameters without an argument are simply undefined.
    """
    source = (
        "fun two(a, b) {\n"
        "    return b;\n"
        "}\n"
        "x := two(1);\n"
    )
    with pytest.raises(UndefinedVariableException):
        run_source(source)


def test_arguments_evaluate_in_caller_scope():
    source = (
        "a := 4;\n"
        "fun double(a) {\n"
        "    return a * 2;\n"
        "}\n"
        "x := double(a + 1);\n"
    )
    scope = run_source(source)
    assert scope.vars["x"] == 10
    assert scope.vars["a"] == 4


def test_function_without_return_yields_invalid():
    source = (
        "fun nothing() {\n"
        "    y := 1;\n"
        "}\n"
        "x := nothing();\n"
    )
    assert run_source(source).vars["x"] is INVALID


def test_bare_return_yields_invalid():
    source = (
        "fun stop() {\n"
        "    return;\n"
        "}\n"
        "x := stop();\n"
    )
    assert run_source(source).vars["x"] is INVALID


def test_undeclared_function_raises():
    with pytest.raises(UndefinedFunctionException, match="'missing' is not declared"):
        run_source("x := missing(1);")


def test_function_must_be_declared_before_call():
    source = (
        "x := later();\n"
        "fun later() { return 1; }\n"
    )
    with pytest.raises(UndefinedFunctionException):
        run_source(source)


def test_return_stops_remaining_statements(capsys):
    """
    Test that nothing after a `return` runs in the same call.
    """
    source = (
        "fun early() {\n"
        "    io::println(1);\n"
        "    return 2;\n"
        "    io::println(3);\n"
        "}\n"
        "io::println(early());\n"
    )
    run_source(source)
    assert printed(capsys) == ["1", "2"]


def test_return_inside_while_leaves_function():
    """
    Test that a return nested in a loop ends both the loop and the call.
    """
    source = (
        "fun first_over(limit) {\n"
        "    i := 0;\n"
        "    while ([0]) {\n"
        "        i += 1;\n"
        "        if (i > limit) {\n"
        "            return i;\n"
        "        }\n"
        "    }\n"
        "    return 0;\n"
        "}\n"
        "x := first_over(2);\n"
    )
    assert run_source(source).vars["x"] == 3


def test_return_does_not_stop_caller(capsys):
    source = (
        "fun f() { return 1; }\n"
        "f();\n"
        "io::println(2);\n"
    )
    run_source(source)
    assert printed(capsys) == ["2"]


def test_top_level_return_stops_program(capsys):
    source = (
        "io::println(1);\n"
        "return;\n"
        "io::println(2);\n"
    )
    scope = run_source(source)
    assert printed(capsys) == ["1"]
    assert scope.return_flag


def test_redeclaring_function_replaces_it():
    source = (
        "fun f() { return 1; }\n"
        "fun f() { return 2; }\n"
        "x := f();\n"
    )
    assert run_source(source).vars["x"] == 2


def test_function_body_is_shared_with_declaration():
    """
    Test that the stored function record reuses the declared body object.
    """
    program = parse_source("fun f(a) { return a; }")
    scope = Interpreter("<test>").execute(program)
    assert scope.funs["f"].body is program.nodes[0].body
    assert scope.funs["f"].params == ("a",)


def test_unbounded_recursion_raises():
    source = (
        "fun forever(n) {\n"
        "    return forever(n + 1);\n"
        "}\n"
        "forever(0);\n"
    )
    with pytest.raises(StackOverflowException, match="Maximum call stack size exceeded"):
        run_source(source)
