"""
Tests for variable declaration and assignment in the oko language.
"""
import pytest

from okolang.exceptions import (
    RedefinitionException,
    UndefinedVariableException,
    UnknownOpException,
)
from okolang.tests.utils import printed, run_source


def test_declare_and_print(capsys):
    """
    Test declaring a variable and printing it.
    """
    source = (
        "x := 10;\n"
        "io::println(x);\n"
    )
    run_source(source)
    assert printed(capsys) == ["10"]


def test_redefinition_raises():
    """
    Test that `:=` on an existing name is an error.
    """
    with pytest.raises(RedefinitionException) as exc_info:
        run_source("x := 1;\nx := 2;")
    assert exc_info.value.varname == "x"
    assert exc_info.value.line == 2


def test_reassignment():
    """
    Test that `=` replaces the value of an existing variable.
    """
    scope = run_source('x := 1; x = "now a string";')
    assert scope.vars["x"] == "now a string"


def test_reassignment_reads_previous_value():
    """
    Test that the right-hand side of `=` can read the variable being assigned.
    """
    scope = run_source("x := 1; x = x + 1; x = x * 10;")
    assert scope.vars["x"] == 20


def test_assignment_to_undefined_raises():
    """
    Test that `=` and compound assignment require a prior declaration.
    """
    with pytest.raises(UndefinedVariableException):
        run_source("y = 1;")
    with pytest.raises(UndefinedVariableException):
        run_source("y += 1;")


def test_undefined_variable_reference_raises():
    """
    Test that reading an undeclared variable is an error.
    """
    with pytest.raises(UndefinedVariableException, match="Undefined variable 'nope'"):
        run_source("x := nope + 1;")


def test_compound_assignment():
    """
    Test each compound assignment operator in sequence.
    """
    scope = run_source("x := 10; x -= 3; x *= 2; x /= 7; x += 40;")
    assert scope.vars["x"] == 42


def test_compound_assignment_on_strings_and_floats():
    """
    Test compound assignment follows the operand typing rules.
    """
    scope = run_source('s := "ab"; s += "cd"; f := 1.5; f *= 2.0;')
    assert scope.vars["s"] == "abcd"
    assert scope.vars["f"] == 3.0


def test_compound_assignment_type_mismatch_raises():
    """
    Test that compound assignment does not mix Int and Float.
    """
    with pytest.raises(UnknownOpException) as exc_info:
        run_source("x := 1;\nx += 0.5;")
    assert exc_info.value.line == 2


def test_arrays_are_values(capsys):
    """
    Test that an array bound to two names cannot be changed through either.
    """
    source = (
        "a := [1, 2, 3];\n"
        "b := a;\n"
        "a = [4];\n"
        "io::println(b);\n"
    )
    run_source(source)
    assert printed(capsys) == ["[1, 2, 3, ]"]
