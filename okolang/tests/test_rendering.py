"""
Tests for the textual rendering of values.
"""
import math

import pytest

from okolang.exceptions import RenderException
from okolang.tests.utils import printed, run_source
from okolang.values import INVALID, NIL, render, type_name


@pytest.mark.parametrize("value, expected", [
    (42, "42"),
    (-7, "-7"),
    (2.0, "2"),
    (-3.0, "-3"),
    (0.5, "0.5"),
    (0.30000000000000004, "0.30000000000000004"),
    (1e-06, "0.000001"),
    (math.inf, "inf"),
    (-math.inf, "-inf"),
    (math.nan, "NaN"),
    ("text", "text"),
    (True, "true"),
    (False, "false"),
    (NIL, "Nil"),
    ((), "[]"),
    ((1, "a", 2.5), "[1, a, 2.5, ]"),
    (((1,), (2, 3)), "[[1, ], [2, 3, ], ]"),
])
def test_render(value, expected):
    assert render(value) == expected


def test_render_invalid_raises():
    with pytest.raises(RenderException):
        render(INVALID)


def test_printing_result_of_function_without_return_raises():
    source = (
        "fun nothing() { }\n"
        "io::println(nothing());\n"
    )
    with pytest.raises(RenderException) as exc_info:
        run_source(source)
    assert exc_info.value.line == 2


def test_println_renders_expressions(capsys):
    source = (
        "io::println(1 < 2);\n"
        "io::println([1, 2.5, \"s\"]);\n"
        "io::println(10.0 / 4.0);\n"
    )
    run_source(source)
    assert printed(capsys) == ["true", "[1, 2.5, s, ]", "2.5"]


@pytest.mark.parametrize("value, expected", [
    (1, "Int"),
    (1.0, "Float"),
    ("", "String"),
    (False, "Bool"),
    ((), "Array"),
    (NIL, "Nil"),
    (INVALID, "Invalid"),
])
def test_type_name(value, expected):
    assert type_name(value) == expected
