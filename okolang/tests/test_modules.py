"""
Tests for imports and built-in module members in the oko language.
"""
import pytest

from okolang import builtins
from okolang.exceptions import EvalException, NotImplementedModuleException
from okolang.tests.utils import run_source


def test_import_has_no_effect(capsys):
    scope = run_source('import io;\nimport anything;\nio::println("hi");')
    assert capsys.readouterr().out == "dbg out: hi\n"
    assert scope.vars == {}


def test_println_works_without_import(capsys):
    run_source("io::println(1);")
    assert capsys.readouterr().out == "dbg out: 1\n"


def test_unknown_member_raises():
    """
    Test that members outside the intrinsic table are not implemented.
    """
    with pytest.raises(NotImplementedModuleException) as exc_info:
        run_source("io::print(1);")
    assert exc_info.value.module == "io"
    assert exc_info.value.member == "print"


def test_unknown_module_raises():
    with pytest.raises(NotImplementedModuleException, match="'math::sqrt'"):
        run_source("x := math::sqrt(4.0);")


def test_println_requires_one_argument():
    with pytest.raises(EvalException, match="exactly one argument"):
        run_source("io::println(1, 2);")
    with pytest.raises(EvalException, match="exactly one argument"):
        run_source("io::println();")


def test_println_returns_invalid():
    assert run_source("x := io::println(1);").vars["x"] is builtins.INVALID


def test_lookup():
    assert builtins.lookup("io", "println") is builtins.io_println
    assert builtins.lookup("io", "readln") is None
