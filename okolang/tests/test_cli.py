"""
Tests for the command-line driver.
"""
import logging

import oko
from okolang.logging_config import COMPONENTS


def write_script(tmp_path, source: str, name: str = "script.oko"):
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return str(path)


def test_no_arguments_prints_usage(capsys):
    assert oko.main(["oko"]) == 1
    err = capsys.readouterr().err
    assert "expected exactly one script path" in err
    assert "Usage:" in err


def test_help(capsys):
    assert oko.main(["oko", "--help"]) == 0
    assert "Usage:" in capsys.readouterr().out
    assert oko.main(["oko", "-h"]) == 0


def test_license(capsys):
    assert oko.main(["oko", "license"]) == 0
    assert "MIT License" in capsys.readouterr().out


def test_runs_script(tmp_path, capsys):
    path = write_script(tmp_path, 'x := 2;\nio::println(x * 21);\n')
    assert oko.main(["oko", path]) == 0
    assert capsys.readouterr().out == "dbg out: 42\n"


def test_missing_file(tmp_path, capsys):
    path = str(tmp_path / "missing.oko")
    assert oko.main(["oko", path]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_runtime_error_is_reported(tmp_path, capsys):
    path = write_script(tmp_path, "x := 1;\ny := x + z;\n")
    assert oko.main(["oko", path]) == 1
    err = capsys.readouterr().err
    assert err.startswith("UndefinedVariableException: Undefined variable 'z'")
    assert "on line 2" in err


def test_parse_error_is_reported(tmp_path, capsys):
    path = write_script(tmp_path, "x := ;\n")
    assert oko.main(["oko", path]) == 1
    assert capsys.readouterr().err.startswith("ParseException:")


def test_lex_error_is_reported(tmp_path, capsys):
    path = write_script(tmp_path, "x := 1 $ 2;\n")
    assert oko.main(["oko", path]) == 1
    assert capsys.readouterr().err.startswith("LexException:")


def test_output_before_error_is_kept(tmp_path, capsys):
    path = write_script(tmp_path, 'io::println("first");\nio::println(1 + 1.0);\n')
    assert oko.main(["oko", path]) == 1
    captured = capsys.readouterr()
    assert captured.out == "dbg out: first\n"
    assert "UnknownOpException" in captured.err


def test_recursion_limit_from_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("OKO_RECURSION_LIMIT", "1000")
    source = (
        "fun down(n) {\n"
        "    return down(n + 1);\n"
        "}\n"
        "down(0);\n"
    )
    path = write_script(tmp_path, source)
    assert oko.main(["oko", path]) == 1
    assert "StackOverflowException" in capsys.readouterr().err


def test_deeply_nested_source_is_reported(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("OKO_RECURSION_LIMIT", "1000")
    depth = 5000
    path = write_script(tmp_path, "x := " + "(" * depth + "1" + ")" * depth + ";\n")
    assert oko.main(["oko", path]) == 1
    assert capsys.readouterr().err.startswith(
        "ParseException: Maximum nesting depth exceeded while parsing"
    )


def test_recursion_limit_parsing(monkeypatch):
    monkeypatch.delenv("OKO_RECURSION_LIMIT", raising=False)
    assert oko.recursion_limit() == oko.DEFAULT_RECURSION_LIMIT
    monkeypatch.setenv("OKO_RECURSION_LIMIT", "5000")
    assert oko.recursion_limit() == 5000
    monkeypatch.setenv("OKO_RECURSION_LIMIT", "not a number")
    assert oko.recursion_limit() == oko.DEFAULT_RECURSION_LIMIT


def test_debug_mode_dumps_tree(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("OKODEBUG", "1")
    path = write_script(tmp_path, "x := 1;\n")
    try:
        assert oko.main(["oko", path]) == 0
    finally:
        package_logger = logging.getLogger("okolang")
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True
        for comp in COMPONENTS:
            logging.getLogger(f"okolang.{comp}").setLevel(logging.NOTSET)
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out
