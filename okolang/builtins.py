"""Built-in module members.

Module members are resolved by `(module, member)` at call time; `import`
statements have no effect. Each intrinsic receives the evaluated argument
values and returns a value (the invalid marker for side-effect-only calls).


File: builtins.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from okolang.exceptions import EvalException
from okolang.values import INVALID, render

PRINTLN_PREFIX = "dbg out: "


def io_println(args: list):
    """
    Write the rendered argument to standard output.
    """
    if len(args) != 1:
        raise EvalException(
            f"io::println expects exactly one argument, got {len(args)}"
        )
    print(f"{PRINTLN_PREFIX}{render(args[0])}")
    return INVALID


INTRINSICS = {
    ("io", "println"): io_println,
}


def lookup(module: str, member: str):
    """
    Return the intrinsic for `module::member`, or None.
    """
    return INTRINSICS.get((module, member))
