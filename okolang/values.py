"""Runtime values.

oko values map onto Python objects:

    Int     -> int (signed 64-bit range)
    Float   -> float
    String  -> str
    Bool    -> bool
    Array   -> tuple of values
    Nil     -> NIL
    Invalid -> INVALID (internal "no value produced" marker)

All values are immutable, so binding a value in another scope never lets
either side observe mutations made by the other.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from decimal import Decimal

from okolang.exceptions import RenderException


class _Marker:
    """
    Singleton value with no payload.
    """
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return self.name

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


NIL = _Marker("Nil")
INVALID = _Marker("Invalid")


def is_int(value) -> bool:
    """True for Int values (bool is excluded)."""
    return type(value) is int


def is_float(value) -> bool:
    return type(value) is float


def wrap_i64(value: int) -> int:
    """
    Reinterpret the low 64 bits of `value` as a two's complement integer.
    """
    value &= 0xFFFFFFFFFFFFFFFF
    return value - 2 ** 64 if value >= 2 ** 63 else value


def type_name(value) -> str:
    """
    Return the oko type name of `value`.
    """
    if value is NIL:
        return "Nil"
    if value is INVALID:
        return "Invalid"
    if isinstance(value, bool):
        return "Bool"
    if is_int(value):
        return "Int"
    if is_float(value):
        return "Float"
    if isinstance(value, str):
        return "String"
    if isinstance(value, tuple):
        return "Array"
    raise TypeError(f"Not an oko value: {value!r}")


def truthy(value) -> bool:
    """
    Map any value to a boolean for `if` and `while` conditions.
    """
    if value is NIL or value is INVALID:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (str, tuple)):
        return len(value) > 0
    return value != 0


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        text = str(int(value))
        return "-0" if text == "0" and math.copysign(1.0, value) < 0 else text
    return format(Decimal(repr(value)), "f")


def render(value) -> str:
    """
    Render a value as text.

    Arrays render every element followed by ", ", e.g. `[1, 2, ]`.

    Raises:
        RenderException: If `value` is the invalid marker.
    """
    if value is INVALID:
        raise RenderException()
    if value is NIL:
        return "Nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_float(value):
        return _render_float(value)
    if isinstance(value, tuple):
        return "[" + "".join(render(elem) + ", " for elem in value) + "]"
    return str(value)
