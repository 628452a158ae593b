"""Operator definitions and semantics.

This module centralizes the operator identifiers shared by the lexer, the
parser and the interpreter, together with the rules for applying them.
Typing is strict: there is no implicit conversion between Int and Float,
and any operand combination not listed for an operator is an error. A Nil
operand on either side of a binary operator yields Nil before any type check.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from enum import Enum

from okolang.exceptions import EvalException, UnknownOpException
from okolang.values import INVALID, NIL, is_float, is_int, wrap_i64

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


class Op(str, Enum):
    """
    Enumeration of operator texts.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Boolean
    AND = "&&"
    OR = "||"
    NOT = "!"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


_DETAIL = {
    Op.ADD: "addition of divergent types",
    Op.SUB: "subtraction of divergent types",
    Op.MUL: "multiplication of divergent types",
    Op.DIV: "division of divergent types",
    Op.MOD: "modulo of divergent types",
    Op.POW: "exponentiation of divergent types",
    Op.EQ: "comparison of divergent types",
    Op.NE: "comparison of divergent types",
    Op.GT: "comparison of divergent types",
    Op.LT: "comparison of divergent types",
    Op.GE: "comparison of divergent types",
    Op.LE: "comparison of divergent types",
    Op.AND: "boolean and of non-boolean types",
    Op.OR: "boolean or of non-boolean types",
}

_COMPARISONS = {
    Op.EQ: lambda x, y: x == y,
    Op.NE: lambda x, y: x != y,
    Op.GT: lambda x, y: x > y,
    Op.LT: lambda x, y: x < y,
    Op.GE: lambda x, y: x >= y,
    Op.LE: lambda x, y: x <= y,
}


def _checked(value: int, op) -> int:
    """
    Fail if an integer result left the signed 64-bit range.
    """
    if not I64_MIN <= value <= I64_MAX:
        raise EvalException(f"Integer overflow in '{op}'")
    return value


def _int_div(x: int, y: int, op) -> int:
    """
    Integer division truncating toward zero.
    """
    if y == 0:
        raise EvalException(f"Integer division by zero in '{op}'")
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def _int_pow(x: int, exponent: int) -> int:
    """
    Integer power with the exponent truncated to an unsigned 32-bit value.
    """
    exponent = wrap_i64(exponent) & 0xFFFFFFFF
    if x in (0, 1) or exponent == 0:
        return x ** exponent
    if x == -1:
        return -1 if exponent % 2 else 1
    if exponent >= 64:
        raise EvalException(f"Integer overflow in '{Op.POW}'")
    return _checked(x ** exponent, Op.POW)


def _float_div(x: float, y: float) -> float:
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def _float_mod(x: float, y: float) -> float:
    if y == 0.0 or math.isinf(x):
        return math.nan
    return math.fmod(x, y)


def _float_pow(x: float, y: float) -> float:
    if x == 0.0 and y < 0.0:
        odd = y.is_integer() and y % 2 == 1
        return math.copysign(math.inf, x) if odd else math.inf
    try:
        return math.pow(x, y)
    except OverflowError:
        return math.inf if x > 0 or y % 2 != 1 else -math.inf
    except ValueError:
        return math.nan


def apply_binary_op(lhs, rhs, op):
    """
    Apply binary operator `op` to two evaluated operands.

    Parameters:
        lhs: The left operand value.
        rhs: The right operand value.
        op (Op | str): The operator text.

    Returns:
        The resulting value; Nil if either operand is Nil; the invalid marker
        for operator texts outside the table.

    Raises:
        UnknownOpException: If the operand types are unsupported for `op`.
        EvalException: On integer overflow or integer division by zero.
    """
    if lhs is NIL or rhs is NIL:
        return NIL

    try:
        op = Op(op)
    except ValueError:
        return INVALID

    both_int = is_int(lhs) and is_int(rhs)
    both_float = is_float(lhs) and is_float(rhs)

    match op:
        case Op.ADD:
            if both_int:
                return _checked(lhs + rhs, op)
            if both_float:
                return lhs + rhs
            if isinstance(lhs, str) and isinstance(rhs, str):
                return lhs + rhs
        case Op.SUB:
            if both_int:
                return _checked(lhs - rhs, op)
            if both_float:
                return lhs - rhs
        case Op.MUL:
            if both_int:
                return _checked(lhs * rhs, op)
            if both_float:
                return lhs * rhs
        case Op.DIV:
            if both_int:
                return _checked(_int_div(lhs, rhs, op), op)
            if both_float:
                return _float_div(lhs, rhs)
        case Op.MOD:
            if both_int:
                return lhs - rhs * _int_div(lhs, rhs, op)
            if both_float:
                return _float_mod(lhs, rhs)
        case Op.POW:
            if both_int:
                return _int_pow(lhs, rhs)
            if both_float:
                return _float_pow(lhs, rhs)
        case Op.EQ | Op.NE | Op.GT | Op.LT | Op.GE | Op.LE:
            if both_int or both_float:
                return _COMPARISONS[op](lhs, rhs)
        case Op.AND:
            if isinstance(lhs, bool) and isinstance(rhs, bool):
                return lhs and rhs
        case Op.OR:
            if isinstance(lhs, bool) and isinstance(rhs, bool):
                return lhs or rhs
        case Op.NOT:
            return INVALID

    raise UnknownOpException(op, _DETAIL[op])


def apply_unary_op(operand, op):
    """
    Apply unary `!` (Bool only) or `-` (Int or Float only).

    Raises:
        UnknownOpException: If the operand type is unsupported for `op`.
    """
    if op == Op.NOT and isinstance(operand, bool):
        return not operand
    if op == Op.SUB and is_int(operand):
        return _checked(-operand, op)
    if op == Op.SUB and is_float(operand):
        return -operand
    raise UnknownOpException(op, f"unary operator {op} on given type")

