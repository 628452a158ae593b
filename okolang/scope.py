"""Evaluation scope.

A scope holds the variables and functions visible to one evaluation frame
(the program, a function call, or one `for` iteration) plus the return
signalling for that frame. New frames start from a full copy of the
caller's scope: callees see everything the caller sees, but nothing they
bind or rebind flows back.


File: scope.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field

from okolang.nodes import StatementSequence
from okolang.values import INVALID


@dataclass(frozen=True)
class FunctionRecord:
    """A declared function; `body` is shared with the declaring node."""
    params: tuple[str, ...]
    body: StatementSequence


@dataclass
class Scope:
    vars: dict = field(default_factory=dict)
    funs: dict = field(default_factory=dict)
    return_value: object = INVALID
    return_flag: bool = False

    def copy(self) -> "Scope":
        """
        Duplicate this scope for a new frame.

        Values are immutable, so copying the two maps is a full value copy.
        Function bodies stay shared.
        """
        return Scope(
            vars=dict(self.vars),
            funs=dict(self.funs),
            return_value=self.return_value,
            return_flag=self.return_flag,
        )
