"""Conditional expressions.

A branch may be an expression, a ``str`` (raw SQL, as in the comparison
helpers and statement builders) or any other value, which is bound.
"""

from typing import Any

from ._bases import Expression
from .template import EMPTY, SQL


def _as_expression(value: Any) -> Expression:
    if isinstance(value, Expression):
        return value
    if isinstance(value, str):
        return SQL(value)
    return SQL("?", value)


def If(condition: bool, then: Any) -> Expression:  # pylint: disable=invalid-name
    """``then`` when ``condition`` holds, else the empty expression."""
    if condition:
        return _as_expression(then)
    return EMPTY


def IfElse(condition: bool, then: Any, else_: Any) -> Expression:  # pylint: disable=invalid-name
    """``then`` when ``condition`` holds, else ``else_``."""
    return _as_expression(then if condition else else_)
