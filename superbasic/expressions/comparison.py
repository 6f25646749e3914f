"""Comparison and predicate shortcuts over ``SQL`` templates.

A ``str`` left operand is raw SQL (usually a column name); any other left
operand is resolved like a template argument. Right operands are always
arguments, so scalars are bound and expressions are inlined.
"""

# pylint: disable=invalid-name

from typing import Any

from ._bases import Expression
from .join import Join, JoinExpression
from .template import SQL, TemplateExpression
from .values import Values


def _operand(ident: Any) -> Any:
    if isinstance(ident, str):
        return SQL(ident)
    return ident


def _compare(symbol: str, ident: Any, value: Any) -> TemplateExpression:
    return SQL(f"? {symbol} ?", _operand(ident), value)


def Equals(ident: Any, value: Any) -> TemplateExpression:
    """``ident = ?``"""
    return _compare("=", ident, value)


def NotEquals(ident: Any, value: Any) -> TemplateExpression:
    """``ident <> ?``"""
    return _compare("<>", ident, value)


def Greater(ident: Any, value: Any) -> TemplateExpression:
    """``ident > ?``"""
    return _compare(">", ident, value)


def GreaterOrEquals(ident: Any, value: Any) -> TemplateExpression:
    """``ident >= ?``"""
    return _compare(">=", ident, value)


def Less(ident: Any, value: Any) -> TemplateExpression:
    """``ident < ?``"""
    return _compare("<", ident, value)


def LessOrEquals(ident: Any, value: Any) -> TemplateExpression:
    """``ident <= ?``"""
    return _compare("<=", ident, value)


def Like(ident: Any, pattern: Any) -> TemplateExpression:
    return _compare("LIKE", ident, pattern)


def ILike(ident: Any, pattern: Any) -> TemplateExpression:
    return _compare("ILIKE", ident, pattern)


def In(ident: Any, *values: Any) -> TemplateExpression:
    """``ident IN (?, ?, ...)``; a single subquery expression gives ``ident IN (SELECT ...)``."""
    return SQL("? IN ?", _operand(ident), Values(*values))


def NotIn(ident: Any, *values: Any) -> TemplateExpression:
    return SQL("? NOT IN ?", _operand(ident), Values(*values))


def Between(ident: Any, low: Any, high: Any) -> TemplateExpression:
    """``ident BETWEEN ? AND ?`` (inclusive)."""
    return SQL("? BETWEEN ? AND ?", _operand(ident), low, high)


def IsNull(ident: Any) -> TemplateExpression:
    return SQL("? IS NULL", _operand(ident))


def IsNotNull(ident: Any) -> TemplateExpression:
    return SQL("? IS NOT NULL", _operand(ident))


def Cast(value: Any, type_: str) -> TemplateExpression:
    """``CAST(? AS type_)``; ``type_`` is raw SQL."""
    return SQL(f"CAST(? AS {type_})", value)


def Not(expression: Expression) -> TemplateExpression:
    return SQL("NOT (?)", expression)


def And(*expressions: Any) -> JoinExpression:
    """Expressions joined with ``AND``; empty ones are skipped."""
    return Join(" AND ", *expressions)


def Or(*expressions: Any) -> JoinExpression:
    """Expressions joined with ``OR``; empty ones are skipped."""
    return Join(" OR ", *expressions)
