"""Value, tuple and identifier list expressions."""

from typing import Any

from .template import SQL, TemplateExpression


def Value(value: Any) -> TemplateExpression:  # pylint: disable=invalid-name
    """A single bound value: ``?``."""
    return SQL("?", value)


def Values(*values: Any) -> TemplateExpression:  # pylint: disable=invalid-name
    """A parenthesized tuple ``(?, ?, ...)``; expression items are inlined."""
    return SQL("(" + ", ".join("?" * len(values)) + ")", *values)


def Idents(*idents: str) -> TemplateExpression:  # pylint: disable=invalid-name
    """Identifiers joined with ``", "``, no bound values."""
    return SQL(", ".join(idents))


NULL = SQL("NULL")
"""Literal SQL ``NULL``; ``None`` is never accepted as an argument."""
