"""Exception hierarchy for superbasic.

All errors inherit from ``SuperbasicError``. The compiler never raises them:
they travel as data on ``Compiled.error`` and are only raised by the terminal
methods (``to_sql``, ``to_positional``, ``to_ddl``, ``Dialect.finalize``).
"""

from __future__ import annotations

from typing import Any


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class SuperbasicError(Exception):
    """Base exception for all superbasic errors."""

    def __init__(self, message: str) -> None:
        super().__init__(f"superbasic error: {message}")


class NumberOfArgumentsError(SuperbasicError):
    """The number of live placeholders does not match the number of arguments.

    Args:
        sql: The SQL built up to the point of failure, for diagnostics.
        placeholders: Number of live ``?`` placeholders.
        arguments: Number of arguments supplied.
    """

    def __init__(self, sql: str, placeholders: int, arguments: int) -> None:
        super().__init__(
            f"{_plural(placeholders, 'placeholder')} and "
            f"{_plural(arguments, 'argument')} in '{sql}'"
        )
        self.sql = sql
        self.placeholders = placeholders
        self.arguments = arguments


class ExpressionError(SuperbasicError):
    """An argument slot that must hold an expression is ``None``."""

    def __init__(self, position: int) -> None:
        super().__init__(f"expression at position '{position}' is nil")
        self.position = position


class DDLError(SuperbasicError):
    """A DDL statement still carries bound values after compilation."""

    def __init__(self, sql: str, values: tuple[Any, ...]) -> None:
        super().__init__(
            f"DDL statement cannot have bound values, got {len(values)} in '{sql}'"
        )
        self.sql = sql
        self.values = values
