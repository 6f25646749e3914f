"""Statement builders: SELECT, INSERT, UPDATE and DELETE over the expression core.

Each builder is an ``Expression`` whose ``compile`` assembles ``SQL`` and
``Append`` calls. ``str`` fields are raw SQL (table and column names); other
fields are resolved like template arguments. Optional clauses whose body
compiles to the empty string are left out entirely.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import Field

from .compiler import resolve_argument
from .expressions import (
    EMPTY,
    NULL,
    SQL,
    Append,
    Compiled,
    Equals,
    Expression,
    Idents,
    If,
    Join,
    Values,
)


def _raw(value: Any) -> Any:
    """Raw SQL for a name or list of names; anything else is passed through."""
    if isinstance(value, str):
        return SQL(value)
    if isinstance(value, (list, tuple)) and value and all(isinstance(v, str) for v in value):
        return Idents(*value)
    return value


class _Clause(Expression):
    """``keyword`` followed by ``body``, or nothing when ``body`` is empty."""

    keyword: str
    body: Any

    def compile(self) -> Compiled:
        compiled = resolve_argument(self.body, 0)
        if compiled.error is not None or compiled.is_empty:
            return compiled
        return compiled.prefixed(self.keyword)


def _nullable(value: Any) -> Any:
    return NULL if value is None else value


def _clause(keyword: str, body: Any) -> Expression:
    if body is None:
        return EMPTY
    return _Clause(keyword=keyword, body=_raw(body))


class Select(Expression):
    """``SELECT columns FROM table ...``; ``columns`` defaults to ``*``."""

    table: Any
    columns: Any = None
    joins: tuple[Any, ...] = Field(default_factory=tuple)
    where: Any = None
    group_by: Any = None
    having: Any = None
    order_by: Any = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def compile(self) -> Compiled:
        columns = _raw(self.columns) if self.columns else SQL("*")
        return Append(
            SQL("SELECT ?", columns),
            SQL(" FROM ?", _raw(self.table)),
            *(_clause(" ", join) for join in self.joins),
            _clause(" WHERE ", self.where),
            _clause(" GROUP BY ", self.group_by),
            _clause(" HAVING ", self.having),
            _clause(" ORDER BY ", self.order_by),
            If(self.limit is not None, SQL(f" LIMIT {self.limit}")),
            If(self.offset is not None, SQL(f" OFFSET {self.offset}")),
        ).compile()


class Insert(Expression):
    """``INSERT INTO into (columns) VALUES (...), (...)``.

    Each row of ``data`` is either a sequence of values or an expression
    (e.g. ``Values(...)``) rendered as is. ``None`` in a row inserts ``NULL``.
    """

    into: str
    columns: tuple[str, ...] = Field(default_factory=tuple)
    data: tuple[Any, ...] = Field(default_factory=tuple)

    def compile(self) -> Compiled:
        rows = (
            row if isinstance(row, Expression) or row is None else Values(*map(_nullable, row))
            for row in self.data
        )
        return Append(
            SQL(f"INSERT INTO {self.into}"),
            If(bool(self.columns), SQL(" (?)", Idents(*self.columns))),
            SQL(" VALUES ?", Join(", ", *rows)),
        ).compile()


class Update(Expression):
    """``UPDATE table SET ... [WHERE ...]``.

    ``sets`` is a mapping of column name to value (``None`` sets ``NULL``),
    a sequence of assignment expressions (e.g. ``SQL("count = count + 1")``)
    or a single raw SQL assignment string.
    """

    table: str
    sets: Any
    where: Any = None

    def compile(self) -> Compiled:
        if isinstance(self.sets, Mapping):
            sets = Join(", ", *(Equals(column, _nullable(value)) for column, value in self.sets.items()))
        elif isinstance(self.sets, str):
            sets = SQL(self.sets)
        else:
            sets = Join(", ", *self.sets)
        return Append(
            SQL(f"UPDATE {self.table} SET ?", sets),
            _clause(" WHERE ", self.where),
        ).compile()


class Delete(Expression):
    """``DELETE FROM table [WHERE ...]``."""

    table: str
    where: Any = None

    def compile(self) -> Compiled:
        return Append(
            SQL(f"DELETE FROM {self.table}"),
            _clause(" WHERE ", self.where),
        ).compile()
