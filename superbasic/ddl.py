"""DDL helpers: CREATE TABLE and DROP TABLE.

DDL statements cannot carry bound values; use ``to_ddl()`` to get the final
SQL string, which fails with ``DDLError`` if any value slipped in.
"""

from __future__ import annotations

from pydantic import Field

from .expressions import SQL, Append, Compiled, Expression, If, Join


class Column(Expression):
    """Column definition: ``name TYPE CONSTRAINT ...``."""

    name: str
    type: str
    constraints: tuple[str, ...] = Field(default_factory=tuple)

    def compile(self) -> Compiled:
        return SQL(" ".join((self.name, self.type) + self.constraints)).compile()


class Table(Expression):
    """``CREATE TABLE [IF NOT EXISTS] name (columns..., constraints...)``."""

    name: str
    columns: tuple[Column, ...] = Field(default_factory=tuple)
    constraints: tuple[str, ...] = Field(default_factory=tuple)
    if_not_exists: bool = False

    def compile(self) -> Compiled:
        return Append(
            SQL("CREATE TABLE "),
            If(self.if_not_exists, SQL("IF NOT EXISTS ")),
            SQL(self.name),
            SQL(" (?)", Join(", ", *self.columns, *map(SQL, self.constraints))),
        ).compile()


class DropTable(Expression):
    """``DROP TABLE [IF EXISTS] name``."""

    name: str
    if_exists: bool = False

    def compile(self) -> Compiled:
        return Append(
            SQL("DROP TABLE "),
            If(self.if_exists, SQL("IF EXISTS ")),
            SQL(self.name),
        ).compile()
