"""SQL Server dialect."""

from typing import ClassVar

from .base import Dialect


class SqlserverDialect(Dialect):
    """Dialect for SQL Server (schemes mssql, sqlserver); qmark parameters as used by pyodbc."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mssql", "sqlserver")

    def format_placeholder(self, index: int) -> str:
        return "?"
