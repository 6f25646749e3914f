"""SQLite dialect."""

from typing import ClassVar

from .base import Dialect


class SqliteDialect(Dialect):
    """Dialect for SQLite (scheme sqlite); qmark parameters."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    def format_placeholder(self, index: int) -> str:
        return "?"
