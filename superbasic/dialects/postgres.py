"""PostgreSQL dialect."""

from typing import ClassVar

from .base import Dialect


class PostgresDialect(Dialect):
    """Dialect for PostgreSQL (schemes postgresql, postgres); ``$1, $2, ...`` parameters."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("postgresql", "postgres")

    def format_placeholder(self, index: int) -> str:
        return f"${index}"
