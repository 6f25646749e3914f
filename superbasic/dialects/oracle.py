"""Oracle dialect."""

from typing import ClassVar

from .base import Dialect


class OracleDialect(Dialect):
    """Dialect for Oracle (scheme oracle); ``:1, :2, ...`` parameters."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("oracle",)

    def format_placeholder(self, index: int) -> str:
        return f":{index}"
