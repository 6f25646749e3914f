"""MySQL dialect."""

from typing import ClassVar

from .base import Dialect


class MysqlDialect(Dialect):
    """Dialect for MySQL (scheme mysql); ``%s`` parameters as used by pymysql."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mysql", "mariadb")

    def format_placeholder(self, index: int) -> str:
        return "%s"
