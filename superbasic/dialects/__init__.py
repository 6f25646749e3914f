"""Placeholder dialects, looked up by database URL scheme.

Each dialect only decides how the n-th bound parameter is written for its
driver (``?``, ``%s``, ``$n``, ``:n``); ``Dialect.finalize`` turns a compiled
expression into the ``(sql, values)`` pair that driver expects.
"""

from .base import Dialect
from .sqlite import SqliteDialect
from .mysql import MysqlDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .sqlserver import SqlserverDialect

_DIALECTS_BY_SCHEME: dict[str, type[Dialect]] = {
    scheme: dialect_cls
    for dialect_cls in (SqliteDialect, MysqlDialect, PostgresDialect, SqlserverDialect, OracleDialect)
    for scheme in dialect_cls.SUPPORTED_SCHEMA
}


def get_dialect_for_scheme(scheme: str) -> Dialect:
    """Dialect for a URL scheme; a driver suffix is ignored (``postgresql+psycopg2`` is ``postgresql``)."""
    base_scheme = (scheme or "").partition("+")[0].lower()
    try:
        return _DIALECTS_BY_SCHEME[base_scheme]()
    except KeyError as error:
        raise ValueError(f"Unsupported database scheme: {scheme}") from error


__all__ = [
    "Dialect",
    "MysqlDialect",
    "OracleDialect",
    "PostgresDialect",
    "SqliteDialect",
    "SqlserverDialect",
    "get_dialect_for_scheme",
]
