"""Tests for superbasic.ddl: Table, Column, DropTable and to_ddl."""

import pytest

from superbasic import SQL, DDLError
from superbasic.ddl import Column, DropTable, Table


def test_create_table():
    table = Table(
        name="presidents",
        columns=[
            Column(name="nr", type="INTEGER", constraints=["PRIMARY KEY"]),
            Column(name="first", type="TEXT", constraints=["NOT NULL"]),
            Column(name="last", type="TEXT"),
        ],
        constraints=["UNIQUE (first, last)"],
        if_not_exists=True,
    )
    assert table.to_ddl() == (
        "CREATE TABLE IF NOT EXISTS presidents "
        "(nr INTEGER PRIMARY KEY, first TEXT NOT NULL, last TEXT, UNIQUE (first, last))"
    )


def test_create_table_plain():
    table = Table(name="t", columns=[Column(name="a", type="INT")])
    assert table.to_ddl() == "CREATE TABLE t (a INT)"


def test_drop_table():
    assert DropTable(name="presidents").to_ddl() == "DROP TABLE presidents"
    assert DropTable(name="presidents", if_exists=True).to_ddl() == "DROP TABLE IF EXISTS presidents"


def test_to_ddl_rejects_bound_values():
    with pytest.raises(DDLError, match="cannot have bound values"):
        SQL("CREATE TABLE t (a INT DEFAULT ?)", 1).to_ddl()


def test_to_ddl_collapses_escapes():
    assert SQL("COMMENT ON TABLE t IS 'why??'").to_ddl() == "COMMENT ON TABLE t IS 'why?'"
