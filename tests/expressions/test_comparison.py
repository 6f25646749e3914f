"""Tests for superbasic.expressions.comparison: predicate shortcuts."""

from superbasic.expressions import (
    SQL,
    And,
    Append,
    Between,
    Cast,
    Equals,
    Greater,
    GreaterOrEquals,
    ILike,
    If,
    In,
    IsNotNull,
    IsNull,
    Less,
    LessOrEquals,
    Like,
    Not,
    NotEquals,
    NotIn,
    Or,
)
from superbasic.statements import Select


def test_binary_comparisons():
    assert Equals("nr", 45).to_sql() == ("nr = ?", [45])
    assert NotEquals("nr", 45).to_sql() == ("nr <> ?", [45])
    assert Greater("nr", 45).to_sql() == ("nr > ?", [45])
    assert GreaterOrEquals("nr", 45).to_sql() == ("nr >= ?", [45])
    assert Less("nr", 45).to_sql() == ("nr < ?", [45])
    assert LessOrEquals("nr", 45).to_sql() == ("nr <= ?", [45])


def test_expression_left_operand():
    assert Equals(SQL("LOWER(name)"), "joe").to_sql() == ("LOWER(name) = ?", ["joe"])


def test_expression_right_operand_is_inlined():
    assert Equals("a.id", SQL("b.a_id")).to_sql() == ("a.id = b.a_id", [])


def test_like():
    assert Like("last", "B%").to_sql() == ("last LIKE ?", ["B%"])
    assert ILike("last", "b%").to_sql() == ("last ILIKE ?", ["b%"])


def test_in():
    assert In("last", "Bush", "Clinton").to_sql() == ("last IN (?, ?)", ["Bush", "Clinton"])
    assert NotIn("nr", 1, 2, 3).to_sql() == ("nr NOT IN (?, ?, ?)", [1, 2, 3])


def test_in_subquery():
    subquery = Select(columns="nr", table="presidents", where=Equals("last", "Bush"))
    assert In("nr", subquery).to_sql() == (
        "nr IN (SELECT nr FROM presidents WHERE last = ?)",
        ["Bush"],
    )


def test_between():
    assert Between("nr", 40, 45).to_sql() == ("nr BETWEEN ? AND ?", [40, 45])


def test_null_checks():
    assert IsNull("deleted_at").to_sql() == ("deleted_at IS NULL", [])
    assert IsNotNull("deleted_at").to_sql() == ("deleted_at IS NOT NULL", [])


def test_cast():
    assert Cast("45", "INTEGER").to_sql() == ("CAST(? AS INTEGER)", ["45"])


def test_not():
    assert Not(Equals("a", 1)).to_sql() == ("NOT (a = ?)", [1])


def test_and_or_skip_empty_parts():
    expr = And(Equals("a", 1), If(False, Equals("b", 2)), Or(Equals("c", 3), Equals("d", 4)))
    assert expr.to_sql() == ("a = ? AND c = ? OR d = ?", [1, 3, 4])


def test_query():
    search = And(
        SQL("last IN ?", ["Bush", "Clinton"]),
        SQL("NOT (nr > ?)", 42),
    )
    sort = "first"
    query = Append(
        SQL("SELECT nr, first, last FROM presidents"),
        SQL(" WHERE ?", search),
        If(sort != "", SQL(f" ORDER BY {sort}")),
    )
    sql, values = query.to_sql()
    assert sql == (
        "SELECT nr, first, last FROM presidents WHERE "
        "last IN (?, ?) AND NOT (nr > ?) ORDER BY first"
    )
    assert values == ["Bush", "Clinton", 42]
