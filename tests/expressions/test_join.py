"""Tests for superbasic.expressions.join: Join, Append and empty elision."""

import pytest

from superbasic.errors import ExpressionError, NumberOfArgumentsError
from superbasic.expressions import SQL, Append, If, IfElse, Join


def test_join_skips_leading_empty_part():
    assert Join(", ", SQL(""), SQL("x")).to_sql() == ("x", [])


def test_join_skips_middle_and_trailing_empty_parts():
    expr = Join(", ", SQL("a"), If(False, SQL("b")), SQL("c"), SQL(""))
    assert expr.to_sql() == ("a, c", [])


def test_join_concatenates_values_in_order():
    expr = Join(" AND ", SQL("a = ?", 1), SQL("b = ?", 2))
    assert expr.to_sql() == ("a = ? AND b = ?", [1, 2])


def test_join_of_nothing_is_empty():
    assert Join(", ").to_sql() == ("", [])


def test_join_none_part_is_an_error():
    compiled = Join(" ", None).compile()
    assert isinstance(compiled.error, ExpressionError)
    assert str(compiled.error) == "superbasic error: expression at position '0' is nil"


def test_join_none_part_position():
    with pytest.raises(ExpressionError, match="position '2'"):
        Join(", ", SQL("a"), SQL("b"), None).to_sql()


def test_join_propagates_part_failure():
    with pytest.raises(NumberOfArgumentsError, match="2 placeholders and 1 argument in '\\? \\?'"):
        Join(", ", SQL(""), SQL("? ?", "hello")).to_positional("$%d")


def test_join_scalar_parts_are_bound():
    assert Join(", ", 1, 2).to_sql() == ("?, ?", [1, 2])


def test_join_inside_template():
    expr = SQL("?", Join(
        ", ",
        SQL("hello"),
        SQL("world"),
        IfElse(True, SQL("welcome"), SQL("moin")),
        IfElse(False, SQL("welcome"), SQL("moin")),
    ))
    assert expr.to_sql() == ("hello, world, welcome, moin", [])


def test_append():
    assert Append(SQL("a"), SQL(" b = ?", 1), If(False, SQL(" c"))).to_sql() == ("a b = ?", [1])


def test_append_adjacent_placeholders_stay_separate():
    assert Append(SQL("?", 1), SQL("?", 2)).to_sql() == ("??", [1, 2])
    assert Append(SQL("?", 1), SQL("?", 2)).to_positional("$%d") == ("$1$2", [1, 2])


def test_append_placeholder_then_escaped_question_mark():
    expr = Append(SQL("a = ?", 1), SQL("??"))
    assert expr.to_positional("$%d") == ("a = $1?", [1])


def test_join_escaped_question_mark_then_placeholder():
    expr = Join("", SQL("??"), SQL("?", 1))
    assert expr.to_positional("$%d") == ("?$1", [1])
