"""Tests for superbasic.dialects.oracle: numbered colon placeholders."""

from superbasic import Between
from superbasic.dialects import OracleDialect


def test_oracle_finalize():
    assert OracleDialect().finalize(Between("nr", 40, 45)) == ("nr BETWEEN :1 AND :2", [40, 45])
