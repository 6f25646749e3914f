"""SQL expression types and factories.

Expressions are immutable trees. ``SQL("a = ?", 1)`` wraps a template with
its arguments; ``Join``, ``Append``, ``If`` and ``IfElse`` combine them. No
SQL is produced until ``compile()`` (or ``to_sql()``) is called, which
returns the SQL text with ``?`` placeholders and the bound values in the same
order.
"""

from ._bases import Compiled, Expression
from .comparison import (
    And,
    Between,
    Cast,
    Equals,
    Greater,
    GreaterOrEquals,
    ILike,
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
from .conditional import If, IfElse
from .join import Append, Join, JoinExpression
from .template import EMPTY, SQL, TemplateExpression
from .values import NULL, Idents, Value, Values

__all__ = [
    "EMPTY",
    "NULL",
    "SQL",
    "And",
    "Append",
    "Between",
    "Cast",
    "Compiled",
    "Equals",
    "Expression",
    "Greater",
    "GreaterOrEquals",
    "ILike",
    "Idents",
    "If",
    "IfElse",
    "In",
    "IsNotNull",
    "IsNull",
    "Join",
    "JoinExpression",
    "Less",
    "LessOrEquals",
    "Like",
    "Not",
    "NotEquals",
    "NotIn",
    "Or",
    "TemplateExpression",
    "Value",
    "Values",
]
