"""superbasic: compose parameterized SQL from small typed fragments."""

from .errors import DDLError, ExpressionError, NumberOfArgumentsError, SuperbasicError
from .expressions import (
    EMPTY,
    NULL,
    SQL,
    And,
    Append,
    Between,
    Cast,
    Compiled,
    Equals,
    Expression,
    Greater,
    GreaterOrEquals,
    ILike,
    Idents,
    If,
    IfElse,
    In,
    IsNotNull,
    IsNull,
    Join,
    Less,
    LessOrEquals,
    Like,
    Not,
    NotEquals,
    NotIn,
    Or,
    Value,
    Values,
)
from .compiler import compile_template
from .positional import to_positional
from .statements import Delete, Insert, Select, Update
from .builder import Build, Builder
from .ddl import Column, DropTable, Table
from .dialects import get_dialect_for_scheme
