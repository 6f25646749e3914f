"""Join expression: concatenate expressions with a separator."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ._bases import Compiled, Expression


class JoinExpression(Expression):
    """Parts joined with ``separator``.

    Parts compiling to the empty string are dropped together with their
    separator, so optional fragments (``If(False, ...)``) leave no trace.
    A ``None`` part fails with ``ExpressionError``.
    """

    separator: str = ""
    parts: tuple[Any, ...] = PydanticField(default_factory=tuple)

    def compile(self) -> Compiled:
        from ..compiler import join_compiled
        return join_compiled(self.separator, self.parts)


def Join(separator: str, *parts: Any) -> JoinExpression:  # pylint: disable=invalid-name
    """Join parts with a separator (e.g. ``Join(" AND ", a, b)``)."""
    return JoinExpression(separator=separator, parts=parts)


def Append(*parts: Any) -> JoinExpression:  # pylint: disable=invalid-name
    """Concatenate parts without a separator."""
    return JoinExpression(separator="", parts=parts)
