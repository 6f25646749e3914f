"""Fluent builder appending expressions one call at a time."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from .expressions import SQL, Append, Compiled, Expression, If, IfElse, Join


class Builder(Expression):
    """Immutable chain of parts compiled with ``Append``.

    Every method returns a new builder, so a partially built query can be
    reused as the base of several variants::

        base = Build().text("SELECT * FROM presidents")
        query = base.if_(last is not None, SQL(" WHERE last = ?", last))
    """

    parts: tuple[Any, ...] = PydanticField(default_factory=tuple)

    def _with(self, part: Any) -> Builder:
        return Builder(parts=self.parts + (part,))

    def text(self, template: str, *arguments: Any) -> Builder:
        """Append ``SQL(template, *arguments)``."""
        return self._with(SQL(template, *arguments))

    def if_(self, condition: bool, then: Any) -> Builder:
        return self._with(If(condition, then))

    def if_else(self, condition: bool, then: Any, else_: Any) -> Builder:
        return self._with(IfElse(condition, then, else_))

    def join(self, separator: str, *parts: Any) -> Builder:
        return self._with(Join(separator, *parts))

    def append(self, *parts: Any) -> Builder:
        return self._with(Append(*parts))

    def compile(self) -> Compiled:
        return Append(*self.parts).compile()


def Build() -> Builder:  # pylint: disable=invalid-name
    """Start an empty builder."""
    return Builder()
