"""Base types for SQL expression trees."""

from __future__ import annotations
from typing import Any, Callable

from pydantic import BaseModel, Field as PydanticField

from ..errors import DDLError, SuperbasicError


class Compiled(BaseModel):
    """Result of compiling an expression: SQL segments, bound values, or an error.

    ``segments`` is the literal SQL between live placeholders, so there is
    always one more segment than placeholders. Literal text is stored
    unescaped, which keeps a placeholder next to a literal ``?`` (or next to
    another placeholder) unambiguous when fragments are concatenated.
    When ``error`` is set, there are no placeholders and no values.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    segments: tuple[str, ...] = ("",)
    values: tuple[Any, ...] = PydanticField(default_factory=tuple)
    error: SuperbasicError | None = None

    @property
    def sql(self) -> str:
        """Segments in placeholder syntax: ``?`` for placeholders, ``??`` for literal ``?``.

        Only meant for diagnostics; two adjacent placeholders read as an escape here.
        """
        return "?".join(segment.replace("?", "??") for segment in self.segments)

    @property
    def is_empty(self) -> bool:
        return self.segments == ("",)

    def prefixed(self, text: str) -> Compiled:
        """Same fragment with literal ``text`` in front."""
        return self.model_copy(update={"segments": (text + self.segments[0],) + self.segments[1:]})


class Expression(BaseModel):
    """Base type for everything that compiles to SQL plus bound values.

    Subclasses implement ``compile``. The terminal methods (``to_sql``,
    ``to_positional``, ``to_ddl``) run the compilation and raise on failure.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def compile(self) -> Compiled:
        """Compile to SQL segments and values; errors are returned, not raised."""
        raise NotImplementedError("Subclasses must implement `compile`")

    def to_sql(self) -> tuple[str, list[Any]]:
        """SQL with ``?`` placeholders and bound values."""
        from ..positional import qmark
        return self.to_positional(qmark)

    def to_positional(self, placeholder: str | Callable[[int], str]) -> tuple[str, list[Any]]:
        """SQL with numbered placeholders (e.g. ``"$%d"`` gives ``$1, $2, ...``)."""
        from ..positional import render
        compiled = self.compile()
        if compiled.error is not None:
            raise compiled.error
        return render(compiled.segments, compiled.values, placeholder).unwrap()

    def to_ddl(self) -> str:
        """SQL for a statement that must not carry bound values."""
        from ..positional import qmark, render
        compiled = self.compile()
        if compiled.error is not None:
            raise compiled.error
        if compiled.values:
            raise DDLError(compiled.sql, compiled.values)
        sql, _ = render(compiled.segments, (), qmark).unwrap()
        return sql

    @property
    def sql(self) -> str:
        """SQL with ``?`` placeholders."""
        return self.to_sql()[0]

    @property
    def values(self) -> tuple[Any, ...]:
        """Bound values for the placeholders in ``sql``, in order."""
        return tuple(self.to_sql()[1])

    def __and__(self, other: Any):
        from .template import SQL
        return SQL("(? AND ?)", self, other)

    def __or__(self, other: Any):
        from .template import SQL
        return SQL("(? OR ?)", self, other)

    def __invert__(self):
        from .comparison import Not
        return Not(self)
