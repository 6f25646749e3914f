"""Rewrite ``?`` placeholders into dialect-specific positional markers.

``??`` becomes a literal ``?`` and consumes no index; every live ``?``
becomes a token built from a 1-based running index.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, Union

from pydantic import BaseModel, Field as PydanticField

from .errors import NumberOfArgumentsError, SuperbasicError

Placeholder = Union[str, Callable[[int], str]]


class Rendered(BaseModel):
    """Final SQL for a driver and its values, or the error that prevented it."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    sql: str = ""
    values: tuple[Any, ...] = PydanticField(default_factory=tuple)
    error: SuperbasicError | None = None

    def unwrap(self) -> tuple[str, list[Any]]:
        """Return ``(sql, values)``, raising the error if rendering failed."""
        if self.error is not None:
            raise self.error
        return self.sql, list(self.values)


def qmark(index: int) -> str:  # pylint: disable=unused-argument
    """Placeholder formatter for drivers using plain ``?`` markers."""
    return "?"


def placeholder_formatter(placeholder: Placeholder) -> Callable[[int], str]:
    """Return a callable mapping a 1-based index to its placeholder token.

    ``placeholder`` may be a callable, a format with ``%d`` (``"$%d"``), a
    format with ``{}`` (``"@p{}"``) or a plain prefix (``"$"`` gives ``$1``).
    """
    if callable(placeholder):
        return placeholder
    if "%d" in placeholder:
        return lambda index: placeholder.replace("%d", str(index), 1)
    if "{}" in placeholder:
        return lambda index: placeholder.replace("{}", str(index), 1)
    return lambda index: f"{placeholder}{index}"


def split_placeholders(sql: str) -> tuple[str, ...]:
    """Split ``sql`` at live ``?`` placeholders, unescaping ``??`` in the literal text."""
    segments = [""]
    cursor = 0
    while True:
        found = sql.find("?", cursor)
        if found < 0:
            segments[-1] += sql[cursor:]
            return tuple(segments)
        segments[-1] += sql[cursor:found]
        if sql.startswith("??", found):
            segments[-1] += "?"
            cursor = found + 2
        else:
            segments.append("")
            cursor = found + 1


def render(segments: Sequence[str], values: Sequence[Any], placeholder: Placeholder) -> Rendered:
    """Join ``segments`` with numbered placeholder tokens; one value per placeholder."""
    formatter = placeholder_formatter(placeholder)
    parts = [segments[0]]
    for index, segment in enumerate(segments[1:], start=1):
        parts.append(formatter(index))
        parts.append(segment)

    sql = "".join(parts)
    placeholders = len(segments) - 1
    if placeholders != len(values):
        return Rendered(error=NumberOfArgumentsError(
            sql, placeholders=placeholders, arguments=len(values),
        ))
    return Rendered(sql=sql, values=tuple(values))


def to_positional(sql: str, values: Sequence[Any], placeholder: Placeholder) -> Rendered:
    """Replace every live ``?`` in ``sql``; their count must equal ``len(values)``."""
    return render(split_placeholders(sql), values, placeholder)
