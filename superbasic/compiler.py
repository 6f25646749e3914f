"""Placeholder resolution: turn a template and its arguments into SQL and values.

A template is scanned left to right. Each live ``?`` takes the next argument,
which is resolved recursively:

- ``None`` is an error (``ExpressionError``);
- an ``Expression`` is compiled and its SQL spliced in;
- a list or tuple of expressions is compiled and joined with ``", "``;
- any other list or tuple becomes a parenthesized tuple ``(?, ?, ...)``;
- anything else is a scalar, rendered ``?`` and bound as one value.

``??`` is an escaped ``?``: it becomes literal text and consumes no
argument. Placeholders are kept apart from literal text (see
``Compiled.segments``) until the positional rewriter renders them. Nothing
here raises; failures are returned on ``Compiled.error``.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .errors import ExpressionError, NumberOfArgumentsError
from .expressions._bases import Compiled, Expression
from .positional import split_placeholders

SEQUENCE_SEPARATOR = ", "


class _Buffer:
    """Accumulates literal text, fragments and their values."""

    def __init__(self) -> None:
        self.segments = [""]
        self.values: list[Any] = []

    def write(self, text: str) -> None:
        self.segments[-1] += text

    def extend(self, compiled: Compiled) -> None:
        self.segments[-1] += compiled.segments[0]
        self.segments.extend(compiled.segments[1:])
        self.values.extend(compiled.values)

    def build(self) -> Compiled:
        return Compiled(segments=tuple(self.segments), values=tuple(self.values))


def count_placeholders(sql: str) -> int:
    """Number of live ``?`` placeholders in ``sql`` (escaped ``??`` excluded)."""
    return len(split_placeholders(sql)) - 1


def compile_template(template: str, arguments: Sequence[Any]) -> Compiled:
    """Resolve every placeholder in ``template`` against ``arguments``."""
    buffer = _Buffer()
    position = 0
    cursor = 0

    while True:
        index = template.find("?", cursor)
        if index < 0:
            buffer.write(template[cursor:])
            break

        buffer.write(template[cursor:index])

        if template.startswith("??", index):
            buffer.write("?")
            cursor = index + 2
            continue

        if position >= len(arguments):
            return Compiled(error=NumberOfArgumentsError(
                buffer.build().sql + template[index:],
                placeholders=position + count_placeholders(template[index:]),
                arguments=len(arguments),
            ))

        fragment = resolve_argument(arguments[position], position)
        if fragment.error is not None:
            return fragment

        buffer.extend(fragment)
        position += 1
        cursor = index + 1

    if position != len(arguments):
        return Compiled(error=NumberOfArgumentsError(
            buffer.build().sql, placeholders=position, arguments=len(arguments),
        ))
    return buffer.build()


def resolve_argument(argument: Any, position: int) -> Compiled:
    """Resolve one argument to its SQL fragment and bound values."""
    if argument is None:
        return Compiled(error=ExpressionError(position))
    if isinstance(argument, Expression):
        return argument.compile()
    if isinstance(argument, (list, tuple)):
        if all(isinstance(item, Expression) for item in argument):
            return join_compiled(SEQUENCE_SEPARATOR, argument)
        return _resolve_tuple(argument)
    return Compiled(segments=("", ""), values=(argument,))


def join_compiled(separator: str, parts: Iterable[Any]) -> Compiled:
    """Resolve ``parts`` and join the non-empty fragments with ``separator``."""
    buffer = _Buffer()
    first = True
    for position, part in enumerate(parts):
        compiled = resolve_argument(part, position)
        if compiled.error is not None:
            return compiled
        if compiled.is_empty:
            continue
        if not first:
            buffer.write(separator)
        buffer.extend(compiled)
        first = False
    return buffer.build()


def _resolve_tuple(items: Sequence[Any]) -> Compiled:
    """Render a sequence of values as ``(?, ?, ...)``; expression items are inlined."""
    if not items:
        return Compiled()
    buffer = _Buffer()
    buffer.write("(")
    for position, item in enumerate(items):
        compiled = resolve_argument(item, position)
        if compiled.error is not None:
            return compiled
        if position:
            buffer.write(SEQUENCE_SEPARATOR)
        buffer.extend(compiled)
    buffer.write(")")
    return buffer.build()
