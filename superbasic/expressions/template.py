"""Raw SQL template expression."""

from __future__ import annotations
from typing import Any

from pydantic import Field as PydanticField

from ..errors import SuperbasicError
from ._bases import Compiled, Expression


class TemplateExpression(Expression):
    """SQL text with ``?`` placeholders and one argument per placeholder.

    Arguments are kept verbatim and only resolved by ``compile``. A set
    ``error`` is sticky: compiling returns it without scanning the template.
    """

    template: str = ""
    arguments: tuple[Any, ...] = PydanticField(default_factory=tuple)
    error: SuperbasicError | None = None

    def compile(self) -> Compiled:
        if self.error is not None:
            return Compiled(error=self.error)
        from ..compiler import compile_template
        return compile_template(self.template, self.arguments)


def SQL(template: str, *arguments: Any) -> TemplateExpression:  # pylint: disable=invalid-name
    """Build an expression from a template; use ``??`` for a literal ``?``."""
    return TemplateExpression(template=template, arguments=arguments)


EMPTY = TemplateExpression()
"""Expression compiling to the empty string; elided by ``Join``."""
