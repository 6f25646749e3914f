"""Base Dialect type: subclasses name the placeholder style of one engine."""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel

from superbasic.expressions import Expression

logger = logging.getLogger(__name__)


class Dialect(BaseModel, ABC):
    """Base for database dialects; subclasses implement format_placeholder()."""

    model_config = {"frozen": True}

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """URL schemes this dialect handles (e.g. ('sqlite',), ('mssql', 'sqlserver'))."""

    @abstractmethod
    def format_placeholder(self, index: int) -> str:
        """Return the driver placeholder for the 1-based parameter ``index``."""
        ...  # pylint: disable=unnecessary-ellipsis

    def finalize(self, expression: Expression) -> tuple[str, list[Any]]:
        """Compile ``expression`` into SQL and values ready for this engine's driver."""
        sql, values = expression.to_positional(self.format_placeholder)
        logger.debug("%s %r", sql, values)
        return sql, values
