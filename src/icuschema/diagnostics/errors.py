"""Exceptions raised by icuschema.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic
from .templates import ErrorTemplate

if TYPE_CHECKING:
    from icuschema.schema.types import TypeConflict

__all__ = ["ICUSchemaError", "SchemaConflictError"]


class ICUSchemaError(Exception):
    """Root of the icuschema exception tree.

    Built from a plain string or from a Diagnostic; in the second case the
    string form is the rendered diagnostic and the Diagnostic itself is kept
    on the `diagnostic` attribute (None otherwise).
    """

    def __init__(self, message: str | Diagnostic) -> None:
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class SchemaConflictError(ICUSchemaError):
    """Merged schemas use the same argument name with incompatible kinds.

    Raised by merge_schemas() in strict mode. The caller decides what to do
    with the conflicts (widen to a union, pick one, or reject the set).

    Attributes:
        conflicts: Every conflict found, in detection order
    """

    def __init__(self, conflicts: tuple[TypeConflict, ...]) -> None:
        """Initialize SchemaConflictError.

        Args:
            conflicts: Conflicts detected while merging (non-empty)
        """
        names = dict.fromkeys(conflict.name for conflict in conflicts)
        super().__init__(ErrorTemplate.schema_conflicts(names))
        self.conflicts = conflicts
