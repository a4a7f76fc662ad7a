"""Diagnostic codes and the Diagnostic record.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Numeric identifiers, grouped by thousand.

    1xxx: argument kinds disagree
    2xxx: a safety limit was hit
    3xxx: a message is well-formed but questionable
    """

    TYPE_CONFLICT = 1001
    SCHEMA_CONFLICTS = 1002

    MAX_DEPTH_EXCEEDED = 2001

    MISSING_OTHER_BRANCH = 3001
    DUPLICATE_BRANCH_KEY = 3002
    UNKNOWN_PLURAL_CATEGORY = 3003
    UNKNOWN_LOCALE = 3004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One finding, carrying enough context to render it for people or tools.

    Attributes:
        code: Which kind of finding this is
        message: One-sentence description
        hint: How to fix it, when there is an obvious fix
        help_url: Where the relevant ICU syntax is documented
        argument_name: Argument the finding is about
        expected_type: Kind recorded first for that argument
        received_type: Kind that disagreed with it
        severity: "error" blocks, "warning" informs
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Multi-line compiler-style rendering (see DiagnosticFormatter)."""
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
