"""Enumerations for icuschema type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ArgumentKind(StrEnum):
    """Value classification of an ICU message argument.

    StrEnum provides automatic string conversion: str(ArgumentKind.NUMBER) == "number"
    """

    TEXT = "text"
    """No format: {name}"""

    NUMBER = "number"
    """Numeric format: {n, number}, {n, number, ::percent}"""

    DATETIME = "datetime"
    """Date or time format: {d, date, medium}, {t, time, short}"""

    PLURAL = "plural"
    """Plural or selectordinal argument: {n, plural, one {...} other {...}}"""

    SELECT = "select"
    """Select argument: {g, select, male {...} other {...}}"""


class ComplexFormat(StrEnum):
    """Argument formats carrying keyed sub-message branches.

    StrEnum provides automatic string conversion: str(ComplexFormat.PLURAL) == "plural"
    """

    PLURAL = "plural"
    """Cardinal plural: {n, plural, one {# item} other {# items}}"""

    SELECTORDINAL = "selectordinal"
    """Ordinal plural: {n, selectordinal, one {#st} two {#nd} other {#th}}"""

    SELECT = "select"
    """Keyword selection: {g, select, male {He} other {They}}"""


class ConflictOrigin(StrEnum):
    """Where a value-kind conflict was detected.

    StrEnum provides automatic string conversion: str(ConflictOrigin.MERGE) == "merge"
    """

    NESTED = "nested"
    """Same name used with incompatible kinds inside one template."""

    MERGE = "merge"
    """Same name used with incompatible kinds across merged templates."""


__all__ = [
    "ArgumentKind",
    "ComplexFormat",
    "ConflictOrigin",
]
