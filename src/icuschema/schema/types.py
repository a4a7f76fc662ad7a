"""Schema value types for ICU message arguments.

Complete data model of an extracted message schema:
- Literal keys of select branches (string, numeric, boolean)
- Value kinds (closed union: text, number, date/time, plural, select enum)
- Arguments, type conflicts and the Schema itself

All types are frozen dataclasses with slots; values are created during one
parse pass and never mutated afterward. Type guards are static methods so
consumers can narrow a ValueKind without isinstance chains.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, ClassVar, TypeIs

from icuschema.diagnostics.codes import Diagnostic
from icuschema.diagnostics.templates import ErrorTemplate
from icuschema.enums import ArgumentKind, ConflictOrigin

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Literal keys
    "StringKey",
    "NumericKey",
    "BooleanKey",
    "LiteralKey",
    "literal_key",
    # Value kinds
    "PlainText",
    "Number",
    "DateOrTime",
    "PluralLike",
    "SelectEnum",
    "ValueKind",
    "PLAIN_TEXT",
    "NUMBER",
    "DATE_OR_TIME",
    "PLURAL_LIKE",
    # Schema
    "Argument",
    "TypeConflict",
    "Schema",
]

# Signed integer or decimal, ASCII digits only: "12", "-3", "+0.5".
# str.isdigit() would also accept superscripts and other Unicode digits.
_NUMERIC_LITERAL = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")

_BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}


def _is_number(value: object) -> bool:
    """True for int/float/Decimal values; bool is excluded on purpose."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


# ============================================================================
# LITERAL KEYS
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringKey:
    """Select branch key that only matches its raw text.

    Example: {theme, select, dark {...} other {...}} -> StringKey("dark")
    """

    raw: str

    @staticmethod
    def guard(key: object) -> TypeIs[StringKey]:
        """Type guard for StringKey."""
        return isinstance(key, StringKey)

    def accepts(self, value: object) -> bool:
        """Check whether a runtime value selects this branch."""
        return isinstance(value, str) and value == self.raw


@dataclass(frozen=True, slots=True)
class NumericKey:
    """Select branch key that looks like a number.

    Both the raw text ("123") and the parsed number (123) select the branch.
    Integers parse to int, decimals to Decimal to keep the literal exact.
    """

    raw: str
    value: int | Decimal

    @staticmethod
    def guard(key: object) -> TypeIs[NumericKey]:
        """Type guard for NumericKey."""
        return isinstance(key, NumericKey)

    def accepts(self, value: object) -> bool:
        """Check whether a runtime value selects this branch."""
        if isinstance(value, str):
            return value == self.raw
        if isinstance(value, float):
            # Shortest round-trip spelling, not the binary value: 0.1 selects "0.1".
            return Decimal(repr(value)) == self.value
        return _is_number(value) and value == self.value


@dataclass(frozen=True, slots=True)
class BooleanKey:
    """Select branch key spelled 'true' or 'false'.

    Both the raw text ("true") and the boolean (True) select the branch.
    """

    raw: str
    value: bool

    @staticmethod
    def guard(key: object) -> TypeIs[BooleanKey]:
        """Type guard for BooleanKey."""
        return isinstance(key, BooleanKey)

    def accepts(self, value: object) -> bool:
        """Check whether a runtime value selects this branch."""
        if isinstance(value, str):
            return value == self.raw
        return isinstance(value, bool) and value is self.value


type LiteralKey = StringKey | NumericKey | BooleanKey


def literal_key(raw: str) -> LiteralKey:
    """Classify a raw select branch key.

    The decision is made once, at parse time, from the token text.

    Args:
        raw: Branch key exactly as written (whitespace already stripped)

    Returns:
        BooleanKey for "true"/"false", NumericKey for integer or decimal
        literals (optionally signed), StringKey otherwise.

    Example:
        >>> literal_key("yes")
        StringKey(raw='yes')
        >>> literal_key("-12")
        NumericKey(raw='-12', value=-12)
        >>> literal_key("1.50")
        NumericKey(raw='1.50', value=Decimal('1.50'))
        >>> literal_key("true")
        BooleanKey(raw='true', value=True)
    """
    if raw in _BOOLEAN_LITERALS:
        return BooleanKey(raw=raw, value=_BOOLEAN_LITERALS[raw])
    if _NUMERIC_LITERAL.fullmatch(raw):
        value: int | Decimal = Decimal(raw) if "." in raw else int(raw)
        return NumericKey(raw=raw, value=value)
    return StringKey(raw=raw)


# ============================================================================
# VALUE KINDS
# ============================================================================


@dataclass(frozen=True, slots=True)
class PlainText:
    """Argument without a format: {name}."""

    kind: ClassVar[ArgumentKind] = ArgumentKind.TEXT

    @staticmethod
    def guard(value_kind: object) -> TypeIs[PlainText]:
        """Type guard for PlainText."""
        return isinstance(value_kind, PlainText)

    def describe(self) -> str:
        """Short human-readable form used in diagnostics."""
        return str(self.kind)

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly projection."""
        return {"kind": str(self.kind)}


@dataclass(frozen=True, slots=True)
class Number:
    """Numeric argument: {n, number}, or plural/selectordinal without branches."""

    kind: ClassVar[ArgumentKind] = ArgumentKind.NUMBER

    @staticmethod
    def guard(value_kind: object) -> TypeIs[Number]:
        """Type guard for Number."""
        return isinstance(value_kind, Number)

    def describe(self) -> str:
        """Short human-readable form used in diagnostics."""
        return str(self.kind)

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly projection."""
        return {"kind": str(self.kind)}


@dataclass(frozen=True, slots=True)
class DateOrTime:
    """Date or time argument: {d, date, medium}, {t, time}."""

    kind: ClassVar[ArgumentKind] = ArgumentKind.DATETIME

    @staticmethod
    def guard(value_kind: object) -> TypeIs[DateOrTime]:
        """Type guard for DateOrTime."""
        return isinstance(value_kind, DateOrTime)

    def describe(self) -> str:
        """Short human-readable form used in diagnostics."""
        return str(self.kind)

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly projection."""
        return {"kind": str(self.kind)}


@dataclass(frozen=True, slots=True)
class PluralLike:
    """Plural or selectordinal argument with branches. Numeric-compatible."""

    kind: ClassVar[ArgumentKind] = ArgumentKind.PLURAL

    @staticmethod
    def guard(value_kind: object) -> TypeIs[PluralLike]:
        """Type guard for PluralLike."""
        return isinstance(value_kind, PluralLike)

    def describe(self) -> str:
        """Short human-readable form used in diagnostics."""
        return str(self.kind)

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly projection."""
        return {"kind": str(self.kind)}


@dataclass(frozen=True, slots=True)
class SelectEnum:
    """Select argument: an enumeration of branch keys.

    The 'other' branch never appears in literals; it only sets includes_other,
    meaning any string is accepted in addition to the explicit literals.

    Attributes:
        literals: Explicit branch keys (without 'other')
        includes_other: Whether an 'other' branch exists
    """

    kind: ClassVar[ArgumentKind] = ArgumentKind.SELECT

    literals: frozenset[LiteralKey] = field(default_factory=frozenset)
    includes_other: bool = False

    @staticmethod
    def guard(value_kind: object) -> TypeIs[SelectEnum]:
        """Type guard for SelectEnum."""
        return isinstance(value_kind, SelectEnum)

    @property
    def raw_literals(self) -> frozenset[str]:
        """Branch keys as written."""
        return frozenset(key.raw for key in self.literals)

    def accepts(self, value: object) -> bool:
        """Check whether a runtime value is valid for this select.

        Strings are always accepted when an 'other' branch exists. Otherwise
        the value must match a literal in raw or widened (number/boolean) form.
        """
        if self.includes_other and isinstance(value, str):
            return True
        return any(key.accepts(value) for key in self.literals)

    def union(self, other: SelectEnum) -> SelectEnum:
        """Widen two selects into one accepting both key sets."""
        return SelectEnum(
            literals=self.literals | other.literals,
            includes_other=self.includes_other or other.includes_other,
        )

    def describe(self) -> str:
        """Short human-readable form used in diagnostics: select[a|b|other]."""
        keys = sorted(self.raw_literals)
        if self.includes_other:
            keys.append("other")
        return f"{self.kind}[{'|'.join(keys)}]"

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly projection."""
        return {
            "kind": str(self.kind),
            "literals": sorted(self.raw_literals),
            "includes_other": self.includes_other,
        }


type ValueKind = PlainText | Number | DateOrTime | PluralLike | SelectEnum

# Shared instances for the data-less kinds
PLAIN_TEXT = PlainText()
NUMBER = Number()
DATE_OR_TIME = DateOrTime()
PLURAL_LIKE = PluralLike()


# ============================================================================
# SCHEMA
# ============================================================================


@dataclass(frozen=True, slots=True)
class Argument:
    """Named interpolation argument with its inferred value kind."""

    name: str
    """Argument name as written inside the braces."""

    value_kind: ValueKind
    """Inferred classification."""

    def __post_init__(self) -> None:
        """Validate Argument invariants.

        Raises:
            ValueError: If name is empty.
        """
        if not self.name:
            msg = "Argument.name must be non-empty"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class TypeConflict:
    """Same argument name inferred with kinds that cannot be widened.

    Examples:
        "{x, number} {x, date}" -> TypeConflict("x", NUMBER, DATE_OR_TIME, NESTED)
        merge of {x: NUMBER} and {x: DATE_OR_TIME} -> origin MERGE
    """

    name: str
    """Conflicting argument name."""

    existing: ValueKind
    """Kind recorded first (kept in the schema)."""

    incoming: ValueKind
    """Kind that could not be widened into existing."""

    origin: ConflictOrigin
    """Where the conflict was detected."""

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured diagnostic for this conflict."""
        return ErrorTemplate.type_conflict(
            self.name,
            self.existing.describe(),
            self.incoming.describe(),
            str(self.origin),
        )

    def describe(self) -> str:
        """One-line human-readable description."""
        return self.diagnostic.message


@dataclass(frozen=True, slots=True)
class Schema:
    """Extracted schema of one template or of a merged set of templates.

    Attributes:
        arguments: Arguments unique by name, in discovery order
        tags: Rich-text tag names
        conflicts: Type conflicts found while building this schema
    """

    arguments: tuple[Argument, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)
    conflicts: tuple[TypeConflict, ...] = ()

    def __post_init__(self) -> None:
        """Validate Schema invariants.

        Raises:
            ValueError: If two arguments share a name.
        """
        names = [argument.name for argument in self.arguments]
        if len(names) != len(set(names)):
            msg = f"Schema.arguments must have unique names, got {names}"
            raise ValueError(msg)

    @property
    def has_conflicts(self) -> bool:
        """Whether any type conflict was detected."""
        return bool(self.conflicts)

    @property
    def is_empty(self) -> bool:
        """True when the template has neither arguments nor tags."""
        return not self.arguments and not self.tags

    def argument_map(self) -> dict[str, ValueKind]:
        """Mapping of argument name to value kind (fresh dict, discovery order)."""
        return {argument.name: argument.value_kind for argument in self.arguments}

    def get_argument_names(self) -> frozenset[str]:
        """Get set of argument names."""
        return frozenset(argument.name for argument in self.arguments)

    def get_value_kind(self, name: str) -> ValueKind | None:
        """Get the value kind of an argument, or None if absent."""
        for argument in self.arguments:
            if argument.name == name:
                return argument.value_kind
        return None

    def requires_argument(self, name: str) -> bool:
        """Check if the template uses a specific argument."""
        return self.get_value_kind(name) is not None

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly projection.

        Example:
            >>> from icuschema import extract_schema
            >>> data = extract_schema("<b>{g, select, x {X} other {O}}</b>").to_dict()
            >>> data["arguments"]
            {'g': {'kind': 'select', 'literals': ['x'], 'includes_other': True}}
            >>> data["tags"]
            ['b']
        """
        data: dict[str, Any] = {
            "arguments": {a.name: a.value_kind.as_dict() for a in self.arguments},
            "tags": sorted(self.tags),
        }
        if self.conflicts:
            data["conflicts"] = [conflict.describe() for conflict in self.conflicts]
        return data
