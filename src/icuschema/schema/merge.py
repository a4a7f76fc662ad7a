"""Value-kind widening and schema merging.

Widening rules (existing, incoming):
- equal kinds                 -> unchanged
- PlainText + X               -> X (the specific kind wins)
- Number + PluralLike         -> PluralLike (both numeric)
- SelectEnum + SelectEnum     -> union of literals, includes_other OR-ed
- anything else               -> conflict (surfaced, never auto-resolved)

The same rules apply when one template mentions a name twice (origin
NESTED) and when schemas of several templates are merged (origin MERGE).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from icuschema.diagnostics import SchemaConflictError
from icuschema.enums import ConflictOrigin
from icuschema.schema.types import (
    PLURAL_LIKE,
    Argument,
    Number,
    PlainText,
    PluralLike,
    Schema,
    SelectEnum,
    TypeConflict,
    ValueKind,
)

__all__ = ["SchemaBuilder", "merge_schemas", "widen"]

logger = logging.getLogger(__name__)


def widen(existing: ValueKind, incoming: ValueKind) -> ValueKind | None:
    """Combine two kinds inferred for the same argument name.

    Args:
        existing: Kind recorded first
        incoming: Kind inferred later

    Returns:
        The widened kind, or None when the kinds conflict.

    Example:
        >>> widen(PLAIN_TEXT, NUMBER)
        Number()
        >>> widen(NUMBER, PLURAL_LIKE)
        PluralLike()
        >>> widen(NUMBER, DATE_OR_TIME) is None
        True
    """
    if existing == incoming:
        return existing
    match existing, incoming:
        case PlainText(), _:
            return incoming
        case _, PlainText():
            return existing
        case (Number(), PluralLike()) | (PluralLike(), Number()):
            return PLURAL_LIKE
        case SelectEnum(), SelectEnum():
            return existing.union(incoming)
        case _:
            return None


class SchemaBuilder:
    """Mutable accumulator producing an immutable Schema.

    Used by the parser while walking one template and by merge_schemas()
    while combining several. Arguments keep first-discovery order; a
    conflicting kind is recorded as a TypeConflict and the first kind is kept.
    """

    __slots__ = ("_arguments", "_conflicts", "_origin", "_tags")

    def __init__(self, origin: ConflictOrigin) -> None:
        """Initialize an empty builder.

        Args:
            origin: Conflict origin recorded for conflicts detected here
        """
        self._origin = origin
        self._arguments: dict[str, ValueKind] = {}
        self._tags: set[str] = set()
        self._conflicts: list[TypeConflict] = []

    def add_argument(self, argument: Argument) -> None:
        """Add one argument, widening or recording a conflict."""
        existing = self._arguments.get(argument.name)
        if existing is None:
            self._arguments[argument.name] = argument.value_kind
            return

        widened = widen(existing, argument.value_kind)
        if widened is None:
            conflict = TypeConflict(
                name=argument.name,
                existing=existing,
                incoming=argument.value_kind,
                origin=self._origin,
            )
            logger.debug("Type conflict: %s", conflict.describe())
            self._conflicts.append(conflict)
            return
        self._arguments[argument.name] = widened

    def add_tags(self, tags: Iterable[str]) -> None:
        """Add rich-text tag names."""
        self._tags.update(tags)

    def add_conflicts(self, conflicts: Iterable[TypeConflict]) -> None:
        """Carry over conflicts already detected elsewhere."""
        self._conflicts.extend(conflicts)

    def build(self) -> Schema:
        """Freeze the accumulated state into a Schema."""
        return Schema(
            arguments=tuple(Argument(name, kind) for name, kind in self._arguments.items()),
            tags=frozenset(self._tags),
            conflicts=tuple(self._conflicts),
        )


def merge_schemas(schemas: Iterable[Schema], *, strict: bool = True) -> Schema:
    """Merge per-template schemas into one.

    Inputs are never mutated; a new Schema is returned. Merging is
    commutative and associative for schemas without conflicts.

    Args:
        schemas: Schemas to merge (any iterable, consumed once)
        strict: If True (default), raise when any conflict exists, including
            conflicts already carried by an input schema. If False, return
            the merged schema with every conflict listed in .conflicts.

    Returns:
        Merged schema (empty Schema for an empty input)

    Raises:
        SchemaConflictError: In strict mode, when an argument name has
            incompatible kinds.

    Example:
        >>> merged = merge_schemas([extract_schema("{x}"), extract_schema("{x, number}")])
        >>> merged.argument_map()
        {'x': Number()}
    """
    builder = SchemaBuilder(ConflictOrigin.MERGE)
    for schema in schemas:
        builder.add_conflicts(schema.conflicts)
        builder.add_tags(schema.tags)
        for argument in schema.arguments:
            builder.add_argument(argument)

    merged = builder.build()
    if strict and merged.conflicts:
        raise SchemaConflictError(merged.conflicts)
    return merged
