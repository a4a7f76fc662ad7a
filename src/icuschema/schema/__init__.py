"""Schema data model and merging.

Exports the value-kind union, literal keys, Schema itself and the merge
operation used to union several templates.

Python 3.13+.
"""

from .merge import SchemaBuilder, merge_schemas, widen
from .types import (
    DATE_OR_TIME,
    NUMBER,
    PLAIN_TEXT,
    PLURAL_LIKE,
    Argument,
    BooleanKey,
    DateOrTime,
    LiteralKey,
    Number,
    NumericKey,
    PlainText,
    PluralLike,
    Schema,
    SelectEnum,
    StringKey,
    TypeConflict,
    ValueKind,
    literal_key,
)

__all__ = [
    "DATE_OR_TIME",
    "NUMBER",
    "PLAIN_TEXT",
    "PLURAL_LIKE",
    "Argument",
    "BooleanKey",
    "DateOrTime",
    "LiteralKey",
    "Number",
    "NumericKey",
    "PlainText",
    "PluralLike",
    "Schema",
    "SchemaBuilder",
    "SelectEnum",
    "StringKey",
    "TypeConflict",
    "ValueKind",
    "literal_key",
    "merge_schemas",
    "widen",
]
