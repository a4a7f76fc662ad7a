"""Tests for schema/types.py: literal keys, value kinds and Schema.

Python 3.13+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from icuschema.enums import ArgumentKind, ConflictOrigin
from icuschema.schema import (
    DATE_OR_TIME,
    NUMBER,
    PLAIN_TEXT,
    PLURAL_LIKE,
    Argument,
    BooleanKey,
    DateOrTime,
    Number,
    NumericKey,
    PlainText,
    PluralLike,
    Schema,
    SelectEnum,
    StringKey,
    TypeConflict,
    literal_key,
)


class TestLiteralKey:
    """Classification of raw select keys."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("yes", StringKey("yes")),
            ("key-with-dashes", StringKey("key-with-dashes")),
            ("123", NumericKey("123", 123)),
            ("-12", NumericKey("-12", -12)),
            ("+7", NumericKey("+7", 7)),
            ("1.50", NumericKey("1.50", Decimal("1.50"))),
            ("true", BooleanKey("true", True)),
            ("false", BooleanKey("false", False)),
            ("True", StringKey("True")),
            ("1.", StringKey("1.")),
            ("²", StringKey("²")),
        ],
    )
    def test_classification(self, raw: str, expected: object) -> None:
        """Keys are classified once from their text."""
        assert literal_key(raw) == expected

    def test_numeric_accepts_both_forms(self) -> None:
        """A numeric key matches its text and its number."""
        key = literal_key("123")

        assert key.accepts("123")
        assert key.accepts(123)
        assert key.accepts(Decimal("123"))
        assert not key.accepts("124")

    @pytest.mark.parametrize("raw", ["0.1", "2.5", "-1.30", "0.3"])
    def test_decimal_key_accepts_float_and_decimal(self, raw: str) -> None:
        """A decimal key matches the float written the same way, exactly or not."""
        key = literal_key(raw)

        assert key.accepts(float(raw))
        assert key.accepts(Decimal(raw))
        assert key.accepts(raw)
        assert SelectEnum(literals=frozenset({key})).accepts(float(raw))

    def test_decimal_key_rejects_nearby_float(self) -> None:
        """Only the spelled value matches, not a neighbour."""
        key = literal_key("0.1")

        assert not key.accepts(0.10000001)
        assert not key.accepts(float("nan"))
        assert literal_key("3").accepts(3.0)

    def test_numeric_rejects_bool(self) -> None:
        """True == 1 in Python, but a boolean is not a number here."""
        assert not literal_key("1").accepts(True)

    def test_boolean_accepts_both_forms(self) -> None:
        """A boolean key matches its text and its boolean."""
        key = literal_key("true")

        assert key.accepts("true")
        assert key.accepts(True)
        assert not key.accepts(1)
        assert not key.accepts(False)

    def test_string_key(self) -> None:
        """A string key matches only its text."""
        key = literal_key("male")

        assert key.accepts("male")
        assert not key.accepts("female")

    def test_guards(self) -> None:
        """Type guards narrow the union."""
        assert StringKey.guard(literal_key("x"))
        assert NumericKey.guard(literal_key("1"))
        assert BooleanKey.guard(literal_key("false"))
        assert not StringKey.guard(literal_key("1"))


class TestValueKinds:
    """Value-kind variants."""

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (PLAIN_TEXT, ArgumentKind.TEXT),
            (NUMBER, ArgumentKind.NUMBER),
            (DATE_OR_TIME, ArgumentKind.DATETIME),
            (PLURAL_LIKE, ArgumentKind.PLURAL),
            (SelectEnum(), ArgumentKind.SELECT),
        ],
    )
    def test_kind_tags(self, kind: object, expected: ArgumentKind) -> None:
        """Each variant carries its ArgumentKind."""
        assert kind.kind is expected  # type: ignore[attr-defined]

    def test_guards(self) -> None:
        """Each guard accepts only its variant."""
        assert PlainText.guard(PLAIN_TEXT)
        assert Number.guard(NUMBER)
        assert DateOrTime.guard(DATE_OR_TIME)
        assert PluralLike.guard(PLURAL_LIKE)
        assert SelectEnum.guard(SelectEnum())
        assert not Number.guard(PLURAL_LIKE)

    def test_select_describe(self) -> None:
        """Literals are sorted; 'other' comes last."""
        kind = SelectEnum(frozenset({StringKey("b"), StringKey("a")}), includes_other=True)

        assert kind.describe() == "select[a|b|other]"

    def test_select_accepts(self) -> None:
        """With 'other', any string is accepted."""
        closed = SelectEnum(frozenset({literal_key("1")}))
        open_ = SelectEnum(frozenset({literal_key("1")}), includes_other=True)

        assert closed.accepts(1)
        assert not closed.accepts("anything")
        assert open_.accepts("anything")
        assert not open_.accepts(2)

    def test_select_as_dict(self) -> None:
        """The JSON projection lists raw literals sorted."""
        kind = SelectEnum(frozenset({literal_key("true"), literal_key("x")}), includes_other=False)

        assert kind.as_dict() == {
            "kind": "select",
            "literals": ["true", "x"],
            "includes_other": False,
        }


class TestArgumentAndSchema:
    """Argument and Schema invariants."""

    def test_empty_name_rejected(self) -> None:
        """Arguments need a name."""
        with pytest.raises(ValueError, match="non-empty"):
            Argument("", PLAIN_TEXT)

    def test_duplicate_names_rejected(self) -> None:
        """Schema arguments are unique by name."""
        with pytest.raises(ValueError, match="unique names"):
            Schema(arguments=(Argument("a", PLAIN_TEXT), Argument("a", NUMBER)))

    def test_accessors(self) -> None:
        """Lookups by name."""
        schema = Schema(arguments=(Argument("a", PLAIN_TEXT), Argument("n", NUMBER)))

        assert schema.get_argument_names() == frozenset({"a", "n"})
        assert schema.get_value_kind("n") == NUMBER
        assert schema.get_value_kind("missing") is None
        assert schema.requires_argument("a")
        assert not schema.requires_argument("missing")
        assert not schema.is_empty

    def test_tags_only_schema_is_not_empty(self) -> None:
        """Tags alone make a schema non-empty."""
        assert not Schema(tags=frozenset({"b"})).is_empty

    def test_to_dict(self) -> None:
        """JSON-friendly projection."""
        schema = Schema(
            arguments=(Argument("n", PLURAL_LIKE), Argument("d", DATE_OR_TIME)),
            tags=frozenset({"i", "b"}),
        )

        assert schema.to_dict() == {
            "arguments": {"n": {"kind": "plural"}, "d": {"kind": "datetime"}},
            "tags": ["b", "i"],
        }

    def test_conflict_description(self) -> None:
        """TypeConflict renders a one-line message and a diagnostic."""
        conflict = TypeConflict("x", NUMBER, DATE_OR_TIME, ConflictOrigin.MERGE)

        assert conflict.describe() == (
            "Argument 'x' is used as number and datetime across templates"
        )
        assert conflict.diagnostic.argument_name == "x"
        assert conflict.diagnostic.expected_type == "number"
        assert conflict.diagnostic.received_type == "datetime"
