"""Tests for syntax/parser/primitives.py.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from icuschema.syntax.cursor import Cursor
from icuschema.syntax.parser.primitives import (
    consume_balanced,
    parse_digits,
    parse_offset,
    parse_plural_key,
    parse_select_key,
)


class TestCursorPeek:
    """Cursor.peek() in both directions."""

    def test_forward_and_back(self) -> None:
        """Positive offsets look ahead, negative ones look back."""
        cursor = Cursor("<br/>", 4)

        assert cursor.peek() == ">"
        assert cursor.peek(-1) == "/"

    def test_outside_text(self) -> None:
        """Offsets before the start or past the end give None, never wrap."""
        cursor = Cursor("ab", 0)

        assert cursor.peek(-1) is None
        assert cursor.peek(2) is None


class TestConsumeBalanced:
    """Balanced-brace scanner."""

    def test_flat(self) -> None:
        """Content up to the matching brace is returned."""
        result = consume_balanced(Cursor("{name}rest", 1))

        assert result is not None
        assert result.value == "name"
        assert result.cursor.remaining == "rest"

    def test_nested_braces_preserved(self) -> None:
        """Inner braces are kept verbatim."""
        result = consume_balanced(Cursor("{a{b}c}d", 1))

        assert result is not None
        assert result.value == "a{b}c"
        assert result.cursor.remaining == "d"

    def test_empty_content(self) -> None:
        """{} yields empty content."""
        result = consume_balanced(Cursor("{}", 1))

        assert result is not None
        assert result.value == ""
        assert result.cursor.is_eof

    def test_unbalanced_returns_none(self) -> None:
        """Input ending before the match fails."""
        assert consume_balanced(Cursor("{name", 1)) is None
        assert consume_balanced(Cursor("{a{b}", 1)) is None

    def test_stops_at_first_match(self) -> None:
        """A second group is left for the caller."""
        result = consume_balanced(Cursor("{a}{b}", 1))

        assert result is not None
        assert result.value == "a"
        assert result.cursor.remaining == "{b}"

    @given(st.integers(min_value=1, max_value=200))
    def test_deep_nesting_is_iterative(self, depth: int) -> None:
        """PROPERTY: Nesting depth does not matter to the scanner."""
        source = "{" * depth + "}" * depth

        result = consume_balanced(Cursor(source, 1))

        assert result is not None
        assert result.cursor.is_eof


class TestDigitsAndOffset:
    """Digit runs and plural offsets."""

    def test_digits(self) -> None:
        """A digit run is consumed."""
        result = parse_digits(Cursor("123abc", 0))

        assert result is not None
        assert result.value == "123"
        assert result.cursor.remaining == "abc"

    def test_no_digits(self) -> None:
        """No digits, no match."""
        assert parse_digits(Cursor("abc", 0)) is None

    def test_unicode_digits_rejected(self) -> None:
        """Superscript digits are not ASCII digits."""
        assert parse_digits(Cursor("²", 0)) is None

    def test_offset(self) -> None:
        """offset:N parses to an int."""
        result = parse_offset(Cursor("offset:12=0{x}", 0))

        assert result is not None
        assert result.value == 12
        assert result.cursor.remaining == "=0{x}"

    def test_offset_without_digits(self) -> None:
        """offset: must be followed by digits."""
        assert parse_offset(Cursor("offset:one{x}", 0)) is None

    def test_not_an_offset(self) -> None:
        """Branch keys are not offsets."""
        assert parse_offset(Cursor("one{x}", 0)) is None


class TestPluralKey:
    """Plural and selectordinal branch keys."""

    def test_explicit_value(self) -> None:
        """=N keys keep their marker."""
        result = parse_plural_key(Cursor("=0{none}", 0))

        assert result is not None
        assert result.value == "=0"
        assert result.cursor.current == "{"

    def test_keyword(self) -> None:
        """Identifier keys are read up to the brace."""
        result = parse_plural_key(Cursor("few{#}", 0))

        assert result is not None
        assert result.value == "few"

    def test_identifier_with_dash_and_digits(self) -> None:
        """Identifiers may contain digits, '_' and '-'."""
        result = parse_plural_key(Cursor("one_2-b{#}", 0))

        assert result is not None
        assert result.value == "one_2-b"

    def test_equals_without_digits(self) -> None:
        """'=' alone is malformed."""
        assert parse_plural_key(Cursor("={x}", 0)) is None

    def test_digit_start_rejected(self) -> None:
        """Bare numbers are not plural keys."""
        assert parse_plural_key(Cursor("1{x}", 0)) is None

    def test_eof(self) -> None:
        """Nothing to parse at EOF."""
        assert parse_plural_key(Cursor("", 0)) is None


class TestSelectKey:
    """Select branch keys."""

    def test_free_form_key(self) -> None:
        """Any brace-free text is a key."""
        for key in ("male", "key-with-dashes", "key_with_underscores", "123", "true", "-1.5"):
            result = parse_select_key(Cursor(f"{key}{{x}}", 0))
            assert result is not None
            assert result.value == key
            assert result.cursor.current == "{"

    def test_empty_key(self) -> None:
        """A branch body without a key is malformed."""
        assert parse_select_key(Cursor("{X}", 0)) is None

    def test_key_with_closing_brace(self) -> None:
        """A stray '}' cannot be part of a key."""
        assert parse_select_key(Cursor("}x{X}", 0)) is None

    def test_no_body(self) -> None:
        """A key without a following body is malformed."""
        assert parse_select_key(Cursor("dangling", 0)) is None
