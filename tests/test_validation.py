"""Tests for validation/message.py.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from icuschema import validate_message
from icuschema.core.babel_compat import BabelImportError


class TestStructuralValidation:
    """Checks that need no locale data."""

    def test_valid_message(self) -> None:
        """A well-formed message passes."""
        result = validate_message("{n, plural, one {# item} other {# items}}")

        assert result.is_valid
        assert result.warning_count == 0

    def test_missing_other(self) -> None:
        """Every complex argument needs an 'other' branch."""
        result = validate_message("{g, select, male {He} female {She}}")

        assert not result.is_valid
        assert [error.code for error in result.errors] == ["missing-other"]
        assert result.errors[0].argument == "g"

    def test_missing_other_in_nested_argument(self) -> None:
        """Nested complex arguments are checked too."""
        result = validate_message("{g, select, a {{n, plural, one {#}}} other {}}")

        assert [error.argument for error in result.errors] == ["n"]

    def test_type_conflict(self) -> None:
        """In-template conflicts are errors."""
        result = validate_message("{x, number} {x, date}")

        assert [error.code for error in result.errors] == ["type-conflict"]

    def test_duplicate_key(self) -> None:
        """Repeated branch keys are warnings, reported once per key."""
        result = validate_message("{g, select, a {1} a {2} a {3} other {x}}")

        assert result.is_valid
        assert [warning.code for warning in result.warnings] == ["duplicate-key"]

    def test_simple_message(self) -> None:
        """Messages without complex arguments are valid."""
        assert validate_message("Hello {name}").is_valid


class TestLocaleValidation:
    """CLDR plural category checks (Babel)."""

    @pytest.fixture(autouse=True)
    def _require_babel(self) -> None:
        pytest.importorskip("babel")

    def test_unknown_category_for_locale(self) -> None:
        """English has no 'few' cardinal category."""
        result = validate_message("{n, plural, one {#} few {#} other {#}}", "en")

        assert result.is_valid
        codes = [warning.code for warning in result.warnings]
        assert codes == ["unknown-plural-category"]
        assert "few" in result.warnings[0].message
        assert result.warnings[0].context == "Valid categories for 'en': one, other"

    def test_valid_categories_for_polish(self) -> None:
        """Polish uses one, few, many and other."""
        result = validate_message("{n, plural, one {#} few {#} many {#} other {#}}", "pl-PL")

        assert result.warning_count == 0

    def test_explicit_values_always_valid(self) -> None:
        """=N keys are never checked against categories."""
        result = validate_message("{n, plural, =0 {none} =42 {lots} other {#}}", "ja")

        assert result.warning_count == 0

    def test_ordinal_categories(self) -> None:
        """selectordinal keys use the ordinal rules."""
        result = validate_message(
            "{p, selectordinal, one {#st} two {#nd} few {#rd} other {#th}}", "en"
        )

        assert result.warning_count == 0

    def test_ordinal_category_invalid_for_cardinal(self) -> None:
        """'two' is an English ordinal category but not a cardinal one."""
        result = validate_message("{n, plural, one {#} two {#} other {#}}", "en")

        assert [warning.code for warning in result.warnings] == ["unknown-plural-category"]

    def test_select_keys_not_checked(self) -> None:
        """Select keys are free-form."""
        result = validate_message("{g, select, few {x} other {y}}", "en")

        assert result.warning_count == 0

    def test_unknown_locale(self) -> None:
        """Unknown locales produce a warning and skip category checks."""
        result = validate_message("{n, plural, one {#} few {#} other {#}}", "xx-XX")

        assert [warning.code for warning in result.warnings] == ["unknown-locale"]


class TestWithoutBabel:
    """Behavior when Babel is not installed."""

    def test_locale_requires_babel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Passing a locale without Babel raises BabelImportError."""
        monkeypatch.setattr(
            "icuschema.core.babel_compat._check_babel_available", lambda: False
        )

        with pytest.raises(BabelImportError):
            validate_message("{n, plural, other {#}}", "en")

    def test_no_locale_needs_no_babel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Structural checks work without Babel."""
        monkeypatch.setattr(
            "icuschema.core.babel_compat._check_babel_available", lambda: False
        )

        assert validate_message("{n, plural, other {#}}").is_valid
