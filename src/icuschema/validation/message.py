"""ICU message validation.

Provides standalone checks for one template, useful for CI pipelines and
translation linters that want more than the schema:

Architecture:
    - validate_message(): Main entry point, orchestrates validation passes
    - _conflict_errors(): Pass 1 - in-template kind conflicts
    - _check_other_branch(): Pass 2 - every complex argument has 'other'
    - _check_duplicate_keys(): Pass 3 - repeated branch keys
    - _check_plural_categories(): Pass 4 - keys against CLDR (needs Babel)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import Counter

from icuschema.constants import OTHER_KEY
from icuschema.core.babel_compat import require_babel
from icuschema.diagnostics import (
    ErrorTemplate,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from icuschema.enums import ComplexFormat
from icuschema.introspection import introspect_message
from icuschema.locale_utils import get_babel_locale
from icuschema.schema import Schema
from icuschema.syntax.parser import ComplexArgument

__all__ = ["validate_message"]

logger = logging.getLogger(__name__)

_EXPLICIT_VALUE_MARKER = "="

type _PluralCategories = dict[ComplexFormat, frozenset[str]]


def _conflict_errors(schema: Schema) -> list[ValidationError]:
    return [
        ValidationError.from_diagnostic("type-conflict", conflict.diagnostic)
        for conflict in schema.conflicts
    ]


def _check_other_branch(selector: ComplexArgument) -> list[ValidationError]:
    if selector.has_other:
        return []
    diagnostic = ErrorTemplate.missing_other_branch(selector.name, selector.format)
    return [ValidationError.from_diagnostic("missing-other", diagnostic)]


def _check_duplicate_keys(selector: ComplexArgument) -> list[ValidationWarning]:
    counts = Counter(selector.keys)
    return [
        ValidationWarning.from_diagnostic(
            "duplicate-key", ErrorTemplate.duplicate_branch_key(selector.name, key)
        )
        for key, count in counts.items()
        if count > 1
    ]


def _check_plural_categories(
    selector: ComplexArgument, locale_code: str, categories: _PluralCategories
) -> list[ValidationWarning]:
    """Flag keyword keys the locale never selects.

    Explicit value keys (=0, =1) are always valid and are not checked.
    Select arguments have free-form keys and are skipped.
    """
    valid = categories.get(selector.format)
    if valid is None:
        return []
    warnings: list[ValidationWarning] = []
    for key in dict.fromkeys(selector.keys):
        if key.startswith(_EXPLICIT_VALUE_MARKER) or key in valid:
            continue
        diagnostic = ErrorTemplate.unknown_plural_category(selector.name, key, locale_code, valid)
        warnings.append(ValidationWarning.from_diagnostic("unknown-plural-category", diagnostic))
    return warnings


def _load_plural_categories(locale_code: str) -> _PluralCategories | None:
    """Load CLDR cardinal and ordinal categories for a locale.

    Returns:
        Categories per plural format, or None when Babel does not know the
        locale.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("validate_message(locale=...)")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        locale = get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError) as e:
        logger.debug("Locale '%s' not recognized by Babel: %s", locale_code, e)
        return None

    # PluralRule.tags omits the implicit 'other' category.
    return {
        ComplexFormat.PLURAL: frozenset(locale.plural_form.tags) | {OTHER_KEY},
        ComplexFormat.SELECTORDINAL: frozenset(locale.ordinal_form.tags) | {OTHER_KEY},
    }


def validate_message(template: str, locale: str | None = None) -> ValidationResult:
    """Validate one ICU message template.

    Args:
        template: ICU MessageFormat template
        locale: Optional locale code (BCP-47 or POSIX). When given, plural
            and selectordinal keys are checked against the locale's CLDR
            categories. Requires Babel.

    Returns:
        ValidationResult with errors (missing-other, type-conflict) and
        warnings (duplicate-key, unknown-plural-category, unknown-locale)

    Raises:
        TypeError: If template is not a str
        ValueError: If template exceeds MAX_SOURCE_SIZE
        BabelImportError: If locale is given and Babel is not installed

    Example:
        >>> result = validate_message("{g, select, male {He} female {She}}")
        >>> result.is_valid
        False
        >>> result.errors[0].code
        'missing-other'
        >>> for warning in validate_message("{n, plural, one {#} few {#} other {#}}", "en").warnings:
        ...     print(warning.code)
        unknown-plural-category
    """
    info = introspect_message(template)

    # Pass 1: Kind conflicts inside the template
    errors = _conflict_errors(info.schema)
    warnings: list[ValidationWarning] = []

    categories: _PluralCategories | None = None
    if locale is not None:
        categories = _load_plural_categories(locale)
        if categories is None:
            warnings.append(
                ValidationWarning.from_diagnostic(
                    "unknown-locale", ErrorTemplate.unknown_locale(locale)
                )
            )

    for selector in info.selectors:
        # Pass 2: Mandatory 'other' branch
        errors.extend(_check_other_branch(selector))
        # Pass 3: Repeated keys
        warnings.extend(_check_duplicate_keys(selector))
        # Pass 4: CLDR plural categories
        if categories is not None and locale is not None:
            warnings.extend(_check_plural_categories(selector, locale, categories))

    logger.debug("Validated message: %d errors, %d warnings", len(errors), len(warnings))
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))
