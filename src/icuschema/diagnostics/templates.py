"""Factory methods for every Diagnostic icuschema emits.

Python 3.13+.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Builds Diagnostics so that wording lives in one module.

    Exceptions and validation passes never format messages themselves; they
    call one of these and pass the Diagnostic on.
    """

    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    @staticmethod
    def type_conflict(name: str, existing: str, incoming: str, origin: str) -> Diagnostic:
        """Same argument name inferred with incompatible value kinds.

        Args:
            name: Argument name
            existing: Value kind recorded first
            incoming: Value kind that could not be widened into it
            origin: "nested" (same template) or "merge" (across templates)

        Returns:
            Diagnostic for TYPE_CONFLICT
        """
        where = "within one template" if origin == "nested" else "across templates"
        msg = f"Argument '{name}' is used as {existing} and {incoming} {where}"
        return Diagnostic(
            code=DiagnosticCode.TYPE_CONFLICT,
            message=msg,
            hint=f"Use one format for '{name}' or rename one of the arguments",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
            argument_name=name,
            expected_type=existing,
            received_type=incoming,
        )

    @staticmethod
    def schema_conflicts(names: Iterable[str]) -> Diagnostic:
        """Merged schemas contain one or more type conflicts.

        Args:
            names: Conflicting argument names

        Returns:
            Diagnostic for SCHEMA_CONFLICTS
        """
        listed = ", ".join(f"'{name}'" for name in names)
        msg = f"Schemas cannot be merged: conflicting argument types for {listed}"
        return Diagnostic(
            code=DiagnosticCode.SCHEMA_CONFLICTS,
            message=msg,
            hint="Inspect SchemaConflictError.conflicts or merge with strict=False",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum sub-message or tag nesting depth exceeded.

        Args:
            max_depth: Configured depth limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting of plural/select sub-messages or tags",
        )

    @staticmethod
    def missing_other_branch(name: str, fmt: str) -> Diagnostic:
        """Complex argument without the mandatory 'other' branch.

        Args:
            name: Argument name
            fmt: plural, selectordinal or select

        Returns:
            Diagnostic for MISSING_OTHER_BRANCH
        """
        msg = f"Argument '{name}' ({fmt}) has no 'other' branch"
        return Diagnostic(
            code=DiagnosticCode.MISSING_OTHER_BRANCH,
            message=msg,
            hint="ICU requires an 'other' branch in every plural, selectordinal and select",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#complex-argument-types",
            argument_name=name,
        )

    @staticmethod
    def duplicate_branch_key(name: str, key: str) -> Diagnostic:
        """Branch key repeated inside one complex argument.

        Args:
            name: Argument name
            key: Repeated branch key

        Returns:
            Diagnostic for DUPLICATE_BRANCH_KEY
        """
        msg = f"Argument '{name}' repeats branch key '{key}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_BRANCH_KEY,
            message=msg,
            hint="Only the first branch with a given key is ever selected",
            argument_name=name,
            severity="warning",
        )

    @staticmethod
    def unknown_plural_category(
        name: str, key: str, locale_code: str, categories: Iterable[str]
    ) -> Diagnostic:
        """Plural branch key that is not a CLDR category of the locale.

        Args:
            name: Argument name
            key: Branch key
            locale_code: Locale the message was checked against
            categories: Valid plural categories for the locale

        Returns:
            Diagnostic for UNKNOWN_PLURAL_CATEGORY
        """
        valid = ", ".join(sorted(categories))
        msg = (
            f"Argument '{name}' uses plural category '{key}' "
            f"which locale '{locale_code}' never selects"
        )
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PLURAL_CATEGORY,
            message=msg,
            hint=f"Valid categories for '{locale_code}': {valid}",
            help_url="https://www.unicode.org/cldr/charts/latest/supplemental/language_plural_rules.html",
            argument_name=name,
            severity="warning",
        )

    @staticmethod
    def unknown_locale(locale_code: str) -> Diagnostic:
        """Locale not known to Babel/CLDR.

        Args:
            locale_code: Locale that failed to parse

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        msg = f"Unknown locale '{locale_code}'; plural categories were not checked"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code such as 'en-US' or 'pl_PL'",
            severity="warning",
        )
