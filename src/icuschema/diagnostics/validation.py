"""Result objects returned by validate_message().

Errors mark a message whose schema cannot be trusted (a selector without
'other', an argument used as two kinds). Warnings mark things ICU accepts
but that are probably mistakes.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]

_CLIP_AT: int = 100


def _clip(text: str) -> str:
    return text if len(text) <= _CLIP_AT else f"{text[:_CLIP_AT]}..."


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A finding that makes the message invalid.

    Attributes:
        code: Short slug such as "missing-other" or "type-conflict"
        message: Explanation for the translator
        argument: Argument involved, if the finding is about one
    """

    code: str
    message: str
    argument: str | None = None

    @classmethod
    def from_diagnostic(cls, code: str, diagnostic: Diagnostic) -> "ValidationError":
        return cls(code=code, message=diagnostic.message, argument=diagnostic.argument_name)

    def format(self, *, sanitize: bool = False) -> str:
        """One line: `[code] in 'arg': message`, message clipped if sanitize."""
        message = _clip(self.message) if sanitize else self.message
        where = f" in '{self.argument}'" if self.argument else ""
        return f"[{self.code}]{where}: {message}"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """A finding worth a translator's attention that does not invalidate.

    Attributes:
        code: Short slug such as "duplicate-key"
        message: Explanation for the translator
        context: Extra detail, e.g. the categories the locale does define
    """

    code: str
    message: str
    context: str | None = None

    @classmethod
    def from_diagnostic(cls, code: str, diagnostic: Diagnostic) -> "ValidationWarning":
        return cls(code=code, message=diagnostic.message, context=diagnostic.hint)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Everything validate_message() found in one template.

    Example:
        >>> ValidationResult.valid().is_valid
        True
        >>> ValidationResult.invalid(
        ...     errors=(ValidationError("missing-other", "no 'other' branch", "g"),)
        ... ).error_count
        1
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """True when there are no errors; warnings are allowed."""
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        return ValidationResult(errors=(), warnings=())

    @staticmethod
    def invalid(
        errors: tuple[ValidationError, ...] = (),
        warnings: tuple[ValidationWarning, ...] = (),
    ) -> "ValidationResult":
        return ValidationResult(errors=errors, warnings=warnings)

    def format(self, *, sanitize: bool = False, include_warnings: bool = True) -> str:
        """Report grouped under "Errors (n):" and "Warnings (n):" headings."""
        sections: list[str] = []
        if self.errors:
            sections.append(f"Errors ({self.error_count}):")
            sections.extend(f"  {error.format(sanitize=sanitize)}" for error in self.errors)

        if include_warnings and self.warnings:
            sections.append(f"Warnings ({self.warning_count}):")
            for warning in self.warnings:
                suffix = f" ({warning.context})" if warning.context else ""
                sections.append(f"  [{warning.code}]: {warning.message}{suffix}")

        return "\n".join(sections) or "Validation passed: no errors or warnings"
