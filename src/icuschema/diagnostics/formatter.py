"""Rendering of Diagnostic objects for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter", "OutputFormat"]

_ANSI_RESET = "\033[0m"
_SEVERITY_COLORS = {"error": "\033[1;31m", "warning": "\033[1;33m"}


class OutputFormat(StrEnum):
    """Supported renderings."""

    RUST = "rust"  # multi-line, one "= label: value" line per detail
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns diagnostics into text.

    Attributes:
        output_format: Which rendering to produce
        sanitize: Cut message and hint text at max_content_length
        color: Wrap the severity in ANSI colors (rust style only)
        max_content_length: Cut-off used when sanitize is set

    Example:
        >>> from icuschema.diagnostics.templates import ErrorTemplate
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.depth_exceeded(100)))
        MAX_DEPTH_EXCEEDED: Maximum nesting depth (100) exceeded
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured style."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._render_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._render_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between each."""
        return "\n\n".join(map(self.format, diagnostics))

    def _details(self, diagnostic: Diagnostic) -> list[tuple[str, str]]:
        """(key, value) pairs for every optional field that is set."""
        candidates = (
            ("argument_name", diagnostic.argument_name),
            ("expected_type", diagnostic.expected_type),
            ("received_type", diagnostic.received_type),
            ("hint", diagnostic.hint and self._clip(diagnostic.hint)),
            ("help_url", diagnostic.help_url),
        )
        return [(key, value) for key, value in candidates if value]

    def _render_rust(self, diagnostic: Diagnostic) -> str:
        """Compiler-style block.

        Example output:
            error[TYPE_CONFLICT]: Argument 'n' is used as number and datetime across templates
              = argument: n
              = expected: number
              = received: datetime
              = help: Use one format for 'n' or rename one of the arguments
        """
        prefixes = {
            "argument_name": "argument: ",
            "expected_type": "expected: ",
            "received_type": "received: ",
            "hint": "help: ",
            "help_url": "note: see ",
        }
        severity = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_ANSI_RESET}"

        lines = [f"{severity}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]
        for key, value in self._details(diagnostic):
            lines.append(f"  = {prefixes[key]}{value}")
        return "\n".join(lines)

    def _render_json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "severity": diagnostic.severity,
            "message": self._clip(diagnostic.message),
        }
        payload.update(self._details(diagnostic))
        return json.dumps(payload, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if not self.sanitize or len(text) <= self.max_content_length:
            return text
        return f"{text[: self.max_content_length]}..."
