"""Rendering of Diagnostic values for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_SEVERITY_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
}


class OutputFormat(StrEnum):
    """Supported renderings."""

    RUST = "rust"  # headline plus "= label: value" lines
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one JSON object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Render diagnostics in one of the OutputFormat styles.

    Attributes:
        output_format: Rendering style
        sanitize: Cut message, input and hint to max_content_length
        color: Wrap the severity in ANSI color (rust style only)
        max_content_length: Cut-off used when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> formatter.format(ErrorTemplate.invalid_input(""))
        "INVALID_INPUT: Invalid input ''"
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic."""
        match self.output_format:
            case OutputFormat.RUST:
                return self._rust(diagnostic)
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._cut(diagnostic.message)}"
            case OutputFormat.JSON:
                return self._json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line apart."""
        return "\n\n".join(map(self.format, diagnostics))

    def _details(self, diagnostic: Diagnostic) -> list[tuple[str, str]]:
        """Labelled optional fields in display order."""
        details: list[tuple[str, str]] = []
        if diagnostic.input_value is not None:
            details.append(("input", self._cut(diagnostic.input_value)))
        if diagnostic.locale_code:
            details.append(("locale", diagnostic.locale_code))
        if diagnostic.hint:
            details.append(("help", self._cut(diagnostic.hint)))
        return details

    def _rust(self, diagnostic: Diagnostic) -> str:
        """Headline and detail lines.

        Example output:
            error[LOCALE_UNKNOWN]: Unknown locale "en-UK"
              = locale: en-UK
              = help: Did you mean: en-US, en-IN?
        """
        severity = diagnostic.severity
        if self.color:
            severity = f"{_SEVERITY_COLORS[severity]}{severity}{_ANSI_RESET}"

        headline = f"{severity}[{diagnostic.code.name}]: {self._cut(diagnostic.message)}"
        lines = [headline]
        lines.extend(f"  = {label}: {value}" for label, value in self._details(diagnostic))
        return "\n".join(lines)

    def _json(self, diagnostic: Diagnostic) -> str:
        payload: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._cut(diagnostic.message),
            "severity": diagnostic.severity,
        }
        keys = {"input": "input_value", "locale": "locale_code", "help": "hint"}
        for label, value in self._details(diagnostic):
            payload[keys[label]] = value
        return json.dumps(payload, ensure_ascii=False)

    def _cut(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return f"{text[: self.max_content_length]}..."
        return text
