"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
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


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for build tooling


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects into human-readable or machine-readable
    output. Captured tool output can be long, so ``detail`` is truncated
    to ``max_detail_length`` characters.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)
        max_detail_length: Maximum length of the detail field

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.config_missing("app", "build/potengine/app/domain.cfg")
        >>> print(formatter.format(diagnostic))
        error[CONFIG_MISSING]: No domain configuration for build unit 'app'
          --> build/potengine/app/domain.cfg
          = help: Call ConfigStore.write() for this build unit before any other pipeline step

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        CONFIG_MISSING: No domain configuration for build unit 'app'
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    max_detail_length: int = 2000

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity
        if self.color:
            ansi = "1;31" if severity == "error" else "1;33"
            severity_str = f"\033[{ansi}m{severity}\033[0m"
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.location:
            parts.append(f"  --> {diagnostic.location}")

        if diagnostic.tool:
            parts.append(f"  = tool: {diagnostic.tool}")

        if diagnostic.detail:
            detail = self._truncate(diagnostic.detail)
            # Keep multi-line tool output aligned under the marker
            indented = detail.replace("\n", "\n    ")
            parts.append(f"  = output: {indented}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {diagnostic.message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        if diagnostic.location:
            data["location"] = diagnostic.location
        if diagnostic.tool:
            data["tool"] = diagnostic.tool
        if diagnostic.detail:
            data["detail"] = self._truncate(diagnostic.detail)
        if diagnostic.hint:
            data["hint"] = diagnostic.hint
        return json.dumps(data, ensure_ascii=False)

    def _truncate(self, text: str) -> str:
        if len(text) > self.max_detail_length:
            return text[: self.max_detail_length] + "..."
        return text
