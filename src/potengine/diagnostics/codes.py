"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (build-order violations, corrupt config)
        2000-2999: Catalog tool errors (spawn failures, non-zero exits, compile)
        3000-3999: Artifact errors (missing or unreadable pipeline outputs)
        4000-4999: Format errors (runtime placeholder substitution)
    """

    # Configuration errors (1000-1999)
    CONFIG_MISSING = 1001
    CONFIG_INVALID = 1002

    # Catalog tool errors (2000-2999)
    TOOL_MISSING = 2001
    TOOL_FAILED = 2002
    COMPILE_SOURCE_MISSING = 2003
    COMPILE_FAILED = 2004

    # Artifact errors (3000-3999)
    TEMPLATE_MISSING = 3001
    COMPILED_CATALOG_MISSING = 3002
    COMPILED_CATALOG_CORRUPT = 3003

    # Format errors (4000-4999)
    UNMATCHED_OPEN_DELIMITER = 4001
    UNMATCHED_CLOSE_DELIMITER = 4002
    INVALID_POSITIONAL_ARGUMENT = 4003
    MISSING_ARGUMENT = 4004


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and build tooling.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error (usually the missing pipeline step)
        location: File path or pattern offset the error refers to
        tool: External tool name (tool errors)
        detail: Captured tool output or offending input (truncated by formatter)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    tool: str | None = None
    detail: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[COMPILED_CATALOG_MISSING]: Compiled catalog for 'en' not found
              --> build/locale/en/LC_MESSAGES/myapp.mo
              = help: Run the template synchronizer and catalog compiler for 'en' first

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
