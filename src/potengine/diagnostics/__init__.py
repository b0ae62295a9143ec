"""Diagnostic system for potengine errors.

Provides structured error diagnostics with codes, locations, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CompileError,
    ConfigInvalidError,
    ConfigMissingError,
    CorruptCatalogError,
    ExternalToolError,
    ExternalToolFailedError,
    ExternalToolMissingError,
    FormatError,
    InvalidPositionalArgumentError,
    MissingArgumentError,
    MissingArtifactError,
    PotEngineError,
    UnmatchedDelimiterError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CompileError",
    "ConfigInvalidError",
    "ConfigMissingError",
    "CorruptCatalogError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "ExternalToolError",
    "ExternalToolFailedError",
    "ExternalToolMissingError",
    "FormatError",
    "InvalidPositionalArgumentError",
    "MissingArgumentError",
    "MissingArtifactError",
    "OutputFormat",
    "PotEngineError",
    "UnmatchedDelimiterError",
]
