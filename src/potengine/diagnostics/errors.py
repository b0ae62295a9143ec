"""potengine exception hierarchy with structured diagnostics.

Build-time errors (configuration, catalog tools, artifacts) are fatal and
propagate to abort the build. Format errors are the only category callers
are expected to handle: the non-raising formatting API returns them.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PotEngineError(Exception):
    """Base exception for all potengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PotEngineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigMissingError(PotEngineError):
    """Configuration read attempted before it was written.

    Build-order violation: ConfigStore.write() must run before the registry,
    synchronizer, compiler, or loader.

    Attributes:
        build_unit: Build unit whose configuration is missing
        path: Expected configuration file path
    """

    def __init__(self, message: str | Diagnostic, *, build_unit: str, path: str) -> None:
        super().__init__(message)
        self.build_unit = build_unit
        self.path = path


class ConfigInvalidError(PotEngineError):
    """Persisted configuration cannot be parsed.

    Attributes:
        path: Configuration file path
    """

    def __init__(self, message: str | Diagnostic, *, path: str) -> None:
        super().__init__(message)
        self.path = path


# ---------------------------------------------------------------------------
# Catalog tools
# ---------------------------------------------------------------------------


class ExternalToolError(PotEngineError):
    """Base for catalog tool failures.

    Attributes:
        tool: Executable or operation name
    """

    def __init__(self, message: str | Diagnostic, *, tool: str) -> None:
        super().__init__(message)
        self.tool = tool


class ExternalToolMissingError(ExternalToolError):
    """Catalog tool could not be spawned (not installed, not executable)."""


class ExternalToolFailedError(ExternalToolError):
    """Catalog tool ran and reported failure.

    Attributes:
        tool: Executable or operation name
        exit_status: Process exit status (non-zero)
        stderr: Captured standard error text
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        tool: str,
        exit_status: int,
        stderr: str,
    ) -> None:
        super().__init__(message, tool=tool)
        self.exit_status = exit_status
        self.stderr = stderr


class CompileError(PotEngineError):
    """Catalog source could not be compiled.

    Raised when the catalog source is absent (a prior sync was skipped) or
    the compile tool failed; in the latter case the tool error is chained
    as __cause__.

    Attributes:
        language: Language code
        source_path: Catalog source path
    """

    def __init__(self, message: str | Diagnostic, *, language: str, source_path: str) -> None:
        super().__init__(message)
        self.language = language
        self.source_path = source_path


# ---------------------------------------------------------------------------
# Artifacts
# ---------------------------------------------------------------------------


class MissingArtifactError(PotEngineError):
    """A required pipeline artifact does not exist.

    The diagnostic hint names the pipeline step that produces the artifact.

    Attributes:
        language: Language the artifact belongs to (None for the template)
        expected_path: Exact path the artifact was expected at
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        language: str | None,
        expected_path: str,
    ) -> None:
        super().__init__(message)
        self.language = language
        self.expected_path = expected_path


class CorruptCatalogError(PotEngineError):
    """A compiled catalog exists but cannot be parsed.

    Attributes:
        language: Language code
        path: Compiled catalog path
    """

    def __init__(self, message: str | Diagnostic, *, language: str, path: str) -> None:
        super().__init__(message)
        self.language = language
        self.path = path


# ---------------------------------------------------------------------------
# Format engine
# ---------------------------------------------------------------------------


class FormatError(PotEngineError):
    """Runtime placeholder substitution failure.

    Recoverable: depends on runtime arguments that are unknowable at build
    time. format_pattern() returns these instead of raising.
    """


class UnmatchedDelimiterError(FormatError):
    """'{' without a matching '}', or '}' without a preceding '{'.

    Attributes:
        position: Character offset of the offending delimiter
    """

    def __init__(self, message: str | Diagnostic, *, position: int) -> None:
        super().__init__(message)
        self.position = position


class InvalidPositionalArgumentError(FormatError):
    """Placeholder body is neither empty nor a non-negative integer literal.

    Attributes:
        body: Text between the braces
        position: Character offset of the opening '{'
    """

    def __init__(self, message: str | Diagnostic, *, body: str, position: int) -> None:
        super().__init__(message)
        self.body = body
        self.position = position


class MissingArgumentError(FormatError):
    """Placeholder index has no corresponding argument.

    Attributes:
        index: Resolved positional index
    """

    def __init__(self, message: str | Diagnostic, *, index: int) -> None:
        super().__init__(message)
        self.index = index
