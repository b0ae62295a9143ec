"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def config_missing(build_unit: str, path: str) -> Diagnostic:
        """Configuration read before it was written.

        Args:
            build_unit: Build unit whose configuration was requested
            path: Expected configuration file path

        Returns:
            Diagnostic for CONFIG_MISSING
        """
        msg = f"No domain configuration for build unit '{build_unit}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_MISSING,
            message=msg,
            hint="Call ConfigStore.write() for this build unit before any other pipeline step",
            location=path,
        )

    @staticmethod
    def config_invalid(path: str, reason: str) -> Diagnostic:
        """Persisted configuration does not follow the line format.

        Args:
            path: Configuration file path
            reason: What is wrong with the file

        Returns:
            Diagnostic for CONFIG_INVALID
        """
        msg = f"Invalid domain configuration: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INVALID,
            message=msg,
            hint="Rewrite the configuration with ConfigStore.write()",
            location=path,
        )

    @staticmethod
    def tool_missing(tool: str, reason: str) -> Diagnostic:
        """External catalog tool could not be spawned.

        Args:
            tool: Executable or operation name
            reason: OS error text

        Returns:
            Diagnostic for TOOL_MISSING
        """
        msg = f"Catalog tool '{tool}' could not be started: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TOOL_MISSING,
            message=msg,
            hint="Install GNU gettext or configure BabelCatalogTool instead",
            tool=tool,
        )

    @staticmethod
    def tool_failed(tool: str, exit_status: int, stderr: str) -> Diagnostic:
        """External catalog tool exited with a non-zero status.

        Args:
            tool: Executable or operation name
            exit_status: Process exit status
            stderr: Captured standard error text

        Returns:
            Diagnostic for TOOL_FAILED
        """
        msg = f"Catalog tool '{tool}' failed with exit status {exit_status}"
        return Diagnostic(
            code=DiagnosticCode.TOOL_FAILED,
            message=msg,
            tool=tool,
            detail=stderr.strip() or None,
        )

    @staticmethod
    def compile_source_missing(language: str, source_path: str) -> Diagnostic:
        """Compile requested for a language that was never synchronized.

        Args:
            language: Language code
            source_path: Expected catalog source path

        Returns:
            Diagnostic for COMPILE_SOURCE_MISSING
        """
        msg = f"Catalog source for '{language}' not found"
        return Diagnostic(
            code=DiagnosticCode.COMPILE_SOURCE_MISSING,
            message=msg,
            hint=f"Run the template synchronizer for '{language}' before compiling",
            location=source_path,
        )

    @staticmethod
    def compile_failed(language: str, source_path: str, reason: str) -> Diagnostic:
        """Compile tool failed for a language.

        Args:
            language: Language code
            source_path: Catalog source that failed to compile
            reason: Underlying tool error text

        Returns:
            Diagnostic for COMPILE_FAILED
        """
        msg = f"Could not compile catalog for '{language}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.COMPILE_FAILED,
            message=msg,
            hint="Fix the catalog source and compile again",
            location=source_path,
        )

    @staticmethod
    def template_missing(domain: str, template_path: str) -> Diagnostic:
        """Synchronizer run before any template was merged.

        Args:
            domain: Configured domain
            template_path: Expected template path

        Returns:
            Diagnostic for TEMPLATE_MISSING
        """
        msg = f"Message template for domain '{domain}' not found"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_MISSING,
            message=msg,
            hint="Merge the message registry into the template before synchronizing",
            location=template_path,
        )

    @staticmethod
    def compiled_catalog_missing(language: str, expected_path: str) -> Diagnostic:
        """Loader cannot find a compiled catalog.

        Args:
            language: Language code
            expected_path: Exact path the compiled catalog was expected at

        Returns:
            Diagnostic for COMPILED_CATALOG_MISSING
        """
        msg = f"Compiled catalog for '{language}' not found"
        return Diagnostic(
            code=DiagnosticCode.COMPILED_CATALOG_MISSING,
            message=msg,
            hint=(
                f"Run the template synchronizer and catalog compiler for '{language}' "
                "before loading catalogs"
            ),
            location=expected_path,
        )

    @staticmethod
    def compiled_catalog_corrupt(language: str, path: str, reason: str) -> Diagnostic:
        """Compiled catalog exists but cannot be parsed.

        Args:
            language: Language code
            path: Compiled catalog path
            reason: Parser error text

        Returns:
            Diagnostic for COMPILED_CATALOG_CORRUPT
        """
        msg = f"Compiled catalog for '{language}' is unreadable: {reason}"
        return Diagnostic(
            code=DiagnosticCode.COMPILED_CATALOG_CORRUPT,
            message=msg,
            hint=f"Recompile the catalog for '{language}'",
            location=path,
        )

    @staticmethod
    def unmatched_open_delimiter(position: int) -> Diagnostic:
        """'{' without a matching '}'.

        Args:
            position: Character offset of the '{'

        Returns:
            Diagnostic for UNMATCHED_OPEN_DELIMITER
        """
        msg = f"Unmatched '{{' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_OPEN_DELIMITER,
            message=msg,
            hint="Close the placeholder with '}'; literal braces are not supported",
            location=f"offset {position}",
        )

    @staticmethod
    def unmatched_close_delimiter(position: int) -> Diagnostic:
        """'}' without a preceding unmatched '{'.

        Args:
            position: Character offset of the '}'

        Returns:
            Diagnostic for UNMATCHED_CLOSE_DELIMITER
        """
        msg = f"Unmatched '}}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNMATCHED_CLOSE_DELIMITER,
            message=msg,
            hint="Remove the stray '}'; literal braces are not supported",
            location=f"offset {position}",
        )

    @staticmethod
    def invalid_positional_argument(body: str, position: int) -> Diagnostic:
        """Placeholder body is neither empty nor a non-negative integer.

        Args:
            body: Text between the braces
            position: Character offset of the opening '{'

        Returns:
            Diagnostic for INVALID_POSITIONAL_ARGUMENT
        """
        msg = f"Invalid positional argument '{{{body}}}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_POSITIONAL_ARGUMENT,
            message=msg,
            hint="Use '{}' or an argument index such as '{0}'",
            location=f"offset {position}",
            detail=body,
        )

    @staticmethod
    def missing_argument(index: int, provided: int) -> Diagnostic:
        """Placeholder index has no corresponding argument.

        Args:
            index: Resolved positional index
            provided: Number of arguments supplied

        Returns:
            Diagnostic for MISSING_ARGUMENT
        """
        msg = f"No argument for placeholder index {index} ({provided} provided)"
        return Diagnostic(
            code=DiagnosticCode.MISSING_ARGUMENT,
            message=msg,
            hint="Pass one argument per placeholder index used in the translation",
        )
