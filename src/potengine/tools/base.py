"""Catalog tool protocol.

The synchronizer and compiler never build command lines themselves; they
call one of three capabilities on a CatalogTool. Implementations:

    GettextTool       - GNU gettext child processes (msgmerge, msginit, msgfmt)
    BabelCatalogTool  - the same operations in-process with babel.messages

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from potengine.types import CatalogSourceText, LocaleCode

__all__ = ["CatalogTool"]


class CatalogTool(Protocol):
    """Protocol for the merge / init / compile capability set.

    Structural: any object with the three methods qualifies, including
    in-memory fakes that never spawn processes.

    Failure contract: implementations raise ExternalToolMissingError when the
    tool cannot be started and ExternalToolFailedError (tool, exit_status,
    stderr) when it reports failure. Nothing is written to disk by the tool;
    callers persist the returned content.

    Example:
        >>> class EchoTool:
        ...     def merge(self, existing_source_path, template_path):
        ...         return existing_source_path.read_text(encoding="utf-8")
        ...     def init(self, template_path, locale):
        ...         return template_path.read_text(encoding="utf-8")
        ...     def compile(self, source_path):
        ...         return b""
        >>> synchronizer = TemplateSynchronizer(config, layout, EchoTool())
    """

    def merge(self, existing_source_path: Path, template_path: Path) -> CatalogSourceText:
        """Pull new template entries into an existing catalog source.

        Existing translations are preserved; entries no longer in the
        template are flagged obsolete, not deleted.

        Args:
            existing_source_path: Current catalog source (<lang>.po)
            template_path: Message template (<domain>.pot)

        Returns:
            Updated catalog source text

        Raises:
            ExternalToolMissingError: If the tool cannot be started
            ExternalToolFailedError: If the tool reports failure
        """

    def init(self, template_path: Path, locale: LocaleCode) -> CatalogSourceText:
        """Create a fresh catalog source from the template.

        Every template entry is present and untranslated; the header carries
        the language and its plural rule.

        Args:
            template_path: Message template (<domain>.pot)
            locale: Target language code

        Returns:
            New catalog source text

        Raises:
            ExternalToolMissingError: If the tool cannot be started
            ExternalToolFailedError: If the tool reports failure
        """

    def compile(self, source_path: Path) -> bytes:
        """Convert a catalog source into a binary compiled catalog.

        Args:
            source_path: Catalog source (<lang>.po)

        Returns:
            Compiled catalog bytes (GNU MO format)

        Raises:
            ExternalToolMissingError: If the tool cannot be started
            ExternalToolFailedError: If the tool reports failure
        """
