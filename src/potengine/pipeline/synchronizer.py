"""Template synchronizer: keeps each language's catalog source in line with the template.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from potengine.diagnostics import ErrorTemplate, MissingArtifactError
from potengine.enums import SyncAction

if TYPE_CHECKING:
    from potengine.config import BuildLayout, DomainConfig
    from potengine.tools import CatalogTool
    from potengine.types import LocaleCode

__all__ = ["TemplateSynchronizer"]

logger = logging.getLogger(__name__)


class TemplateSynchronizer:
    """Reconciles catalog sources against the template through a CatalogTool.

    For a language with an existing catalog source, the tool's merge
    operation pulls in new template entries, keeps existing translations, and
    flags entries no longer in the template as obsolete. Without a catalog
    source, the tool's init operation creates one with every template entry
    untranslated.

    Tool failures (ExternalToolMissingError, ExternalToolFailedError) are
    fatal and propagate unchanged.
    """

    __slots__ = ("_config", "_layout", "_tool")

    def __init__(self, config: DomainConfig, layout: BuildLayout, tool: CatalogTool) -> None:
        """Initialize synchronizer.

        Args:
            config: Domain configuration
            layout: Artifact layout
            tool: Catalog tool providing merge and init
        """
        self._config = config
        self._layout = layout
        self._tool = tool

    def sync(self, language: LocaleCode) -> SyncAction:
        """Synchronize one language's catalog source with the template.

        Args:
            language: Configured language code

        Returns:
            MERGED if an existing source was updated, INITIALIZED if a new
            source was created

        Raises:
            ValueError: If language is not configured
            MissingArtifactError: If no template has been merged yet
            ExternalToolMissingError: If the tool cannot be started
            ExternalToolFailedError: If the tool reports failure
        """
        self._config.require_language(language)
        domain = self._config.domain
        template = self._layout.template_path(domain)
        if not template.is_file():
            diagnostic = ErrorTemplate.template_missing(domain, str(template))
            raise MissingArtifactError(diagnostic, language=None, expected_path=str(template))

        source = self._layout.catalog_source_path(language)
        if source.is_file():
            text = self._tool.merge(source, template)
            action = SyncAction.MERGED
        else:
            text = self._tool.init(template, language)
            action = SyncAction.INITIALIZED

        source.parent.mkdir(parents=True, exist_ok=True)
        source.write_text(text, encoding="utf-8")
        logger.info("Catalog source %s for %s: %s", action, language, source)
        return action

    def sync_all(self) -> dict[LocaleCode, SyncAction]:
        """Synchronize every configured language, in configured order.

        Stops at the first failure.
        """
        return {language: self.sync(language) for language in self._config.languages}
