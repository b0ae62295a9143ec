"""Catalog compiler: catalog source -> compiled catalog.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from potengine.diagnostics import CompileError, ErrorTemplate, ExternalToolError

if TYPE_CHECKING:
    from pathlib import Path

    from potengine.config import BuildLayout, DomainConfig
    from potengine.tools import CatalogTool
    from potengine.types import LocaleCode

__all__ = ["CatalogCompiler"]

logger = logging.getLogger(__name__)


class CatalogCompiler:
    """Compiles catalog sources into binary catalogs at deterministic paths.

    The compiled catalog of (domain, language) always lands at
    BuildLayout.compiled_catalog_path(domain, language), the location the
    CatalogLoader reads from.
    """

    __slots__ = ("_config", "_layout", "_tool")

    def __init__(self, config: DomainConfig, layout: BuildLayout, tool: CatalogTool) -> None:
        """Initialize compiler.

        Args:
            config: Domain configuration
            layout: Artifact layout
            tool: Catalog tool providing compile
        """
        self._config = config
        self._layout = layout
        self._tool = tool

    def compile(self, language: LocaleCode) -> Path:
        """Compile one language's catalog source.

        Args:
            language: Configured language code

        Returns:
            Path of the written compiled catalog

        Raises:
            ValueError: If language is not configured
            CompileError: If the catalog source is absent (sync was skipped)
                or the tool failed (tool error chained as __cause__)
        """
        self._config.require_language(language)
        source = self._layout.catalog_source_path(language)
        if not source.is_file():
            diagnostic = ErrorTemplate.compile_source_missing(language, str(source))
            raise CompileError(diagnostic, language=language, source_path=str(source))

        try:
            data = self._tool.compile(source)
        except ExternalToolError as e:
            diagnostic = ErrorTemplate.compile_failed(language, str(source), str(e))
            raise CompileError(diagnostic, language=language, source_path=str(source)) from e

        target = self._layout.compiled_catalog_path(self._config.domain, language)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.info("Compiled catalog for %s: %s (%d bytes)", language, target, len(data))
        return target

    def compile_all(self) -> dict[LocaleCode, Path]:
        """Compile every configured language, in configured order.

        Stops at the first failure.
        """
        return {language: self.compile(language) for language in self._config.languages}
