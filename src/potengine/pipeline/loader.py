"""Catalog loader: compiled catalogs -> runtime CatalogSet.

Loading is eager and one-shot. Every configured language must have a
compiled catalog; the first missing one aborts the load and nothing is
returned.

Python 3.13+. Depends on Babel (babel.support.Translations) for MO parsing.
"""

from __future__ import annotations

import logging
import struct
from typing import TYPE_CHECKING

from babel.support import Translations

from potengine.diagnostics import CorruptCatalogError, ErrorTemplate, MissingArtifactError
from potengine.runtime.catalogs import CatalogSet

if TYPE_CHECKING:
    from pathlib import Path

    from potengine.config import BuildLayout, DomainConfig
    from potengine.types import LocaleCode

__all__ = ["CatalogLoader"]

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Loads every configured language's compiled catalog."""

    __slots__ = ("_config", "_layout")

    def __init__(self, config: DomainConfig, layout: BuildLayout) -> None:
        """Initialize loader.

        Args:
            config: Domain configuration
            layout: Artifact layout
        """
        self._config = config
        self._layout = layout

    def load_all(self) -> CatalogSet:
        """Load all compiled catalogs in configured language order.

        Every artifact is checked before any is parsed, so a missing one is
        reported without doing partial work.

        Returns:
            Immutable CatalogSet with one (language, catalog) pair per language

        Raises:
            MissingArtifactError: If a compiled catalog does not exist; names
                the language, the exact expected path, and the steps to run
            CorruptCatalogError: If a compiled catalog cannot be parsed
        """
        domain = self._config.domain
        located: list[tuple[LocaleCode, Path]] = []
        for language in self._config.languages:
            path = self._layout.compiled_catalog_path(domain, language)
            if not path.is_file():
                diagnostic = ErrorTemplate.compiled_catalog_missing(language, str(path))
                raise MissingArtifactError(diagnostic, language=language, expected_path=str(path))
            located.append((language, path))

        entries = tuple((language, self._parse(language, path)) for language, path in located)
        logger.info(
            "Loaded %d compiled catalog(s) for domain %s: %s",
            len(entries),
            domain,
            ",".join(language for language, _ in entries),
        )
        return CatalogSet(domain=domain, entries=entries)

    def _parse(self, language: LocaleCode, path: Path) -> Translations:
        try:
            with path.open("rb") as fp:
                return Translations(fp, domain=self._config.domain)
        except (OSError, struct.error, ValueError) as e:
            diagnostic = ErrorTemplate.compiled_catalog_corrupt(language, str(path), str(e))
            raise CorruptCatalogError(diagnostic, language=language, path=str(path)) from e
