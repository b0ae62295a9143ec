"""Build pipeline orchestration for one domain.

LocalizationPipeline threads a single DomainConfig value through every
stage: record and merge messages into the template, synchronize catalog
sources, compile them, and load the compiled catalogs.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from potengine.pipeline.compiler import CatalogCompiler
from potengine.pipeline.loader import CatalogLoader
from potengine.pipeline.synchronizer import TemplateSynchronizer
from potengine.template import MessageRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from potengine.config import BuildLayout, ConfigStore, DomainConfig
    from potengine.enums import RecordStatus, SyncAction
    from potengine.runtime import CatalogSet
    from potengine.template import MergeSummary, MessageRecord
    from potengine.tools import CatalogTool
    from potengine.types import LocaleCode

__all__ = ["BuildSummary", "LocalizationPipeline"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuildSummary:
    """Outcome of one LocalizationPipeline.build() call.

    Attributes:
        records: Count of records per RecordStatus
        merge: Template merge result
        synced: Sync action per language (empty when emit_source is off)
        compiled: Compiled catalog path per language (empty when emit_binary is off)
    """

    records: dict[RecordStatus, int]
    merge: MergeSummary
    synced: dict[LocaleCode, SyncAction] = field(default_factory=dict)
    compiled: dict[LocaleCode, Path] = field(default_factory=dict)


class LocalizationPipeline:
    """Runs the build stages of one domain in order.

    The configuration's emit_source and emit_binary toggles decide whether
    build() synchronizes and compiles. Stage objects are also exposed for
    callers that drive stages individually; those always act when called.

    Example:
        >>> layout = BuildLayout(Path("build"), Path("po"))
        >>> store = ConfigStore(layout, "app")
        >>> config = store.write("app", ["fr"])
        >>> pipeline = LocalizationPipeline.from_store(store, layout, BabelCatalogTool())
        >>> summary = pipeline.build([MessageRecord("Hello {}!")])
        >>> translate(pipeline.load().catalog("fr"), "Hello {}!", ["World"])
        ('Hello World!', ())
    """

    __slots__ = ("_compiler", "_config", "_loader", "_registry", "_synchronizer")

    def __init__(
        self,
        config: DomainConfig,
        layout: BuildLayout,
        tool: CatalogTool,
        *,
        build_root: Path | None = None,
    ) -> None:
        """Initialize pipeline.

        Args:
            config: Domain configuration
            layout: Artifact layout
            tool: Catalog tool used for sync and compile
            build_root: Root of the build tree for location comments
        """
        self._config = config
        self._registry = MessageRegistry(config, layout, build_root=build_root)
        self._synchronizer = TemplateSynchronizer(config, layout, tool)
        self._compiler = CatalogCompiler(config, layout, tool)
        self._loader = CatalogLoader(config, layout)

    @classmethod
    def from_store(
        cls,
        store: ConfigStore,
        layout: BuildLayout,
        tool: CatalogTool,
        *,
        build_root: Path | None = None,
    ) -> LocalizationPipeline:
        """Create a pipeline from a persisted configuration, read once.

        Raises:
            ConfigMissingError: If the configuration was never written
            ConfigInvalidError: If the persisted configuration is malformed
        """
        return cls(store.read(), layout, tool, build_root=build_root)

    @property
    def config(self) -> DomainConfig:
        """Domain configuration shared by every stage."""
        return self._config

    @property
    def registry(self) -> MessageRegistry:
        return self._registry

    @property
    def synchronizer(self) -> TemplateSynchronizer:
        return self._synchronizer

    @property
    def compiler(self) -> CatalogCompiler:
        return self._compiler

    def build(self, records: Iterable[MessageRecord]) -> BuildSummary:
        """Record all messages, merge once, then sync and compile as configured.

        Raises:
            ValueError: If a record belongs to another domain
            MissingArtifactError: If sync finds no template
            ExternalToolMissingError: If the catalog tool cannot be started
            ExternalToolFailedError: If a sync tool call fails
            CompileError: If compilation fails
        """
        counts = self._registry.record_all(records)
        merge = self._registry.merge()

        synced: dict[LocaleCode, SyncAction] = {}
        if self._config.emit_source:
            synced = self._synchronizer.sync_all()
        else:
            logger.debug("Catalog source sync disabled for domain %s", self._config.domain)

        compiled: dict[LocaleCode, Path] = {}
        if self._config.emit_binary:
            compiled = self._compiler.compile_all()
        else:
            logger.debug("Catalog compilation disabled for domain %s", self._config.domain)

        logger.info(
            "Build finished for domain %s: %d new entries, %d synced, %d compiled",
            self._config.domain,
            merge.appended_count,
            len(synced),
            len(compiled),
        )
        return BuildSummary(records=counts, merge=merge, synced=synced, compiled=compiled)

    def load(self) -> CatalogSet:
        """Load every configured language's compiled catalog.

        Raises:
            MissingArtifactError: If a compiled catalog does not exist
            CorruptCatalogError: If a compiled catalog cannot be parsed
        """
        return self._loader.load_all()
