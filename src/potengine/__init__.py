"""potengine - gettext-style localization build pipeline.

Accumulates translatable messages discovered at build time into a message
template, keeps per-language catalog sources in sync with it, compiles them,
loads the compiled catalogs, and substitutes positional arguments into the
translated patterns at runtime.

Public API:
    ConfigStore, DomainConfig, BuildLayout - Per-build-unit configuration
    MessageRegistry, MessageRecord, SourceLocation - Template merge engine
    TemplateSynchronizer, CatalogCompiler, CatalogLoader - Pipeline stages
    LocalizationPipeline - All stages driven by one configuration value
    GettextTool, BabelCatalogTool - Catalog tool implementations
    CatalogSet, translate, translate_plural - Runtime lookup and formatting
    try_format, format_pattern - Positional format engine

Exceptions:
    PotEngineError - Base exception class
    ConfigMissingError - Configuration read before it was written
    ExternalToolMissingError, ExternalToolFailedError - Catalog tool failures
    CompileError - Catalog compilation failures
    MissingArtifactError - Required build artifact absent
    FormatError - Runtime pattern formatting errors

Submodules:
    potengine.diagnostics - Error codes, diagnostics, exception hierarchy
    potengine.template - Message records, template entries, merge engine
    potengine.tools - CatalogTool protocol and implementations
    potengine.pipeline - Synchronizer, compiler, loader, orchestrator
    potengine.runtime - Catalog set, translation helpers, format engine
"""

from .config import BuildLayout, ConfigStore, DomainConfig
from .diagnostics import (
    CompileError,
    ConfigMissingError,
    ExternalToolFailedError,
    ExternalToolMissingError,
    FormatError,
    MissingArtifactError,
    PotEngineError,
)
from .enums import RecordStatus, SyncAction
from .pipeline import CatalogCompiler, CatalogLoader, LocalizationPipeline, TemplateSynchronizer
from .runtime import CatalogSet, format_pattern, translate, translate_plural, try_format
from .template import MessageRecord, MessageRegistry, SourceLocation
from .tools import BabelCatalogTool, CatalogTool, GettextTool

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("potengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelCatalogTool",
    "BuildLayout",
    "CatalogCompiler",
    "CatalogLoader",
    "CatalogSet",
    "CatalogTool",
    "CompileError",
    "ConfigMissingError",
    "ConfigStore",
    "DomainConfig",
    "ExternalToolFailedError",
    "ExternalToolMissingError",
    "FormatError",
    "GettextTool",
    "LocalizationPipeline",
    "MessageRecord",
    "MessageRegistry",
    "MissingArtifactError",
    "PotEngineError",
    "RecordStatus",
    "SourceLocation",
    "SyncAction",
    "TemplateSynchronizer",
    "__version__",
    "format_pattern",
    "translate",
    "translate_plural",
    "try_format",
]
