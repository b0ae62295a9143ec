"""Build pipeline stages after the message registry.

Submodules:
    synchronizer - TemplateSynchronizer (template -> catalog sources)
    compiler     - CatalogCompiler (catalog source -> compiled catalog)
    loader       - CatalogLoader (compiled catalogs -> CatalogSet)
    orchestrator - LocalizationPipeline, BuildSummary

Python 3.13+.
"""

from potengine.pipeline.compiler import CatalogCompiler
from potengine.pipeline.loader import CatalogLoader
from potengine.pipeline.orchestrator import BuildSummary, LocalizationPipeline
from potengine.pipeline.synchronizer import TemplateSynchronizer

__all__ = [
    "BuildSummary",
    "CatalogCompiler",
    "CatalogLoader",
    "LocalizationPipeline",
    "TemplateSynchronizer",
]
