"""Runtime side: catalog set, translation helpers, and the format engine.

Python 3.13+.
"""

from potengine.runtime.catalogs import CatalogSet, translate, translate_plural
from potengine.runtime.format import FormatResult, format_pattern, try_format

__all__ = [
    "CatalogSet",
    "FormatResult",
    "format_pattern",
    "translate",
    "translate_plural",
    "try_format",
]
