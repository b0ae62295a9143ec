"""Catalog tools: merge, init, and compile behind one protocol.

Submodules:
    base       - CatalogTool protocol
    gettext    - GettextTool (msgmerge / msginit / msgfmt child processes)
    babel_tool - BabelCatalogTool (in-process, babel.messages)

Python 3.13+.
"""

from potengine.tools.babel_tool import BabelCatalogTool
from potengine.tools.base import CatalogTool
from potengine.tools.gettext import GettextTool

__all__ = [
    "BabelCatalogTool",
    "CatalogTool",
    "GettextTool",
]
