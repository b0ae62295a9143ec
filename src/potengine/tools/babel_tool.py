"""In-process catalog tool built on babel.messages.

Performs the same merge / init / compile operations as GNU gettext without
spawning processes, following what ``pybabel update``, ``pybabel init``, and
``pybabel compile`` do. Useful where gettext is not installed and as a
test double for the process-based tool.

Failures are reported through the same ExternalToolFailedError contract as
GettextTool; the tool name is "babel-<operation>" and exit_status is 1.

Python 3.13+. Depends on Babel.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from io import BytesIO
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError
from babel.messages.mofile import write_mo
from babel.messages.pofile import PoFileError, read_po, write_po

from potengine.diagnostics import ErrorTemplate, ExternalToolFailedError
from potengine.enums import ToolOperation
from potengine.locale_utils import get_babel_locale

if TYPE_CHECKING:
    from pathlib import Path

    from babel import Locale
    from babel.messages.catalog import Catalog

    from potengine.types import CatalogSourceText, LocaleCode

__all__ = ["BabelCatalogTool"]

logger = logging.getLogger(__name__)

# Process-style status reported for in-process failures
_FAILURE_STATUS: int = 1


@dataclass(frozen=True, slots=True)
class BabelCatalogTool:
    """CatalogTool backed by babel.messages.

    Attributes:
        width: Line width for wrapped PO strings
        fuzzy_matching: Let merge() pre-fill new entries from similar old
            translations (marked fuzzy), as msgmerge does by default
        use_fuzzy: Include fuzzy translations when compiling
    """

    width: int = 76
    fuzzy_matching: bool = True
    use_fuzzy: bool = False

    def merge(self, existing_source_path: Path, template_path: Path) -> CatalogSourceText:
        """Update an existing catalog source against the template.

        Entries missing from the template move to the obsolete section and
        are written back as "#~" stanzas.
        """
        with _failures_as_tool_errors(ToolOperation.MERGE):
            template = _read_catalog(template_path)
            catalog = _read_catalog(existing_source_path)
            catalog.update(template, no_fuzzy_matching=not self.fuzzy_matching)
            return self._serialize(catalog)

    def init(self, template_path: Path, locale: LocaleCode) -> CatalogSourceText:
        """Create a catalog source for locale with every entry untranslated.

        Unknown locales fail instead of producing a source without plural
        rules.
        """
        with _failures_as_tool_errors(ToolOperation.INIT):
            catalog = _read_catalog(template_path, locale=get_babel_locale(locale))
            catalog.fuzzy = False
            return self._serialize(catalog)

    def compile(self, source_path: Path) -> bytes:
        """Compile a catalog source into GNU MO bytes.

        Untranslated entries are left out, so lookups fall back to the
        source text (singular or plural form by count).
        """
        with _failures_as_tool_errors(ToolOperation.COMPILE):
            catalog = _read_catalog(source_path)
            buffer = BytesIO()
            write_mo(buffer, catalog, use_fuzzy=self.use_fuzzy)
            return buffer.getvalue()

    def _serialize(self, catalog: Catalog) -> CatalogSourceText:
        buffer = BytesIO()
        write_po(buffer, catalog, width=self.width)
        return buffer.getvalue().decode(catalog.charset)


def _read_catalog(path: Path, locale: Locale | None = None) -> Catalog:
    with path.open("rb") as fp:
        return read_po(fp, locale=locale, abort_invalid=True)


@contextmanager
def _failures_as_tool_errors(operation: ToolOperation) -> Generator[None]:
    """Map Babel and I/O exceptions onto ExternalToolFailedError."""
    tool = f"babel-{operation}"
    try:
        yield
    except (OSError, PoFileError, UnknownLocaleError, ValueError) as e:
        stderr = f"{type(e).__name__}: {e}"
        logger.error("Catalog tool %s failed: %s", tool, stderr)
        diagnostic = ErrorTemplate.tool_failed(tool, _FAILURE_STATUS, stderr)
        raise ExternalToolFailedError(
            diagnostic,
            tool=tool,
            exit_status=_FAILURE_STATUS,
            stderr=stderr,
        ) from e
