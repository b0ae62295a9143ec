"""Type aliases for the build pipeline domain.

Provides semantic type aliases used throughout the package and by user code
when annotating pipeline call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import TypeAlias

__all__ = [
    "BuildUnit",
    "CatalogSourceText",
    "DomainName",
    "LocaleCode",
    "MessageContext",
    "MessageId",
]

DomainName: TypeAlias = str
"""Gettext domain grouping every message of one build unit (e.g., 'myapp')."""

BuildUnit: TypeAlias = str
"""Identity of the build unit owning a persisted configuration (e.g., 'myapp-core')."""

LocaleCode: TypeAlias = str
"""Language code as configured (e.g., 'fr', 'pt_BR')."""

MessageId: TypeAlias = str
"""Untranslated source text used as the catalog key (msgid)."""

MessageContext: TypeAlias = str
"""Disambiguating context for a message (msgctxt)."""

CatalogSourceText: TypeAlias = str
"""Raw PO/POT text."""
