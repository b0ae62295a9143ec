"""Shared constants for potengine.

Centralized file names, artifact layout names, and defaults used across the
template, pipeline, and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Artifact layout: directory and file naming
- Template header: fields written into a freshly created template
- Catalog tools: default executable names
- Format engine: placeholder delimiters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Artifact layout
    "ARTIFACT_DIR_NAME",
    "CONFIG_FILE_NAME",
    "COMPILED_DIR_NAME",
    "COMPILED_CATEGORY",
    "TEMPLATE_SUFFIX",
    "SOURCE_SUFFIX",
    "COMPILED_SUFFIX",
    # Config persistence
    "CONFIG_TRUE",
    "CONFIG_FALSE",
    # Template header
    "TEMPLATE_CHARSET",
    "TEMPLATE_HEADER_FIELDS",
    # Catalog tools
    "DEFAULT_MSGMERGE",
    "DEFAULT_MSGINIT",
    "DEFAULT_MSGFMT",
    # Format engine
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
]

# ============================================================================
# ARTIFACT LAYOUT
# ============================================================================

# <artifact_root>/potengine/<build_unit>/domain.cfg
ARTIFACT_DIR_NAME: str = "potengine"
CONFIG_FILE_NAME: str = "domain.cfg"

# <artifact_root>/locale/<language>/LC_MESSAGES/<domain>.mo
# Same shape gettext.find() and babel.support.Translations.load() expect.
COMPILED_DIR_NAME: str = "locale"
COMPILED_CATEGORY: str = "LC_MESSAGES"

TEMPLATE_SUFFIX: str = ".pot"
SOURCE_SUFFIX: str = ".po"
COMPILED_SUFFIX: str = ".mo"

# ============================================================================
# CONFIG PERSISTENCE
# ============================================================================

CONFIG_TRUE: str = "true"
CONFIG_FALSE: str = "false"

# ============================================================================
# TEMPLATE HEADER
# ============================================================================

TEMPLATE_CHARSET: str = "UTF-8"

# Written in this order into the msgid "" header stanza of a new template.
# "{domain}" is substituted with the configured domain.
TEMPLATE_HEADER_FIELDS: tuple[tuple[str, str], ...] = (
    ("Project-Id-Version", "{domain}"),
    ("MIME-Version", "1.0"),
    ("Content-Type", f"text/plain; charset={TEMPLATE_CHARSET}"),
    ("Content-Transfer-Encoding", "8bit"),
)

# ============================================================================
# CATALOG TOOLS
# ============================================================================

DEFAULT_MSGMERGE: str = "msgmerge"
DEFAULT_MSGINIT: str = "msginit"
DEFAULT_MSGFMT: str = "msgfmt"

# ============================================================================
# FORMAT ENGINE
# ============================================================================

PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"
