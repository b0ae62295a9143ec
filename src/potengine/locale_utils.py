"""Locale utilities for language code validation and normalization.

Language codes end up in file names (``<lang>.po``) and directory names
(``locale/<lang>/LC_MESSAGES``), so they are validated at the configuration
boundary for both path safety and CLDR validity.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "validate_identifier",
    "validate_language_code",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (pt-BR), while gettext and Babel use underscores (pt_BR).

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("fr")
        'fr'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def validate_identifier(value: str, what: str) -> None:
    """Validate a value that becomes a single path component.

    Args:
        value: Domain name, build unit, or language code
        what: Name used in the error message

    Raises:
        ValueError: If value is empty, padded, or contains path syntax
    """
    if not value:
        msg = f"{what} cannot be empty"
        raise ValueError(msg)
    if value.strip() != value:
        msg = f"{what} contains leading/trailing whitespace: {value!r}"
        raise ValueError(msg)
    if ".." in value:
        msg = f"Path traversal sequences not allowed in {what}: '{value}'"
        raise ValueError(msg)
    if "/" in value or "\\" in value:
        msg = f"Path separators not allowed in {what}: '{value}'"
        raise ValueError(msg)
    if "\n" in value or "\r" in value:
        msg = f"Line breaks not allowed in {what}: {value!r}"
        raise ValueError(msg)


def validate_language_code(language: str) -> None:
    """Validate a configured language code.

    Args:
        language: Language code (e.g., 'fr', 'pt_BR')

    Raises:
        ValueError: If the code is not path-safe or not a CLDR locale
    """
    validate_identifier(language, "Language code")
    try:
        get_babel_locale(language)
    except (UnknownLocaleError, ValueError) as e:
        msg = f"Unknown language code '{language}': {e}"
        raise ValueError(msg) from e
