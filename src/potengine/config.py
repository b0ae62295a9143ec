"""Domain configuration store and build artifact layout.

A DomainConfig is written once per build unit by an explicit init call
(ConfigStore.write) and read once at the start of every later process. The
resulting value is then passed to every pipeline stage; no stage re-reads it.

Persistence format (plain text, one field per line):

    <domain>
    <emit-source: true|false>
    <emit-binary: true|false>
    <language>
    <language>
    ...

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from potengine.constants import (
    ARTIFACT_DIR_NAME,
    COMPILED_CATEGORY,
    COMPILED_DIR_NAME,
    COMPILED_SUFFIX,
    CONFIG_FALSE,
    CONFIG_FILE_NAME,
    CONFIG_TRUE,
    SOURCE_SUFFIX,
    TEMPLATE_SUFFIX,
)
from potengine.diagnostics import ConfigInvalidError, ConfigMissingError, ErrorTemplate
from potengine.locale_utils import validate_identifier, validate_language_code
from potengine.types import BuildUnit, DomainName, LocaleCode

__all__ = ["BuildLayout", "ConfigStore", "DomainConfig"]

logger = logging.getLogger(__name__)

# domain, emit-source, emit-binary
_FIXED_FIELDS: int = 3


@dataclass(frozen=True, slots=True)
class DomainConfig:
    """Per-build-unit localization settings.

    Attributes:
        domain: Gettext domain name
        languages: Target language codes in configured order
        emit_source: Keep per-language catalog sources in sync with the template
        emit_binary: Compile catalog sources into binary catalogs
    """

    domain: DomainName
    languages: tuple[LocaleCode, ...]
    emit_source: bool = True
    emit_binary: bool = True

    def __post_init__(self) -> None:
        """Validate invariants.

        Raises:
            ValueError: If the domain is not a valid path component or a
                language code is invalid or repeated
        """
        validate_identifier(self.domain, "Domain name")
        seen: set[str] = set()
        for language in self.languages:
            validate_language_code(language)
            if language in seen:
                msg = f"Language '{language}' configured more than once"
                raise ValueError(msg)
            seen.add(language)

    def has_language(self, language: LocaleCode) -> bool:
        """Check whether a language is configured."""
        return language in self.languages

    def require_language(self, language: LocaleCode) -> None:
        """Raise ValueError unless the language is configured."""
        if language not in self.languages:
            msg = f"Language '{language}' not configured for domain '{self.domain}'"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class BuildLayout:
    """Where pipeline artifacts live.

    Example:
        >>> layout = BuildLayout(Path("build"), Path("po"))
        >>> layout.template_path("app")
        PosixPath('po/app.pot')
        >>> layout.compiled_catalog_path("app", "fr")
        PosixPath('build/locale/fr/LC_MESSAGES/app.mo')

    Attributes:
        artifact_root: Build artifact directory (config, compiled catalogs)
        source_dir: Directory holding the template and editable catalog sources
    """

    artifact_root: Path
    source_dir: Path

    def config_path(self, build_unit: BuildUnit) -> Path:
        """Persisted configuration of a build unit."""
        return self.artifact_root / ARTIFACT_DIR_NAME / build_unit / CONFIG_FILE_NAME

    def template_path(self, domain: DomainName) -> Path:
        """Message template of a domain."""
        return self.source_dir / f"{domain}{TEMPLATE_SUFFIX}"

    def catalog_source_path(self, language: LocaleCode) -> Path:
        """Editable catalog source of a language."""
        return self.source_dir / f"{language}{SOURCE_SUFFIX}"

    def compiled_catalog_dir(self) -> Path:
        """Root of compiled catalogs (the gettext ``localedir``)."""
        return self.artifact_root / COMPILED_DIR_NAME

    def compiled_catalog_path(self, domain: DomainName, language: LocaleCode) -> Path:
        """Compiled catalog keyed by (domain, language)."""
        return (
            self.compiled_catalog_dir()
            / language
            / COMPILED_CATEGORY
            / f"{domain}{COMPILED_SUFFIX}"
        )


class ConfigStore:
    """Persists one DomainConfig per build unit.

    write() must be called before read(); every other pipeline component
    requires the DomainConfig that read() returns. Reading before writing is
    a build-order violation and raises ConfigMissingError rather than
    falling back to defaults.

    Example:
        >>> store = ConfigStore(BuildLayout(Path("build"), Path("po")), "app")
        >>> store.write("app", ["fr", "en"])
        DomainConfig(domain='app', languages=('fr', 'en'), emit_source=True, emit_binary=True)
        >>> store.read().languages
        ('fr', 'en')
    """

    __slots__ = ("_build_unit", "_path")

    def __init__(self, layout: BuildLayout, build_unit: BuildUnit) -> None:
        """Initialize store for a build unit.

        Args:
            layout: Artifact layout
            build_unit: Build unit identity (single path component)

        Raises:
            ValueError: If build_unit is not a valid path component
        """
        validate_identifier(build_unit, "Build unit")
        self._build_unit = build_unit
        self._path = layout.config_path(build_unit)

    @property
    def path(self) -> Path:
        """Configuration file path for this build unit."""
        return self._path

    def exists(self) -> bool:
        """Check whether a configuration has been written."""
        return self._path.is_file()

    def write(
        self,
        domain: DomainName,
        languages: Iterable[LocaleCode],
        *,
        emit_source: bool = True,
        emit_binary: bool = True,
    ) -> DomainConfig:
        """Create or overwrite the configuration of this build unit.

        Idempotent: writing the same values twice produces the same file.

        Args:
            domain: Gettext domain name
            languages: Target language codes in order
            emit_source: Keep catalog sources in sync with the template
            emit_binary: Compile catalog sources

        Returns:
            The validated DomainConfig that was persisted

        Raises:
            ValueError: If the domain or a language code is invalid
        """
        config = DomainConfig(
            domain=domain,
            languages=tuple(languages),
            emit_source=emit_source,
            emit_binary=emit_binary,
        )
        lines = [
            config.domain,
            _format_flag(config.emit_source),
            _format_flag(config.emit_binary),
            *config.languages,
        ]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info(
            "Domain configuration written for build unit %s: domain=%s, languages=%s",
            self._build_unit,
            config.domain,
            ",".join(config.languages),
        )
        return config

    def read(self) -> DomainConfig:
        """Read the configuration written by a previous write().

        Returns:
            Persisted DomainConfig

        Raises:
            ConfigMissingError: If write() never ran for this build unit
            ConfigInvalidError: If the persisted file is malformed
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            diagnostic = ErrorTemplate.config_missing(self._build_unit, str(self._path))
            raise ConfigMissingError(
                diagnostic, build_unit=self._build_unit, path=str(self._path)
            ) from e

        lines = [line.strip() for line in text.splitlines()]
        # Tolerate a trailing blank line but nothing else
        while lines and not lines[-1]:
            lines.pop()
        if len(lines) < _FIXED_FIELDS:
            self._invalid(f"expected at least {_FIXED_FIELDS} lines, got {len(lines)}")

        domain, emit_source, emit_binary, *languages = lines
        try:
            config = DomainConfig(
                domain=domain,
                languages=tuple(languages),
                emit_source=self._parse_flag(emit_source, "emit-source"),
                emit_binary=self._parse_flag(emit_binary, "emit-binary"),
            )
        except ValueError as e:
            self._invalid(str(e), cause=e)

        logger.debug("Domain configuration read from %s", self._path)
        return config

    def _parse_flag(self, value: str, name: str) -> bool:
        if value == CONFIG_TRUE:
            return True
        if value == CONFIG_FALSE:
            return False
        self._invalid(f"{name} flag must be '{CONFIG_TRUE}' or '{CONFIG_FALSE}', got {value!r}")

    def _invalid(self, reason: str, cause: Exception | None = None) -> NoReturn:
        diagnostic = ErrorTemplate.config_invalid(str(self._path), reason)
        raise ConfigInvalidError(diagnostic, path=str(self._path)) from cause


def _format_flag(value: bool) -> str:
    return CONFIG_TRUE if value else CONFIG_FALSE
