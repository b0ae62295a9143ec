"""Runtime catalog set and translation helpers.

A translation call is a catalog lookup followed by positional formatting:
the lookup result (or the source text, when untranslated) is the pattern
handed to the format engine.

Python 3.13+. Catalogs are babel.support.Translations instances.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from potengine.runtime.format import format_pattern

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from babel.support import NullTranslations

    from potengine.runtime.format import FormatResult
    from potengine.types import DomainName, LocaleCode, MessageContext, MessageId

__all__ = ["CatalogSet", "translate", "translate_plural"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogSet:
    """Ordered, immutable (language, catalog) pairs for one domain.

    Built once by CatalogLoader.load_all(); one pair per configured language,
    in configured order. Safe to share between threads.

    Attributes:
        domain: Domain the catalogs belong to
        entries: (language, catalog) pairs
    """

    domain: DomainName
    entries: tuple[tuple[LocaleCode, NullTranslations], ...]

    @property
    def languages(self) -> tuple[LocaleCode, ...]:
        """Language codes in configured order."""
        return tuple(language for language, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[tuple[LocaleCode, NullTranslations]]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> tuple[LocaleCode, NullTranslations]:
        return self.entries[index]

    def __contains__(self, language: object) -> bool:
        return any(code == language for code, _ in self.entries)

    def catalog(self, language: LocaleCode) -> NullTranslations:
        """Get the catalog of a loaded language.

        Raises:
            ValueError: If language is not part of this set
        """
        for code, catalog in self.entries:
            if code == language:
                return catalog
        msg = f"No catalog loaded for language '{language}' in domain '{self.domain}'"
        raise ValueError(msg)

    def translate(
        self,
        language: LocaleCode,
        message: MessageId,
        args: Sequence[object] = (),
        *,
        context: MessageContext | None = None,
    ) -> FormatResult:
        """translate() against the catalog of language."""
        return translate(self.catalog(language), message, args, context=context)

    def translate_plural(
        self,
        language: LocaleCode,
        singular: MessageId,
        plural: MessageId,
        count: int,
        args: Sequence[object] = (),
        *,
        context: MessageContext | None = None,
    ) -> FormatResult:
        """translate_plural() against the catalog of language."""
        return translate_plural(
            self.catalog(language), singular, plural, count, args, context=context
        )


def translate(
    catalog: NullTranslations,
    message: MessageId,
    args: Sequence[object] = (),
    *,
    context: MessageContext | None = None,
) -> FormatResult:
    """Look up message and format the result with args.

    Args:
        catalog: Loaded catalog
        message: Source text (msgid)
        args: Positional arguments
        context: Optional disambiguating context (msgctxt)

    Returns:
        Tuple of (text, format errors). Errors never raise.
    """
    if context is None:
        pattern = catalog.gettext(message)
    else:
        pattern = catalog.pgettext(context, message)
    return _format(pattern, args)


def translate_plural(
    catalog: NullTranslations,
    singular: MessageId,
    plural: MessageId,
    count: int,
    args: Sequence[object] = (),
    *,
    context: MessageContext | None = None,
) -> FormatResult:
    """Look up a plural message by count and format the result.

    The count is positional argument 0 and args follow it, so "{} items"
    renders the count.

    Returns:
        Tuple of (text, format errors). Errors never raise.
    """
    if context is None:
        pattern = catalog.ngettext(singular, plural, count)
    else:
        pattern = catalog.npgettext(context, singular, plural, count)
    return _format(pattern, (count, *args))


def _format(pattern: str, args: Sequence[object]) -> FormatResult:
    text, errors = format_pattern(pattern, args)
    for error in errors:
        logger.warning("Format error in %r: %s", pattern, error)
    return text, errors
