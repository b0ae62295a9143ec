"""Message records and template entries.

A MessageRecord is what the extractor hands over for one call site. A
TemplateEntry is the deduplicated form appended to the template, rendered
with the stanza grammar shared by templates and catalog sources:

    #: <file>:<line>          (zero or more)
    msgctxt "<context>"       (optional)
    msgid "<content>"
    msgid_plural "<plural>"   (optional)
    msgstr ""                 (or msgstr[0] "" / msgstr[1] "" when plural)

Python 3.13+. Depends on Babel for PO string escaping.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import TypeAlias

from babel.messages.pofile import escape

from potengine.constants import TEMPLATE_HEADER_FIELDS
from potengine.types import DomainName, MessageContext, MessageId

__all__ = [
    "MessageKey",
    "MessageRecord",
    "SourceLocation",
    "TemplateEntry",
    "render_header",
    "render_location",
]

MessageKey: TypeAlias = tuple[MessageId, MessageContext | None]
"""Uniqueness key of a template entry: (msgid, msgctxt)."""


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Call site of a translation invocation.

    Attributes:
        file: Source file path as reported by the extractor
        line: 1-indexed line number
    """

    file: str
    line: int

    def __post_init__(self) -> None:
        """Validate that line is 1-indexed.

        Raises:
            ValueError: If line is less than 1
        """
        if self.line < 1:
            msg = f"SourceLocation.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class MessageRecord:
    """One extracted translation call site.

    Produced once per call site and consumed immediately by
    MessageRegistry.record().

    Attributes:
        content: Source text; None or "" when the call site has none
        literal: False when content is an expression only known at runtime
        context: Disambiguating msgctxt ("" is treated as no context)
        plural: Plural source text (msgid_plural)
        location: Call site, rendered as a "#:" comment when inside the build tree
        domain: Owning domain; None means the registry's configured domain
    """

    content: str | None
    literal: bool = True
    context: MessageContext | None = None
    plural: str | None = None
    location: SourceLocation | None = None
    domain: DomainName | None = None

    @property
    def is_registrable(self) -> bool:
        """Check whether the record carries translatable text."""
        return self.literal and bool(self.content)

    @property
    def key(self) -> MessageKey:
        """Uniqueness key (content, context)."""
        return (self.content or "", self.context or None)


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """Deduplicated template stanza.

    Attributes:
        message_id: msgid
        context: msgctxt, or None
        plural: msgid_plural, or None
        locations: Rendered "file:line" references, first-seen order
    """

    message_id: MessageId
    context: MessageContext | None = None
    plural: str | None = None
    locations: tuple[str, ...] = ()

    @property
    def key(self) -> MessageKey:
        """Uniqueness key (msgid, msgctxt)."""
        return (self.message_id, self.context)

    def with_location(self, location: str) -> TemplateEntry:
        """Return a copy with one more location (no-op if already present)."""
        if location in self.locations:
            return self
        return TemplateEntry(
            message_id=self.message_id,
            context=self.context,
            plural=self.plural,
            locations=(*self.locations, location),
        )

    def render(self) -> str:
        """Render the stanza with empty translations.

        Example:
            >>> print(TemplateEntry("item", plural="items", locations=("src/a.py:3",)).render())
            #: src/a.py:3
            msgid "item"
            msgid_plural "items"
            msgstr[0] ""
            msgstr[1] ""
            <BLANKLINE>
        """
        lines = [f"#: {location}" for location in self.locations]
        if self.context is not None:
            lines.append(f"msgctxt {escape(self.context)}")
        lines.append(f"msgid {escape(self.message_id)}")
        if self.plural is not None:
            lines.append(f"msgid_plural {escape(self.plural)}")
            lines.append('msgstr[0] ""')
            lines.append('msgstr[1] ""')
        else:
            lines.append('msgstr ""')
        return "\n".join(lines) + "\n"


def render_header(domain: DomainName) -> str:
    """Render the header stanza of a new template.

    Args:
        domain: Configured domain

    Returns:
        Header text (comment, fuzzy flag, empty msgid with MIME fields)
    """
    lines = [
        f"# Translations template for {domain}.",
        "#",
        "#, fuzzy",
        'msgid ""',
        'msgstr ""',
    ]
    for name, value in TEMPLATE_HEADER_FIELDS:
        field = f"{name}: {value.replace('{domain}', domain)}\n"
        lines.append(escape(field))
    return "\n".join(lines) + "\n"


def render_location(location: SourceLocation, build_root: Path | None) -> str | None:
    """Render a call site as "file:line", or None when outside the build tree.

    Relative paths are taken as build-tree relative and kept unless they
    climb out with "..". Absolute paths are made relative to build_root when
    they lie inside it; without a build_root they are dropped.

    Args:
        location: Call site
        build_root: Absolute root of the build tree, if known

    Returns:
        Location reference for a "#:" comment, or None
    """
    path = PurePath(location.file)
    if path.is_absolute():
        if build_root is None:
            return None
        try:
            path = path.relative_to(build_root)
        except ValueError:
            return None
    if ".." in path.parts:
        return None
    return f"{path.as_posix()}:{location.line}"
