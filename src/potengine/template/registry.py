"""Message registry: the template merge engine.

Collects every message record of a build unit into an in-memory arena and
folds the arena into the template in one deduplicated pass.

Concurrency:
    record() never touches the template. merge() is its only writer and runs
    once per build invocation, after every record of the unit is collected.

Invariants:
    - No two template entries share (msgid, msgctxt).
    - The template is append-only: merge() never rewrites or removes an
      existing entry.
    - Entries are appended in first-recorded order.

Python 3.13+. Depends on Babel for PO parsing and escaping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from potengine.enums import RecordStatus
from potengine.template.entry import (
    MessageKey,
    MessageRecord,
    TemplateEntry,
    render_header,
    render_location,
)
from potengine.template.reader import read_template_keys

if TYPE_CHECKING:
    from collections.abc import Iterable

    from potengine.config import BuildLayout, DomainConfig

__all__ = ["MergeSummary", "MessageRegistry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MergeSummary:
    """Result of one template merge.

    Attributes:
        template_path: Template that was merged into
        created: True if the template did not exist before this merge
        appended: Entries written to the template, in order
        skipped: Pending entries already present in the template
    """

    template_path: Path
    created: bool
    appended: tuple[TemplateEntry, ...]
    skipped: tuple[TemplateEntry, ...]

    @property
    def appended_count(self) -> int:
        """Number of entries written."""
        return len(self.appended)

    @property
    def skipped_count(self) -> int:
        """Number of entries already in the template."""
        return len(self.skipped)


class MessageRegistry:
    """Deduplicating accumulator for one domain's template.

    Example:
        >>> registry = MessageRegistry(config, layout)
        >>> registry.record(MessageRecord("Hello"))
        <RecordStatus.PENDING: 'pending'>
        >>> registry.record(MessageRecord("Hello"))
        <RecordStatus.DUPLICATE: 'duplicate'>
        >>> registry.record(MessageRecord("", literal=True))
        <RecordStatus.IGNORED: 'ignored'>
        >>> registry.merge().appended_count
        1
    """

    __slots__ = ("_build_root", "_domain", "_pending", "_template_path")

    def __init__(
        self,
        config: DomainConfig,
        layout: BuildLayout,
        *,
        build_root: Path | None = None,
    ) -> None:
        """Initialize registry.

        Args:
            config: Domain configuration (must have been written first)
            layout: Artifact layout locating the template
            build_root: Root of the build tree; absolute call-site paths
                outside it get no "#:" comment. Relative call-site paths are
                always taken as build-tree relative.
        """
        self._domain = config.domain
        self._template_path = layout.template_path(config.domain)
        self._build_root = build_root.absolute() if build_root is not None else None
        self._pending: dict[MessageKey, TemplateEntry] = {}

    @property
    def template_path(self) -> Path:
        """Template this registry merges into."""
        return self._template_path

    @property
    def pending(self) -> tuple[TemplateEntry, ...]:
        """Entries queued for the next merge, in first-recorded order."""
        return tuple(self._pending.values())

    def record(self, message: MessageRecord) -> RecordStatus:
        """Register one call site.

        Args:
            message: Extracted message record

        Returns:
            IGNORED for empty or non-literal content, DUPLICATE when the
            (content, context) pair is already queued (its location is
            accumulated), PENDING for a new entry

        Raises:
            ValueError: If the record belongs to another domain
        """
        if message.domain is not None and message.domain != self._domain:
            msg = (
                f"Message record for domain '{message.domain}' passed to the "
                f"registry of domain '{self._domain}'"
            )
            raise ValueError(msg)

        if not message.is_registrable:
            logger.debug("Ignoring record without literal content at %s", message.location)
            return RecordStatus.IGNORED

        location = (
            render_location(message.location, self._build_root)
            if message.location is not None
            else None
        )

        key = message.key
        existing = self._pending.get(key)
        if existing is not None:
            if location is not None:
                self._pending[key] = existing.with_location(location)
            return RecordStatus.DUPLICATE

        self._pending[key] = TemplateEntry(
            message_id=key[0],
            context=key[1],
            plural=message.plural,
            locations=(location,) if location is not None else (),
        )
        return RecordStatus.PENDING

    def record_all(self, messages: Iterable[MessageRecord]) -> dict[RecordStatus, int]:
        """Register many call sites.

        Returns:
            Count of records per status
        """
        counts = dict.fromkeys(RecordStatus, 0)
        for message in messages:
            counts[self.record(message)] += 1
        return counts

    def merge(self) -> MergeSummary:
        """Fold every pending entry into the template in one pass.

        Creates the template with a header if it does not exist, reads its
        current contents, and appends the pending entries whose key is not
        present yet. The arena is empty afterwards.

        Returns:
            MergeSummary describing what was appended and skipped

        Raises:
            OSError: If the template cannot be created, read, or appended to
            babel.messages.pofile.PoFileError: If the template is not valid PO syntax
        """
        path = self._template_path
        created = not path.exists()
        if created:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(render_header(self._domain), encoding="utf-8")
            logger.info("Created message template for domain %s: %s", self._domain, path)

        present = read_template_keys(path)
        appended: list[TemplateEntry] = []
        skipped: list[TemplateEntry] = []
        for key, entry in self._pending.items():
            if key in present:
                skipped.append(entry)
                continue
            present.add(key)
            appended.append(entry)

        if appended:
            with path.open("a", encoding="utf-8") as fp:
                for entry in appended:
                    fp.write("\n")
                    fp.write(entry.render())
                    logger.debug("Appended template entry: %r", entry.message_id)

        self._pending.clear()
        logger.info(
            "Merged template for domain %s: %d appended, %d already present",
            self._domain,
            len(appended),
            len(skipped),
        )
        return MergeSummary(
            template_path=path,
            created=created,
            appended=tuple(appended),
            skipped=tuple(skipped),
        )
