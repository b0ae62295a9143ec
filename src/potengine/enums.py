"""Enumerations for potengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class RecordStatus(StrEnum):
    """Outcome of registering one message record.

    StrEnum provides automatic string conversion: str(RecordStatus.PENDING) == "pending"
    """

    PENDING = "pending"
    """New entry queued for the next template merge."""

    DUPLICATE = "duplicate"
    """Same (content, context) already queued; location accumulated."""

    IGNORED = "ignored"
    """Empty or non-literal content: nothing to translate."""


class SyncAction(StrEnum):
    """What the synchronizer did for one language.

    StrEnum provides automatic string conversion: str(SyncAction.MERGED) == "merged"
    """

    INITIALIZED = "initialized"
    """No catalog source existed; created from the template."""

    MERGED = "merged"
    """Existing catalog source updated against the template."""


class ToolOperation(StrEnum):
    """Capability of a catalog tool.

    StrEnum provides automatic string conversion: str(ToolOperation.COMPILE) == "compile"
    """

    MERGE = "merge"
    """Pull new template entries into an existing catalog source."""

    INIT = "init"
    """Create a fresh catalog source from the template."""

    COMPILE = "compile"
    """Convert a catalog source into a binary compiled catalog."""


__all__ = [
    "RecordStatus",
    "SyncAction",
    "ToolOperation",
]
