"""Message template package: records, entries, and the merge engine.

Submodules:
    entry    - MessageRecord, SourceLocation, TemplateEntry, stanza rendering
    reader   - Template scanning for existing (msgid, msgctxt) keys
    registry - MessageRegistry (arena + single-pass merge), MergeSummary

Python 3.13+.
"""

from potengine.template.entry import (
    MessageKey,
    MessageRecord,
    SourceLocation,
    TemplateEntry,
    render_header,
    render_location,
)
from potengine.template.reader import read_template_keys
from potengine.template.registry import MergeSummary, MessageRegistry

__all__ = [
    "MergeSummary",
    "MessageKey",
    "MessageRecord",
    "MessageRegistry",
    "SourceLocation",
    "TemplateEntry",
    "read_template_keys",
    "render_header",
    "render_location",
]
