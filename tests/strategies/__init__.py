"""Hypothesis strategies and test doubles for potengine property-based testing.

Strategies are organized by domain:

- messages: message contents, contexts, and message records
- patterns: format patterns with and without placeholders
- pipeline: RecordingCatalogTool and FailingCatalogTool doubles

Usage:
    from tests.strategies.messages import message_contents, message_records
    from tests.strategies.patterns import literal_texts, placeholder_patterns
    from tests.strategies.pipeline import RecordingCatalogTool

Event-Emitting Strategies (HypoFuzz-Optimized):
    message_contents, message_records, placeholder_patterns, brace_soup
"""

from .messages import message_contents, message_contexts, message_records, source_locations
from .patterns import brace_soup, literal_texts, placeholder_patterns
from .pipeline import FailingCatalogTool, RecordingCatalogTool

__all__ = [
    "FailingCatalogTool",
    "RecordingCatalogTool",
    "brace_soup",
    "literal_texts",
    "message_contents",
    "message_contexts",
    "message_records",
    "placeholder_patterns",
    "source_locations",
]
