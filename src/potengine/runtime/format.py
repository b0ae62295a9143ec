"""Positional format engine for translated patterns.

A pattern is literal text with placeholders. ``{}`` takes the next implicit
argument (the first ``{}`` is argument 0, the second argument 1, and so on);
``{N}`` takes argument N, where N is a non-empty run of ASCII digits.
Explicit placeholders do not advance the implicit counter. There is no
escape syntax for literal braces.

Scanning is a single left-to-right pass with no backtracking. Every problem
becomes a FormatError and the offending span is copied to the output
verbatim, so a pattern with errors still renders:

    >>> text, errors = format_pattern("{} of {}", ("a",))
    >>> text
    'a of {}'
    >>> [type(e).__name__ for e in errors]
    ['MissingArgumentError']

Callers wanting fail-fast behavior use try_format(), which raises the first
error of the same scan.

Python 3.13+.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, TypeAlias

from potengine.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from potengine.diagnostics import (
    ErrorTemplate,
    FormatError,
    InvalidPositionalArgumentError,
    MissingArgumentError,
    UnmatchedDelimiterError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["FormatResult", "format_pattern", "try_format"]

FormatResult: TypeAlias = tuple[str, tuple[FormatError, ...]]

_DELIMITER = re.compile(r"[{}]")


def format_pattern(pattern: str, args: Sequence[object] = ()) -> FormatResult:
    """Substitute positional arguments into pattern, collecting errors.

    Args:
        pattern: Pattern text
        args: Positional arguments; each is rendered with str()

    Returns:
        Tuple of (rendered text, errors in the order encountered)
    """
    parts: list[str] = []
    errors: list[FormatError] = []
    implicit_index = 0
    pos = 0

    while (opening := _DELIMITER.search(pattern, pos)) is not None:
        start = opening.start()
        parts.append(pattern[pos:start])

        if opening.group() == PLACEHOLDER_CLOSE:
            diagnostic = ErrorTemplate.unmatched_close_delimiter(start)
            errors.append(UnmatchedDelimiterError(diagnostic, position=start))
            parts.append(PLACEHOLDER_CLOSE)
            pos = start + 1
            continue

        closing = _DELIMITER.search(pattern, start + 1)
        if closing is None or closing.group() == PLACEHOLDER_OPEN:
            # No '}' before the next '{' (or end of text): the '{' and the
            # literal run after it are emitted unchanged.
            diagnostic = ErrorTemplate.unmatched_open_delimiter(start)
            errors.append(UnmatchedDelimiterError(diagnostic, position=start))
            pos = len(pattern) if closing is None else closing.start()
            parts.append(pattern[start:pos])
            continue

        end = closing.start()
        body = pattern[start + 1 : end]
        placeholder = pattern[start : end + 1]
        pos = end + 1

        if not body:
            index = implicit_index
            implicit_index += 1
        else:
            parsed = _parse_index(body)
            if parsed is None:
                diagnostic = ErrorTemplate.invalid_positional_argument(body, start)
                errors.append(
                    InvalidPositionalArgumentError(diagnostic, body=body, position=start)
                )
                parts.append(placeholder)
                continue
            index = parsed

        if index >= len(args):
            diagnostic = ErrorTemplate.missing_argument(index, len(args))
            errors.append(MissingArgumentError(diagnostic, index=index))
            parts.append(placeholder)
            continue

        parts.append(str(args[index]))

    parts.append(pattern[pos:])
    return "".join(parts), tuple(errors)


def try_format(pattern: str, args: Sequence[object] = ()) -> str:
    """Substitute positional arguments into pattern, failing on the first error.

    Raises:
        UnmatchedDelimiterError: Lone '{' or '}'
        InvalidPositionalArgumentError: Placeholder body is not a digit run
        MissingArgumentError: Placeholder index has no argument
    """
    text, errors = format_pattern(pattern, args)
    if errors:
        raise errors[0]
    return text


def _parse_index(body: str) -> int | None:
    if not (body.isascii() and body.isdigit()):
        return None
    try:
        return int(body)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        return None
