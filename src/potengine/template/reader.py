"""Template scanning for the merge engine.

Python 3.13+. Depends on Babel for PO parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from babel.messages.pofile import read_po

if TYPE_CHECKING:
    from pathlib import Path

    from potengine.template.entry import MessageKey

__all__ = ["read_template_keys"]


def read_template_keys(path: Path) -> set[MessageKey]:
    """Read a template and collect the (msgid, msgctxt) key of every entry.

    The header stanza (empty msgid) is not an entry. Plural entries are keyed
    by their singular msgid, matching how the registry deduplicates.

    Args:
        path: Template path

    Returns:
        Set of keys already present in the template

    Raises:
        FileNotFoundError: If the template does not exist
        babel.messages.pofile.PoFileError: If the template is not valid PO syntax
    """
    with path.open("rb") as fp:
        catalog = read_po(fp, abort_invalid=True)

    keys: set[MessageKey] = set()
    for message in catalog:
        msgid = message.id[0] if isinstance(message.id, tuple) else message.id
        if not msgid:
            continue
        keys.add((msgid, message.context))
    return keys
