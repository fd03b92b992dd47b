"""Select the content a requester is allowed to see."""

from __future__ import annotations

from daemonmd.access import AccessLevel, is_accessible
from daemonmd.schemas import VerifiedDocument


def filter_document(verified: VerifiedDocument, requester: AccessLevel) -> dict[str, str]:
    """Return the visible text of each section for ``requester``.

    Visible blocks are joined with a blank line in document order. Sections
    with nothing visible are left out entirely, so a hidden section looks the
    same as a missing one.
    """
    view: dict[str, str] = {}
    for section in verified.document.sections.values():
        visible = [
            block.text
            for block in section.blocks
            if is_accessible(block.effective_level(section.level), requester)
        ]
        if visible:
            view[section.name] = "\n\n".join(visible)
    return view
