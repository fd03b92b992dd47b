"""Parse, verify, and filter a document snapshot in one pass."""

from __future__ import annotations

from typing import Any, Mapping

from daemonmd.access import AccessLevel
from daemonmd.filtering import filter_document
from daemonmd.parser import parse_document
from daemonmd.router import route_tool
from daemonmd.schemas import ToolResult
from daemonmd.security import ensure_secure
from daemonmd.sources import DocumentSource


def build_view(text: str, requester: AccessLevel) -> dict[str, str]:
    """Return the sections of ``text`` visible at ``requester``.

    Raises:
        FormatError: If the document is malformed.
        SecurityViolationError: If any block is less restrictive than its section.
    """
    verified = ensure_secure(parse_document(text))
    return filter_document(verified, requester)


async def load_view(source: DocumentSource, requester: AccessLevel) -> dict[str, str]:
    """Read one snapshot from ``source`` and filter it for ``requester``."""
    text = await source.read()
    return build_view(text, requester)


async def call_tool(
    source: DocumentSource,
    requester: AccessLevel,
    tool_name: str,
    arguments: Mapping[str, Any] | None = None,
) -> ToolResult:
    """Answer one tool call against a freshly read document."""
    view = await load_view(source, requester)
    return route_tool(view, tool_name, arguments)
