"""Answer a tool call for a resolved requester level."""

from __future__ import annotations

from typing import Any

from loguru import logger

from daemonmd.access import AccessLevel
from daemonmd.pipeline import call_tool
from daemonmd.router import TOOLS
from daemonmd.sources import DocumentSource
from server.models import TextContent, ToolCallResult


def list_tools() -> dict[str, Any]:
    """Return the ``tools/list`` payload."""
    return {"tools": TOOLS}


async def process_tool_call(
    source: DocumentSource,
    requester: AccessLevel,
    tool_name: str,
    arguments: dict[str, Any] | None = None,
) -> ToolCallResult:
    """Read the document, filter it for ``requester``, and route ``tool_name``.

    Parameters
    ----------
    source : DocumentSource
        Provider of the current document snapshot.
    requester : AccessLevel
        Level resolved from the caller's credential.
    tool_name : str
        The tool identifier.
    arguments : dict[str, Any] | None
        Tool arguments.

    Returns
    -------
    ToolCallResult
        Section text, structured JSON, or the not-found result.

    Raises
    ------
    DaemonmdError
        If the document cannot be read, is malformed, or fails the security
        check; the transport turns these into one generic error.

    """
    call_logger = logger.bind(tool=tool_name, requester=requester.value)
    try:
        result = await call_tool(source, requester, tool_name, arguments)
    except Exception as exc:
        call_logger.bind(error_type=type(exc).__name__, error=str(exc)).error("Tool call failed")
        raise

    call_logger.bind(found=result.found).info("Tool call completed")
    return ToolCallResult(content=[TextContent(text=result.text)], isError=not result.found)
