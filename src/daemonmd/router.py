"""Map tool identifiers onto sections of a filtered view."""

from __future__ import annotations

import json
from typing import Any, Mapping

from daemonmd.exceptions import InvalidArgumentsError
from daemonmd.extraction import extract_structured
from daemonmd.schemas import ToolResult

GET_ALL = "get_all"
GET_SECTION = "get_section"

TOOL_TO_SECTION: dict[str, str] = {
    "get_about": "about",
    "get_narrative": "narrative",
    "get_mission": "mission",
    "get_projects": "projects",
    "get_telos": "telos",
    "get_favorite_books": "favorite_books",
    "get_favorite_movies": "favorite_movies",
    "get_current_location": "current_location",
    "get_preferences": "preferences",
    "get_daily_routine": "daily_routine",
    "get_predictions": "predictions",
}

_DESCRIPTIONS = {
    "get_about": "Get the about/bio information",
    "get_narrative": "Get the current personal narrative",
    "get_mission": "Get the mission statement",
    "get_projects": "Get current projects, grouped by category",
    "get_telos": "Get the telos (ultimate goals/purpose)",
    "get_favorite_books": "Get favorite books",
    "get_favorite_movies": "Get favorite movies",
    "get_current_location": "Get the current location",
    "get_preferences": "Get preferences and interests",
    "get_daily_routine": "Get the daily routine",
    "get_predictions": "Get predictions about AI and the future",
}

TOOLS: list[dict[str, Any]] = [
    *({"name": name, "description": _DESCRIPTIONS[name]} for name in TOOL_TO_SECTION),
    {"name": GET_ALL, "description": "Get all daemon information"},
    {
        "name": GET_SECTION,
        "description": "Get any section by name (e.g., favorite_podcasts, daily_routine)",
        "inputSchema": {
            "type": "object",
            "properties": {
                "section": {
                    "type": "string",
                    "description": "Section name to retrieve (lowercase, underscores for spaces)",
                },
            },
            "required": ["section"],
        },
    },
]


def not_found(identifier: str) -> ToolResult:
    """Build the single not-found outcome shared by every lookup failure."""
    return ToolResult(found=False, text=f"Not found: {identifier}")


def route_tool(
    view: Mapping[str, str],
    tool_name: str,
    arguments: Mapping[str, Any] | None = None,
) -> ToolResult:
    """Resolve ``tool_name`` against a filtered view.

    Args:
        view: Section name to visible text, as produced by the content filter.
        tool_name: The external tool identifier.
        arguments: Tool arguments; ``get_section`` reads ``section``.

    Returns:
        The section text, the structured view for ``get_all``, or the
        not-found result. Unknown tools and hidden sections are reported the
        same way.

    Raises:
        InvalidArgumentsError: If ``get_section`` is called without a section name.
    """
    arguments = arguments or {}

    if tool_name == GET_ALL:
        data = extract_structured(dict(view))
        return ToolResult(found=True, text=json.dumps(data, indent=2), data=data)

    if tool_name == GET_SECTION:
        raw = arguments.get("section")
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidArgumentsError("Invalid params: missing section name")
        section_name = raw.strip().lower()
        if section_name not in view:
            return not_found(section_name)
        return ToolResult(found=True, text=view[section_name])

    section_name = TOOL_TO_SECTION.get(tool_name)
    if section_name is None or section_name not in view:
        return not_found(tool_name)
    return ToolResult(found=True, text=view[section_name])
