"""Tests for the query router."""

from __future__ import annotations

import json

import pytest

from daemonmd.exceptions import InvalidArgumentsError
from daemonmd.router import GET_ALL, GET_SECTION, TOOL_TO_SECTION, TOOLS, route_tool

VIEW = {
    "about": "Hello",
    "favorite_books": "- Dune\n- Neuromancer",
    "daily_routine": "- Wake",
}


class TestRouteTool:
    """Tests for route_tool."""

    def test_mapped_tool_returns_section_text(self) -> None:
        result = route_tool(VIEW, "get_about")

        assert result.found
        assert result.text == "Hello"

    def test_mapped_tool_returns_plain_text_for_list_sections(self) -> None:
        """Single-section tools return the text unreshaped."""
        assert route_tool(VIEW, "get_favorite_books").text == "- Dune\n- Neuromancer"

    def test_unknown_tool_is_not_found(self) -> None:
        result = route_tool(VIEW, "get_nonexistent")

        assert not result.found
        assert result.text == "Not found: get_nonexistent"

    def test_hidden_section_looks_like_unknown_tool(self) -> None:
        """A filtered-out section gives the same outcome shape as an unknown tool."""
        hidden = route_tool(VIEW, "get_telos")
        unknown = route_tool(VIEW, "get_nonexistent")

        assert hidden.found == unknown.found
        assert hidden.data == unknown.data
        assert hidden.text.replace("get_telos", "X") == unknown.text.replace("get_nonexistent", "X")

    def test_get_all_returns_structured_data(self) -> None:
        result = route_tool(VIEW, GET_ALL)

        assert result.found
        assert result.data == {
            "about": "Hello",
            "favorite_books": ["Dune", "Neuromancer"],
            "daily_routine": ["Wake"],
        }
        assert json.loads(result.text) == result.data

    def test_get_all_on_empty_view(self) -> None:
        result = route_tool({}, GET_ALL)

        assert result.found
        assert result.data == {}

    def test_get_section_lowercases_name(self) -> None:
        result = route_tool(VIEW, GET_SECTION, {"section": "DAILY_ROUTINE"})

        assert result.found
        assert result.text == "- Wake"

    def test_get_section_missing_is_not_found(self) -> None:
        result = route_tool(VIEW, GET_SECTION, {"section": "secrets"})

        assert not result.found
        assert result.text == "Not found: secrets"

    @pytest.mark.parametrize("arguments", [None, {}, {"section": ""}, {"section": 3}])
    def test_get_section_requires_name(self, arguments: dict | None) -> None:
        with pytest.raises(InvalidArgumentsError, match="missing section name"):
            route_tool(VIEW, GET_SECTION, arguments)


class TestToolCatalogue:
    """Tests for the TOOLS catalogue."""

    def test_every_mapped_tool_is_listed(self) -> None:
        names = [tool["name"] for tool in TOOLS]

        assert set(TOOL_TO_SECTION) | {GET_ALL, GET_SECTION} == set(names)
        assert len(names) == len(set(names))

    def test_get_section_declares_required_argument(self) -> None:
        (tool,) = [tool for tool in TOOLS if tool["name"] == GET_SECTION]

        assert tool["inputSchema"]["required"] == ["section"]
