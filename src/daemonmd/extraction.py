"""Reshape filtered section text into typed values for programmatic callers."""

from __future__ import annotations

import re
from typing import Iterable, Union

LIST_SECTIONS = frozenset(
    {
        "favorite_books",
        "favorite_movies",
        "favorite_podcasts",
        "predictions",
        "preferences",
        "daily_routine",
    }
)
GOAL_SECTION = "telos"
CATEGORIZED_SECTION = "projects"
PROJECT_CATEGORIES = ("technical", "creative", "personal")
DEFAULT_PROJECT_CATEGORY = "technical"

_BULLET_RE = re.compile(r"^-\s*")
# Goal items look like "- P1: ...", "- M2: ...", "- G3: ..."
_GOAL_RE = re.compile(r"^-\s*[A-Z]\d+:")

StructuredValue = Union[str, list[str], dict[str, list[str]]]


def _bullet_item(line: str) -> str | None:
    stripped = line.strip()
    if not stripped.startswith("-"):
        return None
    return _BULLET_RE.sub("", stripped).strip() or None


def parse_markdown_list(content: str) -> list[str]:
    """Return the items of every ``-`` bullet line, dropping other lines."""
    if not content:
        return []
    items = (_bullet_item(line) for line in content.splitlines())
    return [item for item in items if item]


def parse_goal_items(content: str) -> list[str]:
    """Return bullet items shaped like ``P1: ...``; other lines are dropped."""
    if not content:
        return []
    items: list[str] = []
    for line in content.splitlines():
        if _GOAL_RE.match(line.strip()):
            item = _bullet_item(line)
            if item:
                items.append(item)
    return items


def parse_categorized_list(
    content: str,
    categories: Iterable[str] = PROJECT_CATEGORIES,
    default: str = DEFAULT_PROJECT_CATEGORY,
) -> dict[str, list[str]]:
    """Group bullet items under the category header that precedes them.

    A non-bullet line naming a category (case-insensitive substring match)
    opens that category. Bullets before the first header are dropped. If no
    header appears at all, every bullet goes under ``default``.

    Two choices here are stricter than a plain substring scan. Bullet lines are
    never tested as headers, so "- Technical debt cleanup" stays an item of the
    open category. A category header that appears again appends to the items
    already collected instead of starting an empty list, so a split category
    keeps both halves.
    """
    categories = tuple(categories)
    grouped: dict[str, list[str]] = {}
    current: str | None = None

    for line in (content or "").splitlines():
        item = _bullet_item(line)
        if item is None and line.strip().startswith("-"):
            continue
        if item is None:
            lowered = line.strip().lower()
            for category in categories:
                if category in lowered:
                    current = category
                    grouped.setdefault(category, [])
                    break
        elif current is not None:
            grouped[current].append(item)

    if not grouped:
        return {default: parse_markdown_list(content)}
    return grouped


def extract_section(name: str, content: str) -> StructuredValue:
    """Reshape one section's filtered text according to its name."""
    if name in LIST_SECTIONS:
        return parse_markdown_list(content)
    if name == GOAL_SECTION:
        return parse_goal_items(content)
    if name == CATEGORIZED_SECTION:
        return parse_categorized_list(content)
    return content


def extract_structured(view: dict[str, str]) -> dict[str, StructuredValue]:
    """Apply ``extract_section`` to every section of a filtered view."""
    return {name: extract_section(name, content) for name, content in view.items()}
