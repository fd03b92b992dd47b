"""Result models returned by validation and tool routing."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from daemonmd.schemas.document import Document


class ParseOutcome(BaseModel):
    """Everything a single scan of the document text produced."""

    document: Document
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ValidationReport(BaseModel):
    """Outcome of the validate-only entry point.

    Attributes:
        ok: True when there are no format errors and no security violations.
        format_errors: Malformed headers or marker lines.
        security_violations: Blocks less restrictive than their section.
        warnings: Non-fatal findings (undeclared levels, duplicates, stray text).
        section_count: Number of distinct sections parsed.
        level_counts: Sections per declared level, plus ``undeclared``.
    """

    ok: bool
    format_errors: list[str] = Field(default_factory=list)
    security_violations: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    section_count: int = 0
    level_counts: dict[str, int] = Field(default_factory=dict)


class ToolResult(BaseModel):
    """Outcome of routing one tool call against a filtered view.

    ``found`` is False both for unknown identifiers and for sections the
    filter omitted; the two cases share the same message shape.
    """

    found: bool
    text: str
    data: Any = None
