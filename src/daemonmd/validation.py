"""Authoring-time validation of a document before it is published."""

from __future__ import annotations

from daemonmd.access import AccessLevel
from daemonmd.parser import scan_document
from daemonmd.schemas import Document, ValidationReport
from daemonmd.security import find_violations

UNDECLARED = "undeclared"


def count_levels(document: Document) -> dict[str, int]:
    """Count sections per declared level, plus sections with no level."""
    counts = {level.value: 0 for level in AccessLevel}
    counts[UNDECLARED] = 0
    for section in document.sections.values():
        counts[section.level.value if section.level else UNDECLARED] += 1
    return counts


def validate_text(text: str) -> ValidationReport:
    """Check format, then security, and report every problem found.

    The security check only runs once the format is clean, since a malformed
    level marker leaves nothing meaningful to compare.
    """
    outcome = scan_document(text)
    violations = [] if outcome.errors else find_violations(outcome.document)
    return ValidationReport(
        ok=not outcome.errors and not violations,
        format_errors=outcome.errors,
        security_violations=violations,
        warnings=outcome.warnings,
        section_count=len(outcome.document.sections),
        level_counts=count_levels(outcome.document),
    )
