"""Check that no content block is less restrictive than its section."""

from __future__ import annotations

from loguru import logger

from daemonmd.access import rank
from daemonmd.exceptions import SecurityViolationError
from daemonmd.schemas import Document, VerifiedDocument

SECURITY_RULE = (
    "Content within a section must have a security level equal to or "
    "MORE RESTRICTIVE than the section's classification."
)


def find_violations(document: Document) -> list[str]:
    """Return one message per block that is less restrictive than its section.

    Sections without a declared level are skipped, as are inherited blocks.
    """
    violations: list[str] = []
    for section in document.sections.values():
        if section.level is None:
            continue
        for block in section.blocks:
            if block.level is None:
                continue
            if rank(block.level) < rank(section.level):
                violations.append(
                    f"SECURITY VIOLATION: Section [{section.name.upper()}] is @{section.level.value}, "
                    f"but contains @{block.level.value} content (less restrictive). "
                    f"Content must be @{section.level.value} or higher."
                )
    return violations


def ensure_secure(document: Document) -> VerifiedDocument:
    """Gate a parsed document before any filtered view is computed.

    Raises:
        SecurityViolationError: With every violation found in the document.
    """
    violations = find_violations(document)
    if violations:
        logger.error("Document failed security validation ({} violation(s))", len(violations))
        raise SecurityViolationError(violations)
    return VerifiedDocument(document=document)
