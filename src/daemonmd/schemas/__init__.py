"""Shared schemas for daemonmd."""

from daemonmd.schemas.document import ContentBlock, Document, Section, VerifiedDocument
from daemonmd.schemas.results import ParseOutcome, ToolResult, ValidationReport

__all__ = [
    "ContentBlock",
    "Document",
    "ParseOutcome",
    "Section",
    "ToolResult",
    "ValidationReport",
    "VerifiedDocument",
]
