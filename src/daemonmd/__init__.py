"""daemonmd: serve a personal profile document at per-caller access levels."""

from daemonmd.access import AccessLevel, is_accessible, rank
from daemonmd.exceptions import (
    DaemonmdError,
    FormatError,
    InvalidArgumentsError,
    SecurityViolationError,
    SourceUnavailableError,
)
from daemonmd.filtering import filter_document
from daemonmd.parser import parse_document, scan_document
from daemonmd.pipeline import build_view, call_tool, load_view
from daemonmd.router import route_tool
from daemonmd.schemas import ContentBlock, Document, Section, ToolResult, ValidationReport, VerifiedDocument
from daemonmd.security import ensure_secure, find_violations
from daemonmd.validation import validate_text

__all__ = [
    "AccessLevel",
    "ContentBlock",
    "DaemonmdError",
    "Document",
    "FormatError",
    "InvalidArgumentsError",
    "Section",
    "SecurityViolationError",
    "SourceUnavailableError",
    "ToolResult",
    "ValidationReport",
    "VerifiedDocument",
    "build_view",
    "call_tool",
    "ensure_secure",
    "filter_document",
    "find_violations",
    "is_accessible",
    "load_view",
    "parse_document",
    "rank",
    "route_tool",
    "scan_document",
    "validate_text",
]
