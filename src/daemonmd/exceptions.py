"""Custom exceptions for daemonmd."""

from __future__ import annotations


class DaemonmdError(Exception):
    """Base exception for daemonmd operations."""


class FormatError(DaemonmdError):
    """The document contains malformed section headers or level markers.

    Every offending token is collected before this is raised, so an author can
    fix the whole document in one pass.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} format error(s): " + "; ".join(self.errors))


class SecurityViolationError(DaemonmdError):
    """A content block is less restrictive than its enclosing section."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = list(violations)
        super().__init__(f"{len(self.violations)} security violation(s): " + "; ".join(self.violations))


class SourceUnavailableError(DaemonmdError):
    """The document provider could not supply text."""


class InvalidArgumentsError(DaemonmdError):
    """A tool call is missing a required argument."""
