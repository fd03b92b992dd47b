"""Tests for the security validator."""

from __future__ import annotations

import pytest

from daemonmd.exceptions import SecurityViolationError
from daemonmd.parser import parse_document
from daemonmd.schemas import VerifiedDocument
from daemonmd.security import ensure_secure, find_violations


class TestFindViolations:
    """Tests for find_violations."""

    def test_public_block_in_restricted_section(self) -> None:
        """Exactly one violation naming the section is reported."""
        document = parse_document("[NOTES] @restricted\nSecret\n@public\nPublicNote\n")

        violations = find_violations(document)

        assert len(violations) == 1
        assert "[NOTES]" in violations[0]
        assert "@restricted" in violations[0]
        assert "@public content" in violations[0]

    def test_collects_every_violation(self) -> None:
        text = (
            "[A] @private\n@public\none\n@restricted\ntwo\n"
            "[B] @restricted\n@public\nthree\n"
        )

        violations = find_violations(parse_document(text))

        assert len(violations) == 3

    def test_more_restrictive_blocks_are_fine(self) -> None:
        document = parse_document("[A] @public\nx\n@restricted\ny\n@private\nz\n[B] @restricted\n@restricted\nw\n")

        assert find_violations(document) == []

    def test_undeclared_sections_are_exempt(self) -> None:
        """A section with no level has nothing to violate."""
        document = parse_document("[ABOUT]\n@private\nsecret\n@public\nopen\n")

        assert find_violations(document) == []


class TestEnsureSecure:
    """Tests for ensure_secure."""

    def test_returns_verified_document(self, sample_document: str) -> None:
        document = parse_document(sample_document)

        verified = ensure_secure(document)

        assert isinstance(verified, VerifiedDocument)
        assert verified.document == document

    def test_raises_with_all_violations(self) -> None:
        document = parse_document("[A] @private\n@public\none\n[B] @restricted\n@public\ntwo\n")

        with pytest.raises(SecurityViolationError) as exc_info:
            ensure_secure(document)

        assert len(exc_info.value.violations) == 2
