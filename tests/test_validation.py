"""Tests for the validate-only entry point."""

from __future__ import annotations

from daemonmd.validation import UNDECLARED, validate_text


class TestValidateText:
    """Tests for validate_text."""

    def test_valid_document(self, sample_document: str) -> None:
        report = validate_text(sample_document)

        assert report.ok
        assert report.format_errors == []
        assert report.security_violations == []
        assert report.section_count == 6
        assert report.level_counts == {"public": 2, "restricted": 1, "private": 1, UNDECLARED: 2}
        assert len(report.warnings) == 2

    def test_format_errors_skip_security_check(self) -> None:
        report = validate_text("[A] @bogus\nx\n[B] @restricted\n@public\ny\n")

        assert not report.ok
        assert len(report.format_errors) == 1
        assert report.security_violations == []

    def test_malformed_headers_fail_validation(self) -> None:
        report = validate_text("[MISSION] @public\nMake things.\n[GOALS_2025] @private\nQuit my job\n[SALARY] @ private\n120k\n")

        assert not report.ok
        assert len(report.format_errors) == 2
        assert "line 3" in report.format_errors[0]
        assert "line 5" in report.format_errors[1]

    def test_security_violation_from_example(self) -> None:
        """A public marker inside a restricted section is rejected."""
        report = validate_text("[ABOUT]\nHello\n[NOTES] @restricted\nSecret\n@public\nPublicNote\n")

        assert not report.ok
        assert report.format_errors == []
        assert len(report.security_violations) == 1
        assert "[NOTES]" in report.security_violations[0]

    def test_empty_document_is_valid(self) -> None:
        report = validate_text("")

        assert report.ok
        assert report.section_count == 0
