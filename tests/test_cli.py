"""Tests for the build step and the command-line validator."""

from __future__ import annotations

from pathlib import Path

import pytest

from daemonmd.build import build_document
from daemonmd.cli import main
from daemonmd.exceptions import SourceUnavailableError

INSECURE = "[NOTES] @restricted\nSecret\n@public\nPublicNote\n"


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the CLI from replacing pytest's log handlers."""
    monkeypatch.setattr("daemonmd.cli.configure_logging", lambda level: None)


class TestBuildDocument:
    """Tests for build_document."""

    @pytest.mark.asyncio
    async def test_writes_valid_document_unchanged(self, tmp_path: Path, sample_document: str) -> None:
        source = tmp_path / "daemon.md"
        source.write_text(sample_document, encoding="utf-8")
        output = tmp_path / "public" / "daemon.md"

        report = await build_document(source, output)

        assert report.ok
        assert output.read_text(encoding="utf-8") == sample_document

    @pytest.mark.asyncio
    async def test_refuses_insecure_document(self, tmp_path: Path) -> None:
        source = tmp_path / "daemon.md"
        source.write_text(INSECURE, encoding="utf-8")
        output = tmp_path / "public" / "daemon.md"

        report = await build_document(source, output)

        assert not report.ok
        assert not output.exists()

    @pytest.mark.asyncio
    async def test_missing_source_raises(self, tmp_path: Path) -> None:
        with pytest.raises(SourceUnavailableError):
            await build_document(tmp_path / "missing.md", tmp_path / "out.md")


class TestMain:
    """Tests for the daemonmd command."""

    def test_validate_success(self, tmp_path: Path, sample_document: str, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "daemon.md"
        path.write_text(sample_document, encoding="utf-8")

        exit_code = main(["validate", str(path)])

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Security validation passed" in out
        assert "Sections: 6" in out
        assert "will default to @public" in out

    def test_validate_reports_violation(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "daemon.md"
        path.write_text(INSECURE, encoding="utf-8")

        exit_code = main(["validate", str(path)])

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "SECURITY VALIDATION FAILED" in out
        assert "[NOTES]" in out

    def test_validate_reports_format_errors(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "daemon.md"
        path.write_text("[ABOUT] @open\nHi\n@nobody\nx\n", encoding="utf-8")

        exit_code = main(["validate", str(path)])

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "@open" in out
        assert "@nobody" in out

    def test_validate_missing_file(self, tmp_path: Path) -> None:
        assert main(["validate", str(tmp_path / "missing.md")]) == 1

    def test_build(self, tmp_path: Path, sample_document: str) -> None:
        path = tmp_path / "daemon.md"
        path.write_text(sample_document, encoding="utf-8")
        output = tmp_path / "site" / "daemon.md"

        assert main(["build", str(path), "--output", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == sample_document
