"""Tests for document-text providers."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from daemonmd import config
from daemonmd.exceptions import SourceUnavailableError
from daemonmd.sources import FileSource, HttpSource, StaticSource, source_from_config


class TestFileSource:
    """Tests for FileSource."""

    @pytest.mark.asyncio
    async def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "daemon.md"
        path.write_text("[ABOUT]\nHi\n", encoding="utf-8")

        assert await FileSource(path).read() == "[ABOUT]\nHi\n"

    @pytest.mark.asyncio
    async def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert await FileSource(tmp_path / "missing.md").read() == ""

    @pytest.mark.asyncio
    async def test_unreadable_path_raises(self, tmp_path: Path) -> None:
        """A directory cannot be read as a document."""
        with pytest.raises(SourceUnavailableError):
            await FileSource(tmp_path).read()


class TestHttpSource:
    """Tests for HttpSource."""

    @pytest.mark.asyncio
    async def test_miss_is_empty(self) -> None:
        with patch("daemonmd.sources.fetch_with_retries", new=AsyncMock(return_value=None)):
            assert await HttpSource("https://example.com/daemon.md").read() == ""

    @pytest.mark.asyncio
    async def test_returns_fetched_text(self) -> None:
        with patch("daemonmd.sources.fetch_with_retries", new=AsyncMock(return_value="[ABOUT]\nHi")) as mock_fetch:
            assert await HttpSource("https://example.com/daemon.md").read() == "[ABOUT]\nHi"

        mock_fetch.assert_awaited_once_with("https://example.com/daemon.md", client=None)


class TestSourceFromConfig:
    """Tests for source_from_config."""

    def test_prefers_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "DAEMONMD_DOCUMENT_URL", "https://example.com/daemon.md")

        source = source_from_config()

        assert isinstance(source, HttpSource)
        assert source.url == "https://example.com/daemon.md"

    def test_falls_back_to_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setattr(config, "DAEMONMD_DOCUMENT_URL", None)
        monkeypatch.setattr(config, "DAEMONMD_DOCUMENT_PATH", tmp_path / "daemon.md")

        source = source_from_config()

        assert isinstance(source, FileSource)
        assert source.path == tmp_path / "daemon.md"


@pytest.mark.asyncio
async def test_static_source() -> None:
    assert await StaticSource("x").read() == "x"
