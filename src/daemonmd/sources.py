"""Document-text providers.

A provider returns the current document snapshot. A miss (missing file, HTTP
404) yields an empty string, which parses to zero sections; any other failure
raises ``SourceUnavailableError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import httpx
from loguru import logger

from daemonmd import config
from daemonmd.exceptions import SourceUnavailableError
from daemonmd.http_utils import fetch_with_retries
from daemonmd.io_utils import read_text_async


class DocumentSource(Protocol):
    async def read(self) -> str: ...


@dataclass(frozen=True)
class FileSource:
    """Read the document from the local filesystem."""

    path: Path

    async def read(self) -> str:
        try:
            return await read_text_async(self.path)
        except FileNotFoundError:
            logger.info("Document not found at {}; treating as empty", self.path)
            return ""
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailableError(f"Cannot read {self.path}: {exc}") from exc


@dataclass(frozen=True)
class HttpSource:
    """Fetch the document over HTTP."""

    url: str
    client: httpx.AsyncClient | None = None

    async def read(self) -> str:
        text = await fetch_with_retries(self.url, client=self.client)
        if text is None:
            logger.info("Document not found at {}; treating as empty", self.url)
            return ""
        return text


@dataclass(frozen=True)
class StaticSource:
    """Serve a fixed string; used for tests and one-off validation."""

    text: str = ""

    async def read(self) -> str:
        return self.text


def source_from_config() -> DocumentSource:
    """Pick the HTTP source when a URL is configured, else the local file."""
    if config.DAEMONMD_DOCUMENT_URL:
        return HttpSource(config.DAEMONMD_DOCUMENT_URL)
    return FileSource(config.DAEMONMD_DOCUMENT_PATH)
