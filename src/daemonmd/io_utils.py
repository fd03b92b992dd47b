"""Async wrappers around blocking file operations."""

from __future__ import annotations

import asyncio
from pathlib import Path


async def read_text_async(path: Path, encoding: str = "utf-8") -> str:
    """Read text from a file in a worker thread."""
    return await asyncio.to_thread(path.read_text, encoding=encoding)


async def write_text_async(path: Path, content: str, encoding: str = "utf-8") -> None:
    """Write text to a file in a worker thread."""
    await asyncio.to_thread(path.write_text, content, encoding=encoding)


async def mkdir_async(path: Path, parents: bool = False, exist_ok: bool = False) -> None:
    """Create a directory in a worker thread."""
    await asyncio.to_thread(path.mkdir, parents=parents, exist_ok=exist_ok)
