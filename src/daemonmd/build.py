"""Build step: validate the source document and publish it unchanged."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from daemonmd.exceptions import SourceUnavailableError
from daemonmd.io_utils import mkdir_async, read_text_async, write_text_async
from daemonmd.schemas import ValidationReport
from daemonmd.validation import validate_text


async def build_document(source_path: Path, output_path: Path) -> ValidationReport:
    """Copy ``source_path`` to ``output_path`` if it validates.

    Nothing is written when the report is not ok.

    Raises:
        SourceUnavailableError: If the source document cannot be read.
    """
    try:
        text = await read_text_async(source_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(f"Cannot read {source_path}: {exc}") from exc

    report = validate_text(text)
    if not report.ok:
        logger.warning("Refusing to build {}: document failed validation", output_path)
        return report

    await mkdir_async(output_path.parent, parents=True, exist_ok=True)
    await write_text_async(output_path, text)
    logger.info("Built {} ({} sections)", output_path, report.section_count)
    return report
