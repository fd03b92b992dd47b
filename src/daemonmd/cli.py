"""Command-line entry points: ``validate`` and ``build``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from daemonmd import config
from daemonmd.build import build_document
from daemonmd.exceptions import SourceUnavailableError
from daemonmd.io_utils import read_text_async
from daemonmd.schemas import ValidationReport
from daemonmd.security import SECURITY_RULE
from daemonmd.utils.logging_config import configure_logging
from daemonmd.validation import UNDECLARED, validate_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="daemonmd", description="Validate and publish a daemon profile document.")
    parser.add_argument("--log-level", default=config.DAEMONMD_LOG_LEVEL, help="Logging level (default: %(default)s)")
    commands = parser.add_subparsers(dest="command", required=True)

    validate = commands.add_parser("validate", help="Check access-level format and security")
    validate.add_argument("path", nargs="?", type=Path, default=config.DAEMONMD_DOCUMENT_PATH)

    build = commands.add_parser("build", help="Validate the document and copy it to the output path")
    build.add_argument("path", nargs="?", type=Path, default=config.DAEMONMD_DOCUMENT_PATH)
    build.add_argument("--output", "-o", type=Path, default=config.DAEMONMD_BUILD_OUTPUT)
    return parser


def print_report(report: ValidationReport) -> None:
    """Print warnings, errors, and the per-level summary of a report."""
    if report.warnings:
        print("⚠ Format warnings:")
        for warning in report.warnings:
            print(f"  - {warning}")

    if report.format_errors:
        print("✗ Format validation errors:")
        for error in report.format_errors:
            print(f"  - {error}")
        return
    print("✓ Format validation passed")

    if report.security_violations:
        print("✗ SECURITY VALIDATION FAILED:")
        for violation in report.security_violations:
            print(f"  - {violation}")
        print()
        print("SECURITY RULE:")
        print(f"  {SECURITY_RULE}")
        return
    print("✓ Security validation passed")

    print()
    print("Summary:")
    print(f"  Sections: {report.section_count}")
    for level, count in report.level_counts.items():
        if level != UNDECLARED:
            print(f"  {level.capitalize()} sections: {count}")
    print(f"  Sections without a level: {report.level_counts.get(UNDECLARED, 0)}")


async def _validate(path: Path) -> int:
    print(f"Validating {path}")
    try:
        text = await read_text_async(path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"✗ Validation failed: {exc}")
        return 1
    report = validate_text(text)
    print_report(report)
    return 0 if report.ok else 1


async def _build(path: Path, output: Path) -> int:
    print(f"Building {output} from {path}")
    try:
        report = await build_document(path, output)
    except SourceUnavailableError as exc:
        print(f"✗ Build failed: {exc}")
        return 1
    print_report(report)
    if report.ok:
        print(f"✓ Wrote {output}")
    return 0 if report.ok else 1


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    if args.command == "validate":
        return asyncio.run(_validate(args.path))
    return asyncio.run(_build(args.path, args.output))


if __name__ == "__main__":
    sys.exit(main())
