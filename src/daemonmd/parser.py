"""Parse daemon document text into sections and access-tagged content blocks.

The format is line oriented::

    [SECTION_NAME] @restricted
    text that takes the section's level
    @private
    text marked private

A header is a bracketed upper-case identifier at the start of a line, optionally
followed by ``@level``. Any other line opening with a bracketed label is a
format error. Inside a section body, a line holding only ``@level``
starts a new explicitly leveled block.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from daemonmd.access import LEVEL_TOKENS, AccessLevel
from daemonmd.exceptions import FormatError
from daemonmd.schemas import ContentBlock, Document, ParseOutcome, Section

_HEADER_RE = re.compile(r"^\[([A-Z_]+)\][ \t]*(?:@(\S*))?[ \t]*$")
_MARKER_RE = re.compile(r"^@(\w+)[ \t]*$")
# A bracketed label opening a line. Markdown links "[x](..)", "[x][ref]" and "[ref]: url" are text.
_BRACKETED_RE = re.compile(r"^[ \t]*\[[^\]]+\](?![(\[:])")

_EXPECTED = "expected one of " + ", ".join(f"@{token}" for token in LEVEL_TOKENS)


class TokenKind(str, Enum):
    """Kinds of lines the tokenizer distinguishes."""

    HEADER = "header"
    MARKER = "marker"
    MALFORMED_HEADER = "malformed_header"
    TEXT = "text"


@dataclass(frozen=True)
class Token:
    """One classified line of the document.

    Attributes:
        kind: What the line is.
        line: 1-based line number.
        text: The raw line, without its line terminator.
        name: Section name as written (headers only).
        level_token: The word after ``@``; None when a header carries no marker.
    """

    kind: TokenKind
    line: int
    text: str
    name: str | None = None
    level_token: str | None = None


def tokenize(text: str) -> Iterator[Token]:
    """Classify every line of ``text`` as a header, a marker, or plain text.

    A line that opens with a bracketed label but does not fit the header grammar
    (lower-case or digit names, a spaced or trailing marker) is a malformed header.
    """
    for number, raw in enumerate(text.splitlines(), start=1):
        header = _HEADER_RE.match(raw)
        if header:
            yield Token(TokenKind.HEADER, number, raw, name=header.group(1), level_token=header.group(2))
            continue
        marker = _MARKER_RE.match(raw)
        if marker:
            yield Token(TokenKind.MARKER, number, raw, level_token=marker.group(1))
            continue
        if _BRACKETED_RE.match(raw):
            yield Token(TokenKind.MALFORMED_HEADER, number, raw)
            continue
        yield Token(TokenKind.TEXT, number, raw)


@dataclass
class _SectionBuilder:
    name: str
    level: AccessLevel | None
    parts: list[tuple[AccessLevel | None, list[str]]] = field(default_factory=lambda: [(None, [])])

    def start_block(self, level: AccessLevel) -> None:
        self.parts.append((level, []))

    def add_line(self, line: str) -> None:
        self.parts[-1][1].append(line)

    def build(self) -> Section:
        blocks = []
        for level, lines in self.parts:
            text = "\n".join(lines).strip()
            if text:
                blocks.append(ContentBlock(text=text, level=level))
        return Section(name=self.name.lower(), level=self.level, blocks=tuple(blocks))


def scan_document(text: str) -> ParseOutcome:
    """Parse ``text`` and collect every format error and warning.

    Unlike ``parse_document`` this never raises; the validate-only entry point
    uses it to report all problems at once.

    Args:
        text: The full document. An empty string yields zero sections.

    Returns:
        The parsed document together with error and warning messages.
    """
    sections: dict[str, Section] = {}
    errors: list[str] = []
    warnings: list[str] = []
    current: _SectionBuilder | None = None
    stray_text = False
    orphaned = False

    def commit(builder: _SectionBuilder) -> None:
        section = builder.build()
        if section.name in sections:
            warnings.append(
                f'Section "{builder.name}" appears more than once; the later occurrence replaces the earlier one'
            )
        sections[section.name] = section

    for token in tokenize(text):
        if token.kind is TokenKind.HEADER:
            if current is not None:
                commit(current)
            level = None
            if token.level_token is None:
                warnings.append(f'Section "{token.name}" has no default access level (will default to @public)')
            else:
                level = AccessLevel.from_token(token.level_token)
                if level is None:
                    errors.append(
                        f'Section "{token.name}" has invalid access level: @{token.level_token} (line {token.line}; {_EXPECTED})'
                    )
            current = _SectionBuilder(name=token.name or "", level=level)
            orphaned = False
        elif token.kind is TokenKind.MALFORMED_HEADER:
            # Close the open section so the lines below never join its body.
            if current is not None:
                commit(current)
            current = None
            orphaned = True
            errors.append(
                f"Malformed section header: {token.text.strip()!r} (line {token.line}); "
                f"headers are [UPPER_CASE_NAME] optionally followed by @level"
            )
        elif token.kind is TokenKind.MARKER:
            level = AccessLevel.from_token(token.level_token or "")
            if level is None:
                errors.append(f"Invalid content access level: @{token.level_token} (line {token.line}; {_EXPECTED})")
            elif current is not None:
                current.start_block(level)
        elif current is not None:
            current.add_line(token.text)
        elif token.text.strip() and not orphaned:
            stray_text = True

    if current is not None:
        commit(current)
    if stray_text:
        warnings.append("Text before the first section header is ignored")

    return ParseOutcome(document=Document(sections=sections), errors=errors, warnings=warnings)


def parse_document(text: str) -> Document:
    """Parse ``text`` into a document.

    Raises:
        FormatError: If any header is malformed or any header or marker line
            names an unknown level. The error lists every offending line, not
            only the first.
    """
    outcome = scan_document(text)
    if outcome.errors:
        raise FormatError(outcome.errors)
    return outcome.document
