"""Parsed document models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from daemonmd.access import AccessLevel


class ContentBlock(BaseModel):
    """A contiguous span of text inside a section.

    ``level`` is None for the block that precedes the first marker line: it
    takes the enclosing section's level and has no level of its own to compare.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    level: AccessLevel | None = None

    @property
    def inherited(self) -> bool:
        return self.level is None

    def effective_level(self, section_level: AccessLevel | None) -> AccessLevel:
        """Resolve inheritance against the enclosing section's declared level."""
        if self.level is not None:
            return self.level
        return section_level or AccessLevel.PUBLIC


class Section(BaseModel):
    """A named region of the document, optionally access-leveled."""

    model_config = ConfigDict(frozen=True)

    name: str
    level: AccessLevel | None = None
    blocks: tuple[ContentBlock, ...] = ()


class Document(BaseModel):
    """Sections keyed by lower-cased name, in order of first appearance."""

    model_config = ConfigDict(frozen=True)

    sections: dict[str, Section] = Field(default_factory=dict)


class VerifiedDocument(BaseModel):
    """A document that has passed the security check.

    Only ``daemonmd.security.ensure_secure`` creates these; the content filter
    accepts nothing else.
    """

    model_config = ConfigDict(frozen=True)

    document: Document
