"""Ordered access levels and the comparison rule between them."""

from __future__ import annotations

from enum import Enum


class AccessLevel(str, Enum):
    """Trust levels, from least to most restrictive."""

    PUBLIC = "public"
    RESTRICTED = "restricted"
    PRIVATE = "private"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @classmethod
    def from_token(cls, token: str) -> AccessLevel | None:
        """Return the level named by ``token`` (without the ``@``), or None.

        Tokens are case-sensitive: ``public`` is a level, ``Public`` is not.
        """
        try:
            return cls(token)
        except ValueError:
            return None


_RANKS = {
    AccessLevel.PUBLIC: 0,
    AccessLevel.RESTRICTED: 1,
    AccessLevel.PRIVATE: 2,
}

LEVEL_TOKENS = tuple(level.value for level in AccessLevel)


def rank(level: AccessLevel) -> int:
    """Ordinal position of ``level`` on the trust scale (public=0)."""
    return level.rank


def is_accessible(content_level: AccessLevel, requester_level: AccessLevel) -> bool:
    """Return True when a requester at ``requester_level`` may see ``content_level`` content."""
    return rank(requester_level) >= rank(content_level)
