"""Resolve a presented bearer token to a requester access level."""

from __future__ import annotations

import hmac
from dataclasses import dataclass

from daemonmd import config
from daemonmd.access import AccessLevel

_BEARER_PREFIX = "bearer "


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header value."""
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        return None
    return authorization[len(_BEARER_PREFIX):].strip() or None


def _matches(token: str, secrets: tuple[str, ...]) -> bool:
    presented = token.encode("utf-8")
    # No early exit: every secret is compared.
    matched = False
    for secret in secrets:
        if hmac.compare_digest(presented, secret.encode("utf-8")):
            matched = True
    return matched


@dataclass(frozen=True)
class CredentialResolver:
    """Equality check of a token against the configured secrets."""

    restricted_tokens: tuple[str, ...] = ()
    private_tokens: tuple[str, ...] = ()

    @classmethod
    def from_config(cls) -> CredentialResolver:
        return cls(
            restricted_tokens=config.DAEMONMD_RESTRICTED_TOKENS,
            private_tokens=config.DAEMONMD_PRIVATE_TOKENS,
        )

    def resolve(self, token: str | None) -> AccessLevel:
        """Return the highest level ``token`` grants; public when it grants nothing."""
        if not token:
            return AccessLevel.PUBLIC
        if _matches(token, self.private_tokens):
            return AccessLevel.PRIVATE
        if _matches(token, self.restricted_tokens):
            return AccessLevel.RESTRICTED
        return AccessLevel.PUBLIC
