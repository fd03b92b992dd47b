"""FastAPI dependencies supplying the document source and credential check."""

from __future__ import annotations

from fastapi import Depends, Header

from daemonmd.access import AccessLevel
from daemonmd.credentials import CredentialResolver, bearer_token
from daemonmd.sources import DocumentSource, source_from_config


def get_document_source() -> DocumentSource:
    return source_from_config()


def get_credential_resolver() -> CredentialResolver:
    return CredentialResolver.from_config()


def get_requester_level(
    authorization: str | None = Header(default=None),
    resolver: CredentialResolver = Depends(get_credential_resolver),
) -> AccessLevel:
    """Resolve the caller's bearer token; anything unrecognised is public."""
    return resolver.resolve(bearer_token(authorization))
