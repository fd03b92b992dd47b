"""Local configuration for daemonmd."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_DOCUMENT_PATH = "daemon.md"
DEFAULT_BUILD_OUTPUT = "public/daemon.md"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "daemonmd/0.1"
DEFAULT_LOG_LEVEL = "INFO"


def split_tokens(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated secret list, dropping blanks."""
    return tuple(item.strip() for item in (raw or "").split(",") if item.strip())


# Source document and build target.
DAEMONMD_DOCUMENT_PATH = Path(os.getenv("DAEMONMD_DOCUMENT_PATH", DEFAULT_DOCUMENT_PATH)).expanduser()
DAEMONMD_DOCUMENT_URL = os.getenv("DAEMONMD_DOCUMENT_URL") or None
DAEMONMD_BUILD_OUTPUT = Path(os.getenv("DAEMONMD_BUILD_OUTPUT", DEFAULT_BUILD_OUTPUT)).expanduser()

# Bearer secrets granting elevated access.
DAEMONMD_RESTRICTED_TOKENS = split_tokens(os.getenv("DAEMONMD_RESTRICTED_TOKENS"))
DAEMONMD_PRIVATE_TOKENS = split_tokens(os.getenv("DAEMONMD_PRIVATE_TOKENS"))

DAEMONMD_FETCH_TIMEOUT_S = float(os.getenv("DAEMONMD_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
DAEMONMD_FETCH_MAX_RETRIES = int(os.getenv("DAEMONMD_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
DAEMONMD_FETCH_BACKOFF_S = float(os.getenv("DAEMONMD_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
DAEMONMD_USER_AGENT = os.getenv("DAEMONMD_USER_AGENT", DEFAULT_USER_AGENT)
DAEMONMD_LOG_LEVEL = os.getenv("DAEMONMD_LOG_LEVEL", DEFAULT_LOG_LEVEL)
