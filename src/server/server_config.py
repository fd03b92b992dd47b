"""Server process configuration."""

from __future__ import annotations

import os

from daemonmd.config import split_tokens

APP_NAME = "daemonmd"
APP_VERSION = "0.1.0"

DEFAULT_CORS_ORIGINS = "*"

CORS_ORIGINS = list(split_tokens(os.getenv("DAEMONMD_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)))
CORS_METHODS = ["GET", "POST", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]

# Upper bound on document text accepted by the validation endpoint.
MAX_VALIDATE_CHARS = 1_000_000
