"""HTTP utilities for fetching the document with retry logic."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx
from loguru import logger

from daemonmd.config import (
    DAEMONMD_FETCH_BACKOFF_S,
    DAEMONMD_FETCH_MAX_RETRIES,
    DAEMONMD_FETCH_TIMEOUT_S,
    DAEMONMD_USER_AGENT,
)
from daemonmd.exceptions import SourceUnavailableError

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def fetch_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    max_retries: int = DAEMONMD_FETCH_MAX_RETRIES,
    backoff_s: float = DAEMONMD_FETCH_BACKOFF_S,
) -> str | None:
    """Fetch text from a URL, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        max_retries: Extra attempts after the first one.
        backoff_s: Base delay, doubled after every failed attempt.

    Returns:
        The response text, or None when the server answers 404.

    Raises:
        SourceUnavailableError: If every attempt fails.
    """
    last_exc: Exception | None = None

    async def do_fetch(http_client: httpx.AsyncClient) -> str | None:
        nonlocal last_exc

        for attempt in range(max_retries + 1):
            try:
                response = await http_client.get(url)

                if response.status_code == 404:
                    return None

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = SourceUnavailableError(f"HTTP {response.status_code} from {url}")
                else:
                    response.raise_for_status()
                    return response.text
            except (httpx.RequestError, httpx.HTTPStatusError) as exc:
                last_exc = exc

            if attempt < max_retries:
                backoff = backoff_s * (2**attempt)
                logger.debug("Retrying {} in {:.2f}s after: {}", url, backoff, last_exc)
                await asyncio.sleep(backoff)

        raise SourceUnavailableError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await do_fetch(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(DAEMONMD_FETCH_TIMEOUT_S),
        headers={"User-Agent": DAEMONMD_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await do_fetch(new_client)
