"""HTTP client helper."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class HTTPClient:
    """Async HTTP client wrapper around a lazily created aiohttp session."""

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request returning the decoded JSON body."""
        logger.debug("http_post", extra={"url": url})
        async with self.session.post(url, json=json, headers=headers) as response:
            response.raise_for_status()
            return await response.json()

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
