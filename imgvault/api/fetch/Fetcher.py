"""Image download over HTTP(S)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .extension_for import extension_for
from .FetchError import FetchError
from .FetchResult import FetchResult

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)


class Fetcher:
    """Fetch image bytes, rejecting non-image and implausibly small responses.

    Use as an async context manager to share one HTTP session across a batch;
    outside a context each call opens its own session.
    """

    def __init__(self, timeout_secs: float = 30.0, min_bytes: int = 1024):
        self.timeout_secs = timeout_secs
        self.min_bytes = min_bytes
        self._session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> Fetcher:
        self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout_secs))
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._session is not None:
            await self._session.close()
        self._session = None

    @staticmethod
    def _headers(referer: str | None) -> dict[str, str]:
        if referer:
            return {"Accept": "*/*", "User-Agent": USER_AGENT, "Referer": referer}
        return {"Accept": "image/*", "User-Agent": USER_AGENT}

    def check_payload(self, url: str, content_type: str, data: bytes) -> FetchResult:
        """Apply the acceptance policy to a completed response."""
        if content_type.split("/", 1)[0].strip().lower() == "text":
            raise FetchError(url, "Remote resource is not an image")
        extension = extension_for(content_type, url)
        if extension is None:
            raise FetchError(url, f"Unsupported content type: {content_type or 'missing'}")
        if extension != ".svg" and len(data) < self.min_bytes:
            raise FetchError(url, f"Payload too small to be an image ({len(data)} bytes)")
        return FetchResult(data=data, content_type=content_type, extension=extension)

    async def _get(self, session: aiohttp.ClientSession, url: str, referer: str | None) -> FetchResult:
        async with session.get(url, headers=self._headers(referer), allow_redirects=True) as response:
            if response.status >= 400:
                raise FetchError(url, f"HTTP {response.status}")
            content_type = response.headers.get("Content-Type", "application/octet-stream")
            data = await response.read()
        logger.debug("Fetched %s: %d bytes (%s)", url, len(data), content_type)
        return self.check_payload(url, content_type, data)

    async def fetch(self, url: str, referer: str | None = None) -> FetchResult:
        """Download ``url``, sending ``referer`` when given.

        Raises:
            FetchError: On network failure, HTTP error, non-image content or
                an undersized payload.
        """
        try:
            if self._session is not None:
                return await self._get(self._session, url, referer)
            async with aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout_secs)) as session:
                return await self._get(session, url, referer)
        except FetchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(url, f"Download failed: {str(e) or type(e).__name__}") from e
