"""
Remote favicon fetcher over aiohttp.

FaviconFetcher performs a single GET against the icon lookup service and
reports the result as an outcome: Found with the body on a 2xx status,
NotFound on any other status, Failure when the transport raised. Timeouts are
enforced by the session's ClientTimeout; there are no retries.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout, TCPConnector

from .config.models import TransportConfig
from .models import Failure, Found, NotFound, Outcome

logger = logging.getLogger(__name__)


class FaviconFetcher:
    """
    Fetches favicon bytes from the remote lookup service.

    A session passed in by the caller is used as-is and left open on close();
    otherwise the fetcher creates its own session on first use and owns it.

    Example:
        ```python
        async with FaviconFetcher() as fetcher:
            outcome = await fetcher.fetch(build_favicon_url("https://example.com"))
        ```
    """

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        session: Optional[ClientSession] = None,
    ) -> None:
        self.config = config or TransportConfig()
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> FaviconFetcher:
        await self._create_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def _create_session(self) -> ClientSession:
        """Create the aiohttp session if none exists yet."""
        if self._session is None:
            timeout = ClientTimeout(
                total=self.config.total_timeout,
                connect=self.config.connect_timeout,
            )
            connector = TCPConnector(ssl=self.config.verify_ssl)
            self._session = ClientSession(
                timeout=timeout,
                connector=connector,
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this fetcher created it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
            self._session = None

    async def fetch(self, url: str) -> Outcome:
        """
        Fetch url once.

        Args:
            url: Icon lookup URL

        Returns:
            Found with the response body on a 2xx status, NotFound with the
            status otherwise, Failure if the request raised
        """
        session = await self._create_session()

        try:
            async with session.get(url) as response:
                logger.debug(
                    f"Fetched favicon from network: {url} ({response.status})",
                    extra={"url": url, "status": response.status},
                )
                # ClientResponse.ok is also true for 3xx
                if not 200 <= response.status < 300:
                    return NotFound(f"HTTP {response.status}", status=response.status)
                data = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.warning(f"Failed to fetch favicon image from {url}: {e!r}", extra={"url": url})
            return Failure(f"fetch failed: {e!r}", e)

        return Found(data)
