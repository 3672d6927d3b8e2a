"""
Generic async HTTP API client.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientTimeout

from navrouter import __version__
from navrouter.core.errors import APIError, ResourceNotFoundError

logger = logging.getLogger(__name__)


class APIClient:
    """Async JSON-over-HTTP client with a lazily created session."""

    def __init__(
        self,
        base_url: str,
        client_id: Optional[str] = None,
        timeout: int = 30,
    ):
        self.base_url = base_url.rstrip("/")
        self.client_id = client_id
        self.timeout = ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            headers = {
                "User-Agent": f"navrouter/{__version__}",
                "Accept": "application/json",
            }
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers=headers,
            )
        return self._session

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Send a GET request.

        Raises:
            ResourceNotFoundError: 404
            APIError: any other non-200 status, a non-JSON body, a timeout or a
                transport failure
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        query = dict(params or {})
        if self.client_id:
            query.setdefault("client_id", self.client_id)
        session = await self._get_session()

        try:
            async with session.get(url, params=query) as response:
                if response.status == 200:
                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        logger.error(f"Undecodable response from {url}: {e}")
                        raise APIError(message=f"undecodable response: {e}", context={"url": url})
                if response.status == 404:
                    logger.warning(f"Resource not found: {url}")
                    raise ResourceNotFoundError(message=f"not found: {url}", context={"url": url})
                text = await response.text()
                logger.error(f"API error {response.status}: {text[:200]}")
                raise APIError(
                    message=f"API error: {response.status}",
                    status=response.status,
                    context={"url": url},
                )
        except asyncio.TimeoutError:
            logger.error(f"Request timeout: {url}")
            raise APIError(message=f"timeout: {url}", context={"url": url})
        except aiohttp.ClientError as e:
            logger.error(f"Request failed: {url} - {e}")
            raise APIError(message=f"request failed: {e}", context={"url": url})

    async def close(self):
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
