"""
aiohttp implementation of the :class:`~discord_structs.ports.Network` port.

Endpoints handed over by the structs are paths such as
``/channels/<id>/messages/<id>``; the adapter prefixes them with the
configured API base. HTTP errors surface as ``aiohttp.ClientResponseError``
and are left for the caller of ``delete``/``edit`` to handle.
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ..config import core
from ..ports import ApiResponse

logger = logging.getLogger(__name__)


class RestNetwork:
    """Minimal Discord REST client for message deletes and edits."""

    def __init__(
        self,
        token: str | None = None,
        *,
        api_base: str | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._token = token if token is not None else core.DISCORD_API_TOKEN
        self._api_base = (api_base or core.API_BASE).rstrip("/")
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "RestNetwork":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bot {self._token}"
        return headers

    def _url(self, endpoint: str) -> str:
        return f"{self._api_base}/{endpoint.lstrip('/')}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=core.REQUEST_TIMEOUT)
            self._session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
        return self._session

    async def _request(self, method: str, endpoint: str, body: dict | None = None) -> ApiResponse:
        session = self._get_session()
        url = self._url(endpoint)
        logger.debug("%s %s", method, url)
        async with session.request(method, url, headers=self._headers(), json=body) as resp:
            resp.raise_for_status()
            if resp.status == 204:
                return ApiResponse(status=resp.status, body=None)
            return ApiResponse(status=resp.status, body=await resp.json())

    async def delete(self, endpoint: str) -> ApiResponse:
        return await self._request("DELETE", endpoint)

    async def patch(self, endpoint: str, body: dict) -> ApiResponse:
        return await self._request("PATCH", endpoint, body)

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
