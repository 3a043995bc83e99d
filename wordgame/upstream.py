from __future__ import annotations
import logging
from typing import Any, Mapping, Optional

import httpx

from .errors import TransportError, UpstreamError

logger = logging.getLogger(__name__)

class UpstreamClient:
    """Thin wrapper over ``httpx.AsyncClient`` for the third-party APIs.

    Non-2xx answers raise ``UpstreamError`` carrying the upstream status;
    network failures and undecodable bodies raise ``TransportError``.
    Callers replace the messages with the ones their endpoint exposes.
    """

    def __init__(self, http: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        self._http = http or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def get_json(self, url: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        try:
            response = await self._http.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning('GET %s failed: %s', url, exc)
            raise TransportError(str(exc)) from exc
        if not response.is_success:
            logger.warning('GET %s answered %s', url, response.status_code)
            raise UpstreamError(response.reason_phrase, response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            logger.warning('GET %s returned a non-JSON body', url)
            raise TransportError('invalid JSON from upstream') from exc

    async def aclose(self) -> None:
        await self._http.aclose()
