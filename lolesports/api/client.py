"""Async httpx wrapper with API-key auth and error mapping."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lolesports.api.errors import APIRequestError, APITimeoutError, RateLimitedError

log = logging.getLogger(__name__)

BASE_URL = "https://esports-api.lolesports.com"
DEFAULT_TIMEOUT = 10.0


class EsportsAPIClient:
    """Async HTTP client for the LoL Esports API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self.timeout = timeout
        kwargs: dict[str, Any] = {
            "base_url": base_url.rstrip("/"),
            "timeout": timeout,
            "headers": {"x-api-key": api_key} if api_key else {},
        }
        if transport is not None:
            kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**kwargs)

    async def close(self) -> None:
        await self._client.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make an authenticated GET request and return JSON."""
        try:
            response = await self._client.get(path, params=params or {})
        except httpx.TimeoutException as exc:
            raise APITimeoutError(
                f"Request timeout after {self.timeout:g}s: {path}"
            ) from exc
        except httpx.HTTPError as exc:
            raise APIRequestError(f"API request failed: {exc}") from exc

        if response.status_code == 429:
            raise RateLimitedError("API rate limit exceeded", status_code=429)
        if response.is_error:
            log.warning("GET %s returned %d", path, response.status_code)
            raise APIRequestError(
                f"HTTP Error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        return response.json()
