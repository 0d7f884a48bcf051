"""Exception types raised by the esports API layer and cache backends."""

from __future__ import annotations


class EsportsAPIError(Exception):
    """Base class for all errors surfaced to callers."""

    retryable = False


class APIRequestError(EsportsAPIError):
    """The upstream request failed (transport error or non-2xx status)."""

    retryable = True

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class APITimeoutError(APIRequestError):
    """The upstream request exceeded the configured timeout."""


class RateLimitedError(APIRequestError):
    """The upstream answered 429."""


class EventNotFoundError(EsportsAPIError):
    def __init__(self, event_id: str) -> None:
        super().__init__(f'Event "{event_id}" not found')
        self.event_id = event_id


class CacheError(EsportsAPIError):
    """Storage-level cache failure. MemoryCache never raises this."""
