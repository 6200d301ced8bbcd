"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from f1history.exceptions import (
    F1HistoryAPIError,
    F1HistoryConnectionError,
    F1HistoryDecodeError,
    F1HistoryTimeoutError,
)

DEFAULT_BASE_URL = "https://f1api.dev/api"
DEFAULT_TIMEOUT = 30.0

# Leading text of every decode failure message; the proxy forwards it verbatim.
DECODE_ERROR_PREFIX = "Invalid JSON from"


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples, skipping None and empty values."""
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None or value == "":
            continue
        params.append((key, str(value)))
    return params


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        try:
            payload = response.json()
        except ValueError:
            payload = None
        raise F1HistoryAPIError(
            status_code=response.status_code,
            message=response.reason_phrase or response.text,
            payload=payload,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise F1HistoryDecodeError(f"{DECODE_ERROR_PREFIX} {response.url}: {exc}") from exc


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params or [])
        except httpx.TimeoutException as exc:
            raise F1HistoryTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise F1HistoryConnectionError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params or [])
        except httpx.TimeoutException as exc:
            raise F1HistoryTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise F1HistoryConnectionError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
