"""HTTP gateway from the viewer to the race proxy endpoint."""

from __future__ import annotations

from typing import Any, Protocol

import httpx

from f1history._http import DECODE_ERROR_PREFIX, DEFAULT_TIMEOUT, SyncTransport, build_query_params
from f1history.exceptions import F1HistoryAPIError, F1HistoryError

from .api_logging import log_api_call


class ProxyErrorResponse(F1HistoryError):
    """The proxy answered with an ``{"error": ...}`` envelope."""


class ProxyConnectivityError(ProxyErrorResponse):
    """The proxy could not reach upstream: HTTP error status, network failure or timeout."""


def error_from_envelope(body: Any) -> ProxyErrorResponse | None:
    """Exception for an ``{"error": ...}`` body, or None for any other body.

    The proxy forwards upstream failures as text. Only an undecodable upstream
    body is reported as such; every other failure is a connectivity failure.
    """
    if not (isinstance(body, dict) and body.get("error")):
        return None
    message = str(body["error"])
    if message.startswith(DECODE_ERROR_PREFIX):
        return ProxyErrorResponse(message)
    return ProxyConnectivityError(message)


class RaceGateway(Protocol):
    """Anything that can answer the proxy's year/round/type query."""

    def fetch(
        self,
        year: str | None = None,
        round_number: str | None = None,
        session_type: str | None = None,
    ) -> Any: ...


class ProxyGateway:
    """Calls the proxy endpoint over HTTP.

    Usage:
        with ProxyGateway("http://127.0.0.1:8000/api/f1/races") as gateway:
            season = gateway.fetch(year="2023")
    """

    def __init__(self, proxy_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        url = httpx.URL(proxy_url)
        self._path = url.path
        self._transport = SyncTransport(
            base_url=str(url.copy_with(path="/", query=None)),
            timeout=timeout,
        )

    def __enter__(self) -> ProxyGateway:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    @log_api_call
    def fetch(
        self,
        year: str | None = None,
        round_number: str | None = None,
        session_type: str | None = None,
    ) -> Any:
        """Return the proxy's JSON body; an error envelope is raised as ProxyErrorResponse."""
        params = build_query_params(year=year, round=round_number, type=session_type)
        try:
            data = self._transport.get(self._path, params)
        except F1HistoryAPIError as exc:
            envelope = error_from_envelope(exc.payload)
            if envelope is not None:
                raise envelope from exc
            raise
        envelope = error_from_envelope(data)
        if envelope is not None:
            raise envelope
        return data
