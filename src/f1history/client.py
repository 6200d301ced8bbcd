"""Public client classes for the F1 history API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from f1history._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from f1history.endpoints import map_to_endpoint
from f1history.exceptions import F1HistoryValidationError
from f1history.models.season import SeasonResponse, SessionResponse
from f1history.session_types import SessionType


def _validate[T: BaseModel](model_type: type[T], data: Any) -> T:
    """Validate a JSON payload against a Pydantic model."""
    try:
        return model_type.model_validate(data)
    except ValidationError as exc:
        raise F1HistoryValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class F1HistoryClient:
    """Synchronous client for the F1 history API.

    Usage:
        f1 = F1HistoryClient()
        season = f1.season(2023)
        f1.close()

        # Or as a context manager:
        with F1HistoryClient() as f1:
            quali = f1.session_results(2023, 5, SessionType.QUALIFYING)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)

    def __enter__(self) -> F1HistoryClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def raw(
        self,
        year: str | int | None = None,
        round_number: str | int | None = None,
        session_type: str | SessionType = SessionType.RACE,
    ) -> Any:
        """Fetch the unparsed JSON body for the mapped endpoint."""
        return self._transport.get(map_to_endpoint(year, round_number, session_type))

    # ── Endpoints ──────────────────────────────────────────────

    def current_season(self) -> SeasonResponse:
        """Get the calendar of the current season."""
        return _validate(SeasonResponse, self.raw())

    def season(self, year: str | int) -> SeasonResponse:
        """Get the calendar of a season."""
        return _validate(SeasonResponse, self.raw(year))

    def session_results(
        self,
        year: str | int,
        round_number: str | int,
        session_type: str | SessionType = SessionType.RACE,
    ) -> SessionResponse:
        """Get the classification of one session of a Grand Prix."""
        return _validate(SessionResponse, self.raw(year, round_number, session_type))


class AsyncF1HistoryClient:
    """Asynchronous client for the F1 history API.

    Usage:
        async with AsyncF1HistoryClient() as f1:
            season = await f1.season(2023)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncF1HistoryClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def raw(
        self,
        year: str | int | None = None,
        round_number: str | int | None = None,
        session_type: str | SessionType = SessionType.RACE,
    ) -> Any:
        """Fetch the unparsed JSON body for the mapped endpoint."""
        return await self._transport.get(map_to_endpoint(year, round_number, session_type))

    # ── Endpoints ──────────────────────────────────────────────

    async def current_season(self) -> SeasonResponse:
        """Get the calendar of the current season."""
        return _validate(SeasonResponse, await self.raw())

    async def season(self, year: str | int) -> SeasonResponse:
        """Get the calendar of a season."""
        return _validate(SeasonResponse, await self.raw(year))

    async def session_results(
        self,
        year: str | int,
        round_number: str | int,
        session_type: str | SessionType = SessionType.RACE,
    ) -> SessionResponse:
        """Get the classification of one session of a Grand Prix."""
        return _validate(SessionResponse, await self.raw(year, round_number, session_type))
