"""View state and the controller that owns it (no Streamlit dependency).

Every user action goes through ``ResultsController``; it is the only writer of
``ViewState``. Each fetch is stamped with a generation number and its response
is applied only while that generation is still the latest one dispatched, so a
superseded load can never overwrite a newer selection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ValidationError

from f1history.availability import NoticeKind, describe_empty_result
from f1history.exceptions import (
    F1HistoryAPIError,
    F1HistoryConnectionError,
    F1HistoryError,
    F1HistoryTimeoutError,
    F1HistoryValidationError,
)
from f1history.models.race import RaceSummary
from f1history.models.result import ResultRecord
from f1history.models.season import SeasonResponse, SessionResponse
from f1history.races import dedupe_races
from f1history.session_types import SessionType

from .api_logging import log_service_call
from .formatters import round_value
from .gateway import ProxyConnectivityError, RaceGateway
from .services.results_table import ResultRow, build_rows

logger = logging.getLogger(__name__)

ROUND_REQUIRED_ERROR = "Por favor selecciona un Gran Premio"
CONNECTIVITY_ERROR = "No se pudo conectar con el servidor de datos. Inténtalo de nuevo."
LOAD_FAILED_PREFIX = "Error al cargar resultados"

_CONNECTIVITY_FAILURES = (
    F1HistoryAPIError,
    F1HistoryConnectionError,
    F1HistoryTimeoutError,
    ProxyConnectivityError,
)


@dataclass(frozen=True)
class RaceInfo:
    name: str
    season: str
    round: str


@dataclass
class ViewState:
    """Everything the viewer renders."""

    selected_year: str
    selected_round: str = ""
    selected_session_type: SessionType = SessionType.RACE
    race_list: list[RaceSummary] = field(default_factory=list)
    current_results: list[ResultRecord] = field(default_factory=list)
    current_rows: list[ResultRow] = field(default_factory=list)
    results_session_type: SessionType | None = None
    current_race_info: RaceInfo | None = None
    is_loading: bool = False
    error_message: str | None = None
    notice_kind: NoticeKind | None = None

    def clear_results(self) -> None:
        self.current_results = []
        self.current_rows = []
        self.results_session_type = None
        self.current_race_info = None
        self.error_message = None
        self.notice_kind = None


def describe_failure(exc: Exception) -> str:
    """User-facing message for a failed fetch."""
    if isinstance(exc, _CONNECTIVITY_FAILURES):
        return CONNECTIVITY_ERROR
    return f"{LOAD_FAILED_PREFIX}: {exc}"


def _parse[T: BaseModel](model_type: type[T], payload: Any) -> T:
    try:
        return model_type.model_validate(payload)
    except ValidationError as exc:
        raise F1HistoryValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class ResultsController:
    """Drives year/round/session selection and result loading."""

    def __init__(self, gateway: RaceGateway, year: str) -> None:
        self._gateway = gateway
        self._generation = 0
        self.state = ViewState(selected_year=year)

    # ── Generation bookkeeping ─────────────────────────────────

    def _dispatch(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    # ── Selection ──────────────────────────────────────────────

    def select_round(self, round_number: str) -> None:
        self.state.selected_round = round_number

    def select_session_type(self, session_type: SessionType | str) -> None:
        self.state.selected_session_type = SessionType.parse(session_type) or SessionType.RACE

    @log_service_call
    def change_year(self, year: str) -> None:
        """Load the season calendar for ``year`` and select its first round."""
        state = self.state
        state.selected_year = year
        state.selected_round = ""
        state.race_list = []
        state.error_message = None
        state.notice_kind = None

        generation = self._dispatch()
        try:
            season = _parse(SeasonResponse, self._gateway.fetch(year=year))
        except F1HistoryError as exc:
            logger.warning("Error loading races for %s: %s", year, exc)
            if self._is_current(generation):
                state.error_message = describe_failure(exc)
                state.notice_kind = None
            return
        if not self._is_current(generation):
            logger.info("Discarding stale race list for %s", year)
            return

        state.race_list = dedupe_races(season.races)
        if state.race_list:
            state.selected_round = round_value(state.race_list[0])

    # ── Loading ────────────────────────────────────────────────

    @log_service_call
    def load_results(self) -> None:
        """Fetch and resolve the selected session's classification."""
        state = self.state
        if not state.selected_round:
            state.error_message = ROUND_REQUIRED_ERROR
            state.notice_kind = None
            return

        year = state.selected_year
        round_number = state.selected_round
        session = state.selected_session_type

        generation = self._dispatch()
        state.clear_results()
        state.is_loading = True
        try:
            response = _parse(
                SessionResponse,
                self._gateway.fetch(
                    year=year, round_number=round_number, session_type=session.value,
                ),
            )
        except F1HistoryError as exc:
            logger.warning("Error loading %s %s/%s: %s", session.value, year, round_number, exc)
            if self._is_current(generation):
                state.error_message = describe_failure(exc)
                state.is_loading = False
            return
        if not self._is_current(generation):
            logger.info("Discarding stale %s results for %s/%s", session.value, year, round_number)
            return

        state.is_loading = False
        race = response.races
        records = race.results_for(session)
        if not records:
            notice = describe_empty_result(session, year)
            state.error_message = notice.message
            state.notice_kind = notice.kind
            return

        state.current_results = records
        state.current_rows = build_rows(records, session)
        state.results_session_type = session
        state.current_race_info = RaceInfo(
            name=race.race_name or session.label,
            season=str(response.season or year),
            round=str(race.round or round_number),
        )

    @log_service_call
    def load_latest(self) -> None:
        """Jump to the last round of the current season and load it."""
        state = self.state
        state.error_message = None
        state.notice_kind = None
        generation = self._dispatch()
        try:
            season = _parse(SeasonResponse, self._gateway.fetch())
        except F1HistoryError as exc:
            logger.warning("Error loading current season: %s", exc)
            if self._is_current(generation):
                state.error_message = describe_failure(exc)
                state.notice_kind = None
            return
        if not self._is_current(generation):
            return

        races = dedupe_races(season.races)
        if not races:
            return
        if season.season:
            state.selected_year = str(season.season)
        state.race_list = races
        state.selected_round = round_value(races[-1])
        self.load_results()
