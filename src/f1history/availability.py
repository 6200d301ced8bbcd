"""Historical data-availability advice per session type and season."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from f1history.session_types import SessionType

SPRINT_FIRST_SEASON = 2021
PRACTICE_RECORDS_FIRST_SEASON = 2003
QUALIFYING_RECORDS_FIRST_SEASON = 1995

GENERIC_EMPTY_MESSAGE = "No hay datos disponibles para esta sesión"


@dataclass(frozen=True)
class Availability:
    """Whether a session is expected to have data, and what to tell the user."""

    available: bool
    message: str = ""


class NoticeKind(str, Enum):
    """How an empty result set should be presented."""

    UNAVAILABLE = "unavailable"
    CAVEAT = "caveat"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class EmptyResultNotice:
    kind: NoticeKind
    message: str


def check_availability(session_type: SessionType | str, year: int) -> Availability:
    """Advise whether results can exist for a session in a given season.

    Advisory only: callers still query upstream and use this to word the
    message shown when the result list comes back empty.
    """
    session = SessionType.parse(session_type)

    if session == SessionType.SPRINT:
        if year < SPRINT_FIRST_SEASON:
            return Availability(
                available=False,
                message=(
                    f"El formato Sprint se introdujo en {SPRINT_FIRST_SEASON}. "
                    f"No existen carreras Sprint en la temporada {year}."
                ),
            )
        return Availability(
            available=True,
            message=(
                "No todos los Grandes Premios incluyen carrera Sprint. "
                "Es posible que esta ronda no haya tenido Sprint."
            ),
        )

    if session is not None and session.is_practice:
        if year < PRACTICE_RECORDS_FIRST_SEASON:
            return Availability(
                available=False,
                message=(
                    "Los entrenamientos libres se registran de forma sistemática desde "
                    f"{PRACTICE_RECORDS_FIRST_SEASON}. No hay datos de {session.label} "
                    f"para la temporada {year}."
                ),
            )
        return Availability(available=True)

    if session == SessionType.QUALIFYING:
        if year < QUALIFYING_RECORDS_FIRST_SEASON:
            return Availability(
                available=False,
                message=(
                    f"Los registros de clasificación anteriores a {QUALIFYING_RECORDS_FIRST_SEASON} "
                    "son limitados y el formato cambió varias veces."
                ),
            )
        return Availability(available=True)

    return Availability(available=True)


def describe_empty_result(
    session_type: SessionType | str,
    year: int | str | None,
) -> EmptyResultNotice:
    """Classify an empty result set into the message the viewer should show."""
    try:
        season = int(year)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return EmptyResultNotice(NoticeKind.UNEXPECTED, GENERIC_EMPTY_MESSAGE)

    advice = check_availability(session_type, season)
    if not advice.available:
        return EmptyResultNotice(NoticeKind.UNAVAILABLE, advice.message)
    if advice.message:
        return EmptyResultNotice(NoticeKind.CAVEAT, advice.message)
    return EmptyResultNotice(NoticeKind.UNEXPECTED, GENERIC_EMPTY_MESSAGE)
