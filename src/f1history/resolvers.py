"""Selection of display values from result rows.

Upstream rows vary by session and by era: qualifying rows carry ``q1``..``q3``
and a grid position, race rows carry a finishing time or a retirement status,
and driver names come in two naming schemes. Each selector returns the first
field that holds a value, falling back to a fixed placeholder.
"""

from __future__ import annotations

from typing import Any

from f1history.models.result import ResultRecord
from f1history.session_types import SessionType

FALLBACK_MARKER = "---"
UNKNOWN_NAME = "Desconocido"
NO_LAPS = "-"


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _first_present(*values: Any, default: str) -> str:
    for value in values:
        if _is_present(value):
            return str(value)
    return default


def _is_qualifying(session_type: SessionType | str) -> bool:
    return SessionType.parse(session_type) == SessionType.QUALIFYING


def select_position(record: ResultRecord, session_type: SessionType | str) -> str:
    """Qualifying shows the grid position first; every other session the finishing position."""
    if _is_qualifying(session_type):
        return _first_present(record.grid_position, record.position, default=FALLBACK_MARKER)
    return _first_present(record.position, default=FALLBACK_MARKER)


def select_time(record: ResultRecord, session_type: SessionType | str) -> str:
    """Qualifying shows the deepest segment time (Q3 > Q2 > Q1).

    Other sessions show elapsed time, then status, then fastest lap time.
    """
    if _is_qualifying(session_type):
        return _first_present(record.q3, record.q2, record.q1, default=FALLBACK_MARKER)
    fastest = record.fastest_lap.time if record.fastest_lap else None
    return _first_present(record.time, record.status, fastest, default=FALLBACK_MARKER)


def select_driver_name(record: ResultRecord) -> str:
    driver = record.driver
    if driver is not None:
        if _is_present(driver.name) and _is_present(driver.surname):
            return f"{driver.name} {driver.surname}"
        if _is_present(driver.given_name) and _is_present(driver.family_name):
            return f"{driver.given_name} {driver.family_name}"
        if _is_present(driver.surname):
            return str(driver.surname)
    nested_id = driver.driver_id if driver is not None else None
    return _first_present(record.driver_id, nested_id, default=UNKNOWN_NAME)


def select_team_name(record: ResultRecord) -> str:
    nested = record.team.team_name if record.team else None
    return _first_present(nested, record.team_name, default=UNKNOWN_NAME)


def select_laps(record: ResultRecord) -> str:
    return _first_present(record.laps, default=NO_LAPS)
