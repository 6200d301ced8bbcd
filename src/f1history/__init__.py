"""F1 Historial — Formula 1 results from f1api.dev, with a proxy and a viewer."""

from f1history.availability import Availability, check_availability, describe_empty_result
from f1history.client import AsyncF1HistoryClient, F1HistoryClient
from f1history.endpoints import map_to_endpoint
from f1history.exceptions import (
    F1HistoryAPIError,
    F1HistoryConnectionError,
    F1HistoryDecodeError,
    F1HistoryError,
    F1HistoryTimeoutError,
    F1HistoryValidationError,
)
from f1history.races import dedupe_races, short_race_name
from f1history.resolvers import (
    select_driver_name,
    select_laps,
    select_position,
    select_team_name,
    select_time,
)
from f1history.session_types import SessionType
from f1history.teams import TeamProfile, resolve_team

__all__ = [
    "AsyncF1HistoryClient",
    "Availability",
    "F1HistoryAPIError",
    "F1HistoryClient",
    "F1HistoryConnectionError",
    "F1HistoryDecodeError",
    "F1HistoryError",
    "F1HistoryTimeoutError",
    "F1HistoryValidationError",
    "SessionType",
    "TeamProfile",
    "check_availability",
    "dedupe_races",
    "describe_empty_result",
    "map_to_endpoint",
    "resolve_team",
    "select_driver_name",
    "select_laps",
    "select_position",
    "select_team_name",
    "select_time",
    "short_race_name",
]

__version__ = "0.1.0"
