"""F1 history data models."""

from f1history.models.race import RaceDetail, RaceSummary, Schedule, ScheduleSlot
from f1history.models.result import DriverRef, FastestLap, ResultRecord, TeamRef
from f1history.models.season import SeasonResponse, SessionResponse

__all__ = [
    "DriverRef",
    "FastestLap",
    "RaceDetail",
    "RaceSummary",
    "ResultRecord",
    "Schedule",
    "ScheduleSlot",
    "SeasonResponse",
    "SessionResponse",
    "TeamRef",
]
