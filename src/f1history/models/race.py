"""Race calendar entry and race detail models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from f1history.models.result import ResultRecord
from f1history.session_types import SessionType


class ScheduleSlot(BaseModel):
    """Date and time of one session; both are null when the session did not run."""

    model_config = ConfigDict(frozen=True)

    date: str | None = None
    time: str | None = None


class Schedule(BaseModel):
    """Weekend timetable of a Grand Prix."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    fp1: ScheduleSlot | None = None
    fp2: ScheduleSlot | None = None
    fp3: ScheduleSlot | None = None
    qualy: ScheduleSlot | None = None
    race: ScheduleSlot | None = None
    sprint_qualy: ScheduleSlot | None = None
    sprint_race: ScheduleSlot | None = None


_SCHEDULE_SLOTS = {
    SessionType.RACE: "race",
    SessionType.QUALIFYING: "qualy",
    SessionType.SPRINT: "sprint_race",
    SessionType.PRACTICE_1: "fp1",
    SessionType.PRACTICE_2: "fp2",
    SessionType.PRACTICE_3: "fp3",
}


class RaceSummary(BaseModel):
    """Grand Prix entry in a season calendar."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    race_id: str | None = None
    race_name: str | None = None
    round: int | str | None = None
    schedule: Schedule | None = None

    @property
    def name(self) -> str:
        return self.race_name or ""

    @property
    def available_sessions(self) -> frozenset[SessionType]:
        """Sessions with a scheduled date. Without a schedule only the race is assumed."""
        if self.schedule is None:
            return frozenset({SessionType.RACE})
        return frozenset(
            session
            for session, slot_name in _SCHEDULE_SLOTS.items()
            if (slot := getattr(self.schedule, slot_name)) is not None and slot.date
        )


_RESULT_FIELDS = {
    SessionType.RACE: "results",
    SessionType.QUALIFYING: "qualy_results",
    SessionType.SPRINT: "sprint_race_results",
    SessionType.PRACTICE_1: "fp1_results",
    SessionType.PRACTICE_2: "fp2_results",
    SessionType.PRACTICE_3: "fp3_results",
}


class RaceDetail(BaseModel):
    """A single Grand Prix together with the result list of the requested session."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    fp1_results: list[ResultRecord] | None = None
    fp2_results: list[ResultRecord] | None = None
    fp3_results: list[ResultRecord] | None = None
    qualy_results: list[ResultRecord] | None = None
    race_id: str | None = None
    race_name: str | None = None
    results: list[ResultRecord] | None = None
    round: int | str | None = None
    sprint_race_results: list[ResultRecord] | None = None

    def results_for(self, session_type: SessionType | str) -> list[ResultRecord]:
        """Return the result list for a session; unknown sessions read the race results."""
        session = SessionType.parse(session_type) or SessionType.RACE
        return list(getattr(self, _RESULT_FIELDS[session]) or [])
