"""Grand Prix weekend session types."""

from __future__ import annotations

from enum import Enum


class SessionType(str, Enum):
    """Session of a Grand Prix weekend, valued by its query-string tag."""

    RACE = "race"
    QUALIFYING = "qualifying"
    SPRINT = "sprint"
    PRACTICE_1 = "fp1"
    PRACTICE_2 = "fp2"
    PRACTICE_3 = "fp3"

    @property
    def label(self) -> str:
        """Spanish display label."""
        return SESSION_LABELS[self]

    @property
    def is_practice(self) -> bool:
        return self in PRACTICE_SESSIONS

    @classmethod
    def parse(cls, value: str | SessionType | None) -> SessionType | None:
        """Return the session type for a tag, or None if the tag is unknown.

        Accepts ``practice1``..``practice3`` as aliases of ``fp1``..``fp3``.
        """
        if value is None:
            return None
        if isinstance(value, SessionType):
            return value
        tag = value.strip().lower()
        tag = _ALIASES.get(tag, tag)
        try:
            return cls(tag)
        except ValueError:
            return None


PRACTICE_SESSIONS = frozenset(
    {SessionType.PRACTICE_1, SessionType.PRACTICE_2, SessionType.PRACTICE_3}
)

SESSION_LABELS: dict[SessionType, str] = {
    SessionType.RACE: "Carrera",
    SessionType.QUALIFYING: "Clasificación",
    SessionType.SPRINT: "Sprint",
    SessionType.PRACTICE_1: "FP1",
    SessionType.PRACTICE_2: "FP2",
    SessionType.PRACTICE_3: "FP3",
}

_ALIASES = {
    "practice1": "fp1",
    "practice2": "fp2",
    "practice3": "fp3",
    "qualy": "qualifying",
}
