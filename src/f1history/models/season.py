"""Response envelope models for the season and session-result endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from f1history.models.race import RaceDetail, RaceSummary


class SeasonResponse(BaseModel):
    """Season calendar returned by ``/current`` and ``/{year}``."""

    model_config = ConfigDict(frozen=True)

    season: int | str | None = None
    races: list[RaceSummary] = Field(default_factory=list)


class SessionResponse(BaseModel):
    """Session results returned by ``/{year}/{round}/{session}``."""

    model_config = ConfigDict(frozen=True)

    season: int | str | None = None
    races: RaceDetail = Field(default_factory=RaceDetail)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_bare_race(cls, data: Any) -> Any:
        # Some payloads carry the race fields at the top level instead of under "races".
        if isinstance(data, dict) and not isinstance(data.get("races"), dict):
            return {"season": data.get("season"), "races": data}
        return data
