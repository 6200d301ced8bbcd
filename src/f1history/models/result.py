"""Session result row model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DriverRef(BaseModel):
    """Driver as embedded in a result row.

    Upstream payloads use either ``name``/``surname`` or
    ``givenName``/``familyName``.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    driver_id: str | None = None
    family_name: str | None = None
    given_name: str | None = None
    name: str | None = None
    number: int | str | None = None
    short_name: str | None = None
    surname: str | None = None


class TeamRef(BaseModel):
    """Constructor as embedded in a result row."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    team_id: str | None = None
    team_name: str | None = None


class FastestLap(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    lap: int | str | None = None
    time: str | None = None


class ResultRecord(BaseModel):
    """One classified driver in a race, sprint, qualifying or practice session."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    driver: DriverRef | None = None
    driver_id: str | None = None
    fastest_lap: FastestLap | None = None
    grid_position: int | str | None = None
    laps: int | str | None = None
    points: float | None = None
    position: int | str | None = None
    q1: str | None = None
    q2: str | None = None
    q3: str | None = None
    status: str | None = None
    team: TeamRef | None = None
    team_name: str | None = None
    time: str | None = None
