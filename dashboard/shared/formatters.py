"""Formatting helpers for the F1 results viewer."""

from __future__ import annotations

import datetime

from f1history.models.race import RaceSummary
from f1history.races import short_race_name

from .constants import FIRST_SEASON


def season_options(today: datetime.date | None = None) -> list[str]:
    """Seasons from the current year back to 1950, newest first."""
    current_year = (today or datetime.date.today()).year
    return [str(y) for y in range(current_year, FIRST_SEASON - 1, -1)]


def round_value(race: RaceSummary) -> str:
    """Round number as selector value; "" when the entry carries no round."""
    return "" if race.round is None else str(race.round)


def race_option_label(race: RaceSummary) -> str:
    """Dropdown label for a race, e.g. 'Monaco' for 'Monaco Grand Prix'."""
    return short_race_name(race.name) or f"Ronda {race.round}"


def race_subtitle(season: str, round_number: str) -> str:
    return f"Temporada {season} • Ronda {round_number}"
