"""Mapping from (year, round, session type) to upstream resource paths."""

from __future__ import annotations

from f1history.session_types import SessionType

CURRENT_SEASON_PATH = "/current"

# Session types whose upstream sub-path differs from their tag.
_SESSION_SUBPATHS = {
    SessionType.QUALIFYING.value: "qualy",
    SessionType.SPRINT.value: "sprint/race",
}


def map_to_endpoint(
    year: str | int | None,
    round_number: str | int | None = None,
    session_type: str | SessionType = SessionType.RACE,
) -> str:
    """Return the upstream path for a season, season race list or session result.

    Empty strings count as absent. Values are not validated; a malformed year
    or round surfaces as an upstream HTTP error.

    Examples:
        map_to_endpoint(None, None, "race")        # "/current"
        map_to_endpoint("2022", None, "race")      # "/2022"
        map_to_endpoint("2022", "5", "qualifying") # "/2022/5/qualy"
        map_to_endpoint("2022", "5", "sprint")     # "/2022/5/sprint/race"
    """
    if year is None or year == "":
        return CURRENT_SEASON_PATH
    if round_number is None or round_number == "":
        return f"/{year}"

    tag = session_type.value if isinstance(session_type, SessionType) else session_type
    subpath = _SESSION_SUBPATHS.get(tag, tag)
    return f"/{year}/{round_number}/{subpath}"
