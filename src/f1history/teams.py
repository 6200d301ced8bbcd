"""Team directory: display metadata and team-name resolution."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

DEFAULT_TEAM_COLOR = "#666666"
DARK_TEXT_COLOR = "#1a1a1a"
LIGHT_TEXT_COLOR = "#ffffff"


@dataclass(frozen=True)
class TeamProfile:
    """Display metadata for a constructor."""

    canonical_name: str
    color: str
    short_code: str
    use_dark_text: bool = False
    aliases: frozenset[str] = field(default_factory=frozenset)


def _profile(
    name: str,
    color: str,
    short_code: str,
    aliases: list[str],
    use_dark_text: bool = False,
) -> TeamProfile:
    return TeamProfile(
        canonical_name=name,
        color=color,
        short_code=short_code,
        use_dark_text=use_dark_text,
        aliases=frozenset(aliases),
    )


# Registration order is the tie-break for overlapping aliases.
TEAM_DIRECTORY: dict[str, TeamProfile] = {
    p.canonical_name: p
    for p in (
        _profile("McLaren", "#FF8000", "MCL",
                 ["McLaren F1 Team", "McLaren Formula 1 Team", "McLaren Mercedes"]),
        _profile("Ferrari", "#E80020", "FER",
                 ["Scuderia Ferrari", "Scuderia Ferrari Mission Winnow", "Ferrari"]),
        _profile("Red Bull Racing", "#3671C6", "RBR",
                 ["Red Bull", "Red Bull Racing Honda RBPT", "Red Bull Racing Honda"]),
        _profile("Mercedes", "#27F4D2", "MER",
                 ["Mercedes-AMG Petronas", "Mercedes-AMG", "Mercedes Formula 1 Team"]),
        _profile("Aston Martin", "#229971", "AMR",
                 ["Aston Martin Aramco", "Aston Martin F1 Team", "Aston Martin Cognizant"]),
        _profile("Alpine", "#0093CC", "ALP",
                 ["Alpine F1 Team", "Alpine Renault", "BWT Alpine F1 Team"]),
        _profile("Williams", "#64C4FF", "WIL",
                 ["Williams Racing", "Williams F1", "Williams Mercedes"]),
        _profile("RB", "#6692FF", "RB",
                 ["Visa RB", "RB F1 Team", "AlphaTauri", "Scuderia AlphaTauri", "Toro Rosso"]),
        _profile("Kick Sauber", "#52E252", "SAU",
                 ["Sauber", "Stake F1 Team", "Stake F1 Team Kick Sauber", "Alfa Romeo",
                  "Alfa Romeo Racing"]),
        _profile("Haas", "#B6BABD", "HAS",
                 ["Haas F1 Team", "MoneyGram Haas F1 Team", "Haas Ferrari"],
                 use_dark_text=True),
    )
}

_SUFFIX_PATTERNS = (
    re.compile(r"\s+Formula.*$", re.IGNORECASE),
    re.compile(r"\s+F1.*$", re.IGNORECASE),
    re.compile(r"\s+Team$", re.IGNORECASE),
)


def normalize_team_name(raw_name: str) -> str:
    """Strip trailing "Formula…", "F1…" and "Team" tokens from a team name."""
    name = raw_name
    for pattern in _SUFFIX_PATTERNS:
        name = pattern.sub("", name)
    return name.strip()


def _alias_matches(alias: str, key: str) -> bool:
    alias = alias.lower()
    return alias == key or alias in key or key in alias


def resolve_team(raw_name: str) -> TeamProfile:
    """Resolve an upstream team name to a directory profile.

    Tries an exact canonical-name match on the normalized name, then a
    case-insensitive alias scan in which either string may contain the other.
    The first profile in registration order wins, so overlapping aliases
    resolve to whichever team was registered earlier.

    Unknown names get a grey fallback profile whose short code is the first
    three characters of the normalized name, uppercased.
    """
    normalized = normalize_team_name(raw_name)
    profile = TEAM_DIRECTORY.get(normalized)
    if profile is not None:
        return profile

    key = normalized.lower()
    if key:
        for profile in TEAM_DIRECTORY.values():
            if any(_alias_matches(alias, key) for alias in profile.aliases):
                return profile

    return TeamProfile(
        canonical_name=normalized,
        color=DEFAULT_TEAM_COLOR,
        short_code=normalized[:3].upper(),
    )


def text_color(profile: TeamProfile) -> str:
    """Foreground color to draw on top of the team color."""
    return DARK_TEXT_COLOR if profile.use_dark_text else LIGHT_TEXT_COLOR
