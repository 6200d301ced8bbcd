"""Season race-list helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

GRAND_PRIX_SUFFIX = " Grand Prix"


class _Named(Protocol):
    @property
    def name(self) -> str: ...


R = TypeVar("R", bound=_Named)


def short_race_name(name: str) -> str:
    """Drop the trailing " Grand Prix" and surrounding whitespace from a race name."""
    name = name.strip()
    if name.endswith(GRAND_PRIX_SUFFIX):
        name = name[: -len(GRAND_PRIX_SUFFIX)]
    return name.strip()


def dedupe_races(races: Iterable[R]) -> list[R]:
    """Remove repeated races by normalized name, keeping the first occurrence in order."""
    seen: set[str] = set()
    unique: list[R] = []
    for race in races:
        key = short_race_name(race.name)
        if key in seen:
            continue
        seen.add(key)
        unique.append(race)
    return unique
