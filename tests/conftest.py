"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import pytest

BASE_URL = "https://f1api.dev/api"


SAMPLE_SEASON = {
    "api": "https://f1api.dev",
    "url": "https://f1api.dev/api/2024",
    "limit": 30,
    "offset": 0,
    "total": 3,
    "season": 2024,
    "races": [
        {
            "raceId": "bahrain_2024",
            "raceName": "Bahrain Grand Prix",
            "round": 1,
            "schedule": {
                "race": {"date": "2024-03-02", "time": "15:00:00Z"},
                "qualy": {"date": "2024-03-01", "time": "16:00:00Z"},
                "fp1": {"date": "2024-02-29", "time": "11:30:00Z"},
                "fp2": {"date": "2024-02-29", "time": "15:00:00Z"},
                "fp3": {"date": "2024-03-01", "time": "12:30:00Z"},
                "sprintQualy": {"date": None, "time": None},
                "sprintRace": {"date": None, "time": None},
            },
        },
        {
            "raceId": "chinese_2024",
            "raceName": "Chinese Grand Prix",
            "round": 5,
            "schedule": {
                "race": {"date": "2024-04-21", "time": "07:00:00Z"},
                "qualy": {"date": "2024-04-20", "time": "07:00:00Z"},
                "fp1": {"date": "2024-04-19", "time": "03:30:00Z"},
                "fp2": {"date": None, "time": None},
                "fp3": {"date": None, "time": None},
                "sprintQualy": {"date": "2024-04-19", "time": "07:30:00Z"},
                "sprintRace": {"date": "2024-04-20", "time": "03:00:00Z"},
            },
        },
        {
            "raceId": "monaco_2024",
            "raceName": "Monaco Grand Prix",
            "round": 8,
        },
    ],
}

SAMPLE_RACE_RESULTS = {
    "season": 2024,
    "races": {
        "round": 5,
        "raceName": "Chinese Grand Prix",
        "results": [
            {
                "position": 1,
                "points": 25,
                "grid": 1,
                "time": "1:40:52.554",
                "driver": {
                    "driverId": "max_verstappen",
                    "number": 1,
                    "shortName": "VER",
                    "name": "Max",
                    "surname": "Verstappen",
                },
                "team": {"teamId": "red_bull", "teamName": "Red Bull Racing"},
            },
            {
                "position": 2,
                "points": 18,
                "time": "+13.773",
                "driver": {"driverId": "norris", "name": "Lando", "surname": "Norris"},
                "team": {"teamId": "mclaren", "teamName": "McLaren Formula 1 Team"},
            },
            {
                "position": 20,
                "status": "Retired",
                "driverId": "bottas",
                "teamName": "Stake F1 Team Kick Sauber",
            },
        ],
    },
}

SAMPLE_QUALY_RESULTS = {
    "season": 2024,
    "races": {
        "round": 5,
        "raceName": "Chinese Grand Prix",
        "qualyResults": [
            {
                "gridPosition": 1,
                "q1": "1:34.742",
                "q2": "1:34.498",
                "q3": "1:33.660",
                "driver": {"givenName": "Max", "familyName": "Verstappen"},
                "team": {"teamName": "Red Bull Racing"},
            },
            {
                "gridPosition": 16,
                "q1": "1:35.505",
                "driver": {"surname": "Hulkenberg"},
                "team": {"teamName": "Haas F1 Team"},
            },
        ],
    },
}

SAMPLE_EMPTY_SPRINT_2019 = {
    "season": 2019,
    "races": {
        "round": 3,
        "raceName": "Chinese Grand Prix",
        "sprintRaceResults": [],
    },
}


@pytest.fixture
def base_url() -> str:
    return BASE_URL
