"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda fn=None, **kw: fn if fn else (lambda f: f)
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)


# ── Fake gateway ─────────────────────────────────────────────────────────────


class FakeGateway:
    """Answers fetches from a dict keyed by (year, round, type).

    A value that is an exception instance is raised instead of returned.
    """

    def __init__(self, responses: dict[tuple[str | None, str | None, str | None], Any]) -> None:
        self.responses = responses
        self.calls: list[tuple[str | None, str | None, str | None]] = []

    def fetch(
        self,
        year: str | None = None,
        round_number: str | None = None,
        session_type: str | None = None,
    ) -> Any:
        key = (year, round_number, session_type)
        self.calls.append(key)
        response = self.responses[key]
        if isinstance(response, Exception):
            raise response
        return response


def _season(season: int, names: list[str]) -> dict:
    return {
        "season": season,
        "races": [{"raceName": name, "round": i} for i, name in enumerate(names, start=1)],
    }


@pytest.fixture
def make_gateway():
    """Factory fixture for FakeGateway instances."""
    return FakeGateway


@pytest.fixture
def make_season():
    """Factory fixture for season calendar payloads."""
    return _season


@pytest.fixture(autouse=True)
def _isolated_log_dir(tmp_path, monkeypatch):
    """Keep the API call log out of the source tree."""
    import logging

    import shared.api_logging as mod

    named_logger = logging.getLogger("f1_historial.api")
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    monkeypatch.setattr(mod, "_logger", None)
    monkeypatch.setattr(mod, "_LOG_DIR", str(tmp_path))
    monkeypatch.setattr(mod, "_LOG_FILE", str(tmp_path / "api_calls.log"))
    yield tmp_path
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
