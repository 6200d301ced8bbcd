"""Results table rows and their Plotly rendering (no Streamlit dependency)."""

from __future__ import annotations

from dataclasses import dataclass

import plotly.graph_objects as go

from f1history.models.result import ResultRecord
from f1history.resolvers import (
    select_driver_name,
    select_laps,
    select_position,
    select_team_name,
    select_time,
)
from f1history.session_types import SessionType
from f1history.teams import resolve_team, text_color

from ..constants import F1_RED, TABLE_COLUMNS, THEME_STYLES, Theme


@dataclass(frozen=True)
class ResultRow:
    """One rendered line of the results table."""

    position: str
    driver: str
    team: str
    team_code: str
    team_color: str
    team_text_color: str
    time: str
    laps: str


def build_row(record: ResultRecord, session_type: SessionType) -> ResultRow:
    team = select_team_name(record)
    profile = resolve_team(team)
    return ResultRow(
        position=select_position(record, session_type),
        driver=select_driver_name(record),
        team=team,
        team_code=profile.short_code,
        team_color=profile.color,
        team_text_color=text_color(profile),
        time=select_time(record, session_type),
        laps=select_laps(record),
    )


def build_rows(records: list[ResultRecord], session_type: SessionType) -> list[ResultRow]:
    """Resolve every record with the session type the results were fetched for."""
    return [build_row(record, session_type) for record in records]


def build_results_figure(rows: list[ResultRow], theme: Theme = Theme.DARK) -> go.Figure:
    """Render rows as a Plotly table; the team column is filled with the team color."""
    style = THEME_STYLES[theme]
    row_fills = [
        style["row_even"] if i % 2 == 0 else style["row_odd"] for i in range(len(rows))
    ]

    fig = go.Figure(go.Table(
        columnwidth=[40, 180, 200, 120, 60],
        header=dict(
            values=[f"<b>{c}</b>" for c in TABLE_COLUMNS],
            fill_color=style["header_bg"],
            font=dict(color=style["muted"], size=12),
            align="left",
            height=36,
        ),
        cells=dict(
            values=[
                [r.position for r in rows],
                [f"<b>{r.driver}</b>" for r in rows],
                [f"{r.team_code} · {r.team}" for r in rows],
                [r.time for r in rows],
                [r.laps for r in rows],
            ],
            fill_color=[
                row_fills,
                row_fills,
                [r.team_color for r in rows],
                row_fills,
                row_fills,
            ],
            font=dict(
                color=[
                    [F1_RED] * len(rows),
                    [style["text"]] * len(rows),
                    [r.team_text_color for r in rows],
                    [style["text"]] * len(rows),
                    [style["text"]] * len(rows),
                ],
                size=13,
            ),
            align="left",
            height=32,
        ),
    ))
    fig.update_layout(
        paper_bgcolor=style["paper_bg"],
        margin=dict(l=0, r=0, t=0, b=0),
        height=40 + 34 * max(len(rows), 1),
    )
    return fig
