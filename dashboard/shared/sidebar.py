"""Sidebar filters: season, Grand Prix, session type and the load buttons."""

from __future__ import annotations

import streamlit as st

from f1history.session_types import SESSION_LABELS, SessionType

from .constants import NO_RACES_OPTION, LOADING_MESSAGE, Theme
from .controller import ResultsController
from .formatters import race_option_label, round_value, season_options

YEAR_KEY = "f1_year"
ROUND_KEY = "f1_round"
SESSION_KEY = "f1_session"
DARK_MODE_KEY = "f1_dark_mode"


def _on_year_change(controller: ResultsController) -> None:
    controller.change_year(st.session_state[YEAR_KEY])


def _on_round_change(controller: ResultsController) -> None:
    controller.select_round(st.session_state[ROUND_KEY] or "")


def _on_session_change(controller: ResultsController) -> None:
    controller.select_session_type(st.session_state[SESSION_KEY])


def _on_load(controller: ResultsController) -> None:
    with st.spinner(LOADING_MESSAGE):
        controller.load_results()


def _on_load_latest(controller: ResultsController) -> None:
    with st.spinner(LOADING_MESSAGE):
        controller.load_latest()


def render_filters(controller: ResultsController) -> Theme:
    """Render the filter sidebar and return the selected theme.

    Widget values are seeded from the controller before each widget is
    created, so the controller stays the single source of the selection.
    """
    state = controller.state

    st.session_state.setdefault(DARK_MODE_KEY, True)
    dark = st.sidebar.toggle("Modo Oscuro", key=DARK_MODE_KEY)

    years = season_options()
    if state.selected_year not in years:
        years.insert(0, state.selected_year)
    st.session_state[YEAR_KEY] = state.selected_year
    st.sidebar.selectbox(
        "Temporada",
        years,
        key=YEAR_KEY,
        on_change=_on_year_change,
        args=(controller,),
    )

    round_labels = {round_value(race): race_option_label(race) for race in state.race_list}
    round_options = list(round_labels) or [""]
    st.session_state[ROUND_KEY] = (
        state.selected_round if state.selected_round in round_options else round_options[0]
    )
    st.sidebar.selectbox(
        "Gran Premio",
        round_options,
        format_func=lambda r: round_labels.get(r, NO_RACES_OPTION),
        key=ROUND_KEY,
        on_change=_on_round_change,
        args=(controller,),
    )

    st.session_state[SESSION_KEY] = state.selected_session_type
    st.sidebar.selectbox(
        "Tipo de Sesión",
        list(SessionType),
        format_func=lambda s: SESSION_LABELS[s],
        key=SESSION_KEY,
        on_change=_on_session_change,
        args=(controller,),
    )

    col_load, col_latest = st.sidebar.columns(2)
    col_load.button(
        "📊 Cargar Resultados",
        disabled=state.is_loading,
        on_click=_on_load,
        args=(controller,),
        width="stretch",
    )
    col_latest.button(
        "🏁 Última Carrera",
        on_click=_on_load_latest,
        args=(controller,),
        width="stretch",
    )

    return Theme.DARK if dark else Theme.LIGHT
