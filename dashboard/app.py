"""F1 Historial — Grand Prix results viewer (Streamlit + Plotly via the race proxy)."""

from __future__ import annotations

import streamlit as st

from f1history.availability import NoticeKind
from f1history.config import get_settings

from shared import (
    EMPTY_TABLE_MESSAGE,
    F1_RED,
    LOADING_MESSAGE,
    ProxyGateway,
    ResultsController,
    build_results_figure,
    race_subtitle,
    render_filters,
    season_options,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Historial F1",
    page_icon="\U0001f3ce️",
    layout="wide",
)


@st.cache_resource
def _gateway() -> ProxyGateway:
    settings = get_settings()
    return ProxyGateway(settings.proxy_url, timeout=settings.timeout)


def _controller() -> ResultsController:
    """One controller per browser session; the first run loads the newest season."""
    if "controller" not in st.session_state:
        controller = ResultsController(_gateway(), year=season_options()[0])
        controller.change_year(controller.state.selected_year)
        st.session_state["controller"] = controller
    return st.session_state["controller"]


controller = _controller()

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("🏎️ HISTORIAL F1")
theme = render_filters(controller)
state = controller.state

# ── Header ───────────────────────────────────────────────────────────────────

st.markdown("# 🏎️ HISTORIAL F1")
st.caption("Resultados de Grandes Premios de Fórmula 1")
st.markdown(
    f'<div style="height:2px;background:{F1_RED};margin-bottom:1rem"></div>',
    unsafe_allow_html=True,
)

# ── Race info ────────────────────────────────────────────────────────────────

if state.current_race_info is not None and state.results_session_type is not None:
    info = state.current_race_info
    st.markdown(
        f"## 🏎️ {info.name} "
        f'<span style="background:{F1_RED};color:#fff;padding:2px 10px;'
        f'border-radius:4px;font-size:0.6em;text-transform:uppercase">'
        f"{state.results_session_type.label}</span>",
        unsafe_allow_html=True,
    )
    st.caption(race_subtitle(info.season, info.round))

# ── Errors and notices ───────────────────────────────────────────────────────

if state.error_message:
    if state.notice_kind in (NoticeKind.UNAVAILABLE, NoticeKind.CAVEAT):
        st.info(state.error_message, icon="ℹ️")
    else:
        st.error(f"**⚠️ Error al cargar**  \n{state.error_message}")

# ── Results table ────────────────────────────────────────────────────────────

if state.is_loading:
    st.write(LOADING_MESSAGE)
elif not state.current_rows:
    st.write(EMPTY_TABLE_MESSAGE)
else:
    st.plotly_chart(
        build_results_figure(state.current_rows, theme),
        width="stretch",
        config={"displayModeBar": False},
    )
