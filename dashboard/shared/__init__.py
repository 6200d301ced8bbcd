"""Shared viewer utilities."""

# --- Constants & formatting ---
from .constants import (
    EMPTY_TABLE_MESSAGE,
    F1_RED,
    LOADING_MESSAGE,
    TABLE_COLUMNS,
    THEME_STYLES,
    Theme,
)
from .formatters import race_option_label, race_subtitle, season_options

# --- Gateway & controller ---
from .controller import RaceInfo, ResultsController, ViewState, describe_failure
from .gateway import ProxyErrorResponse, ProxyGateway, RaceGateway

# --- Service layer ---
from .services import ResultRow, build_results_figure, build_row, build_rows

# --- UI components ---
from .sidebar import render_filters

__all__ = [
    "EMPTY_TABLE_MESSAGE",
    "F1_RED",
    "LOADING_MESSAGE",
    "ProxyErrorResponse",
    "ProxyGateway",
    "RaceGateway",
    "RaceInfo",
    "ResultRow",
    "ResultsController",
    "TABLE_COLUMNS",
    "THEME_STYLES",
    "Theme",
    "ViewState",
    "build_results_figure",
    "build_row",
    "build_rows",
    "describe_failure",
    "race_option_label",
    "race_subtitle",
    "render_filters",
    "season_options",
]
