"""Shared constants for the F1 results viewer."""

from __future__ import annotations

from enum import Enum

F1_RED = "#E10600"

FIRST_SEASON = 1950

TABLE_COLUMNS = ["Pos", "Piloto", "Equipo", "Tiempo", "Vueltas"]

EMPTY_TABLE_MESSAGE = "Selecciona un Gran Premio para ver los resultados"
LOADING_MESSAGE = "Cargando resultados..."
NO_RACES_OPTION = "Cargando..."


class Theme(str, Enum):
    DARK = "dark"
    LIGHT = "light"


THEME_STYLES: dict[Theme, dict[str, str]] = {
    Theme.DARK: {
        "paper_bg": "#15151e",
        "header_bg": "#1a1a1a",
        "row_even": "#15151e",
        "row_odd": "#1b1b24",
        "text": "#ffffff",
        "muted": "#9ca3af",
    },
    Theme.LIGHT: {
        "paper_bg": "#ffffff",
        "header_bg": "#e0e0e0",
        "row_even": "#ffffff",
        "row_odd": "#f5f5f8",
        "text": "#1a1a1a",
        "muted": "#4b5563",
    },
}
