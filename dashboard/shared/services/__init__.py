"""Service layer — result rows and table rendering for the viewer."""

from .results_table import ResultRow, build_results_figure, build_row, build_rows

__all__ = [
    "ResultRow",
    "build_results_figure",
    "build_row",
    "build_rows",
]
