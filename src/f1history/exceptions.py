"""Custom exceptions for the F1 history client."""

from __future__ import annotations

from typing import Any


class F1HistoryError(Exception):
    """Base exception for all F1 history client errors."""


class F1HistoryConnectionError(F1HistoryError):
    """Raised when the client cannot connect to the API."""


class F1HistoryTimeoutError(F1HistoryError):
    """Raised when a request to the API times out."""


class F1HistoryAPIError(F1HistoryError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str, payload: Any = None) -> None:
        self.status_code = status_code
        self.message = message
        self.payload = payload
        super().__init__(f"HTTP {status_code}: {message}")


class F1HistoryDecodeError(F1HistoryError):
    """Raised when the API answers 2xx with a body that is not valid JSON."""


class F1HistoryValidationError(F1HistoryError):
    """Raised when API response data fails model validation."""
