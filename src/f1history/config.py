"""Runtime configuration using Pydantic Settings.

Every field can be overridden through an ``F1HISTORY_``-prefixed environment
variable, e.g. ``F1HISTORY_BASE_URL`` or ``F1HISTORY_PROXY_PORT``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from f1history._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    proxy_host: str = "127.0.0.1"
    proxy_port: int = 8000
    cors_origins: list[str] = ["http://localhost:8501", "http://127.0.0.1:8501"]

    # Where the dashboard reaches the proxy endpoint.
    proxy_url: str = "http://127.0.0.1:8000/api/f1/races"

    model_config = SettingsConfigDict(env_prefix="F1HISTORY_")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
