"""FastAPI proxy that forwards race queries to the upstream F1 API.

GET /api/f1/races?year=&round=&type= maps the query onto an upstream path and
returns the upstream JSON body untouched, or ``{"error": ...}`` with status 500
when the upstream call fails for any reason.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from f1history.client import AsyncF1HistoryClient
from f1history.config import Settings, get_settings
from f1history.endpoints import map_to_endpoint
from f1history.exceptions import F1HistoryError

logger = logging.getLogger(__name__)

RACES_ROUTE = "/api/f1/races"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the proxy application. The upstream client lives for the app lifespan."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        async with AsyncF1HistoryClient(
            base_url=settings.base_url, timeout=settings.timeout,
        ) as client:
            app.state.client = client
            yield

    app = FastAPI(title="F1 Historial Proxy", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(RACES_ROUTE)
    async def races(
        request: Request,
        year: str | None = Query(default=None),
        round_number: str | None = Query(default=None, alias="round"),
        session_type: str = Query(default="race", alias="type"),
    ) -> JSONResponse:
        client: AsyncF1HistoryClient = request.app.state.client
        session_type = session_type or "race"
        endpoint = map_to_endpoint(year, round_number, session_type)
        logger.info("Proxying %s -> %s%s", request.url.query or "-", settings.base_url, endpoint)
        try:
            data = await client.raw(year, round_number, session_type)
        except F1HistoryError as exc:
            logger.error("F1 API error for %s: %s", endpoint, exc)
            return JSONResponse({"error": str(exc)}, status_code=500)
        return JSONResponse(data)

    return app


def main() -> None:
    """Run the proxy with uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.proxy_host, port=settings.proxy_port)


if __name__ == "__main__":
    main()
