"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from climate_odds import __version__
from climate_odds.service import OddsService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the OddsService on startup; its cache lives as long as the app."""
    app.state.service = OddsService()
    yield
    app.state.service.clear_cache()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Climate Odds API",
        version=__version__,
        description="Historical odds of uncomfortable weather for a place and day of year",
        lifespan=lifespan,
    )

    # CORS for frontend dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from climate_odds.api.routers import odds

    app.include_router(odds.router, prefix="/odds", tags=["odds"])

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
