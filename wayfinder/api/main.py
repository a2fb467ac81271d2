"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wayfinder.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Indoor Wayfinder",
        description="Shortest walkable routes between rooms on a floorplan graph",
        version="0.1.0",
    )

    # CORS: the map viewer is served from its own origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
