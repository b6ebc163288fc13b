"""FastAPI app factory."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from svgequations import __version__
from svgequations.config import settings

logging.basicConfig(
    level=getattr(logging, settings.svgeq_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="SVG Equations",
        description="SVG path data to parametric and cartesian equations",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from svgequations.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
