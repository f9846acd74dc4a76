from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from sort_trace.config import ServiceConfig, load_config
from sort_trace.sim.registry import build_default_registry
from sort_trace.web.api import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    registry = app.state.registry
    logger.info("Serving %d algorithms: %s", len(registry), ", ".join(registry.all()))
    yield


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    config = config or load_config()

    app = FastAPI(title="Sort Trace", lifespan=lifespan)

    # Built once here; handlers only read it.
    app.state.config = config
    app.state.registry = build_default_registry(config.algorithms)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router)

    return app


app = create_app()
