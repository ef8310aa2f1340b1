"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stagecraft import __version__
from stagecraft.config import settings
from stagecraft.logging_config import configure_logging

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the template registry before serving requests."""
    from stagecraft.templates.registry import list_templates

    types = [t.type for t in list_templates()]
    logger.info("Stagecraft API started (%d templates: %s)", len(types), ", ".join(types))
    yield
    logger.info("Stagecraft API shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Stagecraft API",
        version=__version__,
        description="Compiles database change requests into approval-gated deployment pipelines.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from stagecraft.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from stagecraft.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    from stagecraft.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
