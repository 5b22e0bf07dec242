"""LLM Boost API — FastAPI application entry point for the domain shell.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LlmBoostError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from llm_boost import __version__
from llm_boost.api.error_handlers import register_error_handlers
from llm_boost.api.routes import health
from llm_boost.config import get_settings
from llm_boost.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("LLM Boost API started")
    yield
    logger.info("LLM Boost API shutting down")


app = FastAPI(
    title="LLM Boost API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)

register_error_handlers(app)
