"""Member API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a {"message": str} body
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup
    - Request logging middleware toggled by settings.log_requests
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from member_api import __version__
from member_api.api.error_handlers import register_error_handlers
from member_api.api.routes import health, members
from member_api.config import get_settings
from member_api.infrastructure.database import close_db, init_db
from member_api.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Member API started")
    yield
    await close_db()
    logger.info("Member API shutting down")


app = FastAPI(
    title="Member API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)
if settings.log_requests:
    app.middleware("http")(log_requests)

app.include_router(health.router)
app.include_router(members.router)

register_error_handlers(app)
