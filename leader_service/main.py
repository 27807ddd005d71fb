"""Leader API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers turn every failure into a bare status code
    - CORS configured from settings (not hardcoded)
    - Session manager and LeaderStore built once in the lifespan, stored on app.state

Run with: uvicorn leader_service.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leader_service.api.error_handlers import register_error_handlers
from leader_service.api.routes import health, leaders
from leader_service.config import get_settings
from leader_service.infrastructure.database import DatabaseSessionManager
from leader_service.infrastructure.observability import setup_logging
from leader_service.services.leader_store import LeaderStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.db = db
    app.state.leader_store = LeaderStore(db)
    logger.info("Leader API started")
    yield
    logger.info("Leader API shutting down")
    await db.dispose()


app = FastAPI(title="Leader API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(leaders.router)

register_error_handlers(app)
