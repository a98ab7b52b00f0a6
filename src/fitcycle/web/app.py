"""FastAPI application for the fitcycle API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..config import get_settings
from ..db.engine import get_db_path, init_db
from ..logger import setup_logger
from .routers import calendar, cycles, sessions, stats, today, workouts

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: create the schema if missing
    db_path = get_db_path()
    await init_db(db_path)
    logger.info(f"fitcycle API using {db_path}")
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logger(level=settings.log_level, log_file=settings.log_file)

    app = FastAPI(
        title="fitcycle",
        description="Recurring workout schedules, cycles and session tracking",
        version=VERSION,
        lifespan=lifespan,
    )

    app.include_router(workouts.router)
    app.include_router(cycles.router)
    app.include_router(sessions.router)
    app.include_router(calendar.router)
    app.include_router(today.router)
    app.include_router(stats.router)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal error"})

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": VERSION}

    return app
