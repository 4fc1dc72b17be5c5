"""
Hiring Intake API - Main Application Entry Point

This module initializes and configures the FastAPI application including:
- Logging
- Database schema creation and admin seeding
- CORS middleware
- API routing
- Health check endpoints
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from hiring_api.api import api_router
from hiring_api.core.auth import session_tokens
from hiring_api.core.config import settings
from hiring_api.core.database import async_session_maker, close_db, init_db
from hiring_api.modules.auth.service import ensure_admin

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """
    Application lifespan manager.

    Startup creates the tables and seeds the admin credential. Either
    failing aborts startup rather than serving with a broken schema.
    """
    # Startup
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"Starting Hiring API in {settings.python_env} mode...")

    try:
        await init_db()
        print("[OK] Database ready")
    except Exception as e:
        print(f"[FAIL] Database initialization failed: {e}")
        raise

    try:
        async with async_session_maker() as db:
            created = await ensure_admin(db, settings.admin_username, settings.admin_password)
        print("[OK] Admin user seeded" if created else "[OK] Admin user present")
    except Exception as e:
        print(f"[FAIL] Admin seeding failed: {e}")
        raise

    yield  # Application runs here

    # Shutdown
    print("Shutting down Hiring API...")
    session_tokens.reset()
    await close_db()
    print("[OK] Cleanup complete")


app = FastAPI(
    title="Hiring API",
    description="Brightloom job application intake API",
    version="0.1.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan,
)

app.include_router(api_router, prefix="/api")

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", tags=["Root"])
async def root() -> dict[str, str]:
    """Root endpoint - API welcome message."""
    return {
        "message": "Welcome to the Hiring API",
        "status": "running",
        "environment": settings.python_env,
    }


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Liveness check endpoint for container orchestration."""
    return {"status": "healthy"}


@app.get("/ready", tags=["Health"])
async def readiness_check() -> dict[str, str]:
    """Readiness check endpoint. Fails with 503 when the database is unreachable."""
    try:
        async with async_session_maker() as session:
            await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Readiness check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "NOT_READY", "message": "Database unavailable"},
        ) from e
    return {"status": "ready"}


def run() -> None:
    """Console entrypoint: serve the API on the configured port."""
    uvicorn.run(
        "hiring_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
