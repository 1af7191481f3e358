"""
Interview Coach - Resume-Driven Interview Practice Assistant

Main application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_coach.config.settings import get_settings
from interview_coach.api.router import api_router
from interview_coach.api.dependencies import cleanup

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Interview Coach...")
    settings = get_settings()
    logger.info(f"Running in {'debug' if settings.debug else 'production'} mode")

    yield

    # Shutdown
    logger.info("Shutting down Interview Coach...")
    await cleanup()


# Create FastAPI application
settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Resume-driven interview practice with a rule-based coach",
    version=settings.app_version,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount API routes
app.include_router(api_router, prefix="/api")


# ============================================================================
# ROOT ROUTES
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


# ============================================================================
# RUN SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
