"""
Main API router for Interview Coach

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from interview_coach.api.endpoints import coach, resume, speech

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    resume.router,
    prefix="/resume",
    tags=["Resume"]
)

api_router.include_router(
    coach.router,
    prefix="/coach",
    tags=["Coach"]
)

api_router.include_router(
    speech.router,
    prefix="/speech",
    tags=["Speech"]
)
