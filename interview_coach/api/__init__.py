"""
API layer for Interview Coach

Contains FastAPI routers for:
- Resume upload and analysis
- Coaching sessions and turns
- Speech synthesis and playback status
"""

from interview_coach.api.router import api_router

__all__ = ["api_router"]
