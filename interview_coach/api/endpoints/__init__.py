"""
API endpoint modules.
"""

from interview_coach.api.endpoints import coach, resume, speech

__all__ = ["coach", "resume", "speech"]
