"""
Data models and schemas for Interview Coach

Contains Pydantic models for:
- Candidate profiles
- Questions and question banks
- Rubrics and dialogue slots
- Dialogue state and transcripts
"""

from interview_coach.models.profile import Profile
from interview_coach.models.question import Question, QuestionBank, QuestionCategory
from interview_coach.models.rubric import Rubric, DialogueSlot
from interview_coach.models.dialogue import (
    CoachTurn,
    DialogueMode,
    DialogueState,
    Message,
    ScriptKind,
    Sender,
)

__all__ = [
    # Profile
    "Profile",
    # Question
    "Question",
    "QuestionBank",
    "QuestionCategory",
    # Rubric
    "Rubric",
    "DialogueSlot",
    # Dialogue
    "CoachTurn",
    "DialogueMode",
    "DialogueState",
    "Message",
    "ScriptKind",
    "Sender",
]
