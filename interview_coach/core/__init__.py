"""
Core business logic modules for Interview Coach

Contains:
- Profile Extractor: Resume text to candidate profile
- Question Bank: Templated practice questions
- Rubrics: Dialogue scripts and keyword acceptance criteria
- Answer Evaluator: Keyword rubric checks
- Dialogue Engine: State machine for the coaching conversation
- Session Manager: In-memory session registry
- Speech: TTS synthesis and narration
"""

from interview_coach.core.profile_extractor import extract_profile
from interview_coach.core.question_bank import build_question_bank
from interview_coach.core.rubrics import build_script
from interview_coach.core.answer_evaluator import AnswerEvaluator, evaluate_answer
from interview_coach.core.dialogue_engine import DialogueEngine, start_session
from interview_coach.core.session_manager import SessionManager, SessionNotFoundError
from interview_coach.core.speech import SpeechNarrator, SpeechSynthesizer
from interview_coach.core.resume_reader import (
    ResumeReadError,
    UnsupportedResumeError,
    read_resume,
)

__all__ = [
    "extract_profile",
    "build_question_bank",
    "build_script",
    "AnswerEvaluator",
    "evaluate_answer",
    "DialogueEngine",
    "start_session",
    "SessionManager",
    "SessionNotFoundError",
    "SpeechNarrator",
    "SpeechSynthesizer",
    "ResumeReadError",
    "UnsupportedResumeError",
    "read_resume",
]
