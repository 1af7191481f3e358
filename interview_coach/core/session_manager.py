"""
Session Manager - In-memory registry of coaching sessions.

Creates one dialogue engine (and speech narrator) per session and keeps
them for the lifetime of the process. Nothing is persisted.
"""

import logging
from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from interview_coach.core.dialogue_engine import DialogueEngine, start_session
from interview_coach.core.speech import SpeechNarrator, SpeechSynthesizer
from interview_coach.models.dialogue import CoachTurn, DialogueMode, ScriptKind
from interview_coach.models.profile import Profile
from interview_coach.models.question import QuestionBank

logger = logging.getLogger(__name__)


class SessionNotFoundError(Exception):
    """Raised when a session ID is unknown."""
    pass


class CoachSession(BaseModel):
    """Everything owned by one coaching session."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    session_id: str = Field(default_factory=lambda: str(uuid4()))
    profile: Profile
    question_bank: QuestionBank
    script_kind: ScriptKind = ScriptKind.RESUME
    engine: DialogueEngine
    narrator: SpeechNarrator | None = None
    created_at: datetime = Field(default_factory=datetime.utcnow)


class SessionManager:
    """
    Owns the session map and routes turns to the right engine.

    Each session has its own engine, so turns for different sessions never
    share state; turns within a session are serialized by the engine.
    """

    def __init__(
        self,
        synthesizer: SpeechSynthesizer | None = None,
        reply_delay: float = 0.0,
        retry_prompt: str | None = None,
    ):
        """
        Initialize the manager.

        Args:
            synthesizer: TTS used for per-session narrators (None disables speech)
            reply_delay: Coach "thinking" time for new sessions
            retry_prompt: Remediation retry prompt for new sessions
        """
        self.synthesizer = synthesizer
        self.reply_delay = reply_delay
        self.retry_prompt = retry_prompt

        # Session storage (in-memory only)
        self._sessions: dict[str, CoachSession] = {}

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    def start_session(
        self,
        profile: Profile,
        question_bank: QuestionBank,
        script_kind: ScriptKind = ScriptKind.RESUME,
        mode: DialogueMode = DialogueMode.EVALUATED,
    ) -> CoachSession:
        """
        Create a session seeded with the welcome message.

        Args:
            profile: Candidate profile
            question_bank: Questions generated for the profile
            script_kind: Resume questions or fundamentals screening
            mode: Evaluated or unconditional advancement

        Returns:
            New CoachSession
        """
        narrator = SpeechNarrator(self.synthesizer) if self.synthesizer else None

        engine_options = {"reply_delay": self.reply_delay, "speech": narrator}
        if self.retry_prompt:
            engine_options["retry_prompt"] = self.retry_prompt

        engine = start_session(
            profile,
            question_bank,
            kind=script_kind,
            mode=mode,
            **engine_options,
        )

        session = CoachSession(
            profile=profile,
            question_bank=question_bank,
            script_kind=script_kind,
            engine=engine,
            narrator=narrator,
        )
        self._sessions[session.session_id] = session

        logger.info(
            f"Created coaching session: {session.session_id} "
            f"({script_kind.value}, {mode.value}, {engine.total_slots} slots)"
        )
        return session

    def get_session(self, session_id: str) -> CoachSession:
        """Get a session by ID."""
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")
        return session

    def list_sessions(self) -> list[CoachSession]:
        return list(self._sessions.values())

    async def submit(self, session_id: str, user_text: str) -> CoachTurn | None:
        """Submit an answer to a session's dialogue."""
        session = self.get_session(session_id)
        return await session.engine.submit(user_text)

    async def end_session(self, session_id: str) -> None:
        """Stop any speech and forget the session."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise SessionNotFoundError(f"Session not found: {session_id}")

        if session.narrator is not None:
            await session.narrator.close()

        logger.info(
            f"Ended coaching session: {session_id} "
            f"({len(session.engine.transcript)} messages)"
        )

    async def close(self) -> None:
        """End every session."""
        for session_id in list(self._sessions):
            await self.end_session(session_id)
