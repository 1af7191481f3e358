"""
Speech API endpoints

Handles:
- Text-to-speech generation
- Per-session playback status and stop
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from interview_coach.api.dependencies import get_session_manager, get_synthesizer
from interview_coach.core.session_manager import CoachSession, SessionNotFoundError

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class TTSRequest(BaseModel):
    """Request for text-to-speech."""
    text: str
    voice: str | None = None


class TTSResponse(BaseModel):
    """Response with generated audio."""
    audio_base64: str
    format: str
    duration_seconds: float
    sample_rate: int


class SpeechStatusResponse(BaseModel):
    """Narrator state for a session."""
    session_id: str
    enabled: bool
    status: str
    text: str | None = None
    notice: str | None = None
    clip: TTSResponse | None = None


def _get_session(session_id: str) -> CoachSession:
    try:
        return get_session_manager().get_session(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


def _status(session: CoachSession) -> SpeechStatusResponse:
    narrator = session.narrator
    if narrator is None:
        return SpeechStatusResponse(
            session_id=session.session_id,
            enabled=False,
            status="idle",
        )

    clip = None
    if narrator.last_clip is not None:
        clip = TTSResponse(
            audio_base64=narrator.last_clip.audio_base64,
            format=narrator.last_clip.format,
            duration_seconds=narrator.last_clip.duration_seconds,
            sample_rate=narrator.last_clip.sample_rate,
        )

    return SpeechStatusResponse(
        session_id=session.session_id,
        enabled=True,
        status=narrator.status.value,
        text=narrator.current_text,
        notice=narrator.notice,
        clip=clip,
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/tts", response_model=TTSResponse)
async def text_to_speech(request: TTSRequest) -> TTSResponse:
    """
    Convert text to speech.

    Returns base64-encoded audio data.
    """
    clip = await get_synthesizer().synthesize(request.text, request.voice)

    if clip.error:
        raise HTTPException(
            status_code=503,
            detail=f"TTS failed: {clip.error}"
        )

    return TTSResponse(
        audio_base64=clip.audio_base64,
        format=clip.format,
        duration_seconds=clip.duration_seconds,
        sample_rate=clip.sample_rate,
    )


@router.get("/{session_id}/status", response_model=SpeechStatusResponse)
async def speech_status(session_id: str) -> SpeechStatusResponse:
    """Whether the coach is currently speaking, plus the latest clip."""
    return _status(_get_session(session_id))


@router.post("/{session_id}/stop", response_model=SpeechStatusResponse)
async def stop_speech(session_id: str) -> SpeechStatusResponse:
    """Stop the coach's current utterance."""
    session = _get_session(session_id)
    if session.narrator is not None:
        await session.narrator.stop()
    return _status(session)
