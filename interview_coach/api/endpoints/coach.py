"""
Coach API endpoints

Handles coaching session lifecycle:
- Starting sessions
- Submitting answers
- Reading the transcript
- Ending sessions
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import BaseModel

from interview_coach.api.dependencies import get_session_manager
from interview_coach.config.settings import get_settings
from interview_coach.core.question_bank import build_question_bank
from interview_coach.core.session_manager import CoachSession, SessionNotFoundError
from interview_coach.models.dialogue import DialogueMode, Message, ScriptKind
from interview_coach.models.profile import Profile

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class StartSessionRequest(BaseModel):
    """Request model for starting a coaching session."""
    profile: Profile
    script: ScriptKind | None = None
    mode: DialogueMode | None = None


class StartSessionResponse(BaseModel):
    """Response after starting a session."""
    session_id: str
    script: ScriptKind
    mode: DialogueMode
    total_slots: int
    welcome: Message


class SubmitMessageRequest(BaseModel):
    """Request model for submitting an answer."""
    text: str


class SubmitMessageResponse(BaseModel):
    """Response after submitting an answer."""
    action: str  # "advance", "remediate", "ignored"
    message: Message | None = None
    question_index: int
    total_slots: int
    saturated: bool = False
    speech_notice: str | None = None


class SessionStateResponse(BaseModel):
    """Response for session state."""
    session_id: str
    job_title: str
    script: ScriptKind
    mode: DialogueMode
    question_index: int
    total_slots: int
    current_prompt: str
    speech_status: str | None = None
    speech_notice: str | None = None
    transcript: list[Message]


def _get_session(session_id: str) -> CoachSession:
    try:
        return get_session_manager().get_session(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")


def _speech_notice(session: CoachSession) -> str | None:
    return session.narrator.notice if session.narrator else None


async def _submit(session: CoachSession, text: str) -> SubmitMessageResponse:
    engine = session.engine
    turn = await engine.submit(text)

    if turn is None:
        return SubmitMessageResponse(
            action="ignored",
            question_index=engine.state.current_question_index,
            total_slots=engine.total_slots,
        )

    return SubmitMessageResponse(
        action="advance" if turn.accepted else "remediate",
        message=turn.message,
        question_index=turn.question_index,
        total_slots=engine.total_slots,
        saturated=turn.saturated,
        speech_notice=_speech_notice(session),
    )


# ============================================================================
# REST ENDPOINTS
# ============================================================================

@router.post("/sessions", response_model=StartSessionResponse)
async def start_session(request: StartSessionRequest) -> StartSessionResponse:
    """
    Start a coaching session for a profile.

    The session opens with the coach's welcome message.
    """
    settings = get_settings()

    try:
        script = request.script or ScriptKind(settings.script_kind)
        mode = request.mode or DialogueMode(settings.dialogue_mode)
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Invalid dialogue settings: {e}")

    session = get_session_manager().start_session(
        profile=request.profile,
        question_bank=build_question_bank(request.profile),
        script_kind=script,
        mode=mode,
    )

    return StartSessionResponse(
        session_id=session.session_id,
        script=script,
        mode=session.engine.mode,
        total_slots=session.engine.total_slots,
        welcome=session.engine.transcript[0],
    )


@router.post("/sessions/{session_id}/messages", response_model=SubmitMessageResponse)
async def submit_message(
    session_id: str,
    request: SubmitMessageRequest
) -> SubmitMessageResponse:
    """
    Submit an answer to the current question.

    Blank answers are ignored and leave the session unchanged.
    """
    session = _get_session(session_id)
    return await _submit(session, request.text)


@router.get("/sessions/{session_id}", response_model=SessionStateResponse)
async def get_session_state(session_id: str) -> SessionStateResponse:
    """Get the current state and transcript of a session."""
    session = _get_session(session_id)
    engine = session.engine

    return SessionStateResponse(
        session_id=session.session_id,
        job_title=session.profile.job_title,
        script=session.script_kind,
        mode=engine.mode,
        question_index=engine.state.current_question_index,
        total_slots=engine.total_slots,
        current_prompt=engine.current_slot.prompt,
        speech_status=session.narrator.status.value if session.narrator else None,
        speech_notice=_speech_notice(session),
        transcript=engine.transcript,
    )


@router.delete("/sessions/{session_id}")
async def end_session(session_id: str) -> dict[str, Any]:
    """End a session and discard its state."""
    try:
        await get_session_manager().end_session(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")

    return {"status": "ended", "session_id": session_id}


# ============================================================================
# WEBSOCKET ENDPOINT
# ============================================================================

@router.websocket("/ws/{session_id}")
async def websocket_coach(websocket: WebSocket, session_id: str):
    """
    WebSocket endpoint for real-time coaching.

    Message types:
    - message: Submit an answer ({"type": "message", "text": "..."})
    - ping: Keep-alive

    Server sends:
    - coach: Coach turn for a submitted answer
    - ignored: Blank answer was ignored
    - error: Error occurred
    """
    await websocket.accept()

    try:
        session = get_session_manager().get_session(session_id)
    except SessionNotFoundError:
        await websocket.close(code=4004, reason="Session not found")
        return

    try:
        while True:
            data = await websocket.receive_json()
            if not isinstance(data, dict):
                await websocket.send_json({
                    "type": "error",
                    "message": "Expected a JSON object",
                })
                continue

            message_type = data.get("type")

            if message_type == "message":
                text = data.get("text", "")
                if not isinstance(text, str):
                    await websocket.send_json({
                        "type": "error",
                        "message": "Message text must be a string",
                    })
                    continue

                result = await _submit(session, text)
                await websocket.send_json({
                    "type": "ignored" if result.action == "ignored" else "coach",
                    "data": result.model_dump(mode="json"),
                })

            elif message_type == "ping":
                await websocket.send_json({"type": "pong"})

            else:
                await websocket.send_json({
                    "type": "error",
                    "message": f"Unknown message type: {message_type}",
                })

    except WebSocketDisconnect:
        # Client disconnected
        pass
    except Exception as e:
        logger.error(f"Coach websocket error for {session_id}: {e}")
        await websocket.send_json({
            "type": "error",
            "message": str(e),
        })
