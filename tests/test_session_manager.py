import asyncio

import pytest

from interview_coach.core.session_manager import SessionManager, SessionNotFoundError
from interview_coach.core.speech import SpeechClip, SpeechStatus
from interview_coach.models.dialogue import DialogueMode, ScriptKind


class QuietSynthesizer:
    def __init__(self):
        self.spoken = []

    async def synthesize(self, text, voice=None):
        self.spoken.append(text)
        return SpeechClip(text=text, audio_base64="AAAA", duration_seconds=0.0)


def test_sessions_are_independent(profile, question_bank):
    manager = SessionManager()
    first = manager.start_session(profile, question_bank, ScriptKind.FUNDAMENTALS)
    second = manager.start_session(profile, question_bank, ScriptKind.FUNDAMENTALS)

    asyncio.run(manager.submit(first.session_id, "yes"))

    assert first.session_id != second.session_id
    assert first.engine.state.current_question_index == 1
    assert second.engine.state.current_question_index == 0
    assert len(manager.list_sessions()) == 2


def test_speech_disabled_without_synthesizer(profile, question_bank):
    session = SessionManager().start_session(profile, question_bank)
    assert session.narrator is None
    assert session.engine.speech is None


def test_narrator_hears_each_coach_turn(profile, question_bank):
    synthesizer = QuietSynthesizer()
    manager = SessionManager(synthesizer=synthesizer)
    session = manager.start_session(profile, question_bank, ScriptKind.FUNDAMENTALS)

    async def scenario():
        turn = await manager.submit(session.session_id, "ok, ready")
        await session.narrator.wait_until_idle()
        return turn

    turn = asyncio.run(scenario())
    assert synthesizer.spoken == [turn.message.text]
    assert session.narrator.status == SpeechStatus.IDLE


def test_mode_and_retry_prompt_are_applied(profile, question_bank):
    manager = SessionManager(retry_prompt="One more time?")
    evaluated = manager.start_session(profile, question_bank)
    turn = asyncio.run(manager.submit(evaluated.session_id, "no"))
    assert turn.message.text.endswith("One more time?")

    lenient = manager.start_session(profile, question_bank, mode=DialogueMode.UNCONDITIONAL)
    assert asyncio.run(manager.submit(lenient.session_id, "no")).accepted


def test_end_session_forgets_state(profile, question_bank):
    manager = SessionManager(synthesizer=QuietSynthesizer())
    session = manager.start_session(profile, question_bank)

    asyncio.run(manager.end_session(session.session_id))

    with pytest.raises(SessionNotFoundError):
        manager.get_session(session.session_id)
    with pytest.raises(SessionNotFoundError):
        asyncio.run(manager.end_session(session.session_id))


def test_close_ends_every_session(profile, question_bank):
    manager = SessionManager()
    manager.start_session(profile, question_bank)
    manager.start_session(profile, question_bank)

    asyncio.run(manager.close())
    assert manager.list_sessions() == []


def test_end_session_during_reply_delay_stays_silent(profile, question_bank):
    synthesizer = QuietSynthesizer()
    manager = SessionManager(synthesizer=synthesizer, reply_delay=0.05)
    session = manager.start_session(profile, question_bank)

    async def scenario():
        pending = asyncio.create_task(manager.submit(session.session_id, "yes"))
        await asyncio.sleep(0.01)
        await manager.end_session(session.session_id)
        return await pending

    turn = asyncio.run(scenario())
    assert turn.accepted
    assert synthesizer.spoken == []
    assert session.narrator.status == SpeechStatus.IDLE
