import asyncio

import pytest

from interview_coach.config.settings import get_settings
from interview_coach.core.speech import (
    SPEECH_UNAVAILABLE_NOTICE,
    SpeechClip,
    SpeechNarrator,
    SpeechStatus,
    SpeechSynthesizer,
    estimate_duration,
)


class FakeSynthesizer:
    def __init__(self, delay=0.0, duration=0.0, error=None, raises=None):
        self.delay = delay
        self.duration = duration
        self.error = error
        self.raises = raises
        self.events = []

    async def synthesize(self, text, voice=None):
        self.events.append(f"start:{text}")
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.events.append(f"cancelled:{text}")
            raise
        if self.raises:
            raise self.raises
        return SpeechClip(
            text=text,
            audio_base64="AAAA",
            duration_seconds=self.duration,
            error=self.error,
        )


def test_estimate_duration():
    assert estimate_duration("one two three") == 3 / 150 * 60
    assert estimate_duration("") == 0


def test_narrator_speaks_and_returns_to_idle():
    synthesizer = FakeSynthesizer()
    narrator = SpeechNarrator(synthesizer)

    async def scenario():
        await narrator.on_coach_utterance("Hello there")
        speaking = narrator.is_speaking
        await narrator.wait_until_idle()
        return speaking

    assert asyncio.run(scenario())
    assert narrator.status == SpeechStatus.IDLE
    assert narrator.last_clip.text == "Hello there"
    assert narrator.notice is None


def test_new_utterance_cancels_the_previous_one():
    synthesizer = FakeSynthesizer(delay=0.2)
    narrator = SpeechNarrator(synthesizer)

    async def scenario():
        await narrator.on_coach_utterance("first")
        await asyncio.sleep(0.01)
        await narrator.on_coach_utterance("second")
        status = narrator.status
        await narrator.stop()
        return status

    assert asyncio.run(scenario()) == SpeechStatus.SPEAKING
    assert "cancelled:first" in synthesizer.events
    assert narrator.current_text == "second"
    assert narrator.status == SpeechStatus.IDLE


def test_stop_without_utterance_is_harmless():
    narrator = SpeechNarrator(FakeSynthesizer())
    asyncio.run(narrator.stop())
    assert narrator.status == SpeechStatus.IDLE


def test_synthesis_error_becomes_a_notice():
    narrator = SpeechNarrator(FakeSynthesizer(error="TTS not available"))

    async def scenario():
        await narrator.on_coach_utterance("Hello")
        await narrator.wait_until_idle()

    asyncio.run(scenario())
    assert narrator.notice == SPEECH_UNAVAILABLE_NOTICE
    assert narrator.last_clip is None
    assert narrator.status == SpeechStatus.IDLE


def test_synthesis_exception_is_contained():
    narrator = SpeechNarrator(FakeSynthesizer(raises=RuntimeError("boom")))

    async def scenario():
        await narrator.on_coach_utterance("Hello")
        await narrator.wait_until_idle()

    asyncio.run(scenario())
    assert narrator.notice == SPEECH_UNAVAILABLE_NOTICE
    assert narrator.status == SpeechStatus.IDLE


def test_notice_clears_on_next_utterance():
    synthesizer = FakeSynthesizer(error="offline")
    narrator = SpeechNarrator(synthesizer)

    async def scenario():
        await narrator.on_coach_utterance("one")
        await narrator.wait_until_idle()
        synthesizer.error = None
        await narrator.on_coach_utterance("two")
        await narrator.wait_until_idle()

    asyncio.run(scenario())
    assert narrator.notice is None
    assert narrator.last_clip.text == "two"


def test_closed_narrator_drops_utterances():
    synthesizer = FakeSynthesizer(delay=0.2)
    narrator = SpeechNarrator(synthesizer)

    async def scenario():
        await narrator.on_coach_utterance("first")
        await asyncio.sleep(0.01)
        await narrator.close()
        await narrator.on_coach_utterance("after close")
        await narrator.wait_until_idle()

    asyncio.run(scenario())
    assert synthesizer.events == ["start:first", "cancelled:first"]
    assert narrator.status == SpeechStatus.IDLE


@pytest.mark.parametrize("tts_model", ["edge-tts", "kokoro", "something-else"])
def test_non_piper_models_route_to_edge(monkeypatch, tts_model):
    monkeypatch.setenv("TTS_MODEL", tts_model)
    get_settings.cache_clear()
    synthesizer = SpeechSynthesizer()
    routed = []

    async def fake_edge(text, voice):
        routed.append((text, voice))
        return SpeechClip(text=text, audio_base64="AAAA")

    monkeypatch.setattr(synthesizer, "_tts_edge", fake_edge)

    clip = asyncio.run(synthesizer.synthesize("Hello", voice="female"))
    assert routed == [("Hello", "female")]
    assert clip.error is None
