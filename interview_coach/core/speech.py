"""
Speech Layer for Interview Coach

Handles:
- Text-to-Speech (TTS) synthesis using open-source engines
- Narration of coach utterances, one at a time

Speech is advisory: synthesis problems are logged and surfaced as a
notice, never raised into the dialogue.
"""

import asyncio
import base64
import logging
import tempfile
from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from interview_coach.config.settings import get_settings

logger = logging.getLogger(__name__)


SPEECH_UNAVAILABLE_NOTICE = (
    "Voice playback is unavailable right now. You can keep reading the coach's messages."
)

# Rough speaking rate used to estimate clip length
WORDS_PER_MINUTE = 150


def estimate_duration(text: str) -> float:
    """Estimated playback length in seconds."""
    return len(text.split()) / WORDS_PER_MINUTE * 60


class SpeechClip(BaseModel):
    """Synthesized audio for one utterance."""

    text: str
    audio_base64: str = ""
    format: str = "wav"
    sample_rate: int = 16000
    duration_seconds: float = 0.0
    error: str | None = None


class SpeechStatus(str, Enum):
    """Narrator playback state."""

    IDLE = "idle"
    SPEAKING = "speaking"


class SpeechSynthesizer:
    """
    TTS component.

    Uses Edge-TTS by default or Piper (local) when configured. Never
    raises: failures come back as a clip with ``error`` set.
    """

    def __init__(self):
        """Initialize synthesizer."""
        self.settings = get_settings()

    async def synthesize(self, text: str, voice: str | None = None) -> SpeechClip:
        """
        Convert text to speech.

        Args:
            text: Text to synthesize
            voice: Voice to use (optional, uses default)

        Returns:
            SpeechClip with base64 audio, or an error
        """
        tts_model = self.settings.tts_model.lower()
        voice = voice or self.settings.tts_voice

        if tts_model == "piper":
            return await self._tts_piper(text, voice)
        return await self._tts_edge(text, voice)

    async def _tts_piper(self, text: str, voice: str) -> SpeechClip:
        """Generate speech using Piper TTS."""
        with tempfile.NamedTemporaryFile(suffix=".wav", delete=False) as f:
            output_path = f.name

        try:
            process = await asyncio.create_subprocess_exec(
                "piper",
                "--model", voice,
                "--output_file", output_path,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            await process.communicate(input=text.encode())

            audio_data = Path(output_path).read_bytes()
            return SpeechClip(
                text=text,
                audio_base64=base64.b64encode(audio_data).decode("utf-8"),
                format="wav",
                sample_rate=self.settings.tts_rate,
                duration_seconds=estimate_duration(text),
            )

        except Exception as e:
            logger.error(f"Piper TTS failed: {e}")
            return await self._tts_edge(text, voice)
        finally:
            Path(output_path).unlink(missing_ok=True)

    async def _tts_edge(self, text: str, voice: str) -> SpeechClip:
        """Generate speech using Edge TTS (Microsoft)."""
        try:
            import edge_tts

            # Map voice names to Edge TTS voices
            edge_voices = {
                "male": "en-US-GuyNeural",
                "female": "en-US-JennyNeural",
                "professional": "en-US-AriaNeural",
                "default": "en-US-GuyNeural",
            }
            edge_voice = edge_voices.get(voice, edge_voices["default"])

            communicate = edge_tts.Communicate(text, edge_voice)

            audio_chunks = []
            async for chunk in communicate.stream():
                if chunk["type"] == "audio":
                    audio_chunks.append(chunk["data"])

            return SpeechClip(
                text=text,
                audio_base64=base64.b64encode(b"".join(audio_chunks)).decode("utf-8"),
                format="mp3",
                sample_rate=24000,
                duration_seconds=estimate_duration(text),
            )

        except ImportError:
            logger.error("edge-tts not installed. Install with: pip install edge-tts")
            return SpeechClip(text=text, error="TTS not available")
        except Exception as e:
            logger.error(f"Edge TTS failed: {e}")
            return SpeechClip(text=text, error=str(e))


class SpeechNarrator:
    """
    Speaks coach utterances for one session.

    At most one utterance is in flight: a new utterance cancels the
    previous one. The narrator runs in the background so the dialogue
    never waits on audio.
    """

    def __init__(self, synthesizer: SpeechSynthesizer, voice: str | None = None):
        self.synthesizer = synthesizer
        self.voice = voice

        self.status = SpeechStatus.IDLE
        self.notice: str | None = None
        self.current_text: str | None = None
        self.last_clip: SpeechClip | None = None

        self._task: asyncio.Task | None = None
        self._closed = False

    @property
    def is_speaking(self) -> bool:
        return self.status == SpeechStatus.SPEAKING

    async def on_coach_utterance(self, text: str) -> None:
        """Start speaking ``text``, interrupting anything already playing."""
        if self._closed:
            logger.debug("Narrator closed, dropping utterance")
            return

        await self.stop()

        self.notice = None
        self.current_text = text
        self.status = SpeechStatus.SPEAKING
        self._task = asyncio.create_task(self._speak(text))

    async def stop(self) -> None:
        """Cancel the in-flight utterance, if any."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        self.status = SpeechStatus.IDLE

    async def close(self) -> None:
        """Stop speaking and refuse further utterances."""
        self._closed = True
        await self.stop()

    async def wait_until_idle(self) -> None:
        """Wait for the current utterance to finish playing."""
        if self._task is not None:
            await asyncio.gather(self._task, return_exceptions=True)

    async def _speak(self, text: str) -> None:
        try:
            clip = await self.synthesizer.synthesize(text, self.voice)
            if clip.error:
                logger.warning(f"Speech unavailable: {clip.error}")
                self.notice = SPEECH_UNAVAILABLE_NOTICE
                return

            self.last_clip = clip
            # Hold the speaking status for the clip's playback window
            await asyncio.sleep(clip.duration_seconds)

        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"Speech narration failed: {e}")
            self.notice = SPEECH_UNAVAILABLE_NOTICE
        finally:
            if self._task is asyncio.current_task():
                self.status = SpeechStatus.IDLE
