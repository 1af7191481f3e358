"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components.
"""

from interview_coach.config.settings import get_settings
from interview_coach.core.session_manager import SessionManager
from interview_coach.core.speech import SpeechSynthesizer


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_session_manager: SessionManager | None = None
_synthesizer: SpeechSynthesizer | None = None


def get_synthesizer() -> SpeechSynthesizer:
    """Get the speech synthesizer singleton."""
    global _synthesizer

    if _synthesizer is None:
        _synthesizer = SpeechSynthesizer()

    return _synthesizer


def get_session_manager() -> SessionManager:
    """
    Get the session manager singleton.

    Lazily initializes it from settings.
    """
    global _session_manager

    if _session_manager is None:
        settings = get_settings()
        _session_manager = SessionManager(
            synthesizer=get_synthesizer() if settings.speech_enabled else None,
            reply_delay=settings.reply_delay_seconds,
            retry_prompt=settings.retry_prompt,
        )

    return _session_manager


async def cleanup():
    """Cleanup resources on shutdown."""
    global _session_manager, _synthesizer

    if _session_manager:
        await _session_manager.close()

    _session_manager = None
    _synthesizer = None
