import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from interview_coach.api import dependencies
from interview_coach.config.settings import get_settings
from interview_coach.core.question_bank import build_question_bank
from interview_coach.models.profile import Profile


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    monkeypatch.setenv("REPLY_DELAY_SECONDS", "0")
    monkeypatch.setenv("SPEECH_ENABLED", "false")
    get_settings.cache_clear()
    monkeypatch.setattr(dependencies, "_session_manager", None)
    monkeypatch.setattr(dependencies, "_synthesizer", None)
    try:
        yield
    finally:
        get_settings.cache_clear()


@pytest.fixture
def profile():
    return Profile(
        job_title="Software Engineer",
        skills=["Python", "SQL"],
        experience="Backend work experience",
        education="BSc Computer Science degree",
    )


@pytest.fixture
def question_bank(profile):
    return build_question_bank(profile)
