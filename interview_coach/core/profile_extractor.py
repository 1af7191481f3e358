"""
Profile Extractor for Interview Coach

Pattern-based inference of a candidate profile from raw resume text.
Every field has a fallback, so extraction never fails.
"""

import logging
import re

from interview_coach.models.profile import (
    DEFAULT_EDUCATION,
    DEFAULT_EXPERIENCE,
    DEFAULT_JOB_TITLE,
    DEFAULT_SKILLS,
    Profile,
)

logger = logging.getLogger(__name__)


# ============================================================================
# PATTERN CATALOGS
# ============================================================================

# First match wins, so order matters
JOB_TITLE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"Software Engineer", re.IGNORECASE),
    re.compile(r"Data Scientist", re.IGNORECASE),
    re.compile(r"Product Manager", re.IGNORECASE),
    re.compile(r"UX Designer", re.IGNORECASE),
    re.compile(r"Marketing Manager", re.IGNORECASE),
    re.compile(r"Business Analyst", re.IGNORECASE),
]

SKILL_CATALOG: list[str] = [
    "JavaScript",
    "Python",
    "React",
    "Node.js",
    "SQL",
    "Java",
    "C++",
    "Machine Learning",
    "Data Analysis",
    "Project Management",
    "UI/UX",
    "Figma",
    "Adobe",
    "Marketing",
    "SEO",
    "Content Creation",
]

EXPERIENCE_PATTERN = re.compile(r"experience|work|job|position|role", re.IGNORECASE)
EDUCATION_PATTERN = re.compile(
    r"education|university|college|degree|bachelor|master|phd", re.IGNORECASE
)

MAX_EXPERIENCE_LINES = 3
MAX_EDUCATION_LINES = 2


def _skill_pattern(skill: str) -> re.Pattern[str]:
    # Lookarounds instead of \b so skills ending in symbols (C++) still match
    return re.compile(rf"(?<!\w){re.escape(skill)}(?!\w)", re.IGNORECASE)


_SKILL_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    (skill, _skill_pattern(skill)) for skill in SKILL_CATALOG
]


# ============================================================================
# EXTRACTION
# ============================================================================

def extract_job_title(text: str) -> str:
    """Return the first known role mentioned in the text, as written."""
    for pattern in JOB_TITLE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return DEFAULT_JOB_TITLE


def extract_skills(text: str) -> list[str]:
    """Return catalog skills found in the text, in catalog order."""
    found = [skill for skill, pattern in _SKILL_PATTERNS if pattern.search(text)]
    return found or list(DEFAULT_SKILLS)


def _matching_lines(text: str, pattern: re.Pattern[str], limit: int) -> list[str]:
    lines = [line.rstrip("\r") for line in text.split("\n")]
    return [line for line in lines if pattern.search(line)][:limit]


def extract_experience(text: str) -> str:
    """First few lines that talk about work history."""
    lines = _matching_lines(text, EXPERIENCE_PATTERN, MAX_EXPERIENCE_LINES)
    return "\n".join(lines) if lines else DEFAULT_EXPERIENCE


def extract_education(text: str) -> str:
    """First few lines that talk about education."""
    lines = _matching_lines(text, EDUCATION_PATTERN, MAX_EDUCATION_LINES)
    return "\n".join(lines) if lines else DEFAULT_EDUCATION


def extract_profile(raw_text: str) -> Profile:
    """
    Build a Profile from raw resume text.

    Args:
        raw_text: Plain text extracted from the uploaded resume

    Returns:
        Profile with fallback values for anything not detected
    """
    profile = Profile(
        job_title=extract_job_title(raw_text),
        skills=extract_skills(raw_text),
        experience=extract_experience(raw_text),
        education=extract_education(raw_text),
    )

    logger.info(
        f"Extracted profile: title={profile.job_title!r}, "
        f"skills={len(profile.skills)}"
    )
    return profile
