"""
Rubric Catalog for Interview Coach

Builds the dialogue script for a session: the slot prompts the coach asks
and the keyword rubric each answer is judged against.

Slot 0 is always the welcome/consent gate. Slots 1..N follow either the
resume question bank (technical, then behavioral) or the fixed
fundamentals screening.
"""

import logging

from interview_coach.models.dialogue import ScriptKind
from interview_coach.models.profile import Profile
from interview_coach.models.question import Question, QuestionBank, QuestionCategory
from interview_coach.models.rubric import DialogueSlot, Rubric

logger = logging.getLogger(__name__)


WELCOME_TEMPLATE = (
    "Hi! I'm your AI Interview Coach. I see you're preparing for a {job_title} "
    "position. Would you like to start practicing interview questions?"
)

AFFIRMATIVE_KEYWORDS: frozenset[str] = frozenset({
    "yes", "yeah", "yep", "sure", "okay", "ready",
    "start", "let's", "absolutely", "of course",
})

CONTENT_MINIMUM_MATCHES = 2


def welcome_message(job_title: str) -> str:
    """Opening coach line for a session."""
    return WELCOME_TEMPLATE.format(job_title=job_title)


def welcome_rubric() -> Rubric:
    """Looser yes/no gate for the consent turn."""
    return Rubric(
        required_keywords=AFFIRMATIVE_KEYWORDS,
        minimum_matches=1,
        remediation_feedback="No problem, we can start whenever you're ready.",
        remediation_suggestion="Just say yes when you'd like to begin.",
    )


def _content_rubric(keywords, feedback: str, suggestion: str) -> Rubric:
    return Rubric(
        required_keywords=keywords,
        minimum_matches=CONTENT_MINIMUM_MATCHES,
        remediation_feedback=feedback,
        remediation_suggestion=suggestion,
    )


# ============================================================================
# RESUME QUESTION RUBRICS
# ============================================================================

def technical_rubrics(profile: Profile) -> dict[int, Rubric]:
    """Rubrics for the technical bank questions, keyed by question id."""
    skill = profile.primary_skill

    return {
        1: _content_rubric(
            {skill, "project", "built", "developed", "result", "improved", "impact", "team"},
            "Your answer didn't describe a concrete project or what came of it.",
            f"Walk through a specific project where you used {skill}, what you did "
            f"and the measurable result.",
        ),
        2: _content_rubric(
            {"documentation", "tutorial", "course", "practice", "project", "build",
             "community", "hands-on"},
            "I didn't hear how you actually go about learning something new.",
            "Describe your process, for example reading the docs, following a "
            "tutorial and then building a small project.",
        ),
        3: _content_rubric(
            {"problem", "root cause", "debug", "investigat", "solution", "fixed",
             "resolved", "approach"},
            "Your answer is missing the problem-solving steps.",
            "Explain how you investigated the issue, found the root cause and what "
            "solution you put in place.",
        ),
        4: _content_rubric(
            {"test", "review", "standard", "lint", "static analysis", "refactor",
             "documentation", "continuous integration"},
            "Your answer didn't mention concrete quality practices.",
            "Talk about testing, code reviews, coding standards or refactoring and how "
            "you apply them.",
        ),
        5: _content_rubric(
            {"metric", "kpi", "performance", "coverage", "satisfaction", "adoption",
             "latency", "revenue", "bug"},
            "Your answer didn't name any way of measuring success.",
            "Mention specific technical and business metrics, such as test coverage, "
            "performance or user adoption.",
        ),
    }


BEHAVIORAL_RUBRICS: dict[int, Rubric] = {
    1: _content_rubric(
        {"prioriti", "deadline", "plan", "communicat", "delivered", "scope", "broke down"},
        "Your answer didn't show how you handled the time pressure.",
        "Use a specific example: how you planned, prioritized and communicated, and "
        "whether you delivered on time.",
    ),
    2: _content_rubric(
        {"listen", "communicat", "common ground", "compromise", "discuss",
         "perspective", "resolve", "agree"},
        "Your answer didn't explain how the conflict was resolved.",
        "Describe how you listened to each perspective and worked toward common "
        "ground.",
    ),
    3: _content_rubric(
        {"adapt", "change", "learn", "positive", "flexib", "adjust", "stakeholder"},
        "Your answer didn't show how you adapted.",
        "Explain what changed, how you adjusted and what you learned from it.",
    ),
    4: _content_rubric(
        {"prioriti", "urgen", "important", "deadline", "communicat", "stakeholder",
         "schedule", "organiz"},
        "Your answer didn't describe a way of deciding what comes first.",
        "Talk about how you rank tasks by urgency and importance and keep "
        "stakeholders informed.",
    ),
    5: _content_rubric(
        {"grow", "lead", "learn", "skill", "mentor", "goal", "expert", "career"},
        "Your answer didn't describe a clear direction.",
        "Share your goals, the skills you want to grow and how they fit this career "
        "path.",
    ),
}


def rubric_for_question(question: Question, profile: Profile) -> Rubric:
    """Look up the rubric for a bank question."""
    if question.category == QuestionCategory.TECHNICAL:
        return technical_rubrics(profile)[question.id]
    return BEHAVIORAL_RUBRICS[question.id]


# ============================================================================
# FUNDAMENTALS SCREENING
# ============================================================================

FUNDAMENTALS_SCRIPT: list[tuple[str, Rubric]] = [
    (
        "Let's start with the basics. How does HTTPS keep data safe compared to plain "
        "HTTP?",
        _content_rubric(
            {"secure", "encryption", "ssl", "tls", "certificate"},
            "Your answer is missing the security mechanisms behind HTTPS.",
            "Mention how TLS/SSL encryption and certificates protect data in transit.",
        ),
    ),
    (
        "What makes an API RESTful?",
        _content_rubric(
            {"stateless", "resource", "http method", "verb", "endpoint", "uri", "url",
             "status code", "representation"},
            "Your answer doesn't cover the core REST constraints.",
            "Talk about stateless requests, resources identified by URLs and standard "
            "HTTP methods.",
        ),
    ),
    (
        "How would you use caching to speed up a web application?",
        _content_rubric(
            {"cache", "ttl", "expir", "invalidat", "cdn", "redis", "memory", "stale"},
            "Your answer doesn't explain where or how data would be cached.",
            "Mention a cache layer such as a CDN or Redis and how entries expire or get "
            "invalidated.",
        ),
    ),
    (
        "What is a database index and when would you add one?",
        _content_rubric(
            {"lookup", "search", "b-tree", "query", "column", "faster", "scan", "write"},
            "Your answer doesn't explain what an index does.",
            "Describe how an index speeds up queries on a column and what it costs on "
            "writes.",
        ),
    ),
    (
        "How do you use Git branches in a team workflow?",
        _content_rubric(
            {"branch", "merge", "pull request", "review", "commit", "rebase", "conflict"},
            "Your answer doesn't describe a branching workflow.",
            "Explain how work happens on feature branches and gets reviewed and merged.",
        ),
    ),
]


# ============================================================================
# SCRIPT BUILDERS
# ============================================================================

def _welcome_slot(profile: Profile) -> DialogueSlot:
    return DialogueSlot(prompt=welcome_message(profile.job_title), rubric=welcome_rubric())


def build_resume_script(profile: Profile, question_bank: QuestionBank) -> list[DialogueSlot]:
    """Welcome slot followed by every bank question, technical first."""
    slots = [_welcome_slot(profile)]
    for question in question_bank.flatten():
        slots.append(DialogueSlot(
            prompt=question.prompt,
            rubric=rubric_for_question(question, profile),
            question_id=question.id,
        ))
    return slots


def build_fundamentals_script(profile: Profile) -> list[DialogueSlot]:
    """Welcome slot followed by the fixed fundamentals screening."""
    slots = [_welcome_slot(profile)]
    slots.extend(
        DialogueSlot(prompt=prompt, rubric=rubric)
        for prompt, rubric in FUNDAMENTALS_SCRIPT
    )
    return slots


def build_script(
    profile: Profile,
    question_bank: QuestionBank,
    kind: ScriptKind = ScriptKind.RESUME,
) -> list[DialogueSlot]:
    """
    Build the dialogue script for a session.

    Args:
        profile: Candidate profile (used for the welcome line and rubrics)
        question_bank: Questions generated for the profile
        kind: Which script to run

    Returns:
        Ordered dialogue slots, slot 0 being the welcome gate
    """
    if kind == ScriptKind.FUNDAMENTALS:
        slots = build_fundamentals_script(profile)
    else:
        slots = build_resume_script(profile, question_bank)

    logger.info(f"Built {kind.value} script with {len(slots)} slots")
    return slots
