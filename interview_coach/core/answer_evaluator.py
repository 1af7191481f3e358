"""
Answer Evaluator for Interview Coach

Judges a free-text answer against a slot's keyword rubric.

Keywords are matched as plain substrings of the lowercased answer, not as
whole words, so "ssl" also matches inside "grassland". Scoring is a flat
count: no weighting between keywords and no negation handling.
"""

import logging

from pydantic import BaseModel, Field

from interview_coach.models.rubric import Rubric

logger = logging.getLogger(__name__)


class AnswerVerdict(BaseModel):
    """Result of checking one answer against a rubric."""

    accepted: bool
    matched_keywords: list[str] = Field(default_factory=list)
    minimum_matches: int

    @property
    def match_count(self) -> int:
        return len(self.matched_keywords)


def matched_keywords(utterance: str, rubric: Rubric) -> list[str]:
    """Rubric keywords contained in the answer, sorted for stable output."""
    normalized = utterance.lower()
    return sorted(k for k in rubric.required_keywords if k in normalized)


def count_keyword_matches(utterance: str, rubric: Rubric) -> int:
    return len(matched_keywords(utterance, rubric))


def evaluate_answer(utterance: str, rubric: Rubric) -> bool:
    """Accept iff at least ``rubric.minimum_matches`` keywords appear."""
    return count_keyword_matches(utterance, rubric) >= rubric.minimum_matches


class AnswerEvaluator:
    """
    Rubric-based evaluation component used by the dialogue engine.

    Responsibilities:
    - Count rubric keywords present in an answer
    - Turn the count into an accept/reject verdict
    - Log what was matched for each answer
    """

    def evaluate(self, utterance: str, rubric: Rubric) -> AnswerVerdict:
        """
        Evaluate a single answer.

        Args:
            utterance: The user's raw answer text
            rubric: Acceptance criteria for the current slot

        Returns:
            AnswerVerdict with the matched keywords
        """
        matches = matched_keywords(utterance, rubric)
        verdict = AnswerVerdict(
            accepted=len(matches) >= rubric.minimum_matches,
            matched_keywords=matches,
            minimum_matches=rubric.minimum_matches,
        )

        logger.debug(
            f"Matched {verdict.match_count}/{rubric.minimum_matches} keywords "
            f"({', '.join(matches) or 'none'}): "
            f"{'accepted' if verdict.accepted else 'rejected'}"
        )
        return verdict
