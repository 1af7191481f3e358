"""
Rubric models for Interview Coach

Defines the acceptance criteria the coach applies to each dialogue slot.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Rubric(BaseModel):
    """Keyword acceptance criteria for one dialogue question-slot."""

    model_config = ConfigDict(frozen=True)

    required_keywords: frozenset[str] = Field(
        ...,
        description="Keywords looked for (as substrings) in the answer"
    )
    minimum_matches: int = Field(
        default=2, ge=0,
        description="How many keywords must be present to accept"
    )
    remediation_feedback: str = Field(
        ...,
        description="What was missing from a rejected answer"
    )
    remediation_suggestion: str = Field(
        ...,
        description="How to improve a rejected answer"
    )

    @field_validator("required_keywords", mode="before")
    @classmethod
    def _lowercase_keywords(cls, value):
        return frozenset(keyword.strip().lower() for keyword in value if keyword.strip())

    def remediation_message(self, retry_prompt: str) -> str:
        """Coach reply for an answer that did not meet this rubric."""
        return " ".join(
            part for part in (
                self.remediation_feedback,
                self.remediation_suggestion,
                retry_prompt,
            ) if part
        )


class DialogueSlot(BaseModel):
    """One position in the dialogue script: what the coach asks and how it judges."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    rubric: Rubric
    question_id: int | None = None  # Source question, None for scripted lines
