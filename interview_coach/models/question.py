"""
Question models for Interview Coach
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionCategory(str, Enum):
    """High-level question categories."""

    TECHNICAL = "technical"    # Skills and role specific
    BEHAVIORAL = "behavioral"  # Tell me about a time...


class Question(BaseModel):
    """A single practice question with a model answer."""

    model_config = ConfigDict(frozen=True)

    # Identification
    id: int = Field(..., ge=1, description="Question ID, unique within its category")
    category: QuestionCategory = Field(..., description="Question category")

    # Content
    prompt: str = Field(..., description="The question text")
    ideal_answer: str = Field(..., description="A strong sample answer")
    tip: str = Field(..., description="Coaching tip for answering")


class QuestionBank(BaseModel):
    """Technical and behavioral questions generated from one profile."""

    model_config = ConfigDict(frozen=True)

    technical: list[Question] = Field(default_factory=list)
    behavioral: list[Question] = Field(default_factory=list)

    def flatten(self) -> list[Question]:
        """All questions in dialogue order: technical, then behavioral."""
        return [*self.technical, *self.behavioral]

    def __len__(self) -> int:
        return len(self.technical) + len(self.behavioral)
