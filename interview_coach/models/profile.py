"""
Candidate profile model for Interview Coach
"""

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_SKILLS: list[str] = ["JavaScript", "React", "Communication"]
DEFAULT_JOB_TITLE = "Software Professional"
DEFAULT_EXPERIENCE = "Previous work experience in software development"
DEFAULT_EDUCATION = "Bachelor's Degree"


class Profile(BaseModel):
    """Structured facts inferred from a resume."""

    model_config = ConfigDict(frozen=True)

    job_title: str = Field(
        default=DEFAULT_JOB_TITLE,
        description="Target or current job title"
    )
    skills: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKILLS),
        min_length=1,
        description="Detected skills in catalog order"
    )
    experience: str = Field(
        default=DEFAULT_EXPERIENCE,
        description="Experience summary lines"
    )
    education: str = Field(
        default=DEFAULT_EDUCATION,
        description="Education summary lines"
    )

    @property
    def primary_skill(self) -> str:
        """The first (highest priority) skill."""
        return self.skills[0]

    @property
    def secondary_skill(self) -> str | None:
        """The second skill, if the resume listed more than one."""
        return self.skills[1] if len(self.skills) > 1 else None
