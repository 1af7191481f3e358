"""
Dialogue state and transcript models for Interview Coach
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Sender(str, Enum):
    """Who authored a transcript message."""

    USER = "user"
    COACH = "coach"


class DialogueMode(str, Enum):
    """How the coach decides whether to move on."""

    EVALUATED = "evaluated"          # Keyword rubric must be met
    UNCONDITIONAL = "unconditional"  # Any non-blank answer advances (degraded)


class ScriptKind(str, Enum):
    """Which question script a session runs through."""

    RESUME = "resume"              # Generated from the resume's question bank
    FUNDAMENTALS = "fundamentals"  # Fixed web fundamentals screening


class Message(BaseModel):
    """A single transcript entry."""

    id: int = Field(..., ge=1, description="Monotonic, 1-based message ID")
    text: str
    sender: Sender
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class DialogueState(BaseModel):
    """
    Conversation state for one coaching session.

    The transcript is append-only and the question index never moves
    backwards; both are mutated only through the methods below.
    """

    current_question_index: int = Field(default=0, ge=0)
    transcript: list[Message] = Field(default_factory=list)

    def append(self, text: str, sender: Sender) -> Message:
        """Append a message, numbering it from the transcript length."""
        message = Message(
            id=len(self.transcript) + 1,
            text=text,
            sender=sender,
            timestamp=datetime.utcnow(),
        )
        self.transcript.append(message)
        return message

    def advance_to(self, index: int) -> None:
        """Move the question index forward (never backward)."""
        if index < self.current_question_index:
            raise ValueError(
                f"Question index cannot decrease: {self.current_question_index} -> {index}"
            )
        self.current_question_index = index

    @property
    def last_message(self) -> Message | None:
        return self.transcript[-1] if self.transcript else None

    def messages_from(self, sender: Sender) -> list[Message]:
        return [m for m in self.transcript if m.sender == sender]


class CoachTurn(BaseModel):
    """Outcome of one submitted answer."""

    message: Message = Field(..., description="The coach message appended for this turn")
    accepted: bool = Field(..., description="Whether the answer met the slot's rubric")
    question_index: int = Field(..., description="Question index after the turn")
    saturated: bool = Field(
        default=False,
        description="True when the dialogue is already on its final question"
    )
