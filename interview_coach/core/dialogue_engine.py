"""
Dialogue Engine - State machine for the coaching conversation.

This is the core of Interview Coach. It owns the dialogue state, judges
each answer against the current slot's rubric and decides whether the
coach moves on to the next question or asks the user to try again.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Protocol

from interview_coach.core.answer_evaluator import AnswerEvaluator
from interview_coach.core.rubrics import build_script
from interview_coach.models.dialogue import (
    CoachTurn,
    DialogueMode,
    DialogueState,
    Message,
    ScriptKind,
    Sender,
)
from interview_coach.models.profile import Profile
from interview_coach.models.question import QuestionBank
from interview_coach.models.rubric import DialogueSlot

logger = logging.getLogger(__name__)


DEFAULT_RETRY_PROMPT = "Give it another try when you're ready."


class SpeechCollaborator(Protocol):
    """What the engine needs from a speech adapter."""

    async def stop(self) -> None: ...

    async def on_coach_utterance(self, text: str) -> None: ...


class DialogueEngine:
    """
    Runs one coaching session as a single-state machine.

    State:
        AWAITING_ANSWER(current_question_index)

    Each ``submit`` is one turn:
        user message → (reply delay) → evaluate → advance | remediate → coach message

    The question index never decreases and saturates on the last slot:
    once there, accepted answers re-ask the final question instead of
    running off the end of the script.

    Turns are serialized by a per-engine lock, so a second submission made
    while the coach is still "thinking" waits for the first to finish.
    """

    def __init__(
        self,
        slots: list[DialogueSlot],
        state: DialogueState | None = None,
        mode: DialogueMode = DialogueMode.EVALUATED,
        reply_delay: float = 0.0,
        retry_prompt: str = DEFAULT_RETRY_PROMPT,
        evaluator: AnswerEvaluator | None = None,
        speech: SpeechCollaborator | None = None,
    ):
        """
        Initialize the engine.

        Args:
            slots: Dialogue script, slot 0 being the welcome gate
            state: Existing state (a fresh one seeded with slot 0 otherwise)
            mode: Evaluated (rubric) or unconditional advancement
            reply_delay: Seconds the coach "thinks" before replying
            retry_prompt: Appended to remediation feedback
            evaluator: Answer evaluator (default rubric evaluator)
            speech: Optional speech adapter notified of coach utterances
        """
        if not slots:
            raise ValueError("A dialogue needs at least one slot")

        self.slots = slots
        self.mode = mode
        self.reply_delay = reply_delay
        self.retry_prompt = retry_prompt
        self.evaluator = evaluator or AnswerEvaluator()
        self.speech = speech

        if state is None:
            state = DialogueState()
            state.append(slots[0].prompt, Sender.COACH)
        if state.current_question_index > self.last_index:
            raise ValueError(
                f"Question index {state.current_question_index} outside script "
                f"of {len(slots)} slots"
            )
        self.state = state

        self._turn_lock = asyncio.Lock()
        self._utterance_callbacks: list[Callable[[Message], Awaitable[None]]] = []

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def total_slots(self) -> int:
        return len(self.slots)

    @property
    def last_index(self) -> int:
        return len(self.slots) - 1

    @property
    def current_slot(self) -> DialogueSlot:
        return self.slots[self.state.current_question_index]

    @property
    def transcript(self) -> list[Message]:
        return self.state.transcript

    @property
    def is_busy(self) -> bool:
        """True while a turn is in flight."""
        return self._turn_lock.locked()

    # =========================================================================
    # TURNS
    # =========================================================================

    async def submit(self, user_text: str) -> CoachTurn | None:
        """
        Process one user answer.

        Blank or whitespace-only text is ignored: nothing is appended and
        None is returned.

        Args:
            user_text: The user's free-text answer

        Returns:
            The coach's turn, or None for blank input
        """
        if not user_text or not user_text.strip():
            logger.debug("Ignoring blank submission")
            return None

        async with self._turn_lock:
            self.state.append(user_text, Sender.USER)

            if self.reply_delay > 0:
                await asyncio.sleep(self.reply_delay)

            turn = self._respond(user_text)
            await self._emit(turn.message)

        return turn

    def _respond(self, user_text: str) -> CoachTurn:
        """Evaluate the answer, transition and append the coach reply."""
        index = self.state.current_question_index
        slot = self.slots[index]

        if self.mode == DialogueMode.UNCONDITIONAL:
            accepted = True
        else:
            accepted = self.evaluator.evaluate(user_text, slot.rubric).accepted

        if accepted:
            next_index = min(index + 1, self.last_index)
            self.state.advance_to(next_index)
            reply = self.slots[next_index].prompt
        else:
            reply = slot.rubric.remediation_message(self.retry_prompt)

        message = self.state.append(reply, Sender.COACH)

        logger.info(
            f"Slot {index} → {self.state.current_question_index} "
            f"({'accepted' if accepted else 'remediation'})"
        )

        return CoachTurn(
            message=message,
            accepted=accepted,
            question_index=self.state.current_question_index,
            saturated=self.state.current_question_index == self.last_index,
        )

    async def _emit(self, message: Message) -> None:
        """Hand the coach message to speech and listeners; failures never propagate."""
        if self.speech is not None:
            try:
                await self.speech.stop()
                await self.speech.on_coach_utterance(message.text)
            except Exception as e:
                logger.error(f"Speech collaborator error: {e}")

        for callback in self._utterance_callbacks:
            try:
                await callback(message)
            except Exception as e:
                logger.error(f"Coach utterance callback error: {e}")

    # =========================================================================
    # EVENT CALLBACKS
    # =========================================================================

    def on_coach_utterance(self, callback: Callable[[Message], Awaitable[None]]) -> None:
        """Register a callback for coach messages produced by turns."""
        self._utterance_callbacks.append(callback)


def start_session(
    profile: Profile,
    question_bank: QuestionBank,
    kind: ScriptKind = ScriptKind.RESUME,
    mode: DialogueMode = DialogueMode.EVALUATED,
    **engine_options,
) -> DialogueEngine:
    """
    Bootstrap a dialogue for a profile.

    The engine starts on slot 0 with the welcome message, built from the
    profile's job title, as its only transcript entry.
    """
    slots = build_script(profile, question_bank, kind)
    return DialogueEngine(slots, mode=mode, **engine_options)
