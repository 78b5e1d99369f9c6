# Area: Games
"""
classroom_rounds._engine.games.quiz — Timed trivia quiz
=======================================================

Players answer alternate questions, player 1 first. A correct answer
is worth ``correct_points``, credited to the player's cumulative score
at once (not at round end). After each answer the module locks for
the feedback pause, then moves to the next question and the other
player. When the questions run out, the higher round tally wins.

``seconds_per_question`` and ``speed_bonus_points`` are carried for
display; the countdown itself belongs to the presentation layer.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..._config import QUIZ_FEEDBACK_SECONDS
from ..._content import ContentSource, MIN_QUESTION_BANK, Question
from ..._shared.randomness import sample
from ...errors import InsufficientContent
from ...settings import QuizOptions
from ..enums import GameKind, MovePhase
from ..result import Outcome
from .base import GameModule, Step

logger = logging.getLogger("classroom_rounds.quiz")


@dataclass
class AnswerFeedback:
    """The answer being shown during the feedback pause."""
    player_id: str
    chosen_index: int
    correct_index: int
    is_correct: bool
    earned: int


@dataclass
class QuizState:
    """Questions for this round and the progress through them."""

    questions: List[Question]
    turn_player_id: str
    round_points: Dict[str, int]
    index: int = 0
    locked: bool = False
    phase: MovePhase = MovePhase.READY
    feedback: Optional[AnswerFeedback] = None
    answered: Dict[str, int] = field(default_factory=dict)
    correct: Dict[str, int] = field(default_factory=dict)

    @property
    def current(self) -> Optional[Question]:
        if self.index < len(self.questions):
            return self.questions[self.index]
        return None


class QuizModule(GameModule[QuizState]):
    """Alternating multiple-choice quiz."""

    kind = GameKind.QUIZ

    def __init__(
        self,
        player1_id: str,
        player2_id: str,
        options: Optional[QuizOptions] = None,
        content: Optional[ContentSource] = None,
        rng: Optional[random.Random] = None,
        feedback_seconds: float = QUIZ_FEEDBACK_SECONDS,
    ):
        super().__init__(player1_id, player2_id, options or QuizOptions(), rng)
        self.content = content or ContentSource()
        self.feedback_seconds = feedback_seconds

    def initial_state(self) -> QuizState:
        bank = self.content.questions()
        if len(bank) < MIN_QUESTION_BANK:
            raise InsufficientContent("quiz questions", MIN_QUESTION_BANK, len(bank))
        questions = sample(bank, self.options.question_count, self.rng)
        return QuizState(
            questions=questions,
            turn_player_id=self.player1_id,
            round_points={self.player1_id: 0, self.player2_id: 0},
            answered={self.player1_id: 0, self.player2_id: 0},
            correct={self.player1_id: 0, self.player2_id: 0},
        )

    def whose_turn(self, state: QuizState) -> Optional[str]:
        if state.current is None:
            return None
        return state.turn_player_id

    def apply_input(self, state: QuizState, player_id: str, payload: Any) -> Step:
        # Second press during the feedback pause
        if state.locked:
            return Step.rejected()
        question = state.current
        if question is None or player_id != state.turn_player_id:
            return Step.rejected()
        if isinstance(payload, bool) or not isinstance(payload, int) \
                or not 0 <= payload < len(question.options):
            logger.debug(f"Answer rejected: {payload!r}")
            return Step.rejected()

        state.locked = True
        state.phase = MovePhase.AWAITING_EVALUATION

        is_correct = payload == question.correct_index
        earned = self.options.correct_points if is_correct else 0
        state.round_points[player_id] += earned
        state.answered[player_id] += 1
        if is_correct:
            state.correct[player_id] += 1
        state.feedback = AnswerFeedback(
            player_id=player_id,
            chosen_index=payload,
            correct_index=question.correct_index,
            is_correct=is_correct,
            earned=earned,
        )
        logger.info(
            f"Q{state.index + 1}: {player_id} answered "
            f"{'correctly' if is_correct else 'wrong'} (+{earned})"
        )

        awards = {player_id: earned} if earned > 0 else {}
        return Step(accepted=True, pause_seconds=self.feedback_seconds, awards=awards)

    def complete_pause(self, state: QuizState) -> Step:
        if not state.locked:
            return Step.rejected()
        state.index += 1
        state.turn_player_id = self.other_player(state.turn_player_id)
        state.locked = False
        state.phase = MovePhase.READY
        state.feedback = None

        if state.index >= len(state.questions):
            return Step(
                accepted=True,
                terminal=Outcome.by_comparison(state.round_points, self.player1_id, self.player2_id),
            )
        return Step(accepted=True)

    def public_view(self, state: QuizState) -> Dict[str, Any]:
        question = state.current
        view: Dict[str, Any] = {
            "index": state.index,
            "total": len(state.questions),
            "round_points": dict(state.round_points),
            "locked": state.locked,
            "question": None,
            "feedback": None,
            "seconds_per_question": self.options.seconds_per_question,
        }
        if question is not None:
            view["question"] = {
                "prompt": question.prompt,
                "options": list(question.options),
                "category": question.category,
            }
        if state.feedback is not None and question is not None:
            view["feedback"] = {
                "player_id": state.feedback.player_id,
                "chosen_index": state.feedback.chosen_index,
                "correct_index": state.feedback.correct_index,
                "is_correct": state.feedback.is_correct,
                "earned": state.feedback.earned,
                "explanation": question.explanation,
            }
        return view

    def summary(self, state: QuizState) -> Dict[str, Any]:
        return {
            "p1_round_points": state.round_points.get(self.player1_id, 0),
            "p2_round_points": state.round_points.get(self.player2_id, 0),
            "p1_correct": state.correct.get(self.player1_id, 0),
            "p2_correct": state.correct.get(self.player2_id, 0),
            "questions": len(state.questions),
            "seconds_per_question": self.options.seconds_per_question,
            "correct_points": self.options.correct_points,
            "speed_bonus_points": self.options.speed_bonus_points,
        }
