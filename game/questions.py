"""
Question ping-pong for the questions party game.

One player asks the current question and picks who it is about; that
player asks the next one. There is a single submitter at a time, so no
collector is involved.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence
from .models import Answering
from utils.helpers import shuffled

logger = logging.getLogger(__name__)


@dataclass
class AnswerOutcome:
    question: str
    asked_by: str
    answered_by: str
    is_game_over: bool
    next_question: Optional[str] = None


def open_questions(questions: Sequence[str], player_ids: Sequence[str],
                   rng: Optional[random.Random] = None) -> Answering:
    """Shuffle the question list and pick a random first asker."""
    rng = rng or random
    return Answering(
        questions=shuffled(questions, rng),
        round_index=0,
        asker_id=rng.choice(list(player_ids))
    )


def answer_question(phase: Answering, target_id: str) -> AnswerOutcome:
    """
    Record the asker's pick and move to the next question.

    The phase is closed until the next question is announced.
    """
    outcome = AnswerOutcome(
        question=phase.current_question,
        asked_by=phase.asker_id,
        answered_by=target_id,
        is_game_over=False
    )

    phase.round_index += 1
    if phase.round_index >= len(phase.questions):
        outcome.is_game_over = True
        return outcome

    phase.asker_id = target_id
    phase.is_open = False
    outcome.next_question = phase.current_question
    return outcome


def replacement_asker(phase: Answering, player_ids: List[str],
                      rng: Optional[random.Random] = None) -> Optional[str]:
    """Pick a new asker when the current one is no longer in the room."""
    if phase.asker_id in player_ids or not player_ids:
        return None
    phase.asker_id = (rng or random).choice(player_ids)
    return phase.asker_id
