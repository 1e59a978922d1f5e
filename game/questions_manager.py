"""
Questions Manager for the questions party game.

Runs the asker ping-pong: the asker names a player, that player asks the
next question after a short pause.
"""

import logging
from typing import Optional, Sequence, Tuple
from lobby.models import RoomData, PlayerData
from utils.constants import EVENTS, QUESTION_LIST
from .manager import GameManager
from .models import Answering
from .questions import open_questions, answer_question, replacement_asker

logger = logging.getLogger(__name__)


class QuestionsManager(GameManager):
    """Room state machine for the questions game."""

    game_name = 'questions'

    def __init__(self, *args, question_delay: float = 4, questions: Sequence[str] = QUESTION_LIST, **kwargs):
        super().__init__(*args, **kwargs)
        self.question_delay = question_delay
        self.questions = list(questions)

    def start_game(self, code: str, player_id: str) -> bool:
        """
        Shuffle the questions and announce the first one. Host only.

        Returns:
            True if the game started
        """
        room = self.host_room(code, player_id)
        if not room:
            return False

        with room.lock:
            if room.is_empty or not self.questions:
                return False
            self.timers.cancel_room(room.code)
            room.round_number = 0
            self.open_phase(room, open_questions(self.questions, list(room.players), self.rng))
            self._announce(room)
            return True

    def answer(self, code: str, player_id: str, target_id: str) -> Tuple[bool, str]:
        """
        The current asker picks who the question is about.

        Returns:
            tuple: (success, message)
        """
        room = self.registry.get(code)
        if not room:
            return False, "Room not found"

        with room.lock:
            phase = room.phase
            if not isinstance(phase, Answering) or not phase.is_open:
                return False, "No question is open"
            if player_id != phase.asker_id:
                return False, "Not your turn to ask"
            if target_id not in room.players:
                return False, "Unknown player"

            outcome = answer_question(phase, target_id)
            room.round_number = phase.round_index
            self.broadcast(room, EVENTS['QUESTION_ANSWERED'], {
                'question': outcome.question,
                'askedBy': outcome.asked_by,
                'answeredBy': outcome.answered_by
            })

            if outcome.is_game_over:
                self.finish(room)
                self.broadcast(room, EVENTS['GAME_OVER'], {})
                return True, "Game over"

            self.schedule(room, self.question_delay, self._next_question)
            return True, "Answer recorded"

    def on_player_left(self, room: RoomData, player: PlayerData) -> None:
        phase = room.phase
        if not isinstance(phase, Answering):
            return
        new_asker = replacement_asker(phase, list(room.players), self.rng)
        if new_asker and phase.is_open:
            logger.info(f"Asker {player.name} left room {room.code}, passing the question on")
            self._announce(room)

    def _next_question(self, room: RoomData) -> None:
        phase = room.phase
        if not isinstance(phase, Answering) or phase.is_open:
            return
        replacement_asker(phase, list(room.players), self.rng)
        phase.is_open = True
        self._announce(room)

    def _announce(self, room: RoomData) -> None:
        phase = room.phase
        self.broadcast(room, EVENTS['NEW_QUESTION'], {
            'question': phase.current_question,
            'askedBy': phase.asker_id
        })
