"""
Colors Manager for the colors quiz.

Opens quiz rounds, collects one answer per player and scores the round
once everybody still in the room has answered.
"""

import logging
from typing import Optional, Dict, Any, Tuple
from lobby.models import RoomData
from utils.constants import EVENTS
from .colors import generate_round, is_correct, score_round
from .manager import GameManager
from .models import Idle, Quizzing

logger = logging.getLogger(__name__)


class ColorsManager(GameManager):
    """Room state machine for the colors quiz."""

    game_name = 'colors'

    def starting_stats(self) -> Dict[str, int]:
        return {'score': 0}

    def start_round(self, code: str, player_id: str) -> bool:
        """
        Open a new quiz round. Host only; replaces a round still in progress.

        Returns:
            True if a round was opened
        """
        room = self.host_room(code, player_id)
        if not room:
            return False

        with room.lock:
            if room.is_empty:
                return False
            round_data = generate_round(self.rng)
            room.round_number += 1
            self.open_phase(room, Quizzing(round=round_data))
            self.broadcast(room, EVENTS['NEW_ROUND'], round_data)
            return True

    def submit_answer(self, code: str, player_id: str,
                      selection: Optional[Dict[str, Any]]) -> Tuple[bool, str, Optional[Dict[str, Any]]]:
        """
        Record a player's selected option.

        Returns:
            tuple: (success, message, {'correct': bool})
        """
        room = self.registry.get(code)
        if not room:
            return False, "Room not found", None

        with room.lock:
            phase = room.phase
            if not isinstance(phase, Quizzing):
                return False, "No round in progress", None

            correct = is_correct(phase.round, selection)
            accepted, message = self.submit(room, player_id, selection)
            if not accepted:
                return False, message, None
            return True, message, {'correct': correct}

    def resolve_phase(self, room: RoomData, submissions: Dict[str, Any]) -> None:
        results = score_round(room.phase.round, submissions, room.players)
        room.phase = Idle()
        self.broadcast(room, EVENTS['ROUND_RESULTS'], {
            'round': room.round_number,
            'results': [r.to_dict() for r in results],
            'players': room.roster_dicts()
        })
        self.broadcast_players(room)
