"""
Room registry.

Owns the mapping from room code to room for one game, handles room
creation, lookup, deletion and the reaping of empty rooms.
"""

import logging
from typing import Optional, List, Dict, Callable
from datetime import datetime, timedelta
from .models import RoomData
from utils.constants import GAME_CONFIG
from utils.helpers import generate_room_code, format_time_duration

logger = logging.getLogger(__name__)


class RoomRegistry:
    """In-memory room table for a single game."""

    def __init__(self, game: str, timers=None,
                 code_generator: Callable[[], str] = generate_room_code,
                 max_attempts: int = GAME_CONFIG['ROOM_CODE_ATTEMPTS']):
        """
        Initialize the registry.

        Args:
            game: Name of the game whose rooms live here
            timers: Optional RoomTimers whose callbacks are cancelled on deletion
            code_generator: Source of candidate room codes
            max_attempts: How many collisions to tolerate before giving up
        """
        self.game = game
        self.timers = timers
        self.code_generator = code_generator
        self.max_attempts = max_attempts
        self.rooms: Dict[str, RoomData] = {}

    def create(self, creator_id: Optional[str] = None) -> str:
        """
        Create a new empty room under a code not currently in use.

        Args:
            creator_id: Connection that requested the room

        Returns:
            The room code

        Raises:
            RuntimeError: if no free code was found within max_attempts
        """
        for _ in range(self.max_attempts):
            code = self.code_generator()
            if code not in self.rooms:
                self.rooms[code] = RoomData(code=code, game=self.game, creator_id=creator_id)
                logger.info(f"Room {code} created for {self.game}")
                return code
        raise RuntimeError(f"Could not allocate a free room code for {self.game}")

    def get(self, code: Optional[str]) -> Optional[RoomData]:
        """
        Get room by code.

        Returns:
            Room data or None if not found
        """
        if not code:
            return None
        return self.rooms.get(code.upper())

    def delete(self, code: str) -> bool:
        """Delete a room and cancel its pending timers."""
        room = self.rooms.pop(code, None)
        if not room:
            return False
        if self.timers:
            self.timers.cancel_room(code)
        logger.info(f"Deleted room {code} ({self.game})")
        return True

    def rooms_with_player(self, player_id: str) -> List[RoomData]:
        """All rooms whose roster contains the given connection."""
        return [room for room in list(self.rooms.values()) if player_id in room.players]

    def all_rooms(self) -> List[RoomData]:
        return list(self.rooms.values())

    def reap_empty_rooms(self, grace_seconds: int, now: Optional[datetime] = None) -> int:
        """
        Delete rooms that have had no players for longer than the grace period.

        Rooms that never had a player count from their creation time.

        Args:
            grace_seconds: How long an empty room is kept
            now: Reference time (defaults to utcnow)

        Returns:
            Number of rooms deleted
        """
        now = now or datetime.utcnow()
        cutoff = now - timedelta(seconds=grace_seconds)

        expired = []
        for code, room in list(self.rooms.items()):
            with room.lock:
                if not room.is_empty:
                    continue
                empty_since = room.emptied_at or room.created_at
                if empty_since <= cutoff:
                    self.delete(code)
                    expired.append(code)

        if expired:
            logger.info(
                f"Reaped {len(expired)} {self.game} rooms empty for over {format_time_duration(grace_seconds)}"
            )
        return len(expired)
