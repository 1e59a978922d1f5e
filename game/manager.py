"""
Game Manager - room state machine shared by every game.

Provides joining, leaving, host checks, phase opening and the
collect-then-resolve loop. Each game subclasses GameManager and supplies
its own phase content and resolution.
"""

import logging
import random
from typing import Optional, Dict, Any, List, Tuple, Callable
from lobby.models import RoomData, PlayerData
from lobby.player_manager import PlayerManager
from lobby.registry import RoomRegistry
from utils.constants import EVENTS
from .broadcaster import Broadcaster
from .models import Idle, Finished
from .timers import RoomTimers

logger = logging.getLogger(__name__)


class GameManager:
    """Coordinates room membership and synchronized phases for one game."""

    game_name = 'game'
    has_inventory = False

    def __init__(self, broadcaster: Broadcaster, timers: RoomTimers,
                 registry: Optional[RoomRegistry] = None,
                 rng: Optional[random.Random] = None):
        self.broadcaster = broadcaster
        self.timers = timers
        self.registry = registry or RoomRegistry(self.game_name, timers=timers)
        self.player_manager = PlayerManager(self.starting_stats(), self.has_inventory)
        self.rng = rng or random.Random()

    def starting_stats(self) -> Dict[str, int]:
        """Stats a player starts with in this game."""
        return {}

    # ---- room lifecycle ----

    def create_room(self, creator_id: Optional[str] = None) -> Tuple[bool, str, Optional[str]]:
        """
        Create a new room.

        Returns:
            tuple: (success, message, room_code)
        """
        try:
            code = self.registry.create(creator_id)
        except RuntimeError as e:
            logger.error(f"Error creating room: {e}")
            return False, "Failed to create room", None
        self.registry.get(code).phase = Idle()
        return True, "Room created", code

    def join_room(self, code: str, player_id: str, name: str) -> Tuple[bool, str, Optional[PlayerData]]:
        """
        Add a player to a room and broadcast the new roster.

        Returns:
            tuple: (success, message, player_data)
        """
        room = self.registry.get(code)
        if not room:
            return False, "Room not found", None

        with room.lock:
            success, message, player = self.player_manager.add_player(room, player_id, name)
            if success:
                self.broadcast_players(room)
            return success, message, player

    def leave(self, player_id: str) -> List[str]:
        """
        Remove a connection from every room it is in.

        A phase that was only waiting on the departing player resolves
        immediately.

        Returns:
            Codes of the rooms the player was removed from
        """
        left = []
        for room in self.registry.rooms_with_player(player_id):
            with room.lock:
                success, _, player = self.player_manager.remove_player(room, player_id)
                if not success:
                    continue
                left.append(room.code)

                collector = room.phase.collector if room.phase else None
                if collector:
                    collector.discard(player_id)
                    if collector.is_open and room.players and not collector.active_ids.intersection(room.players):
                        # only mid-phase joiners remain, collect from them instead
                        logger.info(f"Room {room.code} lost every {room.phase.name} participant, reopening")
                        collector.open(room.players.keys())

                self.broadcast_players(room)

                if room.is_empty:
                    if not isinstance(room.phase, (Idle, Finished)):
                        logger.info(f"Room {room.code} emptied mid-game, back to idle")
                        self.timers.cancel_room(room.code)
                        room.phase = Idle()
                    continue

                self.on_player_left(room, player)
                self.resolve_if_complete(room)
        return left

    def reap_empty_rooms(self, grace_seconds: int) -> int:
        return self.registry.reap_empty_rooms(grace_seconds)

    def get_active_rooms(self) -> List[Dict[str, Any]]:
        """Summaries of every room for the HTTP status endpoint."""
        rooms = []
        for room in self.registry.all_rooms():
            with room.lock:
                summary = room.to_dict()
                collector = room.phase.collector if room.phase else None
                if collector:
                    summary['submissions'] = collector.get_status(room.players.keys())
                rooms.append(summary)
        return rooms

    # ---- hooks for subclasses ----

    def on_player_left(self, room: RoomData, player: PlayerData) -> None:
        """Called under the room lock after a player left a non-empty room."""

    def resolve_phase(self, room: RoomData, submissions: Dict[str, Any]) -> None:
        """Resolve a completed collection. Called under the room lock."""
        raise NotImplementedError

    # ---- phase helpers ----

    def host_room(self, code: str, player_id: str) -> Optional[RoomData]:
        """Return the room if player_id may drive it, otherwise None."""
        room = self.registry.get(code)
        if not room:
            return None
        if not room.is_host(player_id):
            logger.debug(f"Ignoring host-only action from {player_id} in room {room.code}")
            return None
        return room

    def open_phase(self, room: RoomData, phase) -> None:
        """Install a phase and start collecting from the current roster."""
        room.phase = phase
        if phase.collector:
            phase.collector.open(room.players.keys())
        logger.info(f"Room {room.code} entered {phase.name}")

    def submit(self, room: RoomData, player_id: str, value: Any) -> Tuple[bool, str]:
        """Record a submission for the open phase and resolve it if complete."""
        collector = room.phase.collector if room.phase else None
        if collector is None:
            return False, "Nothing to submit right now"
        if player_id not in room.players:
            return False, "Player not in room"

        accepted, message = collector.submit(player_id, value)
        if not accepted:
            logger.debug(f"Rejected submission from {player_id} in room {room.code}: {message}")
            return False, message

        self.resolve_if_complete(room)
        return True, message

    def resolve_if_complete(self, room: RoomData) -> bool:
        collector = room.phase.collector if room.phase else None
        if not collector or not collector.is_complete(room.players.keys()):
            return False
        submissions = collector.drain()
        logger.info(f"Resolving {room.phase.name} in room {room.code} with {len(submissions)} submissions")
        self.resolve_phase(room, submissions)
        return True

    def schedule(self, room: RoomData, delay: float, callback: Callable[[RoomData], None]) -> int:
        """
        Run callback(room) under the room lock after a delay.

        The callback is dropped if the room was deleted in the meantime.
        """
        def _fire():
            if self.registry.get(room.code) is not room:
                return
            with room.lock:
                callback(room)

        return self.timers.schedule(room.code, delay, _fire)

    def finish(self, room: RoomData, winner_name: Optional[str] = None) -> None:
        self.timers.cancel_room(room.code)
        room.phase = Finished(winner_name=winner_name)
        logger.info(f"Game over in room {room.code}, winner: {winner_name}")

    # ---- broadcasting ----

    def broadcast(self, room: RoomData, event: str, payload: Optional[Any] = None) -> None:
        self.broadcaster.emit(room.code, event, payload)

    def broadcast_players(self, room: RoomData) -> None:
        self.broadcast(room, EVENTS['PLAYERS_UPDATE'], room.roster_dicts())
