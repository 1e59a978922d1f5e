"""
Player management for rooms.

Handles adding and removing players and the VIP assignment on first join.
"""

import logging
from typing import Optional, Tuple, Dict
from datetime import datetime
from .models import PlayerData, RoomData
from utils.helpers import validate_display_name

logger = logging.getLogger(__name__)


class PlayerManager:
    """Manages player operations within rooms."""

    def __init__(self, starting_stats: Optional[Dict[str, int]] = None, has_inventory: bool = False):
        """
        Initialize player manager.

        Args:
            starting_stats: Stats every new player starts with (copied per player)
            has_inventory: Whether players carry won items in this game
        """
        self.starting_stats = dict(starting_stats or {})
        self.has_inventory = has_inventory

    def add_player(self, room: RoomData, player_id: str,
                   name: Optional[str]) -> Tuple[bool, str, Optional[PlayerData]]:
        """
        Add a player to a room.

        The first player ever accepted into the room becomes its VIP host.
        Joining again from the same connection keeps the existing entry.
        A player eliminated from the room cannot come back.

        Args:
            room: The room to add player to
            player_id: Player's connection id
            name: Player's chosen display name

        Returns:
            tuple: (success, message, player_data)
        """
        if player_id in room.eliminated_ids:
            return False, "Player was eliminated", None

        is_valid, error_msg = validate_display_name(name)
        if not is_valid:
            return False, error_msg or "Invalid name", None

        existing = room.get_player(player_id)
        if existing:
            return True, "Player already in room", existing

        is_first = room.host_id is None
        player_data = PlayerData(
            player_id=player_id,
            name=name.strip(),
            is_vip=is_first,
            stats=dict(self.starting_stats),
            joined_at=datetime.utcnow(),
            has_inventory=self.has_inventory
        )

        room.players[player_id] = player_data
        room.emptied_at = None
        if is_first:
            room.host_id = player_id

        logger.info(f"Player {player_data.name} joined room {room.code}{' as VIP' if is_first else ''}")
        return True, "Player added successfully", player_data

    def remove_player(self, room: RoomData, player_id: str) -> Tuple[bool, str, Optional[PlayerData]]:
        """
        Remove a player from a room.

        Args:
            room: The room to remove player from
            player_id: Connection id of player to remove

        Returns:
            tuple: (success, message, removed_player)
        """
        player = room.players.pop(player_id, None)
        if not player:
            return False, "Player not found in room", None

        if room.is_empty:
            room.emptied_at = datetime.utcnow()

        logger.info(f"Player {player.name} removed from room {room.code}")
        return True, f"Player {player.name} removed", player
