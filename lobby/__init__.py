"""
Lobby Module for Blackout Games.

Contains room bookkeeping: the room registry, player data and
roster management.
"""

from .models import RoomData, PlayerData
from .registry import RoomRegistry
from .player_manager import PlayerManager

__all__ = [
    # Data models
    'RoomData',
    'PlayerData',

    # Managers
    'RoomRegistry',
    'PlayerManager'
]
