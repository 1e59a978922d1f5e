"""
Data models for room management.

These are pure data structures used to pass information between
the room registry, game managers, and handlers.
"""

import threading
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Set
from datetime import datetime


@dataclass
class PlayerData:
    """Represents a player in a room."""
    player_id: str
    name: str
    is_vip: bool = False
    stats: Dict[str, int] = field(default_factory=dict)
    items: List[Any] = field(default_factory=list)
    joined_at: Optional[datetime] = None
    has_inventory: bool = False  # bidding games always report items, even when empty

    def find_item(self, instance_id: str) -> Optional[Any]:
        """Find a held item by its instance id."""
        for item in self.items:
            if item.instance_id == instance_id:
                return item
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = {
            'id': self.player_id,
            'name': self.name,
            'isVIP': self.is_vip
        }
        data.update(self.stats)
        if self.items or self.has_inventory:
            data['items'] = [item.to_dict() for item in self.items]
        return data


@dataclass
class RoomData:
    """Represents a room's current state."""
    code: str
    game: str
    creator_id: Optional[str] = None
    host_id: Optional[str] = None
    players: Dict[str, PlayerData] = field(default_factory=dict)  # player_id -> PlayerData, join order
    phase: Any = None
    round_number: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    emptied_at: Optional[datetime] = None
    eliminated_ids: Set[str] = field(default_factory=set)  # knocked out, may not rejoin
    lock: Any = field(default_factory=threading.RLock, repr=False, compare=False)

    @property
    def player_count(self) -> int:
        """Number of players on the roster."""
        return len(self.players)

    @property
    def is_empty(self) -> bool:
        return not self.players

    def get_player(self, player_id: str) -> Optional[PlayerData]:
        """Find player by connection id."""
        return self.players.get(player_id)

    def roster(self) -> List[PlayerData]:
        """Players in join order."""
        return list(self.players.values())

    def roster_dicts(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.players.values()]

    def is_host(self, player_id: str) -> bool:
        """The VIP and the connection that created the room may drive the game."""
        return player_id is not None and player_id in (self.host_id, self.creator_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'code': self.code,
            'game': self.game,
            'player_count': self.player_count,
            'round_number': self.round_number,
            'phase': getattr(self.phase, 'name', 'idle'),
            'created_at': self.created_at.isoformat(),
            'players': self.roster_dicts()
        }
