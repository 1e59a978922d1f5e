"""
Auction Manager for the bidding/elimination games.

A round auctions a queue of items one at a time, then every player
uses what they won against the others. The same manager runs both
variants; VariantRules decides the stats and item effects.
"""

import logging
from typing import Optional, Dict, Any, Tuple
from lobby.models import RoomData
from utils.constants import EVENTS
from .bidding import draw_item_queue, resolve_bidding
from .manager import GameManager
from .models import Idle, Finished, Bidding, Targeting
from .targeting import resolve_targeting
from .variants import VariantRules

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2


class AuctionManager(GameManager):
    """Room state machine for one bidding game variant."""

    has_inventory = True

    def __init__(self, rules: VariantRules, *args, item_delay: float = 3, **kwargs):
        self.rules = rules
        self.game_name = rules.name
        self.item_delay = item_delay
        super().__init__(*args, **kwargs)

    def starting_stats(self) -> Dict[str, int]:
        return self.rules.starting_stats()

    def start_round(self, code: str, player_id: str) -> bool:
        """
        Start the first round. Host only.

        Returns:
            True if bidding opened
        """
        room = self.host_room(code, player_id)
        if not room:
            return False

        with room.lock:
            if room.round_number > 0 or not isinstance(room.phase, Idle):
                return False
            return self._begin_round(room)

    def next_round(self, code: str, player_id: str) -> bool:
        """
        Start another round, dropping whatever phase was in progress. Host only.

        Returns:
            True if bidding opened
        """
        room = self.host_room(code, player_id)
        if not room:
            return False

        with room.lock:
            if room.round_number == 0 or isinstance(room.phase, Finished):
                return False
            self.timers.cancel_room(room.code)
            return self._begin_round(room)

    def submit_bid(self, code: str, player_id: str, amount: Any) -> Tuple[bool, str]:
        """
        Bid on the item currently up for auction.

        Unaffordable bids are accepted here and simply cannot win.

        Returns:
            tuple: (success, message)
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            return False, "Bid must be a whole number"

        room = self.registry.get(code)
        if not room:
            return False, "Room not found"

        with room.lock:
            phase = room.phase
            if not isinstance(phase, Bidding) or phase.current_item is None:
                return False, "No item is up for auction"
            return self.submit(room, player_id, amount)

    def submit_action(self, code: str, player_id: str, target_id: Optional[str] = None,
                      item_id: Optional[str] = None) -> Tuple[bool, str]:
        """
        Choose a target and an item to use on them. Leaving either out passes.

        Returns:
            tuple: (success, message)
        """
        room = self.registry.get(code)
        if not room:
            return False, "Room not found"

        with room.lock:
            if not isinstance(room.phase, Targeting):
                return False, "Not the targeting phase"
            return self.submit(room, player_id, {'targetId': target_id, 'itemId': item_id})

    def resolve_phase(self, room: RoomData, submissions: Dict[str, Any]) -> None:
        if isinstance(room.phase, Bidding):
            self._resolve_bids(room, submissions)
        elif isinstance(room.phase, Targeting):
            self._resolve_targeting(room, submissions)

    def _begin_round(self, room: RoomData) -> bool:
        if room.player_count < MIN_PLAYERS:
            logger.info(f"Room {room.code} needs {MIN_PLAYERS} players to start")
            return False
        room.round_number += 1
        queue = draw_item_queue(self.rules, self.rng)
        self.open_phase(room, Bidding(current_item=None, item_queue=queue))
        self._open_next_item(room)
        return True

    def _open_next_item(self, room: RoomData) -> None:
        phase = room.phase
        if not isinstance(phase, Bidding) or phase.current_item is not None or not phase.item_queue:
            return
        phase.current_item = phase.item_queue.pop(0)
        phase.bids.open(room.players.keys())
        self.broadcast(room, EVENTS['NEW_ITEM'], {
            'item': phase.current_item.to_dict(),
            'round': room.round_number,
            'remaining': len(phase.item_queue)
        })

    def _resolve_bids(self, room: RoomData, bids: Dict[str, int]) -> None:
        phase = room.phase
        outcome = resolve_bidding(self.rules, phase.current_item, bids, room.players)
        phase.current_item = None

        payload = outcome.to_dict()
        payload['players'] = room.roster_dicts()
        self.broadcast(room, EVENTS['BID_RESULT'], payload)

        if phase.item_queue:
            self.schedule(room, self.item_delay, self._open_next_item)
            return

        self.open_phase(room, Targeting())
        self.broadcast(room, EVENTS['BIDDING_COMPLETE'], {'players': room.roster_dicts()})

    def _resolve_targeting(self, room: RoomData, actions: Dict[str, Dict[str, Any]]) -> None:
        before = set(room.players)
        outcome = resolve_targeting(self.rules, actions, room.players)
        room.eliminated_ids.update(before - set(room.players))
        results = [r.to_dict() for r in outcome.results]

        if outcome.is_game_over:
            self.finish(room, outcome.winner_name)
            self.broadcast(room, EVENTS['GAME_OVER'], {
                'winner': outcome.winner_name,
                'results': results,
                'eliminated': outcome.eliminated
            })
            return

        room.phase = Idle()
        self.broadcast(room, EVENTS['ATTACK_RESULTS'], {
            'results': results,
            'eliminated': outcome.eliminated,
            'survivors': room.roster_dicts()
        })
