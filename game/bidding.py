"""
Auction resolution for the bidding games.

Winner selection: among eligible bids (0 <= bid <= the bidder's money) the
strictly highest wins. Equal bids go to whoever submitted first, since
submission order is the only ordering the collector keeps.
"""

import logging
import random
from typing import Dict, List, Optional, Tuple
from lobby.models import PlayerData
from .models import BidOutcome, Item
from .variants import VariantRules

logger = logging.getLogger(__name__)


def draw_item_queue(rules: VariantRules, rng: Optional[random.Random] = None) -> List[Item]:
    """Pick the items auctioned in one round."""
    rng = rng or random
    count = min(rules.items_per_round, len(rules.catalog))
    return rng.sample(list(rules.catalog), count)


def select_winner(bids: Dict[str, int], players: Dict[str, PlayerData],
                  currency: str) -> Tuple[Optional[str], int]:
    """
    Pick the winning bid.

    Args:
        bids: player_id -> bid, in submission order
        players: Current roster
        currency: Stat the bid is paid from

    Returns:
        (winner_id, winning_bid); winner_id is None when no bid is eligible
    """
    winner_id = None
    best = -1
    for player_id, amount in bids.items():
        player = players.get(player_id)
        if player is None:
            continue
        if amount < 0 or amount > player.stats.get(currency, 0):
            logger.debug(f"Ignoring unaffordable bid {amount} from {player.name}")
            continue
        if amount > best:
            winner_id, best = player_id, amount
    return winner_id, (best if winner_id else 0)


def resolve_bidding(rules: VariantRules, item: Item, bids: Dict[str, int],
                    players: Dict[str, PlayerData]) -> BidOutcome:
    """
    Resolve one auction and apply it to the winner.

    The winner pays the bid. Items in a consumed-on-win category change the
    winner's stat right away; anything else is added to their inventory.

    Args:
        rules: Variant being played
        item: Catalog item under the hammer
        bids: Completed submission mapping
        players: Current roster (mutated)

    Returns:
        BidOutcome describing what happened
    """
    winner_id, amount = select_winner(bids, players, rules.currency)
    if winner_id is None:
        logger.info(f"No eligible bids for {item.name}, item discarded")
        return BidOutcome(item=item)

    winner = players[winner_id]
    winner.stats[rules.currency] -= amount

    consumed = item.category in rules.consumed_on_win
    if consumed:
        winner.stats[rules.stat] += rules.effect(item)
    else:
        winner.items.append(item.claim())

    logger.info(f"{winner.name} won {item.name} for {amount}")
    return BidOutcome(
        item=item,
        winner_id=winner_id,
        winner_name=winner.name,
        winning_bid=amount,
        consumed=consumed
    )
