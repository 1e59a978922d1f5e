"""
Rules for the two bidding/elimination games.

Both games share the same auction and targeting machinery and differ only
in which stat is fought over, what the money is called and which item
categories do what.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple
from .models import Item
from utils.constants import ARENA_ITEMS, TAVERN_ITEMS, GAME_CONFIG


@dataclass(frozen=True)
class VariantRules:
    name: str
    stat: str
    currency: str
    starting_stat: int
    starting_currency: int
    survivor_bonus: int
    items_per_round: int
    catalog: Tuple[Item, ...]
    consumed_on_win: FrozenSet[str]  # categories applied to the winner immediately
    offensive: FrozenSet[str] = frozenset()  # categories whose magnitude is subtracted

    def effect(self, item: Item) -> int:
        """Signed change an item makes to the stat."""
        return -item.magnitude if item.category in self.offensive else item.magnitude

    def starting_stats(self):
        return {self.stat: self.starting_stat, self.currency: self.starting_currency}

    def is_eliminated(self, player) -> bool:
        return player.stats.get(self.stat, 0) <= 0


def _catalog(rows) -> Tuple[Item, ...]:
    return tuple(Item(item_id, name, category, magnitude) for item_id, name, category, magnitude in rows)


ARENA = VariantRules(
    name='arena',
    stat='health',
    currency='gold',
    starting_stat=GAME_CONFIG['ARENA_STARTING_HEALTH'],
    starting_currency=GAME_CONFIG['ARENA_STARTING_GOLD'],
    survivor_bonus=GAME_CONFIG['ARENA_SURVIVOR_BONUS'],
    items_per_round=GAME_CONFIG['ITEMS_PER_ROUND'],
    catalog=_catalog(ARENA_ITEMS),
    consumed_on_win=frozenset({'heal'}),
    offensive=frozenset({'weapon'})
)

TAVERN = VariantRules(
    name='tavern',
    stat='vision',
    currency='currency',
    starting_stat=GAME_CONFIG['TAVERN_STARTING_VISION'],
    starting_currency=GAME_CONFIG['TAVERN_STARTING_CURRENCY'],
    survivor_bonus=GAME_CONFIG['TAVERN_SURVIVOR_BONUS'],
    items_per_round=GAME_CONFIG['ITEMS_PER_ROUND'],
    catalog=_catalog(TAVERN_ITEMS),
    consumed_on_win=frozenset({'water'})
)
