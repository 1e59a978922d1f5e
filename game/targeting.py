"""
Targeting resolution for the bidding games.

Actions are applied one by one in submission order against a working
roster. A player knocked out by an earlier action in the same batch is
gone for the rest of it: actions aimed at them are skipped and their own
action never happens.
"""

import logging
from typing import Any, Dict, List
from lobby.models import PlayerData
from .models import ActionResult, TargetingOutcome
from .variants import VariantRules

logger = logging.getLogger(__name__)


def resolve_targeting(rules: VariantRules, actions: Dict[str, Dict[str, Any]],
                      players: Dict[str, PlayerData]) -> TargetingOutcome:
    """
    Apply a batch of targeting actions.

    Eliminated players are removed from ``players``. When one player is left
    the outcome is game over; otherwise every survivor earns the bonus.

    Args:
        rules: Variant being played
        actions: player_id -> {'targetId': ..., 'itemId': ...} in submission order
        players: Current roster (mutated)

    Returns:
        TargetingOutcome with per-action results
    """
    outcome = TargetingOutcome()
    knocked_out: List[str] = []

    for attacker_id, action in actions.items():
        attacker = players.get(attacker_id)
        if attacker is None or attacker_id in knocked_out:
            continue

        target_id = (action or {}).get('targetId')
        instance_id = (action or {}).get('itemId')
        if not target_id or not instance_id:
            outcome.results.append(ActionResult(attacker_name=attacker.name, skipped=True))
            continue

        target = players.get(target_id)
        item = attacker.find_item(instance_id)
        if target is None or target_id in knocked_out or target_id == attacker_id or item is None:
            logger.debug(f"Skipping action from {attacker.name}: target or item unavailable")
            outcome.results.append(ActionResult(attacker_name=attacker.name, skipped=True))
            continue

        delta = rules.effect(item)
        target.stats[rules.stat] += delta
        attacker.items.remove(item)
        outcome.results.append(ActionResult(
            attacker_name=attacker.name,
            target_name=target.name,
            magnitude=item.magnitude,
            item_name=item.name
        ))

        if rules.is_eliminated(target):
            knocked_out.append(target_id)

    # sweep anyone at or below the threshold, including earlier knockouts
    for player_id, player in list(players.items()):
        if rules.is_eliminated(player):
            del players[player_id]
            outcome.eliminated.append(player.name)

    if outcome.eliminated:
        logger.info(f"Eliminated: {', '.join(outcome.eliminated)}")

    if len(players) <= 1:
        outcome.is_game_over = True
        survivor = next(iter(players.values()), None)
        outcome.winner_name = survivor.name if survivor else None
        return outcome

    for player in players.values():
        player.stats[rules.currency] += rules.survivor_bonus

    return outcome
