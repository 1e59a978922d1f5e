"""
Round generation and scoring for the colors quiz.

Each round asks players to press the button whose button color, text
color or written word matches a target color. Four options are shown;
no option has its text painted in its own button color.
"""

import random
from typing import Any, Dict, List, Optional
from lobby.models import PlayerData
from .models import QuizAnswer
from utils.constants import COLORS, PROMPTS
from utils.helpers import shuffled


def generate_round(rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """
    Generate the data for one quiz round.

    Returns:
        {'prompt', 'targetColor', 'options': [{'buttonColor', 'textColor', 'textContent'}]}
    """
    rng = rng or random
    button_colors = shuffled(COLORS, rng)
    text_contents = shuffled(COLORS, rng)

    # redraw until no text color lands on its own button color
    text_colors = shuffled(COLORS, rng)
    while any(b == t for b, t in zip(button_colors, text_colors)):
        text_colors = shuffled(COLORS, rng)

    options = [
        {
            'buttonColor': button,
            'textColor': text,
            'textContent': content
        }
        for button, text, content in zip(button_colors, text_colors, text_contents)
    ]

    return {
        'prompt': rng.choice(PROMPTS),
        'targetColor': rng.choice(COLORS),
        'options': options
    }


def is_correct(round_data: Dict[str, Any], selection: Optional[Dict[str, Any]]) -> bool:
    """Check a selected option against the round's prompt."""
    if not isinstance(selection, dict):
        return False
    return selection.get(round_data['prompt']) == round_data['targetColor']


def score_round(round_data: Dict[str, Any], answers: Dict[str, Any],
                players: Dict[str, PlayerData]) -> List[QuizAnswer]:
    """
    Score a completed round, adding one point per correct answer.

    Args:
        round_data: Round being scored
        answers: player_id -> selected option
        players: Current roster (mutated)

    Returns:
        Per-player results in submission order
    """
    results = []
    for player_id, selection in answers.items():
        player = players.get(player_id)
        if player is None:
            continue
        correct = is_correct(round_data, selection)
        if correct:
            player.stats['score'] = player.stats.get('score', 0) + 1
        results.append(QuizAnswer(name=player.name, correct=correct))
    return results
