"""
Helper utilities for Blackout Games.

This module contains utility functions used throughout the application
for validation, generation, and data manipulation.
"""

import random
import string
from typing import List, Optional, Sequence, TypeVar
from .constants import GAME_CONFIG

T = TypeVar('T')


def generate_room_code(length: int = GAME_CONFIG['ROOM_CODE_LENGTH']) -> str:
    """Generate a random room code."""
    characters = string.ascii_uppercase + string.digits
    return ''.join(random.choices(characters, k=length))


def validate_display_name(name: Optional[str]) -> tuple[bool, Optional[str]]:
    """
    Validate a display name for a player.

    Returns:
        tuple: (is_valid, error_message)
    """
    if not isinstance(name, str) or not name.strip():
        return False, "Name cannot be empty"

    if len(name.strip()) > GAME_CONFIG['MAX_NAME_LENGTH']:
        return False, f"Name must be {GAME_CONFIG['MAX_NAME_LENGTH']} characters or less"

    return True, None


def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Return a uniformly shuffled copy of a sequence.

    Args:
        items: Sequence to shuffle
        rng: Optional random source (defaults to the module generator)

    Returns:
        New shuffled list
    """
    result = list(items)
    (rng or random).shuffle(result)
    return result


def format_time_duration(seconds: int) -> str:
    """
    Format a duration in seconds to a human-readable string.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 60:
        return f"{seconds}s"
    elif seconds < 3600:
        minutes = seconds // 60
        remaining_seconds = seconds % 60
        if remaining_seconds == 0:
            return f"{minutes}m"
        return f"{minutes}m {remaining_seconds}s"
    else:
        hours = seconds // 3600
        remaining_minutes = (seconds % 3600) // 60
        if remaining_minutes == 0:
            return f"{hours}h"
        return f"{hours}h {remaining_minutes}m"
