"""
Utilities module for Blackout Games.

This module contains constants, helper functions, and content tables
used throughout the application.
"""

from .constants import COLORS, PROMPTS, QUESTION_LIST, NAMESPACES, EVENTS, GAME_CONFIG
from .helpers import generate_room_code, validate_display_name, shuffled

__all__ = [
    'COLORS',
    'PROMPTS',
    'QUESTION_LIST',
    'NAMESPACES',
    'EVENTS',
    'GAME_CONFIG',
    'generate_room_code',
    'validate_display_name',
    'shuffled'
]
