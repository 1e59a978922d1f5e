"""
Game constants for Blackout Games.

This module contains all constant values used throughout the server,
including the per-game content tables, item catalogs and tuning values.
"""

# Colors quiz content
COLORS = ["red", "blue", "yellow", "green"]
PROMPTS = ["buttonColor", "textContent", "textColor"]

# Questions party game content
QUESTION_LIST = [
    "Who is the funniest?",
    "Who would survive a zombie apocalypse?",
    "Who is the most dramatic?",
    "Who is most likely to forget their own birthday?",
    "Who is the best storyteller?",
    "Who would win a reality TV show?",
    "Who is most likely to become famous?",
    "Who gives the best advice?",
    "Who is most likely to get lost on the way here?",
    "Who would be the worst roommate?",
    "Who is the most competitive?",
    "Who laughs at their own jokes the most?",
]

# Item catalogs for the bidding games: (id, name, category, magnitude)
ARENA_ITEMS = [
    ("dagger", "Dagger", "weapon", 2),
    ("club", "Club", "weapon", 3),
    ("sword", "Sword", "weapon", 4),
    ("axe", "Battle Axe", "weapon", 6),
    ("crossbow", "Crossbow", "weapon", 5),
    ("bandage", "Bandage", "heal", 2),
    ("potion", "Health Potion", "heal", 4),
    ("elixir", "Elixir", "heal", 7),
]

TAVERN_ITEMS = [
    ("beer", "Beer", "drink", -2),
    ("wine", "Red Wine", "drink", -3),
    ("whiskey", "Whiskey", "drink", -4),
    ("tequila", "Tequila Shot", "drink", -5),
    ("absinthe", "Absinthe", "drink", -7),
    ("water", "Glass of Water", "water", 2),
    ("jug", "Jug of Water", "water", 4),
]

# Socket.IO namespaces
NAMESPACES = {
    'COLORS': '/colors',
    'QUESTIONS': '/questions',
    'ARENA': '/bidding',
    'TAVERN': '/tavern'
}

# Outbound event names
EVENTS = {
    'PLAYERS_UPDATE': 'playersUpdate',
    'NEW_ROUND': 'newRound',
    'ROUND_RESULTS': 'roundResults',
    'NEW_QUESTION': 'newQuestion',
    'QUESTION_ANSWERED': 'questionAnswered',
    'NEW_ITEM': 'newItem',
    'BID_RESULT': 'bidResult',
    'BIDDING_COMPLETE': 'biddingComplete',
    'ATTACK_RESULTS': 'attackResults',
    'GAME_OVER': 'gameOver'
}

# Game configuration
GAME_CONFIG = {
    'ROOM_CODE_LENGTH': 4,
    'ROOM_CODE_ATTEMPTS': 32,
    'MAX_NAME_LENGTH': 20,
    'ARENA_STARTING_HEALTH': 10,
    'ARENA_STARTING_GOLD': 20,
    'ARENA_SURVIVOR_BONUS': 5,
    'TAVERN_STARTING_VISION': 10,
    'TAVERN_STARTING_CURRENCY': 20,
    'TAVERN_SURVIVOR_BONUS': 5,
    'ITEMS_PER_ROUND': 4
}
