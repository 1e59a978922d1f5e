"""
Game Module for Blackout Games.

Contains the room state machine shared by all games, the submission
collector, the per-game resolvers and the managers that run each game.
"""

from .models import Item, Idle, Quizzing, Bidding, Targeting, Answering, Finished
from .collector import SubmissionCollector
from .timers import RoomTimers
from .broadcaster import Broadcaster, SocketIOBroadcaster
from .variants import VariantRules, ARENA, TAVERN
from .manager import GameManager
from .colors_manager import ColorsManager
from .questions_manager import QuestionsManager
from .auction_manager import AuctionManager

__all__ = [
    # Data models
    'Item',
    'Idle',
    'Quizzing',
    'Bidding',
    'Targeting',
    'Answering',
    'Finished',
    'VariantRules',
    'ARENA',
    'TAVERN',

    # Infrastructure
    'SubmissionCollector',
    'RoomTimers',
    'Broadcaster',
    'SocketIOBroadcaster',

    # Managers
    'GameManager',
    'ColorsManager',
    'QuestionsManager',
    'AuctionManager'
]
