"""
Data models for game management.

These represent game-specific data structures that operate within rooms:
catalog items, the tagged phase states and resolution outcomes.
"""

import uuid
from dataclasses import dataclass, field, replace
from typing import List, Optional, Dict, Any
from .collector import SubmissionCollector


@dataclass(frozen=True)
class Item:
    """A catalog entry, or a player-owned copy of one when instance_id is set."""
    item_id: str
    name: str
    category: str
    magnitude: int
    instance_id: Optional[str] = None

    def claim(self) -> 'Item':
        """Return a fresh owned instance of this catalog entry."""
        return replace(self, instance_id=uuid.uuid4().hex[:8])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = {
            'id': self.instance_id or self.item_id,
            'itemId': self.item_id,
            'name': self.name,
            'category': self.category,
            'magnitude': self.magnitude
        }
        return data


# Phase states. Each tag only carries the fields that mean something in it.

@dataclass
class Idle:
    name: str = 'idle'

    @property
    def collector(self) -> Optional[SubmissionCollector]:
        return None


@dataclass
class Quizzing:
    """Colors round open for answers."""
    round: Dict[str, Any]
    answers: SubmissionCollector = field(default_factory=SubmissionCollector)
    name: str = 'quizzing'

    @property
    def collector(self) -> Optional[SubmissionCollector]:
        return self.answers


@dataclass
class Bidding:
    """Auction of the current item; remaining items wait in the queue."""
    current_item: Optional[Item]
    item_queue: List[Item] = field(default_factory=list)
    bids: SubmissionCollector = field(default_factory=SubmissionCollector)
    name: str = 'bidding'

    @property
    def collector(self) -> Optional[SubmissionCollector]:
        return self.bids


@dataclass
class Targeting:
    """Every player picks a target and an item, or passes."""
    actions: SubmissionCollector = field(default_factory=SubmissionCollector)
    name: str = 'targeting'

    @property
    def collector(self) -> Optional[SubmissionCollector]:
        return self.actions


@dataclass
class Answering:
    """Question ping-pong; is_open is False while the next question is pending."""
    questions: List[str]
    round_index: int
    asker_id: str
    is_open: bool = True
    name: str = 'answering'

    @property
    def current_question(self) -> str:
        return self.questions[self.round_index]

    @property
    def collector(self) -> Optional[SubmissionCollector]:
        return None


@dataclass
class Finished:
    winner_name: Optional[str] = None
    name: str = 'finished'

    @property
    def collector(self) -> Optional[SubmissionCollector]:
        return None


# Resolution outcomes

@dataclass
class BidOutcome:
    item: Item
    winner_id: Optional[str] = None
    winner_name: Optional[str] = None
    winning_bid: int = 0
    consumed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'item': self.item.to_dict(),
            'winnerName': self.winner_name,
            'winningBid': self.winning_bid if self.winner_id else None
        }


@dataclass
class ActionResult:
    attacker_name: str
    target_name: Optional[str] = None
    magnitude: Optional[int] = None
    item_name: Optional[str] = None
    skipped: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'attackerName': self.attacker_name,
            'targetName': self.target_name,
            'magnitude': self.magnitude,
            'itemName': self.item_name,
            'skipped': self.skipped
        }


@dataclass
class TargetingOutcome:
    results: List[ActionResult] = field(default_factory=list)
    eliminated: List[str] = field(default_factory=list)  # player names
    winner_name: Optional[str] = None
    is_game_over: bool = False


@dataclass
class QuizAnswer:
    name: str
    correct: bool

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'correct': self.correct}
