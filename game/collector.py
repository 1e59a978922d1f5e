"""
Submission collector for synchronized phases.

Handles one pending action per active player and completion detection.
Contains no game logic - purely collection mechanics.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)


class SubmissionCollector:
    """
    Collects exactly one submission per active player.

    Submissions are kept in insertion order; a resubmission overwrites the
    value without moving the player's position. Completion is always
    judged against the current roster so that a player leaving can
    complete a phase that was only waiting on them.
    """

    def __init__(self):
        self.submissions: Dict[str, Any] = {}
        self.active_ids: Set[str] = set()
        self.is_open = False

    def open(self, active_ids: Iterable[str]) -> None:
        """
        Start collecting for a new phase instance.

        Args:
            active_ids: Players expected to submit
        """
        self.submissions = {}
        self.active_ids = set(active_ids)
        self.is_open = True
        logger.debug(f"Collector opened for {len(self.active_ids)} players")

    def submit(self, player_id: str, value: Any) -> Tuple[bool, str]:
        """
        Record a player's submission.

        Args:
            player_id: Submitting player
            value: Submitted value

        Returns:
            Tuple of (accepted, message)
        """
        if not self.is_open:
            return False, "No submissions are being collected"

        if player_id not in self.active_ids:
            return False, "Player is not part of this phase"

        replaced = player_id in self.submissions
        self.submissions[player_id] = value
        return True, "Submission updated" if replaced else "Submission recorded"

    def discard(self, player_id: str) -> None:
        """Forget a player who left mid-phase."""
        self.submissions.pop(player_id, None)
        self.active_ids.discard(player_id)

    def pending(self, roster_ids: Iterable[str]) -> List[str]:
        """Active players on the roster who have not submitted yet."""
        return [pid for pid in roster_ids if pid in self.active_ids and pid not in self.submissions]

    def is_complete(self, roster_ids: Iterable[str]) -> bool:
        """
        Check whether every active player still on the roster has submitted.

        Args:
            roster_ids: Current roster keys

        Returns:
            True if the phase can be resolved
        """
        if not self.is_open:
            return False
        expected = self.active_ids.intersection(roster_ids)
        if not expected:
            return False
        return expected.issubset(self.submissions.keys())

    def drain(self) -> Dict[str, Any]:
        """Close the collector and hand over the submissions."""
        submissions = self.submissions
        self.submissions = {}
        self.is_open = False
        return submissions

    def get_status(self, roster_ids: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        Get current status of the collection.

        Returns:
            Status information dictionary
        """
        roster_ids = list(roster_ids) if roster_ids is not None else list(self.active_ids)
        return {
            'submitted': len(self.submissions),
            'waitingFor': self.pending(roster_ids),
            'isOpen': self.is_open
        }
