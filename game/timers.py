"""
Room-scoped delayed callbacks.

Every pending callback is keyed by the room it belongs to so that
deleting a room cancels whatever it still had scheduled.
"""

import itertools
import logging
import threading
from typing import Callable, Dict, Set

logger = logging.getLogger(__name__)


class RoomTimers:
    """
    Schedules cancellable delayed callbacks tied to a room code.

    The spawn/sleep pair comes from the async runtime, normally
    socketio.start_background_task and socketio.sleep.
    """

    def __init__(self, spawn: Callable, sleep: Callable[[float], None]):
        self._spawn = spawn
        self._sleep = sleep
        self._ids = itertools.count(1)
        self._pending: Dict[str, Set[int]] = {}
        self._lock = threading.Lock()

    def schedule(self, room_code: str, delay: float, callback: Callable[[], None]) -> int:
        """
        Run callback after delay seconds unless cancelled first.

        Returns:
            Handle that can be passed to cancel()
        """
        handle = next(self._ids)
        with self._lock:
            self._pending.setdefault(room_code, set()).add(handle)
        self._spawn(self._run, room_code, handle, delay, callback)
        logger.debug(f"[timer-set] room={room_code} handle={handle} delay={delay}s")
        return handle

    def cancel(self, room_code: str, handle: int) -> bool:
        with self._lock:
            handles = self._pending.get(room_code)
            if not handles or handle not in handles:
                return False
            handles.discard(handle)
            if not handles:
                del self._pending[room_code]
            return True

    def cancel_room(self, room_code: str) -> int:
        """Cancel every pending callback of a room. Returns how many were dropped."""
        with self._lock:
            handles = self._pending.pop(room_code, set())
        if handles:
            logger.info(f"[timer-cancel] room={room_code} cancelled={len(handles)}")
        return len(handles)

    def pending_count(self, room_code: str) -> int:
        with self._lock:
            return len(self._pending.get(room_code, ()))

    def _run(self, room_code: str, handle: int, delay: float, callback: Callable[[], None]) -> None:
        if delay > 0:
            self._sleep(delay)
        # a cancelled handle no longer fires
        if not self.cancel(room_code, handle):
            logger.debug(f"[timer-abort] room={room_code} handle={handle}")
            return
        logger.debug(f"[timer-fire] room={room_code} handle={handle}")
        callback()
