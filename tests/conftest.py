import os
import sys
import random
import pytest

# Ensure the project root (containing the `game` and `lobby` packages) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from game import (
    Broadcaster, RoomTimers, ColorsManager, QuestionsManager, AuctionManager, ARENA, TAVERN
)


class RecordingBroadcaster(Broadcaster):
    """Keeps every emitted event instead of sending it anywhere."""

    def __init__(self):
        self.events = []

    def emit(self, room_code, event, payload=None):
        self.events.append((room_code, event, payload))

    def named(self, event):
        return [payload for _, name, payload in self.events if name == event]

    def last(self, event):
        found = self.named(event)
        return found[-1] if found else None

    def clear(self):
        self.events = []


class DeferredTimers(RoomTimers):
    """RoomTimers whose callbacks only run when the test says so."""

    def __init__(self):
        self.queued = []
        super().__init__(lambda fn, *args: self.queued.append((fn, args)), lambda seconds: None)

    def run_pending(self):
        queued, self.queued = self.queued, []
        for fn, args in queued:
            fn(*args)
        return len(queued)


@pytest.fixture()
def broadcaster():
    return RecordingBroadcaster()


@pytest.fixture()
def timers():
    return DeferredTimers()


@pytest.fixture()
def colors(broadcaster, timers):
    return ColorsManager(broadcaster, timers, rng=random.Random(3))


@pytest.fixture()
def questions(broadcaster, timers):
    return QuestionsManager(broadcaster, timers, rng=random.Random(5), question_delay=4)


@pytest.fixture()
def arena(broadcaster, timers):
    return AuctionManager(ARENA, broadcaster, timers, rng=random.Random(11), item_delay=3)


@pytest.fixture()
def tavern(broadcaster, timers):
    return AuctionManager(TAVERN, broadcaster, timers, rng=random.Random(13), item_delay=3)


def make_room(manager, *names):
    """Create a room with a creator connection 'screen' and join players p1, p2, ... in order."""
    _, _, code = manager.create_room('screen')
    for index, name in enumerate(names, start=1):
        manager.join_room(code, f'p{index}', name)
    return code


@pytest.fixture()
def socket_app():
    from app import create_app
    app, socketio, managers = create_app({
        'TESTING': True,
        'SOCKETIO_ASYNC_MODE': 'threading',
        'QUESTION_DELAY_SEC': 0,
        'BID_ITEM_DELAY_SEC': 0
    })
    return app, socketio, managers
