"""
Room broadcasting.

Game managers publish events to everyone in a room through a broadcaster
and never talk to the transport directly.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class Broadcaster:
    """Publishes an event and payload to every member of a room."""

    def emit(self, room_code: str, event: str, payload: Optional[Any] = None) -> None:
        raise NotImplementedError


class SocketIOBroadcaster(Broadcaster):
    """Broadcaster backed by a Flask-SocketIO namespace."""

    def __init__(self, socketio, namespace: str):
        self.socketio = socketio
        self.namespace = namespace

    def emit(self, room_code: str, event: str, payload: Optional[Any] = None) -> None:
        logger.debug(f"emit {self.namespace} {event} -> {room_code}")
        self.socketio.emit(event, payload, to=room_code, namespace=self.namespace)
