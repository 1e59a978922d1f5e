"""
Blackout Games - party game server

Flask-SocketIO backend hosting the colors quiz, the questions game and
the two bidding games, each on its own Socket.IO namespace.
App.py is purely server setup and handler registration.
"""

import os

if __name__ == '__main__' and os.getenv('SOCKETIO_ASYNC_MODE', 'eventlet') == 'eventlet':
    import eventlet
    eventlet.monkey_patch()

import logging
from flask import Flask
from flask_socketio import SocketIO
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from config import settings
from game import (
    RoomTimers, SocketIOBroadcaster, ColorsManager, QuestionsManager,
    AuctionManager, ARENA, TAVERN
)
from handlers import register_socket_handlers, register_api_handlers
from utils.constants import NAMESPACES

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(overrides=None):
    """
    Application factory that creates and configures the Flask app.

    Args:
        overrides: Optional mapping replacing values from config.settings

    Returns:
        tuple: (app, socketio, managers) where managers maps namespace -> manager
    """
    config = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
    config.update(overrides or {})

    app = Flask(__name__)
    app.config['SECRET_KEY'] = config['SECRET_KEY']
    app.config['TESTING'] = config.get('TESTING', False)

    cors_origins = config['CORS_ORIGINS'].split(',')
    CORS(app, origins=cors_origins)

    # ProxyFix for deployment behind reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=config['SOCKETIO_ASYNC_MODE'],
        ping_timeout=60,
        ping_interval=25
    )

    logger.info("Initializing game managers...")

    def broadcaster(namespace):
        return SocketIOBroadcaster(socketio, namespace)

    # one timer table per game, room codes are only unique within a game
    def timers():
        return RoomTimers(socketio.start_background_task, socketio.sleep)

    managers = {
        NAMESPACES['COLORS']: ColorsManager(broadcaster(NAMESPACES['COLORS']), timers()),
        NAMESPACES['QUESTIONS']: QuestionsManager(
            broadcaster(NAMESPACES['QUESTIONS']), timers(),
            question_delay=config['QUESTION_DELAY_SEC']
        ),
        NAMESPACES['ARENA']: AuctionManager(
            ARENA, broadcaster(NAMESPACES['ARENA']), timers(),
            item_delay=config['BID_ITEM_DELAY_SEC']
        ),
        NAMESPACES['TAVERN']: AuctionManager(
            TAVERN, broadcaster(NAMESPACES['TAVERN']), timers(),
            item_delay=config['BID_ITEM_DELAY_SEC']
        ),
    }

    logger.info("Registering handlers...")
    register_socket_handlers(socketio, managers)
    register_api_handlers(app, managers, config['ROOM_REAP_GRACE_SEC'])

    logger.info("Application initialization complete")

    return app, socketio, managers


def start_room_reaper(socketio, managers, interval_seconds, grace_seconds):
    """Periodically delete rooms that have been empty for too long."""

    def _reaper():
        while True:
            socketio.sleep(interval_seconds)
            for manager in managers.values():
                try:
                    manager.reap_empty_rooms(grace_seconds)
                except Exception as e:
                    logger.error(f"Error reaping {manager.game_name} rooms: {e}")

    return socketio.start_background_task(_reaper)


def main():
    """Main entry point for the game server."""
    app, socketio, managers = create_app()

    start_room_reaper(socketio, managers, settings.ROOM_REAP_INTERVAL_SEC, settings.ROOM_REAP_GRACE_SEC)

    logger.info(f"Starting Blackout Games server on port {settings.PORT}")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"CORS origins: {settings.CORS_ORIGINS}")

    socketio.run(app, debug=settings.DEBUG, port=settings.PORT, host='0.0.0.0')


if __name__ == '__main__':
    main()
