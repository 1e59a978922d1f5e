"""
Socket.IO Event Handlers for Blackout Games.

Pure routing layer that delegates to the game managers.
Contains no business logic - only event routing and ack formatting.
"""

import logging
from flask import request
from flask_socketio import join_room, leave_room

logger = logging.getLogger(__name__)


def _payload(data):
    return data if isinstance(data, dict) else {}


def register_socket_handlers(socketio, managers):
    """
    Register all Socket.IO event handlers.

    Args:
        socketio: SocketIO instance
        managers: Mapping of namespace -> game manager
    """
    for namespace, manager in managers.items():
        _register_room_handlers(socketio, namespace, manager)

        if manager.game_name == 'colors':
            _register_colors_handlers(socketio, namespace, manager)
        elif manager.game_name == 'questions':
            _register_questions_handlers(socketio, namespace, manager)
        else:
            _register_auction_handlers(socketio, namespace, manager)

    logger.info("Socket.IO handlers registered successfully")


def _register_room_handlers(socketio, namespace, manager):
    """Room membership events shared by every game."""

    @socketio.on('connect', namespace=namespace)
    def handle_connect(*args):
        """Handle client connection."""
        logger.info(f"{manager.game_name} socket connected: {request.sid}")

    @socketio.on('disconnect', namespace=namespace)
    def handle_disconnect(*args):
        """Handle client disconnection."""
        try:
            left = manager.leave(request.sid)
            for code in left:
                logger.info(f"{request.sid} disconnected from {manager.game_name} room {code}")
        except Exception as e:
            logger.error(f"Error handling disconnect: {e}")

    @socketio.on('createRoom', namespace=namespace)
    def handle_create_room(*args):
        """Handle room creation request."""
        try:
            success, message, code = manager.create_room(request.sid)
            if not success:
                return {'success': False, 'message': message}
            join_room(code)
            return {'success': True, 'roomCode': code}
        except Exception as e:
            logger.error(f"Error creating room: {e}")
            return {'success': False, 'message': 'Failed to create room'}

    @socketio.on('joinRoom', namespace=namespace)
    def handle_join_room(data=None):
        """Handle player joining a room."""
        try:
            data = _payload(data)
            room = manager.registry.get(data.get('roomCode'))
            if not room:
                return {'success': False, 'message': 'Room not found'}

            # subscribe first so the joiner receives the roster broadcast
            was_subscribed = request.sid in room.players or request.sid == room.creator_id
            join_room(room.code)
            success, message, player = manager.join_room(room.code, request.sid, data.get('playerName'))
            if not success:
                if not was_subscribed:
                    leave_room(room.code)
                return {'success': False, 'message': message}
            return {'success': True, 'isVIP': player.is_vip}
        except Exception as e:
            logger.error(f"Error joining room: {e}")
            return {'success': False, 'message': 'Failed to join room'}


def _register_colors_handlers(socketio, namespace, manager):

    @socketio.on('startRound', namespace=namespace)
    def handle_start_round(data=None):
        try:
            manager.start_round(_payload(data).get('roomCode'), request.sid)
        except Exception as e:
            logger.error(f"Error starting round: {e}")

    @socketio.on('submitAnswer', namespace=namespace)
    def handle_submit_answer(data=None):
        try:
            data = _payload(data)
            success, message, result = manager.submit_answer(
                data.get('roomCode'), request.sid, data.get('selection')
            )
            if not success:
                return {'success': False, 'message': message}
            return {'success': True, 'correct': result['correct']}
        except Exception as e:
            logger.error(f"Error submitting answer: {e}")
            return {'success': False, 'message': 'Failed to submit answer'}


def _register_questions_handlers(socketio, namespace, manager):

    @socketio.on('startGame', namespace=namespace)
    def handle_start_game(data=None):
        try:
            manager.start_game(_payload(data).get('roomCode'), request.sid)
        except Exception as e:
            logger.error(f"Error starting game: {e}")

    @socketio.on('answerQuestion', namespace=namespace)
    def handle_answer_question(data=None):
        try:
            data = _payload(data)
            success, message = manager.answer(data.get('roomCode'), request.sid, data.get('targetId'))
            return {'success': success, 'message': message}
        except Exception as e:
            logger.error(f"Error answering question: {e}")
            return {'success': False, 'message': 'Failed to answer question'}


def _register_auction_handlers(socketio, namespace, manager):

    @socketio.on('startRound', namespace=namespace)
    def handle_start_round(data=None):
        try:
            manager.start_round(_payload(data).get('roomCode'), request.sid)
        except Exception as e:
            logger.error(f"Error starting round: {e}")

    @socketio.on('nextRound', namespace=namespace)
    def handle_next_round(data=None):
        try:
            manager.next_round(_payload(data).get('roomCode'), request.sid)
        except Exception as e:
            logger.error(f"Error starting next round: {e}")

    @socketio.on('submitBid', namespace=namespace)
    def handle_submit_bid(data=None):
        try:
            data = _payload(data)
            success, message = manager.submit_bid(data.get('roomCode'), request.sid, data.get('amount'))
            return {'success': success, 'message': message}
        except Exception as e:
            logger.error(f"Error submitting bid: {e}")
            return {'success': False, 'message': 'Failed to submit bid'}

    def handle_attack(data=None):
        try:
            data = _payload(data)
            success, message = manager.submit_action(
                data.get('roomCode'), request.sid, data.get('targetId'), data.get('itemId')
            )
            return {'success': success, 'message': message}
        except Exception as e:
            logger.error(f"Error submitting action: {e}")
            return {'success': False, 'message': 'Failed to submit action'}

    socketio.on_event('attack', handle_attack, namespace=namespace)
    socketio.on_event('targetAction', handle_attack, namespace=namespace)
