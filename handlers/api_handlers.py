"""
API Route Handlers for Blackout Games.

Pure routing layer that delegates to the game managers.
Contains no business logic - only request/response handling.
"""

import logging
from flask import jsonify

logger = logging.getLogger(__name__)


def register_api_handlers(app, managers, reap_grace_seconds):
    """
    Register all API route handlers.

    Args:
        app: Flask application instance
        managers: Mapping of namespace -> game manager
        reap_grace_seconds: How long empty rooms survive a cleanup
    """

    @app.route('/')
    def index():
        return "Blackout Games Server is running."

    @app.route('/api/health')
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'message': 'Blackout Games server is running',
            'games': sorted(m.game_name for m in managers.values())
        })

    @app.route('/api/rooms/active')
    def get_active_rooms():
        """Get every room grouped by game."""
        try:
            return jsonify({
                'rooms': {m.game_name: m.get_active_rooms() for m in managers.values()}
            })
        except Exception as e:
            logger.error(f"Error getting active rooms: {e}")
            return jsonify({'error': 'Failed to get rooms'}), 500

    @app.route('/api/rooms/cleanup', methods=['POST'])
    def cleanup_rooms():
        """Reap empty rooms now (admin endpoint)."""
        try:
            cleaned = sum(m.reap_empty_rooms(reap_grace_seconds) for m in managers.values())
            return jsonify({'message': f'Cleaned up {cleaned} empty rooms', 'cleaned': cleaned})
        except Exception as e:
            logger.error(f"Error during cleanup: {e}")
            return jsonify({'error': 'Cleanup failed'}), 500

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        return jsonify({'error': 'Internal server error'}), 500

    logger.info("API handlers registered successfully")
