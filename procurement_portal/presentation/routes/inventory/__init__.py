"""
Inventory API routes
"""

from flask import jsonify
from procurement_portal import db
from procurement_portal.logger import get_logger
from procurement_portal.utils.logging_sanitizer import sanitize_exception_message

logger = get_logger("procurement_portal.routes.inventory")


def internal_error(action, error):
    """
    Roll back, log with traceback and answer 500.

    Args:
        action: what failed, e.g. "create brand"
        error: the unexpected exception
    """
    db.session.rollback()
    logger.error(f"Error trying to {action}: {error}", exc_info=True)
    return jsonify({
        'error': f'Failed to {action}',
        'message': sanitize_exception_message(error),
    }), 500
