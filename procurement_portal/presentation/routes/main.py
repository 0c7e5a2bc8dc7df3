"""
Unauthenticated service routes
"""

from flask import Blueprint, jsonify
from procurement_portal import limiter

main = Blueprint('main', __name__)


@main.route('/health')
@limiter.exempt
def health():
    """Liveness probe"""
    return jsonify({'status': 'ok'})
