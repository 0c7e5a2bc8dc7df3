"""
Bearer-token principal for the API.

Tokens are issued out of band (``flask issue-token <username>``) and verified
here on every request through Flask-Login's request loader.
"""

import click
from flask import current_app, jsonify, request
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from procurement_portal import db, login_manager
from procurement_portal.data.core.user_info.user import User
from procurement_portal.logger import get_logger
from procurement_portal.utils.logging_sanitizer import sanitize_headers

logger = get_logger("procurement_portal.auth")

TOKEN_SALT = 'procurement-portal-api-token'


def _serializer():
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt=TOKEN_SALT)


def issue_token(user):
    """Sign a bearer token for ``user``."""
    return _serializer().dumps({'uid': user.id})


def verify_token(token):
    """
    Return the user id carried by ``token``, or None when the token is
    malformed, tampered with or older than TOKEN_MAX_AGE.
    """
    try:
        payload = _serializer().loads(token, max_age=current_app.config['TOKEN_MAX_AGE'])
    except SignatureExpired:
        logger.info("Rejected expired bearer token")
        return None
    except BadSignature:
        logger.warning("Rejected bearer token with bad signature")
        return None
    if not isinstance(payload, dict):
        return None
    return payload.get('uid')


def _bearer_token(request):
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


@login_manager.request_loader
def load_user_from_request(request):
    token = _bearer_token(request)
    if token is None:
        return None

    user_id = verify_token(token)
    if user_id is None:
        return None

    user = db.session.get(User, user_id)
    if user is None or not user.is_active:
        logger.warning(f"Bearer token for unknown or disabled user id {user_id}")
        return None
    return user


@login_manager.unauthorized_handler
def unauthorized():
    logger.debug(f"Unauthorized {request.method} {request.path} - Headers: {sanitize_headers(request.headers)}")
    return jsonify({'error': 'Unauthorized'}), 401


def init_app(app):
    """Register auth CLI commands"""

    @app.cli.command('issue-token')
    @click.argument('username')
    def issue_token_command(username):
        """Print a bearer token for USERNAME."""
        user = User.query.filter_by(username=username).first()
        if user is None or not user.is_active:
            raise click.ClickException(f"No active user named {username!r}")
        click.echo(issue_token(user))
        logger.info(f"Issued API token for user: {username}")
