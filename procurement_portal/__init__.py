from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os
from procurement_portal.logger import get_logger

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://"  # Use Redis in production for distributed systems
)


def _env_flag(name, default='False'):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def create_app(config_overrides=None):
    """
    Build the Flask application.

    Configuration is read from the environment (see generate_env.py);
    ``config_overrides`` is applied last and is how tests inject settings.
    """
    from pathlib import Path

    app = Flask(__name__)

    logger = get_logger("procurement_portal")
    logger.info("Initializing Flask application")

    overrides = dict(config_overrides or {})

    # SECURITY: Require SECRET_KEY - no fallback
    app.config['SECRET_KEY'] = overrides.get('SECRET_KEY') or os.environ.get('SECRET_KEY')
    if not app.config['SECRET_KEY']:
        logger.critical("SECRET_KEY not set in environment! Application cannot start.")
        raise RuntimeError("SECRET_KEY environment variable is required")

    # Prefer an explicit DATABASE_URL; otherwise keep the SQLite file inside instance/
    db_env = os.environ.get('DATABASE_URL')
    if db_env:
        app.config['SQLALCHEMY_DATABASE_URI'] = db_env
    else:
        instance_dir = Path(__file__).parent.parent / 'instance'
        instance_dir.mkdir(parents=True, exist_ok=True)
        default_db_path = instance_dir / 'procurement_portal.db'
        app.config['SQLALCHEMY_DATABASE_URI'] = f"sqlite:///{str(default_db_path.resolve())}"

    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['JSON_SORT_KEYS'] = False

    # Bearer tokens are valid for TOKEN_MAX_AGE seconds (default: 24 hours)
    app.config['TOKEN_MAX_AGE'] = int(os.environ.get('TOKEN_MAX_AGE', '86400'))

    # Rate limiting
    app.config['RATELIMIT_DEFAULT'] = os.environ.get('RATELIMIT_DEFAULT', '200 per day;50 per hour')
    app.config['RATELIMIT_ENABLED'] = _env_flag('RATELIMIT_ENABLED', 'True')

    # Bootstrap principal, see build.insert_critical_data
    app.config['ADMIN_USERNAME'] = os.environ.get('ADMIN_USERNAME', 'admin')
    app.config['ADMIN_EMAIL'] = os.environ.get('ADMIN_EMAIL', 'admin@example.com')
    app.config['ADMIN_PASSWORD'] = os.environ.get('ADMIN_PASSWORD')

    app.config.update(overrides)

    logger.debug(f"Database configured: {app.config['SQLALCHEMY_DATABASE_URI'].split(':', 1)[0]}")

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    limiter.init_app(app)

    logger.debug("Extensions initialized")

    # Import models to ensure they're registered with SQLAlchemy
    from procurement_portal.data.core.user_info.user import User
    from procurement_portal.data.inventory import (
        Brand, Item, Supplier, Part, PartModel, Stock, PurchaseOrder, PurchaseOrderItem
    )

    logger.debug("Models imported and registered")

    from procurement_portal.auth import init_app as init_auth
    from procurement_portal.presentation.routes import init_app as init_routes

    init_auth(app)
    init_routes(app)

    @app.cli.command('build-db')
    def build_db_command():
        """Create tables and insert critical data."""
        from procurement_portal.build import build_database
        build_database(enable_debug_data=False)

    logger.info("Flask application initialization complete")

    return app
