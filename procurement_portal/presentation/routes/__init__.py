"""
Routes package for the Procurement Portal API
Organized in a tiered structure mirroring the model organization
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException
from procurement_portal.buisness.core.errors import InventoryError
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.routes")

API_PREFIX = '/api'


def init_app(app):
    """Register all route blueprints and JSON error handlers with the Flask app"""
    logger.debug("Initializing route blueprints")

    from .main import main
    from .inventory import brands, parts, purchase_orders, suppliers

    app.register_blueprint(main, url_prefix=API_PREFIX)
    app.register_blueprint(brands.bp, url_prefix=f'{API_PREFIX}/brands')
    app.register_blueprint(parts.bp, url_prefix=f'{API_PREFIX}/parts')
    app.register_blueprint(suppliers.bp, url_prefix=f'{API_PREFIX}/suppliers')
    app.register_blueprint(purchase_orders.bp, url_prefix=f'{API_PREFIX}/purchase-orders')

    @app.errorhandler(InventoryError)
    def handle_inventory_error(error):
        logger.info(f"{type(error).__name__}: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        # 404 for unknown URLs / non-integer ids, 405, 429 from the limiter
        return jsonify({'error': error.name, 'message': error.description}), error.code

    logger.info("Registered API blueprints")
