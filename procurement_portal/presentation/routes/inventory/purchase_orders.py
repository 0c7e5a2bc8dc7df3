"""
Purchase order routes
"""

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user
from procurement_portal.buisness.core.errors import InventoryError
from procurement_portal.buisness.inventory.purchase_orders.purchase_order_factory import PurchaseOrderFactory
from procurement_portal.logger import get_logger
from procurement_portal.presentation.routes.inventory import internal_error
from procurement_portal.presentation.schemas import parse_body
from procurement_portal.presentation.schemas.purchase_order import PurchaseOrderCreate
from procurement_portal.services.inventory.purchase_order_service import PurchaseOrderService
from procurement_portal.utils.logging_sanitizer import sanitize_value

logger = get_logger("procurement_portal.routes.inventory.purchase_orders")
bp = Blueprint('purchase_orders', __name__)


@bp.route('', methods=['GET'])
@login_required
def list_purchase_orders():
    """List orders (filter by type and status), newest first"""
    po_type = request.args.get('type')
    status = request.args.get('status')
    try:
        purchase_orders = PurchaseOrderService.build_filtered_query(po_type=po_type, status=status).all()
        logger.debug(f"Purchase order list returned {len(purchase_orders)} orders - Type: {po_type}, Status: {status}")
        return jsonify({'purchaseOrders': [po.to_dict() for po in purchase_orders]})
    except Exception as e:
        return internal_error('fetch purchase orders', e)


@bp.route('/<int:purchase_order_id>', methods=['GET'])
@login_required
def get_purchase_order(purchase_order_id):
    try:
        purchase_order = PurchaseOrderFactory.get(purchase_order_id)
        return jsonify({'purchaseOrder': purchase_order.to_dict()})
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('fetch purchase order', e)


@bp.route('', methods=['POST'])
@login_required
def create_purchase_order():
    logger.debug(f"Create purchase order request: {sanitize_value(request.get_json(silent=True))}")
    try:
        data = parse_body(PurchaseOrderCreate)
        purchase_order = PurchaseOrderFactory.create(
            data.header_values(), data.item_values(), created_by_id=current_user.id
        )
        return jsonify({'purchaseOrder': purchase_order.to_dict()}), 201
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('create purchase order', e)
