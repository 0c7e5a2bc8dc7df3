"""
Supplier routes
"""

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user
from procurement_portal.buisness.core.errors import InventoryError
from procurement_portal.buisness.inventory.suppliers.supplier_manager import SupplierManager
from procurement_portal.logger import get_logger
from procurement_portal.presentation.routes.inventory import internal_error
from procurement_portal.presentation.schemas import parse_body
from procurement_portal.presentation.schemas.supplier import SupplierCreate
from procurement_portal.services.inventory.supplier_service import SupplierService

logger = get_logger("procurement_portal.routes.inventory.suppliers")
bp = Blueprint('suppliers', __name__)


@bp.route('', methods=['GET'])
@login_required
def list_suppliers():
    try:
        suppliers = SupplierService.build_filtered_query(search=request.args.get('search')).all()
        return jsonify({'suppliers': [supplier.to_dict() for supplier in suppliers]})
    except Exception as e:
        return internal_error('fetch suppliers', e)


@bp.route('/<int:supplier_id>', methods=['GET'])
@login_required
def get_supplier(supplier_id):
    try:
        supplier = SupplierManager.get(supplier_id)
        return jsonify({'supplier': supplier.to_dict()})
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('fetch supplier', e)


@bp.route('', methods=['POST'])
@login_required
def create_supplier():
    try:
        data = parse_body(SupplierCreate)
        supplier = SupplierManager.create(data.values(), user_id=current_user.id)
        return jsonify({'supplier': supplier.to_dict()}), 201
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('create supplier', e)
