"""
Brand routes
CRUD for brands; DELETE falls back to deactivation while items cite the brand
"""

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user
from procurement_portal.buisness.core.errors import InventoryError
from procurement_portal.buisness.inventory.brands.brand_manager import BrandManager
from procurement_portal.logger import get_logger
from procurement_portal.presentation.routes.inventory import internal_error
from procurement_portal.presentation.schemas import parse_body
from procurement_portal.presentation.schemas.brand import BrandCreate, BrandUpdate
from procurement_portal.services.inventory.brand_service import BrandService
from procurement_portal.utils.logging_sanitizer import sanitize_value

logger = get_logger("procurement_portal.routes.inventory.brands")
bp = Blueprint('brands', __name__)


@bp.route('', methods=['GET'])
@login_required
def list_brands():
    """List brands, filtered by name substring and status, sorted by name"""
    search = request.args.get('search')
    status = request.args.get('status')
    logger.debug(f"User {current_user.username} listing brands - Search: {search}, Status: {status}")

    try:
        brands = BrandService.build_filtered_query(search=search, status=status).all()
        # brands: plain names for part forms, brandList: full objects for the brands page
        return jsonify({
            'brands': [brand.name for brand in brands],
            'brandList': [brand.to_dict() for brand in brands],
        })
    except Exception as e:
        return internal_error('fetch brands', e)


@bp.route('/<int:brand_id>', methods=['GET'])
@login_required
def get_brand(brand_id):
    try:
        brand = BrandManager.get(brand_id)
        return jsonify({'brand': brand.to_dict()})
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('fetch brand', e)


@bp.route('', methods=['POST'])
@login_required
def create_brand():
    """Create brand (name required, status defaults to A)"""
    logger.debug(f"Create brand request: {sanitize_value(request.get_json(silent=True))}")
    try:
        data = parse_body(BrandCreate)
        brand = BrandManager.create(data.values(), user_id=current_user.id)
        return jsonify({'brand': brand.to_dict()}), 201
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('create brand', e)


@bp.route('/<int:brand_id>', methods=['PUT'])
@login_required
def update_brand(brand_id):
    """Partial update"""
    logger.debug(f"Update brand {brand_id} request: {sanitize_value(request.get_json(silent=True))}")
    try:
        data = parse_body(BrandUpdate)
        brand = BrandManager.update(brand_id, data.values(exclude_unset=True), user_id=current_user.id)
        return jsonify({'brand': brand.to_dict()})
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('update brand', e)


@bp.route('/<int:brand_id>', methods=['DELETE'])
@login_required
def delete_brand(brand_id):
    try:
        result = BrandManager.delete(brand_id, user_id=current_user.id)
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('delete brand', e)

    if result.deactivated:
        return jsonify({
            'brand': result.entity.to_dict(),
            'message': 'Brand marked as inactive because it is in use',
        })
    return jsonify({'message': 'Brand deleted successfully'})
