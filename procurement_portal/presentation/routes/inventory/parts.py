"""
Part routes
Parts are written together with their model mappings; PUT replaces the
mapping set, DELETE removes the part with its mappings and stock.
"""

from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user
from procurement_portal.buisness.core.errors import InventoryError
from procurement_portal.buisness.inventory.parts.part_manager import PartManager
from procurement_portal.logger import get_logger
from procurement_portal.presentation.routes.inventory import internal_error
from procurement_portal.presentation.schemas import parse_body
from procurement_portal.presentation.schemas.part import PartCreate, PartUpdate
from procurement_portal.services.inventory.part_service import PartService
from procurement_portal.utils.logging_sanitizer import sanitize_value

logger = get_logger("procurement_portal.routes.inventory.parts")
bp = Blueprint('parts', __name__)


@bp.route('', methods=['GET'])
@login_required
def list_parts():
    search = request.args.get('search')
    category = request.args.get('category')
    try:
        parts = PartService.build_filtered_query(search=search, category=category).all()
        logger.debug(f"Parts list returned {len(parts)} parts")
        return jsonify({'parts': [part.to_dict() for part in parts]})
    except Exception as e:
        return internal_error('fetch parts', e)


@bp.route('', methods=['POST'])
@login_required
def create_part():
    logger.debug(f"Create part request: {sanitize_value(request.get_json(silent=True))}")
    try:
        data = parse_body(PartCreate)
        part = PartManager.create(data.part_values(), data.model_values(), user_id=current_user.id)
        return jsonify({'part': part.to_dict()}), 201
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('create part', e)


@bp.route('/<int:part_id>', methods=['GET'])
@login_required
def get_part(part_id):
    try:
        part = PartManager.get(part_id)
        return jsonify({'part': part.to_dict()})
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('fetch part', e)


@bp.route('/<int:part_id>', methods=['PUT'])
@login_required
def update_part(part_id):
    """Update part fields and replace its model mappings"""
    logger.debug(f"Update part {part_id} request: {sanitize_value(request.get_json(silent=True))}")
    try:
        data = parse_body(PartUpdate)
        part = PartManager.update_with_models(
            part_id, data.part_values(), data.model_values(), user_id=current_user.id
        )
        return jsonify({'part': part.to_dict()})
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('update part', e)


@bp.route('/<int:part_id>', methods=['DELETE'])
@login_required
def delete_part(part_id):
    try:
        PartManager.delete(part_id)
        return jsonify({'message': 'Part deleted successfully'})
    except InventoryError:
        raise
    except Exception as e:
        return internal_error('delete part', e)
