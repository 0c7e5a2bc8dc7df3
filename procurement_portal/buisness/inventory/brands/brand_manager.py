"""
BrandManager - Business logic for brands

Responsibilities:
- Create brands with a unique, trimmed name
- Partial updates guarded by the same uniqueness rule
- Delete, or deactivate when items still cite the brand
"""

from sqlalchemy.exc import IntegrityError
from procurement_portal import db
from procurement_portal.buisness.core.errors import ConflictError, NotFoundError, is_unique_violation
from procurement_portal.buisness.core.referential_guard import ReferentialGuard
from procurement_portal.data.inventory.brand import Brand, BRAND_STATUS_INACTIVE
from procurement_portal.data.inventory.item import Item
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.buisness.inventory.brands")


def _deactivate(brand):
    brand.status = BRAND_STATUS_INACTIVE


brand_guard = ReferentialGuard(
    Brand,
    count_dependents=lambda brand: Item.query.filter_by(brand_id=brand.id).count(),
    deactivate=_deactivate,
    label='Brand',
)


class BrandManager:
    """Handles all brand business logic"""

    @staticmethod
    def get(brand_id):
        brand = db.session.get(Brand, brand_id)
        if brand is None:
            raise NotFoundError('Brand not found')
        return brand

    @staticmethod
    def _ensure_name_available(name, brand_id=None):
        # Optimistic pre-check; the unique constraint still has the last word
        existing = Brand.query.filter_by(name=name).first()
        if existing and existing.id != brand_id:
            raise ConflictError('Brand already exists' if brand_id is None else 'Brand name already exists')

    @staticmethod
    def create(values, user_id=None):
        """
        Create a brand.

        Args:
            values: dict with ``name`` (already trimmed) and ``status``
            user_id: principal creating the brand

        Raises:
            ConflictError: another brand already has this name
        """
        BrandManager._ensure_name_available(values['name'])

        brand = Brand.from_dict(values, user_id=user_id)
        try:
            db.session.add(brand)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            if is_unique_violation(e):
                logger.info(f"Concurrent insert of brand name '{values['name']}' rejected by the store")
                raise ConflictError('Brand name already exists') from e
            raise
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Created brand {brand.id}: {brand.name}")
        return brand

    @staticmethod
    def update(brand_id, values, user_id=None):
        """
        Apply a partial update. ``values`` holds only the fields the client sent.

        Raises:
            NotFoundError: unknown brand id
            ConflictError: the new name belongs to another brand
        """
        if values.get('name'):
            BrandManager._ensure_name_available(values['name'], brand_id=brand_id)

        brand = BrandManager.get(brand_id)
        brand.update_from_dict(values, user_id=user_id)
        try:
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            if is_unique_violation(e):
                raise ConflictError('Brand name already exists') from e
            raise
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Updated brand {brand.id}: {sorted(values)}")
        return brand

    @staticmethod
    def delete(brand_id, user_id=None):
        """Delete the brand, or mark it inactive when items reference it."""
        return brand_guard.delete_or_deactivate(brand_id, user_id=user_id)
