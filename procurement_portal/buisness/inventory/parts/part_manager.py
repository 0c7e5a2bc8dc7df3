"""
PartManager - Business logic for parts and their model mappings

A part owns its model mappings and stock rows. Mappings are replaced as a
set on update (delete all, insert the new list) inside one transaction.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from procurement_portal import db
from procurement_portal.buisness.core.errors import ConflictError, NotFoundError, is_unique_violation
from procurement_portal.data.inventory.part import Part
from procurement_portal.data.inventory.part_model import PartModel
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.buisness.inventory.parts")


class PartManager:
    """Handles all part business logic"""

    @staticmethod
    def get(part_id):
        """Load a part with models and stock, or raise NotFoundError"""
        part = (
            Part.query
            .options(selectinload(Part.models), selectinload(Part.stock))
            .filter(Part.id == part_id)
            .first()
        )
        if part is None:
            raise NotFoundError('Part not found')
        return part

    @staticmethod
    def _ensure_part_no_available(part_no, part_id=None):
        existing = Part.query.filter_by(part_no=part_no).first()
        if existing and existing.id != part_id:
            raise ConflictError('Part number already exists')

    @staticmethod
    def _add_models(part_id, models, user_id):
        for values in models:
            db.session.add(PartModel.from_dict(dict(values, part_id=part_id), user_id=user_id))

    @staticmethod
    def create(values, models, user_id=None):
        """
        Create a part together with its model mappings.

        Args:
            values: column values for the part
            models: list of dicts with model_no, qty_used, tab
            user_id: principal creating the part

        Raises:
            ConflictError: ``part_no`` is taken, found by the pre-check or by
                the unique constraint when a concurrent insert wins
        """
        PartManager._ensure_part_no_available(values['part_no'])

        try:
            part = Part.from_dict(values, user_id=user_id)
            db.session.add(part)
            db.session.flush()
            PartManager._add_models(part.id, models, user_id)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            if is_unique_violation(e):
                raise ConflictError('Part number already exists') from e
            raise
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Created part {part.id} ({part.part_no}) with {len(models)} model mapping(s)")
        return PartManager.get(part.id)

    @staticmethod
    def update_with_models(part_id, values, models, user_id=None):
        """
        Update a part's own fields and replace its model mappings.

        The mapping set after the call is exactly ``models``; anything not in
        the list is removed. The part row is locked (SELECT ... FOR UPDATE where
        the backend supports it) and nothing is committed until the inserts
        are flushed, so other transactions see either the old set or the new.

        Raises:
            NotFoundError: unknown part id
            ConflictError: ``part_no`` belongs to another part
        """
        if values.get('part_no'):
            PartManager._ensure_part_no_available(values['part_no'], part_id=part_id)

        try:
            part = (
                db.session.query(Part)
                .filter(Part.id == part_id)
                .with_for_update()
                .first()
            )
            if part is None:
                raise NotFoundError('Part not found')

            part.update_from_dict(values, user_id=user_id)

            # the bulk delete autoflushes the part's own changes first
            removed = PartModel.query.filter_by(part_id=part_id).delete(synchronize_session=False)
            PartManager._add_models(part_id, models, user_id)
            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            if is_unique_violation(e):
                raise ConflictError('Part number already exists') from e
            raise
        except Exception:
            db.session.rollback()
            raise

        logger.info(f"Updated part {part_id}: replaced {removed} model mapping(s) with {len(models)}")
        return PartManager.get(part_id)

    @staticmethod
    def delete(part_id):
        """
        Hard-delete a part. Model mappings and stock go with it; purchase
        order lines keep their part number text and lose the reference.
        """
        part = db.session.get(Part, part_id)
        if part is None:
            raise NotFoundError('Part not found')
        part_no = part.part_no

        try:
            db.session.delete(part)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info(f"Deleted part {part_id} ({part_no})")
