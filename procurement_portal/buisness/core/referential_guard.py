"""
Referential guard: a delete that turns into a deactivation when other rows
still reference the target.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from procurement_portal import db
from procurement_portal.buisness.core.errors import NotFoundError
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.buisness.core.referential_guard")

DELETED = 'deleted'
DEACTIVATED = 'deactivated'


@dataclass
class DeleteOutcome:
    outcome: str
    entity: Optional[Any] = None
    dependents: int = 0

    @property
    def deleted(self) -> bool:
        return self.outcome == DELETED

    @property
    def deactivated(self) -> bool:
        return self.outcome == DEACTIVATED


class ReferentialGuard:
    """
    Guarded delete for one model.

    Args:
        model: SQLAlchemy model class of the entity being deleted
        count_dependents: callable(entity) -> number of rows referencing it
        deactivate: callable(entity) that flips the entity to its inactive state
        label: human name used in NotFound messages ("Brand")
    """

    def __init__(self, model, count_dependents: Callable[[Any], int],
                 deactivate: Callable[[Any], None], label: str = None):
        self.model = model
        self.count_dependents = count_dependents
        self.deactivate = deactivate
        self.label = label or model.__name__

    def delete_or_deactivate(self, entity_id, user_id=None) -> DeleteOutcome:
        """
        Hard-delete the entity when nothing references it, otherwise deactivate it.

        The row is locked for the duration of the check so a dependent cannot
        appear between the count and the delete on backends that honour
        SELECT ... FOR UPDATE. Commits on success, rolls back on failure.

        Raises:
            NotFoundError: the entity does not exist
        """
        try:
            entity = (
                db.session.query(self.model)
                .filter(self.model.id == entity_id)
                .with_for_update()
                .first()
            )
            if entity is None:
                raise NotFoundError(f"{self.label} not found")

            dependents = self.count_dependents(entity)
            if dependents > 0:
                self.deactivate(entity)
                if user_id is not None and hasattr(entity, 'updated_by_id'):
                    entity.updated_by_id = user_id
                db.session.commit()
                logger.info(f"{self.label} {entity_id} deactivated, {dependents} dependent(s) still reference it")
                return DeleteOutcome(DEACTIVATED, entity, dependents)

            db.session.delete(entity)
            db.session.commit()
            logger.info(f"{self.label} {entity_id} deleted")
            return DeleteOutcome(DELETED)
        except Exception:
            db.session.rollback()
            raise
