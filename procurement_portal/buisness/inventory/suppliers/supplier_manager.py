from procurement_portal import db
from procurement_portal.buisness.core.errors import NotFoundError
from procurement_portal.data.inventory.supplier import Supplier
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.buisness.inventory.suppliers")


class SupplierManager:
    """Handles supplier creation and lookup"""

    @staticmethod
    def get(supplier_id):
        supplier = db.session.get(Supplier, supplier_id)
        if supplier is None:
            raise NotFoundError('Supplier not found')
        return supplier

    @staticmethod
    def create(values, user_id=None):
        supplier = Supplier.from_dict(values, user_id=user_id)
        try:
            db.session.add(supplier)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.info(f"Created supplier {supplier.id}: {supplier.name}")
        return supplier
