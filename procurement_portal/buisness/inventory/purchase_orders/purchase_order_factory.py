from __future__ import annotations

from datetime import date
from uuid import uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from procurement_portal import db
from procurement_portal.buisness.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    is_unique_violation,
)
from procurement_portal.data.inventory.part import Part
from procurement_portal.data.inventory.purchase_order import PurchaseOrder
from procurement_portal.data.inventory.purchase_order_item import PurchaseOrderItem
from procurement_portal.data.inventory.supplier import Supplier
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.buisness.inventory.purchase_orders.factory")


def hydrated_query():
    """PurchaseOrder query with supplier, items and each item's part loaded"""
    return PurchaseOrder.query.options(
        selectinload(PurchaseOrder.supplier),
        selectinload(PurchaseOrder.items).selectinload(PurchaseOrderItem.part),
    )


class PurchaseOrderFactory:
    """
    Creates purchase orders with their lines as one unit of work.

    Header and lines are flushed inside a single transaction; any failure
    rolls the whole order back, so either every row exists afterwards or none.
    """

    @staticmethod
    def _generate_po_number() -> str:
        # stable, unique, human-readable identifier
        return f"PO-{date.today().isoformat()}-{uuid4().hex[:8].upper()}"

    @staticmethod
    def resolve_supplier_name(supplier_id: int | None, supplier_name: str | None) -> str:
        """
        An explicit name wins; otherwise the referenced supplier's name is used.

        Raises:
            ValidationError: no non-empty name could be resolved, or a name was
                given alongside a supplierId that does not exist
        """
        supplier = db.session.get(Supplier, supplier_id) if supplier_id is not None else None

        if supplier_name:
            if supplier_id is not None and supplier is None:
                raise ValidationError.from_fields([{'field': 'supplierId', 'message': 'Supplier not found'}])
            return supplier_name

        if supplier is not None and supplier.name:
            return supplier.name

        raise ValidationError('Supplier name is required')

    @staticmethod
    def _check_parts_exist(items: list[dict]) -> None:
        part_ids = {item['part_id'] for item in items if item.get('part_id') is not None}
        if not part_ids:
            return
        found = {pid for (pid,) in db.session.query(Part.id).filter(Part.id.in_(part_ids))}
        details = [
            {'field': f'items.{index}.partId', 'message': 'Part not found'}
            for index, item in enumerate(items)
            if item.get('part_id') is not None and item['part_id'] not in found
        ]
        if details:
            raise ValidationError.from_fields(details)

    @staticmethod
    def get(purchase_order_id: int) -> PurchaseOrder:
        purchase_order = hydrated_query().filter(PurchaseOrder.id == purchase_order_id).first()
        if purchase_order is None:
            raise NotFoundError('Purchase order not found')
        return purchase_order

    @staticmethod
    def create(header: dict, items: list[dict], created_by_id: int | None = None) -> PurchaseOrder:
        """
        Create a purchase order and its lines.

        Args:
            header: header values with defaults already applied (type, status,
                order_date, total_amount); ``supplier_name`` may be empty
            items: line values with defaults already applied
            created_by_id: principal creating the order

        Returns:
            The persisted order with supplier, items and parts loaded

        Raises:
            ValidationError: supplier name unresolvable, unknown part reference
            ConflictError: duplicate order number
        """
        header = dict(header)
        # Validation happens before anything is written
        header['supplier_name'] = PurchaseOrderFactory.resolve_supplier_name(
            header.get('supplier_id'), header.get('supplier_name')
        )
        PurchaseOrderFactory._check_parts_exist(items)
        if not header.get('po_no'):
            header['po_no'] = PurchaseOrderFactory._generate_po_number()

        try:
            po = PurchaseOrder.from_dict(header, user_id=created_by_id)
            db.session.add(po)
            db.session.flush()
            logger.info(f"Created PO header - ID: {po.id}, PO Number: {po.po_no}, Supplier: {po.supplier_name}")

            for line_number, values in enumerate(items, start=1):
                line = PurchaseOrderItem.from_dict(dict(values, purchase_order_id=po.id), user_id=created_by_id)
                db.session.add(line)
                db.session.flush()
                logger.debug(f"  PO Line {line_number}: Part {line.part_id} ({line.part_no}), Qty {line.quantity}, Price {line.unit_price}")

            db.session.commit()
        except IntegrityError as e:
            db.session.rollback()
            if is_unique_violation(e):
                raise ConflictError('Purchase order number already exists') from e
            raise
        except Exception:
            db.session.rollback()
            logger.warning("Purchase order creation rolled back")
            raise

        logger.info(f"PO {po.id} ({po.po_no}) created with {len(items)} lines, status: {po.status}")
        return PurchaseOrderFactory.get(po.id)
