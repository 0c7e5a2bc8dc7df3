"""
Purchase Order Service
Query building for purchase order list views.
"""

from typing import Optional
from procurement_portal.buisness.inventory.purchase_orders.purchase_order_factory import hydrated_query
from procurement_portal.data.inventory.purchase_order import PurchaseOrder


class PurchaseOrderService:

    @staticmethod
    def build_filtered_query(po_type: Optional[str] = None, status: Optional[str] = None):
        """
        Orders with supplier, items and item parts eager-loaded, newest first.

        Args:
            po_type: purchase/other
            status: exact status label
        """
        query = hydrated_query()

        if po_type:
            query = query.filter(PurchaseOrder.type == po_type)

        if status:
            query = query.filter(PurchaseOrder.status == status)

        return query.order_by(PurchaseOrder.created_at.desc(), PurchaseOrder.id.desc())
