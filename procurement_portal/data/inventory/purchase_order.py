from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase
from datetime import datetime

PO_TYPE_PURCHASE = 'purchase'
PO_TYPE_OTHER = 'other'
PO_STATUS_DRAFT = 'draft'


class PurchaseOrder(UserCreatedBase):
    """Purchase order header - represents a purchase order document"""
    __tablename__ = 'purchase_orders'

    # Basic Fields
    po_no = db.Column(db.String(100), unique=True, nullable=False)
    supplier_id = db.Column(db.Integer, db.ForeignKey('suppliers.id'), nullable=True)
    supplier_name = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(20), nullable=False, default=PO_TYPE_PURCHASE)  # purchase/other
    status = db.Column(db.String(20), nullable=False, default=PO_STATUS_DRAFT)

    # Dates
    order_date = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    expected_date = db.Column(db.DateTime, nullable=True)

    total_amount = db.Column(db.Float, nullable=False, default=0)

    # Relationships
    supplier = db.relationship('Supplier', back_populates='purchase_orders')
    items = db.relationship('PurchaseOrderItem', back_populates='purchase_order',
                            cascade='all, delete-orphan', order_by='PurchaseOrderItem.id')

    default_includes = ('supplier', 'items', 'items.part')

    def __repr__(self):
        return f'<PurchaseOrder {self.po_no}: {self.supplier_name}>'

    @property
    def lines_total(self):
        """Sum of line totals, independent of the stored total_amount"""
        return sum(item.total_price or 0 for item in self.items)
