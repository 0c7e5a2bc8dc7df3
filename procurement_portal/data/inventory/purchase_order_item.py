from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase


class PurchaseOrderItem(UserCreatedBase):
    """Individual line items within a purchase order"""
    __tablename__ = 'purchase_order_items'

    # Foreign Keys
    purchase_order_id = db.Column(db.Integer, db.ForeignKey('purchase_orders.id', ondelete='CASCADE'),
                                  nullable=False, index=True)
    part_id = db.Column(db.Integer, db.ForeignKey('parts.id', ondelete='SET NULL'), nullable=True)

    # Line Details
    part_no = db.Column(db.String(100), nullable=False, default='')
    description = db.Column(db.Text, nullable=True)
    quantity = db.Column(db.Float, nullable=False, default=1)
    unit_price = db.Column(db.Float, nullable=False, default=0)
    total_price = db.Column(db.Float, nullable=False, default=0)
    uom = db.Column(db.String(50), nullable=True)

    # Relationships
    purchase_order = db.relationship('PurchaseOrder', back_populates='items')
    part = db.relationship('Part', back_populates='purchase_order_items')

    def __repr__(self):
        return f'<PurchaseOrderItem {self.id}: {self.part_no} x{self.quantity}>'
