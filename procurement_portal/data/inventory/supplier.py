from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase


class Supplier(UserCreatedBase):
    __tablename__ = 'suppliers'

    name = db.Column(db.String(200), nullable=False)
    contact_person = db.Column(db.String(200), nullable=True)
    email = db.Column(db.String(200), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    address = db.Column(db.Text, nullable=True)

    purchase_orders = db.relationship('PurchaseOrder', back_populates='supplier', lazy='dynamic')

    def __repr__(self):
        return f'<Supplier {self.id}: {self.name}>'
