from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase


class Stock(UserCreatedBase):
    """Quantity of a part held at a location"""
    __tablename__ = 'stock'

    part_id = db.Column(db.Integer, db.ForeignKey('parts.id', ondelete='CASCADE'), nullable=False, index=True)
    location = db.Column(db.String(200), nullable=True)
    quantity = db.Column(db.Float, nullable=False, default=0)

    part = db.relationship('Part', back_populates='stock')

    def __repr__(self):
        return f'<Stock part={self.part_id} @ {self.location}: {self.quantity}>'
