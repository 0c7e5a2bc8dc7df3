from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase


class Item(UserCreatedBase):
    """Catalogue item; the dependent that keeps a brand from being hard-deleted"""
    __tablename__ = 'items'

    item_no = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)
    brand_id = db.Column(db.Integer, db.ForeignKey('brands.id'), nullable=True)

    brand = db.relationship('Brand', back_populates='items')

    def __repr__(self):
        return f'<Item {self.item_no}>'
