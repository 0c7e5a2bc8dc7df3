from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase

DEFAULT_MODEL_TAB = 'P1'


class PartModel(UserCreatedBase):
    """Model number that uses a part, and how many of it"""
    __tablename__ = 'part_models'

    part_id = db.Column(db.Integer, db.ForeignKey('parts.id', ondelete='CASCADE'), nullable=False, index=True)
    model_no = db.Column(db.String(100), nullable=False)
    qty_used = db.Column(db.Float, nullable=False, default=1)
    tab = db.Column(db.String(20), nullable=False, default=DEFAULT_MODEL_TAB)

    part = db.relationship('Part', back_populates='models')

    def __repr__(self):
        return f'<PartModel {self.model_no} x{self.qty_used} ({self.tab})>'
