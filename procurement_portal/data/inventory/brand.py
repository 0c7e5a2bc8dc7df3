from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase

BRAND_STATUS_ACTIVE = 'A'
BRAND_STATUS_INACTIVE = 'I'


class Brand(UserCreatedBase):
    """Manufacturer brand that catalogue items cite"""
    __tablename__ = 'brands'

    name = db.Column(db.String(200), unique=True, nullable=False)
    status = db.Column(db.String(1), nullable=False, default=BRAND_STATUS_ACTIVE)  # A/I

    # Relationships
    items = db.relationship('Item', back_populates='brand', lazy='dynamic')

    def __repr__(self):
        return f'<Brand {self.id}: {self.name} ({self.status})>'
