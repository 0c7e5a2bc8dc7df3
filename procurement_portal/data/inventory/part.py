from procurement_portal import db
from procurement_portal.data.core.user_created_base import UserCreatedBase

# this class defines a catalogue part; model mappings and stock hang off it
# and are owned by it (deleted with it)


class Part(UserCreatedBase):
    __tablename__ = 'parts'

    part_no = db.Column(db.String(100), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=True)
    category = db.Column(db.String(100), nullable=True)
    uom = db.Column(db.String(50), nullable=True)
    unit_price = db.Column(db.Float, nullable=True)
    status = db.Column(db.String(20), default='Active')  # Active/Inactive

    # Relationships
    models = db.relationship('PartModel', back_populates='part',
                             cascade='all, delete-orphan', order_by='PartModel.id')
    stock = db.relationship('Stock', back_populates='part',
                            cascade='all, delete-orphan', order_by='Stock.id')
    # Order lines keep their part_no text; part_id is nulled when the part goes away
    purchase_order_items = db.relationship('PurchaseOrderItem', back_populates='part')

    default_includes = ('models', 'stock')

    def __repr__(self):
        return f'<Part {self.part_no}>'
