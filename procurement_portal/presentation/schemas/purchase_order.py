from datetime import date, datetime
from typing import List, Literal, Optional, Union

from pydantic import Field, field_validator, model_validator

from procurement_portal.data.inventory.purchase_order import PO_STATUS_DRAFT, PO_TYPE_PURCHASE
from procurement_portal.presentation.schemas.base import RequestSchema, to_naive_utc, utcnow


class PurchaseOrderItemIn(RequestSchema):
    part_id: Optional[int] = None
    part_no: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = None
    quantity: Optional[float] = Field(default=None, gt=0)
    unit_price: Optional[float] = Field(default=None, ge=0)
    total_price: Optional[float] = Field(default=None, ge=0)
    uom: Optional[str] = Field(default=None, max_length=50)

    defaults = {'part_no': '', 'quantity': 1, 'unit_price': 0}

    @model_validator(mode='after')
    def _line_total(self):
        if self.total_price is None:
            quantity = self.quantity if self.quantity is not None else self.defaults['quantity']
            unit_price = self.unit_price if self.unit_price is not None else self.defaults['unit_price']
            self.total_price = round(quantity * unit_price, 2)
        return self


class PurchaseOrderCreate(RequestSchema):
    """
    Header plus lines. Supplier name resolution needs the store, so it happens
    in PurchaseOrderFactory; everything else is defaulted here.
    """
    po_no: Optional[str] = Field(default=None, max_length=100)
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = Field(default=None, max_length=200)
    type: Optional[Literal['purchase', 'other']] = None
    status: Optional[str] = Field(default=None, max_length=20)
    order_date: Optional[Union[datetime, date]] = None
    expected_date: Optional[Union[datetime, date]] = None
    total_amount: Optional[float] = Field(default=None, ge=0)
    items: Optional[List[PurchaseOrderItemIn]] = None

    defaults = {
        'type': PO_TYPE_PURCHASE,
        'status': PO_STATUS_DRAFT,
        'order_date': utcnow,
        'total_amount': 0,
        'items': list,
    }

    @field_validator('order_date', 'expected_date')
    @classmethod
    def _naive_utc(cls, value):
        return to_naive_utc(value)

    def header_values(self):
        return self.model_dump(exclude={'items'})

    def item_values(self):
        return [item.values() for item in self.items]
