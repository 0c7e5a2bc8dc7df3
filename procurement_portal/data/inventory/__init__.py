"""Inventory models - CRUD only, no business logic"""

from procurement_portal.data.inventory.brand import Brand
from procurement_portal.data.inventory.item import Item
from procurement_portal.data.inventory.supplier import Supplier
from procurement_portal.data.inventory.part import Part
from procurement_portal.data.inventory.part_model import PartModel
from procurement_portal.data.inventory.stock import Stock
from procurement_portal.data.inventory.purchase_order import PurchaseOrder
from procurement_portal.data.inventory.purchase_order_item import PurchaseOrderItem

__all__ = [
    'Brand',
    'Item',
    'Supplier',
    'Part',
    'PartModel',
    'Stock',
    'PurchaseOrder',
    'PurchaseOrderItem',
]
