#!/usr/bin/env python3
"""
Debug Data Manager
Inserts sample brands, items, suppliers, parts and purchase orders

Handles:
- Loading debug data JSON files
- Checking if data is already present
- Inserting through the buisness layer so defaults and validation apply
- Fail-fast error handling
"""

from pathlib import Path
import json
from procurement_portal import db
from procurement_portal.logger import get_logger

logger = get_logger("procurement_portal.debug_data_manager")

DEBUG_DATA_FILE = Path(__file__).parent / 'data' / 'inventory.json'


def _load_debug_data_file(path=DEBUG_DATA_FILE):
    if not path.exists():
        return None
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _check_debug_data_present(debug_data):
    from procurement_portal.data.inventory.brand import Brand
    names = [brand['name'] for brand in debug_data.get('Brands', [])]
    if not names:
        return False
    return Brand.query.filter(Brand.name.in_(names)).count() == len(names)


def insert_debug_data(user_id, enabled=True):
    """
    Insert the sample inventory data set.

    Args:
        user_id (int): principal recorded in the audit fields
        enabled (bool): Whether to insert debug data (default: True)

    Returns:
        dict: Summary of inserted rows per section

    Raises:
        Exception: If any insertion fails (fail-fast)
    """
    if not enabled:
        logger.info("Debug data insertion is disabled")
        return {}

    debug_data = _load_debug_data_file()
    if not debug_data:
        logger.info("No debug data file found, skipping")
        return {}

    if _check_debug_data_present(debug_data):
        logger.info("Debug data already present, skipping")
        return {}

    from procurement_portal.buisness.inventory.brands.brand_manager import BrandManager
    from procurement_portal.buisness.inventory.parts.part_manager import PartManager
    from procurement_portal.buisness.inventory.purchase_orders.purchase_order_factory import PurchaseOrderFactory
    from procurement_portal.buisness.inventory.suppliers.supplier_manager import SupplierManager
    from procurement_portal.data.inventory import Item, Stock

    summary = {}

    brands = {}
    for values in debug_data.get('Brands', []):
        brands[values['name']] = BrandManager.create(values, user_id=user_id)
    summary['brands'] = len(brands)

    for values in debug_data.get('Items', []):
        values = dict(values)
        brand = brands.get(values.pop('brand', None))
        db.session.add(Item.from_dict(dict(values, brand_id=brand.id if brand else None), user_id=user_id))
    db.session.commit()
    summary['items'] = len(debug_data.get('Items', []))

    suppliers = {}
    for values in debug_data.get('Suppliers', []):
        suppliers[values['name']] = SupplierManager.create(values, user_id=user_id)
    summary['suppliers'] = len(suppliers)

    parts = {}
    for values in debug_data.get('Parts', []):
        values = dict(values)
        models = values.pop('models', [])
        stock = values.pop('stock', [])
        part = PartManager.create(values, models, user_id=user_id)
        for stock_values in stock:
            db.session.add(Stock.from_dict(dict(stock_values, part_id=part.id), user_id=user_id))
        db.session.commit()
        parts[part.part_no] = part
    summary['parts'] = len(parts)

    orders = 0
    for values in debug_data.get('Purchase_Orders', []):
        values = dict(values)
        supplier = suppliers.get(values.pop('supplier', None))
        items = [
            dict(item, part_id=parts[item['part_no']].id if item.get('part_no') in parts else None)
            for item in values.pop('items', [])
        ]
        values['supplier_id'] = supplier.id if supplier else None
        PurchaseOrderFactory.create(values, items, created_by_id=user_id)
        orders += 1
    summary['purchase_orders'] = orders

    logger.info(f"Debug data inserted: {summary}")
    return summary
