"""
Request schemas: wire names, defaults and error details
"""

from datetime import datetime

import pytest

from procurement_portal.buisness.core.errors import ValidationError
from procurement_portal.presentation.schemas import parse_body
from procurement_portal.presentation.schemas.brand import BrandCreate
from procurement_portal.presentation.schemas.part import PartUpdate
from procurement_portal.presentation.schemas.purchase_order import PurchaseOrderCreate


def test_purchase_order_defaults():
    data = parse_body(PurchaseOrderCreate, {'supplierName': 'Acme', 'items': [{'quantity': 3, 'unitPrice': 1.1}]})

    header = data.header_values()
    assert header['type'] == 'purchase'
    assert header['status'] == 'draft'
    assert isinstance(header['order_date'], datetime)
    assert header['order_date'].tzinfo is None
    assert header['expected_date'] is None
    assert header['total_amount'] == 0
    assert data.item_values() == [{
        'part_id': None,
        'part_no': '',
        'description': None,
        'quantity': 3,
        'unit_price': 1.1,
        'total_price': 3.3,
        'uom': None,
    }]


def test_null_fields_take_defaults():
    data = parse_body(PurchaseOrderCreate, {'supplierName': 'Acme', 'type': None, 'items': None})

    assert data.type == 'purchase'
    assert data.items == []


def test_timezone_aware_dates_become_naive_utc():
    data = parse_body(PurchaseOrderCreate, {'supplierName': 'Acme', 'orderDate': '2024-03-01T12:00:00+02:00'})

    assert data.order_date == datetime(2024, 3, 1, 10, 0)


def test_read_only_fields_are_stripped():
    data = parse_body(BrandCreate, {'id': 7, 'createdAt': 'x', 'name': 'Bosch'})

    assert data.values() == {'name': 'Bosch', 'status': 'A'}


def test_errors_list_every_failing_field():
    with pytest.raises(ValidationError) as excinfo:
        parse_body(PurchaseOrderCreate, {'type': 'lease', 'totalAmount': -5})

    fields = sorted(detail['field'] for detail in excinfo.value.details)
    assert fields == ['totalAmount', 'type']
    assert excinfo.value.status_code == 400


def test_part_update_null_clears_column():
    data = parse_body(PartUpdate, {'category': None, 'models': []})

    assert data.part_values() == {'category': None}
    assert data.model_values() == []
