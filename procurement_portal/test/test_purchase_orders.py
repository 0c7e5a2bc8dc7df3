"""
Purchase order creation: supplier name resolution, defaults and atomicity
"""

import pytest
from sqlalchemy import event

from procurement_portal.data.inventory import PurchaseOrder, PurchaseOrderItem
from procurement_portal.test.conftest import make_part, make_supplier


def _counts():
    return PurchaseOrder.query.count(), PurchaseOrderItem.query.count()


@pytest.fixture
def fail_on_second_item():
    """Make the store reject the second order line inserted."""
    calls = []

    def before_insert(mapper, connection, target):
        calls.append(target)
        if len(calls) == 2:
            raise RuntimeError('simulated store failure')

    event.listen(PurchaseOrderItem, 'before_insert', before_insert)
    yield calls
    event.remove(PurchaseOrderItem, 'before_insert', before_insert)


def test_create_without_supplier_is_rejected(client, auth_headers, db):
    payload = {'items': [{'partNo': 'P-100', 'quantity': 2, 'unitPrice': 5}]}

    response = client.post('/api/purchase-orders', json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Supplier name is required'
    assert _counts() == (0, 0)


def test_blank_supplier_name_is_rejected(client, auth_headers, db):
    response = client.post('/api/purchase-orders', json={'supplierName': '   '}, headers=auth_headers)

    assert response.status_code == 400
    assert _counts() == (0, 0)


def test_supplier_name_resolved_from_supplier_id(client, auth_headers, db):
    supplier = make_supplier('Acme Supplies')

    response = client.post('/api/purchase-orders', json={'supplierId': supplier.id}, headers=auth_headers)

    assert response.status_code == 201
    order = response.get_json()['purchaseOrder']
    assert order['supplierName'] == 'Acme Supplies'
    assert order['supplierId'] == supplier.id
    assert order['supplier']['name'] == 'Acme Supplies'
    db.session.expire_all()
    assert PurchaseOrder.query.one().supplier_name == 'Acme Supplies'


def test_explicit_supplier_name_wins(client, auth_headers):
    supplier = make_supplier('Acme Supplies')

    response = client.post(
        '/api/purchase-orders',
        json={'supplierId': supplier.id, 'supplierName': 'Acme (Branch 2)'},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.get_json()['purchaseOrder']['supplierName'] == 'Acme (Branch 2)'


def test_unknown_supplier_id_without_name(client, auth_headers, db):
    response = client.post('/api/purchase-orders', json={'supplierId': 999}, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Supplier name is required'
    assert _counts() == (0, 0)


def test_unknown_supplier_id_with_name(client, auth_headers, db):
    response = client.post(
        '/api/purchase-orders',
        json={'supplierId': 999, 'supplierName': 'Walk-in'},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert response.get_json()['details'] == [{'field': 'supplierId', 'message': 'Supplier not found'}]
    assert _counts() == (0, 0)


def test_defaults_are_applied(client, auth_headers):
    response = client.post(
        '/api/purchase-orders',
        json={'supplierName': 'Walk-in', 'items': [{'description': 'Misc hardware'}]},
        headers=auth_headers,
    )

    assert response.status_code == 201
    order = response.get_json()['purchaseOrder']
    assert order['type'] == 'purchase'
    assert order['status'] == 'draft'
    assert order['orderDate'] is not None
    assert order['expectedDate'] is None
    assert order['totalAmount'] == 0
    assert order['poNo'].startswith('PO-')

    line = order['items'][0]
    assert line['quantity'] == 1
    assert line['unitPrice'] == 0
    assert line['totalPrice'] == 0
    assert line['partNo'] == ''
    assert line['uom'] is None
    assert line['part'] is None


def test_items_are_created_with_parts_loaded(client, auth_headers, db):
    part = make_part('P-100')
    payload = {
        'poNo': 'PO-2024-0001',
        'supplierName': 'Acme',
        'type': 'other',
        'orderDate': '2024-03-01T09:30:00Z',
        'expectedDate': '2024-03-15',
        'totalAmount': 31.0,
        'items': [
            {'partId': part.id, 'partNo': 'P-100', 'quantity': 2, 'unitPrice': 12.5, 'uom': 'pcs'},
            {'partNo': 'FREIGHT', 'quantity': 1, 'unitPrice': 6, 'totalPrice': 6},
        ],
    }

    response = client.post('/api/purchase-orders', json=payload, headers=auth_headers)

    assert response.status_code == 201
    order = response.get_json()['purchaseOrder']
    assert order['poNo'] == 'PO-2024-0001'
    assert order['type'] == 'other'
    assert order['orderDate'] == '2024-03-01T09:30:00'
    assert order['expectedDate'] == '2024-03-15T00:00:00'
    assert [line['totalPrice'] for line in order['items']] == [25.0, 6.0]
    assert order['items'][0]['part']['partNo'] == 'P-100'
    assert order['items'][1]['part'] is None
    assert _counts() == (1, 2)


def test_unknown_part_reference_is_rejected(client, auth_headers, db):
    payload = {'supplierName': 'Acme', 'items': [{'partNo': 'X'}, {'partId': 999}]}

    response = client.post('/api/purchase-orders', json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()['details'] == [{'field': 'items.1.partId', 'message': 'Part not found'}]
    assert _counts() == (0, 0)


def test_invalid_item_values_are_rejected(client, auth_headers, db):
    payload = {'supplierName': 'Acme', 'items': [{'quantity': 0}, {'unitPrice': -1}]}

    response = client.post('/api/purchase-orders', json=payload, headers=auth_headers)

    assert response.status_code == 400
    fields = [detail['field'] for detail in response.get_json()['details']]
    assert fields == ['items.0.quantity', 'items.1.unitPrice']
    assert _counts() == (0, 0)


def test_duplicate_po_number_is_a_conflict(client, auth_headers, db):
    payload = {'poNo': 'PO-1', 'supplierName': 'Acme'}
    assert client.post('/api/purchase-orders', json=payload, headers=auth_headers).status_code == 201

    response = client.post('/api/purchase-orders', json=payload, headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Purchase order number already exists'
    assert _counts() == (1, 0)


def test_failure_mid_write_leaves_nothing(client, auth_headers, db, fail_on_second_item):
    payload = {
        'supplierName': 'Acme',
        'items': [
            {'partNo': 'A', 'quantity': 1, 'unitPrice': 1},
            {'partNo': 'B', 'quantity': 2, 'unitPrice': 2},
            {'partNo': 'C', 'quantity': 3, 'unitPrice': 3},
        ],
    }

    response = client.post('/api/purchase-orders', json=payload, headers=auth_headers)

    assert response.status_code == 500
    body = response.get_json()
    assert body['error'] == 'Failed to create purchase order'
    assert 'simulated store failure' in body['message']
    assert len(fail_on_second_item) == 2
    db.session.expire_all()
    assert _counts() == (0, 0)


def test_list_is_newest_first_and_filterable(client, auth_headers):
    for po_no, po_type in (('PO-1', 'purchase'), ('PO-2', 'other'), ('PO-3', 'purchase')):
        response = client.post(
            '/api/purchase-orders',
            json={'poNo': po_no, 'supplierName': 'Acme', 'type': po_type},
            headers=auth_headers,
        )
        assert response.status_code == 201

    response = client.get('/api/purchase-orders', headers=auth_headers)
    assert [po['poNo'] for po in response.get_json()['purchaseOrders']] == ['PO-3', 'PO-2', 'PO-1']

    response = client.get('/api/purchase-orders?type=purchase&status=draft', headers=auth_headers)
    assert [po['poNo'] for po in response.get_json()['purchaseOrders']] == ['PO-3', 'PO-1']


def test_get_purchase_order(client, auth_headers):
    created = client.post(
        '/api/purchase-orders', json={'supplierName': 'Acme', 'items': [{'partNo': 'A'}]}, headers=auth_headers
    ).get_json()['purchaseOrder']

    response = client.get(f"/api/purchase-orders/{created['id']}", headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()['purchaseOrder']['items'][0]['partNo'] == 'A'

    assert client.get('/api/purchase-orders/999', headers=auth_headers).status_code == 404
