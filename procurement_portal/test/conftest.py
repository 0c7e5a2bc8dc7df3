"""
Pytest configuration and fixtures for the API tests
"""
import pytest
from procurement_portal import create_app
from procurement_portal import db as _db
from procurement_portal.auth import issue_token
from procurement_portal.data.core.user_info.user import User
from procurement_portal.data.inventory import Brand, Item, Part, PartModel, Supplier

TEST_CONFIG = {
    'SECRET_KEY': 'test-secret-key',
    'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    'RATELIMIT_ENABLED': False,
    'TESTING': True,
    'ADMIN_USERNAME': 'admin',
    'ADMIN_EMAIL': 'admin@example.com',
    'ADMIN_PASSWORD': 'admin123456789',
}


@pytest.fixture(scope='session')
def app():
    """Create Flask application for testing"""
    return create_app(TEST_CONFIG)


@pytest.fixture(scope='function', autouse=True)
def db(app):
    """Fresh app context and schema for every test; the principal cached in g goes with the context"""
    with app.app_context():
        _db.create_all()
        yield _db
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """Create Flask test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def admin_user(db):
    user = User(username='admin', email='admin@example.com', is_active=True)
    user.set_password('admin123456789')
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture(scope='function')
def auth_headers(admin_user):
    return {'Authorization': f'Bearer {issue_token(admin_user)}'}


def make_brand(name='Bosch', status='A'):
    brand = Brand(name=name, status=status)
    _db.session.add(brand)
    _db.session.commit()
    return brand


def make_item(brand, item_no='ITEM-1'):
    item = Item(item_no=item_no, description='Sample item', brand_id=brand.id)
    _db.session.add(item)
    _db.session.commit()
    return item


def make_supplier(name='Acme Supplies'):
    supplier = Supplier(name=name, contact_person='Jane Doe', email='sales@acme.example')
    _db.session.add(supplier)
    _db.session.commit()
    return supplier


def make_part(part_no='P-100', models=()):
    part = Part(part_no=part_no, description='Drive belt', category='Belts', uom='pcs', unit_price=12.5)
    _db.session.add(part)
    _db.session.flush()
    for model_no, qty_used in models:
        _db.session.add(PartModel(part_id=part.id, model_no=model_no, qty_used=qty_used, tab='P1'))
    _db.session.commit()
    return part
