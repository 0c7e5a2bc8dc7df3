"""
Bearer token authentication
"""

import pytest
from flask import g
from itsdangerous import URLSafeTimedSerializer

from procurement_portal.auth import TOKEN_SALT, issue_token, verify_token

PROTECTED_ENDPOINTS = [
    ('get', '/api/brands'),
    ('post', '/api/brands'),
    ('put', '/api/brands/1'),
    ('delete', '/api/brands/1'),
    ('get', '/api/parts'),
    ('put', '/api/parts/1'),
    ('delete', '/api/parts/1'),
    ('get', '/api/suppliers'),
    ('get', '/api/purchase-orders'),
    ('post', '/api/purchase-orders'),
]


@pytest.mark.parametrize('method,url', PROTECTED_ENDPOINTS)
def test_missing_token_is_unauthorized(client, method, url):
    response = getattr(client, method)(url, json={})

    assert response.status_code == 401
    assert response.get_json() == {'error': 'Unauthorized'}


def test_principal_from_earlier_request_is_not_reused(client, auth_headers):
    """An anonymous request in an earlier test must not stick to this one"""
    assert '_login_user' not in g

    response = client.get('/api/brands', headers=auth_headers)

    assert response.status_code == 200


def test_tampered_token_is_unauthorized(client, admin_user):
    token = issue_token(admin_user) + 'x'

    response = client.get('/api/brands', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 401


def test_token_signed_with_other_key_is_unauthorized(client, admin_user):
    token = URLSafeTimedSerializer('another-key', salt=TOKEN_SALT).dumps({'uid': admin_user.id})

    response = client.get('/api/brands', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 401


def test_non_bearer_scheme_is_unauthorized(client, admin_user):
    token = issue_token(admin_user)

    response = client.get('/api/brands', headers={'Authorization': f'Basic {token}'})

    assert response.status_code == 401


def test_token_for_disabled_user_is_unauthorized(client, admin_user, db):
    token = issue_token(admin_user)
    admin_user.is_active = False
    db.session.commit()

    response = client.get('/api/brands', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 401


def test_expired_token_is_rejected(app, admin_user):
    token = issue_token(admin_user)
    app.config['TOKEN_MAX_AGE'] = -1
    try:
        assert verify_token(token) is None
    finally:
        app.config['TOKEN_MAX_AGE'] = 86400


def test_valid_token_is_accepted(client, auth_headers, admin_user):
    assert verify_token(auth_headers['Authorization'].split(' ', 1)[1]) == admin_user.id

    response = client.get('/api/brands', headers=auth_headers)

    assert response.status_code == 200


def test_health_needs_no_token(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_unknown_route_answers_json(client, auth_headers):
    response = client.get('/api/brands/not-a-number', headers=auth_headers)

    assert response.status_code == 404
    assert response.get_json()['error'] == 'Not Found'


def test_non_object_body_is_rejected(client, auth_headers):
    response = client.post('/api/brands', json=['Bosch'], headers=auth_headers)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Invalid request body'
