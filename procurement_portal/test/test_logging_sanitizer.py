"""
Test the logging sanitizer utility.
Passwords, bearer tokens and other secrets must never reach the log files.
"""

from procurement_portal.utils.logging_sanitizer import (
    SENSITIVE_FIELDS,
    sanitize_dict,
    sanitize_exception_message,
    sanitize_headers,
    sanitize_value,
)


def test_sanitize_dict():
    """Test dictionary sanitization"""
    test_data = {
        'username': 'admin',
        'password': 'secret123',
        'email': 'admin@example.com'
    }
    result = sanitize_dict(test_data)
    assert result['username'] == 'admin', "Username should not be redacted"
    assert result['password'] == '[REDACTED]', "Password should be redacted"
    assert result['email'] == 'admin@example.com', "Email should not be redacted"

    # Case insensitivity
    result = sanitize_dict({'Password': 'a', 'PASSWORD': 'b', 'Access-Token': 'c'})
    assert set(result.values()) == {'[REDACTED]'}

    # Nested dictionaries
    result = sanitize_dict({'user': {'username': 'admin', 'password': 'secret123'}, 'settings': {'theme': 'dark'}})
    assert result['user']['username'] == 'admin'
    assert result['user']['password'] == '[REDACTED]'
    assert result['settings']['theme'] == 'dark'


def test_sanitize_value_walks_lists():
    """Request bodies carry lists of lines and mappings"""
    payload = {
        'supplierName': 'Acme',
        'items': [{'partNo': 'P-1', 'token': 'abc'}, {'partNo': 'P-2'}],
    }
    result = sanitize_value(payload)
    assert result['items'][0] == {'partNo': 'P-1', 'token': '[REDACTED]'}
    assert result['items'][1] == {'partNo': 'P-2'}
    assert sanitize_value(None) is None
    assert sanitize_value(['a', 1]) == ['a', 1]


def test_sanitize_headers():
    result = sanitize_headers({'Authorization': 'Bearer abc.def', 'Accept': 'application/json'})
    assert result == {'Authorization': '[REDACTED]', 'Accept': 'application/json'}


def test_all_sensitive_fields():
    """Verify all sensitive fields are properly configured"""
    test_data = {field: f"sensitive_{field}_value" for field in SENSITIVE_FIELDS}

    result = sanitize_dict(test_data)

    for field in SENSITIVE_FIELDS:
        assert result[field] == '[REDACTED]', f"Field '{field}' should be redacted"


def test_sanitize_exception_message():
    assert sanitize_exception_message(ValueError('boom')) == 'boom'
    assert sanitize_exception_message(ValueError('bad password for admin')) == \
        'ValueError: [Message contains sensitive data]'
