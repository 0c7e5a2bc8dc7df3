"""
Logging Sanitizer Utility

Redacts secrets from request payloads and headers before they are logged.
Bearer tokens travel on every request, so headers are sanitized as well as bodies.
"""

from typing import Dict, Any, Mapping


# Fields that should never be logged
SENSITIVE_FIELDS = {
    'password',
    'password_hash',
    'confirm_password',
    'current_password',
    'new_password',
    'secret',
    'secret_key',
    'token',
    'api_key',
    'apikey',
    'auth_token',
    'access_token',
    'refresh_token',
    'authorization',
    'cookie',
    'session_id',
}


def _is_sensitive(key) -> bool:
    return str(key).lower().replace('-', '_') in SENSITIVE_FIELDS


def sanitize_value(value: Any, redact_text: str = '[REDACTED]') -> Any:
    """Recursively sanitize dictionaries and lists, leaving scalars untouched."""
    if isinstance(value, Mapping):
        return sanitize_dict(value, redact_text)
    if isinstance(value, (list, tuple)):
        return [sanitize_value(item, redact_text) for item in value]
    return value


def sanitize_dict(data: Mapping[str, Any], redact_text: str = '[REDACTED]') -> Dict[str, Any]:
    """
    Sanitize a dictionary by replacing sensitive field values with redaction text.

    Args:
        data: Dictionary to sanitize
        redact_text: Text to use for redacted values (default: '[REDACTED]')

    Returns:
        Sanitized dictionary with sensitive values replaced

    Example:
        >>> sanitize_dict({'username': 'admin', 'password': 'secret123'})
        {'username': 'admin', 'password': '[REDACTED]'}
    """
    if not data:
        return data

    sanitized = {}
    for key, value in data.items():
        if _is_sensitive(key):
            sanitized[key] = redact_text
        else:
            sanitized[key] = sanitize_value(value, redact_text)
    return sanitized


def sanitize_headers(headers, redact_text: str = '[REDACTED]') -> Dict[str, Any]:
    """
    Sanitize request headers (werkzeug Headers or a plain mapping) for logging.

    Example:
        >>> sanitize_headers({'Authorization': 'Bearer abc', 'Accept': 'application/json'})
        {'Authorization': '[REDACTED]', 'Accept': 'application/json'}
    """
    return sanitize_dict(dict(headers.items()), redact_text)


def sanitize_exception_message(exception: Exception) -> str:
    """
    Sanitize exception messages that look like they carry sensitive data.

    Args:
        exception: Exception to sanitize

    Returns:
        Sanitized exception message
    """
    message = str(exception)
    if any(field in message.lower() for field in SENSITIVE_FIELDS):
        return f"{type(exception).__name__}: [Message contains sensitive data]"
    return message
