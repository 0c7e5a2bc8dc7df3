"""
Request schemas. Each resource kind resolves its defaults here, once, before
the payload reaches the buisness layer.
"""

from flask import request
from pydantic import ValidationError as PydanticValidationError
from procurement_portal.buisness.core.errors import ValidationError

# Echoed back by clients that PUT what they GET; never writable
READ_ONLY_FIELDS = ('id', 'createdAt', 'updatedAt', 'createdById', 'updatedById')


def _field_name(loc):
    return '.'.join(str(part) for part in loc)


def parse_body(schema_cls, payload=None, strip=READ_ONLY_FIELDS):
    """
    Validate a JSON payload (the current request body by default) against
    ``schema_cls``.

    Raises:
        ValidationError: the body is not a JSON object, or fails the schema
    """
    if payload is None:
        payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError('Invalid request body')

    payload = {key: value for key, value in payload.items() if key not in strip}
    try:
        return schema_cls.model_validate(payload)
    except PydanticValidationError as e:
        details = [
            {'field': _field_name(err['loc']), 'message': err['msg']}
            for err in e.errors()
        ]
        raise ValidationError.from_fields(details) from e
