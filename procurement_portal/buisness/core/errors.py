"""
Domain errors raised by the buisness layer.

Each carries the HTTP status the presentation layer answers with; anything
that is not an InventoryError is treated as an internal failure.
"""


class InventoryError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(InventoryError):
    """Malformed or missing input. ``details`` lists ``{field, message}`` pairs."""
    status_code = 400

    def __init__(self, message, details=None):
        super().__init__(message)
        self.details = details or []

    @classmethod
    def from_fields(cls, details):
        message = ', '.join(f"{d['field']}: {d['message']}" if d['field'] else d['message'] for d in details)
        return cls(message, details)

    def to_dict(self):
        body = super().to_dict()
        if self.details:
            body['details'] = self.details
        return body


class ConflictError(InventoryError):
    """Uniqueness violation."""
    status_code = 400


class NotFoundError(InventoryError):
    status_code = 404


def is_unique_violation(integrity_error):
    """True when an IntegrityError was raised by a unique constraint."""
    text = str(getattr(integrity_error, 'orig', integrity_error)).lower()
    return 'unique' in text or 'duplicate' in text
