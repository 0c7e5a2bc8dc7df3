"""
Generic data insertion mixin for SQLAlchemy models
Provides from_dict / to_dict so models can be built from validated request
data and rendered back to the camelCase JSON the API speaks.
"""

from datetime import date, datetime
from decimal import Decimal
from sqlalchemy import inspect

AUDIT_FIELDS = ('created_at', 'updated_at', 'created_by_id', 'updated_by_id')


def camelize(key):
    """po_no -> poNo"""
    head, *rest = key.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def _serialize(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


class DataInsertionMixin:
    """
    Mixin that provides generic data insertion capabilities for SQLAlchemy models

    This mixin adds:
    - from_dict(): Create model instance from dictionary
    - update_from_dict(): Apply a partial dictionary to an existing instance
    - to_dict(): Convert model instance to a camelCase dictionary
    """

    # Relationship names rendered by to_dict() when no explicit include is given
    default_includes = ()

    @classmethod
    def from_dict(cls, data_dict, user_id=None, skip_fields=None):
        """
        Create a model instance from a dictionary

        Args:
            data_dict (dict): Dictionary containing model data (snake_case keys)
            user_id (int, optional): User ID for audit fields
            skip_fields (list, optional): Fields to skip during creation

        Returns:
            Model instance (not added to the session)
        """
        skip_fields = skip_fields or []

        mapper = inspect(cls)
        columns = {c.key for c in mapper.columns}

        filtered_data = {
            key: value for key, value in data_dict.items()
            if key in columns and key not in skip_fields
            and not (key in ('created_at', 'updated_at') and value is None)
        }

        instance = cls(**filtered_data)

        if user_id is not None:
            if hasattr(instance, 'created_by_id') and not instance.created_by_id:
                instance.created_by_id = user_id
            if hasattr(instance, 'updated_by_id'):
                instance.updated_by_id = user_id

        return instance

    def update_from_dict(self, data_dict, user_id=None, skip_fields=None):
        """
        Apply column values from a dictionary to this instance.

        Keys that are not columns, primary keys and audit fields are ignored.
        """
        skip_fields = set(skip_fields or []) | set(AUDIT_FIELDS)

        mapper = inspect(self.__class__)
        for column in mapper.columns:
            if column.primary_key or column.key in skip_fields:
                continue
            if column.key in data_dict:
                setattr(self, column.key, data_dict[column.key])

        if user_id is not None and hasattr(self, 'updated_by_id'):
            self.updated_by_id = user_id
        return self

    def to_dict(self, include=None, include_audit_fields=True):
        """
        Convert model instance to a camelCase dictionary

        Args:
            include (iterable, optional): Relationship names to render. Nested
                relationships use dotted paths, e.g. ``('items', 'items.part')``.
                Defaults to ``default_includes``.
            include_audit_fields (bool): Whether to include audit fields

        Returns:
            dict: Dictionary representation of the model
        """
        include = self.default_includes if include is None else include
        result = {}

        mapper = inspect(self.__class__)
        for column in mapper.columns:
            if not include_audit_fields and column.key in AUDIT_FIELDS:
                continue
            result[camelize(column.key)] = _serialize(getattr(self, column.key))

        direct = {}
        for path in include:
            name, _, rest = path.partition('.')
            nested = direct.setdefault(name, [])
            if rest:
                nested.append(rest)

        for name, nested in direct.items():
            related = getattr(self, name)
            if related is None:
                result[camelize(name)] = None
            elif isinstance(related, DataInsertionMixin):
                result[camelize(name)] = related.to_dict(include=nested)
            else:
                result[camelize(name)] = [obj.to_dict(include=nested) for obj in related]

        return result

