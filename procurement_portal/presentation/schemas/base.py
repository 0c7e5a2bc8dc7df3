from datetime import date, datetime, timezone
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


def _is_blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


class RequestSchema(BaseModel):
    """
    camelCase on the wire, snake_case in Python.

    ``defaults`` maps field name to the value used when the client omits the
    field or sends null/blank; callables are invoked per request.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        protected_namespaces=(),
    )

    defaults: ClassVar[Dict[str, Any]] = {}
    # null and blank strings mean "not sent"; updates that must be able to
    # clear a column turn this off
    drop_blank: ClassVar[bool] = True

    @model_validator(mode='before')
    @classmethod
    def _blank_to_missing(cls, data):
        if cls.drop_blank and isinstance(data, dict):
            return {k: v for k, v in data.items() if not _is_blank(v)}
        return data

    @model_validator(mode='after')
    def _apply_defaults(self):
        for field, default in self.defaults.items():
            if getattr(self, field) is None:
                setattr(self, field, default() if callable(default) else default)
        return self

    def values(self, exclude_unset=False):
        """Snake-case dict, ready for DataInsertionMixin.from_dict"""
        return self.model_dump(exclude_unset=exclude_unset)


def required_text(value, message):
    if value is None or not str(value).strip():
        raise PydanticCustomError('required', message)
    return value


def to_naive_utc(value):
    """Store timestamps as naive UTC, like the model defaults (datetime.utcnow)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return value


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)
