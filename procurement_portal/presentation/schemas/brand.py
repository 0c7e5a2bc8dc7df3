from typing import Literal, Optional

from pydantic import Field, field_validator

from procurement_portal.data.inventory.brand import BRAND_STATUS_ACTIVE
from procurement_portal.presentation.schemas.base import RequestSchema, required_text

BrandStatus = Literal['A', 'I']


class BrandCreate(RequestSchema):
    name: Optional[str] = Field(default=None, max_length=200, validate_default=True)
    status: Optional[BrandStatus] = None

    defaults = {'status': BRAND_STATUS_ACTIVE}

    @field_validator('name')
    @classmethod
    def _name_required(cls, value):
        return required_text(value, 'Brand name is required')


class BrandUpdate(RequestSchema):
    """Partial update; only the fields the client sent are applied."""
    name: Optional[str] = Field(default=None, max_length=200)
    status: Optional[BrandStatus] = None

    @field_validator('name')
    @classmethod
    def _name_not_blank(cls, value):
        return required_text(value, 'Brand name is required')
