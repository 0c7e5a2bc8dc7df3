from typing import Optional

from pydantic import Field, field_validator

from procurement_portal.presentation.schemas.base import RequestSchema, required_text


class SupplierCreate(RequestSchema):
    name: Optional[str] = Field(default=None, max_length=200, validate_default=True)
    contact_person: Optional[str] = Field(default=None, max_length=200)
    email: Optional[str] = Field(default=None, max_length=200)
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = None

    @field_validator('name')
    @classmethod
    def _name_required(cls, value):
        return required_text(value, 'Supplier name is required')
