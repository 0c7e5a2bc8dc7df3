from typing import List, Optional

from pydantic import ConfigDict, Field, field_validator

from procurement_portal.data.inventory.part_model import DEFAULT_MODEL_TAB
from procurement_portal.presentation.schemas.base import RequestSchema, required_text


class PartModelIn(RequestSchema):
    model_no: Optional[str] = Field(default=None, max_length=100, validate_default=True)
    qty_used: float = Field(ge=0)
    tab: Optional[str] = Field(default=None, max_length=20)

    defaults = {'tab': DEFAULT_MODEL_TAB}

    @field_validator('model_no')
    @classmethod
    def _model_no_required(cls, value):
        return required_text(value, 'Model number is required')


class PartFields(RequestSchema):
    """Writable columns of a part. Unknown keys are rejected."""
    model_config = ConfigDict(extra='forbid')

    part_no: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=100)
    uom: Optional[str] = Field(default=None, max_length=50)
    unit_price: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = Field(default=None, max_length=20)
    models: Optional[List[PartModelIn]] = None

    def part_values(self):
        """Column values the client sent, without the model mappings"""
        return self.model_dump(exclude_unset=True, exclude={'models'})

    def model_values(self):
        return [model.values() for model in (self.models or [])]


class PartCreate(PartFields):
    part_no: Optional[str] = Field(default=None, max_length=100, validate_default=True)

    defaults = {'status': 'Active'}

    @field_validator('part_no')
    @classmethod
    def _part_no_required(cls, value):
        return required_text(value, 'Part number is required')


class PartUpdate(PartFields):
    drop_blank = False

    # stock is loaded with the part but is not writable through this endpoint
    stock: Optional[list] = Field(default=None, exclude=True)

    @field_validator('part_no')
    @classmethod
    def _part_no_not_blank(cls, value):
        return required_text(value, 'Part number is required')
