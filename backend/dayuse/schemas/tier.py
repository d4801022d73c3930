"""
Pydantic schemas for age-tier pricing.
"""

from decimal import Decimal
from pydantic import BaseModel, Field


class AgeTierResponse(BaseModel):
    id: str
    label: str
    min_age: int
    max_age: int | None
    price: Decimal

    model_config = {"from_attributes": True}


class AgeTierUpdate(BaseModel):
    label: str | None = Field(None, min_length=1, max_length=100)
    price: Decimal | None = Field(None, ge=0)
    min_age: int | None = Field(None, ge=0)
    max_age: int | None = Field(None, ge=0)
