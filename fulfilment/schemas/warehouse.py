from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Warehouse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    business_unit_code: str
    location: str
    capacity: int
    stock: int
    created_at: datetime | None = None
    archived_at: datetime | None = None


class WarehouseCreate(BaseModel):
    business_unit_code: str = Field(..., min_length=1, max_length=64)
    location: str = Field(..., min_length=1, max_length=64)
    capacity: int = Field(..., ge=0, description="Maximum stock units the warehouse can hold")
    stock: int = Field(..., ge=0, description="Stock units currently held")


class WarehouseReplace(BaseModel):
    """Replacement body. The business-unit code comes from the URL path."""

    business_unit_code: str | None = Field(None, max_length=64)
    location: str = Field(..., min_length=1, max_length=64)
    capacity: int = Field(..., ge=0)
    stock: int = Field(..., ge=0)
