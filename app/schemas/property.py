from pydantic import BaseModel, Field, field_validator
from typing import Optional

class PropertyBase(BaseModel):
    name: str
    property_type: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    total_units: int = Field(1, ge=1)
    owner_id: Optional[int] = None

class PropertyCreate(PropertyBase):
    pass

class PropertyUpdate(BaseModel):
    name: Optional[str] = None
    property_type: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    total_units: Optional[int] = Field(None, ge=1)
    owner_id: Optional[int] = None

    # Omitted means unchanged; an explicit null would violate NOT NULL
    @field_validator("name", "total_units")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

class PropertyResponse(PropertyBase):
    id: int
    firm_id: int
    is_active: bool

    class Config:
        from_attributes = True
