from pydantic import BaseModel, field_validator
from typing import Optional

class FirmBase(BaseModel):
    name: str
    description: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None

class FirmCreate(FirmBase):
    pass

class FirmUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "is_active")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

class FirmResponse(FirmBase):
    id: int
    is_active: bool

    class Config:
        from_attributes = True
