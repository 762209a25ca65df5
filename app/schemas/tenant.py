from pydantic import BaseModel, field_validator
from typing import Optional

class TenantBase(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    property_id: Optional[int] = None
    user_id: Optional[int] = None

class TenantCreate(TenantBase):
    pass

class TenantUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    property_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

class TenantResponse(TenantBase):
    id: int
    firm_id: int
    is_active: bool

    class Config:
        from_attributes = True
