from pydantic import BaseModel, field_validator
from typing import Optional

class OwnerBase(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    user_id: Optional[int] = None

class OwnerCreate(OwnerBase):
    pass

class OwnerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

class OwnerResponse(OwnerBase):
    id: int
    firm_id: int

    class Config:
        from_attributes = True
