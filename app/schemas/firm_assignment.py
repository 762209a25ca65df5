from pydantic import BaseModel
from typing import Optional
from app.core.roles import Role

class FirmAssignmentCreate(BaseModel):
    firm_id: int
    role: Role
    access_level: str = "standard"

class FirmAssignmentRemove(BaseModel):
    firm_id: int

class FirmAssignmentResponse(BaseModel):
    id: int
    user_id: int
    firm_id: int
    role: str
    access_level: str
    is_active: bool
    assigned_by: Optional[int] = None

    class Config:
        from_attributes = True
