from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from app.core.roles import Role

class UserBase(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    phone: Optional[str] = None
    preferred_language: str = "en"
    timezone: str = "UTC"

class InitialAssignment(BaseModel):
    firm_id: int
    role: Role
    access_level: str = "standard"

class UserCreate(UserBase):
    password: str = Field(..., min_length=8)
    user_type: Role = Role.tenant
    is_verified: bool = False
    firm_assignments: List[InitialAssignment] = []

class ProfileUpdate(BaseModel):
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    preferred_language: Optional[str] = None
    timezone: Optional[str] = None

class UserUpdate(BaseModel):
    username: Optional[str] = Field(None, min_length=3, max_length=50)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    user_type: Optional[Role] = None
    preferred_language: Optional[str] = None
    timezone: Optional[str] = None
    is_verified: Optional[bool] = None

    @field_validator("username", "email", "user_type", "preferred_language", "timezone", "is_verified")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

class PasswordReset(BaseModel):
    new_password: str = Field(..., min_length=8)
    confirm_password: str

class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8)
    confirm_password: str

class UserResponse(UserBase):
    id: int
    user_type: str
    is_active: bool
    is_verified: bool

    class Config:
        from_attributes = True
