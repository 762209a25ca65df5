from pydantic import BaseModel
from typing import List, Optional
from app.schemas.user import UserResponse

class LoginRequest(BaseModel):
    # E-mail address or username
    credential: str
    password: str

class LoginResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserResponse

class AssignmentSummaryResponse(BaseModel):
    firm_id: int
    firm_name: str
    role: Optional[str] = None
    access_level: str

class FirmContextResponse(BaseModel):
    firm_id: Optional[int] = None
    firm_name: Optional[str] = None
    role: Optional[str] = None
    access_level: Optional[str] = None
    can_access_all_firms: bool
    assignments: List[AssignmentSummaryResponse] = []
