from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.schemas.auth import (
    AssignmentSummaryResponse,
    FirmContextResponse,
    LoginRequest,
    LoginResponse,
)
from app.schemas.user import PasswordChange, ProfileUpdate, UserResponse
from app.services.auth import auth_service
from app.core.config import settings
from app.core.tenant_context import FirmContext
from app.dependencies import get_current_user, get_firm_context

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """
    Exchange a credential (e-mail or username) and password for an
    access token.

    Raises:
        HTTPException 401: If credentials are invalid or the account is
            deactivated
    """
    db_user = auth_service.authenticate(db, credentials.credential, credentials.password)

    return LoginResponse(
        access_token=auth_service.issue_token(db_user),
        expires_in=settings.access_token_expire_seconds,
        user=UserResponse.model_validate(db_user),
    )


@router.get("/profile", response_model=UserResponse)
def get_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/profile", response_model=UserResponse)
def update_profile(
    profile: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    try:
        return auth_service.update_profile(db, current_user, profile)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/change-password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
    change: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    auth_service.change_password(db, current_user, change)
    return None


@router.get("/context", response_model=FirmContextResponse)
def get_context(context: FirmContext = Depends(get_firm_context)):
    """
    The firm this request resolves to and the caller's other assignments.

    Intended for a firm switcher; authorization never reads the
    assignment list.
    """
    return FirmContextResponse(
        firm_id=context.firm_id,
        firm_name=context.firm_name,
        role=context.role.value if context.role else None,
        access_level=context.access_level,
        can_access_all_firms=context.can_access_all_firms,
        assignments=[
            AssignmentSummaryResponse(
                firm_id=a.firm_id,
                firm_name=a.firm_name,
                role=a.role.value if a.role else None,
                access_level=a.access_level,
            )
            for a in context.assignments
        ],
    )
