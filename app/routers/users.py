from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.schemas.firm_assignment import (
    FirmAssignmentCreate,
    FirmAssignmentRemove,
    FirmAssignmentResponse,
)
from app.schemas.user import PasswordReset, UserCreate, UserResponse, UserUpdate
from app.services.user_management import user_management_service
from app.core.ownership import EntityType
from app.core.permissions import require_firm_role, require_ownership, require_platform_admin
from app.core.roles import Role
from app.core.tenant_context import FirmContext
from app.core.logging_config import logger

router = APIRouter()


@router.get("", response_model=List[UserResponse])
def get_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(require_firm_role(Role.accountant))
):
    """
    List users assigned to the acting firm.

    Platform administrators without a selected firm see every user.
    """
    return user_management_service.get_users(db, context, skip=skip, limit=limit)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    try:
        return user_management_service.create_user(db, user_data, actor=admin)
    except ValueError as e:
        logger.warning(f"User creation rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{id}", response_model=UserResponse)
def get_user(
    id: int,
    db: Session = Depends(get_db),
    _role: FirmContext = Depends(require_firm_role(Role.accountant)),
    _owned: FirmContext = Depends(require_ownership(EntityType.user))
):
    """
    Retrieve a user who belongs to the acting firm.

    Users of other firms are reported exactly like missing users.
    """
    return user_management_service.get_user(db, id)


@router.put("/{id}", response_model=UserResponse)
def update_user(
    id: int,
    user_data: UserUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin),
    _owned: FirmContext = Depends(require_ownership(EntityType.user))
):
    try:
        return user_management_service.update_user(db, id, user_data, actor=admin)
    except ValueError as e:
        logger.warning(f"User update rejected: id={id}, {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("/{id}/reset-password", status_code=status.HTTP_204_NO_CONTENT)
def reset_user_password(
    id: int,
    reset: PasswordReset,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    """
    Set a new password for a user who cannot sign in.
    """
    user_management_service.reset_password(db, id, reset, actor=admin)
    return None


@router.post("/{id}/assign-firm", response_model=FirmAssignmentResponse)
def assign_user_to_firm(
    id: int,
    assignment_data: FirmAssignmentCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    """
    Assign a user to a firm with a role, or change the role of an
    existing assignment. A previously removed assignment is reactivated.
    """
    return user_management_service.assign_to_firm(db, id, assignment_data, actor=admin)


@router.post("/{id}/remove-firm", response_model=FirmAssignmentResponse)
def remove_user_from_firm(
    id: int,
    removal: FirmAssignmentRemove,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    return user_management_service.remove_from_firm(db, id, removal.firm_id, actor=admin)


@router.patch("/{id}/toggle-status", response_model=UserResponse)
def toggle_user_status(
    id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    return user_management_service.toggle_status(db, id, actor=admin)
