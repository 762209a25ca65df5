from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.schemas.firm import FirmCreate, FirmUpdate, FirmResponse
from app.services.firm import firm_service
from app.core.permissions import require_platform_admin

router = APIRouter()


@router.get("", response_model=List[FirmResponse])
def get_firms(
    skip: int = 0,
    limit: int = 100,
    active: Optional[bool] = None,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_platform_admin)
):
    """
    List firms, optionally filtered by active flag.

    Platform administrators only.
    """
    return firm_service.get_firms(db, skip=skip, limit=limit, is_active=active)


@router.post("", response_model=FirmResponse, status_code=status.HTTP_201_CREATED)
def create_firm(
    firm_data: FirmCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    return firm_service.create_firm(db, firm_data, actor=admin)


@router.get("/{firm_id}", response_model=FirmResponse)
def get_firm(
    firm_id: int,
    db: Session = Depends(get_db),
    _admin: User = Depends(require_platform_admin)
):
    return firm_service.get_firm(db, firm_id)


@router.put("/{firm_id}", response_model=FirmResponse)
def update_firm(
    firm_id: int,
    firm_data: FirmUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    return firm_service.update_firm(db, firm_id, firm_data, actor=admin)


@router.delete("/{firm_id}", response_model=FirmResponse)
def deactivate_firm(
    firm_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_platform_admin)
):
    """
    Deactivate a firm. Firms are never hard-deleted.
    """
    return firm_service.deactivate_firm(db, firm_id, actor=admin)
