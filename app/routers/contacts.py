from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.owner import OwnerCreate, OwnerResponse
from app.schemas.tenant import TenantCreate, TenantResponse, TenantUpdate
from app.services.contacts import owner_service, tenant_service
from app.core.ownership import EntityType
from app.core.permissions import require_firm_role, require_ownership
from app.core.roles import Role
from app.core.tenant_context import FirmContext
from app.dependencies import get_firm_context

owners_router = APIRouter()
tenants_router = APIRouter()


@owners_router.get("", response_model=List[OwnerResponse])
def get_owners(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(get_firm_context)
):
    return owner_service.get_multi(db, context, skip=skip, limit=limit)


@owners_router.get("/{id}", response_model=OwnerResponse)
def get_owner(
    id: int,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(require_ownership(EntityType.owner))
):
    return owner_service.get(db, id, context)


@owners_router.post("", response_model=OwnerResponse, status_code=status.HTTP_201_CREATED)
def create_owner(
    owner_data: OwnerCreate,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(require_firm_role(Role.accountant))
):
    return owner_service.create(db, owner_data, context)


@tenants_router.get("", response_model=List[TenantResponse])
def get_tenants(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(get_firm_context)
):
    return tenant_service.get_multi(db, context, skip=skip, limit=limit)


@tenants_router.get("/{id}", response_model=TenantResponse)
def get_tenant(
    id: int,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(require_ownership(EntityType.tenant))
):
    return tenant_service.get(db, id, context)


@tenants_router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
    tenant_data: TenantCreate,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(require_firm_role(Role.accountant))
):
    """
    Register a renter in the acting firm. ``property_id``, when given,
    must name a property of the same firm.
    """
    return tenant_service.create(db, tenant_data, context)


@tenants_router.put("/{id}", response_model=TenantResponse)
def update_tenant(
    id: int,
    tenant_data: TenantUpdate,
    db: Session = Depends(get_db),
    _role: FirmContext = Depends(require_firm_role(Role.accountant)),
    context: FirmContext = Depends(require_ownership(EntityType.tenant))
):
    return tenant_service.update(db, id, tenant_data, context)


@tenants_router.delete("/{id}", response_model=TenantResponse)
def deactivate_tenant(
    id: int,
    db: Session = Depends(get_db),
    _role: FirmContext = Depends(require_firm_role(Role.accountant)),
    context: FirmContext = Depends(require_ownership(EntityType.tenant))
):
    """
    Soft delete a tenant. The row stays for lease and payment history.
    """
    return tenant_service.deactivate(db, id, context)
