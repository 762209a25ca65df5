from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.schemas.property import PropertyCreate, PropertyUpdate, PropertyResponse
from app.services.property import property_service
from app.core.ownership import EntityType
from app.core.permissions import require_firm_role, require_ownership
from app.core.roles import Role
from app.core.tenant_context import FirmContext
from app.dependencies import get_firm_context
from app.core.logging_config import logger

router = APIRouter()


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(require_firm_role(Role.accountant))
):
    """
    Create a new property in the acting firm.

    Requires accountant level or above, and a concrete firm: a platform
    admin must select one through the firm header or query parameter.
    """
    logger.info(f"Creating property: name={property_data.name}, firm_id={context.firm_id}")
    result = property_service.create_property(
        db=db,
        property_data=property_data,
        context=context
    )
    logger.info(f"Property created successfully: id={result.id}")
    return result


@router.get("", response_model=List[PropertyResponse])
def get_properties(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(get_firm_context)
):
    """
    Retrieve the properties of the acting firm.

    Platform administrators without a selected firm see all firms.
    """
    return property_service.get_properties(
        db=db,
        context=context,
        skip=skip,
        limit=limit
    )


@router.get("/{id}", response_model=PropertyResponse)
def get_property(
    id: int,
    db: Session = Depends(get_db),
    context: FirmContext = Depends(require_ownership(EntityType.property))
):
    return property_service.get_property(db=db, property_id=id, context=context)


@router.put("/{id}", response_model=PropertyResponse)
def update_property(
    id: int,
    property_data: PropertyUpdate,
    db: Session = Depends(get_db),
    _role: FirmContext = Depends(require_firm_role(Role.owner)),
    context: FirmContext = Depends(require_ownership(EntityType.property))
):
    """
    Update a property. Requires owner level or above.
    """
    return property_service.update_property(
        db=db,
        property_id=id,
        property_data=property_data,
        context=context
    )


@router.delete("/{id}", response_model=PropertyResponse)
def deactivate_property(
    id: int,
    db: Session = Depends(get_db),
    _role: FirmContext = Depends(require_firm_role(Role.accountant)),
    context: FirmContext = Depends(require_ownership(EntityType.property))
):
    """
    Soft delete a property. Requires accountant level or above.
    """
    logger.info(f"Deactivating property: id={id}, firm_id={context.firm_id}")
    return property_service.deactivate_property(db=db, property_id=id, context=context)
