from typing import List
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud import owner as owner_crud
from app.crud import property as property_crud
from app.schemas.property import PropertyCreate, PropertyUpdate
from app.models.property import Property
from app.core.tenant_context import FirmContext
from app.services.contacts import ensure_reference_in_firm


class PropertyService:
    """
    Service layer for property business logic.

    Ownership of a specific property is validated by the router
    dependency before these methods run; the CRUD layer additionally
    scopes every statement to the acting firm.
    """

    def __init__(self):
        self.crud = property_crud

    def get_property(
        self,
        db: Session,
        property_id: int,
        context: FirmContext
    ) -> Property:
        """
        Get a property by ID with firm isolation.

        Raises:
            HTTPException 404: If property not found
        """
        db_property = self.crud.get(db=db, id=property_id, context=context)

        if not db_property:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Property not found"
            )

        return db_property

    def get_properties(
        self,
        db: Session,
        context: FirmContext,
        skip: int = 0,
        limit: int = 100
    ) -> List[Property]:
        return self.crud.get_multi(db=db, skip=skip, limit=limit, context=context)

    def create_property(
        self,
        db: Session,
        property_data: PropertyCreate,
        context: FirmContext
    ) -> Property:
        ensure_reference_in_firm(db, owner_crud, property_data.owner_id, context, "owner_id")
        return self.crud.create(db=db, obj_in=property_data, context=context)

    def update_property(
        self,
        db: Session,
        property_id: int,
        property_data: PropertyUpdate,
        context: FirmContext
    ) -> Property:
        db_property = self.get_property(db=db, property_id=property_id, context=context)
        ensure_reference_in_firm(db, owner_crud, property_data.owner_id, context, "owner_id")
        return self.crud.update(db=db, db_obj=db_property, obj_in=property_data)

    def deactivate_property(
        self,
        db: Session,
        property_id: int,
        context: FirmContext
    ) -> Property:
        """
        Soft delete a property.

        Properties are referenced by tenants and owners, so they are
        marked inactive instead of removed.
        """
        db_property = self.get_property(db=db, property_id=property_id, context=context)
        return self.crud.deactivate(db=db, db_obj=db_property)


# Create a singleton instance
property_service = PropertyService()
