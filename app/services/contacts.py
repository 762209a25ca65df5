from typing import Dict, List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud import owner as owner_crud
from app.crud import property as property_crud
from app.crud import tenant as tenant_crud
from app.crud.base import CRUDBase
from app.core.tenant_context import FirmContext


def ensure_reference_in_firm(
    db: Session,
    crud: CRUDBase,
    entity_id: Optional[int],
    context: FirmContext,
    label: str
) -> None:
    """A foreign id supplied by the caller must point inside the acting firm."""
    if entity_id is None:
        return
    if crud.get(db=db, id=entity_id, context=context) is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} {entity_id} does not exist in this firm"
        )


class FirmContactService:
    """
    Read/create service for the people a firm manages (owners, tenants).

    Both are plain firm-owned rows, so one implementation serves both.
    ``references`` maps payload fields to the CRUD object that must hold
    the referenced row inside the same firm.
    """

    def __init__(self, crud: CRUDBase, label: str, references: Optional[Dict[str, CRUDBase]] = None):
        self.crud = crud
        self.label = label
        self.references = references or {}

    def get(self, db: Session, entity_id: int, context: FirmContext):
        db_obj = self.crud.get(db=db, id=entity_id, context=context)
        if not db_obj:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"{self.label} not found"
            )
        return db_obj

    def get_multi(self, db: Session, context: FirmContext, skip: int = 0, limit: int = 100) -> List:
        return self.crud.get_multi(db=db, skip=skip, limit=limit, context=context)

    def create(self, db: Session, obj_in, context: FirmContext):
        for field, reference_crud in self.references.items():
            ensure_reference_in_firm(db, reference_crud, getattr(obj_in, field), context, field)
        return self.crud.create(db=db, obj_in=obj_in, context=context)

    def update(self, db: Session, entity_id: int, obj_in, context: FirmContext):
        db_obj = self.get(db, entity_id, context)
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            if field in self.references:
                ensure_reference_in_firm(db, self.references[field], value, context, field)
        return self.crud.update(db=db, db_obj=db_obj, obj_in=obj_in)

    def deactivate(self, db: Session, entity_id: int, context: FirmContext):
        db_obj = self.get(db, entity_id, context)
        return self.crud.deactivate(db=db, db_obj=db_obj)


owner_service = FirmContactService(owner_crud, "Owner")
tenant_service = FirmContactService(tenant_crud, "Tenant", references={"property_id": property_crud})
