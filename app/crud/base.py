from typing import Generic, TypeVar, Type, Optional, List, Any, Dict
from sqlalchemy.orm import Session
from pydantic import BaseModel
from app.database import Base
from app.core.isolation import firm_column, firm_scoped_select, require_concrete_firm
from app.core.tenant_context import FirmContext

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Generic CRUD class with firm isolation via the resolved FirmContext.

    Every read goes through ``firm_scoped_select`` so the firm predicate is
    part of the statement from the start. Only the platform-admin
    "all firms" context reads across firms; writes always need a firm.

    Type Parameters:
        ModelType: SQLAlchemy model class with a ``firm_id`` column
        CreateSchemaType: Pydantic schema for creating records
        UpdateSchemaType: Pydantic schema for updating records
    """

    def __init__(self, model: Type[ModelType]):
        """
        Initialize CRUD object with model class.

        Args:
            model: SQLAlchemy model class
        """
        firm_column(model)
        self.model = model

    def get(self, db: Session, id: int, context: FirmContext) -> Optional[ModelType]:
        """
        Retrieve a single record by ID within the acting firm.

        Args:
            db: Database session
            id: Record ID
            context: Resolved firm context

        Returns:
            Model instance or None if not found or owned by another firm
        """
        stmt = firm_scoped_select(self.model, context, self.model.id == id)
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 100,
        context: FirmContext
    ) -> List[ModelType]:
        """
        Retrieve multiple records with pagination and firm isolation.

        Args:
            db: Database session
            skip: Number of records to skip
            limit: Maximum number of records to return
            context: Resolved firm context

        Returns:
            List of model instances visible in the context
        """
        stmt = (
            firm_scoped_select(self.model, context)
            .order_by(self.model.id)
            .offset(skip)
            .limit(limit)
        )
        result = db.execute(stmt)
        return list(result.scalars().all())

    def create(
        self,
        db: Session,
        *,
        obj_in: CreateSchemaType,
        context: FirmContext
    ) -> ModelType:
        """
        Create a new record owned by the acting firm.

        Raises:
            FirmContextRequired: platform admin without a selected firm
        """
        firm_id = require_concrete_firm(context)
        obj_data = obj_in.model_dump()
        db_obj = self.model(firm_id=firm_id, **obj_data)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(
        self,
        db: Session,
        *,
        db_obj: ModelType,
        obj_in: UpdateSchemaType | Dict[str, Any]
    ) -> ModelType:
        """
        Update an existing record.

        Note: This method assumes the db_obj was already retrieved using
        get(), which ensures firm isolation. ``firm_id`` is never
        updated through this path.
        """
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)

        for field, value in update_data.items():
            if field == "firm_id":
                continue
            setattr(db_obj, field, value)

        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def deactivate(self, db: Session, *, db_obj: ModelType) -> ModelType:
        """
        Soft delete a record obtained through get().

        Firm-owned rows are never removed; the model must carry an
        ``is_active`` column.
        """
        if not hasattr(self.model, "is_active"):
            raise TypeError(f"{self.model.__name__} has no is_active column and cannot be deactivated")
        return self.update(db=db, db_obj=db_obj, obj_in={"is_active": False})
