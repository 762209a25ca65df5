from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.firm import Firm
from app.schemas.firm import FirmCreate, FirmUpdate


class CRUDFirm:
    """
    CRUD operations for Firm model.

    Firm doesn't have firm_id (it IS the firm), so we don't inherit
    from CRUDBase. Firms are only ever deactivated, never deleted.
    """

    def __init__(self):
        self.model = Firm

    def get(self, db: Session, firm_id: int) -> Optional[Firm]:
        stmt = select(Firm).where(Firm.id == firm_id)
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: int = 100,
        is_active: Optional[bool] = None
    ) -> List[Firm]:
        stmt = select(Firm)
        if is_active is not None:
            stmt = stmt.where(Firm.is_active.is_(is_active))
        stmt = stmt.order_by(Firm.name.asc(), Firm.id.asc()).offset(skip).limit(limit)
        result = db.execute(stmt)
        return list(result.scalars().all())

    def create(self, db: Session, *, obj_in: FirmCreate) -> Firm:
        db_obj = Firm(**obj_in.model_dump(), is_active=True)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def update(self, db: Session, *, db_obj: Firm, obj_in: FirmUpdate) -> Firm:
        for field, value in obj_in.model_dump(exclude_unset=True).items():
            setattr(db_obj, field, value)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def deactivate(self, db: Session, *, db_obj: Firm) -> Firm:
        db_obj.is_active = False
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


# Create singleton instance
firm = CRUDFirm()
