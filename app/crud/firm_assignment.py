from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.models.firm_assignment import FirmAssignment


class CRUDFirmAssignment:
    """
    CRUD operations for the User x Firm edge.

    Rows are never deleted: removal deactivates and reassignment
    reactivates the same row, keeping history and the one-active-role
    per firm rule.
    """

    def __init__(self):
        self.model = FirmAssignment

    def get(self, db: Session, *, user_id: int, firm_id: int) -> Optional[FirmAssignment]:
        stmt = select(FirmAssignment).where(
            FirmAssignment.user_id == user_id,
            FirmAssignment.firm_id == firm_id,
        )
        result = db.execute(stmt)
        return result.scalar_one_or_none()

    def upsert(
        self,
        db: Session,
        *,
        user_id: int,
        firm_id: int,
        role: str,
        access_level: str = "standard",
        assigned_by: Optional[int] = None,
        commit: bool = True
    ) -> FirmAssignment:
        """
        Assign a user to a firm, replacing the role of an existing edge.

        Returns:
            The created or reactivated assignment
        """
        db_obj = self.get(db, user_id=user_id, firm_id=firm_id)
        if db_obj is None:
            db_obj = FirmAssignment(user_id=user_id, firm_id=firm_id)

        db_obj.role = role
        db_obj.access_level = access_level
        db_obj.is_active = True
        db_obj.assigned_by = assigned_by
        db.add(db_obj)

        if commit:
            db.commit()
            db.refresh(db_obj)
        else:
            db.flush()
        return db_obj

    def deactivate(self, db: Session, *, db_obj: FirmAssignment) -> FirmAssignment:
        db_obj.is_active = False
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj


# Create singleton instance
firm_assignment = CRUDFirmAssignment()
