from typing import List, Optional
from fastapi import HTTPException, status
from sqlalchemy.orm import Session
from app.crud import firm as firm_crud
from app.models.firm import Firm
from app.models.user import User
from app.schemas.firm import FirmCreate, FirmUpdate
from app.core.logging_config import logger


class FirmService:
    """Platform-admin management of firms (the tenant organizations)."""

    def __init__(self):
        self.crud = firm_crud

    def get_firm(self, db: Session, firm_id: int) -> Firm:
        firm = self.crud.get(db, firm_id=firm_id)
        if not firm:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Firm not found"
            )
        return firm

    def get_firms(
        self,
        db: Session,
        skip: int = 0,
        limit: int = 100,
        is_active: Optional[bool] = None
    ) -> List[Firm]:
        return self.crud.get_multi(db, skip=skip, limit=limit, is_active=is_active)

    def create_firm(self, db: Session, firm_data: FirmCreate, actor: User) -> Firm:
        firm = self.crud.create(db, obj_in=firm_data)
        logger.info(f"Firm created: id={firm.id}, name={firm.name}, by user_id={actor.id}")
        return firm

    def update_firm(self, db: Session, firm_id: int, firm_data: FirmUpdate, actor: User) -> Firm:
        firm = self.get_firm(db, firm_id)
        firm = self.crud.update(db, db_obj=firm, obj_in=firm_data)
        logger.info(f"Firm updated: id={firm.id}, by user_id={actor.id}")
        return firm

    def deactivate_firm(self, db: Session, firm_id: int, actor: User) -> Firm:
        """
        Soft delete a firm.

        Assignments stay in place for history; the firm context resolver
        ignores assignments to inactive firms.
        """
        firm = self.get_firm(db, firm_id)
        firm = self.crud.deactivate(db, db_obj=firm)
        logger.info(f"Firm deactivated: id={firm.id}, by user_id={actor.id}")
        return firm


# Create a singleton instance
firm_service = FirmService()
