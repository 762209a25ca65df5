from datetime import datetime
from itertools import count
from typing import Optional

from sqlalchemy.orm import Session

from app.core.security import create_access_token, get_password_hash
from app.models.firm import Firm
from app.models.firm_assignment import FirmAssignment
from app.models.owner import Owner
from app.models.property import Property
from app.models.tenant import Tenant
from app.models.user import User

DEFAULT_PASSWORD = "correct-horse-battery"

_sequence = count(1)


class DataFactory:
    """Small helpers that write committed rows for a test."""

    def __init__(self, db: Session):
        self.db = db
        self._password_hash = None

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def firm(self, name: Optional[str] = None, is_active: bool = True) -> Firm:
        n = next(_sequence)
        return self._save(Firm(name=name or f"Firm {n}", is_active=is_active))

    def user(self, user_type: str = "tenant", is_active: bool = True, username: Optional[str] = None) -> User:
        n = next(_sequence)
        if self._password_hash is None:
            self._password_hash = get_password_hash(DEFAULT_PASSWORD)
        return self._save(
            User(
                username=username or f"user{n}",
                email=f"user{n}@acme-realty.com",
                hashed_password=self._password_hash,
                user_type=user_type,
                is_active=is_active,
            )
        )

    def assign(
        self,
        user: User,
        firm: Firm,
        role: str,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
    ) -> FirmAssignment:
        assignment = FirmAssignment(user_id=user.id, firm_id=firm.id, role=role, is_active=is_active)
        if created_at is not None:
            assignment.created_at = created_at
        return self._save(assignment)

    def property(self, firm: Firm, name: str = "Harbor View") -> Property:
        return self._save(Property(firm_id=firm.id, name=name))

    def owner(self, firm: Firm, name: str = "Dana Owner") -> Owner:
        return self._save(Owner(firm_id=firm.id, name=name))

    def tenant(self, firm: Firm, name: str = "Riley Renter") -> Tenant:
        return self._save(Tenant(firm_id=firm.id, name=name))

    @staticmethod
    def token_for(user: User) -> str:
        return create_access_token({"sub": user.id, "user_type": user.user_type})

    @classmethod
    def auth_headers(cls, user: User, firm_id: Optional[int] = None) -> dict:
        headers = {"Authorization": f"Bearer {cls.token_for(user)}"}
        if firm_id is not None:
            headers["X-Firm-Id"] = str(firm_id)
        return headers
