from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.models.firm import Firm
from app.models.firm_assignment import FirmAssignment
from app.models.user import User
from app.core.exceptions import (
    FirmAccessDenied,
    FirmInactive,
    FirmNotFound,
    NoFirmAccess,
)
from app.core.firm_selection import FirmSelection, NoFirmRequested, RequestedFirm
from app.core.roles import Role, is_platform_admin


@dataclass(frozen=True)
class AssignmentSummary:
    firm_id: int
    firm_name: str
    role: Optional[Role]
    access_level: str


@dataclass(frozen=True)
class FirmContext:
    """
    The firm a request acts against and the caller's standing in it.

    ``firm_id`` is None only for a platform admin who did not select a
    firm; that is the single state in which unscoped queries are allowed.
    ``role`` is None when the stored assignment role is not a known Role,
    which every authorization check treats as a denial.
    """
    firm_id: Optional[int]
    role: Optional[Role]
    can_access_all_firms: bool
    access_level: Optional[str] = None
    firm_name: Optional[str] = None
    assignments: Tuple[AssignmentSummary, ...] = field(default_factory=tuple)

    @property
    def is_all_firms(self) -> bool:
        return self.can_access_all_firms and self.firm_id is None


class FirmContextResolver:
    """
    Resolve the acting firm for one request.

    Reads users' assignments and firms through the session it is given
    and keeps no state between calls, so a revoked assignment takes effect
    on the very next request.
    """

    def __init__(self, db: Session):
        self.db = db

    def resolve(self, user: User, selection: FirmSelection) -> FirmContext:
        if is_platform_admin(user):
            return self._resolve_platform_admin(selection)
        return self._resolve_member(user, selection)

    def load_assignments(self, user_id: int) -> List[AssignmentSummary]:
        """
        Active assignments to active firms, oldest assignment first.

        The explicit order makes the default firm reproducible.
        """
        stmt = (
            select(FirmAssignment, Firm)
            .join(Firm, FirmAssignment.firm_id == Firm.id)
            .where(
                FirmAssignment.user_id == user_id,
                FirmAssignment.is_active.is_(True),
                Firm.is_active.is_(True),
            )
            .order_by(FirmAssignment.created_at.asc(), FirmAssignment.id.asc())
        )
        rows = self.db.execute(stmt).all()
        return [
            AssignmentSummary(
                firm_id=assignment.firm_id,
                firm_name=firm.name,
                role=Role.parse(assignment.role),
                access_level=assignment.access_level,
            )
            for assignment, firm in rows
        ]

    def _resolve_platform_admin(self, selection: FirmSelection) -> FirmContext:
        if isinstance(selection, NoFirmRequested):
            return FirmContext(
                firm_id=None,
                role=Role.admin,
                can_access_all_firms=True,
                access_level="full",
            )

        firm = self.db.get(Firm, selection.firm_id)
        if firm is None:
            raise FirmNotFound(firm_id=selection.firm_id)
        if not firm.is_active:
            raise FirmInactive(firm_id=selection.firm_id)

        return FirmContext(
            firm_id=firm.id,
            role=Role.admin,
            can_access_all_firms=True,
            access_level="full",
            firm_name=firm.name,
        )

    def _resolve_member(self, user: User, selection: FirmSelection) -> FirmContext:
        assignments = self.load_assignments(user.id)
        if not assignments:
            raise NoFirmAccess(user_id=user.id)

        if isinstance(selection, RequestedFirm):
            acting = next(
                (a for a in assignments if a.firm_id == selection.firm_id),
                None,
            )
            if acting is None:
                # Same denial whether the firm exists or not
                raise FirmAccessDenied(user_id=user.id, firm_id=selection.firm_id)
        else:
            acting = assignments[0]

        return FirmContext(
            firm_id=acting.firm_id,
            role=acting.role,
            can_access_all_firms=False,
            access_level=acting.access_level,
            firm_name=acting.firm_name,
            assignments=tuple(assignments),
        )
