from typing import Union
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.core.authorization import authorize
from app.core.exceptions import InsufficientRole
from app.core.ownership import EntityType, OwnershipValidator
from app.core.roles import Role, is_platform_admin
from app.core.tenant_context import FirmContext
from app.dependencies import get_current_user, get_firm_context


def require_firm_role(required_role: Union[Role, str]):
    """
    Dependency factory: resolve the firm context and require a minimum role.

    The role name is checked when the route is declared, so a typo fails
    at import time instead of silently denying every request.
    """
    role = Role.parse(required_role)
    if role is None:
        raise ValueError(f"Unknown role: {required_role!r}")

    def dependency(context: FirmContext = Depends(get_firm_context)) -> FirmContext:
        authorize(context, role)
        return context

    return dependency


def require_ownership(entity_type: EntityType, path_param: str = "id"):
    """
    Dependency factory: the entity named by ``path_param`` must belong to
    the acting firm.
    """
    entity_type = EntityType(entity_type)

    def dependency(
        request: Request,
        context: FirmContext = Depends(get_firm_context),
        db: Session = Depends(get_db),
    ) -> FirmContext:
        OwnershipValidator(db).validate(
            entity_type,
            request.path_params.get(path_param),
            context,
        )
        return context

    return dependency


def require_platform_admin(current_user: User = Depends(get_current_user)) -> User:
    """Only platform administrators may manage firms and users."""
    if not is_platform_admin(current_user):
        raise InsufficientRole(
            user_id=current_user.id,
            role=current_user.user_type,
            required_role=Role.admin.value,
        )
    return current_user
