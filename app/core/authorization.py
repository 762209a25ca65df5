from typing import Union
from app.core.exceptions import InsufficientRole
from app.core.roles import Role, UNKNOWN_ROLE_LEVEL, role_level
from app.core.tenant_context import FirmContext


def is_authorized(context: FirmContext, required_role: Union[Role, str]) -> bool:
    """
    Compare the caller's role level with the level an operation needs.

    Platform admins are always allowed. Otherwise an unrecognized role on
    either side is denied outright; recognized roles are granted when the
    caller's level is at least the required one.
    """
    if context.can_access_all_firms:
        return True

    user_level = role_level(context.role)
    required_level = role_level(required_role)
    if user_level == UNKNOWN_ROLE_LEVEL or required_level == UNKNOWN_ROLE_LEVEL:
        return False

    return user_level >= required_level


def authorize(context: FirmContext, required_role: Union[Role, str]) -> None:
    """Raise InsufficientRole unless ``is_authorized`` allows the call."""
    if not is_authorized(context, required_role):
        required = Role.parse(required_role)
        raise InsufficientRole(
            firm_id=context.firm_id,
            role=context.role.value if context.role else None,
            required_role=required.value if required else str(required_role),
        )
