import enum
from typing import Optional, Union


class Role(str, enum.Enum):
    """
    Closed set of firm roles.

    The same names are used for ``User.user_type``; a user whose type is
    ``admin`` is a platform administrator and bypasses firm assignments.
    """
    admin = "admin"
    accountant = "accountant"
    owner = "owner"
    tenant = "tenant"
    vendor = "vendor"
    maintenance_staff = "maintenance_staff"

    @property
    def level(self) -> int:
        return ROLE_LEVELS[self]

    @classmethod
    def parse(cls, value: Union["Role", str, None]) -> Optional["Role"]:
        """Return the matching Role, or None for anything unrecognized."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# Total order: admin > accountant > owner > tenant > vendor > maintenance_staff
ROLE_LEVELS = {
    Role.admin: 6,
    Role.accountant: 5,
    Role.owner: 4,
    Role.tenant: 3,
    Role.vendor: 2,
    Role.maintenance_staff: 1,
}

UNKNOWN_ROLE_LEVEL = 0

PLATFORM_ADMIN_TYPE = Role.admin


def role_level(value: Union[Role, str, None]) -> int:
    role = Role.parse(value)
    if role is None:
        return UNKNOWN_ROLE_LEVEL
    return role.level


def is_platform_admin(user) -> bool:
    return Role.parse(getattr(user, "user_type", None)) is PLATFORM_ADMIN_TYPE
