from app.crud.base import CRUDBase
from .firm import firm
from .firm_assignment import firm_assignment
from .owner import owner
from .property import property
from .tenant import tenant
from .user import user

__all__ = ["CRUDBase", "firm", "firm_assignment", "owner", "property", "tenant", "user"]
