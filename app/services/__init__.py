from app.services.auth import auth_service
from app.services.firm import firm_service
from app.services.property import property_service
from .contacts import owner_service, tenant_service
from .user_management import user_management_service

__all__ = [
    "auth_service",
    "firm_service",
    "property_service",
    "owner_service",
    "tenant_service",
    "user_management_service",
]
