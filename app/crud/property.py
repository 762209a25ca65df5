from app.crud.base import CRUDBase
from app.models.property import Property
from app.schemas.property import PropertyCreate, PropertyUpdate


class CRUDProperty(CRUDBase[Property, PropertyCreate, PropertyUpdate]):
    """
    CRUD operations for Property model.

    Inherits all standard firm-scoped CRUD operations from CRUDBase.
    """
    pass


# Create a singleton instance
property = CRUDProperty(Property)
