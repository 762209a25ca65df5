from app.crud.base import CRUDBase
from app.models.owner import Owner
from app.schemas.owner import OwnerCreate, OwnerUpdate


class CRUDOwner(CRUDBase[Owner, OwnerCreate, OwnerUpdate]):
    pass


# Create a singleton instance
owner = CRUDOwner(Owner)
