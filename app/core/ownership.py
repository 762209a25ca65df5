import enum
from typing import Any, List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from app.database import MAX_INTEGER_ID
from app.models.firm_assignment import FirmAssignment
from app.models.owner import Owner
from app.models.property import Property
from app.models.tenant import Tenant
from app.models.user import User
from app.core.exceptions import EntityNotFound, FirmContextRequired, OwnershipMismatch
from app.core.tenant_context import FirmContext


class EntityType(str, enum.Enum):
    property = "property"
    tenant = "tenant"
    owner = "owner"
    user = "user"


# Entities owned by exactly one firm through their own firm_id column
_SINGLE_FIRM_MODELS = {
    EntityType.property: Property,
    EntityType.tenant: Tenant,
    EntityType.owner: Owner,
}


def coerce_entity_id(raw: Any) -> Optional[int]:
    """Positive integer id, or None for anything malformed."""
    if isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if 0 < value <= MAX_INTEGER_ID else None


class OwnershipValidator:
    """
    Check that an entity targeted by a request belongs to the acting firm.

    Existence is checked before ownership so the two failures stay
    distinguishable internally; the HTTP layer reports both the same way.
    """

    def __init__(self, db: Session):
        self.db = db

    def validate(self, entity_type: EntityType, entity_id: Any, context: FirmContext) -> None:
        if context.can_access_all_firms:
            return

        if context.firm_id is None:
            raise FirmContextRequired()

        entity_type = EntityType(entity_type)
        parsed_id = coerce_entity_id(entity_id)
        if parsed_id is None:
            raise EntityNotFound(entity_type=entity_type.value, entity_id=entity_id)

        firm_ids = self.owning_firm_ids(entity_type, parsed_id)
        if context.firm_id not in firm_ids:
            raise OwnershipMismatch(
                entity_type=entity_type.value,
                entity_id=parsed_id,
                firm_id=context.firm_id,
            )

    def owning_firm_ids(self, entity_type: EntityType, entity_id: int) -> List[int]:
        """
        Firms that own the entity.

        Users may belong to several firms (one per active assignment);
        every other entity has exactly one owning firm.

        Raises:
            EntityNotFound: the entity does not exist at all
        """
        if entity_type is EntityType.user:
            if self.db.get(User, entity_id) is None:
                raise EntityNotFound(entity_type=entity_type.value, entity_id=entity_id)
            stmt = (
                select(FirmAssignment.firm_id)
                .where(
                    FirmAssignment.user_id == entity_id,
                    FirmAssignment.is_active.is_(True),
                )
                .distinct()
            )
            return list(self.db.execute(stmt).scalars().all())

        model = _SINGLE_FIRM_MODELS[entity_type]
        stmt = select(model.firm_id).where(model.id == entity_id)
        row = self.db.execute(stmt).first()
        if row is None:
            raise EntityNotFound(entity_type=entity_type.value, entity_id=entity_id)
        return [row.firm_id]
