import pytest

from app.core.roles import Role
from app.core.tenant_context import FirmContext
from app.crud import owner as owner_crud
from app.crud import tenant as tenant_crud
from app.models.tenant import Tenant


def _member(firm_id: int) -> FirmContext:
    return FirmContext(firm_id=firm_id, role=Role.accountant, can_access_all_firms=False)


def test_deactivate_keeps_the_row(db, factory):
    firm = factory.firm()
    renter = factory.tenant(firm)

    tenant_crud.deactivate(db, db_obj=renter)

    stored = db.get(Tenant, renter.id)
    assert stored is not None
    assert stored.is_active is False
    assert tenant_crud.get(db, id=renter.id, context=_member(firm.id)) is not None


def test_models_without_active_flag_cannot_be_deactivated(db, factory):
    firm = factory.firm()
    owner = factory.owner(firm)

    with pytest.raises(TypeError):
        owner_crud.deactivate(db, db_obj=owner)
