from datetime import datetime
from types import SimpleNamespace

import pytest

from app.core.exceptions import FirmAccessDenied, FirmInactive, FirmNotFound, NoFirmAccess
from app.core.firm_selection import NoFirmRequested, RequestedFirm
from app.core.roles import Role
from app.core.tenant_context import FirmContextResolver


def test_platform_admin_without_selection_can_access_all_firms(db, factory):
    admin = factory.user(user_type="admin")

    context = FirmContextResolver(db).resolve(admin, NoFirmRequested())

    assert context.firm_id is None
    assert context.can_access_all_firms is True
    assert context.is_all_firms
    assert context.role is Role.admin


def test_platform_admin_selecting_a_firm(db, factory):
    admin = factory.user(user_type="admin")
    firm = factory.firm(name="Acme Realty")

    context = FirmContextResolver(db).resolve(admin, RequestedFirm(firm.id))

    assert context.firm_id == firm.id
    assert context.firm_name == "Acme Realty"
    assert context.role is Role.admin
    assert context.can_access_all_firms is True
    assert not context.is_all_firms


def test_platform_admin_selecting_missing_firm(db, factory):
    admin = factory.user(user_type="admin")

    with pytest.raises(FirmNotFound):
        FirmContextResolver(db).resolve(admin, RequestedFirm(999))


def test_platform_admin_selecting_inactive_firm(db, factory):
    admin = factory.user(user_type="admin")
    firm = factory.firm(is_active=False)

    with pytest.raises(FirmInactive):
        FirmContextResolver(db).resolve(admin, RequestedFirm(firm.id))


def test_platform_admin_bypasses_assignment_lookup(db):
    # No rows exist at all; the resolver must not need any
    admin = SimpleNamespace(id=1, user_type="admin")

    context = FirmContextResolver(db).resolve(admin, NoFirmRequested())

    assert context.can_access_all_firms


def test_user_without_assignments_has_no_firm_access(db, factory):
    user = factory.user(user_type="owner")

    with pytest.raises(NoFirmAccess):
        FirmContextResolver(db).resolve(user, NoFirmRequested())


def test_inactive_assignments_and_inactive_firms_are_ignored(db, factory):
    user = factory.user(user_type="owner")
    factory.assign(user, factory.firm(), "owner", is_active=False)
    factory.assign(user, factory.firm(is_active=False), "owner")

    with pytest.raises(NoFirmAccess):
        FirmContextResolver(db).resolve(user, NoFirmRequested())


def test_accountant_requesting_unassigned_firm_is_denied(db, factory):
    accountant = factory.user(user_type="accountant")
    firm_7 = factory.firm()
    firm_9 = factory.firm()
    factory.assign(accountant, firm_7, "accountant")

    with pytest.raises(FirmAccessDenied):
        FirmContextResolver(db).resolve(accountant, RequestedFirm(firm_9.id))


def test_requesting_nonexistent_firm_gives_same_denial(db, factory):
    accountant = factory.user(user_type="accountant")
    factory.assign(accountant, factory.firm(), "accountant")

    with pytest.raises(FirmAccessDenied):
        FirmContextResolver(db).resolve(accountant, RequestedFirm(424242))


def test_requested_firm_uses_that_assignments_role(db, factory):
    user = factory.user(user_type="owner")
    firm_a = factory.firm()
    firm_b = factory.firm()
    factory.assign(user, firm_a, "owner")
    factory.assign(user, firm_b, "accountant")

    context = FirmContextResolver(db).resolve(user, RequestedFirm(firm_b.id))

    assert context.firm_id == firm_b.id
    assert context.role is Role.accountant
    assert context.access_level == "standard"
    assert context.can_access_all_firms is False
    assert [a.firm_id for a in context.assignments] == [firm_a.id, firm_b.id]


def test_default_firm_is_oldest_assignment_and_stable(db, factory):
    owner = factory.user(user_type="owner")
    firm_3 = factory.firm()
    firm_5 = factory.firm()
    # Inserted second but assigned first: creation time decides, not row order
    factory.assign(owner, firm_5, "owner", created_at=datetime(2024, 2, 1))
    factory.assign(owner, firm_3, "owner", created_at=datetime(2024, 1, 1))

    resolver = FirmContextResolver(db)
    first = resolver.resolve(owner, NoFirmRequested())
    second = resolver.resolve(owner, NoFirmRequested())

    assert first.firm_id == firm_3.id
    assert (second.firm_id, second.role) == (first.firm_id, first.role)


def test_default_firm_ties_break_on_assignment_id(db, factory):
    owner = factory.user(user_type="owner")
    firm_3 = factory.firm()
    firm_5 = factory.firm()
    same_time = datetime(2024, 1, 1)
    factory.assign(owner, firm_3, "owner", created_at=same_time)
    factory.assign(owner, firm_5, "owner", created_at=same_time)

    for _ in range(3):
        assert FirmContextResolver(db).resolve(owner, NoFirmRequested()).firm_id == firm_3.id


def test_revoked_assignment_takes_effect_on_next_resolution(db, factory):
    user = factory.user(user_type="tenant")
    firm = factory.firm()
    assignment = factory.assign(user, firm, "tenant")
    resolver = FirmContextResolver(db)
    assert resolver.resolve(user, RequestedFirm(firm.id)).firm_id == firm.id

    assignment.is_active = False
    db.commit()

    with pytest.raises(NoFirmAccess):
        resolver.resolve(user, RequestedFirm(firm.id))


def test_unknown_stored_role_resolves_to_none(db, factory):
    user = factory.user(user_type="owner")
    factory.assign(user, factory.firm(), "superuser")

    context = FirmContextResolver(db).resolve(user, NoFirmRequested())

    assert context.role is None
