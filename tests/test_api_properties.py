import pytest

from tests.fixtures_data import DataFactory

headers = DataFactory.auth_headers


def _accountant_in(factory, firm):
    accountant = factory.user(user_type="accountant")
    factory.assign(accountant, firm, "accountant")
    return accountant


def test_member_lists_only_own_firm_properties(client, factory):
    firm_7 = factory.firm()
    firm_8 = factory.firm()
    factory.property(firm_7, name="Seven Oaks")
    factory.property(firm_8, name="Eight Mile")
    accountant = _accountant_in(factory, firm_7)

    response = client.get("/api/properties", headers=headers(accountant))

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Seven Oaks"]


def test_platform_admin_without_firm_sees_all_firms(client, factory):
    admin = factory.user(user_type="admin")
    factory.property(factory.firm(), name="A")
    factory.property(factory.firm(), name="B")

    response = client.get("/api/properties", headers=headers(admin))

    assert response.status_code == 200
    assert sorted(p["name"] for p in response.json()) == ["A", "B"]


def test_platform_admin_selecting_firm_by_query_parameter(client, factory):
    admin = factory.user(user_type="admin")
    firm_a = factory.firm()
    factory.property(firm_a, name="A")
    factory.property(factory.firm(), name="B")

    response = client.get(f"/api/properties?firm_id={firm_a.id}", headers=headers(admin))

    assert [p["name"] for p in response.json()] == ["A"]


def test_conflicting_firm_selectors_are_rejected(client, factory):
    admin = factory.user(user_type="admin")
    firm_a = factory.firm()
    firm_b = factory.firm()

    response = client.get(f"/api/properties?firm_id={firm_b.id}", headers=headers(admin, firm_id=firm_a.id))

    assert response.status_code == 400
    assert response.json()["code"] == "firm_selection_invalid"


def test_requesting_unassigned_firm_is_forbidden(client, factory):
    firm_7 = factory.firm()
    firm_9 = factory.firm()
    accountant = _accountant_in(factory, firm_7)

    response = client.get("/api/properties", headers=headers(accountant, firm_id=firm_9.id))

    assert response.status_code == 403
    assert response.json()["code"] == "firm_access_denied"


def test_cross_firm_property_looks_exactly_like_missing_one(client, factory):
    firm_7 = factory.firm()
    firm_8 = factory.firm()
    foreign = factory.property(firm_8)
    accountant = _accountant_in(factory, firm_7)

    cross_firm = client.get(f"/api/properties/{foreign.id}", headers=headers(accountant))
    missing = client.get("/api/properties/987654", headers=headers(accountant))

    assert cross_firm.status_code == missing.status_code == 404
    assert cross_firm.json() == missing.json()


def test_accountant_creates_property_in_acting_firm(client, factory):
    firm = factory.firm()
    accountant = _accountant_in(factory, firm)

    response = client.post("/api/properties", headers=headers(accountant), json={"name": "Maple Court", "total_units": 12})

    assert response.status_code == 201
    assert response.json()["firm_id"] == firm.id


def test_firm_id_in_payload_is_ignored(client, factory):
    firm = factory.firm()
    other = factory.firm()
    accountant = _accountant_in(factory, firm)

    response = client.post(
        "/api/properties",
        headers=headers(accountant),
        json={"name": "Sneaky", "firm_id": other.id},
    )

    assert response.status_code == 201
    assert response.json()["firm_id"] == firm.id


def test_vendor_cannot_create_property(client, factory):
    firm = factory.firm()
    vendor = factory.user(user_type="vendor")
    factory.assign(vendor, firm, "vendor")

    response = client.post("/api/properties", headers=headers(vendor), json={"name": "Nope"})

    assert response.status_code == 403
    assert response.json()["code"] == "insufficient_role"


def test_platform_admin_must_select_firm_to_create(client, factory):
    admin = factory.user(user_type="admin")
    firm = factory.firm()

    without_firm = client.post("/api/properties", headers=headers(admin), json={"name": "Nowhere"})
    with_firm = client.post("/api/properties", headers=headers(admin, firm_id=firm.id), json={"name": "Somewhere"})

    assert without_firm.status_code == 400
    assert without_firm.json()["code"] == "firm_context_required"
    assert with_firm.status_code == 201
    assert with_firm.json()["firm_id"] == firm.id


def test_owner_updates_property_but_tenant_cannot(client, factory):
    firm = factory.firm()
    prop = factory.property(firm)
    owner = factory.user(user_type="owner")
    renter = factory.user(user_type="tenant")
    factory.assign(owner, firm, "owner")
    factory.assign(renter, firm, "tenant")

    by_owner = client.put(f"/api/properties/{prop.id}", headers=headers(owner), json={"city": "Lisbon"})
    by_tenant = client.put(f"/api/properties/{prop.id}", headers=headers(renter), json={"city": "Porto"})

    assert by_owner.status_code == 200
    assert by_owner.json()["city"] == "Lisbon"
    assert by_tenant.status_code == 403


def test_owner_cannot_update_other_firms_property(client, factory):
    firm = factory.firm()
    foreign = factory.property(factory.firm())
    owner = factory.user(user_type="owner")
    factory.assign(owner, firm, "owner")

    response = client.put(f"/api/properties/{foreign.id}", headers=headers(owner), json={"city": "Lisbon"})

    assert response.status_code == 404


def test_property_owner_reference_must_be_in_same_firm(client, factory):
    firm = factory.firm()
    foreign_owner = factory.owner(factory.firm())
    accountant = _accountant_in(factory, firm)

    response = client.post(
        "/api/properties",
        headers=headers(accountant),
        json={"name": "Linked", "owner_id": foreign_owner.id},
    )

    assert response.status_code == 400


def test_delete_deactivates_property(client, factory):
    firm = factory.firm()
    prop = factory.property(firm)
    accountant = _accountant_in(factory, firm)

    response = client.delete(f"/api/properties/{prop.id}", headers=headers(accountant))

    assert response.status_code == 200
    assert response.json()["is_active"] is False


def test_unknown_stored_role_fails_closed(client, factory):
    firm = factory.firm()
    user = factory.user(user_type="owner")
    factory.assign(user, firm, "superuser")

    response = client.post("/api/properties", headers=headers(user), json={"name": "Nope"})

    assert response.status_code == 403


def test_tenant_reference_to_foreign_property_is_rejected(client, factory):
    firm = factory.firm()
    foreign = factory.property(factory.firm())
    accountant = _accountant_in(factory, firm)

    response = client.post(
        "/api/tenants",
        headers=headers(accountant),
        json={"name": "Riley", "property_id": foreign.id},
    )

    assert response.status_code == 400


def test_owners_and_tenants_are_scoped(client, factory):
    firm = factory.firm()
    other = factory.firm()
    factory.owner(firm, name="Mine")
    factory.owner(other, name="Theirs")
    foreign_tenant = factory.tenant(other)
    accountant = _accountant_in(factory, firm)

    owners = client.get("/api/owners", headers=headers(accountant))
    tenant = client.get(f"/api/tenants/{foreign_tenant.id}", headers=headers(accountant))

    assert [o["name"] for o in owners.json()] == ["Mine"]
    assert tenant.status_code == 404


@pytest.mark.parametrize("payload", [{"name": None}, {"total_units": None}])
def test_explicit_null_for_required_property_field_is_rejected(client, factory, payload):
    firm = factory.firm()
    prop = factory.property(firm, name="Harbor View")
    owner = factory.user(user_type="owner")
    factory.assign(owner, firm, "owner")

    response = client.put(f"/api/properties/{prop.id}", headers=headers(owner), json=payload)
    after = client.get(f"/api/properties/{prop.id}", headers=headers(owner))

    assert response.status_code == 422
    assert after.json()["name"] == "Harbor View"


def test_out_of_range_property_id_is_not_found(client, factory):
    firm = factory.firm()
    accountant = _accountant_in(factory, firm)

    response = client.get(f"/api/properties/{2**31}", headers=headers(accountant))

    assert response.status_code == 404


def test_accountant_updates_tenant(client, factory):
    firm = factory.firm()
    prop = factory.property(firm)
    renter = factory.tenant(firm)
    accountant = _accountant_in(factory, firm)

    response = client.put(
        f"/api/tenants/{renter.id}",
        headers=headers(accountant),
        json={"phone": "555-0100", "property_id": prop.id},
    )

    assert response.status_code == 200
    assert response.json()["phone"] == "555-0100"
    assert response.json()["property_id"] == prop.id


def test_tenant_update_cannot_point_at_foreign_property(client, factory):
    firm = factory.firm()
    foreign = factory.property(factory.firm())
    renter = factory.tenant(firm)
    accountant = _accountant_in(factory, firm)

    response = client.put(f"/api/tenants/{renter.id}", headers=headers(accountant), json={"property_id": foreign.id})

    assert response.status_code == 400


def test_tenant_update_rejects_null_name(client, factory):
    firm = factory.firm()
    renter = factory.tenant(firm)
    accountant = _accountant_in(factory, firm)

    response = client.put(f"/api/tenants/{renter.id}", headers=headers(accountant), json={"name": None})

    assert response.status_code == 422


def test_other_firms_tenant_cannot_be_updated_or_deactivated(client, factory):
    firm = factory.firm()
    foreign = factory.tenant(factory.firm())
    accountant = _accountant_in(factory, firm)

    updated = client.put(f"/api/tenants/{foreign.id}", headers=headers(accountant), json={"phone": "555"})
    deleted = client.delete(f"/api/tenants/{foreign.id}", headers=headers(accountant))

    assert updated.status_code == deleted.status_code == 404


def test_owner_role_cannot_change_tenants(client, factory):
    firm = factory.firm()
    renter = factory.tenant(firm)
    owner = factory.user(user_type="owner")
    factory.assign(owner, firm, "owner")

    response = client.delete(f"/api/tenants/{renter.id}", headers=headers(owner))

    assert response.status_code == 403


def test_delete_deactivates_tenant_and_keeps_row(client, factory):
    firm = factory.firm()
    renter = factory.tenant(firm)
    accountant = _accountant_in(factory, firm)

    deleted = client.delete(f"/api/tenants/{renter.id}", headers=headers(accountant))
    fetched = client.get(f"/api/tenants/{renter.id}", headers=headers(accountant))

    assert deleted.status_code == 200
    assert deleted.json()["is_active"] is False
    assert fetched.status_code == 200
    assert fetched.json()["is_active"] is False
