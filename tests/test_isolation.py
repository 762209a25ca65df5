import pytest
from sqlalchemy import select

from app.core.exceptions import FirmContextRequired
from app.core.isolation import firm_scoped_select, require_concrete_firm, scope_to_firm
from app.core.roles import Role
from app.core.tenant_context import FirmContext
from app.models.firm import Firm
from app.models.property import Property

ALL_FIRMS = FirmContext(firm_id=None, role=Role.admin, can_access_all_firms=True)


def _member(firm_id: int) -> FirmContext:
    return FirmContext(firm_id=firm_id, role=Role.accountant, can_access_all_firms=False)


def _compiled(stmt) -> str:
    return str(stmt.compile(compile_kwargs={"literal_binds": True})).lower()


def test_filter_is_added_when_query_has_none():
    sql = _compiled(scope_to_firm(select(Property), Property, _member(7)))

    assert "where property.firm_id = 7" in sql


def test_filter_is_conjoined_with_existing_criteria():
    stmt = select(Property).where(Property.name == "where the river bends")

    sql = _compiled(scope_to_firm(stmt, Property, _member(7)))

    assert "property.name = 'where the river bends' and property.firm_id = 7" in sql


def test_scoped_query_never_returns_other_firms_rows(db, factory):
    firm_1 = factory.firm()
    firm_2 = factory.firm()
    factory.property(firm_1, name="One A")
    factory.property(firm_1, name="One B")
    factory.property(firm_2, name="Two A")

    rows = db.execute(firm_scoped_select(Property, _member(firm_1.id))).scalars().all()
    unscoped = db.execute(select(Property)).scalars().all()

    assert len(unscoped) == 3
    assert {p.name for p in rows} == {"One A", "One B"}
    assert all(p.firm_id == firm_1.id for p in rows)


def test_extra_criteria_cannot_escape_the_firm(db, factory):
    firm_1 = factory.firm()
    firm_2 = factory.firm()
    other = factory.property(firm_2, name="Two A")

    stmt = firm_scoped_select(Property, _member(firm_1.id), Property.id == other.id)

    assert db.execute(stmt).scalars().all() == []


def test_all_firms_context_leaves_query_unscoped(db, factory):
    factory.property(factory.firm())
    factory.property(factory.firm())

    rows = db.execute(firm_scoped_select(Property, ALL_FIRMS)).scalars().all()

    assert len(rows) == 2


def test_admin_with_selected_firm_is_scoped(db, factory):
    firm_1 = factory.firm()
    factory.property(firm_1)
    factory.property(factory.firm())
    context = FirmContext(firm_id=firm_1.id, role=Role.admin, can_access_all_firms=True)

    rows = db.execute(firm_scoped_select(Property, context)).scalars().all()

    assert [p.firm_id for p in rows] == [firm_1.id]


def test_member_context_without_firm_is_rejected():
    context = FirmContext(firm_id=None, role=Role.owner, can_access_all_firms=False)

    with pytest.raises(FirmContextRequired):
        scope_to_firm(select(Property), Property, context)


def test_model_without_firm_column_cannot_be_scoped():
    with pytest.raises(TypeError):
        scope_to_firm(select(Firm), Firm, _member(1))


def test_writes_require_a_concrete_firm():
    assert require_concrete_firm(_member(4)) == 4
    with pytest.raises(FirmContextRequired):
        require_concrete_firm(ALL_FIRMS)
