from typing import Any, Type
from sqlalchemy import Select, select
from app.core.exceptions import FirmContextRequired
from app.core.tenant_context import FirmContext


def firm_column(model: Type[Any]):
    column = getattr(model, "firm_id", None)
    if column is None:
        raise TypeError(f"{model.__name__} has no firm_id column and cannot be firm-scoped")
    return column


def scope_to_firm(stmt: Select, model: Type[Any], context: FirmContext) -> Select:
    """
    Constrain a SELECT to rows owned by the context's firm.

    The predicate is added with ``Select.where``, which ANDs it onto any
    existing criteria or starts the WHERE clause when there is none.
    Only the platform-admin "all firms" state leaves the statement as is;
    any other context without a firm is rejected.
    """
    column = firm_column(model)
    if context.firm_id is None:
        if context.is_all_firms:
            return stmt
        raise FirmContextRequired()
    return stmt.where(column == context.firm_id)


def firm_scoped_select(model: Type[Any], context: FirmContext, *criteria) -> Select:
    """Build ``SELECT model WHERE <criteria> AND firm_id = :firm`` in one step."""
    stmt = select(model)
    if criteria:
        stmt = stmt.where(*criteria)
    return scope_to_firm(stmt, model, context)


def require_concrete_firm(context: FirmContext) -> int:
    """Return the acting firm id for writes, which always need one."""
    if context.firm_id is None:
        raise FirmContextRequired()
    return context.firm_id
