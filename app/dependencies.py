from fastapi import Depends, Request
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.core.config import settings
from app.core.exceptions import TokenMalformed
from app.core.firm_selection import FirmSelection, parse_firm_selection
from app.core.security import verify_token, token_subject
from app.core.tenant_context import FirmContext, FirmContextResolver
from app.core.logging_config import logger
from app.services.user_directory import UserDirectory


def _bearer_token(request: Request) -> str:
    authorization = request.headers.get("Authorization")
    if not authorization:
        raise TokenMalformed("Access token required")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise TokenMalformed("Authorization header must use the Bearer scheme")
    return token.strip()


def get_current_user(
    request: Request,
    db: Session = Depends(get_db)
) -> User:
    """
    Authenticate the request and return the acting User.

    The bearer token is verified first (signature, expiry, issuer and
    audience), then its subject is looked up so that deactivated or
    deleted accounts are rejected even with an unexpired token.

    Args:
        request: FastAPI Request to extract Authorization header
        db: Database session

    Returns:
        Active User, also attached to ``request.state.current_user``

    Raises:
        TokenExpired, TokenMalformed: token could not be verified
        UserInactiveOrNotFound: subject is unknown or inactive
    """
    token = _bearer_token(request)
    payload = verify_token(token)
    user = UserDirectory(db).resolve(token_subject(payload))

    request.state.current_user = user
    return user


def get_firm_selection(request: Request) -> FirmSelection:
    """Read the optional firm selector from the header and query string."""
    return parse_firm_selection(
        request.headers.get(settings.FIRM_HEADER_NAME),
        request.query_params.get(settings.FIRM_QUERY_PARAM),
    )


def get_firm_context(
    request: Request,
    current_user: User = Depends(get_current_user),
    selection: FirmSelection = Depends(get_firm_selection),
    db: Session = Depends(get_db),
) -> FirmContext:
    """
    FastAPI dependency that resolves the firm context for the request.

    Resolution is repeated on every request; the result is attached to
    ``request.state.firm_context`` for the rest of request handling.
    """
    context = FirmContextResolver(db).resolve(current_user, selection)
    logger.debug(
        f"Firm context resolved: user_id={current_user.id}, firm_id={context.firm_id}, "
        f"role={context.role.value if context.role else None}, all_firms={context.can_access_all_firms}"
    )
    request.state.firm_context = context
    return context
