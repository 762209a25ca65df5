from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from app.core.exceptions import (
    AuthorizationError,
    EntityNotFound,
    FirmAccessDenied,
    FirmContextRequired,
    FirmInactive,
    FirmNotFound,
    FirmSelectionInvalid,
    InsufficientRole,
    NoFirmAccess,
    OwnershipMismatch,
    TokenExpired,
    TokenMalformed,
    UserInactiveOrNotFound,
)
from app.core.logging_config import logger

# Public detail shared by "does not exist" and "exists in another firm"
RESOURCE_NOT_FOUND = ("resource_not_found", "Resource not found")

# error class -> (status code, public code, public detail)
ERROR_RESPONSES = {
    TokenExpired: (status.HTTP_401_UNAUTHORIZED, "token_expired", "Token expired"),
    TokenMalformed: (status.HTTP_401_UNAUTHORIZED, "invalid_token", "Could not validate credentials"),
    UserInactiveOrNotFound: (status.HTTP_401_UNAUTHORIZED, "invalid_token", "Could not validate credentials"),
    NoFirmAccess: (
        status.HTTP_403_FORBIDDEN,
        "no_firm_access",
        "User has no active firm assignments; contact an administrator",
    ),
    FirmAccessDenied: (status.HTTP_403_FORBIDDEN, "firm_access_denied", "User does not have access to requested firm"),
    FirmInactive: (status.HTTP_403_FORBIDDEN, "firm_inactive", "Firm is inactive"),
    InsufficientRole: (status.HTTP_403_FORBIDDEN, "insufficient_role", "Insufficient firm permissions"),
    FirmNotFound: (status.HTTP_404_NOT_FOUND, "firm_not_found", "Firm not found"),
    EntityNotFound: (status.HTTP_404_NOT_FOUND, *RESOURCE_NOT_FOUND),
    OwnershipMismatch: (status.HTTP_404_NOT_FOUND, *RESOURCE_NOT_FOUND),
    FirmSelectionInvalid: (status.HTTP_400_BAD_REQUEST, "firm_selection_invalid", "Invalid firm selection"),
    FirmContextRequired: (
        status.HTTP_400_BAD_REQUEST,
        "firm_context_required",
        "Please select a firm via the firm header or query parameter",
    ),
}

DEFAULT_RESPONSE = (status.HTTP_403_FORBIDDEN, "forbidden", "Forbidden")


def to_response(exc: AuthorizationError) -> JSONResponse:
    status_code, code, detail = ERROR_RESPONSES.get(type(exc), DEFAULT_RESPONSE)
    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code},
        headers=headers,
    )


async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    logger.warning(
        f"Request denied: {request.method} {request.url.path} "
        f"code={exc.code} message={exc.message} context={exc.context}"
    )
    return to_response(exc)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthorizationError, authorization_error_handler)
