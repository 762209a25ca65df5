from typing import Optional


class AuthorizationError(Exception):
    """
    Base class for every outcome that stops a request in the
    authentication / firm isolation layer.

    The core only raises these; translating them into HTTP responses is
    done by ``app.core.error_handlers``. ``code`` is stable and safe to
    expose, ``message`` is for logs.
    """
    code = "authorization_error"

    def __init__(self, message: Optional[str] = None, **context):
        self.message = message or self.__class__.__doc__.strip().splitlines()[0]
        self.context = context
        super().__init__(self.message)


class TokenExpired(AuthorizationError):
    """Access token has expired."""
    code = "token_expired"


class TokenMalformed(AuthorizationError):
    """Access token is invalid."""
    code = "token_malformed"


class UserInactiveOrNotFound(AuthorizationError):
    """Token subject does not resolve to an active user."""
    code = "user_inactive_or_not_found"


class NoFirmAccess(AuthorizationError):
    """User has no active firm assignments."""
    code = "no_firm_access"


class FirmNotFound(AuthorizationError):
    """Firm not found."""
    code = "firm_not_found"


class FirmInactive(AuthorizationError):
    """Firm is inactive."""
    code = "firm_inactive"


class FirmAccessDenied(AuthorizationError):
    """User does not have access to the requested firm."""
    code = "firm_access_denied"


class FirmSelectionInvalid(AuthorizationError):
    """Firm selection is invalid."""
    code = "firm_selection_invalid"


class FirmContextRequired(AuthorizationError):
    """A specific firm must be selected for this operation."""
    code = "firm_context_required"


class InsufficientRole(AuthorizationError):
    """Insufficient firm permissions."""
    code = "insufficient_role"


class EntityNotFound(AuthorizationError):
    """Entity not found."""
    code = "entity_not_found"


class OwnershipMismatch(AuthorizationError):
    """Entity belongs to a different firm."""
    code = "ownership_mismatch"
