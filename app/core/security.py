from typing import Optional
from datetime import datetime, timedelta, timezone
from jose import ExpiredSignatureError, JWTError, jwt
import bcrypt
from app.core.config import settings
from app.core.exceptions import TokenExpired, TokenMalformed

SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM

# jose only checks aud, iss and exp when the claim is present
REQUIRED_CLAIMS = {
    "require_aud": True,
    "require_iss": True,
    "require_exp": True,
    "require_iat": True,
    "require_sub": True,
}


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt."""
    password_bytes = password.encode('utf-8')
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    password_bytes = plain_password.encode('utf-8')
    hashed_bytes = hashed_password.encode('utf-8')
    try:
        return bcrypt.checkpw(password_bytes, hashed_bytes)
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed access token.

    Args:
        data: Claims to embed; must contain ``sub`` (the user id)
        expires_delta: Optional custom lifetime. Defaults to
            ACCESS_TOKEN_EXPIRE_MINUTES (24 hours).

    Returns:
        Encoded JWT string carrying ``iss``, ``aud``, ``iat`` and ``exp``
    """
    if "sub" not in data:
        raise ValueError("Access token claims require a 'sub' entry")

    to_encode = data.copy()
    to_encode["sub"] = str(to_encode["sub"])

    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": now,
        "exp": now + expires_delta,
    })
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def verify_token(token: str) -> dict:
    """
    Verify and decode an access token.

    Signature, expiry, issuer and audience are all checked. A token signed
    with the same key for another service is rejected.

    Raises:
        TokenExpired: the token was valid but its ``exp`` has passed
        TokenMalformed: anything else (bad signature, structure, tags)
    """
    try:
        payload = jwt.decode(
            token,
            SECRET_KEY,
            algorithms=[ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options=REQUIRED_CLAIMS,
        )
    except ExpiredSignatureError:
        raise TokenExpired()
    except JWTError as e:
        raise TokenMalformed(f"Invalid token: {e}")

    if not payload.get("sub"):
        raise TokenMalformed("Token has no subject")
    return payload


def token_subject(payload: dict) -> int:
    """Extract the user id from verified claims."""
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise TokenMalformed("Token subject is not a user id")
