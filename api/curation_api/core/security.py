"""JWT helpers for bearer-token verification."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from .config import settings

ACCESS_TOKEN_TYPE = "access"


def create_token(subject: str, expires_delta: timedelta, token_type: str) -> str:
    """Create a signed JWT for the given subject and token type."""
    now = datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": subject,
        "type": token_type,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(subject: str) -> str:
    """Create an access token with the configured TTL."""
    delta = timedelta(minutes=settings.access_token_expires_minutes)
    return create_token(subject, delta, ACCESS_TOKEN_TYPE)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode a JWT and return its payload if valid."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def extract_bearer_token(authorization: str | None) -> Optional[str]:
    """Return the token part of an ``Authorization: Bearer`` header."""
    if not authorization:
        return None
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != "bearer" or not credentials.strip():
        return None
    return credentials.strip()


def verify_access_token(token: str | None) -> Optional[str]:
    """Return the subject of a valid access token, or None."""
    if not token:
        return None
    payload = decode_token(token)
    if not payload or payload.get("type") != ACCESS_TOKEN_TYPE:
        return None
    subject = payload.get("sub")
    return str(subject) if subject else None
