"""Password hashing and session token helpers."""
import logging
from datetime import datetime, timezone
from typing import Any

import jwt
from passlib.context import CryptContext
from pydantic import ValidationError

from .config import Settings
from .schemas import TokenData, compute_expiry

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
BEARER_PREFIX = "Bearer "

# PBKDF2-SHA256 avoids the bcrypt backend dependency
password_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
)


def hash_password(password: str) -> str:
    """Hash a password for storage."""
    return password_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain password against the stored hash."""
    return password_context.verify(password, password_hash)


def token_payload(account: Any) -> dict[str, Any]:
    """
    Generate the JWT claims for an account.

    issue_token() adds "exp" on top of this.
    """
    return {
        "id": str(account.id),
        "username": account.username,
        "email": account.email,
        "iat": int(datetime.now(timezone.utc).timestamp()),
    }


def issue_token(account: Any, settings: Settings) -> str:
    """Sign a session token for the given account."""

    expires_at = compute_expiry(settings.access_token_expires_minutes)
    return jwt.encode(
        {**token_payload(account), "exp": int(expires_at.timestamp())},
        settings.secret_key,
        algorithm=ALGORITHM,
    )


def verify_token(raw: str | None, settings: Settings) -> TokenData | None:
    """
    Decode an Authorization header value into token claims.

    The "Bearer " prefix is optional. Any failure (malformed, expired,
    bad signature, missing claims) yields None instead of an exception.
    """
    if not raw:
        return None

    token = raw[len(BEARER_PREFIX):] if raw.startswith(BEARER_PREFIX) else raw
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
        return TokenData(**payload)
    except (jwt.PyJWTError, ValidationError) as exc:
        logger.debug("Rejected session token: %s", exc)
        return None
