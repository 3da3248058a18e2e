"""
core/security.py
----------------
JWT token utilities and the acting identity.

Tokens are issued by the console's auth provider and signed with the shared
SECRET_KEY. The payload carries:
  - sub                        → id of the acting user
  - user_metadata.company_id   → company the user acts for (optional)

The decoded identity is passed explicitly into every mutating service call,
so "no token" visibly means "no audit row" at the call site.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from iomad_admin.core.config import settings


@dataclass(frozen=True)
class Identity:
    """The authenticated user on whose behalf a mutation is performed."""

    user_id: str
    company_id: Optional[str] = None


# ── JWT Utilities ─────────────────────────────────────────────────────────────

def create_access_token(
    subject: str,
    company_id: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Mint a JWT access token.

    Args:
        subject: User id (stored in 'sub' claim).
        company_id: Company the user acts for, stored in user_metadata.
        expires_delta: Optional custom expiry; defaults to settings value.

    Returns:
        Signed JWT string.
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    payload: Dict[str, Any] = {
        "sub": subject,
        "user_metadata": {"company_id": company_id} if company_id else {},
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Decode and validate a JWT access token.

    Raises:
        JWTError: If the token is invalid, expired, or tampered with.

    Returns:
        Raw payload dict.
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def identity_from_claims(payload: Dict[str, Any]) -> Identity:
    """
    Build an Identity from decoded token claims.

    An empty company_id is treated as absent.

    Raises:
        JWTError: If the payload has no subject or user_metadata is not an object.
    """
    user_id = payload.get("sub")
    if not user_id:
        raise JWTError("Token has no subject")
    metadata = payload.get("user_metadata") or {}
    if not isinstance(metadata, dict):
        raise JWTError("Malformed user_metadata")
    return Identity(user_id=user_id, company_id=metadata.get("company_id") or None)
