"""
dependencies.py
---------------
FastAPI dependency injection functions for the store, the service facade
and the acting identity.

Flow:
  1. HTTPBearer extracts the Bearer token from the Authorization header,
     or yields None when there is none.
  2. decode_access_token validates the JWT signed by the auth provider.
  3. get_current_identity turns the claims into an Identity. Without a
     token it returns None (mutations are then not audited) unless
     AUTH_REQUIRED is set, in which case the request is rejected.
  4. get_store builds one SqlAlchemyStore per request; tests override it.
"""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from iomad_admin.core.config import settings
from iomad_admin.core.logging import bind_identity, get_logger
from iomad_admin.core.security import Identity, decode_access_token, identity_from_claims
from iomad_admin.db.session import AsyncSessionLocal
from iomad_admin.services.admin_service import AdminService
from iomad_admin.store.base import Store
from iomad_admin.store.sqlalchemy_store import SqlAlchemyStore

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_current_identity(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[Identity]:
    """
    Resolve the acting identity from the bearer token.
    Raises 401 if a token is present but invalid, or missing while required.
    """
    if credentials is None:
        if settings.AUTH_REQUIRED:
            raise _CREDENTIALS_EXCEPTION
        bind_identity(None)
        return None

    try:
        identity = identity_from_claims(decode_access_token(credentials.credentials))
    except JWTError as exc:
        logger.warning("JWT decode failed", error=str(exc))
        raise _CREDENTIALS_EXCEPTION
    bind_identity(identity)
    return identity


def get_store() -> Store:
    return SqlAlchemyStore(AsyncSessionLocal)


def get_admin_service(store: Annotated[Store, Depends(get_store)]) -> AdminService:
    return AdminService(store)


ServiceDep = Annotated[AdminService, Depends(get_admin_service)]
IdentityDep = Annotated[Optional[Identity], Depends(get_current_identity)]
