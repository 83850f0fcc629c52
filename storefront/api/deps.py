# storefront/api/deps.py
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Path

from storefront.domain.schemas import DB_INT_MAX, UserIdentity
from storefront.services.auth_client import AuthClient
from storefront.services.lock_service import LockService

#id wiersza w sciezce, wieksze wartosci nie zmieszcza sie w kolumnie Integer
RowId = Annotated[int, Path(le=DB_INT_MAX)]


def get_auth_client() -> AuthClient:
    return AuthClient()


@lru_cache
def get_lock_service() -> LockService:
    #jeden pool polaczen redis na proces
    return LockService()


def get_session_token(authorization: str | None = Header(default=None)) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_user(
    token: str | None = Depends(get_session_token),
    auth_client: AuthClient = Depends(get_auth_client),
) -> UserIdentity | None:
    # brak tokenu = anonim, serwisy same decyduja czy wymagaja uzytkownika
    if token is None:
        return None
    return auth_client.fetch_user(token)
