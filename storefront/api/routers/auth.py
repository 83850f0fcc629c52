# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.api.deps import get_auth_client, get_current_user, get_session_token
from storefront.domain.schemas import UserIdentity
from storefront.services.auth_client import AuthClient

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me", response_model=UserIdentity)
def me(user: UserIdentity | None = Depends(get_current_user)):
    if user is None:
        raise HTTPException(status_code=401, detail="Not signed in")
    return user


@router.post("/sign-out", status_code=204)
def sign_out(
    token: str | None = Depends(get_session_token),
    auth_client: AuthClient = Depends(get_auth_client),
):
    if token is not None:
        auth_client.sign_out(token)
    return Response(status_code=204)
