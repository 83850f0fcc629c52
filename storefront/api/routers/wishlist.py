# storefront/api/routers/wishlist.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from storefront.api.deps import RowId, get_current_user
from storefront.data.database import get_db
from storefront.domain.errors import AuthenticationRequired, NotFoundError
from storefront.domain.schemas import UserIdentity, WishlistItemOut, WishlistToggleOut
from storefront.services.wishlist_service import WishlistService

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("/", response_model=List[WishlistItemOut])
def list_wishlist(
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return WishlistService(db).list_wishlist(user)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.post("/{product_id}/toggle", response_model=WishlistToggleOut)
def toggle_wishlist(
    product_id: RowId,
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        in_wishlist = WishlistService(db).toggle(user, product_id)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"product_id": product_id, "in_wishlist": in_wishlist}


@router.delete("/{product_id}", status_code=204)
def remove_from_wishlist(
    product_id: RowId,
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        WishlistService(db).remove(user, product_id)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))
    return Response(status_code=204)
