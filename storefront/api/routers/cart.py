# storefront/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import RowId, get_current_user
from storefront.data.database import get_db
from storefront.domain.errors import AuthenticationRequired, NotFoundError, OutOfStockError
from storefront.domain.schemas import (
    AddToCartIn,
    CartCountOut,
    CartOut,
    QuantityIn,
    UserIdentity,
)
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


@router.get("/", response_model=CartOut)
def get_cart(
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return CartService(db).get_cart(user)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.get("/count", response_model=CartCountOut)
def get_cart_count(
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"count": CartService(db).cart_count(user)}


@router.post("/items", response_model=CartOut)
def add_to_cart(
    payload: AddToCartIn,
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return CartService(db).add_to_cart(user, payload.product_id)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except OutOfStockError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.patch("/items/{item_id}", response_model=CartOut)
def update_quantity(
    item_id: RowId,
    payload: QuantityIn,
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return CartService(db).update_quantity(user, item_id, payload.quantity)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.delete("/items/{item_id}", response_model=CartOut)
def remove_item(
    item_id: RowId,
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        return CartService(db).remove_item(user, item_id)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))
