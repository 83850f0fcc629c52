# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from storefront.api.deps import RowId, get_current_user, get_lock_service
from storefront.data.database import get_db
from storefront.domain.errors import (
    AuthenticationRequired,
    CheckoutInProgressError,
    NotFoundError,
    OutOfStockError,
)
from storefront.domain.schemas import CheckoutIn, OrderOut, UserIdentity
from storefront.services.lock_service import LockService
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session, lock_service: LockService | None = None):
    #odczyty nie potrzebuja locka (ani redisa)
    return OrderService(db, lock_service=lock_service)


@router.post("/", response_model=OrderOut, status_code=201)
def place_order(
    payload: CheckoutIn,
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    """
    Tworzy zamówienie z koszyka uzytkownika i czysci koszyk.
    Wysyła powiadomienie asynchronicznie.
    """
    svc = get_service(db, lock_service)
    try:
        return svc.place_order(user, payload)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))
    except (OutOfStockError, CheckoutInProgressError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/", response_model=List[OrderOut])
def list_orders(
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.list_orders(user)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: RowId,
    user: UserIdentity | None = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegóły zamówienia.
    """
    svc = get_service(db)
    try:
        return svc.get_order(user, order_id)
    except AuthenticationRequired as e:
        raise HTTPException(status_code=401, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
