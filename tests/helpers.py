import uuid

from storefront.data.database import SessionLocal
from storefront.data.models import CartItemModel, OrderModel, ProductModel
from storefront.domain.schemas import UserIdentity


TEST_USER = UserIdentity(id="user-1", email="shopper@example.com")
OTHER_USER = UserIdentity(id="user-2", email="other@example.com")

CHECKOUT_FORM = {
    "full_name": "Jan Kowalski",
    "address": "ul. Prosta 1",
    "city": "Warszawa",
    "pincode": "00-001",
    "payment_method": "card",
}


class InMemoryLockService:
    """Test double for LockService keeping locks in a dict."""

    def __init__(self):
        self.locks = {}
        self.released = []

    def acquire_checkout_lock(self, user_id: str, ttl: int):
        if user_id in self.locks:
            return None
        token = uuid.uuid4().hex
        self.locks[user_id] = token
        return token

    def release_checkout_lock(self, user_id: str, token: str) -> bool:
        self.released.append(user_id)
        if self.locks.get(user_id) == token:
            del self.locks[user_id]
            return True
        return False


def cart_rows(user_id: str = TEST_USER.id) -> list[CartItemModel]:
    with SessionLocal() as db:
        return (
            db.query(CartItemModel)
            .filter(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.id)
            .all()
        )


def order_count() -> int:
    with SessionLocal() as db:
        return db.query(OrderModel).count()


def product_row(product_id: int) -> ProductModel:
    with SessionLocal() as db:
        return db.get(ProductModel, product_id)


def set_price(product_id: int, price) -> None:
    with SessionLocal() as db:
        db.get(ProductModel, product_id).price = price
        db.commit()
