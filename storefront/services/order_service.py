# storefront/services/order_service.py
from typing import Dict, Any

from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import CheckoutInProgressError, NotFoundError, OutOfStockError
from storefront.domain.schemas import CheckoutIn, UserIdentity
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.services.cart_service import cart_total, require_user
from storefront.services.lock_service import LockService
from storefront.services.notification_service import NotificationService
from storefront.utils.settings import CHECKOUT_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def order_to_dict(order: OrderModel) -> Dict[str, Any]:
    return {
        "id": order.id,
        "user_id": order.user_id,
        "status": order.status,
        "total": order.total,
        "payment_method": order.payment_method,
        "created_at": order.created_at,
        "items": [
            {
                "product_id": i.product_id,
                "quantity": i.quantity,
                "price": i.price,
            }
            for i in order.items
        ],
    }


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Zamowienie powstaje z aktualnej zawartosci koszyka uzytkownika.
    """

    def __init__(self, db: Session, lock_service: LockService | None = None):
        self.db = db
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)
        self.products = ProductRepo(db)
        self.lock_service = lock_service
        self.notification_service = NotificationService()

    def place_order(self, user: UserIdentity | None, checkout: CheckoutIn) -> Dict[str, Any]:
        """
        Use Case: Zlozenie zamowienia z koszyka.

        W jednej transakcji:
        1. Tworzy zamowienie (total = suma price * quantity, status pending)
        2. Tworzy pozycje zamowienia z cena z chwili zamowienia
        3. Zmniejsza stan magazynowy (stock >= quantity, inaczej blad)
        4. Czysci koszyk
        Blad w dowolnym kroku = rollback calosci, koszyk zostaje.
        Po commit wysyla powiadomienie (async).
        """
        user = require_user(user, "Please sign in to place an order")

        if self.lock_service is None:
            raise RuntimeError("OrderService built without a lock service cannot place orders")

        token = self.lock_service.acquire_checkout_lock(user.id, ttl=CHECKOUT_LOCK_TTL_SECONDS)
        if not token:
            raise CheckoutInProgressError("Checkout already in progress")

        try:
            order = self._compose_order(user, checkout)
        finally:
            try:
                self.lock_service.release_checkout_lock(user.id, token)
            except Exception as e:
                #lock i tak wygasnie po TTL
                logger.warning(f"Failed to release checkout lock for user {user.id}: {e}")

        self.notification_service.send_order_notification(user.id, order.id, order.total)

        return order_to_dict(order)

    def _compose_order(self, user: UserIdentity, checkout: CheckoutIn) -> OrderModel:
        # snapshot koszyka - ceny i ilosci z tej chwili
        cart_items = self.carts.get_cart_items(user.id)
        if not cart_items:
            raise ValueError("Cart is empty")

        total = cart_total(cart_items)

        try:
            order = self.repo.add_order(
                OrderModel(
                    user_id=user.id,
                    total=total,
                    status="pending",
                    full_name=checkout.full_name,
                    address=checkout.address,
                    city=checkout.city,
                    pincode=checkout.pincode,
                    payment_method=checkout.payment_method,
                )
            )

            self.repo.add_order_items(
                order,
                [
                    OrderItemModel(
                        order_id=order.id,
                        product_id=i.product_id,
                        quantity=i.quantity,
                        price=i.product.price,
                    )
                    for i in cart_items
                ],
            )

            # update products set stock = stock - qty where id = ? and stock >= qty
            # 0 rows affected = za malo na stanie
            # kolejnosc po product_id - kazdy checkout blokuje wiersze w tej samej kolejnosci (bez deadlockow)
            for i in sorted(cart_items, key=lambda i: i.product_id):
                if self.products.reserve_stock(i.product_id, i.quantity) == 0:
                    raise OutOfStockError(f"Not enough stock for {i.product.name}")

            cleared = self.carts.clear_cart(user.id)

            self.repo.commit()

        except Exception as e:
            logger.error(f"Order composition failed for user {user.id}, rolling back: {e}")
            self.repo.rollback()
            raise

        logger.info(
            f"Order {order.id} placed by user {user.id}: "
            f"{len(cart_items)} lines, total {total}, {cleared} cart rows cleared"
        )

        return order

    def get_order(self, user: UserIdentity | None, order_id: int) -> Dict[str, Any]:
        """
        Use Case: Pobranie zamówienia (Query).
        Zamowienie innego uzytkownika traktujemy jak nieistniejace.
        """
        user = require_user(user)

        order = self.repo.get_order(order_id)

        if not order or order.user_id != user.id:
            raise NotFoundError("Order not found")

        return order_to_dict(order)

    def list_orders(self, user: UserIdentity | None) -> list[Dict[str, Any]]:
        user = require_user(user)
        return [order_to_dict(o) for o in self.repo.list_orders(user.id)]
