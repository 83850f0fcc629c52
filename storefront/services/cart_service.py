# storefront/services/cart_service.py
from decimal import Decimal
from typing import Dict, Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import AuthenticationRequired, NotFoundError, OutOfStockError
from storefront.domain.schemas import ProductOut, UserIdentity
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def require_user(user: UserIdentity | None, message: str = "Please sign in to continue") -> UserIdentity:
    if user is None:
        raise AuthenticationRequired(message)
    return user


def cart_total(items: list[CartItemModel]) -> Decimal:
    return sum((i.product.price * i.quantity for i in items), Decimal("0.00"))


class CartService:
    """
    Serwis obsługujący Use Case'y dla domeny Cart.
    Zgodnie z CQRS: komendy (add, update, remove) i zapytania (get, count).
    Kazda komenda to jeden zapis do bazy, bez odczytu stanu koszyka przed zapisem.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    # =====================================================
    # QUERY
    # =====================================================
    def get_cart(self, user: UserIdentity | None) -> Dict[str, Any]:
        user = require_user(user, "Please sign in to view your cart")

        items = self.repo.get_cart_items(user.id)

        return {
            "user_id": user.id,
            "items": [
                {
                    "id": i.id,
                    "product_id": i.product_id,
                    "quantity": i.quantity,
                    "product": ProductOut.model_validate(i.product),
                }
                for i in items
            ],
            "total": cart_total(items),
            "count": sum(i.quantity for i in items),
        }

    def cart_count(self, user: UserIdentity | None) -> int:
        #anonim ma pusty koszyk, badge pokazuje 0
        if user is None:
            return 0
        return sum(i.quantity for i in self.repo.get_cart_items(user.id))

    # =====================================================
    # COMMANDS
    # =====================================================
    def add_to_cart(self, user: UserIdentity | None, product_id: int) -> Dict[str, Any]:
        """
        Use Case: Dodanie produktu do koszyka (Command).
        Upsert po (user_id, product_id) - ponowne dodanie ustawia quantity na 1.
        """
        user = require_user(user, "Please sign in to add items to cart")

        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")

        if product.stock <= 0:
            raise OutOfStockError(f"{product.name} is out of stock")

        try:
            self.repo.upsert_cart_item(user.id, product_id, quantity=1)
            self.repo.commit()
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        logger.info(f"Produkt {product_id} dodany do koszyka uzytkownika {user.id}")

        return self.get_cart(user)

    def update_quantity(self, user: UserIdentity | None, item_id: int, quantity: int) -> Dict[str, Any]:
        """
        Use Case: Zmiana ilosci (Command).
        quantity < 1 to no-op (nie usuwa pozycji), brak gornego limitu.
        """
        user = require_user(user)

        if quantity < 1:
            logger.info(f"Ignoring quantity {quantity} for cart item {item_id}")
            return self.get_cart(user)

        try:
            rowcount = self.repo.update_quantity(user.id, item_id, quantity)
            self.repo.commit()
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        if rowcount == 0:
            logger.info(f"Cart item {item_id} not found for user {user.id}, nothing updated")
        else:
            logger.info(f"Cart item {item_id} quantity set to {quantity}")

        return self.get_cart(user)

    def remove_item(self, user: UserIdentity | None, item_id: int) -> Dict[str, Any]:
        """
        Use Case: Usunięcie pozycji z koszyka (Command).
        """
        user = require_user(user)

        try:
            rowcount = self.repo.delete_cart_item(user.id, item_id)
            self.repo.commit()
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        logger.info(f"Usunieto {rowcount} pozycji (item {item_id}) z koszyka uzytkownika {user.id}")

        return self.get_cart(user)
