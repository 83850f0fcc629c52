# storefront/services/wishlist_service.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import UserIdentity
from storefront.repos.product_repo import ProductRepo
from storefront.repos.wishlist_repo import WishlistRepo
from storefront.services.cart_service import require_user
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class WishlistService:
    def __init__(self, db: Session):
        self.repo = WishlistRepo(db)
        self.products = ProductRepo(db)

    def list_wishlist(self, user: UserIdentity | None) -> list[WishlistItemModel]:
        user = require_user(user, "Please sign in to view your wishlist")
        return self.repo.get_items(user.id)

    def toggle(self, user: UserIdentity | None, product_id: int) -> bool:
        """
        Przelacza obecnosc produktu na liscie, zwraca nowy stan.

        Bez odczytu przed zapisem: najpierw DELETE, a jesli nic nie usunieto
        to INSERT ... ON CONFLICT DO NOTHING. Dwa rownoległe toggle moga sie
        znosic, ale nie ma bledu ani duplikatu.
        """
        user = require_user(user, "Please sign in to use your wishlist")

        if not self.products.get_product(product_id):
            raise NotFoundError("Product not found")

        try:
            removed = self.repo.delete_item(user.id, product_id)
            if not removed:
                self.repo.add_item(user.id, product_id)
            self.repo.commit()
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        in_wishlist = not removed
        logger.info(
            f"Wishlist toggle user {user.id} product {product_id}: "
            f"{'added' if in_wishlist else 'removed'}"
        )
        return in_wishlist

    def remove(self, user: UserIdentity | None, product_id: int) -> None:
        user = require_user(user, "Please sign in to use your wishlist")

        try:
            self.repo.delete_item(user.id, product_id)
            self.repo.commit()
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        logger.info(f"Produkt {product_id} usuniety z wishlisty uzytkownika {user.id}")
