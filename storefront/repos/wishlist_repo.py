# storefront/repos/wishlist_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from storefront.data.models.wishlist_item import WishlistItemModel
from storefront.repos._upsert import dialect_insert


class WishlistRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_items(self, user_id: str) -> list[WishlistItemModel]:
        stmt = (
            select(WishlistItemModel)
            .where(WishlistItemModel.user_id == user_id)
            .order_by(WishlistItemModel.created_at.desc(), WishlistItemModel.id.desc())
            .execution_options(populate_existing=True)
        )
        return list(self.db.execute(stmt).unique().scalars().all())

    def add_item(self, user_id: str, product_id: int) -> None:
        stmt = dialect_insert(self.db, WishlistItemModel).values(
            user_id=user_id,
            product_id=product_id,
        )
        self.db.execute(stmt.on_conflict_do_nothing(index_elements=["user_id", "product_id"]))

    def delete_item(self, user_id: str, product_id: int) -> int:
        result = self.db.execute(
            delete(WishlistItemModel)
            .where(
                WishlistItemModel.user_id == user_id,
                WishlistItemModel.product_id == product_id,
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
