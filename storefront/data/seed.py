# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import ProductModel
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {
        "name": "Wireless Headphones",
        "price": Decimal("129.99"),
        "category": "Electronics",
        "image_url": "/images/headphones.jpg",
        "stock": 25,
        "description": "Over-ear headphones with active noise cancelling.",
        "features": ["Noise cancelling", "30h battery", "USB-C charging"],
        "colors": ["Black", "Silver"],
        "rating": 4.6,
        "review_count": 212,
    },
    {
        "name": "Leather Backpack",
        "price": Decimal("89.00"),
        "category": "Accessories",
        "image_url": "/images/backpack.jpg",
        "stock": 12,
        "colors": ["Brown", "Black"],
        "rating": 4.3,
        "review_count": 57,
    },
    {
        "name": "Cotton T-Shirt",
        "price": Decimal("19.50"),
        "category": "Clothing",
        "image_url": "/images/tshirt.jpg",
        "stock": 100,
        "sizes": ["S", "M", "L", "XL"],
        "colors": ["White", "Navy"],
    },
    {
        "name": "Ceramic Mug",
        "price": Decimal("12.00"),
        "category": "Home",
        "image_url": "/images/mug.jpg",
        "stock": 0,
    },
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            logger.info("Products table not empty, skipping seed")
            return
        db.add_all(ProductModel(**p) for p in PRODUCTS)
        db.commit()
        logger.info(f"Seeded {len(PRODUCTS)} products")
    finally:
        db.close()


if __name__ == "__main__":
    seed()
