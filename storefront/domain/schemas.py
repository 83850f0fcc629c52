# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Literal
from decimal import Decimal
from datetime import datetime

#kolumny Integer w postgresie sa 32-bitowe
DB_INT_MAX = 2_147_483_647


class UserIdentity(BaseModel):
    """Uzytkownik zwrocony przez serwis autoryzacji."""

    id: str
    email: str | None = None


class ProductOut(BaseModel):
    """Schema dla produktu (response)."""

    id: int
    name: str
    price: Decimal
    category: str
    image_url: str
    stock: int
    description: str | None = None
    features: List[str] | None = None
    sizes: List[str] | None = None
    colors: List[str] | None = None
    rating: float | None = None
    review_count: int | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AddToCartIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, le=DB_INT_MAX, description="ID produktu (musi być > 0)")


class QuantityIn(BaseModel):
    # bez walidacji > 0, serwis ignoruje wartosci < 1
    quantity: int = Field(..., le=DB_INT_MAX)


class CartItemOut(BaseModel):
    id: int
    product_id: int
    quantity: int
    product: ProductOut

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    user_id: str
    items: List[CartItemOut]
    total: Decimal
    count: int


class CartCountOut(BaseModel):
    count: int


class WishlistItemOut(BaseModel):
    id: int
    product_id: int
    product: ProductOut
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class WishlistToggleOut(BaseModel):
    product_id: int
    in_wishlist: bool


class CheckoutIn(BaseModel):
    """Schema dla formularza checkout (adres + metoda platnosci demo)."""

    full_name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., min_length=1, max_length=500)
    city: str = Field(..., min_length=1, max_length=100)
    pincode: str = Field(..., min_length=1, max_length=16)
    payment_method: Literal["card", "upi", "cod"] = "card"


class OrderItemOut(BaseModel):
    product_id: int
    quantity: int
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: str
    status: str
    total: Decimal
    payment_method: str | None = None
    created_at: datetime
    items: List[OrderItemOut]

    model_config = ConfigDict(from_attributes=True)
