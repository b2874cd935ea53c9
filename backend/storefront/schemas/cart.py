"""
storefront/schemas/cart.py - Pydantic models for Cart.

A `CartItem` embeds a snapshot of the product taken when it was added, so later
catalogue price changes do not alter what is in the cart.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.product import Product


class CartItem(BaseModel):
    product: Product = Field(..., description="Product snapshot at the time of adding to cart")
    quantity: int = Field(..., gt=0, description="Quantity of the product in the cart")


class Cart(BaseModel):
    id: Optional[str] = None
    email: str = Field(..., description="E-mail of the user who owns this cart")
    cart_items: List[CartItem] = Field(default_factory=list, alias="cartItems")
    payment_option: str = Field("PAYMENT_OPTION_DEFAULT", alias="paymentOption")

    model_config = ConfigDict(populate_by_name=True)

    def find_item(self, product_id: str) -> Optional[CartItem]:
        return next((it for it in self.cart_items if it.product.id == product_id), None)


class CartItemBody(BaseModel):
    """Body of POST/PUT /v1/cart."""
    product_id: str = Field(..., min_length=1, alias="productId")
    quantity: int = Field(..., ge=0, le=10000)

    model_config = ConfigDict(populate_by_name=True)
