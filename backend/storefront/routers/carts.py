"""
# storefront/routers/carts.py — Cart endpoints (logged-in users)

### GET /v1/cart
Return the caller's cart; `404` if none was created yet.

### POST /v1/cart
Body `{"productId", "quantity"}`. Creates the cart on first use and adds the product.
`400` if the product is already in the cart or does not exist. Answers `201`.

### PUT /v1/cart
Body `{"productId", "quantity"}`. Sets the quantity of a product already in the cart;
`quantity = 0` removes the line instead.

### PUT /v1/cart/checkout
Charge the wallet for the whole cart and empty it. `204` on success;
`400` for an empty cart, missing address or insufficient balance.
"""
from fastapi import APIRouter, Depends, Response, status

from storefront.core.auth import get_current_user
from storefront.dependencies import get_cart_service
from storefront.schemas.cart import Cart, CartItemBody
from storefront.schemas.user import User
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/v1/cart", tags=["Cart"])


@router.get("", response_model=Cart)
async def get_cart(
    current_user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    return await carts.get_cart_by_user(current_user)


@router.post("", response_model=Cart, status_code=status.HTTP_201_CREATED)
async def add_product(
    body: CartItemBody,
    current_user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    return await carts.add_product_to_cart(current_user, body.product_id, body.quantity)


@router.put("/checkout", status_code=status.HTTP_204_NO_CONTENT)
async def checkout(
    current_user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    await carts.checkout(current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("", response_model=Cart)
async def update_product(
    body: CartItemBody,
    current_user: User = Depends(get_current_user),
    carts: CartService = Depends(get_cart_service),
):
    if body.quantity == 0:
        return await carts.delete_product_from_cart(current_user, body.product_id)
    return await carts.update_product_in_cart(current_user, body.product_id, body.quantity)
