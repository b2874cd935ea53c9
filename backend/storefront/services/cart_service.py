"""
storefront/services/cart_service.py - Cart business rules.

Every operation receives the already authenticated `User` plus request parameters.
Validation failures raise `BadRequestError` / `NotFoundError`; database failures
surface as `InternalError`.

Checkout debits the wallet and empties the cart in a single atomic write, so a
failed commit leaves both documents as they were.
"""
import logging
from decimal import Decimal

from storefront.core.errors import (
    BadRequestError,
    InternalError,
    NotFoundError,
    store_errors_as_internal,
)
from storefront.repositories.carts import CartRepository
from storefront.repositories.products import ProductRepository
from storefront.repositories.store import StoreError
from storefront.repositories.users import UserRepository
from storefront.schemas.cart import Cart, CartItem
from storefront.schemas.user import DEFAULT_ADDRESS, User

logger = logging.getLogger("storefront.cart")


def _money(value) -> Decimal:
    return Decimal(str(value or 0))


def _require_positive(quantity: int) -> None:
    if quantity < 1:
        raise BadRequestError("Quantity must be at least 1")


def cart_total(cart: Cart) -> Decimal:
    return sum((_money(it.product.cost) * it.quantity for it in cart.cart_items), Decimal("0"))


class CartService:
    def __init__(self, carts: CartRepository, products: ProductRepository, users: UserRepository,
                 default_payment_option: str = "PAYMENT_OPTION_DEFAULT",
                 default_address: str = DEFAULT_ADDRESS):
        self.carts = carts
        self.products = products
        self.users = users
        self.default_payment_option = default_payment_option
        self.default_address = default_address

    @store_errors_as_internal
    async def get_cart_by_user(self, user: User) -> Cart:
        cart = await self.carts.get_by_email(user.email)
        if not cart:
            raise NotFoundError("User does not have a cart")
        return cart

    @store_errors_as_internal
    async def add_product_to_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        """
        Add a new line item, creating the cart on first use.
        A product can only be added once; later changes go through update.
        """
        _require_positive(quantity)
        cart = await self.carts.get_by_email(user.email)
        if not cart:
            try:
                cart = await self.carts.create(user.email, self.default_payment_option)
            except StoreError as exc:
                raise InternalError("Something went wrong while creating cart") from exc
            logger.info("Created cart %s for user %s", cart.id, user.id)

        if cart.find_item(product_id):
            raise BadRequestError(
                "Product already in cart. Use the cart sidebar to update or remove product from cart"
            )

        product = await self.products.get(product_id)
        if not product:
            raise BadRequestError("Product doesn't exist in database")

        cart.cart_items.append(CartItem(product=product, quantity=quantity))
        return await self.carts.save(cart)

    @store_errors_as_internal
    async def update_product_in_cart(self, user: User, product_id: str, quantity: int) -> Cart:
        _require_positive(quantity)
        cart = await self.carts.get_by_email(user.email)
        if not cart:
            raise BadRequestError("User does not have a cart. Use POST to create cart and add a product")

        if not await self.products.get(product_id):
            raise BadRequestError("Product doesn't exist in database")

        item = cart.find_item(product_id)
        if not item:
            raise BadRequestError("Product not in cart")

        item.quantity = quantity
        return await self.carts.save(cart)

    @store_errors_as_internal
    async def delete_product_from_cart(self, user: User, product_id: str) -> Cart:
        cart = await self.carts.get_by_email(user.email)
        if not cart:
            raise BadRequestError("User does not have a cart")

        item = cart.find_item(product_id)
        if not item:
            raise BadRequestError("Product not in cart")

        cart.cart_items.remove(item)
        return await self.carts.save(cart)

    @store_errors_as_internal
    async def checkout(self, user: User) -> None:
        cart = await self.carts.get_by_email(user.email)
        if not cart:
            raise NotFoundError("User does not have a cart")
        if not cart.cart_items:
            raise BadRequestError("User does not have Products in Cart")
        if not user.has_set_non_default_address(self.default_address):
            raise BadRequestError("Address not set")

        total = cart_total(cart)
        balance = _money(user.wallet_money)
        if balance < total:
            raise BadRequestError("Insufficient balance")

        debited = user.model_copy(update={"wallet_money": float(balance - total)})
        emptied = cart.model_copy(update={"cart_items": []})
        try:
            await self.carts.save_with_owner(emptied, debited)
        except StoreError as exc:
            raise InternalError("Checkout failed, nothing was charged") from exc

        user.wallet_money = debited.wallet_money
        logger.info("Checkout for user %s: %s items, total %s", user.id, len(cart.cart_items), total)
