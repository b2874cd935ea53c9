from typing import Optional

from storefront.repositories.users import COL as USERS_COL
from storefront.repositories.store import DocumentStore
from storefront.schemas.cart import Cart
from storefront.schemas.user import User

COL = "carts"


class CartRepository:
    """One cart document per user, looked up by the owner's e-mail."""

    collection = COL

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_by_email(self, email: str) -> Optional[Cart]:
        doc = await self.store.find_one(COL, "email", email)
        return Cart(**doc) if doc else None

    async def create(self, email: str, payment_option: str = "PAYMENT_OPTION_DEFAULT") -> Cart:
        cart = Cart(email=email, cart_items=[], payment_option=payment_option)
        doc = await self.store.create(COL, cart.model_dump(exclude_none=True))
        return Cart(**doc)

    async def save(self, cart: Cart) -> Cart:
        await self.store.save(COL, cart.model_dump())
        return cart

    async def save_with_owner(self, cart: Cart, owner: User) -> None:
        """Write the cart and its owner's user document in one atomic commit."""
        await self.store.save_all([
            (USERS_COL, owner.model_dump()),
            (COL, cart.model_dump()),
        ])
