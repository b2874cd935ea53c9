from typing import List, Optional

from storefront.repositories.store import DocumentStore
from storefront.schemas.product import Product

COL = "products"


class ProductRepository:
    """Read-only access to the product catalogue."""

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get(self, product_id: str) -> Optional[Product]:
        doc = await self.store.find_by_id(COL, product_id)
        return Product(**doc) if doc else None

    async def list_all(self) -> List[Product]:
        return [Product(**doc) for doc in await self.store.find_all(COL)]
