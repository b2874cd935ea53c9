"""
# storefront/routers/products.py — Public catalogue endpoints

### GET /v1/products
List every product.

### GET /v1/products/{product_id}
Return one product, `404` if it does not exist.
"""
from typing import List

from fastapi import APIRouter, Depends

from storefront.core.errors import InternalError, NotFoundError
from storefront.dependencies import get_product_repository
from storefront.repositories.products import ProductRepository
from storefront.repositories.store import StoreError
from storefront.schemas.product import Product

router = APIRouter(prefix="/v1/products", tags=["Products"])


@router.get("", response_model=List[Product], summary="List Products")
async def list_products(products: ProductRepository = Depends(get_product_repository)):
    try:
        return await products.list_all()
    except StoreError as exc:
        raise InternalError("Could not load products") from exc


@router.get("/{product_id}", response_model=Product, summary="Get Product")
async def get_product(product_id: str, products: ProductRepository = Depends(get_product_repository)):
    try:
        product = await products.get(product_id)
    except StoreError as exc:
        raise InternalError("Could not load product") from exc
    if not product:
        raise NotFoundError("Product not found")
    return product
