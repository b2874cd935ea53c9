"""
storefront/dependencies.py - FastAPI providers wiring the store into repositories and services.

The document store lives on `app.state.store` (set at startup, or by tests).
"""
from fastapi import Depends, Request

from storefront.config import Settings, get_settings
from storefront.repositories.carts import CartRepository
from storefront.repositories.products import ProductRepository
from storefront.repositories.store import DocumentStore
from storefront.repositories.users import UserRepository
from storefront.services.auth_service import AuthService
from storefront.services.cart_service import CartService
from storefront.services.user_service import UserService


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_user_repository(store: DocumentStore = Depends(get_store)) -> UserRepository:
    return UserRepository(store)


def get_product_repository(store: DocumentStore = Depends(get_store)) -> ProductRepository:
    return ProductRepository(store)


def get_cart_service(
    store: DocumentStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> CartService:
    return CartService(
        carts=CartRepository(store),
        products=ProductRepository(store),
        users=UserRepository(store),
        default_payment_option=settings.default_payment_option,
        default_address=settings.default_address,
    )


def get_user_service(
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(users, settings)


def get_auth_service(users: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(users)
