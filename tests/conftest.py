"""
Test configuration and fixtures for the storefront backend.

Services and routes run against `MemoryDocumentStore`, an in-memory stand-in for the
Firestore adapter with the same async contract and per-operation failure injection.
"""
import copy
import os
import uuid

import pytest

# Settings are read lazily but main.py builds CORS from them at import time
os.environ.setdefault("JWT_SECRET", "test-secret-please-change")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from storefront.config import Settings  # noqa: E402
from storefront.core.passwords import hash_password  # noqa: E402
from storefront.repositories.carts import CartRepository  # noqa: E402
from storefront.repositories.products import ProductRepository  # noqa: E402
from storefront.repositories.store import StoreError  # noqa: E402
from storefront.repositories.users import UserRepository  # noqa: E402
from storefront.schemas.user import User  # noqa: E402
from storefront.services.cart_service import CartService  # noqa: E402

ADDRESS = "221B Baker Street, London NW1 6XE"


class MemoryDocumentStore:
    """Dict-backed `DocumentStore`; documents are deep-copied in and out."""

    def __init__(self):
        self.collections = {}
        self.failing = set()
        self.calls = []

    def fail(self, *operations):
        self.failing.update(operations)

    def _check(self, operation):
        self.calls.append(operation)
        if operation in self.failing:
            raise StoreError(f"{operation} failed (injected)")

    def _col(self, name):
        return self.collections.setdefault(name, {})

    def put(self, collection, doc):
        doc = copy.deepcopy(doc)
        doc.setdefault("id", uuid.uuid4().hex)
        self._col(collection)[doc["id"]] = doc
        return copy.deepcopy(doc)

    def get(self, collection, doc_id):
        return copy.deepcopy(self._col(collection).get(doc_id))

    async def find_by_id(self, collection, doc_id):
        self._check("find_by_id")
        return self.get(collection, doc_id)

    async def find_one(self, collection, field, value):
        self._check("find_one")
        for doc in self._col(collection).values():
            if doc.get(field) == value:
                return copy.deepcopy(doc)
        return None

    async def find_all(self, collection):
        self._check("find_all")
        return [copy.deepcopy(doc) for doc in self._col(collection).values()]

    async def create(self, collection, doc):
        self._check("create")
        return self.put(collection, doc)

    async def save(self, collection, doc):
        self._check("save")
        self._col(collection)[doc["id"]] = copy.deepcopy(doc)
        return doc

    async def save_all(self, writes):
        self._check("save_all")
        for collection, doc in list(writes):
            self._col(collection)[doc["id"]] = copy.deepcopy(doc)


@pytest.fixture
def settings():
    return Settings(jwt_secret="test-secret-please-change", bcrypt_rounds=4)


@pytest.fixture
def store():
    return MemoryDocumentStore()


@pytest.fixture
def products(store):
    """Two catalogue products: cost 10 and cost 5."""
    return {
        "pen": store.put("products", {"id": "pen", "name": "Fountain pen", "category": "Stationery",
                                      "cost": 10, "rating": 4, "image": ""}),
        "ink": store.put("products", {"id": "ink", "name": "Ink bottle", "category": "Stationery",
                                      "cost": 5, "rating": 5, "image": ""}),
    }


def make_user(store, email="alice@example.com", address=ADDRESS, wallet_money=100, password="s3cret-pass"):
    return store.put("users", {
        "name": "Alice",
        "email": email,
        "password": hash_password(password, rounds=4),
        "address": address,
        "wallet_money": wallet_money,
    })


@pytest.fixture
def user_doc(store):
    return make_user(store)


@pytest.fixture
def user(user_doc):
    return User(**user_doc)


@pytest.fixture
def cart_service(store):
    return CartService(
        carts=CartRepository(store),
        products=ProductRepository(store),
        users=UserRepository(store),
    )
