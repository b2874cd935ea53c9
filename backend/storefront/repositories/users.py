from typing import Optional

from storefront.repositories.store import DocumentStore
from storefront.schemas.user import User

COL = "users"


class UserRepository:
    """User documents, keyed by generated id; `email` is unique."""

    collection = COL

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get(self, user_id: str) -> Optional[User]:
        doc = await self.store.find_by_id(COL, user_id)
        return User(**doc) if doc else None

    async def get_by_email(self, email: str) -> Optional[User]:
        doc = await self.store.find_one(COL, "email", email)
        return User(**doc) if doc else None

    async def is_email_taken(self, email: str) -> bool:
        return await self.get_by_email(email) is not None

    async def create(self, user: User) -> User:
        doc = await self.store.create(COL, user.model_dump(exclude_none=True))
        return User(**doc)

    async def save(self, user: User) -> User:
        await self.store.save(COL, user.model_dump())
        return user
