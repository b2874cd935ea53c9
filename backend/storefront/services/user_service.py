import logging
from typing import Optional

from storefront.config import Settings
from storefront.core.errors import BadRequestError, NotFoundError, store_errors_as_internal
from storefront.core.passwords import hash_password
from storefront.repositories.users import UserRepository
from storefront.schemas.user import User, UserCreate

logger = logging.getLogger("storefront.users")


class UserService:
    def __init__(self, users: UserRepository, settings: Settings):
        self.users = users
        self.settings = settings

    @store_errors_as_internal
    async def get_user_by_id(self, user_id: str) -> Optional[User]:
        return await self.users.get(user_id)

    @store_errors_as_internal
    async def get_user_by_email(self, email: str) -> Optional[User]:
        return await self.users.get_by_email(email)

    @store_errors_as_internal
    async def create_user(self, body: UserCreate) -> User:
        """
        Register a new user. The e-mail must be unused; the password is stored as a bcrypt digest
        and the wallet starts at the configured default balance.
        """
        if await self.users.is_email_taken(body.email):
            raise BadRequestError("Email already taken")

        user = await self.users.create(User(
            name=body.name,
            email=body.email,
            password=hash_password(body.password, self.settings.bcrypt_rounds),
            address=self.settings.default_address,
            wallet_money=self.settings.default_wallet_money,
        ))
        logger.info("Registered user %s", user.id)
        return user

    @store_errors_as_internal
    async def get_user_address_by_id(self, user_id: str) -> dict:
        user = await self.users.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return {"email": user.email, "address": user.address}

    @store_errors_as_internal
    async def set_address(self, user: User, new_address: str) -> str:
        user.address = new_address
        await self.users.save(user)
        return user.address
