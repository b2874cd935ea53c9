import logging

from storefront.core.errors import UnauthorizedError, store_errors_as_internal
from storefront.core.passwords import verify_password
from storefront.repositories.users import UserRepository
from storefront.schemas.user import User

logger = logging.getLogger("storefront.auth")


class AuthService:
    def __init__(self, users: UserRepository):
        self.users = users

    @store_errors_as_internal
    async def login_user_with_email_and_password(self, email: str, password: str) -> User:
        """Same error for unknown e-mail and wrong password (no user enumeration)."""
        user = await self.users.get_by_email(email)
        if not user or not verify_password(password, user.password):
            logger.warning("Rejected login for %s", email)
            raise UnauthorizedError("Incorrect email or password")
        return user
