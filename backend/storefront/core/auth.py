"""
storefront/core/auth.py - Bearer-token authentication.

`verify_access_payload` judges a decoded token:
1. `type` must be "access", otherwise `UnauthorizedError("Invalid token type")`.
2. `exp` must not be in the past, otherwise `UnauthorizedError("Token expired, please login")`.
3. The subject is looked up; an unknown subject yields `None` (not an error), so the
   caller can answer 401 without treating it as a server fault.
4. A failing lookup surfaces as `InternalError`.

`get_current_user` is the FastAPI dependency protecting cart and user endpoints.
"""
import time
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.config import Settings, get_settings
from storefront.core.errors import InternalError, UnauthorizedError
from storefront.core.tokens import TokenPayload, TokenType, decode_token
from storefront.dependencies import get_user_repository
from storefront.repositories.store import StoreError
from storefront.repositories.users import UserRepository
from storefront.schemas.user import User

# auto_error=False: a missing header is answered with our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


async def verify_access_payload(
    payload: TokenPayload,
    users: UserRepository,
    now: Optional[float] = None,
) -> Optional[User]:
    if payload.type != TokenType.ACCESS.value:
        raise UnauthorizedError("Invalid token type")
    if (time.time() if now is None else now) > payload.exp:
        raise UnauthorizedError("Token expired, please login")
    try:
        return await users.get(payload.sub)
    except StoreError as exc:
        raise InternalError("Could not load user for token") from exc


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    users: UserRepository = Depends(get_user_repository),
    settings: Settings = Depends(get_settings),
) -> User:
    if not credentials or not credentials.credentials:
        raise UnauthorizedError("Please authenticate")

    payload = decode_token(credentials.credentials, settings.jwt_secret)
    user = await verify_access_payload(payload, users)
    if user is None:
        raise UnauthorizedError("Please authenticate")
    return user
