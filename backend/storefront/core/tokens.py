"""
storefront/core/tokens.py - JWT issue and decode (PyJWT, HS256).

Payload claims: `sub` (user id), `type` (access | refresh), `iat`, `exp` (unix seconds).
`decode_token` checks the signature only; expiry and token type are judged by
`storefront.core.auth.verify_access_payload`.
"""
from datetime import datetime, timedelta, timezone
from enum import Enum

import jwt
from pydantic import BaseModel, ValidationError

from storefront.config import Settings
from storefront.core.errors import UnauthorizedError
from storefront.schemas.user import AuthTokens, TokenInfo, User

ALGORITHM = "HS256"


class TokenType(str, Enum):
    ACCESS = "access"
    REFRESH = "refresh"


class TokenPayload(BaseModel):
    sub: str
    type: str
    iat: int
    exp: int


def generate_token(user_id: str, expires: datetime, token_type: TokenType, secret: str) -> str:
    payload = {
        "sub": user_id,
        "type": token_type.value,
        "iat": int(datetime.now(timezone.utc).timestamp()),
        "exp": int(expires.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_token(token: str, secret: str) -> TokenPayload:
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"verify_exp": False, "require": ["sub", "type", "exp"]},
        )
        return TokenPayload(**{"iat": 0, **claims})
    except (jwt.InvalidTokenError, ValidationError) as exc:
        raise UnauthorizedError("Please authenticate") from exc


def generate_auth_tokens(user: User, settings: Settings) -> AuthTokens:
    now = datetime.now(timezone.utc)
    access_expires = now + timedelta(minutes=settings.jwt_access_expiration_minutes)
    refresh_expires = now + timedelta(days=settings.jwt_refresh_expiration_days)
    return AuthTokens(
        access=TokenInfo(
            token=generate_token(user.id, access_expires, TokenType.ACCESS, settings.jwt_secret),
            expires=access_expires,
        ),
        refresh=TokenInfo(
            token=generate_token(user.id, refresh_expires, TokenType.REFRESH, settings.jwt_secret),
            expires=refresh_expires,
        ),
    )
