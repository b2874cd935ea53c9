"""
Token primitives and the access-token verifier.
"""
import time
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from storefront.core.auth import verify_access_payload
from storefront.core.errors import InternalError, UnauthorizedError
from storefront.core.tokens import (
    TokenPayload,
    TokenType,
    decode_token,
    generate_auth_tokens,
    generate_token,
)
from storefront.repositories.users import UserRepository

SECRET = "test-secret-please-change"


def payload(sub, token_type="access", exp_in=3600):
    now = int(time.time())
    return TokenPayload(sub=sub, type=token_type, iat=now, exp=now + exp_in)


class TestVerifyAccessPayload:
    @pytest.mark.asyncio
    async def test_valid_payload_resolves_user(self, store, user):
        found = await verify_access_payload(payload(user.id), UserRepository(store))

        assert found is not None
        assert found.email == user.email

    @pytest.mark.asyncio
    async def test_wrong_type_rejected(self, store, user):
        with pytest.raises(UnauthorizedError, match="Invalid token type"):
            await verify_access_payload(payload(user.id, "refresh"), UserRepository(store))

    @pytest.mark.asyncio
    async def test_expired_rejected(self, store, user):
        with pytest.raises(UnauthorizedError, match="expired"):
            await verify_access_payload(payload(user.id, exp_in=-10), UserRepository(store))

    @pytest.mark.asyncio
    async def test_type_checked_before_expiry(self, store, user):
        with pytest.raises(UnauthorizedError, match="Invalid token type"):
            await verify_access_payload(payload(user.id, "refresh", exp_in=-10), UserRepository(store))

    @pytest.mark.asyncio
    async def test_explicit_clock(self, store, user):
        p = payload(user.id)

        assert await verify_access_payload(p, UserRepository(store), now=p.exp) is not None
        with pytest.raises(UnauthorizedError):
            await verify_access_payload(p, UserRepository(store), now=p.exp + 1)

    @pytest.mark.asyncio
    async def test_unknown_subject_is_none_not_error(self, store):
        assert await verify_access_payload(payload("ghost"), UserRepository(store)) is None

    @pytest.mark.asyncio
    async def test_lookup_fault_is_error(self, store, user):
        store.fail("find_by_id")

        with pytest.raises(InternalError):
            await verify_access_payload(payload(user.id), UserRepository(store))


class TestTokens:
    def test_round_trip_claims(self):
        expires = datetime.now(timezone.utc) + timedelta(minutes=5)

        claims = decode_token(generate_token("u1", expires, TokenType.ACCESS, SECRET), SECRET)

        assert claims.sub == "u1"
        assert claims.type == "access"
        assert claims.exp == int(expires.timestamp())

    def test_expired_token_still_decodes(self):
        expires = datetime.now(timezone.utc) - timedelta(minutes=5)

        claims = decode_token(generate_token("u1", expires, TokenType.ACCESS, SECRET), SECRET)

        assert claims.exp < time.time()

    def test_wrong_secret_rejected(self):
        token = generate_token("u1", datetime.now(timezone.utc) + timedelta(minutes=5),
                               TokenType.ACCESS, "another-secret")

        with pytest.raises(UnauthorizedError):
            decode_token(token, SECRET)

    def test_missing_claims_rejected(self):
        token = jwt.encode({"sub": "u1"}, SECRET, algorithm="HS256")

        with pytest.raises(UnauthorizedError):
            decode_token(token, SECRET)

    def test_garbage_rejected(self):
        with pytest.raises(UnauthorizedError):
            decode_token("not-a-jwt", SECRET)

    def test_auth_tokens_have_distinct_types(self, user, settings):
        tokens = generate_auth_tokens(user, settings)

        assert decode_token(tokens.access.token, settings.jwt_secret).type == "access"
        assert decode_token(tokens.refresh.token, settings.jwt_secret).type == "refresh"
        assert tokens.refresh.expires > tokens.access.expires
