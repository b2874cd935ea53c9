"""
# storefront/routers/auth.py — Authentication endpoints

### POST /v1/auth/register
Create a user and return it with a fresh token pair.
- Body: `UserCreate` (name, email, password ≥ 8 chars)
- `400` if the e-mail is already taken.
- `201` with `{user, tokens}` on success.

### POST /v1/auth/login
Log in with e-mail + password.
- `401` on unknown e-mail or wrong password (same message for both).
- `200` with `{user, tokens}` on success.

Tokens: `tokens.access` authorizes API calls (`Authorization: Bearer <token>`);
`tokens.refresh` carries `type=refresh` and is rejected by protected endpoints.
"""
from fastapi import APIRouter, Depends, status

from storefront.config import Settings, get_settings
from storefront.core.tokens import generate_auth_tokens
from storefront.dependencies import get_auth_service, get_user_service
from storefront.schemas.user import AuthResponse, LoginRequest, UserCreate, UserOut
from storefront.services.auth_service import AuthService
from storefront.services.user_service import UserService

router = APIRouter(prefix="/v1/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: UserCreate,
    users: UserService = Depends(get_user_service),
    settings: Settings = Depends(get_settings),
):
    user = await users.create_user(body)
    return AuthResponse(
        user=UserOut.model_validate(user.model_dump()),
        tokens=generate_auth_tokens(user, settings),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    body: LoginRequest,
    auth: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    user = await auth.login_user_with_email_and_password(body.email, body.password)
    return AuthResponse(
        user=UserOut.model_validate(user.model_dump()),
        tokens=generate_auth_tokens(user, settings),
    )
