"""
storefront/schemas/user.py - User and authentication schemas.

## User models
- `User`: the stored user document (includes the bcrypt `password` digest).
- `UserOut`: what the API returns; never carries the password.
- `UserCreate`: registration body.
- `AddressUpdate`: body of `PUT /v1/users/{user_id}`.

## Auth models
- `LoginRequest`, `TokenInfo`, `AuthTokens`, `AuthResponse`.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator

from storefront.core.passwords import MAX_PASSWORD_BYTES, password_too_long

NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
DEFAULT_ADDRESS = "ADDRESS_NOT_SET"


class User(BaseModel):
    id: Optional[str] = None
    name: str
    email: EmailStr
    password: str = Field(..., description="bcrypt digest")
    address: str = DEFAULT_ADDRESS
    wallet_money: float = Field(0, ge=0, alias="walletMoney")

    model_config = ConfigDict(populate_by_name=True)

    def has_set_non_default_address(self, placeholder: str = DEFAULT_ADDRESS) -> bool:
        return bool(self.address) and self.address != placeholder


class UserOut(BaseModel):
    id: str
    name: str
    email: EmailStr
    address: str
    wallet_money: float = Field(..., alias="walletMoney")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class UserCreate(BaseModel):
    name: NameStr
    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator("password")
    @classmethod
    def _fits_bcrypt(cls, v: str) -> str:
        if password_too_long(v):
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")
        return v


class AddressUpdate(BaseModel):
    address: str = Field(..., min_length=20, description="Full shipping address")


class AddressOut(BaseModel):
    address: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenInfo(BaseModel):
    token: str
    expires: datetime


class AuthTokens(BaseModel):
    access: TokenInfo
    refresh: TokenInfo


class AuthResponse(BaseModel):
    user: UserOut
    tokens: AuthTokens
