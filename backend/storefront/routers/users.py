"""
# storefront/routers/users.py — User profile and address endpoints

All endpoints require `Authorization: Bearer <access token>` and only allow access to
the caller's own record (`403` otherwise).

### GET /v1/users/{user_id}
Return the profile (`id`, `name`, `email`, `address`, `walletMoney`).
With `?q=address` only `{"address": ...}` is returned.

### PUT /v1/users/{user_id}
Set the shipping address (min. 20 characters). Returns `{"address": ...}`.
Checkout refuses to run until this has been done once.
"""
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query

from storefront.core.auth import get_current_user
from storefront.core.errors import ForbiddenError
from storefront.dependencies import get_user_service
from storefront.schemas.user import AddressOut, AddressUpdate, User, UserOut
from storefront.services.user_service import UserService

router = APIRouter(prefix="/v1/users", tags=["Users"])


def _ensure_self(user_id: str, current_user: User) -> None:
    if current_user.id != user_id:
        raise ForbiddenError("User not authorized to access this resource")


@router.get("/{user_id}", response_model=None)
async def get_user(
    user_id: str,
    q: Optional[Literal["address"]] = Query(None, description="'address' returns only the address"),
    current_user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    _ensure_self(user_id, current_user)
    if q == "address":
        data = await users.get_user_address_by_id(user_id)
        return AddressOut(address=data["address"]).model_dump()
    return UserOut.model_validate(current_user.model_dump()).model_dump(mode="json", by_alias=True)


@router.put("/{user_id}", response_model=AddressOut)
async def set_address(
    user_id: str,
    body: AddressUpdate,
    current_user: User = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    _ensure_self(user_id, current_user)
    address = await users.set_address(current_user, body.address)
    return AddressOut(address=address)
