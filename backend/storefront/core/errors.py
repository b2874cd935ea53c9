"""
storefront/core/errors.py - Error taxonomy shared by services and the HTTP layer.

Services raise these; `main.py` renders them as `{"code": <status>, "message": <text>}`.
"""
import functools

from fastapi import status

from storefront.repositories.store import StoreError


class ApiError(Exception):
    """Base error carrying the HTTP status the boundary should answer with."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.status_code}, {self.message!r})"


class BadRequestError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def store_errors_as_internal(func):
    """Re-raise `StoreError` from an async service method as `InternalError`."""
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except StoreError as exc:
            raise InternalError(f"Database error while running {func.__name__}") from exc
    return wrapper
