"""HTTP-aware error types raised by services and auth dependencies.

Each error carries its own status code so that services can raise them
directly and FastAPI renders them as ``{"detail": ...}`` responses.
"""
from typing import Optional

from fastapi import HTTPException, status


class StorefrontError(HTTPException):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal Server Error"

    def __init__(self, detail: Optional[str] = None, headers: Optional[dict] = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail, headers=headers)


class BadRequestError(StorefrontError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"


class AuthError(StorefrontError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid username or password"


class MissingTokenError(StorefrontError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Access denied"


class ForbiddenError(StorefrontError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to perform this action"


class InvalidTokenError(StorefrontError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid token"


class NotFoundError(StorefrontError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class ConflictError(StorefrontError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict"
