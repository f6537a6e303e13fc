"""
Application error taxonomy.

Services and stores raise these; ``api.middleware`` turns them into
``{"detail": ...}`` JSON responses with the matching status code.
"""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Server error"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, detail: Optional[str] = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class DuplicateEmail(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "User already exists with this email"


class InvalidCredentials(AppError):
    # Same message for unknown email and wrong password.
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid credentials"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    detail = "Not found"


class InvalidOrExpiredToken(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    detail = "Invalid or expired token"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Not authorized"
    headers = {"WWW-Authenticate": "Bearer"}


class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    detail = "Insufficient permissions"


class ServerError(AppError):
    pass
