"""Error taxonomy for the storefront data-access layer."""

from __future__ import annotations

from typing import Any, Dict, Optional


class StorefrontError(Exception):
    """Base class for all storefront data-access errors."""


class ApiError(StorefrontError):
    """Failure talking to the remote backend."""

    def __init__(self, message: str, *, status: Optional[int] = None, body: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body or {}


class NetworkError(ApiError):
    """The backend could not be reached (no HTTP status)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status=None)


class HttpError(ApiError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status: int, message: str, body: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, status=status, body=body)

    def __str__(self) -> str:
        return f"{self.message} (status={self.status})"


class PaymentError(StorefrontError):
    """Any failure during payment processing. Never recovered by fallback."""

    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}
