"""Exceptions raised by the Finding API client."""

from typing import Any, Dict, Optional

from .models import ApiError


class FindingError(Exception):
    """Base exception for all Finding API client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class ConfigError(FindingError):
    """Raised when the client or endpoint configuration is unusable."""
    pass


class TransportError(FindingError):
    """Raised when the HTTP request itself fails (network, DNS, timeout)."""
    pass


class DecodeError(FindingError):
    """Raised when a response body does not match the expected envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code


class ProviderError(FindingError):
    """The API answered with an error envelope."""

    def __init__(self, error: ApiError, status_code: int):
        message = error.message or f"HTTP {status_code} error"
        super().__init__(message, {"status_code": status_code, **error.to_dict()})
        self.error = error
        self.status_code = status_code
