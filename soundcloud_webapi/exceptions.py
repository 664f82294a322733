"""
SoundCloud module exceptions.

Provides a clean exception hierarchy for SoundCloud API operations.
"""

from typing import Optional


class SoundCloudError(Exception):
    """Base exception for all SoundCloud-related errors."""
    pass


class SoundCloudAuthError(SoundCloudError):
    """Raised when authentication/authorization fails."""
    pass


class AuthNotReady(SoundCloudAuthError):
    """Raised when the browser-tab session is used before it is connected."""
    pass


class SoundCloudAPIError(SoundCloudError):
    """Raised when a SoundCloud API call fails."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(SoundCloudAPIError):
    """Raised when the request never produced an HTTP response."""
    pass


class DecodeError(SoundCloudAPIError):
    """Raised when a response body does not match the expected shape."""
    pass


class SoundCloudNotFoundError(SoundCloudAPIError):
    """Raised when a requested resource is not found."""
    pass


class SoundCloudUnauthorizedError(SoundCloudAPIError):
    """Raised when SoundCloud rejects the client id or OAuth token."""
    pass
