"""
SoundCloud credentials management.

Provides a clean dataclass for SoundCloud application credentials.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SoundCloudCredentials:
    """
    Immutable container for SoundCloud application credentials.

    Only ``client_id`` is needed to call the public API. The secret and
    redirect URI are needed for the OAuth authorization-code flow.

    Attributes:
        client_id: The SoundCloud application client ID.
        client_secret: The application client secret.
        redirect_uri: The OAuth callback URL registered for the app.

    Example:
        credentials = SoundCloudCredentials.from_env()

        credentials = SoundCloudCredentials(
            client_id='your_client_id',
            client_secret='your_client_secret',
            redirect_uri='myapp://soundcloud/callback'
        )
    """

    client_id: str
    client_secret: Optional[str] = None
    redirect_uri: Optional[str] = None

    def __post_init__(self):
        """Validate credentials on creation."""
        if not self.client_id:
            raise ValueError("client_id is required")

    @classmethod
    def from_config(cls, config: dict) -> 'SoundCloudCredentials':
        """
        Create credentials from a config mapping.

        Args:
            config: Mapping with SOUNDCLOUD_* keys (see config.as_dict).

        Raises:
            ValueError: If SOUNDCLOUD_CLIENT_ID is missing.
        """
        return cls(
            client_id=config.get('SOUNDCLOUD_CLIENT_ID') or '',
            client_secret=config.get('SOUNDCLOUD_CLIENT_SECRET'),
            redirect_uri=config.get('SOUNDCLOUD_REDIRECT_URI'),
        )

    @classmethod
    def from_env(cls) -> 'SoundCloudCredentials':
        """
        Create credentials from environment variables.

        Raises:
            ValueError: If SOUNDCLOUD_CLIENT_ID is not set.
        """
        return cls(
            client_id=os.getenv('SOUNDCLOUD_CLIENT_ID', ''),
            client_secret=os.getenv('SOUNDCLOUD_CLIENT_SECRET'),
            redirect_uri=os.getenv('SOUNDCLOUD_REDIRECT_URI'),
        )

    def to_dict(self) -> dict:
        return {
            'client_id': self.client_id,
            'client_secret': self.client_secret,
            'redirect_uri': self.redirect_uri
        }
