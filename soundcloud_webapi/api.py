"""
SoundCloud API factory.

Wires the JSON codec, HTTP transport and request authenticator into a
single SoundCloudService, and owns the OAuth token those requests carry.
"""

import logging
from typing import Optional

from .authenticator import SessionState, SoundCloudRequestAuthenticator
from .codec import SoundCloudCodec
from .credentials import SoundCloudCredentials
from .http_client import (
    DEFAULT_TIMEOUT,
    MAX_RETRIES,
    SOUNDCLOUD_API_ENDPOINT,
    SoundCloudHTTPClient,
)
from .service import SoundCloudService

logger = logging.getLogger(__name__)


class SoundCloudAPI:
    """
    Builds a SoundCloudService for a client id.

    Requests are unauthenticated (client id only) until ``set_token`` is
    called with a token obtained through the OAuth flow.

    Example:
        api = SoundCloudAPI("my-client-id")
        tracks = api.service.search_tracks("piano").execute()

        api.set_token(token_info.access_token)
        me = api.service.get_me().execute()
    """

    def __init__(
        self,
        client_id: str,
        base_url: str = SOUNDCLOUD_API_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = MAX_RETRIES,
    ):
        """
        Initialize the API.

        Args:
            client_id: Client ID issued by SoundCloud.
            base_url: API root, overridable for testing.
            timeout: Per-request timeout in seconds.
            max_retries: Transport-level retries. Off by default.

        Raises:
            ValueError: If client_id is empty.
        """
        if not client_id:
            raise ValueError("client_id is required")

        self._client_id = client_id
        self._state = SessionState()
        self._codec = SoundCloudCodec()
        self._http = SoundCloudHTTPClient(
            auth=SoundCloudRequestAuthenticator(client_id, self._state),
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
        )
        self._service = SoundCloudService(self._http, self._codec)
        logger.debug("SoundCloudAPI initialized for %s", self._http.base_url)

    @classmethod
    def from_credentials(
        cls, credentials: SoundCloudCredentials, **kwargs
    ) -> "SoundCloudAPI":
        return cls(credentials.client_id, **kwargs)

    @classmethod
    def from_config(cls, config: dict) -> "SoundCloudAPI":
        """
        Create an API from a config mapping (see ``config.as_dict``).

        Raises:
            ValueError: If SOUNDCLOUD_CLIENT_ID is missing.
        """
        credentials = SoundCloudCredentials.from_config(config)
        return cls(
            credentials.client_id,
            base_url=config.get("SOUNDCLOUD_API_BASE_URL") or SOUNDCLOUD_API_ENDPOINT,
            timeout=float(config.get("SOUNDCLOUD_TIMEOUT", DEFAULT_TIMEOUT)),
            max_retries=int(config.get("SOUNDCLOUD_MAX_RETRIES", MAX_RETRIES)),
        )

    @classmethod
    def from_env(cls) -> "SoundCloudAPI":
        return cls.from_credentials(SoundCloudCredentials.from_env())

    @property
    def service(self) -> SoundCloudService:
        """The endpoint declarations bound to this API's transport."""
        return self._service

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def token(self) -> Optional[str]:
        return self._state.token

    def set_token(self, token: Optional[str]) -> None:
        """
        Set the OAuth token sent with subsequent requests.

        None or an empty string clears it. Requests already being
        prepared on other threads may still see the previous value.
        """
        self._state.token = token
        logger.info("OAuth token %s", "set" if token else "cleared")

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "SoundCloudAPI":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
