"""
Request authentication for the SoundCloud API.

SoundCloud authenticates through query parameters rather than headers:
every request carries the application's ``client_id`` and, once the user
has authorized the app, an ``oauth_token``.
"""

import logging
import threading
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from requests.auth import AuthBase

logger = logging.getLogger(__name__)

CLIENT_ID_PARAM = "client_id"
OAUTH_TOKEN_PARAM = "oauth_token"


class SessionState:
    """Holds the current OAuth token. Last write wins."""

    def __init__(self, token: Optional[str] = None):
        self._lock = threading.Lock()
        self._token = token or None

    @property
    def token(self) -> Optional[str]:
        with self._lock:
            return self._token

    @token.setter
    def token(self, value: Optional[str]) -> None:
        with self._lock:
            self._token = value or None


class SoundCloudRequestAuthenticator(AuthBase):
    """
    Appends ``client_id`` and ``oauth_token`` to every outgoing request.

    Installed once as ``requests.Session.auth``, so it runs for every
    request the session prepares regardless of endpoint. Transport retries
    resend the already prepared request and keep its parameters.
    """

    def __init__(self, client_id: str, session_state: SessionState):
        if not client_id:
            raise ValueError("client_id is required")
        self._client_id = client_id
        self._state = session_state

    @property
    def client_id(self) -> str:
        return self._client_id

    def __call__(self, request):
        token = self._state.token

        scheme, netloc, path, query, fragment = urlsplit(request.url)
        pairs = [
            (key, value)
            for key, value in parse_qsl(query, keep_blank_values=True)
            if key not in (CLIENT_ID_PARAM, OAUTH_TOKEN_PARAM)
        ]
        pairs.append((CLIENT_ID_PARAM, self._client_id))
        if token:
            pairs.append((OAUTH_TOKEN_PARAM, token))

        request.url = urlunsplit(
            (scheme, netloc, path, urlencode(pairs), fragment)
        )
        logger.debug(
            "Authenticated %s %s%s",
            request.method, path, " (with token)" if token else "",
        )
        return request
