"""
SoundCloud OAuth helpers.

Builds the authorization URL, extracts the authorization code from the
redirect, and exchanges it for a token. Once a token is obtained, hand
``token_info.access_token`` to ``SoundCloudAPI.set_token``.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlencode, urlsplit

import requests

from .credentials import SoundCloudCredentials
from .exceptions import SoundCloudAuthError

logger = logging.getLogger(__name__)

AUTH_BASE_URL = "https://www.soundcloud.com/connect"
TOKEN_URL = "https://api.soundcloud.com/oauth2/token"

# Tokens issued with this scope never expire.
DEFAULT_SCOPE = "non-expiring"


@dataclass
class TokenInfo:
    """
    Structured container for OAuth token information.

    ``expires_at`` is None for non-expiring tokens.
    """

    access_token: str
    scope: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_at: Optional[float] = None

    _raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenInfo":
        """
        Create TokenInfo from a token endpoint response.

        Raises:
            SoundCloudAuthError: If ``access_token`` is missing.
        """
        if not isinstance(data, dict):
            raise SoundCloudAuthError(
                f"Token data must be a dictionary, got {type(data)}"
            )
        if not data.get("access_token"):
            raise SoundCloudAuthError("Token missing required field: access_token")

        expires_at = data.get("expires_at")
        if expires_at is None and data.get("expires_in"):
            expires_at = time.time() + int(data["expires_in"])

        return cls(
            access_token=data["access_token"],
            scope=data.get("scope"),
            refresh_token=data.get("refresh_token"),
            expires_at=expires_at,
            _raw=data.copy(),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"access_token": self.access_token}
        if self.scope:
            result["scope"] = self.scope
        if self.refresh_token:
            result["refresh_token"] = self.refresh_token
        if self.expires_at is not None:
            result["expires_at"] = self.expires_at
        return result

    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at < time.time()


class SoundCloudAuthManager:
    """
    Manages the SoundCloud OAuth authorization-code flow.

    Stateless regarding tokens: it returns them and the caller decides
    where they live.

    Example:
        auth_manager = SoundCloudAuthManager(credentials)
        url = auth_manager.get_auth_url(state="xyz")
        # ... user authorizes, browser is redirected to redirect_uri ...
        code = auth_manager.parse_redirect(redirect_url, expected_state="xyz")
        token_info = auth_manager.exchange_code(code)
        api.set_token(token_info.access_token)
    """

    def __init__(
        self,
        credentials: SoundCloudCredentials,
        scope: str = DEFAULT_SCOPE,
        timeout: float = 30,
    ):
        self._credentials = credentials
        self._scope = scope
        self._timeout = timeout

    def _require_redirect_uri(self) -> str:
        if not self._credentials.redirect_uri:
            raise SoundCloudAuthError("redirect_uri is required for OAuth")
        return self._credentials.redirect_uri

    def get_auth_url(self, state: Optional[str] = None) -> str:
        """
        Generate the SoundCloud authorization URL.

        Args:
            state: Optional state parameter for CSRF protection.

        Raises:
            SoundCloudAuthError: If no redirect_uri is configured.
        """
        params = {
            "client_id": self._credentials.client_id,
            "redirect_uri": self._require_redirect_uri(),
            "response_type": "code",
            "scope": self._scope,
        }
        if state:
            params["state"] = state
        return f"{AUTH_BASE_URL}?{urlencode(params)}"

    def parse_redirect(
        self, redirect_url: str, expected_state: Optional[str] = None
    ) -> str:
        """
        Extract the authorization code from the OAuth redirect.

        SoundCloud may return parameters in the query or the fragment.

        Raises:
            SoundCloudAuthError: If the user denied access, the state does
                not match, or no code is present.
        """
        parts = urlsplit(redirect_url)
        params = parse_qs(parts.query)
        params.update(parse_qs(parts.fragment))

        if "error" in params:
            description = params.get("error_description", params["error"])[0]
            raise SoundCloudAuthError(f"Authorization failed: {description}")

        if expected_state is not None:
            state = params.get("state", [None])[0]
            if state != expected_state:
                raise SoundCloudAuthError("OAuth state mismatch")

        code = params.get("code", [None])[0]
        if not code:
            raise SoundCloudAuthError("No authorization code in redirect")
        return code

    def exchange_code(self, code: str) -> TokenInfo:
        """
        Exchange an authorization code for a token.

        Raises:
            SoundCloudAuthError: If the code is missing or the exchange fails.
        """
        if not code:
            raise SoundCloudAuthError("Authorization code is required")

        token_info = self._request_token({
            "grant_type": "authorization_code",
            "redirect_uri": self._require_redirect_uri(),
            "code": code,
        })
        logger.info("Successfully exchanged code for token")
        return token_info

    def refresh_token(self, token_info: TokenInfo) -> TokenInfo:
        """
        Refresh an expiring token.

        Raises:
            SoundCloudAuthError: If no refresh_token is available or the
                refresh fails.
        """
        if not token_info.refresh_token:
            raise SoundCloudAuthError("Cannot refresh: no refresh_token available")

        data = self._request_token({
            "grant_type": "refresh_token",
            "refresh_token": token_info.refresh_token,
        })
        if not data.refresh_token:
            data.refresh_token = token_info.refresh_token
        logger.info("Successfully refreshed token")
        return data

    def _request_token(self, form: Dict[str, str]) -> TokenInfo:
        form = {
            "client_id": self._credentials.client_id,
            "client_secret": self._credentials.client_secret or "",
            **form,
        }
        try:
            response = requests.post(TOKEN_URL, data=form, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error("Token request failed: %s", e)
            raise SoundCloudAuthError(f"Token request failed: {e}") from e

        if response.status_code != 200:
            try:
                error_msg = response.json().get("error", response.text)
            except ValueError:
                error_msg = response.text
            raise SoundCloudAuthError(
                f"Token request failed ({response.status_code}): {error_msg}"
            )

        try:
            return TokenInfo.from_dict(response.json())
        except ValueError as e:
            raise SoundCloudAuthError("Token response was not JSON") from e
