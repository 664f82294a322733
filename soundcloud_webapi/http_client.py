"""
Lightweight HTTP client for the SoundCloud API.

Wraps requests.Session with base URL handling, the query-parameter
authenticator, transport-level retries and error mapping.
"""

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.auth import AuthBase
from requests.exceptions import ConnectionError, RequestException, Timeout
from urllib3.util.retry import Retry

from .call import RequestDescriptor
from .exceptions import (
    DecodeError,
    SoundCloudAPIError,
    SoundCloudNotFoundError,
    SoundCloudUnauthorizedError,
    TransportError,
)

logger = logging.getLogger(__name__)

SOUNDCLOUD_API_ENDPOINT = "https://api.soundcloud.com"
DEFAULT_TIMEOUT = 30  # seconds
MAX_RETRIES = 0  # opt-in; the library does not retry by default
BACKOFF_FACTOR = 0.5
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def build_retry(max_retries: int) -> Retry:
    """Retry policy handed to urllib3; only idempotent verbs are retried."""
    return Retry(
        total=max_retries,
        backoff_factor=BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_CODES,
        respect_retry_after_header=True,
        raise_on_status=False,
    )


class SoundCloudHTTPClient:
    """
    HTTP transport for SoundCloud API requests.

    Every request prepared by the underlying session goes through ``auth``,
    so authentication is applied uniformly to every endpoint.
    """

    def __init__(
        self,
        auth: AuthBase,
        base_url: str = SOUNDCLOUD_API_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = MAX_RETRIES,
    ):
        """
        Initialize the HTTP client.

        Args:
            auth: Request mutation hook run on every prepared request.
            base_url: API root that request paths are joined onto.
            timeout: Per-request timeout in seconds.
            max_retries: Opt-in transport retries for connection errors and
                retryable status codes.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = requests.Session()
        self._session.auth = auth
        self._session.headers.update({"Accept": "application/json"})

        adapter = HTTPAdapter(max_retries=build_retry(max_retries))
        self._session.mount("https://", adapter)
        self._session.mount("http://", adapter)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> requests.Session:
        return self._session

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def url_for(self, request: RequestDescriptor) -> str:
        return f"{self._base_url}/{request.path.lstrip('/')}"

    def prepare(self, request: RequestDescriptor) -> requests.PreparedRequest:
        """Build a PreparedRequest with session headers and auth applied."""
        return self._session.prepare_request(
            requests.Request(
                request.method,
                self.url_for(request),
                params=list(request.query) or None,
                json=request.body,
            )
        )

    def send(self, request: RequestDescriptor) -> Any:
        """
        Send a request and return the parsed JSON body.

        Returns:
            Parsed JSON, or None for 204 / empty responses.

        Raises:
            TransportError: On connection errors and timeouts.
            SoundCloudUnauthorizedError: On 401.
            SoundCloudNotFoundError: On 404.
            SoundCloudAPIError: On any other non-2xx status.
            DecodeError: If the body is not valid JSON.
        """
        url = self.url_for(request)
        logger.debug("%s %s", request.method, request.path)

        try:
            response = self._session.request(
                request.method,
                url,
                params=list(request.query) or None,
                json=request.body,
                timeout=self._timeout,
            )
        except (ConnectionError, Timeout) as e:
            logger.error("Network error on %s %s: %s", request.method, request.path, e)
            raise TransportError(f"Network error: {e}") from e
        except RequestException as e:
            logger.error("Request failed on %s %s: %s", request.method, request.path, e)
            raise TransportError(f"Request failed: {e}") from e

        return self._handle_response(response, request)

    def _handle_response(
        self, response: requests.Response, request: RequestDescriptor
    ) -> Optional[Any]:
        status = response.status_code

        if response.ok:
            if status == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise DecodeError(
                    f"Response from {request.path} was not JSON",
                    status_code=status,
                ) from e

        if status == 401:
            raise SoundCloudUnauthorizedError(
                "Client id or OAuth token rejected", status_code=status,
            )
        if status == 404:
            raise SoundCloudNotFoundError(
                f"Resource not found: {request.path}", status_code=status,
            )

        try:
            body = response.json()
            errors = body.get("errors") if isinstance(body, dict) else None
            msg = (
                errors[0].get("error_message", response.text)
                if errors else response.text
            )
        except (ValueError, AttributeError, IndexError):
            msg = response.text
        logger.warning("SoundCloud API error %d on %s: %s", status, request.path, msg)
        raise SoundCloudAPIError(f"API error {status}: {msg}", status_code=status)
