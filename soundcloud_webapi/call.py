"""
Request descriptors and deferred calls.

Every endpoint method returns a SoundCloudCall instead of performing the
request immediately. The caller decides when, and on which thread, the
request runs.
"""

import logging
import re
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Tuple, Type, Union,
)
from urllib.parse import quote

from pydantic import BaseModel

from .exceptions import SoundCloudError

if TYPE_CHECKING:
    import requests

    from .codec import SoundCloudCodec
    from .http_client import SoundCloudHTTPClient

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def expand_path(template: str, path_params: Mapping[str, Any]) -> str:
    """
    Substitute ``{name}`` placeholders in a path template.

    Each value is percent-encoded once, with ``/`` encoded too, so an
    identifier can never escape its path segment.

    Raises:
        ValueError: If a placeholder has no value, or a value is unused.
    """
    used = set()

    def _replace(match: "re.Match") -> str:
        name = match.group(1)
        if name not in path_params or path_params[name] is None:
            raise ValueError(f"Missing value for path parameter '{name}'")
        used.add(name)
        return quote(str(path_params[name]), safe="")

    path = _PLACEHOLDER.sub(_replace, template)
    unused = set(path_params) - used
    if unused:
        raise ValueError(
            f"Path '{template}' has no placeholder for: {sorted(unused)}"
        )
    return path


@dataclass(frozen=True)
class RequestDescriptor:
    """Method, path template, parameters and body of one API request."""

    method: str
    path_template: str
    path_params: Dict[str, Any] = field(default_factory=dict)
    query: List[Tuple[str, str]] = field(default_factory=list)
    body: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> str:
        return expand_path(self.path_template, self.path_params)


class SoundCloudCall:
    """
    A deferred request that decodes into ``model`` (or a list of them).

    A call runs at most once. Use ``clone()`` to issue the same request
    again.
    """

    def __init__(
        self,
        request: RequestDescriptor,
        model: Type[BaseModel],
        http_client: "SoundCloudHTTPClient",
        codec: "SoundCloudCodec",
        many: bool = False,
    ):
        self._request = request
        self._model = model
        self._many = many
        self._http = http_client
        self._codec = codec
        self._executed = False
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"<SoundCloudCall {self._request.method} "
            f"{self._request.path_template} -> "
            f"{'List[' + self._model.__name__ + ']' if self._many else self._model.__name__}>"
        )

    @property
    def request(self) -> RequestDescriptor:
        return self._request

    @property
    def is_executed(self) -> bool:
        return self._executed

    def prepare(self) -> "requests.PreparedRequest":
        """Build the request exactly as it would be sent, without sending it."""
        return self._http.prepare(self._request)

    def execute(self) -> Union[BaseModel, List[BaseModel], None]:
        """
        Send the request and decode the response.

        Returns:
            The decoded model, a list of models, or None for an empty body.

        Raises:
            SoundCloudError: If this call was already executed.
            TransportError: On network failure.
            DecodeError: If the response does not match the expected model.
            SoundCloudAPIError: On an HTTP error status.
        """
        with self._lock:
            if self._executed:
                raise SoundCloudError("Call already executed; use clone()")
            self._executed = True

        payload = self._http.send(self._request)
        if payload is None:
            return [] if self._many else None
        if self._many:
            return self._codec.decode_list(payload, self._model)
        return self._codec.decode(payload, self._model)

    def enqueue(self, executor: Executor) -> Future:
        """Run ``execute`` on the given executor."""
        logger.debug("Enqueueing %r", self)
        return executor.submit(self.execute)

    def clone(self) -> "SoundCloudCall":
        return SoundCloudCall(
            self._request, self._model, self._http, self._codec, self._many,
        )
