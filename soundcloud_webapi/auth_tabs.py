"""
Browser-tab connection for the SoundCloud OAuth authorization step.

The host platform binds a browser-tab service and reports it through
``on_service_connected`` / ``on_service_disconnected``. The connection warms
the tab service up, opens a session, preloads the SoundCloud connect page
and tells the registered AuthenticationCallback when authentication can
start or has ended.

Callbacks are held through weak references: the connection never keeps
their owners alive, and signals to an owner that is gone are dropped.
"""

from __future__ import annotations

import logging
import weakref
from enum import StrEnum
from typing import Any, Callable, Optional, Protocol, Sequence

from .auth import AUTH_BASE_URL
from .exceptions import AuthNotReady

logger = logging.getLogger(__name__)


class ConnectionState(StrEnum):
    UNBOUND = "unbound"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class AuthenticationCallback(Protocol):
    """Receives authentication lifecycle signals."""

    def on_ready_to_authenticate(self) -> None: ...

    def on_authentication_ended(self) -> None: ...


class TabsSession(Protocol):
    """Session opened on the platform's browser-tab service."""

    def may_launch_url(
        self,
        url: str,
        extras: Optional[dict] = None,
        other_likely_bundles: Optional[Sequence[dict]] = None,
    ) -> bool: ...


class TabsClient(Protocol):
    """Client handed over by the platform once the tab service is bound."""

    def warmup(self, flags: int) -> bool: ...

    def new_session(self, callback: Any) -> Optional[TabsSession]: ...


class AuthTabNavigationCallback:
    """Receives navigation events from the browser tab. Logs them by default."""

    def on_navigation_event(self, event: int, extras: Optional[dict] = None) -> None:
        logger.debug("Auth tab navigation event %s", event)


def _weak(obj: Any) -> Callable[[], Any]:
    if hasattr(obj, "__self__") and hasattr(obj, "__func__"):
        return weakref.WeakMethod(obj)
    return weakref.ref(obj)


class AuthTabServiceConnection:
    """
    Tracks one binding of the browser-tab service.

    Unbound -> Connected -> Disconnected. Disconnected is terminal; create a
    new connection to bind again.

    Example:
        connection = AuthTabServiceConnection(activity)
        platform.bind_custom_tabs_service(package, connection)
        # activity.on_ready_to_authenticate() fires once the tab is ready
        connection.session  # raises AuthNotReady until then
    """

    def __init__(
        self,
        auth_callback: AuthenticationCallback,
        navigation_callback: Optional[AuthTabNavigationCallback] = None,
    ):
        """
        Args:
            auth_callback: Notified when authentication can start or ended.
            navigation_callback: Receives tab navigation events. When
                omitted, a logging callback owned by this connection is used.
        """
        if navigation_callback is None:
            self._default_navigation_callback = AuthTabNavigationCallback()
            navigation_callback = self._default_navigation_callback
        else:
            self._default_navigation_callback = None

        self._auth_callback_ref = _weak(auth_callback)
        self._navigation_callback_ref = _weak(navigation_callback)
        self._client: Optional[TabsClient] = None
        self._session: Optional[TabsSession] = None
        self._state = ConnectionState.UNBOUND

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def client(self) -> Optional[TabsClient]:
        return self._client

    @property
    def session(self) -> TabsSession:
        """
        The open tab session.

        Raises:
            AuthNotReady: If the service is not connected or the platform
                refused to open a session.
        """
        if self._state is not ConnectionState.CONNECTED or self._session is None:
            raise AuthNotReady(
                f"Browser-tab session unavailable (state: {self._state})"
            )
        return self._session

    def may_launch_url(self, url: str = AUTH_BASE_URL) -> bool:
        """
        Hint the tab service to preload ``url``.

        Raises:
            AuthNotReady: If no session is available.
        """
        return self.session.may_launch_url(url, None, None)

    def on_service_connected(self, component_name: Any, client: TabsClient) -> None:
        """Platform hook: the tab service was bound."""
        if self._state is not ConnectionState.UNBOUND:
            logger.warning(
                "Ignoring service connection for %s in state %s",
                component_name, self._state,
            )
            return

        # State stays Unbound if the platform raises during setup.
        client.warmup(0)
        session = client.new_session(self._navigation_callback_ref())
        if session is not None:
            session.may_launch_url(AUTH_BASE_URL, None, None)
        else:
            logger.warning("Tab service refused to open a session")

        self._client = client
        self._session = session
        self._state = ConnectionState.CONNECTED

        logger.info("Auth tab service connected: %s", component_name)
        self._signal("on_ready_to_authenticate")

    def on_service_disconnected(self, component_name: Any) -> None:
        """Platform hook: the tab service was unbound."""
        self._client = None
        self._session = None
        self._state = ConnectionState.DISCONNECTED

        logger.info("Auth tab service disconnected: %s", component_name)
        self._signal("on_authentication_ended")

    def _signal(self, name: str) -> None:
        callback = self._auth_callback_ref()
        if callback is None:
            logger.debug("Authentication callback reclaimed; dropping %s", name)
            return
        getattr(callback, name)()
