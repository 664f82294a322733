"""
SoundCloud Web API client.

Architecture:
    - api.py: SoundCloudAPI factory (codec + transport + authenticator)
    - service.py: SoundCloudService, one method per endpoint
    - call.py: RequestDescriptor and deferred SoundCloudCall
    - authenticator.py: client_id / oauth_token query-parameter auth
    - http_client.py: requests-based transport and error mapping
    - codec.py / models.py: pydantic resource models and JSON codec
    - credentials.py / auth.py: OAuth credentials and token exchange
    - auth_tabs.py: browser-tab connection for the OAuth step
    - exceptions.py: Exception hierarchy

Usage:
    from soundcloud_webapi import SoundCloudAPI

    api = SoundCloudAPI("my-client-id")
    tracks = api.service.search_tracks("piano").execute()

    api.set_token(access_token)
    me = api.service.get_me().execute()
"""

import logging

# API factory
from .api import SoundCloudAPI

# Endpoints and calls
from .service import SoundCloudService, TRACK_SEARCH_KEYS
from .call import RequestDescriptor, SoundCloudCall

# Auth
from .credentials import SoundCloudCredentials
from .auth import SoundCloudAuthManager, TokenInfo, AUTH_BASE_URL
from .auth_tabs import (
    AuthTabNavigationCallback,
    AuthTabServiceConnection,
    ConnectionState,
)

# Models
from .models import (
    Comment,
    Connection,
    Group,
    MiniUser,
    Playlist,
    SecretToken,
    Track,
    User,
    WebProfile,
)

# Exceptions
from .exceptions import (
    SoundCloudError,
    SoundCloudAuthError,
    AuthNotReady,
    SoundCloudAPIError,
    TransportError,
    DecodeError,
    SoundCloudNotFoundError,
    SoundCloudUnauthorizedError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # API
    'SoundCloudAPI',
    'SoundCloudService',
    'SoundCloudCall',
    'RequestDescriptor',
    'TRACK_SEARCH_KEYS',

    # Auth
    'SoundCloudCredentials',
    'SoundCloudAuthManager',
    'TokenInfo',
    'AUTH_BASE_URL',
    'AuthTabServiceConnection',
    'AuthTabNavigationCallback',
    'ConnectionState',

    # Models
    'Comment',
    'Connection',
    'Group',
    'MiniUser',
    'Playlist',
    'SecretToken',
    'Track',
    'User',
    'WebProfile',

    # Exceptions
    'SoundCloudError',
    'SoundCloudAuthError',
    'AuthNotReady',
    'SoundCloudAPIError',
    'TransportError',
    'DecodeError',
    'SoundCloudNotFoundError',
    'SoundCloudUnauthorizedError',
]
