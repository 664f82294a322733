"""
SoundCloud API endpoints.

One method per endpoint, grouped by resource family. Each method builds a
RequestDescriptor and returns an unexecuted SoundCloudCall; nothing is sent
until the caller executes it.
"""

from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel

from .call import RequestDescriptor, SoundCloudCall
from .codec import SoundCloudCodec
from .http_client import SoundCloudHTTPClient
from .models import (
    Comment,
    Connection,
    Group,
    Playlist,
    SecretToken,
    Track,
    User,
    WebProfile,
)

Identifier = Union[str, int]

# Keys understood by GET /tracks. Not enforced: any other key is sent as is.
TRACK_SEARCH_KEYS = (
    "q",
    "tags",
    "filter",
    "license",
    "bpm[from]",
    "bpm[to]",
    "duration[from]",
    "duration[to]",
    "created_at[from]",
    "created_at[to]",
    "ids",
    "genres",
    "types",
)


class SoundCloudService:
    """
    Typed declarations of the SoundCloud REST endpoints.

    Obtain one from ``SoundCloudAPI.service`` rather than constructing it
    directly.

    Example:
        api = SoundCloudAPI("my-client-id")
        tracks = api.service.search_tracks("piano").execute()
        api.set_token(token)
        me = api.service.get_me().execute()
    """

    def __init__(self, http_client: SoundCloudHTTPClient, codec: SoundCloudCodec):
        self._http = http_client
        self._codec = codec

    def _call(
        self,
        method: str,
        path: str,
        model: Type[BaseModel],
        many: bool = False,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
        **path_params: Identifier,
    ) -> SoundCloudCall:
        pairs = [
            (str(key), str(value))
            for key, value in (query or {}).items()
            if value is not None
        ]
        request = RequestDescriptor(
            method=method,
            path_template=path,
            path_params=dict(path_params),
            query=pairs,
            body=body,
        )
        return SoundCloudCall(request, model, self._http, self._codec, many=many)

    def _get(self, path: str, model: Type[BaseModel], **kwargs) -> SoundCloudCall:
        return self._call("GET", path, model, **kwargs)

    def _get_list(self, path: str, model: Type[BaseModel], **kwargs) -> SoundCloudCall:
        return self._call("GET", path, model, many=True, **kwargs)

    # =========================================================================
    # Tracks
    # =========================================================================

    def search_tracks(self, query: Union[str, Mapping[str, Any]]) -> SoundCloudCall:
        """
        Search tracks.

        Args:
            query: Either a plain search string (sent as ``q``) or a mapping
                of filters. See TRACK_SEARCH_KEYS for the keys SoundCloud
                recognizes, e.g. ``{"q": "piano", "bpm[from]": "90"}``.

        Returns:
            Call yielding a list of Track.
        """
        if isinstance(query, Mapping):
            return self._get_list("/tracks", Track, query=query)
        return self._get_list("/tracks", Track, query={"q": query})

    def get_track(self, track_id: Identifier) -> SoundCloudCall:
        return self._get("/tracks/{id}", Track, id=track_id)

    def get_track_comments(self, track_id: Identifier) -> SoundCloudCall:
        return self._get_list("/tracks/{id}/comments", Comment, id=track_id)

    def get_track_comment(
        self, track_id: Identifier, comment_id: Identifier
    ) -> SoundCloudCall:
        return self._get(
            "/tracks/{id}/comments/{comment-id}", Comment,
            **{"id": track_id, "comment-id": comment_id},
        )

    def get_track_favoriters(self, track_id: Identifier) -> SoundCloudCall:
        """Users who favorited the track."""
        return self._get_list("/tracks/{id}/favoriters", User, id=track_id)

    def get_track_favoriter(
        self, track_id: Identifier, user_id: Identifier
    ) -> SoundCloudCall:
        return self._get(
            "/tracks/{id}/favoriters/{user-id}", User,
            **{"id": track_id, "user-id": user_id},
        )

    def get_track_secret(self, track_id: Identifier) -> SoundCloudCall:
        """Secret token of a private track."""
        return self._get("/tracks/{id}/secret-token", SecretToken, id=track_id)

    def post_upload(self, track: Track) -> SoundCloudCall:
        """Create a track. Requires an OAuth token."""
        return self._call(
            "POST", "/tracks", Track, body=self._codec.encode(track),
        )

    # =========================================================================
    # Users
    # =========================================================================

    def search_users(self, query: str) -> SoundCloudCall:
        return self._get_list("/users", User, query={"q": query})

    def get_user(self, user_id: Identifier) -> SoundCloudCall:
        return self._get("/users/{id}", User, id=user_id)

    def get_user_tracks(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/tracks", Track, id=user_id)

    def get_user_playlists(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/playlists", Playlist, id=user_id)

    def get_user_followings(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/followings", User, id=user_id)

    def get_user_following(
        self, user_id: Identifier, following_id: Identifier
    ) -> SoundCloudCall:
        return self._get(
            "/users/{id}/followings/{following-id}", User,
            **{"id": user_id, "following-id": following_id},
        )

    def get_user_followers(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/followers", User, id=user_id)

    def get_user_follower(
        self, user_id: Identifier, follower_id: Identifier
    ) -> SoundCloudCall:
        return self._get(
            "/users/{id}/followers/{follower-id}", User,
            **{"id": user_id, "follower-id": follower_id},
        )

    def get_user_comments(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/comments", Comment, id=user_id)

    def get_user_favorites(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/favorites", Track, id=user_id)

    def get_user_favorite(
        self, user_id: Identifier, favorite_id: Identifier
    ) -> SoundCloudCall:
        return self._get(
            "/users/{id}/favorites/{favorite-id}", Track,
            **{"id": user_id, "favorite-id": favorite_id},
        )

    def get_user_groups(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/groups", Group, id=user_id)

    def get_user_web_profiles(self, user_id: Identifier) -> SoundCloudCall:
        return self._get_list("/users/{id}/web-profiles", WebProfile, id=user_id)

    # =========================================================================
    # Playlists
    # =========================================================================

    def get_playlists(
        self, query: str, representation: Optional[str] = None
    ) -> SoundCloudCall:
        """
        Search playlists.

        Args:
            query: Search string.
            representation: Optional ``compact`` / ``id`` / ``full``.
                Omitted from the request when None.
        """
        return self._get_list(
            "/playlists", Playlist,
            query={"q": query, "representation": representation},
        )

    def get_playlist_secret(self, playlist_id: Identifier) -> SoundCloudCall:
        return self._get(
            "/playlists/{id}/secret-token", SecretToken, id=playlist_id,
        )

    # =========================================================================
    # Groups
    # =========================================================================

    def search_groups(self, query: str) -> SoundCloudCall:
        return self._get_list("/groups", Group, query={"q": query})

    def get_group(self, group_id: Identifier) -> SoundCloudCall:
        return self._get("/groups/{id}", Group, id=group_id)

    def get_group_moderators(self, group_id: Identifier) -> SoundCloudCall:
        return self._get_list("/groups/{id}/moderators", User, id=group_id)

    def get_group_members(self, group_id: Identifier) -> SoundCloudCall:
        return self._get_list("/groups/{id}/members", User, id=group_id)

    def get_group_contributors(self, group_id: Identifier) -> SoundCloudCall:
        return self._get_list("/groups/{id}/contributors", User, id=group_id)

    def get_group_users(self, group_id: Identifier) -> SoundCloudCall:
        """Moderators, members and contributors combined."""
        return self._get_list("/groups/{id}/users", User, id=group_id)

    def get_group_pending_tracks(self, group_id: Identifier) -> SoundCloudCall:
        return self._get_list("/groups/{id}/pending_tracks", Track, id=group_id)

    def get_group_pending_track(
        self, group_id: Identifier, track_id: Identifier
    ) -> SoundCloudCall:
        return self._get(
            "/groups/{id}/pending_tracks/{pending-id}", Track,
            **{"id": group_id, "pending-id": track_id},
        )

    def get_group_contributions(self, group_id: Identifier) -> SoundCloudCall:
        return self._get_list("/groups/{id}/contributions", Track, id=group_id)

    def get_group_contribution(
        self, group_id: Identifier, track_id: Identifier
    ) -> SoundCloudCall:
        return self._get(
            "/groups/{id}/contributions/{contribution-id}", Track,
            **{"id": group_id, "contribution-id": track_id},
        )

    # =========================================================================
    # Me (requires an OAuth token)
    # =========================================================================

    def get_me(self) -> SoundCloudCall:
        return self._get("/me", User)

    def get_my_tracks(self) -> SoundCloudCall:
        return self._get_list("/me/tracks", Track)

    def get_my_playlists(self) -> SoundCloudCall:
        return self._get_list("/me/playlists", Playlist)

    def get_my_followings(self) -> SoundCloudCall:
        return self._get_list("/me/followings", User)

    def get_my_following(self, following_id: Identifier) -> SoundCloudCall:
        return self._get(
            "/me/followings/{following-id}", User,
            **{"following-id": following_id},
        )

    def get_my_followers(self) -> SoundCloudCall:
        return self._get_list("/me/followers", User)

    def get_my_follower(self, follower_id: Identifier) -> SoundCloudCall:
        return self._get(
            "/me/followers/{follower-id}", User,
            **{"follower-id": follower_id},
        )

    def get_my_comments(self) -> SoundCloudCall:
        return self._get_list("/me/comments", Comment)

    def get_my_favorites(self) -> SoundCloudCall:
        return self._get_list("/me/favorites", Track)

    def get_my_favorite(self, favorite_id: Identifier) -> SoundCloudCall:
        return self._get(
            "/me/favorites/{favorite-id}", Track,
            **{"favorite-id": favorite_id},
        )

    def get_my_groups(self) -> SoundCloudCall:
        return self._get_list("/me/groups", Group)

    def get_my_web_profiles(self) -> SoundCloudCall:
        return self._get_list("/me/web-profiles", WebProfile)

    def get_my_connections(self) -> SoundCloudCall:
        """External services (Twitter, Facebook...) linked to the account."""
        return self._get_list("/me/connections", Connection)

    def get_my_connection(self, connection_id: Identifier) -> SoundCloudCall:
        return self._get(
            "/me/connections/{connection-id}", Connection,
            **{"connection-id": connection_id},
        )
