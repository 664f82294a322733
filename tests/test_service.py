"""
Tests for SoundCloudService endpoint declarations.

Requests are dispatched through the RecordingAdapter (see conftest.py), so
the URLs asserted here are exactly what would go over the wire.
"""

import json
from urllib.parse import parse_qsl, urlsplit

import pytest

from soundcloud_webapi import (
    Comment,
    Connection,
    Group,
    Playlist,
    SecretToken,
    Track,
    User,
    WebProfile,
)
from soundcloud_webapi.service import TRACK_SEARCH_KEYS

BASE = "https://api.soundcloud.com"


def _path(url):
    return urlsplit(url).path


def _query(url):
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


# =========================================================================
# Dispatch scenarios
# =========================================================================


class TestDispatchScenarios:
    """End-to-end request construction through the real session."""

    def test_search_tracks_by_query(self, api, adapter):
        api.service.search_tracks("piano").execute()

        request = adapter.requests[0]
        assert request.method == "GET"
        assert request.url == f"{BASE}/tracks?q=piano&client_id=abc123"

    def test_get_me_with_token(self, api, adapter):
        adapter.queue(200, {"id": 1, "username": "me"})
        api.set_token("tok1")

        me = api.service.get_me().execute()

        assert adapter.last_url == f"{BASE}/me?client_id=abc123&oauth_token=tok1"
        assert isinstance(me, User)
        assert me.username == "me"

    def test_cleared_token_is_omitted(self, api, adapter):
        adapter.queue(200, {"id": 1})
        api.set_token("tok1")
        api.set_token(None)

        api.service.get_me().execute()

        assert adapter.last_url == f"{BASE}/me?client_id=abc123"

    def test_most_recent_token_is_sent(self, api, adapter):
        adapter.queue(200, {"id": 1})
        api.set_token("tok1")
        api.set_token("tok2")

        api.service.get_me().execute()

        assert ("oauth_token", "tok2") in _query(adapter.last_url)
        assert [k for k, _ in _query(adapter.last_url)].count("oauth_token") == 1


# =========================================================================
# Track search query map
# =========================================================================


class TestSearchTracksQueryMap:
    """Tests for the mapping form of search_tracks."""

    def test_recognized_keys_documented(self):
        assert "bpm[from]" in TRACK_SEARCH_KEYS
        assert "created_at[to]" in TRACK_SEARCH_KEYS
        assert len(TRACK_SEARCH_KEYS) == 13

    def test_query_map_passed_in_order(self, service, adapter):
        service.search_tracks({
            "q": "piano",
            "bpm[from]": "90",
            "bpm[to]": "120",
            "genres": "classical,jazz",
        }).execute()

        assert _query(adapter.last_url) == [
            ("q", "piano"),
            ("bpm[from]", "90"),
            ("bpm[to]", "120"),
            ("genres", "classical,jazz"),
            ("client_id", "abc123"),
        ]

    def test_unrecognized_keys_pass_through(self, service, adapter):
        service.search_tracks({"made_up": "value"}).execute()

        assert ("made_up", "value") in _query(adapter.last_url)

    def test_query_string_is_form_encoded(self, service):
        call = service.search_tracks({"bpm[from]": "90"})

        assert "bpm%5Bfrom%5D=90" in call.prepare().url


# =========================================================================
# Path construction
# =========================================================================


SINGLE_RESOURCE_CASES = [
    ("get_track", ("42",), "/tracks/42", Track),
    ("get_track_comment", ("42", "7"), "/tracks/42/comments/7", Comment),
    ("get_track_favoriter", ("42", "9"), "/tracks/42/favoriters/9", User),
    ("get_track_secret", ("42",), "/tracks/42/secret-token", SecretToken),
    ("get_user", ("u1",), "/users/u1", User),
    ("get_user_following", ("u1", "u2"), "/users/u1/followings/u2", User),
    ("get_user_follower", ("u1", "u2"), "/users/u1/followers/u2", User),
    ("get_user_favorite", ("u1", "t1"), "/users/u1/favorites/t1", Track),
    ("get_playlist_secret", ("p1",), "/playlists/p1/secret-token", SecretToken),
    ("get_group", ("g1",), "/groups/g1", Group),
    ("get_group_pending_track", ("g1", "t1"), "/groups/g1/pending_tracks/t1", Track),
    ("get_group_contribution", ("g1", "t1"), "/groups/g1/contributions/t1", Track),
    ("get_me", (), "/me", User),
    ("get_my_following", ("u2",), "/me/followings/u2", User),
    ("get_my_follower", ("u2",), "/me/followers/u2", User),
    ("get_my_favorite", ("t1",), "/me/favorites/t1", Track),
    ("get_my_connection", ("c1",), "/me/connections/c1", Connection),
]

COLLECTION_CASES = [
    ("get_track_comments", ("42",), "/tracks/42/comments", Comment),
    ("get_track_favoriters", ("42",), "/tracks/42/favoriters", User),
    ("get_user_tracks", ("u1",), "/users/u1/tracks", Track),
    ("get_user_playlists", ("u1",), "/users/u1/playlists", Playlist),
    ("get_user_followings", ("u1",), "/users/u1/followings", User),
    ("get_user_followers", ("u1",), "/users/u1/followers", User),
    ("get_user_comments", ("u1",), "/users/u1/comments", Comment),
    ("get_user_favorites", ("u1",), "/users/u1/favorites", Track),
    ("get_user_groups", ("u1",), "/users/u1/groups", Group),
    ("get_user_web_profiles", ("u1",), "/users/u1/web-profiles", WebProfile),
    ("get_group_moderators", ("g1",), "/groups/g1/moderators", User),
    ("get_group_members", ("g1",), "/groups/g1/members", User),
    ("get_group_contributors", ("g1",), "/groups/g1/contributors", User),
    ("get_group_users", ("g1",), "/groups/g1/users", User),
    ("get_group_pending_tracks", ("g1",), "/groups/g1/pending_tracks", Track),
    ("get_group_contributions", ("g1",), "/groups/g1/contributions", Track),
    ("get_my_tracks", (), "/me/tracks", Track),
    ("get_my_playlists", (), "/me/playlists", Playlist),
    ("get_my_followings", (), "/me/followings", User),
    ("get_my_followers", (), "/me/followers", User),
    ("get_my_comments", (), "/me/comments", Comment),
    ("get_my_favorites", (), "/me/favorites", Track),
    ("get_my_groups", (), "/me/groups", Group),
    ("get_my_web_profiles", (), "/me/web-profiles", WebProfile),
    ("get_my_connections", (), "/me/connections", Connection),
]


class TestEndpointPaths:
    """Each endpoint hits the right path and decodes the right model."""

    @pytest.mark.parametrize("method,args,path,model", SINGLE_RESOURCE_CASES)
    def test_single_resource(self, service, adapter, method, args, path, model):
        adapter.queue(200, {"id": 1})

        result = getattr(service, method)(*args).execute()

        assert adapter.requests[0].method == "GET"
        assert _path(adapter.last_url) == path
        assert isinstance(result, model)

    @pytest.mark.parametrize("method,args,path,model", COLLECTION_CASES)
    def test_collection(self, service, adapter, method, args, path, model):
        adapter.queue(200, [{"id": 1}, {"id": 2}])

        result = getattr(service, method)(*args).execute()

        assert _path(adapter.last_url) == path
        assert [type(item) for item in result] == [model, model]
        assert [item.id for item in result] == [1, 2]

    def test_integer_identifiers(self, service):
        assert _path(service.get_track(13158665).prepare().url) == "/tracks/13158665"

    def test_reserved_characters_encoded_once(self, service):
        url = service.get_track("a b/c%d").prepare().url

        assert _path(url) == "/tracks/a%20b%2Fc%25d"

    def test_placeholder_substituted_once(self, service):
        call = service.get_user_following("id", "following-id")

        assert _path(call.prepare().url) == "/users/id/followings/following-id"

    def test_contribution_path_differs_from_pending_track(self, service):
        contribution = service.get_group_contribution("g1", "t1").request.path
        pending = service.get_group_pending_track("g1", "t1").request.path

        assert contribution != pending


class TestSearchEndpoints:
    """Tests for the q-based search endpoints."""

    def test_search_users(self, service, adapter):
        service.search_users("wagener").execute()

        assert _path(adapter.last_url) == "/users"
        assert ("q", "wagener") in _query(adapter.last_url)

    def test_search_groups(self, service, adapter):
        service.search_groups("made with").execute()

        assert _path(adapter.last_url) == "/groups"
        assert ("q", "made with") in _query(adapter.last_url)

    def test_get_playlists_without_representation(self, service, adapter):
        service.get_playlists("field").execute()

        assert _query(adapter.last_url) == [("q", "field"), ("client_id", "abc123")]

    def test_get_playlists_with_representation(self, service, adapter):
        service.get_playlists("field", representation="compact").execute()

        assert _query(adapter.last_url) == [
            ("q", "field"),
            ("representation", "compact"),
            ("client_id", "abc123"),
        ]


class TestPostUpload:
    """Tests for the upload endpoint."""

    def test_posts_track_body(self, service, adapter):
        adapter.queue(201, {"id": 99, "title": "New"})

        result = service.post_upload(Track(title="New", sharing="private")).execute()

        request = adapter.requests[0]
        assert request.method == "POST"
        assert _path(request.url) == "/tracks"
        assert json.loads(request.body) == {"title": "New", "sharing": "private"}
        assert result.id == 99
