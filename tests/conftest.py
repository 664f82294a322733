"""
Pytest configuration and shared fixtures for soundcloud_webapi tests.

Provides sample SoundCloud payloads and a recording transport adapter so
requests go through the real requests.Session (and therefore the real
authenticator) without touching the network.
"""

import json

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from soundcloud_webapi import SoundCloudAPI


# =============================================================================
# Transport
# =============================================================================

class RecordingAdapter(BaseAdapter):
    """Transport adapter that records prepared requests and replays responses."""

    def __init__(self):
        super().__init__()
        self.requests = []
        self._responses = []

    def queue(self, status_code=200, json_data=None, body=None, headers=None):
        """Queue a response (or an exception instance to raise)."""
        self._responses.append((status_code, json_data, body, headers))

    def queue_error(self, exc):
        self._responses.append(exc)

    def send(self, request, **kwargs):
        self.requests.append(request)
        queued = self._responses.pop(0) if self._responses else (200, [], None, None)
        if isinstance(queued, Exception):
            raise queued

        status_code, json_data, body, headers = queued
        response = requests.Response()
        response.status_code = status_code
        if body is not None:
            response._content = body.encode("utf-8")
        elif json_data is not None:
            response._content = json.dumps(json_data).encode("utf-8")
        else:
            response._content = b""
        response.headers = CaseInsensitiveDict(headers or {})
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass

    @property
    def last_url(self):
        return self.requests[-1].url


@pytest.fixture
def adapter():
    return RecordingAdapter()


@pytest.fixture
def api(adapter):
    """SoundCloudAPI whose session sends through the recording adapter."""
    sc_api = SoundCloudAPI("abc123", max_retries=0)
    sc_api._http.session.mount("https://", adapter)
    yield sc_api
    sc_api.close()


@pytest.fixture
def service(api):
    return api.service


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_mini_user():
    return {
        'id': 3207,
        'kind': 'user',
        'username': 'Johannes Wagener',
        'permalink': 'jwagener',
        'permalink_url': 'http://soundcloud.com/jwagener',
        'uri': 'https://api.soundcloud.com/users/3207',
        'avatar_url': 'http://i1.sndcdn.com/avatars-000001552142-pbw8yd-large.jpg',
        'last_modified': '2012/05/16 18:03:11 +0000',
    }


@pytest.fixture
def sample_track(sample_mini_user):
    return {
        'id': 13158665,
        'kind': 'track',
        'created_at': '2011/04/06 15:37:43 +0000',
        'user_id': 3207,
        'user': sample_mini_user,
        'title': 'Munchies',
        'permalink': 'munchies',
        'permalink_url': 'http://soundcloud.com/jwagener/munchies',
        'uri': 'https://api.soundcloud.com/tracks/13158665',
        'sharing': 'public',
        'duration': 18109,
        'genre': 'piano',
        'tag_list': 'soundcloud:source=iphone-record',
        'streamable': True,
        'downloadable': True,
        'state': 'finished',
        'license': 'all-rights-reserved',
        'bpm': 120.0,
        'commentable': True,
        'comment_count': 3,
        'playback_count': 42,
        'favoritings_count': 7,
        'stream_url': 'https://api.soundcloud.com/tracks/13158665/stream',
    }


@pytest.fixture
def sample_user(sample_mini_user):
    return {
        **sample_mini_user,
        'country': 'Germany',
        'full_name': 'Johannes Wagener',
        'city': 'Berlin',
        'description': 'Hacker',
        'online': False,
        'track_count': 12,
        'playlist_count': 1,
        'followers_count': 416,
        'followings_count': 174,
        'public_favorites_count': 26,
        'plan': 'Pro Plus',
    }


@pytest.fixture
def sample_playlist(sample_mini_user, sample_track):
    return {
        'id': 405726,
        'kind': 'playlist',
        'created_at': '2010/11/02 09:24:50 +0000',
        'user_id': 3207,
        'user': sample_mini_user,
        'title': 'Field Recordings',
        'sharing': 'public',
        'duration': 18109,
        'playlist_type': 'compilation',
        'track_count': 1,
        'tracks': [sample_track],
    }


@pytest.fixture
def sample_group(sample_mini_user):
    return {
        'id': 3,
        'kind': 'group',
        'created_at': '2009/06/18 15:46:46 +0000',
        'permalink': 'made-with-soundcloud',
        'name': 'Made with SoundCloud',
        'short_description': 'Apps built on SoundCloud',
        'creator': sample_mini_user,
        'members_count': 1200,
        'contributors_count': 300,
        'track_count': 2500,
    }
