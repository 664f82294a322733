"""
SoundCloud resource models.

Plain records mirroring the JSON returned by each endpoint. Field names
are the API's snake_case names; any field the API omits is None.
"""

from datetime import datetime
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, BeforeValidator, PlainSerializer

# Format used by api.soundcloud.com for created_at / last_modified.
SOUNDCLOUD_DATE_FORMAT = "%Y/%m/%d %H:%M:%S %z"


def parse_soundcloud_date(value: Any) -> Any:
    """Parse the API's date format; anything else is left to pydantic."""
    if isinstance(value, str):
        try:
            return datetime.strptime(value, SOUNDCLOUD_DATE_FORMAT)
        except ValueError:
            return value
    return value


def format_soundcloud_date(value: datetime) -> str:
    if value.tzinfo is None:
        return value.strftime("%Y/%m/%d %H:%M:%S +0000")
    return value.strftime(SOUNDCLOUD_DATE_FORMAT)


SoundCloudDate = Annotated[
    datetime,
    BeforeValidator(parse_soundcloud_date),
    PlainSerializer(format_soundcloud_date, return_type=str, when_used="json"),
]


class SoundCloudModel(BaseModel):
    """Base for all resource models."""

    class Config:
        extra = "ignore"
        frozen = True


class MiniUser(SoundCloudModel):
    """Reduced user representation embedded in tracks, comments and groups."""

    id: Optional[int] = None
    kind: Optional[str] = None
    username: Optional[str] = None
    permalink: Optional[str] = None
    permalink_url: Optional[str] = None
    uri: Optional[str] = None
    avatar_url: Optional[str] = None
    last_modified: Optional[SoundCloudDate] = None


class User(MiniUser):
    """Full user profile."""

    country: Optional[str] = None
    full_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    description: Optional[str] = None
    discogs_name: Optional[str] = None
    myspace_name: Optional[str] = None
    website: Optional[str] = None
    website_title: Optional[str] = None
    online: Optional[bool] = None
    track_count: Optional[int] = None
    playlist_count: Optional[int] = None
    public_favorites_count: Optional[int] = None
    followers_count: Optional[int] = None
    followings_count: Optional[int] = None
    plan: Optional[str] = None
    private_tracks_count: Optional[int] = None
    private_playlists_count: Optional[int] = None
    primary_email_confirmed: Optional[bool] = None
    reposts_count: Optional[int] = None
    comments_count: Optional[int] = None
    likes_count: Optional[int] = None


class Track(SoundCloudModel):
    """A SoundCloud track."""

    id: Optional[int] = None
    kind: Optional[str] = None
    created_at: Optional[SoundCloudDate] = None
    last_modified: Optional[SoundCloudDate] = None
    user_id: Optional[int] = None
    user: Optional[MiniUser] = None
    title: Optional[str] = None
    permalink: Optional[str] = None
    permalink_url: Optional[str] = None
    uri: Optional[str] = None
    sharing: Optional[str] = None
    embeddable_by: Optional[str] = None
    purchase_url: Optional[str] = None
    artwork_url: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    genre: Optional[str] = None
    tag_list: Optional[str] = None
    label_id: Optional[int] = None
    label_name: Optional[str] = None
    release: Optional[str] = None
    release_day: Optional[int] = None
    release_month: Optional[int] = None
    release_year: Optional[int] = None
    streamable: Optional[bool] = None
    downloadable: Optional[bool] = None
    state: Optional[str] = None
    license: Optional[str] = None
    track_type: Optional[str] = None
    waveform_url: Optional[str] = None
    download_url: Optional[str] = None
    stream_url: Optional[str] = None
    video_url: Optional[str] = None
    bpm: Optional[float] = None
    commentable: Optional[bool] = None
    isrc: Optional[str] = None
    key_signature: Optional[str] = None
    comment_count: Optional[int] = None
    download_count: Optional[int] = None
    playback_count: Optional[int] = None
    favoritings_count: Optional[int] = None
    reposts_count: Optional[int] = None
    likes_count: Optional[int] = None
    original_format: Optional[str] = None
    original_content_size: Optional[int] = None
    secret_token: Optional[str] = None
    secret_uri: Optional[str] = None
    user_favorite: Optional[bool] = None
    user_playback_count: Optional[int] = None


class Playlist(SoundCloudModel):
    """A playlist (set) and, depending on representation, its tracks."""

    id: Optional[int] = None
    kind: Optional[str] = None
    created_at: Optional[SoundCloudDate] = None
    last_modified: Optional[SoundCloudDate] = None
    user_id: Optional[int] = None
    user: Optional[MiniUser] = None
    title: Optional[str] = None
    permalink: Optional[str] = None
    permalink_url: Optional[str] = None
    uri: Optional[str] = None
    sharing: Optional[str] = None
    embeddable_by: Optional[str] = None
    purchase_url: Optional[str] = None
    artwork_url: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[int] = None
    genre: Optional[str] = None
    tag_list: Optional[str] = None
    label_id: Optional[int] = None
    label_name: Optional[str] = None
    release: Optional[str] = None
    release_day: Optional[int] = None
    release_month: Optional[int] = None
    release_year: Optional[int] = None
    streamable: Optional[bool] = None
    downloadable: Optional[bool] = None
    ean: Optional[str] = None
    playlist_type: Optional[str] = None
    type: Optional[str] = None
    license: Optional[str] = None
    tracks: Optional[List[Track]] = None
    track_count: Optional[int] = None
    secret_token: Optional[str] = None
    secret_uri: Optional[str] = None
    likes_count: Optional[int] = None


class Group(SoundCloudModel):
    id: Optional[int] = None
    kind: Optional[str] = None
    created_at: Optional[SoundCloudDate] = None
    permalink: Optional[str] = None
    permalink_url: Optional[str] = None
    uri: Optional[str] = None
    name: Optional[str] = None
    short_description: Optional[str] = None
    description: Optional[str] = None
    artwork_url: Optional[str] = None
    creator: Optional[MiniUser] = None
    members_count: Optional[int] = None
    contributors_count: Optional[int] = None
    track_count: Optional[int] = None


class Comment(SoundCloudModel):
    id: Optional[int] = None
    kind: Optional[str] = None
    created_at: Optional[SoundCloudDate] = None
    user_id: Optional[int] = None
    track_id: Optional[int] = None
    timestamp: Optional[int] = None
    body: Optional[str] = None
    uri: Optional[str] = None
    user: Optional[MiniUser] = None


class Connection(SoundCloudModel):
    """A connected external service (Twitter, Facebook...) of the current user."""

    id: Optional[int] = None
    kind: Optional[str] = None
    created_at: Optional[SoundCloudDate] = None
    display_name: Optional[str] = None
    post_favorite: Optional[bool] = None
    post_publish: Optional[bool] = None
    service: Optional[str] = None
    type: Optional[str] = None
    uri: Optional[str] = None


class WebProfile(SoundCloudModel):
    id: Optional[int] = None
    kind: Optional[str] = None
    created_at: Optional[SoundCloudDate] = None
    service: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    username: Optional[str] = None


class SecretToken(SoundCloudModel):
    """Sharing credential for an unlisted track or playlist."""

    kind: Optional[str] = None
    token: Optional[str] = None
    uri: Optional[str] = None
    resource_uri: Optional[str] = None
