"""
YouTube collaborator adapter.

Lists caption tracks through youtube-transcript-api and reads basic video
metadata from YouTube's oEmbed endpoint.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

import requests
from youtube_transcript_api import (
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
    YouTubeTranscriptApi,
)

from . import messages
from .config import config
from .models import CaptionTrack, VideoMetadata
from .transcript import AccessBlockedError, VideoUnavailableError

logger = logging.getLogger(__name__)

OEMBED_URL = "https://www.youtube.com/oembed"
THUMBNAIL_URL_TEMPLATE = "https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"


class YouTubeSession(NamedTuple):
    """HTTP session plus the transcript API client bound to it."""
    http: requests.Session
    api: YouTubeTranscriptApi


def create_session() -> YouTubeSession:
    """
    Create a YouTube session with browser-like headers.

    Returns:
        YouTubeSession ready for track listing and timed-text requests.
    """
    logger.info("Creating YouTube session")
    http = requests.Session()
    http.headers.update({"User-Agent": config.USER_AGENT})
    # The API client pins Accept-Language to English, so track names arrive as
    # "Japanese (auto-generated)" and friends
    return YouTubeSession(http=http, api=YouTubeTranscriptApi(http_client=http))


def default_thumbnail(video_id: str) -> str:
    """Build the standard thumbnail URL for a video."""
    return THUMBNAIL_URL_TEMPLATE.format(video_id=video_id)


def placeholder_metadata(video_id: str) -> VideoMetadata:
    """Metadata shown for a video whose details could not be looked up."""
    return VideoMetadata(
        title=messages.UNKNOWN_TITLE,
        channel_name=messages.UNKNOWN_CHANNEL,
        description="",
        thumbnail=default_thumbnail(video_id),
    )


def fetch_video_metadata(session: YouTubeSession, video_id: str) -> VideoMetadata | None:
    """
    Fetch title, channel and thumbnail using YouTube's oEmbed API.

    Args:
        session: Active YouTube session.
        video_id: YouTube video ID.

    Returns:
        VideoMetadata, or None if the lookup failed. Fields missing from a
        successful response fall back to placeholders.
    """
    try:
        response = session.http.get(
            OEMBED_URL,
            params={"url": f"https://youtu.be/{video_id}", "format": "json"},
            timeout=config.YOUTUBE_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"Failed to fetch metadata for {video_id}: {e}")
        return None

    fallback = placeholder_metadata(video_id)
    metadata = VideoMetadata(
        title=data.get("title") or fallback.title,
        channel_name=data.get("author_name") or fallback.channel_name,
        description=data.get("description") or "",
        thumbnail=data.get("thumbnail_url") or fallback.thumbnail,
    )
    logger.debug(f"Fetched metadata for {video_id}: {metadata.title}")
    return metadata


def _to_caption_track(transcript) -> CaptionTrack:
    code = transcript.language_code
    return CaptionTrack(
        # youtube-transcript-api keeps the timedtext URL private
        base_url=transcript._url,
        name=transcript.language,
        vss_id=f"a.{code}" if transcript.is_generated else f".{code}",
        language_code=code,
        kind="asr" if transcript.is_generated else None,
        is_translatable=transcript.is_translatable,
    )


def list_caption_tracks(session: YouTubeSession, video_id: str) -> list[CaptionTrack] | None:
    """
    List the caption tracks YouTube offers for a video.

    Args:
        session: Active YouTube session.
        video_id: YouTube video ID.

    Returns:
        Caption tracks in YouTube's order, or None if captions are disabled.

    Raises:
        VideoUnavailableError: If the video cannot be found or played.
        AccessBlockedError: If YouTube blocks the request.
    """
    logger.info(f"Listing caption tracks for video: {video_id}")

    try:
        transcript_list = session.api.list(video_id)
    except TranscriptsDisabled:
        logger.info(f"Captions are disabled for {video_id}")
        return None
    except VideoUnavailable as e:
        raise VideoUnavailableError(f"Video unavailable: {video_id}") from e
    except RequestBlocked as e:
        raise AccessBlockedError(f"Request blocked by YouTube (403 Forbidden): {video_id}") from e

    tracks = [_to_caption_track(transcript) for transcript in transcript_list]
    logger.info(f"Found {len(tracks)} caption tracks for {video_id}")
    return tracks
