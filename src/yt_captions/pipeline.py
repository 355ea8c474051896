"""
End-to-end transcript pipeline.

Orchestrates the whole request from a YouTube URL to formatted transcript text,
retrying transient failures and turning every error into a user-facing message.
"""

from __future__ import annotations

import asyncio
import errno
import logging
from typing import Sequence

import requests

from . import messages
from .config import config
from .formatter import format_transcript
from .io_utils import ValidationError, parse_video_url
from .language import translate_language_name
from .models import TranscriptResult, VideoMetadata
from .selector import select_caption_track
from .session import SessionManager, get_session_manager
from .transcript import (
    AccessBlockedError,
    NoCaptionsAvailable,
    VideoUnavailableError,
    fetch_segments,
)
from .utils import log_request
from .youtube import (
    YouTubeSession,
    fetch_video_metadata,
    list_caption_tracks,
    placeholder_metadata,
)

logger = logging.getLogger(__name__)

_FILESYSTEM_MARKERS = ("EROFS", "read-only", "EACCES", "ENOENT")
_FILESYSTEM_ERRNOS = (errno.EROFS, errno.EACCES, errno.ENOENT)
_ACCESS_BLOCKED_MARKERS = ("403", "Forbidden", "Sign in to confirm", "bot")
_TIMEOUT_MARKERS = ("timeout", "Timeout", "TIMEOUT")
_NETWORK_MARKERS = ("fetch", "network", "ECONNREFUSED", "ENOTFOUND")
_CAPTION_MARKERS = ("Transcript", "transcript", "caption")
_UNAVAILABLE_MARKERS = ("unavailable", "Video", "not found")


def classify_error(error: BaseException | None) -> str:
    """
    Map a failure that survived all retries to a user-facing message.

    Args:
        error: The last error raised, or None if nothing was recorded.

    Returns:
        Localized message describing the failure category.
    """
    if error is None:
        return messages.UNKNOWN_ERROR

    # Typed errors first: their messages embed the video ID, which may
    # contain any of the text markers below
    if isinstance(error, VideoUnavailableError):
        return messages.VIDEO_UNAVAILABLE

    if isinstance(error, AccessBlockedError):
        return messages.ACCESS_BLOCKED

    text = str(error)

    if (
        isinstance(error, OSError)
        and not isinstance(error, requests.RequestException)
        and error.errno in _FILESYSTEM_ERRNOS
    ) or any(marker in text for marker in _FILESYSTEM_MARKERS):
        return messages.FILESYSTEM_ERROR

    if any(marker in text for marker in _ACCESS_BLOCKED_MARKERS):
        return messages.ACCESS_BLOCKED

    if isinstance(error, (requests.Timeout, TimeoutError)) or any(m in text for m in _TIMEOUT_MARKERS):
        return messages.TIMEOUT

    if isinstance(error, requests.ConnectionError) or any(m in text for m in _NETWORK_MARKERS):
        return messages.NETWORK_ERROR

    if any(marker in text for marker in _CAPTION_MARKERS):
        return messages.CAPTIONS_INVALID

    if any(marker in text for marker in _UNAVAILABLE_MARKERS):
        return messages.VIDEO_UNAVAILABLE

    return messages.GENERIC_ERROR.format(detail=text or type(error).__name__)


async def _fetch_transcript(
    session: YouTubeSession,
    video_id: str,
    metadata: VideoMetadata | None,
    preferred_languages: Sequence[str]
) -> tuple[TranscriptResult, int]:
    tracks = await asyncio.to_thread(list_caption_tracks, session, video_id)
    if not tracks:
        logger.info(f"No caption tracks found for {video_id}")
        raise NoCaptionsAvailable(messages.NO_CAPTIONS)

    track = select_caption_track(tracks, preferred_languages)
    if track is None or not track.base_url:
        logger.info(f"No valid track selected for {video_id}")
        raise NoCaptionsAvailable(messages.NO_CAPTIONS)

    logger.info(f"Selected track {track.vss_id} ({track.name}) for {video_id}")

    segments = await fetch_segments(track.base_url, session.http)
    logger.info(f"Transcript fetched: {len(segments)} segments")

    if not segments:
        raise NoCaptionsAvailable(messages.EXTRACTION_FAILED)

    result = TranscriptResult(
        success=True,
        transcript=format_transcript(segments, gap_ms=config.LINE_BREAK_INTERVAL_MS),
        language=translate_language_name(track.name),
        metadata=metadata or placeholder_metadata(video_id),
    )
    return result, len(segments)


def _finish(video_id: str, result: TranscriptResult, segment_count: int = 0) -> TranscriptResult:
    log_request(
        video_id=video_id,
        status="success" if result.success else "error",
        language=result.language,
        segment_count=segment_count,
        error=result.error,
    )
    return result


async def get_transcript(
    url: str,
    preferred_languages: Sequence[str] | None = None,
    session_manager: SessionManager[YouTubeSession] | None = None
) -> TranscriptResult:
    """
    Fetch and format the transcript of a YouTube video.

    Args:
        url: YouTube URL entered by the user.
        preferred_languages: Caption languages in priority order, defaults to
            config.PREFERRED_LANGUAGES.
        session_manager: Session manager to use, defaults to the shared one.

    Returns:
        TranscriptResult. Never raises; failures carry a message and the
        metadata obtained so far, which is None if the video was never found.
    """
    try:
        video_id = parse_video_url(url)
    except ValidationError as e:
        logger.info(f"Rejected input URL: {e}")
        return TranscriptResult(success=False, error=str(e))

    if preferred_languages is None:
        preferred_languages = config.preferred_languages()
    manager = session_manager or get_session_manager()

    max_retries = config.MAX_RETRIES
    metadata: VideoMetadata | None = None
    last_error: Exception | None = None

    for attempt in range(max_retries + 1):
        if attempt > 0:
            # Start over with a fresh session
            manager.reset()
            delay = config.RETRY_BASE_DELAY * attempt
            logger.warning(f"Retrying {video_id} in {delay:.1f}s (attempt {attempt + 1}/{max_retries + 1})")
            await asyncio.sleep(delay)

        try:
            session = await manager.acquire()
            logger.info(f"Fetching info for video: {video_id}")

            if metadata is None:
                metadata = await asyncio.to_thread(fetch_video_metadata, session, video_id)

            result, segment_count = await _fetch_transcript(
                session, video_id, metadata, preferred_languages
            )
            logger.info(f"Successfully fetched transcript for {video_id}")
            return _finish(video_id, result, segment_count)

        except NoCaptionsAvailable as e:
            # The video exists, so show at least placeholder details
            return _finish(video_id, TranscriptResult(
                success=False, error=str(e), metadata=metadata or placeholder_metadata(video_id)
            ))

        except VideoUnavailableError as e:
            logger.warning(f"Video {video_id} is unavailable: {e}")
            last_error = e
            break

        except Exception as e:
            logger.error(
                f"Transcript fetch error (attempt {attempt + 1}/{max_retries + 1}): "
                f"{type(e).__name__}: {e}"
            )
            last_error = e

    logger.error(f"Transcript fetch failed for {video_id}: {last_error}")
    return _finish(
        video_id,
        TranscriptResult(success=False, error=classify_error(last_error), metadata=metadata),
    )


def get_transcript_sync(
    url: str,
    preferred_languages: Sequence[str] | None = None
) -> TranscriptResult:
    """Blocking wrapper around get_transcript for scripts and the CLI."""
    return asyncio.run(get_transcript(url, preferred_languages))
