"""
Timed-text fetching and decoding.

Downloads a caption track in YouTube's json3 format and turns its events into
ordered CaptionSegment values.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import requests

from .config import config
from .models import CaptionSegment

logger = logging.getLogger(__name__)

# Appended to the track's base URL to request the JSON variant
JSON_FORMAT_SELECTOR = "&fmt=json3"


class TranscriptError(Exception):
    """Base exception for transcript-related errors."""
    pass


class NoCaptionsAvailable(TranscriptError):
    """Raised when a video has no usable caption track."""
    pass


class RetrievalError(TranscriptError):
    """Raised when the timed-text payload cannot be retrieved or decoded."""
    pass


class AccessBlockedError(TranscriptError):
    """Raised when YouTube refuses the request (bot check, IP block)."""
    pass


class VideoUnavailableError(TranscriptError):
    """Raised when the video does not exist or cannot be played."""
    pass


def _segment_text(segs: list[dict[str, Any]]) -> str:
    parts = [(seg.get("utf8") or "").strip() for seg in segs]
    return "".join(part for part in parts if part)


def parse_events(payload: dict[str, Any]) -> list[CaptionSegment]:
    """
    Decode a json3 timed-text payload into caption segments.

    Args:
        payload: Decoded JSON body of the timed-text response.

    Returns:
        Segments in payload order. Events without a start time, without text
        runs, or whose text is blank are skipped.

    Raises:
        RetrievalError: If the payload has no events container.
    """
    if not isinstance(payload, dict) or payload.get("events") is None:
        raise RetrievalError("No transcript events found")

    segments = []
    for event in payload["events"]:
        segs = event.get("segs")
        start_ms = event.get("tStartMs")
        if not segs or start_ms is None:
            continue

        text = _segment_text(segs)
        if not text:
            continue

        segments.append(CaptionSegment(
            text=text,
            start_ms=int(start_ms),
            duration_ms=int(event.get("dDurationMs") or 0),
        ))

    return segments


def _download_events(url: str, http_client: requests.Session | None) -> dict[str, Any]:
    headers = {
        "User-Agent": config.USER_AGENT,
        "Accept": "application/json",
    }
    get = http_client.get if http_client is not None else requests.get
    response = get(url, headers=headers, timeout=config.YOUTUBE_TIMEOUT)

    if not response.ok:
        logger.error(f"Timed-text request failed: {response.status_code} {response.reason}")
        raise RetrievalError(
            f"Failed to fetch transcript: {response.status_code} {response.reason}"
        )

    try:
        return response.json()
    except ValueError as e:
        raise RetrievalError(f"Failed to decode transcript payload: {e}") from e


async def fetch_segments(
    track_url: str,
    http_client: requests.Session | None = None
) -> list[CaptionSegment]:
    """
    Fetch a caption track and decode it into segments.

    Args:
        track_url: The track's base URL as listed by YouTube.
        http_client: Optional session to send the request with.

    Returns:
        Decoded caption segments in chronological order.

    Raises:
        RetrievalError: If the response is not OK or lacks caption events.
        requests.RequestException: On transport failures.
    """
    json_url = track_url + JSON_FORMAT_SELECTOR
    logger.info(f"Fetching transcript from: {json_url[:100]}...")

    payload = await asyncio.to_thread(_download_events, json_url, http_client)
    segments = parse_events(payload)

    logger.debug(f"Decoded {len(segments)} segments")
    return segments
