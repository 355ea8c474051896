"""
Input validation for YouTube URLs.

Extracts the 11-character video ID and checks that the URL points at a YouTube host.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from . import messages

# Recognized URL shapes, tried in order
_VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=)([a-zA-Z0-9_-]{11})"),
    re.compile(r"(?:youtu\.be/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"(?:youtube\.com/embed/)([a-zA-Z0-9_-]{11})"),
    re.compile(r"(?:youtube\.com/v/)([a-zA-Z0-9_-]{11})"),
]

ALLOWED_HOSTS = frozenset(["www.youtube.com", "youtube.com", "youtu.be", "m.youtube.com"])


class ValidationError(Exception):
    """Raised when input validation fails."""
    pass


def extract_video_id(url: str) -> str | None:
    """
    Extract the YouTube video ID from a URL.

    Args:
        url: Any string; it does not have to be a URL.

    Returns:
        11-character video ID, or None if no recognized URL shape matches.
    """
    if not url or not isinstance(url, str):
        return None

    for pattern in _VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)

    return None


def is_valid_youtube_url(url: str) -> bool:
    """
    Check that a URL is hosted on YouTube and carries a video ID.

    Args:
        url: URL to check.

    Returns:
        True if the host is allowed and an ID can be extracted.
    """
    if not url or not isinstance(url, str):
        return False

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False

    if not parsed.scheme or parsed.hostname not in ALLOWED_HOSTS:
        return False

    return extract_video_id(url) is not None


def parse_video_url(url: str) -> str:
    """
    Validate a YouTube URL and return its video ID.

    Args:
        url: URL entered by the user.

    Returns:
        11-character video ID.

    Raises:
        ValidationError: If the URL is empty, not a YouTube URL, or has no ID.
    """
    if not url or not isinstance(url, str) or not url.strip():
        raise ValidationError(messages.EMPTY_URL)

    if not is_valid_youtube_url(url):
        raise ValidationError(messages.INVALID_URL)

    video_id = extract_video_id(url)
    if not video_id:
        raise ValidationError(messages.VIDEO_ID_NOT_FOUND)

    return video_id
