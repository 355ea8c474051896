"""
yt-captions - readable transcripts from YouTube captions.

Example usage:
    >>> from yt_captions import get_transcript_sync
    >>> result = get_transcript_sync("https://youtu.be/dQw4w9WgXcQ")
    >>> print(result.language)
    >>> print(result.transcript)
"""

import logging

__version__ = "0.1.0"

# Add NullHandler to prevent "No handler found" warnings
logging.getLogger(__name__).addHandler(logging.NullHandler())

from .formatter import format_transcript
from .io_utils import ValidationError, extract_video_id, is_valid_youtube_url, parse_video_url
from .language import translate_language_name
from .models import CaptionSegment, CaptionTrack, TranscriptResult, VideoMetadata
from .pipeline import classify_error, get_transcript, get_transcript_sync
from .selector import select_caption_track
from .session import SessionManager, SessionState, get_session_manager
from .transcript import (
    AccessBlockedError,
    NoCaptionsAvailable,
    RetrievalError,
    TranscriptError,
    VideoUnavailableError,
    fetch_segments,
    parse_events,
)

__all__ = [
    "__version__",

    # Pipeline
    "get_transcript",
    "get_transcript_sync",
    "classify_error",

    # Building blocks
    "extract_video_id",
    "is_valid_youtube_url",
    "parse_video_url",
    "select_caption_track",
    "fetch_segments",
    "parse_events",
    "format_transcript",
    "translate_language_name",
    "SessionManager",
    "SessionState",
    "get_session_manager",

    # Models
    "CaptionSegment",
    "CaptionTrack",
    "TranscriptResult",
    "VideoMetadata",

    # Errors
    "ValidationError",
    "TranscriptError",
    "NoCaptionsAvailable",
    "RetrievalError",
    "AccessBlockedError",
    "VideoUnavailableError",
]
