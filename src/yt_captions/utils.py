"""
Utility functions for request logging.
"""

from __future__ import annotations

import json
import logging
import time

from .config import config

logger = logging.getLogger(__name__)


def log_request(
    video_id: str,
    status: str,
    language: str | None = None,
    segment_count: int = 0,
    error: str | None = None
) -> None:
    """
    Log the outcome of a transcript request to a JSONL file.

    Does nothing unless config.REQUEST_LOG_ENABLED is set. Only request
    details are recorded, never the transcript text.

    Args:
        video_id: YouTube video ID.
        status: Request status (success, error).
        language: Display label of the selected caption track.
        segment_count: Number of caption segments decoded.
        error: Optional error message.
    """
    if not config.REQUEST_LOG_ENABLED:
        return

    log_entry = {
        "timestamp": time.time(),
        "iso_timestamp": time.strftime('%Y-%m-%dT%H:%M:%SZ', time.gmtime()),
        "video_id": video_id,
        "status": status,
        "segment_count": segment_count,
    }

    if language:
        log_entry["language"] = language
    if error:
        log_entry["error"] = error

    try:
        config.create_directories()
        with config.LOG_FILE.open("a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False) + "\n")
    except OSError as e:
        logger.warning(f"Failed to write request log: {e}")
