"""
Caption track selection.

Language preference order dominates; within one language a manually authored
track beats an automatically generated one.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .models import CaptionTrack

logger = logging.getLogger(__name__)


def select_caption_track(
    tracks: Sequence[CaptionTrack],
    preferred_languages: Sequence[str]
) -> CaptionTrack | None:
    """
    Pick the best caption track for the given language preference.

    Args:
        tracks: Available caption tracks, in the order YouTube lists them.
        preferred_languages: Language codes, most preferred first.

    Returns:
        The selected track, the first track if no preferred language matches,
        or None when there are no tracks at all.
    """
    for lang in preferred_languages:
        for track in tracks:
            if track.language_code == lang and track.is_manual:
                logger.debug(f"Using manual '{lang}' track {track.vss_id}")
                return track

        for track in tracks:
            if track.language_code == lang and track.is_automatic:
                logger.debug(f"Using auto-generated '{lang}' track {track.vss_id}")
                return track

    if tracks:
        logger.debug(f"No preferred language available, using first track {tracks[0].vss_id}")
        return tracks[0]

    return None
