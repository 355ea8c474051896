"""
Paragraph formatting for caption segments.

Joins timed fragments into readable paragraphs: a sentence-ending mark closes
the current paragraph, and so does a long pause between segments.
"""

from __future__ import annotations

import re
from typing import Sequence

from .models import CaptionSegment

# Full-width sentence terminators used in Japanese captions
SENTENCE_END_RE = re.compile(r"[。！？]")

LINE_BREAK_INTERVAL_MS = 5000
PARAGRAPH_SEPARATOR = "\n\n"


def format_transcript(
    segments: Sequence[CaptionSegment],
    gap_ms: int = LINE_BREAK_INTERVAL_MS
) -> str:
    """
    Format caption segments as paragraph-separated text.

    Args:
        segments: Segments in chronological order.
        gap_ms: Silence (in milliseconds) after which a new paragraph starts.

    Returns:
        Paragraphs joined by a blank line, or "" for no segments.
    """
    if not segments:
        return ""

    lines: list[str] = []
    current_line = ""
    last_end_ms = 0

    for segment in segments:
        text = segment.text

        if SENTENCE_END_RE.search(text):
            current_line += text
            lines.append(current_line.strip())
            current_line = ""
            last_end_ms = segment.end_ms
            continue

        # 0 means nothing has been consumed yet
        if last_end_ms > 0 and segment.start_ms - last_end_ms > gap_ms:
            if current_line.strip():
                lines.append(current_line.strip())
                current_line = ""

        if current_line:
            current_line += " " + text
        else:
            current_line = text

        last_end_ms = segment.end_ms

    if current_line.strip():
        lines.append(current_line.strip())

    return PARAGRAPH_SEPARATOR.join(lines)
