"""
Value types shared across the caption pipeline.

Everything here is a NamedTuple so that tracks and segments are never mutated
once created; each pipeline step builds new values.
"""

from __future__ import annotations

from typing import Any, NamedTuple


class CaptionTrack(NamedTuple):
    """One caption stream offered for a video."""
    base_url: str
    name: str
    vss_id: str
    language_code: str
    kind: str | None = None
    is_translatable: bool = False

    @property
    def is_manual(self) -> bool:
        """Manually authored tracks carry a vss_id like ".en"."""
        return self.vss_id.startswith(".")

    @property
    def is_automatic(self) -> bool:
        """Speech-recognition tracks carry a vss_id like "a.en" or kind "asr"."""
        return self.vss_id.startswith("a.") or self.kind == "asr"


class CaptionSegment(NamedTuple):
    """A single timed piece of caption text."""
    text: str
    start_ms: int
    duration_ms: int = 0

    @property
    def end_ms(self) -> int:
        return self.start_ms + self.duration_ms


class VideoMetadata(NamedTuple):
    """Basic video information shown next to the transcript."""
    title: str
    channel_name: str
    description: str
    thumbnail: str


class TranscriptResult(NamedTuple):
    """Outcome of a single transcript request."""
    success: bool
    transcript: str | None = None
    language: str | None = None
    metadata: VideoMetadata | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary, dropping empty fields."""
        data: dict[str, Any] = {"success": self.success}
        if self.transcript is not None:
            data["transcript"] = self.transcript
        if self.language is not None:
            data["language"] = self.language
        if self.metadata is not None:
            data["metadata"] = self.metadata._asdict()
        if self.error is not None:
            data["error"] = self.error
        return data
