"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile
import shutil
from unittest.mock import Mock

from yt_captions.config import Config
from yt_captions.models import CaptionSegment, CaptionTrack, VideoMetadata
from yt_captions.youtube import YouTubeSession


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def mock_config(temp_dir):
    """Mock config with temporary directories and no retry delay."""
    config = Config()
    config.LOGS_DIR = temp_dir / "logs"
    config.LOG_FILE = config.LOGS_DIR / "requests.jsonl"
    config.REQUEST_LOG_ENABLED = False
    config.PREFERRED_LANGUAGES = "ja,en"
    config.MAX_RETRIES = 2
    config.RETRY_BASE_DELAY = 0.0
    return config


@pytest.fixture
def sample_video_id():
    """Sample YouTube video ID for testing."""
    return "dQw4w9WgXcQ"


@pytest.fixture
def sample_metadata(sample_video_id):
    """Metadata as returned by the oEmbed lookup."""
    return VideoMetadata(
        title="Never Gonna Give You Up",
        channel_name="Rick Astley",
        description="",
        thumbnail=f"https://i.ytimg.com/vi/{sample_video_id}/hqdefault.jpg",
    )


@pytest.fixture
def ja_manual_track():
    """Manually authored Japanese track."""
    return CaptionTrack(
        base_url="https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=ja",
        name="Japanese",
        vss_id=".ja",
        language_code="ja",
        is_translatable=True,
    )


@pytest.fixture
def en_auto_track():
    """Auto-generated English track."""
    return CaptionTrack(
        base_url="https://www.youtube.com/api/timedtext?v=dQw4w9WgXcQ&lang=en&kind=asr",
        name="English (auto-generated)",
        vss_id="a.en",
        language_code="en",
        kind="asr",
        is_translatable=True,
    )


@pytest.fixture
def json3_payload():
    """Timed-text payload in json3 format."""
    return {
        "wireMagic": "pb3",
        "events": [
            {"tStartMs": 0, "dDurationMs": 1000, "segs": [{"utf8": "こんにちは"}]},
            {"tStartMs": 1000, "dDurationMs": 500, "aAppend": 1, "segs": [{"utf8": "\n"}]},
            {"tStartMs": 1200, "dDurationMs": 800, "segs": [{"utf8": "世界"}, {"utf8": "。"}]},
            {"tStartMs": 9000, "dDurationMs": 1000, "segs": [{"utf8": "また"}, {"utf8": " ね "}]},
        ],
    }


@pytest.fixture
def sample_segments():
    """Segments decoded from json3_payload."""
    return [
        CaptionSegment("こんにちは", 0, 1000),
        CaptionSegment("世界。", 1200, 800),
        CaptionSegment("またね", 9000, 1000),
    ]


@pytest.fixture
def mock_session():
    """YouTube session with mocked HTTP and transcript API clients."""
    return YouTubeSession(http=Mock(), api=Mock())
