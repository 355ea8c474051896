"""
Configuration management for yt-captions.

Loads settings from .env file with sensible defaults.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuration settings for the application."""

    # Caption selection
    PREFERRED_LANGUAGES: str = os.getenv("PREFERRED_LANGUAGES", "ja,en")

    # Retry settings
    MAX_RETRIES: int = int(os.getenv("MAX_RETRIES", "2"))
    RETRY_BASE_DELAY: float = float(os.getenv("RETRY_BASE_DELAY", "1.0"))

    # Formatting settings
    LINE_BREAK_INTERVAL_MS: int = int(os.getenv("LINE_BREAK_INTERVAL_MS", "5000"))

    # HTTP settings
    YOUTUBE_TIMEOUT: int = int(os.getenv("YOUTUBE_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )

    # Request log settings
    LOGS_DIR: Path = Path(os.getenv("LOGS_DIR", "logs"))
    LOG_FILE: Path = LOGS_DIR / "requests.jsonl"
    REQUEST_LOG_ENABLED: bool = _env_flag("REQUEST_LOG_ENABLED")

    def preferred_languages(self) -> list[str]:
        """Return the preferred caption languages in priority order."""
        return [lang.strip() for lang in self.PREFERRED_LANGUAGES.split(",") if lang.strip()]

    def create_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.LOGS_DIR.mkdir(parents=True, exist_ok=True)


# Global config instance
config = Config()
