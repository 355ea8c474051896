"""
Command-line interface for fetching readable YouTube transcripts.

Prints the formatted transcript to stdout so it can be piped or copied.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

import questionary
from yaspin import yaspin

from .config import config
from .io_utils import is_valid_youtube_url
from .models import TranscriptResult
from .pipeline import get_transcript_sync


def prompt_for_url() -> str:
    """
    Ask the user for a YouTube URL.

    Returns:
        The entered URL.
    """
    url = questionary.text(
        "YouTube URL:",
        validate=lambda x: is_valid_youtube_url(x.strip()) or "Please enter a valid YouTube URL",
    ).ask()

    if not url:
        sys.exit(0)

    return url.strip()


def render_result(result: TranscriptResult, show_metadata: bool = False) -> str:
    """
    Render a successful result as plain text.

    Args:
        result: Successful transcript result.
        show_metadata: Whether to print a title/channel/language header.

    Returns:
        Text ready to print.
    """
    if not show_metadata:
        return result.transcript or ""

    header = []
    if result.metadata:
        header.append(f"# {result.metadata.title}")
        header.append(f"Channel: {result.metadata.channel_name}")
        header.append(f"Thumbnail: {result.metadata.thumbnail}")
    if result.language:
        header.append(f"Language: {result.language}")

    return "\n".join(header) + "\n\n" + (result.transcript or "")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="YouTube captions → readable transcript",
        epilog="Run without a URL to be prompted for one",
    )
    parser.add_argument("url", nargs="?", help="YouTube video URL")
    parser.add_argument(
        "-l", "--lang",
        nargs="+",
        default=None,
        help=f"Preferred caption languages in order (default: {config.PREFERRED_LANGUAGES})",
    )
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--metadata", action="store_true", help="Print video details before the transcript")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    url = args.url or prompt_for_url()

    try:
        with yaspin(text="Fetching transcript...", color="cyan") as spinner:
            result = get_transcript_sync(url, args.lang)
            if result.success:
                spinner.ok("✓")
            else:
                spinner.fail("✗")
    except KeyboardInterrupt:
        print("\n👋 Interrupted by user", file=sys.stderr)
        return 130

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0 if result.success else 1

    if not result.success:
        if result.metadata:
            print(f"🎬 {result.metadata.title} ({result.metadata.channel_name})", file=sys.stderr)
        print(f"❌ {result.error}", file=sys.stderr)
        return 1

    print(render_result(result, show_metadata=args.metadata))
    return 0


if __name__ == "__main__":
    sys.exit(main())
