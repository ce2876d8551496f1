"""CLI argument parser configuration.

This module provides the argument parser for the session-timeline CLI.
"""

import argparse
from pathlib import Path

from session_timeline import __version__
from session_timeline.models.enums import ActionCategory

__all__ = ["create_parser"]


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        An ArgumentParser configured with all CLI options.

    """
    parser = argparse.ArgumentParser(
        prog="session-timeline",
        description=(
            "Session Timeline - Reduce a recorded agent-assistant session into "
            "an ordered, paired and categorized action timeline."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the timeline of a recorded session
  session-timeline sessions/abc123.jsonl

  # Splice in hook callback history
  session-timeline sessions/abc123.jsonl --hooks hooks/abc123.json

  # Only show MCP calls, with category counts
  session-timeline sessions/abc123.jsonl --category mcp --counts

  # Machine-readable output
  session-timeline sessions/abc123.jsonl --json
""",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "session",
        type=Path,
        help="Path to a session JSONL file (one record per line)",
    )

    parser.add_argument(
        "--hooks",
        type=Path,
        default=None,
        help="Path to hook event history (JSON array or JSONL), sorted by time",
    )

    parser.add_argument(
        "--hooks-as-progress",
        action="store_true",
        default=False,
        help="Render hook history as hook_event progress items",
    )

    parser.add_argument(
        "--category",
        type=str,
        choices=[category.value for category in ActionCategory],
        default=None,
        help="Only show actions of this category (turn markers are always shown)",
    )

    parser.add_argument(
        "--counts",
        action="store_true",
        default=False,
        help="Print per-category action counts after the timeline",
    )

    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        default=False,
        help="Output the timeline as JSON",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr",
    )

    return parser
