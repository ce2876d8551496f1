"""CLI main entry point.

This module provides the main entry point for the session-timeline CLI.
"""

import argparse
import sys
import traceback

from session_timeline.cli.formatters import format_timeline
from session_timeline.cli.parser import create_parser
from session_timeline.cli.validators import validate_args
from session_timeline.config.settings import get_settings
from session_timeline.engine.pipeline import build_session_timeline
from session_timeline.engine.tally import filter_timeline
from session_timeline.io.exceptions import RecordLoadError
from session_timeline.io.loader import load_hook_events, load_session_records
from session_timeline.logging_config import configure_logging, get_logger
from session_timeline.models.enums import ActionCategory

__all__ = ["main", "run"]

logger = get_logger(__name__)


def run(args: argparse.Namespace) -> int:
    """Load the session, build its timeline and print it.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success).

    Raises:
        RecordLoadError: If an input file cannot be read.

    """
    records = load_session_records(args.session)
    hook_events = load_hook_events(args.hooks) if args.hooks else []

    timeline = build_session_timeline(
        records,
        hook_events,
        hooks_as_progress=args.hooks_as_progress,
        settings=get_settings(),
    )

    category = ActionCategory(args.category) if args.category else None
    items = filter_timeline(timeline.items, category)

    print(
        format_timeline(
            timeline,
            items=items,
            json_output=args.json_output,
            show_counts=args.counts,
        )
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI application.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    error = validate_args(args)
    if error:
        print(error, file=sys.stderr)
        return 1

    try:
        return run(args)

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    except RecordLoadError as e:
        logger.error("record_load_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception("fatal_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
