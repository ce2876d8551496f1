"""Validation utilities for CLI arguments."""

import argparse

__all__ = ["validate_args"]


def validate_args(args: argparse.Namespace) -> str | None:
    """Validate CLI arguments for consistency.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Error message if validation fails, None if valid.

    """
    if not args.session.is_file():
        return f"Error: Session file not found: {args.session}"

    if args.hooks is not None and not args.hooks.is_file():
        return f"Error: Hook events file not found: {args.hooks}"

    if args.hooks_as_progress and args.hooks is None:
        return "Error: --hooks-as-progress requires --hooks"

    return None
