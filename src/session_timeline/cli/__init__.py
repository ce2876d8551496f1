"""CLI package for session-timeline.

This package provides the command-line interface:
- main: Entry point and error handling
- parser: Argument parser configuration
- validators: Argument validation
- formatters: Text and JSON output formatting
"""

from session_timeline.cli.main import main

__all__ = ["main"]
