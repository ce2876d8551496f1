"""Base exceptions for session-timeline.

This module defines the root exception hierarchy for the package.
All domain-specific exceptions should inherit from SessionTimelineError.
"""

__all__ = ["SessionTimelineError"]


class SessionTimelineError(Exception):
    """Base exception for all session-timeline errors.

    The timeline engine itself never raises for malformed input; these
    exceptions belong to the collaborators around it (loading, CLI).
    """

    pass
