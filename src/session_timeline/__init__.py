"""session-timeline: action timeline synthesis for agent-assistant sessions."""

__version__ = "0.1.0"
