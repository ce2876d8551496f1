"""Tool-name classification.

Maps a raw tool identifier to its action category through an explicit,
ordered rule list; the first matching rule wins and every name matches
the final catch-all.
"""

from collections.abc import Callable
from typing import NamedTuple

from session_timeline.models.enums import ActionCategory

__all__ = [
    "MCP_PREFIX",
    "TOOL_CATEGORY_RULES",
    "ShortToolName",
    "categorize_tool",
    "shorten_tool_name",
]

MCP_PREFIX = "mcp__"
_MCP_LEGACY_PREFIX = "mcp_"


class ToolRule(NamedTuple):
    """A (predicate, category) pair in the classification chain."""

    name: str
    matches: Callable[[str], bool]
    category: ActionCategory


TOOL_CATEGORY_RULES: tuple[ToolRule, ...] = (
    ToolRule("skill", lambda name: name == "Skill", ActionCategory.skill),
    ToolRule(
        "mcp",
        lambda name: name.startswith((MCP_PREFIX, _MCP_LEGACY_PREFIX)),
        ActionCategory.mcp,
    ),
    ToolRule("agent", lambda name: name == "Task", ActionCategory.agent),
    ToolRule("builtin", lambda name: True, ActionCategory.builtin),
)


def categorize_tool(name: str) -> ActionCategory:
    """Categorize a tool call by its name.

    Args:
        name: The tool identifier.

    Returns:
        The category of the first rule that matches.

    """
    for rule in TOOL_CATEGORY_RULES:
        if rule.matches(name):
            return rule.category
    return ActionCategory.builtin


class ShortToolName(NamedTuple):
    """A tool name split for compact display."""

    short: str
    server: str | None = None


def shorten_tool_name(name: str) -> ShortToolName:
    """Split an MCP tool name into server and tool parts.

    "mcp__chrome-devtools__take_snapshot" becomes
    ("take_snapshot", "chrome-devtools"). Other names pass through.

    Args:
        name: The tool identifier.

    Returns:
        The short name and, for MCP tools, the server name.

    """
    if name.startswith(MCP_PREFIX):
        server, sep, tool = name[len(MCP_PREFIX) :].partition("__")
        if server and sep and tool:
            return ShortToolName(short=tool, server=server)
    return ShortToolName(short=name)
