"""Unit tests for tool-name classification.

This module tests categorize_tool() rule priority and shorten_tool_name().
"""

import pytest

from session_timeline.engine.classifier import (
    TOOL_CATEGORY_RULES,
    categorize_tool,
    shorten_tool_name,
)
from session_timeline.models.enums import ActionCategory


class TestCategorizeTool:
    """Tests for categorize_tool()."""

    def test_skill_is_skill(self) -> None:
        """Test that the Skill tool is categorized as skill."""
        assert categorize_tool("Skill") == ActionCategory.skill

    @pytest.mark.parametrize(
        "name",
        ["mcp__chrome-devtools__click", "mcp__github__create_issue", "mcp_playwright"],
    )
    def test_mcp_prefixes_are_mcp(self, name: str) -> None:
        """Test that namespaced MCP tool names are categorized as mcp."""
        assert categorize_tool(name) == ActionCategory.mcp

    def test_task_is_agent(self) -> None:
        """Test that sub-agent delegation is categorized as agent."""
        assert categorize_tool("Task") == ActionCategory.agent

    @pytest.mark.parametrize("name", ["Read", "Bash", "Edit", "Write", "Grep", "Glob", ""])
    def test_everything_else_is_builtin(self, name: str) -> None:
        """Test that other names fall through to builtin."""
        assert categorize_tool(name) == ActionCategory.builtin

    def test_matching_is_case_sensitive(self) -> None:
        """Test that lowercase skill/task are not special."""
        assert categorize_tool("skill") == ActionCategory.builtin
        assert categorize_tool("task") == ActionCategory.builtin

    def test_rule_order_ends_with_catch_all(self) -> None:
        """Test that the last rule matches any name."""
        assert TOOL_CATEGORY_RULES[-1].matches("anything")
        assert TOOL_CATEGORY_RULES[-1].category == ActionCategory.builtin


class TestShortenToolName:
    """Tests for shorten_tool_name()."""

    def test_splits_mcp_name(self) -> None:
        """Test that MCP names are split into server and tool."""
        result = shorten_tool_name("mcp__chrome-devtools__take_snapshot")

        assert result.short == "take_snapshot"
        assert result.server == "chrome-devtools"

    def test_plain_name_passes_through(self) -> None:
        """Test that non-MCP names are returned unchanged without a server."""
        result = shorten_tool_name("Bash")

        assert result.short == "Bash"
        assert result.server is None

    def test_incomplete_mcp_name_passes_through(self) -> None:
        """Test that an MCP prefix without a tool part is not split."""
        assert shorten_tool_name("mcp__server").short == "mcp__server"
