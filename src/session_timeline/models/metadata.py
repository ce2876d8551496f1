"""Typed views over open-ended event metadata.

Progress and system events carry a loosely shaped metadata dict whose
``type`` key selects the subtype. The builder never reads those dicts
directly; it parses them into one of the models below and dispatches on
the model class. Parsing never raises: an unknown subtype becomes
UnknownProgress, and a known subtype with malformed fields becomes a bare
instance of its own model that keeps only the output payload.
"""

from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import AliasChoices, ConfigDict, Field, SkipValidation, ValidationError

from session_timeline.logging_config import get_logger
from session_timeline.models.base import BaseSchema
from session_timeline.models.records import HookEventRecord

__all__ = [
    "AgentProgress",
    "BashProgress",
    "HookEventProgress",
    "HookProgress",
    "McpProgress",
    "ProgressDetail",
    "SystemNotice",
    "UnknownProgress",
    "WaitingForTask",
    "parse_progress_detail",
    "parse_system_notice",
]

logger = get_logger(__name__)


class _ProgressBase(BaseSchema):
    """Fields shared by every progress subtype."""

    model_config = ConfigDict(extra="ignore")

    subtype: ClassVar[str]

    output: SkipValidation[Any] = None


class AgentProgress(_ProgressBase):
    """A sub-agent reported progress."""

    subtype: ClassVar[str] = "agent_progress"

    prompt: str | None = None
    agent_id: str | None = Field(
        default=None, validation_alias=AliasChoices("agentId", "agent_id")
    )


class BashProgress(_ProgressBase):
    """A long-running shell command reported progress."""

    subtype: ClassVar[str] = "bash_progress"

    command: str | None = None


class McpProgress(_ProgressBase):
    """A remote MCP tool call reported progress."""

    subtype: ClassVar[str] = "mcp_progress"

    server: str | None = None
    method: str | None = None


class HookProgress(_ProgressBase):
    """Textual progress from a running hook command."""

    subtype: ClassVar[str] = "hook_progress"

    hook_event: str | None = Field(
        default=None, validation_alias=AliasChoices("hookEvent", "hook_event")
    )
    hook_name: str | None = Field(
        default=None, validation_alias=AliasChoices("hookName", "hook_name")
    )
    command: str | None = None


class HookEventProgress(_ProgressBase):
    """A structured hook callback record spliced in from hook history."""

    subtype: ClassVar[str] = "hook_event"

    hook_event: HookEventRecord | None = Field(
        default=None, validation_alias=AliasChoices("hook_event", "_hookEvent")
    )


class WaitingForTask(_ProgressBase):
    """The session is queued behind another task."""

    subtype: ClassVar[str] = "waiting_for_task"

    position: int | str | None = None


class UnknownProgress(_ProgressBase):
    """Any progress subtype without a dedicated model.

    Attributes:
        raw_subtype: The subtype string as received, or None when absent.

    """

    subtype: ClassVar[str] = "progress"

    raw_subtype: str | None = None


ProgressDetail = (
    AgentProgress
    | BashProgress
    | McpProgress
    | HookProgress
    | HookEventProgress
    | WaitingForTask
    | UnknownProgress
)

_PROGRESS_MODELS: dict[str, type[_ProgressBase]] = {
    model.subtype: model
    for model in (
        AgentProgress,
        BashProgress,
        McpProgress,
        HookProgress,
        HookEventProgress,
        WaitingForTask,
    )
}


def _subtype_of(metadata: Mapping[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = metadata.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def parse_progress_detail(metadata: Any) -> ProgressDetail:
    """Parse progress metadata into its typed subtype model.

    Args:
        metadata: The event's metadata dict (or anything else).

    Returns:
        The subtype model for ``metadata["type"]``.

    """
    if not isinstance(metadata, Mapping):
        return UnknownProgress()

    subtype = _subtype_of(metadata, "type")
    model = _PROGRESS_MODELS.get(subtype) if subtype else None
    if model is None:
        return UnknownProgress(
            raw_subtype=subtype,
            output=metadata.get("output"),
        )

    try:
        return model.model_validate(dict(metadata))
    except ValidationError as e:
        logger.debug(
            "progress_metadata_malformed",
            subtype=subtype,
            errors=e.error_count(),
        )
        return model(output=metadata.get("output"))


class SystemNotice(BaseSchema):
    """Typed view of a system event's metadata.

    Attributes:
        subtype: Value of the ``type`` (or ``subtype``) key, if present.

    """

    subtype: str | None = None


def parse_system_notice(metadata: Any) -> SystemNotice:
    """Parse system metadata, tolerating any shape.

    Args:
        metadata: The event's metadata dict (or anything else).

    Returns:
        A SystemNotice with the subtype discriminator, if one was present.

    """
    if not isinstance(metadata, Mapping):
        return SystemNotice()
    return SystemNotice(subtype=_subtype_of(metadata, "type", "subtype"))
