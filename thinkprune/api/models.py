"""Message shapes for conversation history.

Turns and content blocks are plain dicts in Anthropic Messages API form, so
histories read from storage or returned by the API need no conversion. The
TypedDicts below only describe those dicts.
"""

from __future__ import annotations

from typing import Any, Literal, NotRequired, TypedDict, Union

ASSISTANT_ROLE = "assistant"


class TextBlock(TypedDict):
    type: Literal["text"]
    text: str


class ThinkingBlock(TypedDict):
    type: Literal["thinking"]
    thinking: str
    signature: NotRequired[str]


class ToolUseBlock(TypedDict):
    type: Literal["tool_use"]
    id: str
    name: str
    input: dict[str, Any]


class ToolResultBlock(TypedDict):
    type: Literal["tool_result"]
    tool_use_id: str
    content: Any


ContentBlock = Union[TextBlock, ThinkingBlock, ToolUseBlock, ToolResultBlock]


class Turn(TypedDict):
    """A single message in a conversation."""

    role: str  # "user" or "assistant"
    content: str | list[ContentBlock]
