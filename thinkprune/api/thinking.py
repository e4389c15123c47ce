"""Thinking-block filtering for conversation replay.

Two independent passes over a message history:
  drop_thinking_blocks: remove every thinking block from assistant turns
  downgrade_unsigned_thinking_blocks: turn unsigned, non-empty thinking
      blocks into text blocks at the same position

Neither pass mutates its input. Unchanged turns are shared by reference and
the input list itself is returned when no block was touched, so callers can
test ``result is messages`` to skip re-persisting an unmodified history.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from thinkprune.api.models import ASSISTANT_ROLE, Turn

# Returns the block itself to keep it, None to drop it, or a replacement.
BlockRewrite = Callable[[Any], Any]


def is_assistant_turn_with_blocks(turn: Any) -> bool:
    """Check if a turn is an assistant message with list content.

    Assistant turns coming back from the API carry a list of content
    blocks. Anything else (user turns, string content, malformed dicts)
    is left alone by the rewrite passes.
    """
    return (
        isinstance(turn, dict)
        and turn.get("role") == ASSISTANT_ROLE
        and isinstance(turn.get("content"), list)
    )


def _is_thinking_block(block: Any) -> bool:
    return isinstance(block, dict) and block.get("type") == "thinking"


def _has_signature(block: dict[str, Any]) -> bool:
    signature = block.get("signature")
    return isinstance(signature, str) and signature != ""


def _has_trace(block: dict[str, Any]) -> bool:
    thinking = block.get("thinking")
    return isinstance(thinking, str) and thinking.strip() != ""


def _rewrite_content(
    content: list[Any], rewrite: BlockRewrite
) -> list[Any] | None:
    """Apply rewrite to each block. Returns None if nothing changed.

    The output list is only allocated once the first block changes.
    """
    rewritten: list[Any] | None = None
    for i, block in enumerate(content):
        replacement = rewrite(block)
        if replacement is block:
            if rewritten is not None:
                rewritten.append(block)
            continue
        if rewritten is None:
            rewritten = list(content[:i])
        if replacement is not None:
            rewritten.append(replacement)

    if rewritten is None:
        return None
    if not rewritten:
        # Assistant turns always keep at least one block
        rewritten = [{"type": "text", "text": ""}]
    return rewritten


def _rewrite_assistant_turns(
    turns: list[Turn], rewrite: BlockRewrite
) -> list[Turn]:
    result: list[Turn] | None = None
    for i, turn in enumerate(turns):
        new_content = None
        if is_assistant_turn_with_blocks(turn):
            new_content = _rewrite_content(turn["content"], rewrite)

        if new_content is None:
            if result is not None:
                result.append(turn)
            continue

        if result is None:
            result = list(turns[:i])
        result.append({**turn, "content": new_content})

    return turns if result is None else result


def _drop(block: Any) -> Any:
    return None if _is_thinking_block(block) else block


def _downgrade(block: Any) -> Any:
    if not _is_thinking_block(block):
        return block
    if _has_signature(block) or not _has_trace(block):
        return block
    return {"type": "text", "text": block["thinking"]}


def drop_thinking_blocks(turns: list[Turn]) -> list[Turn]:
    """Remove all thinking blocks from assistant turns.

    A turn that held only thinking blocks gets a single empty text block
    instead of an empty content list. Returns ``turns`` itself when no
    thinking block was present.
    """
    return _rewrite_assistant_turns(turns, _drop)


def downgrade_unsigned_thinking_blocks(turns: list[Turn]) -> list[Turn]:
    """Convert unsigned thinking blocks with a non-empty trace to text.

    Signed blocks and blocks with an empty (or whitespace-only) trace are
    kept as they are. Returns ``turns`` itself when nothing qualified.
    """
    return _rewrite_assistant_turns(turns, _downgrade)


def count_thinking_blocks(turns: list[Turn]) -> int:
    """Count thinking blocks across all assistant turns."""
    return sum(
        1
        for turn in turns
        if is_assistant_turn_with_blocks(turn)
        for block in turn["content"]
        if _is_thinking_block(block)
    )
