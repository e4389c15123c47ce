"""Replay policy -- decides what happens to prior reasoning before a request.

With extended thinking off the request carries no thinking config and
earlier reasoning blocks are dropped. With thinking on, signed blocks
must be sent back untouched and unsigned ones are downgraded to text.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from thinkprune.api.models import Turn
from thinkprune.api.thinking import (
    count_thinking_blocks,
    downgrade_unsigned_thinking_blocks,
    drop_thinking_blocks,
)
from thinkprune.config import Settings

logger = logging.getLogger(__name__)


class ThinkingReplayPolicy(StrEnum):
    KEEP = "keep"
    DROP = "drop"
    DOWNGRADE = "downgrade"


def resolve_replay_policy(settings: Settings) -> ThinkingReplayPolicy:
    """Pick the replay policy from settings.

    An explicit thinking_replay wins. "auto" follows thinking_mode.
    """
    if settings.thinking_replay != "auto":
        return ThinkingReplayPolicy(settings.thinking_replay)
    if settings.thinking_mode == "off":
        return ThinkingReplayPolicy.DROP
    return ThinkingReplayPolicy.DOWNGRADE


def apply_replay_policy(
    messages: list[Turn], policy: ThinkingReplayPolicy | str
) -> list[Turn]:
    """Run the filter pass for policy over messages.

    Returns messages itself when the pass changed nothing.
    Raises ValueError for an unknown policy.
    """
    try:
        policy = ThinkingReplayPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown thinking replay policy: {policy!r}") from None

    if policy is ThinkingReplayPolicy.KEEP:
        return messages

    if policy is ThinkingReplayPolicy.DROP:
        result = drop_thinking_blocks(messages)
    else:
        result = downgrade_unsigned_thinking_blocks(messages)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Thinking replay %s: %d thinking blocks in, %d out (%s)",
            policy,
            count_thinking_blocks(messages),
            count_thinking_blocks(result),
            "unchanged" if result is messages else "rewritten",
        )
    return result


def prepare_history(messages: list[Turn], settings: Settings) -> list[Turn]:
    """Apply the configured replay policy to a history before sending it."""
    return apply_replay_policy(messages, resolve_replay_policy(settings))
