"""thinkprune -- thinking-block filtering for conversation replay.

Public API:
    is_assistant_turn_with_blocks       - Assistant turn with list content?
    drop_thinking_blocks                - Remove thinking blocks
    downgrade_unsigned_thinking_blocks  - Unsigned thinking -> text
    count_thinking_blocks               - Thinking blocks in a history

Replay:
    ThinkingReplayPolicy, resolve_replay_policy, apply_replay_policy,
    prepare_history, Settings
"""

from thinkprune.api.replay import (
    ThinkingReplayPolicy,
    apply_replay_policy,
    prepare_history,
    resolve_replay_policy,
)
from thinkprune.api.thinking import (
    count_thinking_blocks,
    downgrade_unsigned_thinking_blocks,
    drop_thinking_blocks,
    is_assistant_turn_with_blocks,
)
from thinkprune.config import Settings

__all__ = [
    "Settings",
    "ThinkingReplayPolicy",
    "apply_replay_policy",
    "count_thinking_blocks",
    "downgrade_unsigned_thinking_blocks",
    "drop_thinking_blocks",
    "is_assistant_turn_with_blocks",
    "prepare_history",
    "resolve_replay_policy",
]
