"""Settings via pydantic-settings with THINKPRUNE_ env prefix.

thinking_mode mirrors the extended-thinking switch of the request that will
carry the replayed history. thinking_replay picks what happens to earlier
reasoning blocks; "auto" derives it from thinking_mode.
"""

import logging
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="THINKPRUNE_", env_file=".env")

    log_level: str = "info"

    # Extended thinking on the outgoing request
    thinking_mode: Literal["off", "adaptive", "manual"] = "off"

    # History replay
    thinking_replay: Literal["auto", "keep", "drop", "downgrade"] = "auto"


def configure_logging(settings: Settings) -> None:
    """Apply the log level from settings to the root logger."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
