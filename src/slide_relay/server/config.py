from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from slide_relay.protocol.constants import WS_PATH
from slide_relay.protocol.messages import PresentationState


class Settings(BaseSettings):
    """
    Runtime config for the relay.

    - Loaded from environment variables (`SLIDE_RELAY_*`)
    - Also reads `.env` if present (via pydantic-settings + python-dotenv)
    - `PORT` is honored as well, for hosts that inject it
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="SLIDE_RELAY_", extra="ignore", populate_by_name=True
    )

    host: str = "0.0.0.0"
    port: int = Field(default=8080, validation_alias=AliasChoices("SLIDE_RELAY_PORT", "PORT"))
    ws_path: str = WS_PATH

    # State the relay starts with
    start_slide: int = 1
    total_slides: int = 10
    auto_mode: bool = False

    # Logging
    log_level: str = "INFO"
    debug_log_msgs: bool = False

    def initial_state(self) -> dict[str, Any]:
        return PresentationState(
            currentSlide=self.start_slide,
            totalSlides=self.total_slides,
            isAutoMode=self.auto_mode,
        ).model_dump()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
