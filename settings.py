# settings.py
from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # -----------------------
    # Target quote service
    # -----------------------
    GDAX_QUOTE_HOST: str = Field(default="localhost", min_length=1)
    GDAX_QUOTE_LISTEN_PORT: int = Field(default=3000, ge=1, le=65535)

    # HTTP timeout; unset means block until the service answers
    QUOTE_HTTP_TIMEOUT_S: Optional[float] = Field(default=None, gt=0)

    # -----------------------
    # Harness behaviour
    # -----------------------
    # Count a sad-path response without an error message as a failure.
    QUOTE_SMOKE_STRICT_MESSAGES: bool = False
    QUOTE_SMOKE_LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @property
    def base_url(self) -> str:
        return f"http://{self.GDAX_QUOTE_HOST}:{self.GDAX_QUOTE_LISTEN_PORT}"
