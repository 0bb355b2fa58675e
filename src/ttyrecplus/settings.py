# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ttyrecplus.constants import DEFAULT_PLAYBACK_SPEED


class Settings(BaseSettings):
    log_level: str = "WARNING"
    time_threshold: float | None = Field(default=None, ge=0)
    playback_speed: float = Field(default=DEFAULT_PLAYBACK_SPEED, gt=0)
    max_delay: float | None = Field(default=None, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="TTYRECPLUS_",
        extra="ignore",
    )
