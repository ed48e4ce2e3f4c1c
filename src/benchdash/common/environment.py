# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment variable settings for benchdash.

Settings are grouped by concern and read once at import time. Each group has
its own prefix, e.g. ``BENCHDASH_SERVER_PORT`` sets ``Environment.SERVER.PORT``.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Environment", "LogLevel"]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class _ConfigSettings(BaseSettings):
    """File locations for configuration and seed data."""

    model_config = SettingsConfigDict(env_prefix="BENCHDASH_CONFIG_")

    SERVICE_FILE: Path | None = Field(
        default=None,
        description="Path to the service configuration file (JSON or YAML)",
    )
    SEED_FILE: Path = Field(
        default=Path("static/db.json"),
        description="Path to the JSON seed document loaded into the resource store",
    )


class _ServerSettings(BaseSettings):
    """HTTP server bind settings."""

    model_config = SettingsConfigDict(env_prefix="BENCHDASH_SERVER_")

    HOST: str = Field(default="127.0.0.1", description="Host to bind the API server to")
    PORT: int = Field(
        default=5173, ge=1, le=65535, description="Port to bind the API server to"
    )


class _LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="BENCHDASH_LOGGING_")

    LEVEL: LogLevel = Field(default="INFO", description="Root log level")


class _Environment(BaseSettings):
    CONFIG: _ConfigSettings = Field(default_factory=_ConfigSettings)
    SERVER: _ServerSettings = Field(default_factory=_ServerSettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)


Environment = _Environment()
