# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Service configuration for the benchdash API server."""

from pathlib import Path

from pydantic import Field, field_validator

from benchdash.common.environment import Environment, LogLevel
from benchdash.common.models.base_models import BenchDashBaseModel

DEFAULT_SINGLETON_RESOURCES: tuple[str, ...] = ("paretoViewModes", "vendorColors")


class ServiceConfig(BenchDashBaseModel):
    """Configuration for a single benchdash server process.

    Defaults come from the ``BENCHDASH_*`` environment variables, so a config
    file only needs to list the values it overrides.
    """

    seed_file: Path = Field(
        default_factory=lambda: Environment.CONFIG.SEED_FILE,
        description="JSON seed document loaded into the resource store at startup",
    )
    singleton_resources: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SINGLETON_RESOURCES),
        description="Top-level seed keys that hold a single object instead of a collection",
    )
    check_references: bool = Field(
        default=True,
        description="Log referential-integrity problems between benchmark entities at startup",
    )
    host: str = Field(
        default_factory=lambda: Environment.SERVER.HOST,
        description="Host to bind the API server to",
    )
    port: int = Field(
        default_factory=lambda: Environment.SERVER.PORT,
        ge=1,
        le=65535,
        description="Port to bind the API server to",
    )
    log_level: LogLevel = Field(
        default_factory=lambda: Environment.LOGGING.LEVEL,
        description="Root log level",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
