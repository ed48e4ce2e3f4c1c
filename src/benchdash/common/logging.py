# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logging setup for benchdash processes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from benchdash.common.config.service_config import ServiceConfig

_LOG_FORMAT = "%(message)s"
_DATE_FORMAT = "[%X]"

# Loggers that are noisy at DEBUG and only useful when debugging the server itself.
_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_rich_logging(service_config: ServiceConfig) -> None:
    """Install a rich console handler on the root logger.

    Replaces any handlers already installed so calling this twice (e.g. from
    the CLI and again from uvicorn's reload worker) does not duplicate output.
    """
    level = logging.getLevelName(service_config.log_level)

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=level == logging.DEBUG,
        log_time_format=_DATE_FORMAT,
    )
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
