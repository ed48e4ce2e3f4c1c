# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from benchdash.common.config.loader import load_service_config
from benchdash.common.config.service_config import (
    DEFAULT_SINGLETON_RESOURCES,
    ServiceConfig,
)

__all__ = [
    "DEFAULT_SINGLETON_RESOURCES",
    "ServiceConfig",
    "load_service_config",
]
