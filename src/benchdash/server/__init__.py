# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""HTTP surface for the dashboard back end."""

from benchdash.server.app import create_app
from benchdash.server.dependencies import get_store

__all__ = ["create_app", "get_store"]
