# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from benchdash.common.models.base_models import (
    BenchDashBaseModel,
    BenchDashRecordModel,
)

__all__ = [
    "BenchDashBaseModel",
    "BenchDashRecordModel",
]
