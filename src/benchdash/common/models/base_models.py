# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from pydantic import BaseModel, ConfigDict


class BenchDashBaseModel(BaseModel):
    """Base model for configuration and internal data models.

    Unknown fields are rejected so typos in config files surface as errors.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")


class BenchDashRecordModel(BaseModel):
    """Base model for seed-document records.

    Seed records routinely carry display fields the dashboard does not model,
    so unknown fields are kept rather than rejected.
    """

    model_config = ConfigDict(
        extra="allow", populate_by_name=True, protected_namespaces=()
    )
