# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for benchdash unit tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from benchdash.store import ResourceStore

_WIDGETS_SEED: dict[str, Any] = {
    "widgets": [
        {"id": "w-001", "n": 1},
        {"id": "w-002", "n": 2},
    ],
    "vendorColors": {"nvidia": "#76B900", "amd": "#ED1C24"},
    "paretoViewModes": {},
}

_BENCHMARK_SEED: dict[str, Any] = {
    "systems": [
        {"id": "sys-1", "system_name": "Alpha", "color": "#111111"},
        {"id": "sys-2", "system_name": "Beta"},
    ],
    "models": [
        {"id": "m-1", "model_id": "model-a", "name": "Model A", "logo_url": "/a.svg"},
    ],
    "submissions": [
        {
            "id": "sub-1",
            "submission_id": "sub-1",
            "system_id": "sys-1",
            "model_id": "model-a",
            "submitter_org_names": "NVIDIA Corporation",
            "submission_date": "2025-01-10",
        },
        {
            "id": "sub-2",
            "submission_id": "sub-2",
            "system_id": "sys-2",
            "model_id": "model-a",
            "submitter_org_names": "AMD",
            "submission_date": "2025-03-01T12:00:00Z",
        },
        {
            "id": "sub-3",
            "submission_id": "sub-3",
            "system_id": "sys-missing",
            "model_id": "model-missing",
            "submitter_org_names": "Acme",
        },
    ],
    "runs": [
        {"id": "r-1", "run_id": "r-1", "submission_id": "sub-1", "concurrency": 64, "system_tps": 6400.0, "tps_per_user": 100.0},
        {"id": "r-2", "run_id": "r-2", "submission_id": "sub-1", "concurrency": 1, "system_tps": 300.0, "tps_per_user": 300.0},
        {"id": "r-3", "run_id": "r-3", "submission_id": "sub-1", "concurrency": 8, "system_tps": 1600.0, "tps_per_user": 200.0},
        {"id": "r-4", "run_id": "r-4", "submission_id": "sub-2", "concurrency": 4, "system_tps": 800.0, "tps_per_user": 200.0},
    ],
}


@pytest.fixture
def widgets_seed() -> dict[str, Any]:
    """Small seed with one collection and two singletons."""
    return copy.deepcopy(_WIDGETS_SEED)


@pytest.fixture
def widgets_store(widgets_seed: dict[str, Any]) -> ResourceStore:
    return ResourceStore.from_data(widgets_seed)


@pytest.fixture
def benchmark_seed() -> dict[str, Any]:
    """Systems, models, submissions and runs with one dangling submission."""
    return copy.deepcopy(_BENCHMARK_SEED)
