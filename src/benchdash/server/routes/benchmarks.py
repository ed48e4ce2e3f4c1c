# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Synthetic benchmark chart data, selected by filter parameters."""

from typing import Any

from fastapi import APIRouter, Request

from benchdash.benchmarks.models import BenchmarkChartData
from benchdash.benchmarks.service import FILTER_FIELDS, get_benchmark_data

router = APIRouter(prefix="/api")


@router.get("/benchmarks", response_model=BenchmarkChartData)
def read_benchmarks(request: Request) -> dict[str, Any]:
    """Return latency, interactivity and reliability charts for the filters.

    Query parameters are ``model``, ``islOsl``, ``precision`` and
    ``yAxisMetric``. Any missing or unsupported value fails with 400 and one
    issue per offending parameter.
    """
    raw = {name: request.query_params.get(name) for name in FILTER_FIELDS}
    return get_benchmark_data(raw)
