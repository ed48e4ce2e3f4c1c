# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Benchmark chart data service.

Validates the dashboard filter parameters and produces chart data for them.
The data currently comes from :mod:`benchdash.benchmarks.placeholders`; a real
data source only needs to replace :func:`get_benchmark_data`.
"""

import asyncio
import logging
import random
import time
from collections.abc import Mapping
from typing import Any, Literal
from urllib.parse import urlencode

from pydantic import ConfigDict, Field, ValidationError

from benchdash.benchmarks.placeholders import generate_chart_data
from benchdash.common.exceptions import FilterValidationError
from benchdash.common.models import BenchDashBaseModel

__all__ = [
    "FILTER_FIELDS",
    "BenchmarkFilters",
    "build_endpoint_url",
    "get_benchmark_data",
    "simulate_api_request",
    "validate_filters",
]

logger = logging.getLogger(__name__)

ModelName = Literal["gpt-oss-120b", "deepseek-r1-0528", "llama-3.3-70b"]
IslOsl = Literal["1k/1k", "1k/8k", "8k/1k"]
Precision = Literal["FP4", "FP8"]
YAxisMetric = Literal[
    "token-throughput-per-gpu",
    "input-token-throughput-per-gpu",
    "output-token-throughput-per-gpu",
    "token-throughput-per-mw",
    "cost-per-million-owning-hyperscaler",
    "cost-per-million-owning-neocloud",
    "cost-per-million-3yr-rental",
    "cost-per-million-customer-values",
]

# Wire names of the filter parameters, in the order they appear in URLs.
FILTER_FIELDS: tuple[str, ...] = ("model", "islOsl", "precision", "yAxisMetric")


class BenchmarkFilters(BenchDashBaseModel):
    """Validated benchmark filter selection."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    model: ModelName = Field(description="Benchmarked model")
    isl_osl: IslOsl = Field(alias="islOsl", description="Input/output sequence lengths")
    precision: Precision = Field(description="Numeric precision")
    y_axis_metric: YAxisMetric = Field(
        alias="yAxisMetric", description="Metric plotted on the y axis"
    )

    def to_params(self) -> dict[str, str]:
        """Return the filters keyed by their wire names."""
        return self.model_dump(by_alias=True)


def _issue_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc) or "unknown"


def validate_filters(raw: Mapping[str, Any]) -> BenchmarkFilters:
    """Validate raw filter parameters.

    Only the four filter fields are considered; any other keys are ignored.
    Missing or ``None`` values are reported as missing.

    Raises:
        FilterValidationError: listing every invalid field, not just the first.
    """
    candidate = {
        name: raw[name] for name in FILTER_FIELDS if raw.get(name) is not None
    }
    try:
        return BenchmarkFilters.model_validate(candidate)
    except ValidationError as e:
        issues = [
            {"path": _issue_path(err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise FilterValidationError(issues) from e


def get_benchmark_data(raw_filters: Mapping[str, Any]) -> dict[str, Any]:
    """Validate the filters and generate the chart data for them.

    Raises:
        FilterValidationError: if any filter value is missing or not allowed
    """
    filters = validate_filters(raw_filters)
    return generate_chart_data(filters.to_params())


async def simulate_api_request(
    raw_filters: Mapping[str, Any],
    simulate_delay: bool = True,
    delay_ms: float | None = None,
) -> dict[str, Any]:
    """Produce a mock API response, including network-like latency.

    Validation failures are reported in the response body instead of raised.

    Args:
        raw_filters: Filter parameters keyed by wire name
        simulate_delay: Whether to sleep before answering
        delay_ms: Delay to use; a random 150-400 ms when not given

    Returns:
        ``{ok, status, statusText, data, error, latencyMs}``
    """
    if delay_ms is None:
        delay_ms = 150 + random.random() * 250
    start = time.perf_counter()

    if simulate_delay:
        await asyncio.sleep(delay_ms / 1000)

    try:
        data = get_benchmark_data(raw_filters)
    except FilterValidationError as e:
        logger.debug(f"Simulated request rejected: {e.summary()}")
        return {
            "ok": False,
            "status": 400,
            "statusText": "Bad Request",
            "data": None,
            "error": {"message": e.message, "issues": e.issues},
            "latencyMs": round((time.perf_counter() - start) * 1000),
        }

    return {
        "ok": True,
        "status": 200,
        "statusText": "OK",
        "data": data,
        "error": None,
        "latencyMs": round((time.perf_counter() - start) * 1000),
    }


def build_endpoint_url(filters: Mapping[str, Any] | BenchmarkFilters) -> str:
    """Build the ``/api/benchmarks`` URL for a filter selection."""
    if isinstance(filters, BenchmarkFilters):
        filters = filters.to_params()
    params = {name: filters.get(name, "") for name in FILTER_FIELDS}
    return f"/api/benchmarks?{urlencode(params)}"
