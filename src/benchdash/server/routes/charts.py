# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Chart-ready views joined from the store's current records."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from benchdash.benchmarks.endpoints import build_pareto_curves, get_recent_submissions
from benchdash.benchmarks.models import ParetoCurve, ParetoView
from benchdash.benchmarks.pareto import (
    TRADEOFF_VIEW,
    generate_tradeoff_view,
    get_annotations_for_view,
    normalize_to_global_max,
    parse_pareto_data,
    transform_for_view,
)
from benchdash.benchmarks.placeholders import get_gpu_benchmark_table
from benchdash.common.exceptions import MalformedInputError
from benchdash.server.dependencies import get_store
from benchdash.store import ResourceStore

router = APIRouter(prefix="/api/charts")

StoreDep = Annotated[ResourceStore, Depends(get_store)]


@router.get("/pareto-curves", response_model=list[ParetoCurve])
def read_pareto_curves(store: StoreDep) -> list[dict[str, Any]]:
    return build_pareto_curves(store.snapshot())


@router.get("/recent-submissions")
def read_recent_submissions(
    store: StoreDep, limit: Annotated[int, Query(ge=0)] = 10
) -> list[dict[str, Any]]:
    return get_recent_submissions(store.snapshot(), limit=limit)


@router.get("/pareto")
def read_pareto(
    store: StoreDep, view: str = "throughput", normalize: bool = False
) -> dict[str, Any]:
    """Return the pareto series shaped for one view.

    ``normalize`` rescales utilization against the highest max throughput of
    any series before shaping. Unknown views fail with 400.
    """
    parsed = parse_pareto_data(store.snapshot())
    series = parsed["series"]
    if normalize:
        series = normalize_to_global_max(series)

    if view == TRADEOFF_VIEW:
        shaped = generate_tradeoff_view(series)
    else:
        try:
            shaped = transform_for_view(series, view, parsed["viewModes"])
        except ValueError as e:
            raise MalformedInputError(str(e)) from e

    return ParetoView(
        view=view,
        series=shaped,
        annotations=get_annotations_for_view(parsed["annotations"], view),
        viewModes=parsed["viewModes"],
    ).model_dump()


@router.get("/gpu-benchmarks")
def read_gpu_benchmarks() -> dict[str, Any]:
    """Static GPU inference table: column definitions and sparkline rows."""
    return get_gpu_benchmark_table()
