# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""System data joins and per-chart point preparation.

Systems link to one pareto curve each (``paretoCurves[].systemId``) and curves
link to their measurements (``dataPoints[].paretoCurveId``). The prepare
functions map a joined system's data points to ``{x, y, original}`` tuples,
ordered so a step or line renderer draws a monotone path.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from benchdash.common.utils import index_by, is_hashable, lookup, missing_last

__all__ = [
    "SYSTEM_COLOR_PALETTE",
    "calculate_normalized_throughput",
    "get_system_color",
    "parse_system_data",
    "prepare_normalized_throughput_data",
    "prepare_normalized_ttft_data",
    "prepare_throughput_interactivity_data",
    "prepare_ttft_chart_data",
]

SYSTEM_COLOR_PALETTE: tuple[str, ...] = (
    "#535869",
    "#BED3FB",
    "#F7CB84",
    "#F4B6A1",
    "#62826C",
    "#CCEBD4",
    "#4E6BA1",
    "#3D455A",
    "#A0B5DD",
    "#E8B460",
    "#D49681",
    "#44644E",
    "#B3CEBA",
    "#37548A",
)


def calculate_normalized_throughput(
    throughput: float, chips: float, normalizing_factor: float
) -> float:
    """Throughput per chip, scaled by the system's normalizing factor.

    Raises:
        ZeroDivisionError: If chips or normalizing_factor is zero.
    """
    return throughput / chips / normalizing_factor


def _concurrency_floor(value: Any) -> Any:
    # Concurrency is stored as a {"min", "max"} range; charts plot the lower bound.
    if isinstance(value, dict):
        return value.get("min")
    return value


def parse_system_data(raw: dict[str, Any]) -> list[dict[str, Any]]:
    """Join systems with their pareto curve and data points.

    Systems without a pareto curve are dropped. When several curves name the
    same system, the last one wins.

    Returns:
        One entry per system with its data points sorted by ascending
        ``concurrentUsers``.
    """
    systems = raw.get("systems", [])
    if not systems:
        return []

    curves_by_system = index_by(raw.get("paretoCurves", []), "systemId")

    points_by_curve: dict[Any, list[dict[str, Any]]] = defaultdict(list)
    for point in raw.get("dataPoints", []):
        if is_hashable(point.get("paretoCurveId")):
            points_by_curve[point.get("paretoCurveId")].append(point)

    parsed = []
    for system in systems:
        curve = lookup(curves_by_system, system.get("id"))
        if curve is None:
            continue

        data_points = [
            {**point, "concurrentUsers": _concurrency_floor(point.get("concurrentUsers"))}
            for point in lookup(points_by_curve, curve.get("id")) or []
        ]
        data_points.sort(key=lambda p: missing_last(p["concurrentUsers"]))

        parsed.append(
            {
                "id": system.get("id"),
                "name": system.get("systemName"),
                "submitter": system.get("submitter"),
                "chips": system.get("chips"),
                "normalizingFactor": system.get("normalizingFactor"),
                "accelerator": system.get("accelerator"),
                "division": system.get("division"),
                "status": system.get("status"),
                "dataPoints": data_points,
            }
        )
    return parsed


def _points(
    system: dict[str, Any], x_field: str, y_field: str
) -> list[dict[str, Any]]:
    return [
        {"x": point.get(x_field), "y": point.get(y_field), "original": point}
        for point in system.get("dataPoints", [])
    ]


def prepare_ttft_chart_data(system: dict[str, Any]) -> list[dict[str, Any]]:
    """TTFT vs. concurrent users, in concurrency order."""
    return _points(system, "concurrentUsers", "ttft")


def prepare_throughput_interactivity_data(system: dict[str, Any]) -> list[dict[str, Any]]:
    """System throughput vs. interactivity, highest interactivity first."""
    points = _points(system, "interactivity", "systemThroughput")
    return sorted(points, key=lambda p: missing_last(p["x"], descending=True))


def prepare_normalized_throughput_data(system: dict[str, Any]) -> list[dict[str, Any]]:
    """Normalized throughput vs. concurrent users, in concurrency order."""
    return _points(system, "concurrentUsers", "normalizedThroughput")


def prepare_normalized_ttft_data(system: dict[str, Any]) -> list[dict[str, Any]]:
    """Normalized throughput vs. TTFT, lowest TTFT first."""
    points = _points(system, "ttft", "normalizedThroughput")
    return sorted(points, key=lambda p: missing_last(p["x"]))


def get_system_color(index: int) -> str:
    return SYSTEM_COLOR_PALETTE[index % len(SYSTEM_COLOR_PALETTE)]
