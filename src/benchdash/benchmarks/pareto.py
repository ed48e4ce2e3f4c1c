# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Pareto step-chart series built from hardware configs and their points.

Series back four charts: total system throughput, % utilization and
interactivity against concurrent clients, and the throughput vs.
interactivity trade-off.
"""

from __future__ import annotations

import copy
from collections import defaultdict
from typing import Any

from benchdash.common.utils import as_number, index_by, is_hashable, lookup, missing_last

__all__ = [
    "DEFAULT_VIEW_MODES",
    "PARETO_VIEWS",
    "TRADEOFF_VIEW",
    "generate_tradeoff_view",
    "get_annotations_for_view",
    "get_global_max_throughput",
    "normalize_to_global_max",
    "parse_pareto_data",
    "transform_for_view",
]

DEFAULT_VIEW_MODES: dict[str, dict[str, str]] = {
    "throughput": {
        "yField": "total_tput",
        "yLabel": "Total System Throughput (Tok/s)",
        "stepDirection": "after",
        "description": "Total system throughput at each concurrency level",
    },
    "utilization": {
        "yField": "util",
        "yLabel": "% Utilization of Max Throughput",
        "stepDirection": "after",
        "description": "Percentage of maximum achievable throughput",
    },
    "interactivity": {
        "yField": "tps_usr",
        "yLabel": "Interactivity (Tok/s/user)",
        "stepDirection": "after",
        "description": "Per-user token throughput (user experience metric)",
    },
}

PARETO_VIEWS: tuple[str, ...] = tuple(DEFAULT_VIEW_MODES)
TRADEOFF_VIEW = "tradeoff"

# Seed view modes name record fields; series points use the short chart names.
_SERIES_FIELD_NAMES = {
    "totalThroughput": "total_tput",
    "utilization": "util",
    "tokensPerSecondPerUser": "tps_usr",
}


def _series_point(point: dict[str, Any]) -> dict[str, Any]:
    return {
        "concurrent_clients": point.get("concurrentClients"),
        "total_tput": point.get("totalThroughput"),
        "tps_usr": point.get("tokensPerSecondPerUser"),
        "util": point.get("utilization"),
        "is_compliance_point": point.get("isCompliancePoint"),
    }


def parse_pareto_data(data: dict[str, Any]) -> dict[str, Any]:
    """Join pareto hardware configs, points, vendors, annotations and view modes.

    Args:
        data: Seed data with ``paretoHardwareConfigs``, ``paretoPoints``,
            ``paretoAnnotations``, ``paretoViewModes`` and ``vendors``; any of
            them may be absent.

    Returns:
        ``{"series", "annotations", "viewModes"}`` where annotations are
        grouped by view mode and view modes fall back to DEFAULT_VIEW_MODES
        when the seed defines none.
    """
    vendors = index_by(data.get("vendors", []), "id")

    points_by_config: dict[Any, list[dict[str, Any]]] = defaultdict(list)
    for point in data.get("paretoPoints", []):
        if is_hashable(point.get("hardwareConfigId")):
            points_by_config[point.get("hardwareConfigId")].append(point)

    series = []
    for config in data.get("paretoHardwareConfigs", []):
        vendor_id = config.get("vendorId") or ""
        vendor = lookup(vendors, vendor_id) or {}
        config_points = lookup(points_by_config, config.get("id")) or []
        points = [_series_point(p) for p in config_points]
        points.sort(key=lambda p: missing_last(p["concurrent_clients"]))
        series.append(
            {
                "id": config.get("id"),
                "label": config.get("label"),
                "hardware_config": config.get("hardwareConfig"),
                "vendor": vendor.get("name") or str(vendor_id).upper(),
                "color": config.get("color"),
                "max_throughput": config.get("maxThroughput"),
                "min_concurrency": config.get("minConcurrency"),
                "max_concurrency": config.get("maxConcurrency"),
                "points": points,
            }
        )

    annotations: dict[str, list[dict[str, Any]]] = defaultdict(list)
    for annotation in data.get("paretoAnnotations", []):
        if not is_hashable(annotation.get("viewMode")):
            continue
        annotations[annotation.get("viewMode")].append(
            {
                "id": annotation.get("id"),
                "text": annotation.get("text"),
                "targetPoint": annotation.get("targetPoint"),
                "labelOffset": annotation.get("labelOffset"),
                "anchor": annotation.get("anchor"),
            }
        )

    view_modes = {
        key: {
            "yField": lookup(_SERIES_FIELD_NAMES, config.get("yField"))
            or config.get("yField"),
            "yLabel": config.get("yLabel"),
            "stepDirection": config.get("stepDirection"),
            "description": config.get("description"),
        }
        for key, config in (data.get("paretoViewModes") or {}).items()
        if isinstance(config, dict)
    }

    return {
        "series": series,
        "annotations": dict(annotations),
        "viewModes": view_modes or copy.deepcopy(DEFAULT_VIEW_MODES),
    }


def get_annotations_for_view(
    annotations: dict[str, list[dict[str, Any]]], view: str
) -> list[dict[str, Any]]:
    return list(annotations.get(view, []))


def transform_for_view(
    series: list[dict[str, Any]],
    view: str,
    view_modes: dict[str, dict[str, Any]] | None = None,
) -> list[dict[str, Any]]:
    """Map each series' points to ``{x: concurrent_clients, y: <view field>}``.

    Raises:
        ValueError: If the view is not one of the view modes.
    """
    view_modes = view_modes or DEFAULT_VIEW_MODES
    if view not in view_modes:
        raise ValueError(
            f"Unknown view mode: {view}. Expected one of {', '.join(view_modes)}"
        )
    y_field = view_modes[view]["yField"]

    return [
        {
            "id": s.get("id"),
            "label": s.get("label"),
            "color": s.get("color"),
            "vendor": s.get("vendor"),
            "points": [
                {
                    "x": p.get("concurrent_clients"),
                    "y": lookup(p, y_field),
                    "isCompliancePoint": p.get("is_compliance_point") or False,
                    "original": copy.deepcopy(p),
                }
                for p in s.get("points", [])
            ],
        }
        for s in series
    ]


def get_global_max_throughput(series: list[dict[str, Any]]) -> float:
    if not series:
        return 0
    return max(as_number(s.get("max_throughput")) or 0 for s in series)


def normalize_to_global_max(series: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Rescale utilization to a percentage of the highest max throughput of any series.

    Returns the input unchanged when the global max is zero.
    """
    global_max = get_global_max_throughput(series)
    if global_max == 0:
        return series

    return [
        {
            **s,
            "points": [
                {**p, "util": (as_number(p.get("total_tput")) or 0) / global_max * 100}
                for p in s.get("points", [])
            ],
        }
        for s in series
    ]


def generate_tradeoff_view(series: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Map points to ``{x: tps_usr, y: total_tput}``, highest interactivity first."""
    return [
        {
            "id": s.get("id"),
            "label": s.get("label"),
            "color": s.get("color"),
            "vendor": s.get("vendor"),
            "points": sorted(
                (
                    {
                        "x": p.get("tps_usr"),
                        "y": p.get("total_tput"),
                        "original": copy.deepcopy(p),
                    }
                    for p in s.get("points", [])
                ),
                key=lambda point: missing_last(point["x"], descending=True),
            ),
        }
        for s in series
    ]
