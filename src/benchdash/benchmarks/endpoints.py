# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Join and lookup helpers for endpoints benchmark data.

The input is the normalized seed shape: ``systems``, ``models``,
``submissions`` and ``runs`` lists linked by ``system_id``, ``model_id`` and
``submission_id``. Nothing here mutates its input.
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import Any

from benchdash.benchmarks.models import DEFAULT_CURVE_COLOR
from benchdash.common.utils import index_by, lookup, missing_last

__all__ = [
    "build_chart_config",
    "build_pareto_curves",
    "get_hardware_logo_url",
    "get_model_logo_url",
    "get_recent_submissions",
    "get_runs_for_submission",
]

_HARDWARE_LOGOS: dict[str, tuple[str, str]] = {
    "nvidia": ("/logos/logo-nvidia.svg", "/logos/logo-nvidia-dark.svg"),
    "amd": ("/logos/logo-amd.svg", "/logos/logo-amd-dark.svg"),
}


def get_runs_for_submission(
    submission_id: str, runs: list[dict[str, Any]]
) -> list[dict[str, Any]]:
    """Return the runs of one submission sorted by ascending concurrency."""
    matching = [copy.deepcopy(r) for r in runs if r.get("submission_id") == submission_id]
    return sorted(matching, key=lambda r: missing_last(r.get("concurrency")))


def build_pareto_curves(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Build one pareto curve per submission.

    Each curve joins its submission with the system (``systems[].id``), the
    model (``models[].model_id``) and its runs. Missing references are
    tolerated: the curve falls back to the submission id as its name and the
    default color, with ``system``/``model`` set to None.

    Args:
        data: Endpoints benchmark data with systems, models, submissions, runs

    Returns:
        Curves as ``{id, systemId, name, color, system, model, runs}``, in
        submission order.
    """
    systems = index_by(data.get("systems", []), "id")
    models = index_by(data.get("models", []), "model_id")
    runs = data.get("runs", [])

    curves = []
    for submission in data.get("submissions", []):
        submission_id = submission.get("submission_id")
        system = lookup(systems, submission.get("system_id"))
        model = lookup(models, submission.get("model_id"))

        curves.append(
            {
                "id": submission_id,
                "systemId": submission.get("system_id"),
                "name": (system or {}).get("system_name") or submission_id,
                "color": (system or {}).get("color") or DEFAULT_CURVE_COLOR,
                "system": copy.deepcopy(system),
                "model": copy.deepcopy(model),
                "runs": get_runs_for_submission(submission_id, runs),
            }
        )
    return curves


def _submission_timestamp(submission: dict[str, Any]) -> float | None:
    raw = submission.get("submission_date")
    if not isinstance(raw, str) or not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def get_recent_submissions(
    data: dict[str, Any], limit: int = 10
) -> list[dict[str, Any]]:
    """Return the ``limit`` most recent submissions, newest first.

    Ties keep their original order. Submissions without a parseable date sort
    after every dated one.
    """
    submissions = data.get("submissions", [])

    def sort_key(submission: dict[str, Any]) -> tuple[bool, float]:
        timestamp = _submission_timestamp(submission)
        return (timestamp is not None, timestamp or 0.0)

    ordered = sorted(submissions, key=sort_key, reverse=True)
    return copy.deepcopy(ordered[: max(limit, 0)])


def get_model_logo_url(
    submission: dict[str, Any], models: list[dict[str, Any]]
) -> str | None:
    model = next((m for m in models if m.get("model_id") == submission.get("model_id")), None)
    return model.get("logo_url") if model else None


def get_hardware_logo_url(submission: dict[str, Any], *, dark: bool = False) -> str | None:
    """Pick the vendor logo for a submission from its submitter organization."""
    org_name = str(submission.get("submitter_org_names") or "").lower()
    for vendor, (light_url, dark_url) in _HARDWARE_LOGOS.items():
        if vendor in org_name:
            return dark_url if dark else light_url
    return None


def build_chart_config(
    curves: list[dict[str, Any]],
    *,
    title: str,
    subtitle: str,
    x_label: str,
    y_label: str,
    x_key: str,
    y_key: str,
    subline: str | None = None,
    x_scale: str = "log",
    y_scale: str = "linear",
) -> dict[str, Any]:
    """Build a chart config from pareto curves.

    Args:
        curves: Curves from build_pareto_curves, already filtered for display
        title: Chart title
        subtitle: Chart subtitle
        x_label: X-axis label
        y_label: Y-axis label
        x_key: Run field plotted on X (e.g. "tps_per_user", "concurrency")
        y_key: Run field plotted on Y (e.g. "system_tps", "utilization")
        subline: Optional extra line under the subtitle
        x_scale: X scale type
        y_scale: Y scale type

    Returns:
        Chart config whose ``models`` hold one point list per curve, each point
        carrying its run and curve metadata under ``meta``.
    """
    models = [
        {
            "id": curve["id"],
            "name": curve["name"],
            "color": curve["color"],
            "points": [
                {
                    "x": run.get(x_key),
                    "y": run.get(y_key),
                    "meta": {
                        "systemId": curve.get("systemId"),
                        "runId": run.get("run_id"),
                        "system": curve.get("system"),
                        "model": curve.get("model"),
                        **run,
                    },
                }
                for run in curve.get("runs", [])
            ],
        }
        for curve in curves
    ]

    config: dict[str, Any] = {"title": title, "subtitle": subtitle}
    if subline:
        config["subline"] = subline
    config.update(
        {
            "xLabel": x_label,
            "yLabel": y_label,
            "xScale": x_scale,
            "yScale": y_scale,
            "models": models,
        }
    )
    return config
