# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for benchmark entities and chart-ready responses.

Entity models describe the seed-document records the join layer reads. They
allow extra fields, since submissions and runs carry more display metadata
than the dashboard models.
"""

from typing import Any

from pydantic import Field, ValidationError

from benchdash.common.models.base_models import BenchDashRecordModel

# Fallback color for curves whose system cannot be resolved.
DEFAULT_CURVE_COLOR = "#535869"


class System(BenchDashRecordModel):
    """A hardware configuration that submitted benchmark results."""

    id: str | int = Field(description="Unique system identifier")
    system_name: str | None = Field(default=None, description="Display name")
    organization: str | None = Field(
        default=None, description="Vendor or submitting organization"
    )
    accelerator: str | None = Field(default=None, description="Accelerator model")
    chips: int | None = Field(default=None, description="Number of accelerator chips")
    normalizing_factor: float | None = Field(
        default=None, description="Per-chip throughput divisor for cross-system comparison"
    )
    color: str | None = Field(default=None, description="Series color")


class Model(BenchDashRecordModel):
    """An ML model that was benchmarked."""

    model_id: str = Field(description="Model identifier referenced by submissions")
    name: str | None = Field(default=None, description="Display name")
    logo_url: str | None = Field(default=None, description="Logo shown next to the model")


class Submission(BenchDashRecordModel):
    """One system + model result set, the unit a pareto curve is built from."""

    submission_id: str = Field(description="Unique submission identifier")
    system_id: str = Field(description="Id of the submitting System")
    model_id: str = Field(description="model_id of the benchmarked Model")
    submitter_org_names: str | None = Field(default=None, description="Submitting org(s)")
    submission_date: str | None = Field(default=None, description="ISO submission date")


class Run(BenchDashRecordModel):
    """One measurement of a submission at a single concurrency level."""

    run_id: str | None = Field(default=None, description="Run identifier")
    submission_id: str = Field(description="Id of the owning Submission")
    concurrency: int = Field(description="Number of simultaneous client requests")
    ttft: float | None = Field(default=None, description="Time to first token")
    tps_per_user: float | None = Field(
        default=None, description="Interactivity in tokens/sec/user"
    )
    system_tps: float | None = Field(default=None, description="System throughput in tokens/sec")
    normalized_tps: float | None = Field(
        default=None, description="System throughput / chips / normalizing factor"
    )
    utilization: float | None = Field(default=None, description="Percent of max throughput")


class ParetoCurve(BenchDashRecordModel):
    """Runs of one submission ordered by ascending concurrency, with display metadata.

    Values are copied from stored records as they are, and the CRUD routes accept
    any JSON there, so the joined fields are typed loosely. Use
    ``validate_entities`` to check the records themselves.
    """

    id: Any = Field(description="submission_id of the curve's submission")
    systemId: Any = Field(description="system_id of the submission")
    name: Any = Field(description="System name, or the submission id when unresolved")
    color: Any = DEFAULT_CURVE_COLOR
    system: dict[str, Any] | None = Field(default=None, description="Resolved System record")
    model: dict[str, Any] | None = Field(default=None, description="Resolved Model record")
    runs: list[dict[str, Any]] = Field(default_factory=list)


class ChartPoint(BenchDashRecordModel):
    x: float
    y: float


class ChartSeries(BenchDashRecordModel):
    id: str
    name: str
    color: str
    points: list[ChartPoint]


class LineChart(BenchDashRecordModel):
    title: str
    subtitle: str
    xLabel: str
    yLabel: str
    models: list[ChartSeries]


class ReliabilityEntry(BenchDashRecordModel):
    id: str
    name: str
    color: str
    value: float


class ReliabilityChart(BenchDashRecordModel):
    title: str
    subtitle: str
    xLabel: str
    yLabel: str
    data: list[ReliabilityEntry]


class BenchmarkChartData(BenchDashRecordModel):
    """Response body of the benchmark chart-data endpoint."""

    latencyChart: LineChart
    interactivityChart: LineChart
    gpuReliabilityChart: ReliabilityChart


class ParetoView(BenchDashRecordModel):
    """Pareto series shaped for one view, with that view's annotations."""

    view: str
    series: list[dict[str, Any]]
    annotations: list[dict[str, Any]]
    viewModes: dict[str, dict[str, Any]]


# Seed collections validated against entity models, keyed by collection name.
_ENTITY_COLLECTIONS: dict[str, type[BenchDashRecordModel]] = {
    "systems": System,
    "models": Model,
    "submissions": Submission,
    "runs": Run,
}


def validate_entities(data: dict[str, Any]) -> list[str]:
    """Check benchmark entity collections against their models.

    Returns:
        One problem description per invalid field; empty when every record fits.
    """
    problems: list[str] = []
    for collection, model_cls in _ENTITY_COLLECTIONS.items():
        records = data.get(collection)
        if not isinstance(records, list):
            continue
        for index, record in enumerate(records):
            try:
                model_cls.model_validate(record)
            except ValidationError as e:
                for error in e.errors():
                    loc = ".".join(str(p) for p in error["loc"]) or "<record>"
                    problems.append(f"{collection}[{index}].{loc}: {error['msg']}")
    return problems
