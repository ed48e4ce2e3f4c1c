# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Joins and transforms that turn seed records into chart-ready series."""

from benchdash.benchmarks.endpoints import (
    build_chart_config,
    build_pareto_curves,
    get_hardware_logo_url,
    get_model_logo_url,
    get_recent_submissions,
    get_runs_for_submission,
)
from benchdash.benchmarks.models import (
    DEFAULT_CURVE_COLOR,
    BenchmarkChartData,
    Model,
    ParetoCurve,
    ParetoView,
    Run,
    Submission,
    System,
    validate_entities,
)
from benchdash.benchmarks.pareto import (
    DEFAULT_VIEW_MODES,
    PARETO_VIEWS,
    TRADEOFF_VIEW,
    generate_tradeoff_view,
    get_annotations_for_view,
    get_global_max_throughput,
    normalize_to_global_max,
    parse_pareto_data,
    transform_for_view,
)
from benchdash.benchmarks.placeholders import generate_chart_data, get_gpu_benchmark_table
from benchdash.benchmarks.service import (
    BenchmarkFilters,
    build_endpoint_url,
    get_benchmark_data,
    simulate_api_request,
    validate_filters,
)
from benchdash.benchmarks.systems import (
    SYSTEM_COLOR_PALETTE,
    calculate_normalized_throughput,
    get_system_color,
    parse_system_data,
    prepare_normalized_throughput_data,
    prepare_normalized_ttft_data,
    prepare_throughput_interactivity_data,
    prepare_ttft_chart_data,
)

__all__ = [
    "DEFAULT_CURVE_COLOR",
    "DEFAULT_VIEW_MODES",
    "PARETO_VIEWS",
    "SYSTEM_COLOR_PALETTE",
    "TRADEOFF_VIEW",
    "BenchmarkChartData",
    "BenchmarkFilters",
    "Model",
    "ParetoCurve",
    "ParetoView",
    "Run",
    "Submission",
    "System",
    "build_chart_config",
    "build_endpoint_url",
    "build_pareto_curves",
    "calculate_normalized_throughput",
    "generate_chart_data",
    "generate_tradeoff_view",
    "get_annotations_for_view",
    "get_benchmark_data",
    "get_gpu_benchmark_table",
    "get_global_max_throughput",
    "get_hardware_logo_url",
    "get_model_logo_url",
    "get_recent_submissions",
    "get_runs_for_submission",
    "get_system_color",
    "normalize_to_global_max",
    "parse_pareto_data",
    "parse_system_data",
    "prepare_normalized_throughput_data",
    "prepare_normalized_ttft_data",
    "prepare_throughput_interactivity_data",
    "prepare_ttft_chart_data",
    "simulate_api_request",
    "transform_for_view",
    "validate_entities",
    "validate_filters",
]
