# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Synthetic chart data for the benchmark dashboard.

Every value produced here is placeholder data. It is deterministic: the same
filters always produce the same points, because the noise comes from a small
linear congruential generator seeded by a hash of the filter values. The
arithmetic (32-bit string hash, half-up rounding) matches the dashboard front
end so both sides agree on the numbers.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "ALL_GPU_CONFIGS",
    "GPU_BENCHMARK_COLUMNS",
    "GPU_COLORS",
    "GPU_INFERENCE_BENCHMARKS",
    "GPU_NAMES",
    "MODEL_NAMES",
    "Y_AXIS_LABELS",
    "generate_chart_data",
    "generate_gpu_reliability_data",
    "generate_interactivity_points",
    "generate_latency_points",
    "generate_seed",
    "get_gpu_benchmark_table",
    "seeded_random",
]

DEFAULT_COLOR = "#64748b"
DEFAULT_Y_LABEL = "Token Throughput per GPU (toks/s/gpu)"

ALL_GPU_CONFIGS: tuple[str, ...] = (
    "h100-vllm",
    "h200-vllm",
    "h200-trt",
    "b200-trt",
    "b200-vllm",
    "ml300x-vllm",
    "ml325x-vllm",
    "ml355-vllm",
)

GPU_COLORS: dict[str, str] = {
    "h100-vllm": "#22c55e",
    "h200-vllm": "#3b82f6",
    "h200-trt": "#f59e0b",
    "b200-trt": "#ec4899",
    "b200-vllm": "#8b5cf6",
    "ml300x-vllm": "#06b6d4",
    "ml325x-vllm": "#ef4444",
    "ml355-vllm": "#84cc16",
}

GPU_NAMES: dict[str, str] = {
    "h100-vllm": "H100 (vLLM)",
    "h200-vllm": "H200 (vLLM)",
    "h200-trt": "H200 (TRT)",
    "b200-trt": "B200 (TRT)",
    "b200-vllm": "B200 (vLLM)",
    "ml300x-vllm": "ML300X (vLLM)",
    "ml325x-vllm": "ML325X (vLLM)",
    "ml355-vllm": "ML355 (vLLM)",
}

MODEL_NAMES: dict[str, str] = {
    "gpt-oss-120b": "gpt-oss 120B",
    "deepseek-r1-0528": "DeepSeek R1 0528",
    "llama-3.3-70b": "Llama 3.3 70B Instruct",
}

_COST_LABEL = "Cost per Million Tokens ($)"

Y_AXIS_LABELS: dict[str, str] = {
    "token-throughput-per-gpu": "Token Throughput per GPU (toks/s/gpu)",
    "input-token-throughput-per-gpu": "Input Token Throughput per GPU (toks/s/gpu)",
    "output-token-throughput-per-gpu": "Output Token Throughput per GPU (toks/s/gpu)",
    "token-throughput-per-mw": "Token Throughput per All in Utility (toks/s/MW)",
    "cost-per-million-owning-hyperscaler": _COST_LABEL,
    "cost-per-million-owning-neocloud": _COST_LABEL,
    "cost-per-million-3yr-rental": _COST_LABEL,
    "cost-per-million-customer-values": _COST_LABEL,
}


@dataclass(frozen=True, slots=True)
class _IslOslShape:
    scale: float = 1.0
    x_shift: float = 0.0
    curve_shape: float = 1.0


@dataclass(frozen=True, slots=True)
class _MetricTransform:
    base_multiplier: float = 1.0
    is_inverted: bool = False
    noise_level: float = 0.05


# Larger models run slower; the smaller Llama runs faster.
_MODEL_MULTIPLIERS: dict[str, float] = {
    "gpt-oss-120b": 1.0,
    "deepseek-r1-0528": 0.85,
    "llama-3.3-70b": 1.25,
}

_ISL_OSL_SHAPES: dict[str, _IslOslShape] = {
    "1k/1k": _IslOslShape(1.0, 0, 1.0),
    "1k/8k": _IslOslShape(0.7, 20, 0.85),
    "8k/1k": _IslOslShape(0.85, -10, 1.15),
}

_PRECISION_MULTIPLIERS: dict[str, float] = {
    "FP4": 1.2,
    "FP8": 1.0,
}

# Cost metrics are inverted: lower is better, so the curve is flipped.
_METRIC_TRANSFORMS: dict[str, _MetricTransform] = {
    "token-throughput-per-gpu": _MetricTransform(1.0, False, 0.05),
    "input-token-throughput-per-gpu": _MetricTransform(1.15, False, 0.08),
    "output-token-throughput-per-gpu": _MetricTransform(0.9, False, 0.06),
    "token-throughput-per-mw": _MetricTransform(0.012, False, 0.1),
    "cost-per-million-owning-hyperscaler": _MetricTransform(0.015, True, 0.12),
    "cost-per-million-owning-neocloud": _MetricTransform(0.012, True, 0.1),
    "cost-per-million-3yr-rental": _MetricTransform(0.018, True, 0.15),
    "cost-per-million-customer-values": _MetricTransform(0.022, True, 0.08),
}

_GPU_MULTIPLIERS: dict[str, float] = {
    "h100-vllm": 1.0,
    "h200-vllm": 1.3,
    "h200-trt": 1.45,
    "b200-trt": 1.7,
    "b200-vllm": 1.55,
    "ml300x-vllm": 1.2,
    "ml325x-vllm": 1.35,
    "ml355-vllm": 1.5,
}

# Newer GPUs fail less often.
_BASE_FAILURE_RATES: dict[str, float] = {
    "h100-vllm": 8.5,
    "h200-vllm": 6.2,
    "h200-trt": 5.8,
    "b200-trt": 3.5,
    "b200-vllm": 4.2,
    "ml300x-vllm": 7.1,
    "ml325x-vllm": 5.5,
    "ml355-vllm": 4.8,
}

_LATENCY_BASE_POINTS: tuple[tuple[int, int], ...] = (
    (5, 800),
    (15, 1800),
    (30, 2900),
    (50, 4200),
    (75, 5100),
    (100, 5800),
    (130, 6300),
    (160, 6600),
    (185, 6800),
)

_INTERACTIVITY_BASE_POINTS: tuple[tuple[int, int], ...] = (
    (10, 1200),
    (25, 2400),
    (50, 3800),
    (75, 5000),
    (100, 5800),
    (150, 6800),
    (200, 7400),
    (250, 7800),
    (300, 8000),
)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def seeded_random(seed: int) -> Callable[[], float]:
    """Return a generator of floats in [0, 1) from a linear congruential sequence."""
    state = seed

    def next_value() -> float:
        nonlocal state
        state = (state * 9301 + 49297) % 233280
        return state / 233280

    return next_value


def generate_seed(
    model: str, isl_osl: str, precision: str, y_axis_metric: str, gpu_id: str
) -> int:
    """Hash the filter values into a non-negative 32-bit seed."""
    text = f"{model}-{isl_osl}-{precision}-{y_axis_metric}-{gpu_id}"
    value = 0
    for char in text:
        value = _to_int32(_to_int32(value << 5) - value + ord(char))
    return abs(value)


def _filter_values(filters: dict[str, str]) -> tuple[str, str, str, str]:
    return (
        filters["model"],
        filters["islOsl"],
        filters["precision"],
        filters["yAxisMetric"],
    )


def generate_latency_points(gpu_id: str, filters: dict[str, str]) -> list[dict[str, int]]:
    """Throughput vs. end-to-end latency points for one GPU configuration."""
    model, isl_osl, precision, y_axis_metric = _filter_values(filters)
    shape = _ISL_OSL_SHAPES.get(isl_osl, _IslOslShape())
    metric = _METRIC_TRANSFORMS.get(y_axis_metric, _MetricTransform())
    random = seeded_random(generate_seed(model, isl_osl, precision, y_axis_metric, gpu_id))

    combined = (
        _GPU_MULTIPLIERS.get(gpu_id, 1.0)
        * _MODEL_MULTIPLIERS.get(model, 1.0)
        * shape.scale
        * _PRECISION_MULTIPLIERS.get(precision, 1.0)
        * metric.base_multiplier
    )

    points = []
    count = len(_LATENCY_BASE_POINTS)
    for i, (x, y) in enumerate(_LATENCY_BASE_POINTS):
        curve_adjust = math.pow(i / count, shape.curve_shape)
        curved_y = y * (0.5 + 0.5 * curve_adjust * 2)
        noise = 1 + (random() - 0.5) * metric.noise_level * 2
        final_y = curved_y * combined * noise

        if metric.is_inverted:
            max_y = 12000 * combined
            final_y = max_y - final_y + 500 * combined

        points.append(
            {
                "x": max(1, _round_half_up(x + shape.x_shift)),
                "y": _round_half_up(max(100, final_y)),
            }
        )
    return points


def generate_interactivity_points(
    gpu_id: str, filters: dict[str, str]
) -> list[dict[str, int]]:
    """Throughput vs. interactivity points for one GPU configuration.

    Uses its own seed and a slightly different weighting than the latency
    curve so the two charts do not look identical.
    """
    model, isl_osl, precision, y_axis_metric = _filter_values(filters)
    shape = _ISL_OSL_SHAPES.get(isl_osl, _IslOslShape())
    metric = _METRIC_TRANSFORMS.get(y_axis_metric, _MetricTransform())
    random = seeded_random(
        generate_seed(model, isl_osl, precision, y_axis_metric, f"{gpu_id}-interactivity")
    )

    combined = (
        _GPU_MULTIPLIERS.get(gpu_id, 1.0)
        * _MODEL_MULTIPLIERS.get(model, 1.0)
        * math.pow(shape.scale, 0.8)
        * _PRECISION_MULTIPLIERS.get(precision, 1.0)
        * metric.base_multiplier
    )
    x_shift = shape.x_shift * 1.5

    points = []
    count = len(_INTERACTIVITY_BASE_POINTS)
    for i, (x, y) in enumerate(_INTERACTIVITY_BASE_POINTS):
        curve_adjust = math.pow((i + 1) / count, shape.curve_shape * 1.1)
        curved_y = y * (0.4 + 0.6 * curve_adjust * 1.8)
        noise = 1 + (random() - 0.5) * metric.noise_level * 2.5
        final_y = curved_y * combined * noise

        if metric.is_inverted:
            max_y = 10000 * combined
            final_y = max_y - final_y + 400 * combined

        points.append(
            {
                "x": max(5, _round_half_up(x + x_shift)),
                "y": _round_half_up(max(100, final_y)),
            }
        )
    return points


def generate_gpu_reliability_data(filters: dict[str, str]) -> list[dict[str, Any]]:
    """Failure rate percentage per GPU configuration, clamped to [0.5, 15]."""
    model, isl_osl, precision, y_axis_metric = _filter_values(filters)

    data = []
    for gpu_id in ALL_GPU_CONFIGS:
        random = seeded_random(
            generate_seed(model, isl_osl, precision, y_axis_metric, f"{gpu_id}-reliability")
        )
        base_rate = _BASE_FAILURE_RATES.get(gpu_id, 6.0)
        variation = (random() - 0.5) * 4
        final_rate = max(0.5, min(15, base_rate + variation))

        data.append(
            {
                "id": gpu_id,
                "name": GPU_NAMES.get(gpu_id, gpu_id),
                "color": GPU_COLORS.get(gpu_id, DEFAULT_COLOR),
                "value": _round_half_up(final_rate * 10) / 10,
            }
        )
    return data


def generate_chart_data(filters: dict[str, str]) -> dict[str, Any]:
    """Generate latency, interactivity and reliability chart data for the filters.

    Args:
        filters: ``model``, ``islOsl``, ``precision`` and ``yAxisMetric`` values

    Returns:
        ``{"latencyChart", "interactivityChart", "gpuReliabilityChart"}``, each
        covering every GPU configuration.
    """
    model, isl_osl, precision, y_axis_metric = _filter_values(filters)

    model_label = MODEL_NAMES.get(model, model)
    subtitle = f"{model_label} • {precision} • {isl_osl} • Source: SemiAnalysis InferenceMAX™"
    y_label = Y_AXIS_LABELS.get(y_axis_metric, DEFAULT_Y_LABEL)

    gpus = [
        {
            "id": gpu_id,
            "name": GPU_NAMES.get(gpu_id, gpu_id),
            "color": GPU_COLORS.get(gpu_id, DEFAULT_COLOR),
        }
        for gpu_id in ALL_GPU_CONFIGS
    ]

    return {
        "latencyChart": {
            "title": "Token Throughput per GPU vs. End-to-end Latency",
            "subtitle": subtitle,
            "xLabel": "End-to-end Latency (s)",
            "yLabel": y_label,
            "models": [
                {**gpu, "points": generate_latency_points(gpu["id"], filters)}
                for gpu in gpus
            ],
        },
        "interactivityChart": {
            "title": "Token Throughput per GPU vs. Interactivity",
            "subtitle": subtitle,
            "xLabel": "Interactivity (tok/s/user)",
            "yLabel": y_label,
            "models": [
                {**gpu, "points": generate_interactivity_points(gpu["id"], filters)}
                for gpu in gpus
            ],
        },
        "gpuReliabilityChart": {
            "title": "GPU Reliability",
            "subtitle": "For each GPU model, the failure rate percentage of completed runs.",
            "xLabel": "Hardware Model",
            "yLabel": "Failure Rate (%)",
            "data": generate_gpu_reliability_data(filters),
        },
    }


GPU_BENCHMARK_COLUMNS: tuple[dict[str, str], ...] = (
    {"key": "name", "label": "GPU Configuration", "type": "text"},
    {"key": "throughput", "label": "Throughput", "type": "metric"},
    {"key": "latency", "label": "Latency", "type": "metric"},
    {"key": "sparkline", "label": "Performance Trend", "type": "sparkline"},
    {"key": "action", "label": "Run Demo", "type": "action"},
)

GPU_INFERENCE_BENCHMARKS: tuple[dict[str, Any], ...] = (
    {
        "id": "b200-trt",
        "name": "B200 (TensorRT)",
        "metrics": {"throughput": "11,500 tok/s", "latency": "45ms", "efficiency": "98.2%"},
        "sparklineData": [45, 48, 52, 58, 67, 78, 88, 95, 98],
        "color": "#f97316",
    },
    {
        "id": "h200-trt",
        "name": "H200 (TensorRT)",
        "metrics": {"throughput": "9,900 tok/s", "latency": "52ms", "efficiency": "96.8%"},
        "sparklineData": [72, 78, 65, 58, 62, 74, 85, 92, 96],
        "color": "#22c55e",
    },
    {
        "id": "h200-vllm",
        "name": "H200 (vLLM)",
        "metrics": {"throughput": "9,000 tok/s", "latency": "58ms", "efficiency": "94.5%"},
        "sparklineData": [68, 70, 71, 70, 72, 78, 86, 91, 94],
        "color": "#3b82f6",
    },
    {
        "id": "b200-vllm",
        "name": "B200 (vLLM)",
        "metrics": {"throughput": "10,200 tok/s", "latency": "48ms", "efficiency": "97.1%"},
        "sparklineData": [55, 72, 64, 80, 75, 88, 82, 94, 97],
        "color": "#a855f7",
    },
    {
        "id": "ml355-vllm",
        "name": "ML355 (vLLM)",
        "metrics": {"throughput": "8,400 tok/s", "latency": "62ms", "efficiency": "92.3%"},
        "sparklineData": [45, 46, 62, 63, 64, 80, 81, 91, 92],
        "color": "#ec4899",
    },
    {
        "id": "h100-vllm",
        "name": "H100 (vLLM)",
        "metrics": {"throughput": "6,800 tok/s", "latency": "78ms", "efficiency": "89.7%"},
        "sparklineData": [75, 72, 68, 62, 58, 55, 68, 82, 89],
        "color": "#14b8a6",
    },
)


def get_gpu_benchmark_table() -> dict[str, Any]:
    """Columns and rows of the GPU inference sparkline table, as fresh copies."""
    return {
        "columns": copy.deepcopy(list(GPU_BENCHMARK_COLUMNS)),
        "rows": copy.deepcopy(list(GPU_INFERENCE_BENCHMARKS)),
    }
