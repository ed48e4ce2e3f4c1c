# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for GET /api/benchmarks and GET /healthz."""

import orjson
from fastapi.testclient import TestClient

from benchdash.benchmarks.models import BenchmarkChartData
from benchdash.benchmarks.service import get_benchmark_data
from benchdash.server import create_app
from benchdash.store import ResourceStore

VALID_PARAMS = {
    "model": "gpt-oss-120b",
    "islOsl": "1k/1k",
    "precision": "FP4",
    "yAxisMetric": "token-throughput-per-gpu",
}


class TestBenchmarksRoute:
    def test_valid_filters(self, client: TestClient) -> None:
        response = client.get("/api/benchmarks", params=VALID_PARAMS)

        assert response.status_code == 200
        expected = orjson.loads(orjson.dumps(get_benchmark_data(VALID_PARAMS)))
        assert response.json() == expected

    def test_same_filters_give_same_data(self, client: TestClient) -> None:
        first = client.get("/api/benchmarks", params=VALID_PARAMS).json()
        second = client.get("/api/benchmarks", params=VALID_PARAMS).json()

        assert first == second

    def test_body_fits_response_model(self, client: TestClient) -> None:
        body = client.get("/api/benchmarks", params=VALID_PARAMS).json()

        parsed = BenchmarkChartData.model_validate(body)
        assert len(parsed.latencyChart.models) == len(body["latencyChart"]["models"])
        assert set(body) == {"latencyChart", "interactivityChart", "gpuReliabilityChart"}

    def test_unsupported_value(self, client: TestClient) -> None:
        response = client.get("/api/benchmarks", params={**VALID_PARAMS, "precision": "FP16"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid filter parameters"
        assert [issue["path"] for issue in body["issues"]] == ["precision"]

    def test_missing_filters_report_one_issue_each(self, client: TestClient) -> None:
        response = client.get("/api/benchmarks")

        assert response.status_code == 400
        paths = sorted(issue["path"] for issue in response.json()["issues"])
        assert paths == ["islOsl", "model", "precision", "yAxisMetric"]

    def test_extra_params_ignored(self, client: TestClient) -> None:
        response = client.get("/api/benchmarks", params={**VALID_PARAMS, "page": "2"})

        assert response.status_code == 200

    def test_shadows_seed_resource_of_same_name(self) -> None:
        store = ResourceStore.from_data({"benchmarks": [{"id": "b-1"}]})
        with TestClient(create_app(store)) as test_client:
            response = test_client.get("/api/benchmarks")

        assert response.status_code == 400
        assert "issues" in response.json()


class TestHealthz:
    def test_reports_resource_count(self, client: TestClient) -> None:
        response = client.get("/healthz")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "resources": 3}
