# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the /api/charts routes over the bundled seed document."""

import pytest
from fastapi.testclient import TestClient
from pytest import param


class TestParetoCurves:
    def test_one_curve_per_submission(self, seeded_client: TestClient) -> None:
        response = seeded_client.get("/api/charts/pareto-curves")

        assert response.status_code == 200
        curves = response.json()
        assert [c["id"] for c in curves] == ["sub-001", "sub-002", "sub-003"]
        for curve in curves:
            concurrencies = [r["concurrency"] for r in curve["runs"]]
            assert concurrencies == sorted(concurrencies)
            assert curve["system"] is not None
            assert curve["model"] is not None

    def test_reflects_store_mutations(self, seeded_client: TestClient) -> None:
        seeded_client.delete("/api/submissions/sub-002")

        curves = seeded_client.get("/api/charts/pareto-curves").json()

        assert [c["id"] for c in curves] == ["sub-001", "sub-003"]


class TestRecentSubmissions:
    def test_newest_first(self, seeded_client: TestClient) -> None:
        response = seeded_client.get("/api/charts/recent-submissions")

        assert [s["submission_id"] for s in response.json()] == ["sub-003", "sub-001", "sub-002"]

    def test_limit(self, seeded_client: TestClient) -> None:
        response = seeded_client.get("/api/charts/recent-submissions", params={"limit": 1})

        assert [s["submission_id"] for s in response.json()] == ["sub-003"]


class TestParetoView:
    @pytest.mark.parametrize(
        "view, y_field",
        [
            param("throughput", "total_tput", id="throughput"),
            param("utilization", "util", id="utilization"),
            param("interactivity", "tps_usr", id="interactivity"),
        ],
    )
    def test_standard_views(self, seeded_client: TestClient, view: str, y_field: str) -> None:
        response = seeded_client.get("/api/charts/pareto", params={"view": view})

        assert response.status_code == 200
        body = response.json()
        assert body["view"] == view
        assert body["viewModes"][view]["yField"] == y_field
        assert [s["id"] for s in body["series"]] == ["hw-001", "hw-002", "hw-003"]
        for series in body["series"]:
            for point in series["points"]:
                assert point["x"] == point["original"]["concurrent_clients"]
                assert point["y"] == point["original"][y_field]

    def test_default_view_is_throughput(self, seeded_client: TestClient) -> None:
        body = seeded_client.get("/api/charts/pareto").json()

        assert body["view"] == "throughput"
        assert [a["id"] for a in body["annotations"]] == ["ann-001"]

    def test_vendor_names_joined(self, seeded_client: TestClient) -> None:
        body = seeded_client.get("/api/charts/pareto").json()

        assert [s["vendor"] for s in body["series"]] == ["NVIDIA", "NVIDIA", "AMD"]

    def test_tradeoff_highest_interactivity_first(self, seeded_client: TestClient) -> None:
        body = seeded_client.get("/api/charts/pareto", params={"view": "tradeoff"}).json()

        b200 = body["series"][0]
        assert [p["x"] for p in b200["points"]] == [355.0, 112.0, 45.5]
        assert [p["y"] for p in b200["points"]] == [355, 7168, 11648]
        assert body["annotations"] == []

    def test_normalized_utilization(self, seeded_client: TestClient) -> None:
        body = seeded_client.get(
            "/api/charts/pareto", params={"view": "utilization", "normalize": "true"}
        ).json()

        h200 = body["series"][1]
        assert [p["y"] for p in h200["points"]] == pytest.approx(
            [960 / 11648 * 100, 5120 / 11648 * 100]
        )

    def test_unknown_view(self, seeded_client: TestClient) -> None:
        response = seeded_client.get("/api/charts/pareto", params={"view": "latency"})

        assert response.status_code == 400
        assert response.json()["error"].startswith("Unknown view mode: latency")


class TestGpuBenchmarks:
    def test_columns_and_rows(self, seeded_client: TestClient) -> None:
        body = seeded_client.get("/api/charts/gpu-benchmarks").json()

        assert [c["key"] for c in body["columns"]] == [
            "name",
            "throughput",
            "latency",
            "sparkline",
            "action",
        ]
        assert len(body["rows"]) == 6
        assert body["rows"][0]["id"] == "b200-trt"
        assert all(len(row["sparklineData"]) == 9 for row in body["rows"])


class TestParameterErrors:
    @pytest.mark.parametrize(
        "path, params, field",
        [
            param("/api/charts/recent-submissions", {"limit": -1}, "limit", id="negative-limit"),
            param("/api/charts/recent-submissions", {"limit": "ten"}, "limit", id="non-int-limit"),
            param("/api/charts/pareto", {"normalize": "maybe"}, "normalize", id="bad-bool"),
        ],
    )
    def test_reported_as_400_error(
        self, seeded_client: TestClient, path: str, params: dict, field: str
    ) -> None:
        response = seeded_client.get(path, params=params)

        assert response.status_code == 400
        body = response.json()
        assert list(body) == ["error"]
        assert body["error"].startswith("Invalid request parameters: ")
        assert f"query.{field}" in body["error"]


class TestLooselyTypedRecords:
    """Chart routes keep working on whatever JSON the CRUD routes accepted."""

    def test_string_and_junk_concurrency(self, seeded_client: TestClient) -> None:
        for concurrency in ("16", "lots"):
            created = seeded_client.post(
                "/api/runs", json={"submission_id": "sub-001", "concurrency": concurrency}
            )
            assert created.status_code == 201

        response = seeded_client.get("/api/charts/pareto-curves")

        assert response.status_code == 200
        runs = response.json()[0]["runs"]
        assert [r["concurrency"] for r in runs] == [4, "16", 64, 256, "lots"]

    def test_unresolvable_references(self, seeded_client: TestClient) -> None:
        seeded_client.post(
            "/api/submissions",
            json={
                "submission_id": "sub-x",
                "system_id": ["sys-001"],
                "model_id": {"id": "gpt-oss-120b"},
                "submission_date": 20250101,
                "submitter_org_names": ["NVIDIA"],
            },
        )

        curves = seeded_client.get("/api/charts/pareto-curves")
        recent = seeded_client.get("/api/charts/recent-submissions")

        assert curves.status_code == 200
        unresolved = curves.json()[-1]
        assert unresolved["name"] == "sub-x"
        assert unresolved["system"] is None
        assert unresolved["model"] is None
        assert unresolved["color"] == "#535869"
        assert recent.status_code == 200
        assert recent.json()[-1]["submission_id"] == "sub-x"

    def test_unhashable_id_rejected_at_create(self, seeded_client: TestClient) -> None:
        response = seeded_client.post("/api/systems", json={"id": ["sys-001"]})

        assert response.status_code == 400
        assert seeded_client.get("/api/charts/pareto-curves").status_code == 200

    @pytest.mark.parametrize(
        "view, normalize",
        [
            param("throughput", "false", id="throughput"),
            param("utilization", "true", id="utilization-normalized"),
            param("interactivity", "false", id="interactivity"),
            param("tradeoff", "true", id="tradeoff-normalized"),
        ],
    )
    def test_pareto_views_with_odd_values(
        self, seeded_client: TestClient, view: str, normalize: str
    ) -> None:
        seeded_client.post(
            "/api/paretoHardwareConfigs",
            json={"id": "hw-odd", "label": "Odd", "vendorId": 7, "maxThroughput": "20000"},
        )
        for point in (
            {"hardwareConfigId": "hw-odd", "concurrentClients": "8", "totalThroughput": "900"},
            {"hardwareConfigId": "hw-odd", "concurrentClients": None, "tokensPerSecondPerUser": "x"},
            {"hardwareConfigId": ["hw-001"], "concurrentClients": 2},
        ):
            seeded_client.post("/api/paretoPoints", json=point)
        seeded_client.post(
            "/api/paretoAnnotations", json={"viewMode": ["throughput"], "text": "lost"}
        )

        response = seeded_client.get(
            "/api/charts/pareto", params={"view": view, "normalize": normalize}
        )

        assert response.status_code == 200
        body = response.json()
        odd = body["series"][-1]
        assert odd["id"] == "hw-odd"
        assert odd["vendor"] == "7"
        assert len(odd["points"]) == 2
        assert [s["id"] for s in body["series"][:3]] == ["hw-001", "hw-002", "hw-003"]
        assert all(len(s["points"]) == n for s, n in zip(body["series"], (3, 2, 2)))
