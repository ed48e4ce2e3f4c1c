# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for seed document loading and validation."""

from pathlib import Path
from typing import Any

import orjson
import pytest
from pytest import param

from benchdash.common.exceptions import SeedLoadError, SeedValidationError
from benchdash.store.seed import (
    CollectionResource,
    SingletonResource,
    check_references,
    load_seed_document,
    validate_seed_data,
)

_REPO_SEED = Path(__file__).resolve().parents[3] / "static" / "db.json"


class TestValidateSeedData:
    """Tests for validate_seed_data()."""

    def test_builds_tagged_resources(self, widgets_seed: dict[str, Any]) -> None:
        document = validate_seed_data(widgets_seed)

        assert list(document.resources) == ["widgets", "vendorColors", "paretoViewModes"]
        assert isinstance(document.resources["widgets"], CollectionResource)
        assert isinstance(document.resources["vendorColors"], SingletonResource)
        assert document.resources["widgets"].kind == "collection"
        assert document.resources["vendorColors"].kind == "singleton"

    def test_custom_singleton_names(self) -> None:
        document = validate_seed_data({"settings": {"theme": "dark"}}, ["settings"])

        assert isinstance(document.resources["settings"], SingletonResource)
        assert document.singleton_resources == frozenset({"settings"})

    def test_top_level_must_be_object(self) -> None:
        with pytest.raises(SeedValidationError, match="must be a JSON object"):
            validate_seed_data([1, 2, 3])

    @pytest.mark.parametrize(
        "data, fragment",
        [
            param({"vendorColors": []}, "singleton resource must be an object", id="singleton-array"),
            param({"widgets": {"id": 1}}, "collection resource must be an array", id="collection-object"),
            param({"widgets": [1]}, "record must be an object", id="scalar-record"),
            param({"widgets": [{"n": 1}]}, "record has no 'id' field", id="no-id"),
            param({"widgets": [{"id": True}]}, "'id' must be a string or integer", id="bool-id"),
            param({"widgets": [{"id": [1]}]}, "'id' must be a string or integer", id="list-id"),
            param({"widgets": [{"id": "a"}, {"id": "a"}]}, "duplicate ids a", id="duplicate-id"),
        ],
    )
    def test_shape_problems(self, data: dict[str, Any], fragment: str) -> None:
        with pytest.raises(SeedValidationError) as exc_info:
            validate_seed_data(data)

        assert any(fragment in problem for problem in exc_info.value.problems)

    def test_string_and_int_ids_collide(self) -> None:
        """Ids are compared as strings, so 1 and "1" are the same id."""
        with pytest.raises(SeedValidationError, match="duplicate ids 1"):
            validate_seed_data({"widgets": [{"id": 1}, {"id": "1"}]})

    def test_reports_every_problem(self) -> None:
        data = {
            "vendorColors": [],
            "widgets": [{"n": 1}, "oops"],
            "gadgets": {},
        }

        with pytest.raises(SeedValidationError) as exc_info:
            validate_seed_data(data)

        assert len(exc_info.value.problems) == 4

    def test_empty_collection_is_valid(self) -> None:
        document = validate_seed_data({"widgets": []})

        assert document.resources["widgets"].records == []

    def test_to_raw_is_a_copy(self, widgets_seed: dict[str, Any]) -> None:
        document = validate_seed_data(widgets_seed)

        raw = document.to_raw()
        raw["widgets"][0]["n"] = 999

        assert document.resources["widgets"].records[0]["n"] == 1


class TestLoadSeedDocument:
    """Tests for load_seed_document()."""

    def test_loads_json_file(self, tmp_path: Path, widgets_seed: dict[str, Any]) -> None:
        seed_file = tmp_path / "db.json"
        seed_file.write_bytes(orjson.dumps(widgets_seed))

        document = load_seed_document(seed_file)

        assert document.to_raw() == widgets_seed

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(SeedLoadError, match="Seed file not found"):
            load_seed_document(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        seed_file = tmp_path / "db.json"
        seed_file.write_text("{not json")

        with pytest.raises(SeedLoadError, match="Invalid JSON"):
            load_seed_document(seed_file)

    def test_shape_error_is_a_load_error(self, tmp_path: Path) -> None:
        seed_file = tmp_path / "db.json"
        seed_file.write_text('{"widgets": {}}')

        with pytest.raises(SeedLoadError):
            load_seed_document(seed_file)

    def test_bundled_seed_is_valid_and_consistent(self) -> None:
        document = load_seed_document(_REPO_SEED)

        assert check_references(document.to_raw()) == []
        assert isinstance(document.resources["paretoViewModes"], SingletonResource)


class TestCheckReferences:
    """Tests for check_references()."""

    def test_consistent_data_has_no_problems(self) -> None:
        data = {
            "systems": [{"id": "s1"}],
            "models": [{"id": "m", "model_id": "m1"}],
            "submissions": [{"id": "x", "submission_id": "x", "system_id": "s1", "model_id": "m1"}],
            "runs": [{"id": "r", "submission_id": "x", "concurrency": 1}],
        }

        assert check_references(data) == []

    def test_dangling_references(self, benchmark_seed: dict[str, Any]) -> None:
        problems = check_references(benchmark_seed)

        assert len(problems) == 2
        assert any("system_id='sys-missing'" in p for p in problems)
        assert any("model_id='model-missing'" in p for p in problems)

    def test_duplicate_concurrency(self) -> None:
        data = {
            "runs": [
                {"id": "r1", "submission_id": "x", "concurrency": 4},
                {"id": "r2", "submission_id": "x", "concurrency": 4},
            ]
        }

        problems = check_references(data)

        assert problems == ["submission 'x' has 2 runs at concurrency 4"]

    def test_unhashable_references_are_reported(self) -> None:
        """List-valued references and concurrencies are problems, not crashes."""
        data = {
            "models": [{"id": "m", "model_id": ["llama"]}, {"id": "n", "model_id": "m2"}],
            "submissions": [{"id": "x", "submission_id": "x", "model_id": ["llama"]}],
            "runs": [
                {"id": "r1", "submission_id": "x", "concurrency": [4]},
                {"id": "r2", "submission_id": "x", "concurrency": [4]},
            ],
        }

        problems = check_references(data)

        assert problems == [
            "submissions 'x': model_id=['llama'] is not a scalar reference",
        ]

    def test_absent_parent_collection_is_skipped(self) -> None:
        assert check_references({"runs": [{"id": "r", "submission_id": "nope"}]}) == []
