# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Seed document loading and validation.

The seed document is a JSON object whose top-level keys become resource names.
Keys listed as singletons must hold a single object; every other key must hold
a list of objects, each with a scalar ``id`` that is unique within its list.
"""

from __future__ import annotations

import copy
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import orjson

from benchdash.common.config.service_config import DEFAULT_SINGLETON_RESOURCES
from benchdash.common.exceptions import SeedLoadError, SeedValidationError
from benchdash.common.utils import is_hashable

__all__ = [
    "CollectionResource",
    "SeedDocument",
    "SingletonResource",
    "check_references",
    "is_scalar_id",
    "load_seed_document",
    "validate_seed_data",
]


@dataclass(slots=True)
class CollectionResource:
    """A resource holding an ordered list of records with unique ids."""

    kind: ClassVar[str] = "collection"

    name: str
    records: list[dict[str, Any]]


@dataclass(slots=True)
class SingletonResource:
    """A resource holding a single object. Never addressed by id or mutated."""

    kind: ClassVar[str] = "singleton"

    name: str
    value: dict[str, Any]


Resource = CollectionResource | SingletonResource


@dataclass(slots=True)
class SeedDocument:
    """A validated seed document.

    Attributes:
        resources: Resources by name, in seed-document key order
        singleton_resources: The fixed singleton-name list the document was
            validated against
    """

    resources: dict[str, Resource] = field(default_factory=dict)
    singleton_resources: frozenset[str] = frozenset(DEFAULT_SINGLETON_RESOURCES)

    @classmethod
    def empty(
        cls, singleton_resources: Iterable[str] = DEFAULT_SINGLETON_RESOURCES
    ) -> SeedDocument:
        return cls(resources={}, singleton_resources=frozenset(singleton_resources))

    def to_raw(self) -> dict[str, Any]:
        """Return a deep copy of the document as plain JSON-shaped data."""
        raw: dict[str, Any] = {}
        for name, resource in self.resources.items():
            if isinstance(resource, SingletonResource):
                raw[name] = copy.deepcopy(resource.value)
            else:
                raw[name] = copy.deepcopy(resource.records)
        return raw


def is_scalar_id(value: Any) -> bool:
    # bool is an int subclass but never a meaningful id
    return isinstance(value, str | int) and not isinstance(value, bool)


def validate_seed_data(
    data: Any, singleton_resources: Iterable[str] = DEFAULT_SINGLETON_RESOURCES
) -> SeedDocument:
    """Validate parsed seed data into a SeedDocument.

    Every problem is collected before raising, so a broken seed file can be
    fixed in one pass.

    Raises:
        SeedValidationError: If the data does not have the declared shape.
    """
    singletons = frozenset(singleton_resources)

    if not isinstance(data, dict):
        raise SeedValidationError(
            [f"Seed document must be a JSON object, got {type(data).__name__}"]
        )

    problems: list[str] = []
    resources: dict[str, Resource] = {}

    for name, value in data.items():
        if name in singletons:
            if not isinstance(value, dict):
                problems.append(
                    f"{name}: singleton resource must be an object, got {type(value).__name__}"
                )
                continue
            resources[name] = SingletonResource(name=name, value=value)
            continue

        if not isinstance(value, list):
            problems.append(
                f"{name}: collection resource must be an array, got {type(value).__name__}"
            )
            continue

        ids: list[str] = []
        for index, record in enumerate(value):
            if not isinstance(record, dict):
                problems.append(
                    f"{name}[{index}]: record must be an object, got {type(record).__name__}"
                )
                continue
            if "id" not in record:
                problems.append(f"{name}[{index}]: record has no 'id' field")
                continue
            if not is_scalar_id(record["id"]):
                problems.append(
                    f"{name}[{index}]: 'id' must be a string or integer, got {record['id']!r}"
                )
                continue
            ids.append(str(record["id"]))

        duplicates = sorted(i for i, count in Counter(ids).items() if count > 1)
        if duplicates:
            problems.append(f"{name}: duplicate ids {', '.join(duplicates)}")

        resources[name] = CollectionResource(name=name, records=value)

    if problems:
        raise SeedValidationError(problems)

    return SeedDocument(resources=resources, singleton_resources=singletons)


def load_seed_document(
    path: Path, singleton_resources: Iterable[str] = DEFAULT_SINGLETON_RESOURCES
) -> SeedDocument:
    """Read, parse, and validate a seed document from disk.

    Raises:
        SeedLoadError: If the file is missing, unreadable, or not valid JSON.
        SeedValidationError: If the JSON does not have the declared shape.
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = orjson.loads(f.read())
    except FileNotFoundError as e:
        raise SeedLoadError(f"Seed file not found: {path}") from e
    except OSError as e:
        raise SeedLoadError(f"Could not read seed file {path}: {e}") from e
    except orjson.JSONDecodeError as e:
        raise SeedLoadError(f"Invalid JSON in seed file {path}: {e}") from e

    return validate_seed_data(data, singleton_resources)


# (child collection, child key, parent collection, parent key)
_REFERENCES: tuple[tuple[str, str, str, str], ...] = (
    ("runs", "submission_id", "submissions", "submission_id"),
    ("submissions", "system_id", "systems", "id"),
    ("submissions", "model_id", "models", "model_id"),
    ("paretoPoints", "hardwareConfigId", "paretoHardwareConfigs", "id"),
    ("paretoCurves", "systemId", "systems", "id"),
    ("dataPoints", "paretoCurveId", "paretoCurves", "id"),
)


def check_references(data: dict[str, Any]) -> list[str]:
    """Report referential-integrity problems between benchmark entities.

    Only relationships whose both sides are present in the document are
    checked. Also reports submissions whose runs repeat a concurrency level,
    since a pareto curve needs strictly increasing concurrency.

    Returns:
        Human-readable problem descriptions; empty when the data is consistent.
    """
    problems: list[str] = []

    for child, child_key, parent, parent_key in _REFERENCES:
        children = data.get(child)
        parents = data.get(parent)
        if not isinstance(children, list) or not isinstance(parents, list):
            continue
        known = {
            p.get(parent_key)
            for p in parents
            if isinstance(p, dict) and is_hashable(p.get(parent_key))
        }
        for record in children:
            if not isinstance(record, dict):
                continue
            ref = record.get(child_key)
            if not is_hashable(ref):
                problems.append(
                    f"{child} {record.get('id')!r}: {child_key}={ref!r} "
                    f"is not a scalar reference"
                )
            elif ref not in known:
                problems.append(
                    f"{child} {record.get('id')!r}: {child_key}={ref!r} "
                    f"does not match any {parent}.{parent_key}"
                )

    runs = data.get("runs")
    if isinstance(runs, list):
        seen: Counter[tuple[Any, Any]] = Counter(
            (r.get("submission_id"), r.get("concurrency"))
            for r in runs
            if isinstance(r, dict)
            and is_hashable((r.get("submission_id"), r.get("concurrency")))
        )
        for (submission_id, concurrency), count in seen.items():
            if count > 1:
                problems.append(
                    f"submission {submission_id!r} has {count} runs at concurrency {concurrency!r}"
                )

    return problems
