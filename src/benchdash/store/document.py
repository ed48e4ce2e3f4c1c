# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""In-memory resource store with mock-REST CRUD semantics."""

from __future__ import annotations

import copy
import logging
import re
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from benchdash.common.config.service_config import DEFAULT_SINGLETON_RESOURCES
from benchdash.common.exceptions import MalformedInputError, SeedLoadError
from benchdash.store.query import (
    ListQuery,
    QueryParams,
    apply_filters,
    paginate,
    sort_records,
)
from benchdash.store.seed import (
    CollectionResource,
    SeedDocument,
    SingletonResource,
    check_references,
    is_scalar_id,
    load_seed_document,
    validate_seed_data,
)

logger = logging.getLogger(__name__)

__all__ = [
    "QueryResult",
    "ResourceStore",
]

_TRAILING_DIGITS = re.compile(r"\d+$")


@dataclass(slots=True)
class QueryResult:
    """Result of a collection or singleton read.

    Attributes:
        data: The page of records, the full filtered list, or a singleton object
        total: Filtered record count before pagination. Only set when the
            query asked for a page.
    """

    data: list[dict[str, Any]] | dict[str, Any]
    total: int | None = None


class ResourceStore:
    """Process-lifetime document store seeded from a JSON document.

    Resource names and the singleton/collection split are fixed at
    construction. Collections support create/replace/update/delete; singletons
    are read-only. Nothing is persisted: a new store starts from the seed again.

    A single lock serializes every operation, since the HTTP server runs
    handlers on a thread pool.
    """

    def __init__(self, document: SeedDocument | None = None) -> None:
        document = document or SeedDocument.empty()
        self._lock = threading.RLock()
        self._singleton_names = document.singleton_resources
        self._collections: dict[str, list[dict[str, Any]]] = {}
        self._singletons: dict[str, dict[str, Any]] = {}
        for name, resource in document.resources.items():
            if isinstance(resource, SingletonResource):
                self._singletons[name] = copy.deepcopy(resource.value)
            elif isinstance(resource, CollectionResource):
                self._collections[name] = copy.deepcopy(resource.records)
        self._resources: tuple[str, ...] = tuple(document.resources)

    @classmethod
    def from_data(
        cls,
        data: dict[str, Any],
        singleton_resources: Iterable[str] = DEFAULT_SINGLETON_RESOURCES,
    ) -> ResourceStore:
        """Build a store from an in-memory seed document.

        Raises:
            SeedValidationError: If the data does not have the declared shape.
        """
        return cls(validate_seed_data(data, singleton_resources))

    @classmethod
    def from_seed_file(
        cls,
        path: Path,
        singleton_resources: Iterable[str] = DEFAULT_SINGLETON_RESOURCES,
        *,
        check_refs: bool = True,
    ) -> ResourceStore:
        """Build a store from a seed file, degrading to an empty store on failure.

        A seed that cannot be loaded is logged once and leaves the store empty,
        so every resource then reports as unknown instead of the process dying.
        """
        singleton_resources = tuple(singleton_resources)
        try:
            document = load_seed_document(path, singleton_resources)
        except SeedLoadError:
            logger.exception(f"Failed to load seed document {path}")
            return cls(SeedDocument.empty(singleton_resources))

        logger.info(
            f"Loaded seed document {path} with {len(document.resources)} resources"
        )
        if check_refs:
            for problem in check_references(document.to_raw()):
                logger.warning(f"Seed reference problem: {problem}")
        return cls(document)

    @property
    def resources(self) -> list[str]:
        return list(self._resources)

    def is_valid_resource(self, resource: str) -> bool:
        return resource in self._resources

    def is_singleton(self, resource: str) -> bool:
        return resource in self._singleton_names

    def snapshot(self) -> dict[str, Any]:
        """Return a deep copy of the whole current document."""
        with self._lock:
            document: dict[str, Any] = {}
            for name in self._resources:
                if name in self._singletons:
                    document[name] = copy.deepcopy(self._singletons[name])
                else:
                    document[name] = copy.deepcopy(self._collections[name])
            return document

    def get_all(
        self, resource: str, query: QueryParams | ListQuery | None = None
    ) -> QueryResult | None:
        """Read a resource, optionally filtered, sorted, and paginated.

        Singletons are returned verbatim and ignore the query.

        Returns:
            The result, or None if the resource is unknown.
        """
        if not self.is_valid_resource(resource):
            return None

        with self._lock:
            if self.is_singleton(resource):
                singleton = self._singletons.get(resource)
                return None if singleton is None else QueryResult(copy.deepcopy(singleton))

            collection = self._collections.get(resource)
            if collection is None:
                return None
            result = list(collection)

            if query is None:
                return QueryResult(copy.deepcopy(result))

            if not isinstance(query, ListQuery):
                query = ListQuery.from_params(query)

            result = apply_filters(result, query.filters)
            if query.sort:
                result = sort_records(result, query.sort, descending=query.descending)

            if query.paginated:
                total = len(result)
                page = paginate(result, query.page, query.limit)
                return QueryResult(copy.deepcopy(page), total=total)

            return QueryResult(copy.deepcopy(result))

    def get_by_id(self, resource: str, record_id: str) -> dict[str, Any] | None:
        """Find a record by id, comparing the string form of each record's id."""
        with self._lock:
            index = self._find_index(resource, record_id)
            if index is None:
                return None
            return copy.deepcopy(self._collections[resource][index])

    def create(self, resource: str, record: dict[str, Any]) -> dict[str, Any] | None:
        """Append a record, generating an id when the record has none.

        Returns:
            The stored record, or None for unknown or singleton resources.

        Raises:
            MalformedInputError: If the record's own id is not a string or
                integer, or matches the id of an existing record.
        """
        collection = self._mutable_collection(resource)
        if collection is None:
            return None

        with self._lock:
            stored = copy.deepcopy(record)
            record_id = stored.get("id")
            if record_id in (None, ""):
                stored["id"] = self._generate_id(resource, collection)
            elif not is_scalar_id(record_id):
                raise MalformedInputError(
                    f"Invalid id {record_id!r}: must be a string or integer"
                )
            elif any(str(r.get("id")) == str(record_id) for r in collection):
                raise MalformedInputError(f"Duplicate id: {record_id}")
            collection.append(stored)
            logger.debug(f"Created {resource}/{stored['id']}")
            return copy.deepcopy(stored)

    def replace(
        self, resource: str, record_id: str, record: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Overwrite a record in full, keeping its original id."""
        with self._lock:
            index = self._find_index(resource, record_id)
            if index is None:
                return None
            collection = self._collections[resource]
            stored = copy.deepcopy(record)
            stored["id"] = collection[index]["id"]
            collection[index] = stored
            logger.debug(f"Replaced {resource}/{record_id}")
            return copy.deepcopy(stored)

    def update(
        self, resource: str, record_id: str, partial: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Shallow-merge fields into a record, keeping its original id."""
        with self._lock:
            index = self._find_index(resource, record_id)
            if index is None:
                return None
            collection = self._collections[resource]
            existing = collection[index]
            merged = {**existing, **copy.deepcopy(partial), "id": existing["id"]}
            collection[index] = merged
            logger.debug(f"Updated {resource}/{record_id}")
            return copy.deepcopy(merged)

    def remove(self, resource: str, record_id: str) -> bool:
        """Delete a record. Returns False for unknown, singleton, or missing records."""
        with self._lock:
            index = self._find_index(resource, record_id)
            if index is None:
                return False
            del self._collections[resource][index]
            logger.debug(f"Removed {resource}/{record_id}")
            return True

    def _mutable_collection(self, resource: str) -> list[dict[str, Any]] | None:
        if not self.is_valid_resource(resource) or self.is_singleton(resource):
            return None
        return self._collections.get(resource)

    def _find_index(self, resource: str, record_id: str) -> int | None:
        collection = self._mutable_collection(resource)
        if collection is None:
            return None
        for index, record in enumerate(collection):
            if str(record.get("id")) == str(record_id):
                return index
        return None

    @staticmethod
    def _generate_id(resource: str, collection: list[dict[str, Any]]) -> str:
        """Build ``<first three letters>-<NNN>`` one past the highest numeric suffix."""
        max_num = 0
        for record in collection:
            match = _TRAILING_DIGITS.search(str(record.get("id")))
            if match:
                max_num = max(max_num, int(match.group()))
        return f"{resource[:3]}-{max_num + 1:03d}"
