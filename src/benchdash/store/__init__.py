# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""In-memory resource store seeded from a JSON document."""

from benchdash.store.document import QueryResult, ResourceStore
from benchdash.store.query import (
    MISSING,
    RESERVED_PARAMS,
    ListQuery,
    get_nested_value,
)
from benchdash.store.seed import (
    CollectionResource,
    SeedDocument,
    SingletonResource,
    check_references,
    load_seed_document,
    validate_seed_data,
)

__all__ = [
    "MISSING",
    "RESERVED_PARAMS",
    "CollectionResource",
    "ListQuery",
    "QueryResult",
    "ResourceStore",
    "SeedDocument",
    "SingletonResource",
    "check_references",
    "get_nested_value",
    "load_seed_document",
    "validate_seed_data",
]
