# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from benchdash.server import create_app
from benchdash.store import ResourceStore

if TYPE_CHECKING:
    from collections.abc import Generator

_REPO_SEED = Path(__file__).resolve().parents[3] / "static" / "db.json"


@pytest.fixture
def client(widgets_store: ResourceStore) -> Generator[TestClient, None, None]:
    """Client for an app around the small widgets store."""
    with TestClient(create_app(widgets_store)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client() -> Generator[TestClient, None, None]:
    """Client for an app around the bundled seed document."""
    store = ResourceStore.from_seed_file(_REPO_SEED)
    with TestClient(create_app(store)) as test_client:
        yield test_client
