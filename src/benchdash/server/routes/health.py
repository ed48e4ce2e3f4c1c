# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Annotated, Any

from fastapi import APIRouter, Depends

from benchdash.server.dependencies import get_store
from benchdash.store import ResourceStore

router = APIRouter()


@router.get("/healthz")
def healthz(store: Annotated[ResourceStore, Depends(get_store)]) -> dict[str, Any]:
    return {"status": "ok", "resources": len(store.resources)}
