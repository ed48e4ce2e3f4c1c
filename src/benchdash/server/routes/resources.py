# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Generic mock-REST CRUD over every resource in the store.

Collections support listing with filters (``field=value``, dot paths for
nested fields), ``_sort``/``_order`` and ``_page``/``_limit``; paginated
responses report the filtered total in ``X-Total-Count``. Singletons are
read-only and can only be fetched whole.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import ORJSONResponse

from benchdash.common.exceptions import (
    ResourceNotFoundError,
    SingletonResourceError,
    UnknownResourceError,
)
from benchdash.server.dependencies import get_store, read_json_object
from benchdash.store import ResourceStore

router = APIRouter(prefix="/api")

StoreDep = Annotated[ResourceStore, Depends(get_store)]

TOTAL_COUNT_HEADER = "X-Total-Count"


def _require_resource(store: ResourceStore, resource: str) -> None:
    if not store.is_valid_resource(resource):
        raise UnknownResourceError(resource)


def _require_collection(store: ResourceStore, resource: str, action: str) -> None:
    _require_resource(store, resource)
    if store.is_singleton(resource):
        raise SingletonResourceError(resource, action)


@router.get("/{resource}")
def list_resource(resource: str, request: Request, store: StoreDep) -> ORJSONResponse:
    _require_resource(store, resource)
    params = request.query_params.multi_items()
    result = store.get_all(resource, params or None)
    if result is None:
        raise UnknownResourceError(resource)

    headers = {}
    if result.total is not None:
        headers[TOTAL_COUNT_HEADER] = str(result.total)
    return ORJSONResponse(content=result.data, headers=headers)


@router.post("/{resource}", status_code=status.HTTP_201_CREATED)
async def create_record(resource: str, request: Request, store: StoreDep) -> dict[str, Any]:
    _require_collection(store, resource, "POST to")
    body = await read_json_object(request)
    created = store.create(resource, body)
    if created is None:
        raise UnknownResourceError(resource)
    return created


@router.get("/{resource}/{record_id}")
def read_record(resource: str, record_id: str, store: StoreDep) -> dict[str, Any]:
    _require_resource(store, resource)
    if store.is_singleton(resource):
        raise SingletonResourceError.for_id_access(resource)
    record = store.get_by_id(resource, record_id)
    if record is None:
        raise ResourceNotFoundError(resource, record_id)
    return record


@router.put("/{resource}/{record_id}")
async def replace_record(
    resource: str, record_id: str, request: Request, store: StoreDep
) -> dict[str, Any]:
    _require_collection(store, resource, "PUT")
    body = await read_json_object(request)
    replaced = store.replace(resource, record_id, body)
    if replaced is None:
        raise ResourceNotFoundError(resource, record_id)
    return replaced


@router.patch("/{resource}/{record_id}")
async def update_record(
    resource: str, record_id: str, request: Request, store: StoreDep
) -> dict[str, Any]:
    _require_collection(store, resource, "PATCH")
    body = await read_json_object(request)
    updated = store.update(resource, record_id, body)
    if updated is None:
        raise ResourceNotFoundError(resource, record_id)
    return updated


@router.delete("/{resource}/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_record(resource: str, record_id: str, store: StoreDep) -> Response:
    _require_collection(store, resource, "DELETE")
    if not store.remove(resource, record_id):
        raise ResourceNotFoundError(resource, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
