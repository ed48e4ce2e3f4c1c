# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from benchdash.common.config import ServiceConfig
from benchdash.common.exceptions import (
    BenchDashError,
    FilterValidationError,
    MalformedInputError,
)
from benchdash.server.routes import benchmarks, charts, health, resources
from benchdash.store import ResourceStore

logger = logging.getLogger(__name__)

APP_TITLE = "benchdash"


async def _filter_validation_error_handler(
    request: Request, exc: FilterValidationError
) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message, "issues": exc.issues},
    )


async def _benchdash_error_handler(request: Request, exc: BenchDashError) -> ORJSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return ORJSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    """Report unparseable path or query parameters as a 400 like every other bad input."""
    details = []
    for detail in exc.errors():
        loc = ".".join(str(part) for part in detail.get("loc", ()))
        details.append(f"{loc}: {detail.get('msg')}" if loc else str(detail.get("msg")))
    error = MalformedInputError(f"Invalid request parameters: {'; '.join(details)}")
    return await _benchdash_error_handler(request, error)


def create_app(
    store: ResourceStore, service_config: ServiceConfig | None = None
) -> FastAPI:
    """Build the dashboard API around a store.

    Benchmark and chart routes are registered before the generic resource
    routes, so they take precedence over seed resources with the same name.
    """
    fastapi_app = FastAPI(title=APP_TITLE, default_response_class=ORJSONResponse)
    fastapi_app.state.store = store
    fastapi_app.state.service_config = service_config or ServiceConfig()

    fastapi_app.add_exception_handler(
        FilterValidationError, _filter_validation_error_handler
    )
    fastapi_app.add_exception_handler(BenchDashError, _benchdash_error_handler)
    fastapi_app.add_exception_handler(
        RequestValidationError, _request_validation_error_handler
    )

    fastapi_app.include_router(health.router)
    fastapi_app.include_router(benchmarks.router)
    fastapi_app.include_router(charts.router)
    fastapi_app.include_router(resources.router)

    logger.debug(
        f"Created app serving {len(store.resources)} resources: {', '.join(store.resources)}"
    )
    return fastapi_app
