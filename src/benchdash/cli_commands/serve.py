# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CLI command for running the benchdash API server."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

serve_app = App(name="serve")


@serve_app.default
def serve(
    service_config_file: Annotated[
        Path | None,
        Parameter(
            help="Path to the service configuration file (JSON or YAML). "
            "Falls back to BENCHDASH_CONFIG_SERVICE_FILE environment variable, "
            "then to default ServiceConfig if neither is set."
        ),
    ] = None,
    seed_file: Annotated[
        Path | None,
        Parameter(help="JSON seed document to load. Overrides the service config."),
    ] = None,
    host: Annotated[
        str | None, Parameter(help="Host to bind to. Overrides the service config.")
    ] = None,
    port: Annotated[
        int | None, Parameter(help="Port to bind to. Overrides the service config.")
    ] = None,
    log_level: Annotated[
        str | None,
        Parameter(help="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."),
    ] = None,
) -> None:
    """Load the seed document and serve the dashboard API.

    The store lives in memory only: every restart begins from the seed again.
    """
    from benchdash.cli_utils import exit_on_error

    with exit_on_error(title="Error Starting benchdash"):
        import logging

        import uvicorn

        from benchdash.benchmarks.models import validate_entities
        from benchdash.common.config import ServiceConfig, load_service_config
        from benchdash.common.logging import setup_rich_logging
        from benchdash.server import create_app
        from benchdash.store import ResourceStore

        service_config = load_service_config(service_config_file)

        # CLI arguments take precedence over the config file and environment
        overrides = {
            "seed_file": seed_file,
            "host": host,
            "port": port,
            "log_level": log_level,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if overrides:
            service_config = ServiceConfig.model_validate(
                {**service_config.model_dump(), **overrides}
            )

        setup_rich_logging(service_config)
        logger = logging.getLogger(__name__)

        store = ResourceStore.from_seed_file(
            service_config.seed_file,
            service_config.singleton_resources,
            check_refs=service_config.check_references,
        )
        if service_config.check_references:
            for problem in validate_entities(store.snapshot()):
                logger.warning(f"Seed record problem: {problem}")

        logger.info(
            f"Serving {len(store.resources)} resources on "
            f"http://{service_config.host}:{service_config.port}"
        )
        uvicorn.run(
            create_app(store, service_config),
            host=service_config.host,
            port=service_config.port,
            log_config=None,
            log_level=service_config.log_level.lower(),
        )
