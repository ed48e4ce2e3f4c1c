# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""CLI command for validating a seed document without starting the server."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

check_seed_app = App(name="check-seed")


@check_seed_app.default
def check_seed(
    path: Annotated[Path, Parameter(help="JSON seed document to check.")],
    singleton: Annotated[
        list[str] | None,
        Parameter(
            help="Top-level keys that hold a single object. "
            "Defaults to paretoViewModes and vendorColors."
        ),
    ] = None,
) -> None:
    """Load a seed document, list its resources and report any problems.

    Exits with status 1 when the document cannot be loaded, has the wrong
    shape, or has dangling references or invalid benchmark records.
    """
    import sys

    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    from benchdash.benchmarks.models import validate_entities
    from benchdash.cli_utils import raise_startup_error_and_exit
    from benchdash.common.config import DEFAULT_SINGLETON_RESOURCES
    from benchdash.common.exceptions import SeedLoadError, SeedValidationError
    from benchdash.store import CollectionResource, check_references, load_seed_document

    console = Console()
    singletons = tuple(singleton) if singleton else DEFAULT_SINGLETON_RESOURCES

    try:
        document = load_seed_document(path, singletons)
    except SeedValidationError as e:
        raise_startup_error_and_exit(
            "\n".join(e.problems), title=f"Invalid seed document {path}"
        )
    except SeedLoadError as e:
        raise_startup_error_and_exit(e.message, title="Seed Load Error")

    table = Table(title=f"Resources in {path}")
    table.add_column("Resource", style="cyan")
    table.add_column("Kind")
    table.add_column("Records", justify="right")
    for name, resource in document.resources.items():
        if isinstance(resource, CollectionResource):
            table.add_row(name, "collection", str(len(resource.records)))
        else:
            table.add_row(name, "singleton", "-")
    console.print(table)

    raw = document.to_raw()
    problems = check_references(raw) + validate_entities(raw)
    if problems:
        for problem in problems:
            console.print(f"[yellow]![/yellow] {escape(problem)}")
        console.print(f"[red]{len(problems)} problem(s) found[/red]")
        sys.exit(1)

    console.print("[green]Seed document OK[/green]")
