# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line entry point for benchdash."""

from cyclopts import App

from benchdash.cli_commands.check_seed import check_seed_app
from benchdash.cli_commands.serve import serve_app

app = App(
    name="benchdash",
    help="Benchmark dashboard data back end: a mock REST store and chart data API.",
)
app.command(serve_app)
app.command(check_seed_app)
