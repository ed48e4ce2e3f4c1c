# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Helpers shared by the CLI commands."""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NoReturn

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def raise_startup_error_and_exit(message: str, title: str = "Error") -> NoReturn:
    """Print a startup error in a red panel and exit with status 1."""
    console.print(Panel(escape(message), title=title, border_style="red", title_align="left"))
    sys.exit(1)


@contextmanager
def exit_on_error(title: str = "Error") -> Iterator[None]:
    """Turn any exception escaping the block into a printed error and exit code 1.

    ``SystemExit`` and ``KeyboardInterrupt`` pass through untouched.
    """
    try:
        yield
    except (SystemExit, KeyboardInterrupt):
        raise
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        raise_startup_error_and_exit(str(e) or type(e).__name__, title=title)
