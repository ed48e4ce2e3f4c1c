# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Helpers for reading loosely typed records.

Records come straight from the seed document or from request bodies, so any
field may hold any JSON value. These helpers never raise on unexpected types.
"""

import math
from collections.abc import Iterable
from typing import Any


def as_number(value: Any) -> float | None:
    """Return value as a finite float, or None when it is not numeric.

    Numeric strings such as ``"16"`` count as numbers. Booleans do not.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def missing_last(value: Any, *, descending: bool = False) -> tuple[bool, float]:
    """Sort key that puts missing and non-numeric values last in either direction."""
    number = as_number(value)
    if number is None:
        return (True, 0.0)
    return (False, -number if descending else number)


def is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def index_by(records: Iterable[Any], key: str) -> dict[Any, dict[str, Any]]:
    """Map each record's ``key`` value to the record; the last duplicate wins.

    Non-object records and unhashable key values are left out, so lookups for
    them resolve to nothing.
    """
    return {
        record.get(key): record
        for record in records
        if isinstance(record, dict) and is_hashable(record.get(key))
    }


def lookup(index: dict[Any, Any], key: Any) -> Any:
    """``index.get(key)`` that treats an unhashable key as unresolved."""
    return index.get(key) if is_hashable(key) else None
