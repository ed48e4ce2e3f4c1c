# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Query parsing and evaluation for collection resources.

Mirrors the mock-REST query contract the dashboard front end was written
against: every non-reserved parameter is an equality filter on a dot path,
``_sort``/``_order`` sort, and ``_page``/``_limit`` paginate. The semantics are
permissive: unknown fields never raise, filters compare string
forms, and unparseable page numbers produce an empty page.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any

__all__ = [
    "MISSING",
    "RESERVED_PARAMS",
    "ListQuery",
    "apply_filters",
    "get_nested_value",
    "paginate",
    "parse_int_prefix",
    "sort_records",
    "to_query_string",
]

RESERVED_PARAMS: frozenset[str] = frozenset({"_sort", "_order", "_page", "_limit"})

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class _Missing:
    """Sentinel for a dot path that does not resolve."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

QueryParams = Mapping[str, Any] | Iterable[tuple[str, Any]]


def get_nested_value(obj: Any, path: str) -> Any:
    """Resolve a dot path such as ``system.vendor`` against nested objects.

    Numeric segments index into lists. Returns MISSING when any segment does
    not resolve.
    """
    current = obj
    for key in path.split("."):
        if isinstance(current, dict) and key in current:
            current = current[key]
        elif isinstance(current, list) and key.isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            return MISSING
    return current


def to_query_string(value: Any) -> str:
    """Render a record value the way it appears in a query string.

    Booleans and null use their JSON spelling and integral floats drop the
    trailing ``.0``, so ``?active=true&chips=8`` matches ``True`` and ``8.0``.
    Arrays join their items with commas (nulls inside become empty) and
    objects render as ``[object Object]``, the way browsers stringify them.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join("" if item is None else to_query_string(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def parse_int_prefix(value: str | None) -> int | None:
    """Parse the leading integer of a string, ignoring trailing junk.

    ``"2"`` and ``"2abc"`` both give 2; ``"abc"`` gives None.
    """
    if value is None:
        return None
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else None


def _iter_params(params: QueryParams) -> Iterable[tuple[str, str]]:
    items = params.items() if isinstance(params, Mapping) else params
    for key, value in items:
        if isinstance(value, list | tuple):
            for item in value:
                yield key, str(item)
        else:
            yield key, str(value)


@dataclass(slots=True)
class ListQuery:
    """A parsed collection query.

    Attributes:
        filters: Ordered (path, value) equality filters. Repeated paths are
            AND-ed together.
        sort: Dot path to sort by, if any
        order: "asc" sorts ascending; any other value sorts descending
        page: Raw 1-based page number
        limit: Raw page size
    """

    filters: list[tuple[str, str]] = field(default_factory=list)
    sort: str | None = None
    order: str = "asc"
    page: str | None = None
    limit: str | None = None

    @classmethod
    def from_params(cls, params: QueryParams) -> ListQuery:
        """Build a query from a mapping or a sequence of (key, value) pairs.

        For reserved parameters the first occurrence wins.
        """
        query = cls()
        reserved: dict[str, str] = {}
        for key, value in _iter_params(params):
            if key in RESERVED_PARAMS:
                reserved.setdefault(key, value)
            else:
                query.filters.append((key, value))

        query.sort = reserved.get("_sort") or None
        query.order = reserved.get("_order") or "asc"
        query.page = reserved.get("_page") or None
        query.limit = reserved.get("_limit") or None
        return query

    @property
    def descending(self) -> bool:
        return self.order != "asc"

    @property
    def paginated(self) -> bool:
        return bool(self.page) and bool(self.limit)


def apply_filters(
    records: list[dict[str, Any]], filters: Iterable[tuple[str, str]]
) -> list[dict[str, Any]]:
    """Keep records whose value at every filter path renders equal to the filter value."""
    result = records
    for path, expected in filters:
        result = [
            record
            for record in result
            if (value := get_nested_value(record, path)) is not MISSING
            and to_query_string(value) == expected
        ]
    return result


def _compare(a: Any, b: Any) -> int:
    # Values that cannot be ordered against each other (missing fields, mixed
    # types) compare equal, which keeps them in their original relative order.
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        return 0
    return 0


def sort_records(
    records: list[dict[str, Any]], path: str, *, descending: bool = False
) -> list[dict[str, Any]]:
    """Stable sort by the raw value at a dot path."""
    sign = -1 if descending else 1

    def compare(x: dict[str, Any], y: dict[str, Any]) -> int:
        a = get_nested_value(x, path)
        b = get_nested_value(y, path)
        if a is MISSING or b is MISSING:
            return 0
        return sign * _compare(a, b)

    return sorted(records, key=cmp_to_key(compare))


def paginate(
    records: list[dict[str, Any]], page: str | None, limit: str | None
) -> list[dict[str, Any]]:
    """Slice out a 1-based page.

    Unparseable page or limit values produce an empty page. Out-of-range
    pages are empty. Page numbers below 1 become negative slice bounds.
    """
    page_num = parse_int_prefix(page)
    limit_num = parse_int_prefix(limit)
    if page_num is None or limit_num is None:
        return []
    start = (page_num - 1) * limit_num
    return records[start : start + limit_num]
