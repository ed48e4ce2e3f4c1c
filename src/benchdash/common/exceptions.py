# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Exception hierarchy for benchdash.

Request-level errors carry the HTTP status code they map to, so the server's
exception handlers can turn them into structured responses without a lookup
table.
"""

from __future__ import annotations

__all__ = [
    "BenchDashError",
    "FilterValidationError",
    "MalformedInputError",
    "ResourceNotFoundError",
    "SeedLoadError",
    "SeedValidationError",
    "SingletonResourceError",
    "UnknownResourceError",
]


class BenchDashError(Exception):
    """Base class for all benchdash errors."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UnknownResourceError(BenchDashError):
    """The resource name is not one of the seed document's top-level keys."""

    status_code = 400

    def __init__(self, resource: str) -> None:
        super().__init__(f"Unknown resource: {resource}")
        self.resource = resource


class SingletonResourceError(BenchDashError):
    """A mutation or id-addressed access was attempted on a singleton resource."""

    status_code = 405

    def __init__(
        self, resource: str, action: str, *, status_code: int | None = None
    ) -> None:
        super().__init__(
            f"Cannot {action} singleton resource: {resource}", status_code=status_code
        )
        self.resource = resource
        self.action = action

    @classmethod
    def for_id_access(cls, resource: str) -> SingletonResourceError:
        """Singletons have no records, so addressing one by id is a bad request."""
        error = cls(resource, "access", status_code=400)
        error.message = f"Cannot access singleton by id: {resource}"
        error.args = (error.message,)
        return error


class ResourceNotFoundError(BenchDashError):
    """The resource is valid but no record has the requested id."""

    status_code = 404

    def __init__(self, resource: str, record_id: str) -> None:
        super().__init__("Not found")
        self.resource = resource
        self.record_id = record_id


class MalformedInputError(BenchDashError):
    """The request body or a query parameter cannot be interpreted."""

    status_code = 400


class FilterValidationError(BenchDashError):
    """One or more benchmark filter parameters failed validation.

    Attributes:
        issues: Every violated field as ``{"path": ..., "message": ...}``
    """

    status_code = 400

    def __init__(self, issues: list[dict[str, str]]) -> None:
        super().__init__("Invalid filter parameters")
        self.issues = issues

    def summary(self) -> str:
        return ", ".join(f"{i['path']}: {i['message']}" for i in self.issues)


class SeedLoadError(BenchDashError):
    """The seed document could not be read or parsed."""


class SeedValidationError(SeedLoadError):
    """The seed document parsed but does not have the declared shape."""

    def __init__(self, problems: list[str]) -> None:
        super().__init__(
            f"Seed document failed validation with {len(problems)} problem(s): "
            + "; ".join(problems)
        )
        self.problems = problems
