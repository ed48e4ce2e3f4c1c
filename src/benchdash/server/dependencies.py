# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from typing import Any

import orjson
from fastapi import Request

from benchdash.common.exceptions import MalformedInputError
from benchdash.store import ResourceStore


def get_store(request: Request) -> ResourceStore:
    """Return the store the app was created with."""
    return request.app.state.store


async def read_json_object(request: Request) -> dict[str, Any]:
    """Parse the request body as a JSON object.

    Raises:
        MalformedInputError: If the body is not JSON or not an object.
    """
    try:
        body = orjson.loads(await request.body())
    except orjson.JSONDecodeError as e:
        raise MalformedInputError("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise MalformedInputError("Invalid JSON body")
    return body
