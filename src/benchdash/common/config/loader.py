# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Configuration loader for benchdash."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import orjson
from pydantic import ValidationError
from ruamel.yaml import YAML

if TYPE_CHECKING:
    from benchdash.common.config.service_config import ServiceConfig


def _load_config_file(path: Path) -> dict[str, Any]:
    """Load a configuration file (JSON or YAML) and return its contents as a dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, "rb") as f:
            data = orjson.loads(f.read())
    elif suffix in (".yaml", ".yml"):
        yaml = YAML(pure=True)
        with open(path) as f:
            data = yaml.load(f)
    else:
        raise ValueError(
            f"Unsupported config file format: {suffix}. Use .json, .yaml, or .yml"
        )

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping/object: {path}")

    return data


def _resolve_seed_file(data: dict[str, Any], config_path: Path) -> None:
    """Make a relative ``seed_file`` relative to the config file, not the CWD."""
    seed_file = data.get("seed_file")
    if isinstance(seed_file, str) and seed_file and not Path(seed_file).is_absolute():
        data["seed_file"] = config_path.parent / seed_file


def _format_validation_error(config_path: Path, error: ValidationError) -> str:
    lines = [f"Invalid service config {config_path}:"]
    for detail in error.errors():
        loc = ".".join(str(part) for part in detail["loc"]) or "<root>"
        lines.append(f"  {loc}: {detail['msg']}")
    return "\n".join(lines)


def load_service_config(path: Path | None = None) -> ServiceConfig:
    """Load the service configuration from a file or environment variable.

    The configuration file path is resolved in this order:
    1. Explicit path argument (if provided)
    2. BENCHDASH_CONFIG_SERVICE_FILE environment variable
    3. Default ServiceConfig() if neither is set

    A relative ``seed_file`` in the file is taken relative to the file's own
    directory, so a config and its seed document can move together.

    Args:
        path: Optional explicit path to the service config file.

    Returns:
        ServiceConfig instance.

    Raises:
        ValueError: If the file has unknown keys or invalid values, naming each one.
        FileNotFoundError: If the file does not exist.
    """
    from benchdash.common.config.service_config import ServiceConfig
    from benchdash.common.environment import Environment

    config_path = path or Environment.CONFIG.SERVICE_FILE
    if config_path is None:
        return ServiceConfig()

    config_path = Path(config_path)
    data = _load_config_file(config_path)

    unknown = sorted((str(key) for key in data if key not in ServiceConfig.model_fields))
    if unknown:
        raise ValueError(
            f"Unknown key(s) in service config {config_path}: {', '.join(unknown)}. "
            f"Valid keys are: {', '.join(ServiceConfig.model_fields)}"
        )

    _resolve_seed_file(data, config_path)
    try:
        return ServiceConfig(**data)
    except ValidationError as e:
        raise ValueError(_format_validation_error(config_path, e)) from e
